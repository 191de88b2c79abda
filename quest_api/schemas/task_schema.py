from pydantic import BaseModel, Field
from typing import List, Optional


# PUBLIC TASK SCHEMA (GET /get_tasks)
class UserTask(BaseModel):
    id: int
    quest_id: int
    name: str
    href: str
    cta: str
    verify_endpoint: str
    verify_endpoint_type: str
    verify_redirect: Optional[str] = None
    desc: str
    completed: bool
    quiz_name: Optional[int] = None
    calls: Optional[List[str]] = None
    contracts: Optional[List[str]] = None
    api_url: Optional[str] = None
    regex: Optional[str] = None

    model_config = {"extra": "ignore"}


class TaskListError(BaseModel):
    detail: str = Field(..., examples=["No tasks found for this quest_id"])
