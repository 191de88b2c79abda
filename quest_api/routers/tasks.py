# routers/tasks.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from quest_api.core.errors import InvalidAddress, NoMatch, StoreUnavailable
from quest_api.database import get_db
from quest_api.schemas.task_schema import TaskListError, UserTask
from quest_api.services.task_aggregation import TaskAggregator
from quest_api.services.task_list import get_tasks
from quest_api.stores.sql import SqlCompletionStore, SqlQuestStore, SqlTaskCatalogStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Tasks"])


def get_task_aggregator(db: Session = Depends(get_db)) -> TaskAggregator:
    return TaskAggregator(
        catalog=SqlTaskCatalogStore(db),
        completions=SqlCompletionStore(db),
        quests=SqlQuestStore(db),
    )


@router.get(
    "/get_tasks",
    response_model=List[UserTask],
    response_model_exclude_unset=True,
    responses={
        400: {"model": TaskListError},
        404: {"model": TaskListError},
        503: {"model": TaskListError},
    },
)
def list_tasks(
    quest_id: int = Query(...),
    addr: str = Query(..., description="Account address, hex (0x...) or decimal"),
    aggregator: TaskAggregator = Depends(get_task_aggregator),
):
    try:
        return get_tasks(aggregator, quest_id, addr)
    except InvalidAddress:
        raise HTTPException(status_code=400, detail="Invalid address")
    except NoMatch:
        raise HTTPException(status_code=404, detail="No tasks found for this quest_id")
    except StoreUnavailable as e:
        logger.error("get_tasks quest_id=%s failed: %s", quest_id, e)
        raise HTTPException(status_code=503, detail="Error querying tasks")
