from pydantic import BaseModel, Field
from typing import Optional


class BoostUpdate(BaseModel):
    """Only fields present in the request body are written."""

    quest_id: int
    amount: Optional[int] = None
    token: Optional[str] = None
    num_of_winners: Optional[int] = None
    token_decimals: Optional[int] = None
    expiry: Optional[int] = None
    name: Optional[str] = None
    img_url: Optional[str] = None
    remove_boost: Optional[bool] = None  # accepted for client compatibility, not applied

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude={"quest_id", "remove_boost"})


class BoostUpdateOut(BaseModel):
    message: str = Field(..., examples=["updated successfully"])
