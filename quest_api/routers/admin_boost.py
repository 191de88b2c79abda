# routers/admin_boost.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from quest_api.auth.token import get_current_admin
from quest_api.database import get_db
from quest_api.models.boost import Boost, BoostQuest
from quest_api.schemas.boost_schema import BoostUpdate, BoostUpdateOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/quest_boost", tags=["Admin Boosts"])


@router.post("/update_boost", response_model=BoostUpdateOut)
def update_boost(
    body: BoostUpdate,
    db: Session = Depends(get_db),
    admin: str = Depends(get_current_admin),
):
    # 1. Find the boost attached to the quest
    try:
        boost = (
            db.query(Boost)
            .join(Boost.quest_links)
            .filter(BoostQuest.quest_id == body.quest_id)
            .first()
        )
    except SQLAlchemyError:
        logger.exception("boost lookup failed quest_id=%s", body.quest_id)
        raise HTTPException(status_code=503, detail="Error updating boost")
    if not boost:
        raise HTTPException(status_code=404, detail="Boost not found")

    # 2. Only touch supplied fields
    changes = body.changes()
    null_fields = [key for key, value in changes.items() if value is None]
    if null_fields:
        raise HTTPException(status_code=400, detail=f"These fields cannot be null: {', '.join(null_fields)}")

    for key, value in changes.items():
        setattr(boost, key, value)

    # 3. Persist
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("boost update failed boost_id=%s", boost.id)
        raise HTTPException(status_code=503, detail="Error updating boost")

    logger.info("boost %s updated by %s: %s", boost.id, admin, sorted(changes))
    return {"message": "updated successfully"}
