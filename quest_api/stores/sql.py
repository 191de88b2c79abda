"""SQLAlchemy-backed stores bound to a request-scoped session."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from quest_api.core.errors import StoreUnavailable
from quest_api.models.completed_task import CompletedTask
from quest_api.models.quests import Quest
from quest_api.models.task import Task

logger = logging.getLogger(__name__)


class SqlTaskCatalogStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find(self, quest_id: int) -> list[Task]:
        try:
            return (
                self.db.query(Task)
                .filter(Task.quest_id == quest_id)
                .order_by(Task.row_id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("task catalog read failed quest_id=%s", quest_id)
            raise StoreUnavailable("tasks") from e


class SqlCompletionStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def exists(self, task_id: int, address: str) -> bool:
        try:
            return (
                self.db.query(CompletedTask.row_id)
                .filter_by(task_id=task_id, address=address)
                .first()
                is not None
            )
        except SQLAlchemyError as e:
            logger.exception("completion read failed task_id=%s", task_id)
            raise StoreUnavailable("completed_tasks") from e

    def completed_task_ids(self, task_ids: Iterable[int], address: str) -> set[int]:
        ids = list(task_ids)
        if not ids:
            return set()
        try:
            rows = (
                self.db.query(CompletedTask.task_id)
                .filter(CompletedTask.task_id.in_(ids), CompletedTask.address == address)
                .distinct()
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("completion read failed for %d tasks", len(ids))
            raise StoreUnavailable("completed_tasks") from e
        return {row.task_id for row in rows}


class SqlQuestStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find(self, quest_id: int) -> Quest | None:
        try:
            return self.db.query(Quest).filter(Quest.id == quest_id).first()
        except SQLAlchemyError as e:
            logger.exception("quest read failed quest_id=%s", quest_id)
            raise StoreUnavailable("quests") from e
