"""
Joins the task catalog with completion records and quest visibility for one
(quest, address) pair and orders the result for display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from quest_api.models.task import Task
from quest_api.stores.base import CompletionStore, QuestStore, TaskCatalogStore
from quest_api.utils.address import normalize_address

logger = logging.getLogger(__name__)

# Lower sorts first; unknown endpoint types fall back to DEFAULT_PRIORITY
ENDPOINT_TYPE_PRIORITY = {
    "quiz": 1,
    "default": 2,
}
DEFAULT_PRIORITY = 3


@dataclass(frozen=True)
class AggregatedTaskView:
    task: Task
    completed: bool
    sort_order: int


def endpoint_priority(verify_endpoint_type: str | None) -> int:
    return ENDPOINT_TYPE_PRIORITY.get(verify_endpoint_type, DEFAULT_PRIORITY)


def display_key(view: AggregatedTaskView) -> tuple:
    """
    Endpoint priority first, then overwrite_order ascending with unset values
    after set ones. Equal keys keep catalog order (list.sort is stable).
    """
    overwrite = view.task.overwrite_order
    return (view.sort_order, overwrite is None, overwrite if overwrite is not None else 0)


class TaskAggregator:
    def __init__(
        self,
        catalog: TaskCatalogStore,
        completions: CompletionStore,
        quests: QuestStore,
    ) -> None:
        self.catalog = catalog
        self.completions = completions
        self.quests = quests

    def aggregate(self, quest_id: int, address) -> list[AggregatedTaskView]:
        """
        Ordered task views for `quest_id` as seen by `address`.

        An empty list means nothing is visible. Store failures propagate as
        StoreUnavailable and never yield a partial list.
        """
        addr = normalize_address(address)

        tasks = [t for t in self.catalog.find(quest_id) if t.quest_id == quest_id]
        if not tasks:
            logger.debug("aggregate quest_id=%s: no tasks in catalog", quest_id)
            return []

        quest = self.quests.find(quest_id)
        if quest is None:
            logger.info("aggregate quest_id=%s: %d tasks without a parent quest", quest_id, len(tasks))
            return []
        if quest.disabled:
            logger.debug("aggregate quest_id=%s: quest disabled", quest_id)
            return []

        done = self.completions.completed_task_ids([t.id for t in tasks], addr)

        views = [
            AggregatedTaskView(
                task=t,
                completed=t.id in done,
                sort_order=endpoint_priority(t.verify_endpoint_type),
            )
            for t in tasks
        ]
        views.sort(key=display_key)

        logger.debug(
            "aggregate quest_id=%s addr=%s: %d tasks, %d completed",
            quest_id, addr, len(views), sum(v.completed for v in views),
        )
        return views
