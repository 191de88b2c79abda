"""Read interfaces the task aggregation depends on."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from quest_api.models.quests import Quest
from quest_api.models.task import Task


class TaskCatalogStore(Protocol):
    def find(self, quest_id: int) -> list[Task]: ...


class CompletionStore(Protocol):
    def exists(self, task_id: int, address: str) -> bool: ...

    def completed_task_ids(self, task_ids: Iterable[int], address: str) -> set[int]: ...


class QuestStore(Protocol):
    def find(self, quest_id: int) -> Quest | None: ...
