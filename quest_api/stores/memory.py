"""In-memory stores for tests and local fixtures."""

from __future__ import annotations

from collections.abc import Iterable

from quest_api.core.errors import StoreUnavailable
from quest_api.models.quests import Quest
from quest_api.models.task import Task


class _FaultInjectable:
    name = "memory"

    def __init__(self) -> None:
        self.fail = False
        self.calls = 0

    def _read(self) -> None:
        self.calls += 1
        if self.fail:
            raise StoreUnavailable(self.name, "injected failure")


class InMemoryTaskCatalogStore(_FaultInjectable):
    """Keeps tasks in insertion order, which stands in for row order."""

    name = "tasks"

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        super().__init__()
        self._tasks: list[Task] = list(tasks)

    def add(self, task: Task) -> Task:
        self._tasks.append(task)
        return task

    def find(self, quest_id: int) -> list[Task]:
        self._read()
        return [t for t in self._tasks if t.quest_id == quest_id]


class InMemoryCompletionStore(_FaultInjectable):
    name = "completed_tasks"

    def __init__(self, records: Iterable[tuple[int, str]] = ()) -> None:
        super().__init__()
        self._records: set[tuple[int, str]] = set(records)

    def add(self, task_id: int, address: str) -> None:
        self._records.add((task_id, address))

    def exists(self, task_id: int, address: str) -> bool:
        self._read()
        return (task_id, address) in self._records

    def completed_task_ids(self, task_ids: Iterable[int], address: str) -> set[int]:
        self._read()
        return {tid for tid in task_ids if (tid, address) in self._records}


class InMemoryQuestStore(_FaultInjectable):
    name = "quests"

    def __init__(self, quests: Iterable[Quest] = ()) -> None:
        super().__init__()
        self._quests: dict[int, Quest] = {q.id: q for q in quests}

    def add(self, quest: Quest) -> Quest:
        self._quests[quest.id] = quest
        return quest

    def find(self, quest_id: int) -> Quest | None:
        self._read()
        return self._quests.get(quest_id)
