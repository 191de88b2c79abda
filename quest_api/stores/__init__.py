"""Store interfaces and backends for the task board."""

from quest_api.stores.base import CompletionStore, QuestStore, TaskCatalogStore
from quest_api.stores.memory import (
    InMemoryCompletionStore,
    InMemoryQuestStore,
    InMemoryTaskCatalogStore,
)
from quest_api.stores.sql import SqlCompletionStore, SqlQuestStore, SqlTaskCatalogStore

__all__ = [
    "CompletionStore",
    "InMemoryCompletionStore",
    "InMemoryQuestStore",
    "InMemoryTaskCatalogStore",
    "QuestStore",
    "SqlCompletionStore",
    "SqlQuestStore",
    "SqlTaskCatalogStore",
    "TaskCatalogStore",
]
