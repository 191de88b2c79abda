"""Domain errors raised by the task board and translated to HTTP at the routers."""


class QuestApiError(Exception):
    """Base class for errors raised by quest_api services."""


class StoreUnavailable(QuestApiError):
    """A store read or write failed at the transport / I/O level. Retryable."""

    def __init__(self, store: str, message: str = "store unavailable"):
        self.store = store
        super().__init__(f"{store}: {message}")


class NoMatch(QuestApiError):
    """Aggregation completed but nothing is left to show."""

    def __init__(self, quest_id: int):
        self.quest_id = quest_id
        super().__init__(f"No tasks found for quest_id={quest_id}")


class RecordProjectionSkipped(QuestApiError):
    """A single aggregated record could not be projected to the public shape."""

    def __init__(self, task_id, reason: str):
        self.task_id = task_id
        self.reason = reason
        super().__init__(f"task {task_id!r} skipped: {reason}")


class InvalidAddress(QuestApiError, ValueError):
    """The supplied account address is not a valid field element."""
