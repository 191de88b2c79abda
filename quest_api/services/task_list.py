from __future__ import annotations

from quest_api.core.errors import NoMatch
from quest_api.schemas.task_schema import UserTask
from quest_api.services.task_aggregation import TaskAggregator
from quest_api.services.task_projection import project_all


def get_tasks(aggregator: TaskAggregator, quest_id: int, address) -> list[UserTask]:
    """Visible tasks for a user, or NoMatch when there is nothing to show."""
    tasks = project_all(aggregator.aggregate(quest_id, address))
    if not tasks:
        raise NoMatch(quest_id)
    return tasks
