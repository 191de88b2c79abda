from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import ValidationError

from quest_api.core.errors import RecordProjectionSkipped
from quest_api.schemas.task_schema import UserTask
from quest_api.services.task_aggregation import AggregatedTaskView

logger = logging.getLogger(__name__)

# Task attributes copied to the public shape; `completed` is derived
PUBLIC_TASK_FIELDS = (
    "id",
    "quest_id",
    "name",
    "href",
    "cta",
    "verify_endpoint",
    "verify_endpoint_type",
    "verify_redirect",
    "desc",
    "quiz_name",
    "calls",
    "contracts",
    "api_url",
    "regex",
)


def project(view: AggregatedTaskView) -> UserTask:
    """Map one aggregated view to the public task. Unset attributes stay unset."""
    data = {}
    for field in PUBLIC_TASK_FIELDS:
        value = getattr(view.task, field, None)
        if value is not None:
            data[field] = value
    data["completed"] = view.completed

    try:
        return UserTask.model_validate(data)
    except ValidationError as e:
        bad = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise RecordProjectionSkipped(data.get("id"), f"invalid or missing: {bad}") from e


def project_all(views: Iterable[AggregatedTaskView]) -> list[UserTask]:
    out: list[UserTask] = []
    skipped = 0
    for view in views:
        try:
            out.append(project(view))
        except RecordProjectionSkipped as e:
            skipped += 1
            logger.warning("skipping task in response: %s", e)
    if skipped:
        logger.warning("%d of %d tasks skipped in response", skipped, skipped + len(out))
    return out
