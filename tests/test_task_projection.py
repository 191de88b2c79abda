import logging

import pytest

from quest_api.core.errors import NoMatch, RecordProjectionSkipped
from quest_api.services.task_aggregation import AggregatedTaskView, TaskAggregator
from quest_api.services.task_list import get_tasks
from quest_api.services.task_projection import project, project_all
from quest_api.stores.memory import (
    InMemoryCompletionStore,
    InMemoryQuestStore,
    InMemoryTaskCatalogStore,
)

from .conftest import ADDR, make_quest, make_task


def view(task, completed=False):
    return AggregatedTaskView(task=task, completed=completed, sort_order=2)


def test_project_drops_internal_fields_and_omits_unset_optionals() -> None:
    task = make_task(1, row_id=77, overwrite_order=3)

    out = project(view(task, completed=True))
    payload = out.model_dump(exclude_unset=True)

    assert payload["id"] == 1
    assert payload["completed"] is True
    assert "row_id" not in payload
    assert "overwrite_order" not in payload
    for optional in ("verify_redirect", "quiz_name", "calls", "contracts", "api_url", "regex"):
        assert optional not in payload


def test_project_passes_optional_fields_through() -> None:
    task = make_task(
        2,
        endpoint_type="quiz",
        quiz_name=5,
        calls=["approve", "mint"],
        contracts=["0x1", "0x2"],
        api_url="https://api.example.com/check",
        regex="^ok$",
        verify_redirect="https://example.com/done",
    )

    payload = project(view(task)).model_dump(exclude_unset=True)

    assert payload["quiz_name"] == 5
    assert payload["calls"] == ["approve", "mint"]
    assert payload["contracts"] == ["0x1", "0x2"]
    assert payload["api_url"] == "https://api.example.com/check"
    assert payload["regex"] == "^ok$"
    assert payload["verify_redirect"] == "https://example.com/done"
    assert payload["completed"] is False


def test_project_rejects_missing_required_field() -> None:
    with pytest.raises(RecordProjectionSkipped) as exc:
        project(view(make_task(3, name=None)))

    assert exc.value.task_id == 3
    assert "name" in exc.value.reason


def test_project_all_skips_bad_records_and_keeps_the_rest(caplog) -> None:
    views = [
        view(make_task(1)),
        view(make_task(2, href=None)),
        view(make_task(3, calls="not-a-list")),
        view(make_task(4)),
    ]

    with caplog.at_level(logging.WARNING, logger="quest_api.services.task_projection"):
        out = project_all(views)

    assert [t.id for t in out] == [1, 4]
    assert "skipping task" in caplog.text
    assert "2 of 4 tasks skipped in response" in caplog.text


def _aggregator(tasks, quests):
    return TaskAggregator(
        InMemoryTaskCatalogStore(tasks),
        InMemoryCompletionStore(),
        InMemoryQuestStore(quests),
    )


def test_get_tasks_raises_no_match_when_nothing_visible() -> None:
    aggregator = _aggregator([make_task(1, quest_id=2)], [make_quest(2, disabled=True)])

    with pytest.raises(NoMatch):
        get_tasks(aggregator, 2, ADDR)


def test_get_tasks_raises_no_match_when_every_record_is_unprojectable() -> None:
    aggregator = _aggregator([make_task(1, desc=None)], [make_quest(1)])

    with pytest.raises(NoMatch):
        get_tasks(aggregator, 1, ADDR)


def test_get_tasks_returns_projected_tasks() -> None:
    aggregator = _aggregator([make_task(1), make_task(2, endpoint_type="quiz")], [make_quest(1)])

    tasks = get_tasks(aggregator, 1, ADDR)

    assert [t.id for t in tasks] == [2, 1]


def test_project_all_logs_nothing_when_every_record_projects(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="quest_api.services.task_projection"):
        out = project_all([view(make_task(1)), view(make_task(2))])

    assert len(out) == 2
    assert "skipped" not in caplog.text
