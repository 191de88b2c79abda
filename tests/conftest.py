# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from quest_api.database import Base, get_db
from quest_api.main import app
from quest_api.models import Quest, Task

ADDR_HEX = "0x0abc"
ADDR = "2748"  # decimal form of ADDR_HEX


def make_task(task_id: int, quest_id: int = 1, endpoint_type: str = "default", **overrides) -> Task:
    fields = dict(
        id=task_id,
        quest_id=quest_id,
        name=f"Task {task_id}",
        href=f"https://example.com/tasks/{task_id}",
        cta="Go",
        verify_endpoint=f"quests/verify/{task_id}",
        verify_endpoint_type=endpoint_type,
        desc=f"Description {task_id}",
    )
    fields.update(overrides)
    return Task(**fields)


def make_quest(quest_id: int = 1, disabled: bool = False) -> Quest:
    return Quest(id=quest_id, name=f"Quest {quest_id}", disabled=disabled)


@pytest.fixture()
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(db_engine) -> Iterator[Session]:
    session = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db_engine) -> Iterator[TestClient]:
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _get_test_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
