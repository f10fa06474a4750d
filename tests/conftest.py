# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterator, List

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlmodel import Session, select

from taskboard.api.dependencies import get_clock
from taskboard.core.config import Settings
from taskboard.db.models.tasks import Task
from taskboard.main import create_app

# Heure figée pour tous les tests : mardi 10 mars 2026, midi.
NOW = datetime(2026, 3, 10, 12, 0, 0)


def fixed_clock() -> datetime:
    return NOW


@pytest.fixture()
def settings() -> Settings:
    """In-memory SQLite: a fresh database per app instance."""
    return Settings(
        ENV="test",
        DATABASE_URL="sqlite://",
        LOG_LEVEL="WARNING",
        LOG_DIR=None,
    )


@pytest.fixture()
def app(settings: Settings) -> FastAPI:
    app = create_app(settings)
    app.dependency_overrides[get_clock] = lambda: fixed_clock
    return app


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    # context manager -> lifespan runs (engine + tables)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def add_task(client: TestClient) -> Callable[..., Task]:
    """Insert a row directly, bypassing the API validation."""

    def _add(**fields) -> Task:
        fields.setdefault("task_name", "tâche")
        fields.setdefault("category", "test")
        with Session(client.app.state.engine) as s:
            task = Task(**fields)
            s.add(task)
            s.commit()
            s.refresh(task)
        return task

    return _add


@pytest.fixture()
def fetch_tasks(client: TestClient) -> Callable[[], List[Task]]:
    """Read the table as it is now (fresh session each call)."""

    def _fetch() -> List[Task]:
        with Session(client.app.state.engine) as s:
            return list(s.exec(select(Task).order_by(Task.id)).all())

    return _fetch
