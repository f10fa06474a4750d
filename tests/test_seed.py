# tests/test_seed.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from sqlmodel import Session, select

from taskboard.core.config import Settings
from taskboard.db.models.tasks import Task
from taskboard.db.seed import load_seed_yaml, seed_all, seed_tasks
from taskboard.db.session import build_engine, init_db

NOW = datetime(2026, 3, 10, 12, 0, 0)


@pytest.fixture()
def db_session():
    engine = build_engine(Settings(ENV="test", DATABASE_URL="sqlite://"))
    init_db(engine)
    with Session(engine) as s:
        yield s
    engine.dispose()


def test_seed_tasks_resolves_relative_and_absolute_dates(db_session: Session) -> None:
    data = {
        "tasks": [
            {"task_name": "today", "priority": "urgent", "due_in_days": 0, "due_time": "18:00:00"},
            {"task_name": "in two days", "priority": "important", "due_in_days": 2},
            {"task_name": "fixed", "priority": "urgent", "status": "termine", "due_date": "2024-06-01 18:00:00"},
        ]
    }
    assert seed_tasks(db_session, data, clock=lambda: NOW) == 3

    rows = {t.task_name: t for t in db_session.exec(select(Task)).all()}
    assert rows["today"].due_date == datetime(2026, 3, 10, 18, 0)
    assert rows["today"].status == "pas commencé"
    assert rows["in two days"].due_date == datetime(2026, 3, 12, 23, 59, 59)
    assert rows["fixed"].due_date == datetime(2024, 6, 1, 18, 0)
    assert rows["fixed"].status == "termine"


def test_seed_is_skipped_when_table_not_empty(db_session: Session) -> None:
    data = {"tasks": [{"task_name": "once", "due_in_days": 1}]}
    assert seed_tasks(db_session, data, clock=lambda: NOW) == 1
    assert seed_tasks(db_session, data, clock=lambda: NOW) == 0
    assert len(db_session.exec(select(Task)).all()) == 1


def test_bundled_seed_file_loads(db_session: Session) -> None:
    seed_path = Path(__file__).resolve().parents[1] / "taskboard" / "db" / "seed_data.yaml"
    inserted = seed_all(db_session, seed_path)
    assert inserted == len(load_seed_yaml(seed_path)["tasks"])
    assert inserted > 0


def test_load_seed_yaml_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "seed.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_seed_yaml(path)


def test_load_seed_yaml_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_seed_yaml(tmp_path / "absent.yaml")
