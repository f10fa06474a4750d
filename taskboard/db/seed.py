import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml
from sqlmodel import Session, select

from taskboard.db.models.tasks import Task
from taskboard.features.tasks.constants import DEFAULT_STATUS, END_OF_DAY

logger = logging.getLogger(__name__)


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Helpers
# -----------------------------
def _resolve_due_date(item: Dict[str, Any], now: datetime) -> Optional[datetime]:
    """
    due_date: "YYYY-MM-DD HH:MM:SS" (date absolue)
    ou due_in_days: N (+ due_time optionnel) relatif à aujourd'hui, pratique pour une démo.
    """
    if "due_in_days" in item:
        day = (now + timedelta(days=int(item["due_in_days"]))).date()
        time_part = str(item.get("due_time") or END_OF_DAY)
        return datetime.fromisoformat(f"{day.isoformat()} {time_part}")
    raw = item.get("due_date")
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw
    return datetime.fromisoformat(str(raw))


# -----------------------------
# Seed Tasks
# -----------------------------
def seed_tasks(
    session: Session,
    data: Dict[str, Any],
    *,
    clock: Callable[[], datetime] = datetime.now,
) -> int:
    """Insère les tâches du YAML (clé 'tasks') si la table est vide. Retourne le nombre inséré."""
    if session.exec(select(Task)).first():
        logger.info("Les tâches existent déjà, aucune insertion effectuée.")
        return 0

    tasks: List[Dict[str, Any]] = data.get("tasks") or []
    if not tasks:
        logger.warning("Aucune tâche dans le YAML (clé 'tasks').")
        return 0

    now = clock()
    session.add_all([
        Task(
            task_name=t.get("task_name"),
            category=t.get("category"),
            due_date=_resolve_due_date(t, now),
            priority=t.get("priority"),
            status=t.get("status", DEFAULT_STATUS),
        )
        for t in tasks
    ])
    session.commit()
    logger.info("%d tâches insérées.", len(tasks))
    return len(tasks)


def seed_all(session: Session, seed_path: str | Path) -> int:
    data = load_seed_yaml(seed_path)
    return seed_tasks(session, data)
