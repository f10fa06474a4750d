"""
➡️ But : Contenir la logique métier : valider, appeler le repository, regrouper les résultats.

TaskService :
- valide priorité / statut / échéance AVANT tout accès à la base ;
- lève TaskValidationError (400) ou LookupError (404) ;
- laisse remonter les erreurs SQLAlchemy (500, gérées par la route).

Aucune machine à états : n'importe quel statut autorisé peut remplacer n'importe quel autre.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI (horloge injectée).
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Dict, List, Sequence

from taskboard.db.models.tasks import Task
from taskboard.db.repositories.tasks import TaskRepository
from taskboard.features.tasks.constants import BOARD_BUCKETS, DEFAULT_STATUS, HISTORY_STATUS
from taskboard.features.tasks.schemas import TaskCreateIn, TaskUpdateIn, TasksByStatusOut, TaskOut
from taskboard.features.tasks.validators import (
    to_local_naive,
    validate_due_datetime,
    validate_priority,
    validate_status_update,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def group_by_status(tasks: Sequence[Task]) -> Dict[str, List[Task]]:
    """Répartit dans les trois colonnes du tableau ; les autres statuts sont ignorés."""
    grouped: Dict[str, List[Task]] = {key: [] for key in BOARD_BUCKETS}
    for task in tasks:
        bucket = grouped.get(task.status)
        if bucket is not None:
            bucket.append(task)
    return grouped


class TaskService:
    def __init__(self, repo: TaskRepository, clock: Clock = datetime.now):
        self.repo = repo
        self.clock = clock

    # -------- Reads --------

    def count_due_today(self) -> int:
        return self.repo.count_due_today(self.clock())

    def list_due_today(self) -> Sequence[Task]:
        return self.repo.list_due_today(self.clock())

    def list_by_status(self) -> TasksByStatusOut:
        grouped = group_by_status(self.repo.list_ordered_by_status())
        return TasksByStatusOut(
            **{key: [TaskOut.model_validate(t) for t in rows] for key, rows in grouped.items()}
        )

    def history(self) -> Sequence[Task]:
        return self.repo.list_by_status(HISTORY_STATUS)

    # -------- Writes --------

    def create(self, payload: TaskCreateIn) -> Task:
        priority = validate_priority(payload.priority)
        due = validate_due_datetime(payload.due_date, payload.due_time, now=self.clock())
        task = self.repo.create(
            task_name=payload.task_name,
            category=payload.category,
            due_date=due,
            priority=priority,
            status=DEFAULT_STATUS,
        )
        logger.info("Task %s created (due %s, priority %r)", task.id, due.isoformat(sep=" "), priority)
        return task

    def update(self, task_id: int, payload: TaskUpdateIn) -> None:
        """Écrase tous les champs. Pas de contrôle d'existence : un id inconnu ne modifie rien."""
        matched = self.repo.overwrite(
            task_id,
            task_name=payload.task_name,
            category=payload.category,
            due_date=to_local_naive(payload.due_date) if payload.due_date else None,
            status=payload.status,
            priority=payload.priority,
        )
        if not matched:
            logger.debug("Update on unknown task %s matched no row", task_id)

    def update_status(self, task_id: int, status: str | None) -> None:
        status = validate_status_update(status)
        if not self.repo.set_status(task_id, status):
            raise LookupError("Task not found")
        logger.info("Task %s status set to %r", task_id, status)
