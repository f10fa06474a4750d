"""
➡️ But : Encapsuler toutes les opérations de base de données.

TaskRepository : une requête paramétrée par besoin (tâches du jour, tableau par statut,
historique, mises à jour) sur la table tasks.

Ne contient aucune logique métier, juste de la persistance.

🔹 Avantages :

Réutilisable (les services n’ont pas à savoir comment la DB fonctionne).

Testable indépendamment (mock du repo sans base réelle).
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, Sequence

from sqlalchemy import case, update
from sqlmodel import select, func

from taskboard.db.repositories.base import BaseRepository
from taskboard.db.models.base import utcnow
from taskboard.db.models.tasks import Task
from taskboard.features.tasks.constants import BOARD_BUCKETS, OPEN_STATUSES, PRIORITY_ORDER


def _rank(column, values: Sequence[str]):
    """Équivalent de FIELD(col, v1, v2, ...) : 1..n selon la position, 0 si absent."""
    return case({v: i for i, v in enumerate(values, start=1)}, value=column, else_=0)


class TaskRepository(BaseRepository[Task]):
    """
    Repository pour la table tasks.
    Hérite du CRUD générique de BaseRepository.
    """
    model = Task

    # ---------- Tâches du jour ----------

    @staticmethod
    def _due_today(now: datetime):
        start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        end = start + timedelta(days=1)
        return (
            Task.due_date >= start,
            Task.due_date < end,
            Task.due_date > now,
            Task.status.in_(OPEN_STATUSES),
        )

    def count_due_today(self, now: datetime) -> int:
        """Tâches ouvertes dont l'échéance tombe aujourd'hui et n'est pas encore passée."""
        stmt = select(func.count(Task.id)).where(*self._due_today(now))
        return int(self.session.exec(stmt).one())

    def list_due_today(self, now: datetime) -> Sequence[Task]:
        """Même filtre, trié par priorité (urgent, important, moins important)."""
        stmt = (
            select(Task)
            .where(*self._due_today(now))
            .order_by(_rank(Task.priority, PRIORITY_ORDER), Task.id.asc())
        )
        return self.session.exec(stmt).all()

    # ---------- Tableau / historique ----------

    def list_ordered_by_status(self) -> Sequence[Task]:
        stmt = select(Task).order_by(_rank(Task.status, BOARD_BUCKETS), Task.id.asc())
        return self.session.exec(stmt).all()

    def list_by_status(self, status: str) -> Sequence[Task]:
        stmt = select(Task).where(Task.status == status).order_by(Task.id.asc())
        return self.session.exec(stmt).all()

    # ---------- Écritures ----------

    def overwrite(
        self,
        task_id: int,
        *,
        task_name: Optional[str],
        category: Optional[str],
        due_date: Optional[datetime],
        status: Optional[str],
        priority: Optional[str],
    ) -> int:
        """UPDATE de tous les champs modifiables, sans condition. Retourne le nombre de lignes."""
        stmt = (
            update(Task)
            .where(Task.id == task_id)
            .values(
                task_name=task_name,
                category=category,
                due_date=due_date,
                status=status,
                priority=priority,
                updated_at=utcnow(),
            )
        )
        return self._execute_write(stmt)

    def set_status(self, task_id: int, status: str) -> int:
        stmt = (
            update(Task)
            .where(Task.id == task_id)
            .values(status=status, updated_at=utcnow())
        )
        return self._execute_write(stmt)
