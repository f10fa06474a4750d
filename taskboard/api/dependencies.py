"""
➡️ But : Centraliser les dépendances réutilisables des routes.

get_task_repository() : crée un TaskRepository à partir d’une session DB.

get_clock() : fournit l'heure courante (remplaçable en test via dependency_overrides).

get_task_service() : assemble repository + horloge.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()).
"""

from datetime import datetime

from fastapi import Depends
from sqlmodel import Session

from taskboard.db.session import get_session
from taskboard.db.repositories.tasks import TaskRepository
from taskboard.features.tasks.services import Clock, TaskService


def get_clock() -> Clock:
    return datetime.now


# -----------------------------
# Repositories
# -----------------------------
def get_task_repository(session: Session = Depends(get_session)) -> TaskRepository:
    return TaskRepository(session)


# -----------------------------
# Task service
# -----------------------------
def get_task_service(
    repo: TaskRepository = Depends(get_task_repository),
    clock: Clock = Depends(get_clock),
) -> TaskService:
    return TaskService(repo=repo, clock=clock)
