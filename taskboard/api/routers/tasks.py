"""
➡️ But : Définir les endpoints de l’API tâches.

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT)

Appelle TaskService

Traduit les erreurs : TaskValidationError -> 400, LookupError -> 404,
SQLAlchemyError -> 500 (loggée, message générique, aucun détail au client).

Les corps d'erreur reprennent ceux attendus par le front
(JSON {"message": ...} pour la création, texte brut pour le statut, etc.).
"""

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from sqlalchemy.exc import SQLAlchemyError

from taskboard.api.dependencies import get_task_service
from taskboard.features.tasks.schemas import (
    MessageOut,
    TaskCountOut,
    TaskCreateIn,
    TaskOut,
    TaskStatusIn,
    TasksByStatusOut,
    TaskUpdateIn,
)
from taskboard.features.tasks.services import TaskService
from taskboard.features.tasks.validators import TaskValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tasks"])

# -------- Helpers --------

def _server_error(exc: Exception, log_message: str, body: Any) -> Response:
    logger.error(log_message, exc_info=exc)
    if isinstance(body, str):
        return PlainTextResponse(body, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(body, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


# -----------------------------
# Tâches du jour
# -----------------------------
@router.get(
    "/tasks/today",
    summary="Nombre de tâches à faire aujourd'hui",
    description="Échéance aujourd'hui, pas encore passée, statut « pas commencé » ou « en cours ».",
    response_model=TaskCountOut,
)
def count_tasks_today(svc: TaskService = Depends(get_task_service)):
    try:
        return TaskCountOut(taskCount=svc.count_due_today())
    except SQLAlchemyError as e:
        return _server_error(e, "Error fetching tasks due today", "Server Error")


@router.get(
    "/tasks",
    summary="Lister les tâches du jour",
    description="Même filtre que /tasks/today, trié par priorité (urgent, important, moins important).",
    response_model=List[TaskOut],
)
def list_tasks_today(svc: TaskService = Depends(get_task_service)):
    try:
        return svc.list_due_today()
    except SQLAlchemyError as e:
        return _server_error(e, "Error fetching tasks", "Server Error")


# -----------------------------
# Mise à jour complète
# -----------------------------
@router.put(
    "/tasks/{task_id}",
    summary="Mettre à jour une tâche",
    description="Remplace tous les champs ; un champ absent est écrit à NULL.",
    response_model=MessageOut,
)
def update_task(task_id: int, payload: TaskUpdateIn, svc: TaskService = Depends(get_task_service)):
    try:
        svc.update(task_id, payload)
    except SQLAlchemyError as e:
        return _server_error(
            e, "Error updating task %s" % task_id,
            {"message": "Erreur lors de la mise à jour de la tâche."},
        )
    return MessageOut(message="Tâche mise à jour avec succès.")


# -----------------------------
# Tableau par statut
# -----------------------------
@router.get(
    "/tasks-by-status",
    summary="Tâches regroupées par statut",
    description="Trois colonnes : « pas commence », « en cours », « termine ». Les autres statuts sont ignorés.",
    response_model=TasksByStatusOut,
)
def list_tasks_by_status(svc: TaskService = Depends(get_task_service)):
    try:
        return svc.list_by_status()
    except SQLAlchemyError as e:
        return _server_error(e, "Erreur lors de la récupération des tâches", {"error": "Erreur serveur"})


# -----------------------------
# Création
# -----------------------------
@router.post(
    "/tasks-add",
    summary="Créer une tâche",
    description="Sans due_time, l'échéance est fixée à 23:59:59 du jour indiqué.",
    response_model=MessageOut,
    responses={400: {"description": "Priorité ou date invalide"}},
)
def create_task(payload: Optional[TaskCreateIn] = None, svc: TaskService = Depends(get_task_service)):
    # corps absent : traité comme {} (les validateurs répondent 400)
    payload = payload or TaskCreateIn()
    logger.info("Route /tasks-add appelée avec les données : %s", payload.model_dump())
    try:
        svc.create(payload)
    except TaskValidationError as e:
        return JSONResponse({"message": str(e)}, status_code=status.HTTP_400_BAD_REQUEST)
    except SQLAlchemyError as e:
        return _server_error(e, "Error inserting task", {"message": "Erreur lors de l'insertion de la tâche."})
    return MessageOut(message="Tâche insérée avec succès !")


# -----------------------------
# Statut seul
# -----------------------------
@router.put(
    "/tasks/{task_id}/status",
    summary="Changer le statut d'une tâche",
    response_class=PlainTextResponse,
    responses={400: {"description": "Invalid status"}, 404: {"description": "Task not found"}},
)
def update_task_status(
    task_id: int,
    payload: Optional[TaskStatusIn] = None,
    svc: TaskService = Depends(get_task_service),
):
    payload = payload or TaskStatusIn()
    try:
        svc.update_status(task_id, payload.status)
    except TaskValidationError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)
    except LookupError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_404_NOT_FOUND)
    except SQLAlchemyError as e:
        return _server_error(e, "Error updating task status", "Error updating task status")
    return PlainTextResponse("Task status updated successfully")


# -----------------------------
# Historique
# -----------------------------
@router.get(
    "/history",
    summary="Historique des tâches terminées",
    response_model=List[TaskOut],
)
def list_history(svc: TaskService = Depends(get_task_service)):
    try:
        return svc.history()
    except SQLAlchemyError as e:
        return _server_error(e, "Error fetching history", "Error fetching tasks")
