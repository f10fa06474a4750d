"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

Contient les modèles Pydantic utilisés par FastAPI :

TaskCreateIn → corps de POST /tasks-add

TaskUpdateIn → corps de PUT /tasks/{id}

TaskStatusIn → corps de PUT /tasks/{id}/status

TaskOut → une ligne de la table tasks

Les champs d'entrée sont tous optionnels : une priorité, une date ou un statut
manquant est refusé par les validateurs métier (400 avec message), pas par FastAPI (422).
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field as PydField

from taskboard.features.tasks.constants import BOARD_DONE, BOARD_IN_PROGRESS, BOARD_NOT_STARTED


class TaskCreateIn(BaseModel):
    task_name: Optional[str] = PydField(None, examples=["Préparer la réunion"])
    category: Optional[str] = PydField(None, examples=["Travail"])
    due_date: Optional[str] = PydField(None, description="YYYY-MM-DD", examples=["2030-01-15"])
    due_time: Optional[str] = PydField(None, description="HH:MM[:SS], 23:59:59 si absent", examples=["14:30"])
    priority: Optional[str] = PydField(None, examples=["urgent"])


class TaskUpdateIn(BaseModel):
    """Remplacement complet : un champ absent est écrit à NULL."""
    task_name: Optional[str] = None
    category: Optional[str] = None
    due_date: Optional[datetime] = PydField(None, examples=["2030-01-15T14:30:00"])
    status: Optional[str] = PydField(None, examples=["en cours"])
    priority: Optional[str] = PydField(None, examples=["important"])


class TaskStatusIn(BaseModel):
    status: Optional[str] = PydField(None, examples=["termine"])


class TaskOut(BaseModel):
    id: int
    task_name: Optional[str]
    category: Optional[str]
    due_date: Optional[datetime]
    status: Optional[str]
    priority: Optional[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class TaskCountOut(BaseModel):
    taskCount: int


class MessageOut(BaseModel):
    message: str


class TasksByStatusOut(BaseModel):
    """Les trois colonnes du tableau ; les clés contiennent des espaces (alias)."""
    not_started: List[TaskOut] = PydField(default_factory=list, alias=BOARD_NOT_STARTED)
    in_progress: List[TaskOut] = PydField(default_factory=list, alias=BOARD_IN_PROGRESS)
    done: List[TaskOut] = PydField(default_factory=list, alias=BOARD_DONE)

    model_config = {"populate_by_name": True}
