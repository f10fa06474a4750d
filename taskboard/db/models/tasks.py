from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from taskboard.features.tasks.constants import DEFAULT_STATUS

from .base import BaseModelDB


class Task(BaseModelDB, table=True):
    """Tâche à faire : nom, catégorie, échéance, priorité et statut.

    Toutes les colonnes métier sont nullables : la mise à jour complète
    (PUT /tasks/{id}) écrase chaque champ avec ce qui est envoyé, même absent.
    """

    __tablename__ = "tasks"

    task_name: Optional[str] = Field(default=None, description="Libellé de la tâche")
    category: Optional[str] = Field(default=None, description="Catégorie libre")
    due_date: Optional[datetime] = Field(
        default=None, index=True, sa_type=DateTime, description="Échéance (heure locale)"
    )
    status: Optional[str] = Field(default=DEFAULT_STATUS, index=True)
    priority: Optional[str] = Field(default=None)
