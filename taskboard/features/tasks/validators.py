"""
Validation des champs saisis avant tout accès à la base.

Les messages sont ceux affichés tels quels par le front.
"""

from datetime import datetime
from typing import Optional

from taskboard.features.tasks.constants import END_OF_DAY, PRIORITIES, STATUS_UPDATE_ALLOWED


class TaskValidationError(ValueError):
    """Entrée refusée (400). str(exc) est le message destiné à l'utilisateur."""


MSG_INVALID_PRIORITY = "Priorité invalide."
MSG_INVALID_DATE = "Date ou heure invalide."
MSG_PAST_DATE = "La date d'échéance ne peut pas être dans le passé."
MSG_INVALID_STATUS = "Invalid status"


def validate_priority(priority: Optional[str]) -> str:
    if priority not in PRIORITIES:
        raise TaskValidationError(MSG_INVALID_PRIORITY)
    return priority


def validate_status_update(status: Optional[str]) -> str:
    if status not in STATUS_UPDATE_ALLOWED:
        raise TaskValidationError(MSG_INVALID_STATUS)
    return status


def effective_due_string(due_date: Optional[str], due_time: Optional[str]) -> str:
    """"YYYY-MM-DD HH:MM[:SS]" ; sans heure, l'échéance est la fin de journée."""
    return f"{due_date} {due_time}" if due_time else f"{due_date} {END_OF_DAY}"


def to_local_naive(value: datetime) -> datetime:
    """Date avec fuseau -> heure locale du serveur sans tzinfo (format de la table)."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_due_datetime(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        raise TaskValidationError(MSG_INVALID_DATE) from None


def validate_due_datetime(
    due_date: Optional[str],
    due_time: Optional[str],
    *,
    now: datetime,
) -> datetime:
    """
    Calcule l'échéance effective, vérifie qu'elle est lisible et pas dans le passé.
    L'instant exact `now` est accepté.
    """
    if not due_date:
        raise TaskValidationError(MSG_INVALID_DATE)
    due = to_local_naive(parse_due_datetime(effective_due_string(due_date, due_time)))
    if due < now:
        raise TaskValidationError(MSG_PAST_DATE)
    return due
