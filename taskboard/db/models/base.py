"""
➡️ But : Propriétés communes à toutes les tables (id, dates de création / mise à jour).

Les colonnes datetime sont déclarées explicitement en DateTime sans fuseau :
la table ne stocke que des dates "naïves" (UTC pour created_at / updated_at,
heure locale du serveur pour les échéances).
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    """Heure UTC courante, sans tzinfo (format stocké en base)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BaseModelDB(SQLModel, table=False):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
