from typing import Generic, Type, TypeVar
from sqlmodel import SQLModel, Session

# Type générique pour le modèle (Task, ...)
ModelT = TypeVar("ModelT", bound=SQLModel)

class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations d'écriture standards.

    👉 Ne contient aucune logique métier.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    👉 En cas d'erreur SQL, la session est remise à zéro (rollback) puis l'erreur remonte.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- CREATE ----------

    def create(self, **fields) -> ModelT:
        """Crée et persiste un nouvel enregistrement (commit + refresh pour récupérer l'id)."""
        entity = self.model(**fields)
        self.session.add(entity)
        try:
            self.session.commit()
            self.session.refresh(entity)
        except Exception:
            self.session.rollback()
            raise
        return entity

    # ---------- UPDATE / DELETE ----------

    def _execute_write(self, statement) -> int:
        """Exécute un UPDATE/DELETE, commit, et retourne le nombre de lignes concernées."""
        try:
            result = self.session.exec(statement)  # type: ignore[call-overload]
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return result.rowcount
