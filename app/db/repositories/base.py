from typing import Any, Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete
from sqlalchemy.sql.dml import Update
from sqlmodel import SQLModel, Session, select

from app.db.repositories.updates import FieldDescriptor, build_update

# Type générique pour le modèle (Todo, Note)
ModelT = TypeVar("ModelT", bound=SQLModel)


class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Chaque opération = une seule requête suivie d'un commit (pas de transaction multi-requêtes).
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- READ ----------

    def list(self, *order_by: Any) -> Sequence[ModelT]:
        """Retourne tous les enregistrements, dans l'ordre demandé."""
        statement = select(self.model).order_by(*order_by)
        return self.session.exec(statement).all()

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        return self.session.get(self.model, id_)

    # ---------- CREATE ----------

    def create(self, **fields) -> ModelT:
        """Crée et persiste un nouvel enregistrement (valeurs par défaut de la base relues)."""
        entity = self.model(**fields)
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    # ---------- UPDATE ----------

    def update_fields(self, id_: Any, fields: Sequence[FieldDescriptor]) -> Optional[ModelT]:
        """
        UPDATE ... SET (champs présents seulement) WHERE id = :id RETURNING *.
        Retourne None si aucune ligne ne correspond.
        """
        return self._execute_update(build_update(self.model, id_, fields))

    def _execute_update(self, statement: Update) -> Optional[ModelT]:
        entity = self.session.exec(statement).scalar_one_or_none()
        self.session.commit()
        if entity is not None:
            self.session.refresh(entity)
        return entity

    # ---------- DELETE ----------

    def delete_by_id(self, id_: Any) -> bool:
        """Supprime un enregistrement. False si aucune ligne ne correspond."""
        statement = delete(self.model).where(self.model.id == id_)
        result = self.session.exec(statement)
        self.session.commit()
        return result.rowcount > 0
