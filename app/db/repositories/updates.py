"""
Construction des UPDATE partiels à partir d'une liste ordonnée de descripteurs de champs.

Chaque descripteur porte un nom de colonne et, éventuellement, une valeur.
La liste est parcourue une seule fois : seuls les champs qui portent une valeur
produisent une affectation `colonne = :param`, dans l'ordre déclaré.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Sequence, Type

from sqlalchemy import update
from sqlalchemy.sql.dml import Update
from sqlmodel import SQLModel

from app.core.errors import ValidationError


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    value: Any = UNSET

    @property
    def present(self) -> bool:
        return self.value is not UNSET


def describe_fields(names: Iterable[str], values: Mapping[str, Any]) -> List[FieldDescriptor]:
    """Un descripteur par nom, dans l'ordre de `names` ; UNSET si absent de `values`."""
    return [FieldDescriptor(name, values.get(name, UNSET)) for name in names]


def build_update(model: Type[SQLModel], record_id: Any, fields: Sequence[FieldDescriptor]) -> Update:
    assignments = [(getattr(model, f.name), f.value) for f in fields if f.present]
    if not assignments:
        raise ValidationError("No fields to update")
    return (
        update(model)
        .where(model.id == record_id)
        .ordered_values(*assignments)
        .returning(model)
    )
