import pytest
from sqlalchemy.dialects import sqlite

from app.core.errors import ValidationError
from app.db.models.todos import Todo
from app.db.repositories.todos import TODO_UPDATABLE_FIELDS
from app.db.repositories.updates import UNSET, FieldDescriptor, build_update, describe_fields


def _set_columns(statement):
    sql = str(statement.compile(dialect=sqlite.dialect()))
    set_clause = sql.split(" SET ", 1)[1].split(" WHERE ", 1)[0]
    return [part.split("=")[0].strip() for part in set_clause.split(",")]


def test_describe_fields_keeps_declared_order():
    fields = describe_fields(TODO_UPDATABLE_FIELDS, {"completed": True, "task": "x"})
    assert [f.name for f in fields] == ["task", "completed"]
    assert all(f.present for f in fields)


def test_missing_fields_are_unset():
    fields = describe_fields(TODO_UPDATABLE_FIELDS, {"completed": False})
    assert fields[0] == FieldDescriptor("task", UNSET)
    assert not fields[0].present
    # False est une valeur, pas une absence
    assert fields[1].present


def test_only_present_fields_are_assigned():
    statement = build_update(Todo, 1, describe_fields(TODO_UPDATABLE_FIELDS, {"completed": True}))
    assert _set_columns(statement) == ["completed"]


def test_assignments_follow_declared_order():
    statement = build_update(Todo, 1, describe_fields(TODO_UPDATABLE_FIELDS, {"completed": True, "task": "x"}))
    assert _set_columns(statement) == ["task", "completed"]


def test_no_present_field_is_rejected():
    with pytest.raises(ValidationError, match="No fields to update"):
        build_update(Todo, 1, describe_fields(TODO_UPDATABLE_FIELDS, {}))
