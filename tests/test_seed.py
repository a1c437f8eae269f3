import pytest
from sqlmodel import select

from app.db.models.notes import Note
from app.db.models.todos import Todo
from app.db.seed import DEFAULT_SEED_PATH, load_seed_yaml, seed_all


def test_seed_inserts_todos_and_notes(session):
    data = load_seed_yaml(DEFAULT_SEED_PATH)
    counts = seed_all(session, DEFAULT_SEED_PATH)
    assert counts == {"todos": len(data["todos"]), "notes": len(data["notes"])}

    todos = session.exec(select(Todo).order_by(Todo.id)).all()
    assert todos[0].task == data["todos"][0]["task"]
    assert todos[0].completed is False
    assert any(t.completed for t in todos)
    assert any(n.title is None for n in session.exec(select(Note)).all())


def test_seed_is_skipped_when_tables_have_rows(session):
    seed_all(session, DEFAULT_SEED_PATH)
    assert seed_all(session, DEFAULT_SEED_PATH) == {"todos": 0, "notes": 0}


def test_seed_file_must_be_a_mapping(tmp_path):
    path = tmp_path / "seed.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_seed_yaml(path)


def test_missing_seed_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_seed_yaml(tmp_path / "absent.yaml")


def test_seeded_notes_have_equal_timestamps(session):
    seed_all(session, DEFAULT_SEED_PATH)
    for note in session.exec(select(Note)).all():
        assert note.created_at == note.updated_at
