from datetime import datetime

import pytest
from sqlalchemy.exc import OperationalError

from app.api.v1.dependencies import get_note_repository


def create_note(client, **body):
    resp = client.post("/api/notes", json=body)
    assert resp.status_code == 201
    return resp.json()


def test_create_note_without_title(client):
    note = create_note(client, content="hello")
    assert note["title"] is None
    assert note["content"] == "hello"
    assert isinstance(note["id"], int)
    assert note["created_at"] and note["updated_at"]


def test_create_note_without_content_is_rejected(client):
    for body in ({"title": "t"}, {"title": "t", "content": ""}):
        resp = client.post("/api/notes", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Content is required"}
    assert client.get("/api/notes").json() == []


def test_get_note_round_trip(client):
    note = create_note(client, title="Courses", content="lait")
    resp = client.get(f"/api/notes/{note['id']}")
    assert resp.status_code == 200
    assert resp.json() == note


def test_get_unknown_note_is_not_found(client):
    resp = client.get("/api/notes/42")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Note not found"}


def test_list_notes_newest_first_without_content(client):
    older = create_note(client, title="old", content="first")
    newer = create_note(client, content="hello")
    listed = client.get("/api/notes").json()
    assert [n["id"] for n in listed] == [newer["id"], older["id"]]
    assert all("content" not in n for n in listed)
    assert set(listed[0]) == {"id", "title", "created_at", "updated_at"}


def test_replace_note_updates_timestamp(client):
    note = create_note(client, title="t", content="v1")
    resp = client.put(f"/api/notes/{note['id']}", json={"title": "t2", "content": "v2"})
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["title"] == "t2"
    assert updated["content"] == "v2"
    assert updated["created_at"] == note["created_at"]
    assert datetime.fromisoformat(updated["updated_at"]) > datetime.fromisoformat(updated["created_at"])


def test_replace_note_without_title_clears_it(client):
    note = create_note(client, title="t", content="v1")
    resp = client.put(f"/api/notes/{note['id']}", json={"content": "v2"})
    assert resp.status_code == 200
    assert resp.json()["title"] is None


def test_replace_note_without_content_is_rejected(client):
    note = create_note(client, title="t", content="v1")
    resp = client.put(f"/api/notes/{note['id']}", json={"title": "t2"})
    assert resp.status_code == 400
    assert client.get(f"/api/notes/{note['id']}").json() == note


def test_replace_unknown_note_is_not_found(client):
    resp = client.put("/api/notes/42", json={"content": "x"})
    assert resp.status_code == 404


def test_delete_note(client):
    note = create_note(client, content="bye")
    resp = client.delete(f"/api/notes/{note['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Note deleted successfully"}
    assert client.get(f"/api/notes/{note['id']}").status_code == 404
    assert client.delete(f"/api/notes/{note['id']}").status_code == 404


def test_new_note_has_equal_timestamps(client):
    note = create_note(client, title="", content="c")
    assert note["created_at"] == note["updated_at"]
    listed = client.get("/api/notes").json()[0]
    assert listed["created_at"] == listed["updated_at"]


class BrokenNoteRepository:
    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT * FROM notes", {}, Exception("timeout"))

    list_summaries = get = create_note = replace = delete_by_id = _fail


@pytest.mark.parametrize(
    "method, path, body, message",
    [
        ("GET", "/api/notes", None, "Server error while fetching notes"),
        ("GET", "/api/notes/1", None, "Server error while fetching note"),
        ("POST", "/api/notes", {"content": "x"}, "Server error while creating note"),
        ("PUT", "/api/notes/1", {"content": "x"}, "Server error while updating note"),
        ("DELETE", "/api/notes/1", None, "Server error while deleting note"),
    ],
)
def test_store_failure_is_a_server_error(app, client, method, path, body, message):
    app.dependency_overrides[get_note_repository] = BrokenNoteRepository
    try:
        resp = client.request(method, path, json=body)
        assert resp.status_code == 500
        assert resp.json() == {"error": message}
        assert "timeout" not in resp.text
    finally:
        app.dependency_overrides.clear()
