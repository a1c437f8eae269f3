from typing import Any, Dict, List

from app.core.errors import NotFoundError, ValidationError
from app.db.models.notes import Note
from app.db.repositories.notes import NoteRepository
from app.features.notes.schemas import NoteIn


class NoteService:
    """
    Logique métier pour Note.
    - content obligatoire à la création comme à la mise à jour.
    - PUT = remplacement complet : un title absent ou vide est stocké à null.
    """

    def __init__(self, repo: NoteRepository):
        self.repo = repo

    @staticmethod
    def _require_content(payload: NoteIn) -> str:
        if not payload.content:
            raise ValidationError("Content is required")
        return payload.content

    # -------- Reads --------

    def list(self) -> List[Dict[str, Any]]:
        return self.repo.list_summaries()

    def get(self, note_id: int) -> Note:
        note = self.repo.get(note_id)
        if not note:
            raise NotFoundError("Note not found")
        return note

    # -------- Writes --------

    def create(self, payload: NoteIn) -> Note:
        content = self._require_content(payload)
        return self.repo.create_note(title=payload.title or None, content=content)

    def replace(self, note_id: int, payload: NoteIn) -> Note:
        content = self._require_content(payload)
        note = self.repo.replace(note_id, title=payload.title or None, content=content)
        if note is None:
            raise NotFoundError("Note not found")
        return note

    def delete(self, note_id: int) -> None:
        if not self.repo.delete_by_id(note_id):
            raise NotFoundError("Note not found")
