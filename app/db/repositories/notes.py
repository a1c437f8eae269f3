from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlmodel import select

from app.db.models.notes import Note, utcnow
from app.db.repositories.base import BaseRepository
from app.db.repositories.updates import FieldDescriptor


class NoteRepository(BaseRepository[Note]):
    model = Note

    def list_summaries(self) -> List[Dict[str, Any]]:
        """id, title, created_at, updated_at (sans content), plus récentes d'abord."""
        statement = (
            select(Note.id, Note.title, Note.created_at, Note.updated_at)
            .order_by(Note.created_at.desc(), Note.id.desc())
        )
        return [dict(row) for row in self.session.exec(statement).mappings().all()]

    def create_note(self, *, title: Optional[str], content: str, now: Optional[datetime] = None) -> Note:
        # une seule lecture d'horloge : created_at == updated_at tant que la note n'est pas modifiée
        stamp = now or utcnow()
        return self.create(title=title, content=content, created_at=stamp, updated_at=stamp)

    def replace(
        self,
        note_id: int,
        *,
        title: Optional[str],
        content: str,
        now: Optional[datetime] = None,
    ) -> Optional[Note]:
        # remplacement complet : title None est écrit tel quel
        fields = [
            FieldDescriptor("title", title),
            FieldDescriptor("content", content),
            FieldDescriptor("updated_at", now or utcnow()),
        ]
        return self.update_fields(note_id, fields)
