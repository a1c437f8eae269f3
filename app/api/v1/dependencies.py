"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Chaîne d'injection : get_session → repository → service.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à surcharger dans les tests (app.dependency_overrides).
"""

from fastapi import Depends
from sqlmodel import Session

from app.db.session import get_session

from app.db.repositories.todos import TodoRepository
from app.features.todos.services import TodoService

from app.db.repositories.notes import NoteRepository
from app.features.notes.services import NoteService


# -----------------------------
# Repositories
# -----------------------------
def get_todo_repository(session: Session = Depends(get_session)) -> TodoRepository:
    return TodoRepository(session)

def get_note_repository(session: Session = Depends(get_session)) -> NoteRepository:
    return NoteRepository(session)


# -----------------------------
# Services
# -----------------------------
def get_todo_service(
    todo_repo: TodoRepository = Depends(get_todo_repository),
) -> TodoService:
    return TodoService(repo=todo_repo)

def get_note_service(
    note_repo: NoteRepository = Depends(get_note_repository),
) -> NoteService:
    return NoteService(repo=note_repo)
