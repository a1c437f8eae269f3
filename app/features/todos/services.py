"""
➡️ But : Contenir la logique métier des todos : règles de présence, erreurs du domaine.

TodoService : vérifie les champs requis, traduit "aucune ligne" en NotFoundError.

Lève des exceptions du domaine (ValidationError, NotFoundError) ; la couche HTTP les traduit.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

from typing import Sequence

from app.core.errors import NotFoundError, ValidationError
from app.db.models.todos import Todo
from app.db.repositories.todos import TODO_UPDATABLE_FIELDS, TodoRepository
from app.db.repositories.updates import describe_fields
from app.features.todos.schemas import TodoCreate, TodoUpdate


class TodoService:
    def __init__(self, repo: TodoRepository):
        self.repo = repo

    def list(self) -> Sequence[Todo]:
        return self.repo.list_by_id()

    def create(self, payload: TodoCreate) -> Todo:
        if not payload.task:
            raise ValidationError("Task is required")
        return self.repo.create_task(payload.task)

    def update(self, todo_id: int, payload: TodoUpdate) -> Todo:
        # un null explicite compte comme absent : `task` ne devient jamais NULL
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        fields = describe_fields(TODO_UPDATABLE_FIELDS, changes)
        todo = self.repo.update_partial(todo_id, fields)
        if todo is None:
            raise NotFoundError("Todo not found")
        return todo

    def delete(self, todo_id: int) -> None:
        if not self.repo.delete_by_id(todo_id):
            raise NotFoundError("Todo not found")
