from typing import Optional, Sequence

from app.db.models.todos import Todo
from app.db.repositories.base import BaseRepository
from app.db.repositories.updates import FieldDescriptor

# ordre des affectations dans le SET
TODO_UPDATABLE_FIELDS = ("task", "completed")


class TodoRepository(BaseRepository[Todo]):
    model = Todo

    def list_by_id(self) -> Sequence[Todo]:
        return self.list(Todo.id.asc())

    def create_task(self, task: str) -> Todo:
        return self.create(task=task)

    def update_partial(self, todo_id: int, fields: Sequence[FieldDescriptor]) -> Optional[Todo]:
        return self.update_fields(todo_id, fields)
