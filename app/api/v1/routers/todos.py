"""
➡️ But : Définir les endpoints de l’API todos.

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, DELETE)

Appelle le service correspondant

Retourne les schémas de sortie (response_model)

Les erreurs de la base sont loggées puis renvoyées en 500 générique (store_errors).
"""

from typing import List

from fastapi import APIRouter, Depends, status

from app.api.v1.dependencies import get_todo_service
from app.core.errors import store_errors
from app.features.common.schemas import ErrorOut, MessageOut
from app.features.todos.schemas import TodoCreate, TodoOut, TodoUpdate
from app.features.todos.services import TodoService

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={500: {"model": ErrorOut, "description": "Server error"}},
)


@router.get(
    "",
    summary="Lister les todos",
    description="Retourne tous les todos, triés par id croissant.",
    response_model=List[TodoOut],
)
def list_todos(svc: TodoService = Depends(get_todo_service)):
    with store_errors("fetching todos"):
        return svc.list()


@router.post(
    "",
    summary="Créer un todo",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoOut,
    responses={400: {"model": ErrorOut, "description": "Task is required"}},
)
def create_todo(payload: TodoCreate, svc: TodoService = Depends(get_todo_service)):
    with store_errors("creating todo"):
        return svc.create(payload)


@router.put(
    "/{todo_id}",
    summary="Mettre à jour un todo",
    description="Mise à jour partielle : seuls `task` et/ou `completed` fournis sont modifiés.",
    response_model=TodoOut,
    responses={
        400: {"model": ErrorOut, "description": "No fields to update"},
        404: {"model": ErrorOut, "description": "Todo not found"},
    },
)
def update_todo(todo_id: int, payload: TodoUpdate, svc: TodoService = Depends(get_todo_service)):
    with store_errors("updating todo"):
        return svc.update(todo_id, payload)


@router.delete(
    "/{todo_id}",
    summary="Supprimer un todo",
    response_model=MessageOut,
    responses={404: {"model": ErrorOut, "description": "Todo not found"}},
)
def delete_todo(todo_id: int, svc: TodoService = Depends(get_todo_service)):
    with store_errors("deleting todo"):
        svc.delete(todo_id)
    return MessageOut(message="Todo deleted successfully")
