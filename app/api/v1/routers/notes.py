from typing import List

from fastapi import APIRouter, Depends, status

from app.api.v1.dependencies import get_note_service
from app.core.errors import store_errors
from app.features.common.schemas import ErrorOut, MessageOut
from app.features.notes.schemas import NoteIn, NoteOut, NoteSummaryOut
from app.features.notes.services import NoteService

router = APIRouter(
    prefix="/notes",
    tags=["notes"],
    responses={500: {"model": ErrorOut, "description": "Server error"}},
)

NOT_FOUND = {404: {"model": ErrorOut, "description": "Note not found"}}
CONTENT_REQUIRED = {400: {"model": ErrorOut, "description": "Content is required"}}


@router.get(
    "",
    summary="Lister les notes (sans contenu)",
    description="Retourne id, title, created_at, updated_at, les plus récentes d'abord.",
    response_model=List[NoteSummaryOut],
)
def list_notes(svc: NoteService = Depends(get_note_service)):
    with store_errors("fetching notes", "Server error while fetching notes"):
        return svc.list()


@router.get(
    "/{note_id}",
    summary="Récupérer une note",
    response_model=NoteOut,
    responses=NOT_FOUND,
)
def get_note(note_id: int, svc: NoteService = Depends(get_note_service)):
    with store_errors("fetching note", "Server error while fetching note"):
        return svc.get(note_id)


@router.post(
    "",
    summary="Créer une note",
    status_code=status.HTTP_201_CREATED,
    response_model=NoteOut,
    responses=CONTENT_REQUIRED,
)
def create_note(payload: NoteIn, svc: NoteService = Depends(get_note_service)):
    with store_errors("creating note", "Server error while creating note"):
        return svc.create(payload)


@router.put(
    "/{note_id}",
    summary="Remplacer une note",
    description="Remplacement complet : `content` requis, `title` omis → null, `updated_at` recalculé.",
    response_model=NoteOut,
    responses={**CONTENT_REQUIRED, **NOT_FOUND},
)
def replace_note(note_id: int, payload: NoteIn, svc: NoteService = Depends(get_note_service)):
    with store_errors("updating note", "Server error while updating note"):
        return svc.replace(note_id, payload)


@router.delete(
    "/{note_id}",
    summary="Supprimer une note",
    response_model=MessageOut,
    responses=NOT_FOUND,
)
def delete_note(note_id: int, svc: NoteService = Depends(get_note_service)):
    with store_errors("deleting note", "Server error while deleting note"):
        svc.delete(note_id)
    return MessageOut(message="Note deleted successfully")
