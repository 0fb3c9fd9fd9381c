from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.auth import get_current_user
from app.database import get_db
from app.models.note import Note
from app.models.unit import Unit
from app.models.user import User
from app.repositories import portal_repository as repo
from app.routers.units import get_unit_or_404
from app.schemas.material import NoteCreate, NoteResponse

router = APIRouter(prefix="/api/units/{unit_code}/notes", tags=["notes"])


def _note_response(note: Note, uploader: User, viewed: bool) -> NoteResponse:
    return NoteResponse(
        id=note.id,
        title=note.title,
        description=note.description,
        file_url=note.file_url,
        unit_code=note.unit_code,
        created_at=note.created_at.isoformat(),
        uploaded_by=uploader.name,
        uploader_image_url=uploader.profile_image_url,
        viewed=viewed,
    )


@router.get("", response_model=list[NoteResponse])
def list_notes(
    unit: Unit = Depends(get_unit_or_404),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Notes of the unit, newest first. viewed is for the current user."""
    return [_note_response(n, u, v) for n, u, v in repo.list_notes(db, unit.unit_code, user.id)]


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
def create_note(
    body: NoteCreate,
    unit: Unit = Depends(get_unit_or_404),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    note = repo.create_note(
        db,
        unit_code=unit.unit_code,
        user_id=user.id,
        title=body.title,
        description=body.description,
        file_url=(body.file_url or "").strip() or None,
    )
    return _note_response(note, user, False)


@router.post("/{note_id}/view")
def mark_note_viewed(
    note_id: str,
    unit: Unit = Depends(get_unit_or_404),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    if not repo.get_note(db, unit.unit_code, note_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
    repo.mark_note_viewed(db, note_id, user.id)
    return {"success": True}


@router.delete("/{note_id}")
def delete_note(
    note_id: str,
    unit: Unit = Depends(get_unit_or_404),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Only the uploader can delete."""
    if not repo.delete_note(db, unit.unit_code, note_id, user.id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Note not found or you don't have permission to delete it",
        )
    return {"success": True}
