from datetime import datetime, timedelta, timezone
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.auth import get_current_user
from app.config import get_settings
from app.database import get_db
from app.models.assignment import Assignment, CompletedAssignment
from app.models.unit import Unit
from app.models.user import User
from app.repositories import portal_repository as repo
from app.routers.units import get_unit_or_404
from app.schemas.material import AssignmentCreate, AssignmentResponse, CompletionResponse

router = APIRouter(prefix="/api/units/{unit_code}/assignments", tags=["assignments"])
settings = get_settings()


def assignment_response(
    assignment: Assignment, uploader: User, completion: CompletedAssignment | None
) -> AssignmentResponse:
    return AssignmentResponse(
        id=assignment.id,
        title=assignment.title,
        description=assignment.description,
        deadline=assignment.deadline.isoformat(),
        file_url=assignment.file_url,
        unit_code=assignment.unit_code,
        created_at=assignment.created_at.isoformat(),
        uploaded_by=uploader.name,
        completed=completion is not None,
        completed_at=completion.completed_at.isoformat() if completion else None,
    )


def _to_naive_utc(dt: datetime) -> datetime:
    # DB stores naive UTC
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


@router.get("", response_model=list[AssignmentResponse])
def list_assignments(
    unit: Unit = Depends(get_unit_or_404),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Assignments of the unit by deadline. completed/completed_at are for the current user."""
    return [assignment_response(a, u, c) for a, u, c in repo.list_assignments(db, unit.unit_code, user.id)]


@router.post("", response_model=AssignmentResponse, status_code=status.HTTP_201_CREATED)
def create_assignment(
    body: AssignmentCreate,
    unit: Unit = Depends(get_unit_or_404),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    deadline = _to_naive_utc(body.deadline)
    min_deadline = datetime.utcnow() + timedelta(hours=settings.assignment_min_deadline_hours)
    if deadline < min_deadline:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Deadline must be at least {settings.assignment_min_deadline_hours} hours in the future",
        )
    assignment = repo.create_assignment(
        db,
        unit_code=unit.unit_code,
        user_id=user.id,
        title=body.title,
        description=body.description,
        deadline=deadline,
        file_url=(body.file_url or "").strip() or None,
    )
    return assignment_response(assignment, user, None)


@router.post("/{assignment_id}/complete", response_model=CompletionResponse)
def complete_assignment(
    assignment_id: str,
    unit: Unit = Depends(get_unit_or_404),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Mark done for the current user. Repeating it keeps the first completion time."""
    if not repo.get_assignment(db, unit.unit_code, assignment_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assignment not found")
    completion, already = repo.complete_assignment(db, assignment_id, user.id)
    return CompletionResponse(
        already_completed=already,
        assignment_id=assignment_id,
        completed_at=completion.completed_at.isoformat(),
    )


@router.delete("/{assignment_id}")
def delete_assignment(
    assignment_id: str,
    unit: Unit = Depends(get_unit_or_404),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Only the uploader can delete. Completions of the assignment are removed with it."""
    if not repo.delete_assignment(db, unit.unit_code, assignment_id, user.id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assignment not found or you don't have permission to delete it",
        )
    return {"success": True}
