from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.auth import get_current_user
from app.config import get_settings
from app.database import get_db
from app.models.user import User
from app.repositories import portal_repository as repo
from app.routers.assignments import assignment_response
from app.schemas.dashboard import ActivityResponse
from app.schemas.material import AssignmentResponse

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])
settings = get_settings()


@router.get("/activities", response_model=list[ActivityResponse])
def list_activities(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Current user's latest completions and views, newest first."""
    return [
        ActivityResponse(
            id=x["id"],
            type=x["type"],
            title=x["title"],
            unit_code=x["unit_code"],
            timestamp=x["timestamp"].isoformat(),
        )
        for x in repo.recent_activities(db, user.id, settings.activity_limit)
    ]


@router.get("/deadlines", response_model=list[AssignmentResponse])
def list_deadlines(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Next assignments due across all units, with the current user's completion state."""
    rows = repo.upcoming_deadlines(db, user.id, settings.deadline_limit)
    return [assignment_response(a, u, c) for a, u, c in rows]
