"""
Read side of the leaderboard: loads assignment and completion records for the
ranking engine. Sync, one query per call; the caller owns the Session.
"""
from sqlalchemy.orm import Session

from app.models.assignment import Assignment, CompletedAssignment
from app.models.user import User
from app.ranking import AssignmentRecord, CompletionRecord


def _assignment_records(rows) -> list[AssignmentRecord]:
    return [AssignmentRecord(id=a.id, created_at=a.created_at, title=a.title) for a in rows]


def _completion_records(rows) -> list[CompletionRecord]:
    return [
        CompletionRecord(
            user_id=user_id,
            user_name=name,
            user_avatar=avatar,
            assignment_id=assignment_id,
            completed_at=completed_at,
        )
        for user_id, name, avatar, assignment_id, completed_at in rows
    ]


def _completion_query(db: Session):
    return (
        db.query(
            CompletedAssignment.user_id,
            User.name,
            User.profile_image_url,
            CompletedAssignment.assignment_id,
            CompletedAssignment.completed_at,
        )
        .join(User, CompletedAssignment.user_id == User.id)
        .join(Assignment, CompletedAssignment.assignment_id == Assignment.id)
    )


def fetch_unit_assignments(db: Session, unit_code: str) -> list[AssignmentRecord]:
    rows = db.query(Assignment).filter(Assignment.unit_code == unit_code).all()
    return _assignment_records(rows)


def fetch_unit_completions(db: Session, unit_code: str) -> list[CompletionRecord]:
    """Completions of the unit's assignments, joined with the completing user."""
    rows = _completion_query(db).filter(Assignment.unit_code == unit_code).all()
    return _completion_records(rows)


def fetch_all_assignments(db: Session) -> list[AssignmentRecord]:
    return _assignment_records(db.query(Assignment).all())


def fetch_all_completions(db: Session) -> list[CompletionRecord]:
    return _completion_records(_completion_query(db).all())


class RankingRepository:
    """Thin wrapper for dependency injection; delegates to module functions."""

    @staticmethod
    def fetch_unit_assignments(db: Session, unit_code: str) -> list[AssignmentRecord]:
        return fetch_unit_assignments(db, unit_code)

    @staticmethod
    def fetch_unit_completions(db: Session, unit_code: str) -> list[CompletionRecord]:
        return fetch_unit_completions(db, unit_code)

    @staticmethod
    def fetch_all_assignments(db: Session) -> list[AssignmentRecord]:
        return fetch_all_assignments(db)

    @staticmethod
    def fetch_all_completions(db: Session) -> list[CompletionRecord]:
        return fetch_all_completions(db)
