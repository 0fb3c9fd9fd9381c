"""
Persistence for course material: units, notes, past papers, assignments and the
per-user view/completion rows. All operations are sync; the caller owns the Session.
Per-user flags (viewed, completed) come from LEFT JOINs scoped to one user_id.
"""
import logging
from datetime import datetime

from sqlalchemy import and_, desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.assignment import Assignment, CompletedAssignment
from app.models.note import Note, UserNoteView
from app.models.past_paper import PastPaper, UserPaperView
from app.models.unit import Unit
from app.models.user import User

logger = logging.getLogger(__name__)


# ---------- Units ----------

def list_units(db: Session) -> list[Unit]:
    return db.query(Unit).order_by(Unit.unit_code).all()


def get_unit(db: Session, unit_code: str) -> Unit | None:
    return db.query(Unit).filter(Unit.unit_code == unit_code).first()


def create_unit(db: Session, unit_code: str, name: str, category: str, description: str | None = None) -> Unit | None:
    """Insert a unit. Returns None if unit_code is taken."""
    unit = Unit(unit_code=unit_code, name=name, category=category, description=description)
    db.add(unit)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return None
    db.refresh(unit)
    return unit


# ---------- Notes ----------

def list_notes(db: Session, unit_code: str, user_id: str) -> list[tuple[Note, User, bool]]:
    """Notes of a unit, newest first, as (note, uploader, viewed_by_user)."""
    rows = (
        db.query(Note, User, UserNoteView.id)
        .join(User, Note.user_id == User.id)
        .outerjoin(
            UserNoteView,
            and_(UserNoteView.note_id == Note.id, UserNoteView.user_id == user_id),
        )
        .filter(Note.unit_code == unit_code)
        .order_by(desc(Note.created_at))
        .all()
    )
    return [(note, uploader, view_id is not None) for note, uploader, view_id in rows]


def create_note(db: Session, unit_code: str, user_id: str, title: str, description: str, file_url: str | None) -> Note:
    note = Note(title=title, description=description, file_url=file_url, unit_code=unit_code, user_id=user_id)
    db.add(note)
    db.commit()
    db.refresh(note)
    return note


def get_note(db: Session, unit_code: str, note_id: str) -> Note | None:
    return db.query(Note).filter(Note.id == note_id, Note.unit_code == unit_code).first()


def mark_note_viewed(db: Session, note_id: str, user_id: str) -> None:
    """Record the first view; later calls are no-ops."""
    exists = (
        db.query(UserNoteView.id)
        .filter(UserNoteView.note_id == note_id, UserNoteView.user_id == user_id)
        .first()
    )
    if exists:
        return
    db.add(UserNoteView(note_id=note_id, user_id=user_id, viewed_at=datetime.utcnow()))
    try:
        db.commit()
    except IntegrityError:
        # concurrent request recorded the same view
        db.rollback()


def delete_note(db: Session, unit_code: str, note_id: str, user_id: str) -> bool:
    """Delete a note uploaded by user_id. False if missing or not the uploader."""
    note = get_note(db, unit_code, note_id)
    if not note or note.user_id != user_id:
        return False
    db.query(UserNoteView).filter(UserNoteView.note_id == note.id).delete(synchronize_session=False)
    db.delete(note)
    db.commit()
    return True


# ---------- Past papers ----------

def list_past_papers(db: Session, unit_code: str, user_id: str) -> list[tuple[PastPaper, User, bool]]:
    """Papers of a unit, latest year first then newest upload, as (paper, uploader, viewed_by_user)."""
    rows = (
        db.query(PastPaper, User, UserPaperView.id)
        .join(User, PastPaper.user_id == User.id)
        .outerjoin(
            UserPaperView,
            and_(UserPaperView.paper_id == PastPaper.id, UserPaperView.user_id == user_id),
        )
        .filter(PastPaper.unit_code == unit_code)
        .order_by(desc(PastPaper.year), desc(PastPaper.created_at))
        .all()
    )
    return [(paper, uploader, view_id is not None) for paper, uploader, view_id in rows]


def create_past_paper(
    db: Session,
    unit_code: str,
    user_id: str,
    title: str,
    description: str,
    year: str,
    file_url: str | None,
) -> PastPaper:
    paper = PastPaper(
        title=title,
        description=description,
        year=year,
        file_url=file_url,
        unit_code=unit_code,
        user_id=user_id,
    )
    db.add(paper)
    db.commit()
    db.refresh(paper)
    return paper


def get_past_paper(db: Session, unit_code: str, paper_id: str) -> PastPaper | None:
    return db.query(PastPaper).filter(PastPaper.id == paper_id, PastPaper.unit_code == unit_code).first()


def mark_past_paper_viewed(db: Session, paper_id: str, user_id: str) -> None:
    exists = (
        db.query(UserPaperView.id)
        .filter(UserPaperView.paper_id == paper_id, UserPaperView.user_id == user_id)
        .first()
    )
    if exists:
        return
    db.add(UserPaperView(paper_id=paper_id, user_id=user_id, viewed_at=datetime.utcnow()))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()


def delete_past_paper(db: Session, unit_code: str, paper_id: str, user_id: str) -> bool:
    paper = get_past_paper(db, unit_code, paper_id)
    if not paper or paper.user_id != user_id:
        return False
    db.query(UserPaperView).filter(UserPaperView.paper_id == paper.id).delete(synchronize_session=False)
    db.delete(paper)
    db.commit()
    return True


# ---------- Assignments ----------

def _assignments_with_completion(db: Session, user_id: str):
    return (
        db.query(Assignment, User, CompletedAssignment)
        .join(User, Assignment.user_id == User.id)
        .outerjoin(
            CompletedAssignment,
            and_(
                CompletedAssignment.assignment_id == Assignment.id,
                CompletedAssignment.user_id == user_id,
            ),
        )
    )


def list_assignments(
    db: Session, unit_code: str, user_id: str
) -> list[tuple[Assignment, User, CompletedAssignment | None]]:
    """Assignments of a unit by deadline, as (assignment, uploader, user's completion or None)."""
    return (
        _assignments_with_completion(db, user_id)
        .filter(Assignment.unit_code == unit_code)
        .order_by(Assignment.deadline)
        .all()
    )


def upcoming_deadlines(
    db: Session, user_id: str, limit: int = 5, now: datetime | None = None
) -> list[tuple[Assignment, User, CompletedAssignment | None]]:
    """Next `limit` assignments (any unit) whose deadline has not passed."""
    now = now or datetime.utcnow()
    return (
        _assignments_with_completion(db, user_id)
        .filter(Assignment.deadline >= now)
        .order_by(Assignment.deadline)
        .limit(limit)
        .all()
    )


def create_assignment(
    db: Session,
    unit_code: str,
    user_id: str,
    title: str,
    description: str,
    deadline: datetime,
    file_url: str | None,
) -> Assignment:
    assignment = Assignment(
        title=title,
        description=description,
        deadline=deadline,
        file_url=file_url,
        unit_code=unit_code,
        user_id=user_id,
    )
    db.add(assignment)
    db.commit()
    db.refresh(assignment)
    return assignment


def get_assignment(db: Session, unit_code: str, assignment_id: str) -> Assignment | None:
    return (
        db.query(Assignment)
        .filter(Assignment.id == assignment_id, Assignment.unit_code == unit_code)
        .first()
    )


def complete_assignment(db: Session, assignment_id: str, user_id: str) -> tuple[CompletedAssignment, bool]:
    """
    Record that user_id finished the assignment now.
    Returns (completion, already_completed). An existing completion is never moved.
    """
    existing = (
        db.query(CompletedAssignment)
        .filter(
            CompletedAssignment.assignment_id == assignment_id,
            CompletedAssignment.user_id == user_id,
        )
        .first()
    )
    if existing:
        return existing, True
    completion = CompletedAssignment(
        assignment_id=assignment_id,
        user_id=user_id,
        completed_at=datetime.utcnow(),
    )
    db.add(completion)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Duplicate completion for assignment %s by user %s", assignment_id, user_id)
        existing = (
            db.query(CompletedAssignment)
            .filter(
                CompletedAssignment.assignment_id == assignment_id,
                CompletedAssignment.user_id == user_id,
            )
            .one()
        )
        return existing, True
    db.refresh(completion)
    return completion, False


def delete_assignment(db: Session, unit_code: str, assignment_id: str, user_id: str) -> bool:
    assignment = get_assignment(db, unit_code, assignment_id)
    if not assignment or assignment.user_id != user_id:
        return False
    db.query(CompletedAssignment).filter(
        CompletedAssignment.assignment_id == assignment.id
    ).delete(synchronize_session=False)
    db.delete(assignment)
    db.commit()
    return True


# ---------- Activity feed ----------

def recent_activities(db: Session, user_id: str, limit: int = 10) -> list[dict]:
    """
    Latest completions, note views and paper views of one user, merged newest first.
    Returns list of {"id", "type", "title", "unit_code", "timestamp": datetime}.
    """
    completed = (
        db.query(CompletedAssignment.id, Assignment.title, Assignment.unit_code, CompletedAssignment.completed_at)
        .join(Assignment, CompletedAssignment.assignment_id == Assignment.id)
        .filter(CompletedAssignment.user_id == user_id)
        .order_by(desc(CompletedAssignment.completed_at))
        .limit(limit)
        .all()
    )
    notes = (
        db.query(UserNoteView.id, Note.title, Note.unit_code, UserNoteView.viewed_at)
        .join(Note, UserNoteView.note_id == Note.id)
        .filter(UserNoteView.user_id == user_id)
        .order_by(desc(UserNoteView.viewed_at))
        .limit(limit)
        .all()
    )
    papers = (
        db.query(UserPaperView.id, PastPaper.title, PastPaper.unit_code, UserPaperView.viewed_at)
        .join(PastPaper, UserPaperView.paper_id == PastPaper.id)
        .filter(UserPaperView.user_id == user_id)
        .order_by(desc(UserPaperView.viewed_at))
        .limit(limit)
        .all()
    )
    items = (
        [
            {"id": i, "type": "assignment", "title": f"Completed Assignment: {t}", "unit_code": u, "timestamp": ts}
            for i, t, u, ts in completed
        ]
        + [
            {"id": i, "type": "note", "title": f"Viewed Note: {t}", "unit_code": u, "timestamp": ts}
            for i, t, u, ts in notes
        ]
        + [
            {"id": i, "type": "pastpaper", "title": f"Downloaded: {t}", "unit_code": u, "timestamp": ts}
            for i, t, u, ts in papers
        ]
    )
    items.sort(key=lambda x: x["timestamp"], reverse=True)
    return items[:limit]
