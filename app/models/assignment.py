import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text, ForeignKey, UniqueConstraint
from app.database import Base


class Assignment(Base):
    __tablename__ = "assignments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    deadline = Column(DateTime, nullable=False)
    file_url = Column(String(512), nullable=True)
    unit_code = Column(String(32), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    # Latency for the leaderboard is measured from here; never updated after insert.
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class CompletedAssignment(Base):
    """A user finished an assignment. At most one row per (assignment, user)."""
    __tablename__ = "completed_assignments"
    __table_args__ = (UniqueConstraint("assignment_id", "user_id", name="unique_completion"),)

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    assignment_id = Column(String(36), ForeignKey("assignments.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    completed_at = Column(DateTime, nullable=False, default=datetime.utcnow)
