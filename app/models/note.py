import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text, ForeignKey, UniqueConstraint
from app.database import Base


class Note(Base):
    __tablename__ = "notes"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    file_url = Column(String(512), nullable=True)
    unit_code = Column(String(32), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)  # uploader
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class UserNoteView(Base):
    """First time a user opened a note. One row per (note, user)."""
    __tablename__ = "user_note_views"
    __table_args__ = (UniqueConstraint("note_id", "user_id", name="unique_note_view"),)

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    note_id = Column(String(36), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    viewed_at = Column(DateTime, nullable=False, default=datetime.utcnow)
