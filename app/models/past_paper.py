import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text, ForeignKey, UniqueConstraint
from app.database import Base


class PastPaper(Base):
    __tablename__ = "past_papers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    year = Column(String(10), nullable=False)
    file_url = Column(String(512), nullable=True)
    unit_code = Column(String(32), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class UserPaperView(Base):
    """First time a user opened/downloaded a past paper. One row per (paper, user)."""
    __tablename__ = "user_paper_views"
    __table_args__ = (UniqueConstraint("paper_id", "user_id", name="unique_paper_view"),)

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    paper_id = Column(String(36), ForeignKey("past_papers.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    viewed_at = Column(DateTime, nullable=False, default=datetime.utcnow)
