import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from app.database import Base


class UserRole(str, enum.Enum):
    TEACHER = "TEACHER"
    STUDENT = "STUDENT"


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    admission_number = Column(String(50), unique=True, nullable=False, index=True)
    profile_image_url = Column(String(512), nullable=True)
    role = Column(String(20), nullable=False, default=UserRole.STUDENT.value)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
