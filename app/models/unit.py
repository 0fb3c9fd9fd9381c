import uuid
from sqlalchemy import Column, String, Text
from app.database import Base


class Unit(Base):
    __tablename__ = "units"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    unit_code = Column(String(32), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(64), nullable=False)  # Mathematics, Statistics, Data Science, Humanities, ...
