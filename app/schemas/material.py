from datetime import datetime
from pydantic import BaseModel, Field


class NoteCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    file_url: str | None = None


class NoteResponse(BaseModel):
    """Note as seen by the caller: viewed is per-user."""
    id: str
    title: str
    description: str
    file_url: str | None
    unit_code: str
    created_at: str
    uploaded_by: str
    uploader_image_url: str | None
    viewed: bool


class PastPaperCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    year: str = Field(min_length=1)
    file_url: str | None = None


class PastPaperResponse(BaseModel):
    id: str
    title: str
    description: str
    year: str
    file_url: str | None
    unit_code: str
    created_at: str
    uploaded_by: str
    uploader_image_url: str | None
    viewed: bool


class AssignmentCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    deadline: datetime
    file_url: str | None = None


class AssignmentResponse(BaseModel):
    """Assignment as seen by the caller: completed/completed_at are per-user."""
    id: str
    title: str
    description: str
    deadline: str
    file_url: str | None
    unit_code: str
    created_at: str
    uploaded_by: str
    completed: bool
    completed_at: str | None = None


class CompletionResponse(BaseModel):
    already_completed: bool
    assignment_id: str
    completed_at: str | None = None
