from app.models.user import User, UserRole
from app.models.unit import Unit
from app.models.note import Note, UserNoteView
from app.models.assignment import Assignment, CompletedAssignment
from app.models.past_paper import PastPaper, UserPaperView

__all__ = [
    "User", "UserRole", "Unit", "Note", "UserNoteView",
    "Assignment", "CompletedAssignment", "PastPaper", "UserPaperView",
]
