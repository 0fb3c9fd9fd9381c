from pydantic import BaseModel


class ActivityResponse(BaseModel):
    id: str
    type: str  # "assignment" | "note" | "pastpaper"
    title: str
    unit_code: str
    timestamp: str
