from pydantic import BaseModel
from app.ranking import RankingEntry


class RecentCompletionResponse(BaseModel):
    assignment_id: str
    title: str
    completed_at: str
    completion_ms: int
    completion_time: str


class RankingResponse(BaseModel):
    user_id: str
    name: str
    profile_image_url: str | None
    position: int
    completed_assignments: int
    average_completion_ms: float
    average_completion_time: str
    recent_completions: list[RecentCompletionResponse]

    @classmethod
    def from_entry(cls, entry: RankingEntry) -> "RankingResponse":
        return cls(
            user_id=entry.user_id,
            name=entry.name,
            profile_image_url=entry.profile_image_url,
            position=entry.position,
            completed_assignments=entry.completed_assignments,
            average_completion_ms=float(entry.average_latency_ms),
            average_completion_time=entry.average_completion_time,
            recent_completions=[
                RecentCompletionResponse(
                    assignment_id=c.assignment_id,
                    title=c.title,
                    completed_at=c.completed_at.isoformat(),
                    completion_ms=c.latency_ms,
                    completion_time=c.completion_time,
                )
                for c in entry.recent_completions
            ],
        )


class UserRankResponse(BaseModel):
    user_id: str
    position: int | None
