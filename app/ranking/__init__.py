from app.ranking.engine import (
    AssignmentRecord,
    CompletionRecord,
    RankingEntry,
    RecentCompletion,
    compute_overall_rankings,
    compute_unit_rankings,
)

__all__ = [
    "AssignmentRecord", "CompletionRecord", "RankingEntry", "RecentCompletion",
    "compute_overall_rankings", "compute_unit_rankings",
]
