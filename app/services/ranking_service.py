"""
Leaderboard orchestration: load records through the repository, rank them with
the pure engine. Database errors propagate to the caller unchanged.
"""
import logging

from sqlalchemy.orm import Session

from app.config import get_settings
from app.ranking import RankingEntry, compute_overall_rankings, compute_unit_rankings
from app.repositories.ranking_repository import RankingRepository

logger = logging.getLogger(__name__)


class RankingService:
    def __init__(self, repository: RankingRepository | None = None):
        self._repo = repository or RankingRepository()
        self._recent_limit = get_settings().recent_completions_limit

    def unit_rankings(self, db: Session, unit_code: str) -> list[RankingEntry]:
        assignments = self._repo.fetch_unit_assignments(db, unit_code)
        if not assignments:
            return []
        completions = self._repo.fetch_unit_completions(db, unit_code)
        entries = compute_unit_rankings(assignments, completions, self._recent_limit)
        logger.debug(
            "Ranked unit %s: %s assignments, %s completions, %s users",
            unit_code, len(assignments), len(completions), len(entries),
        )
        return entries

    def overall_rankings(self, db: Session) -> list[RankingEntry]:
        assignments = self._repo.fetch_all_assignments(db)
        completions = self._repo.fetch_all_completions(db)
        return compute_overall_rankings(assignments, completions, self._recent_limit)

    def user_overall_position(self, db: Session, user_id: str) -> int | None:
        """1-based position on the cross-unit leaderboard, None if the user has no completions."""
        for entry in self.overall_rankings(db):
            if entry.user_id == user_id:
                return entry.position
        return None
