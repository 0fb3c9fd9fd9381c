from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.auth import get_current_user
from app.database import get_db
from app.models.unit import Unit
from app.models.user import User
from app.routers.units import get_unit_or_404
from app.schemas.ranking import RankingResponse, UserRankResponse
from app.services.ranking_service import RankingService

router = APIRouter(tags=["rankings"])


def get_ranking_service() -> RankingService:
    return RankingService()


@router.get("/api/units/{unit_code}/rankings", response_model=list[RankingResponse])
def unit_rankings(
    unit: Unit = Depends(get_unit_or_404),
    db: Session = Depends(get_db),
    _user=Depends(get_current_user),
    service: RankingService = Depends(get_ranking_service),
):
    """Leaderboard for one unit: fastest average completion first. Empty list = no rankings yet."""
    return [RankingResponse.from_entry(e) for e in service.unit_rankings(db, unit.unit_code)]


@router.get("/api/rankings/overall", response_model=list[RankingResponse])
def overall_rankings(
    db: Session = Depends(get_db),
    _user=Depends(get_current_user),
    service: RankingService = Depends(get_ranking_service),
):
    """Leaderboard across all units."""
    return [RankingResponse.from_entry(e) for e in service.overall_rankings(db)]


@router.get("/api/rankings/me", response_model=UserRankResponse)
def my_overall_rank(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
    service: RankingService = Depends(get_ranking_service),
):
    """Current user's position on the overall leaderboard (null if no completions yet)."""
    return UserRankResponse(user_id=user.id, position=service.user_overall_position(db, user.id))
