from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.auth import get_current_user
from app.database import get_db
from app.models.past_paper import PastPaper
from app.models.unit import Unit
from app.models.user import User
from app.repositories import portal_repository as repo
from app.routers.units import get_unit_or_404
from app.schemas.material import PastPaperCreate, PastPaperResponse

router = APIRouter(prefix="/api/units/{unit_code}/pastpapers", tags=["pastpapers"])


def _paper_response(paper: PastPaper, uploader: User, viewed: bool) -> PastPaperResponse:
    return PastPaperResponse(
        id=paper.id,
        title=paper.title,
        description=paper.description,
        year=paper.year,
        file_url=paper.file_url,
        unit_code=paper.unit_code,
        created_at=paper.created_at.isoformat(),
        uploaded_by=uploader.name,
        uploader_image_url=uploader.profile_image_url,
        viewed=viewed,
    )


@router.get("", response_model=list[PastPaperResponse])
def list_past_papers(
    unit: Unit = Depends(get_unit_or_404),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return [_paper_response(p, u, v) for p, u, v in repo.list_past_papers(db, unit.unit_code, user.id)]


@router.post("", response_model=PastPaperResponse, status_code=status.HTTP_201_CREATED)
def create_past_paper(
    body: PastPaperCreate,
    unit: Unit = Depends(get_unit_or_404),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    paper = repo.create_past_paper(
        db,
        unit_code=unit.unit_code,
        user_id=user.id,
        title=body.title,
        description=body.description,
        year=body.year.strip(),
        file_url=(body.file_url or "").strip() or None,
    )
    return _paper_response(paper, user, False)


@router.post("/{paper_id}/view")
def mark_past_paper_viewed(
    paper_id: str,
    unit: Unit = Depends(get_unit_or_404),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    if not repo.get_past_paper(db, unit.unit_code, paper_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Past paper not found")
    repo.mark_past_paper_viewed(db, paper_id, user.id)
    return {"success": True}


@router.delete("/{paper_id}")
def delete_past_paper(
    paper_id: str,
    unit: Unit = Depends(get_unit_or_404),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    if not repo.delete_past_paper(db, unit.unit_code, paper_id, user.id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Past paper not found or you don't have permission to delete it",
        )
    return {"success": True}
