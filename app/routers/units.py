from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.auth import get_current_user, get_current_user_teacher
from app.database import get_db
from app.models.unit import Unit
from app.repositories import portal_repository as repo
from app.schemas.unit import UnitCreate, UnitResponse

router = APIRouter(prefix="/api/units", tags=["units"])


def get_unit_or_404(unit_code: str, db: Session = Depends(get_db)) -> Unit:
    """Path dependency: resolve {unit_code} or 404."""
    unit = repo.get_unit(db, unit_code)
    if not unit:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unit not found")
    return unit


@router.get("", response_model=list[UnitResponse])
def list_units(
    db: Session = Depends(get_db),
    _user=Depends(get_current_user),
):
    return [UnitResponse.model_validate(u) for u in repo.list_units(db)]


@router.post("", response_model=UnitResponse, status_code=status.HTTP_201_CREATED)
def create_unit(
    body: UnitCreate,
    db: Session = Depends(get_db),
    _user=Depends(get_current_user_teacher),
):
    """Teacher only. unit_code must be unique."""
    unit_code = body.unit_code.strip()
    name = body.name.strip()
    category = body.category.strip()
    if not unit_code or not name or not category:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="unit_code, name and category must not be blank",
        )
    unit = repo.create_unit(
        db,
        unit_code=unit_code,
        name=name,
        category=category,
        description=(body.description or "").strip() or None,
    )
    if not unit:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Unit code already exists")
    return UnitResponse.model_validate(unit)


@router.get("/{unit_code}", response_model=UnitResponse)
def get_unit(
    unit: Unit = Depends(get_unit_or_404),
    _user=Depends(get_current_user),
):
    return UnitResponse.model_validate(unit)
