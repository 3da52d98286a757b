import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.enums import AthleteStatus, UserRole
from ..core.errors import ValidationError
from ..database import get_db
from ..dependencies import get_current_user, get_team_athlete, require_role
from ..models.athlete import Athlete
from ..models.user import User
from ..schemas.athlete import (
    AthleteCreate,
    AthleteDetail,
    AthleteRead,
    AthleteStatusOverride,
    AthleteUpdate,
    LatestAssessmentSummary,
)
from ..services.assessments import latest_assessment

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/athletes", tags=["athletes"])


@router.get("", response_model=list[AthleteRead])
def list_athletes(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[Athlete]:
    return (
        db.query(Athlete)
        .filter(Athlete.team_id == current_user.team_id)
        .order_by(Athlete.name)
        .all()
    )


@router.post("", response_model=AthleteRead, status_code=status.HTTP_201_CREATED)
def create_athlete(
    payload: AthleteCreate,
    current_user: User = Depends(require_role(UserRole.COACH)),
    db: Session = Depends(get_db),
) -> Athlete:
    athlete = Athlete(
        team_id=current_user.team_id,
        name=payload.name,
        position=payload.position,
        status=AthleteStatus.FIT,
    )
    db.add(athlete)
    db.commit()
    db.refresh(athlete)
    return athlete


@router.get("/{athlete_id}", response_model=AthleteDetail)
def read_athlete(
    athlete_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> AthleteDetail:
    athlete = get_team_athlete(db, athlete_id, current_user)
    latest = latest_assessment(db, athlete.id)
    return AthleteDetail(
        **AthleteRead.model_validate(athlete).model_dump(),
        team_name=current_user.team.name,
        latest_assessment=LatestAssessmentSummary.model_validate(latest) if latest else None,
    )


@router.put("/{athlete_id}", response_model=AthleteRead)
def update_athlete(
    athlete_id: int,
    payload: AthleteUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Athlete:
    athlete = get_team_athlete(db, athlete_id, current_user)
    updates = payload.model_dump(exclude_unset=True, exclude_none=True)
    if not updates:
        raise ValidationError("No fields to update.")
    for field, value in updates.items():
        setattr(athlete, field, value)
    db.commit()
    db.refresh(athlete)
    return athlete


@router.put("/{athlete_id}/status", response_model=AthleteRead)
def override_status(
    athlete_id: int,
    payload: AthleteStatusOverride,
    current_user: User = Depends(require_role(UserRole.MEDICAL)),
    db: Session = Depends(get_db),
) -> Athlete:
    athlete = get_team_athlete(db, athlete_id, current_user)
    previous = athlete.status
    athlete.status = payload.status
    db.commit()
    db.refresh(athlete)
    logger.info(
        "Status of athlete %s manually changed from %s to %s by user %s",
        athlete.id,
        previous.value,
        payload.status.value,
        current_user.id,
    )
    return athlete


@router.delete("/{athlete_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_athlete(
    athlete_id: int,
    current_user: User = Depends(require_role(UserRole.COACH)),
    db: Session = Depends(get_db),
) -> None:
    athlete = get_team_athlete(db, athlete_id, current_user)
    db.delete(athlete)
    db.commit()
