from collections import defaultdict
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..core.enums import Position, UserRole
from ..core.errors import NotFoundError
from ..database import get_db
from ..dependencies import require_role
from ..models.recommendation import CriteriaWeight
from ..models.user import User
from ..schemas.recommendation import (
    CriteriaWeightCreate,
    CriteriaWeightListing,
    CriteriaWeightRead,
    CriteriaWeightUpdate,
)

router = APIRouter(prefix="/criteria-weights", tags=["criteria-weights"])


def _get_weight(db: Session, weight_id: int) -> CriteriaWeight:
    weight = db.get(CriteriaWeight, weight_id)
    if not weight:
        raise NotFoundError("Criteria weight not found.")
    return weight


@router.get("", response_model=CriteriaWeightListing)
def list_weights(
    position: Optional[Position] = Query(default=None),
    current_user: User = Depends(require_role(UserRole.MEDICAL)),
    db: Session = Depends(get_db),
) -> CriteriaWeightListing:
    query = db.query(CriteriaWeight)
    if position is not None:
        query = query.filter(CriteriaWeight.position == position)
    weights = query.order_by(CriteriaWeight.position, CriteriaWeight.criteria_name).all()
    # Totals are informational; weights per position are not required to sum to 1.
    totals: dict[str, float] = defaultdict(float)
    for weight in weights:
        totals[weight.position.value] += weight.weight
    return CriteriaWeightListing(
        weights=[CriteriaWeightRead.model_validate(weight) for weight in weights],
        totals={key: round(value, 4) for key, value in totals.items()},
    )


@router.post("", response_model=CriteriaWeightRead, status_code=status.HTTP_201_CREATED)
def create_weight(
    payload: CriteriaWeightCreate,
    current_user: User = Depends(require_role(UserRole.MEDICAL)),
    db: Session = Depends(get_db),
) -> CriteriaWeight:
    weight = CriteriaWeight(**payload.model_dump())
    db.add(weight)
    db.commit()
    db.refresh(weight)
    return weight


@router.put("/{weight_id}", response_model=CriteriaWeightRead)
def update_weight(
    weight_id: int,
    payload: CriteriaWeightUpdate,
    current_user: User = Depends(require_role(UserRole.MEDICAL)),
    db: Session = Depends(get_db),
) -> CriteriaWeight:
    weight = _get_weight(db, weight_id)
    weight.weight = payload.weight
    db.commit()
    db.refresh(weight)
    return weight


@router.delete("/{weight_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_weight(
    weight_id: int,
    current_user: User = Depends(require_role(UserRole.MEDICAL)),
    db: Session = Depends(get_db),
) -> None:
    weight = _get_weight(db, weight_id)
    db.delete(weight)
    db.commit()
