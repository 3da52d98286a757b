from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.enums import UserRole
from ..core.errors import NotFoundError
from ..database import get_db
from ..dependencies import require_role
from ..models.recommendation import RecommendationRule
from ..models.user import User
from ..schemas.recommendation import (
    RecommendationRuleCreate,
    RecommendationRuleRead,
    RecommendationRuleUpdate,
)

router = APIRouter(prefix="/recommendation-rules", tags=["recommendation-rules"])


def _get_rule(db: Session, rule_id: int) -> RecommendationRule:
    rule = db.get(RecommendationRule, rule_id)
    if not rule:
        raise NotFoundError("Recommendation rule not found.")
    return rule


@router.get("", response_model=list[RecommendationRuleRead])
def list_rules(
    current_user: User = Depends(require_role(UserRole.MEDICAL)),
    db: Session = Depends(get_db),
) -> list[RecommendationRule]:
    return db.query(RecommendationRule).order_by(RecommendationRule.priority, RecommendationRule.id).all()


@router.post("", response_model=RecommendationRuleRead, status_code=status.HTTP_201_CREATED)
def create_rule(
    payload: RecommendationRuleCreate,
    current_user: User = Depends(require_role(UserRole.MEDICAL)),
    db: Session = Depends(get_db),
) -> RecommendationRule:
    rule = RecommendationRule(**payload.model_dump())
    db.add(rule)
    db.commit()
    db.refresh(rule)
    return rule


@router.put("/{rule_id}", response_model=RecommendationRuleRead)
def update_rule(
    rule_id: int,
    payload: RecommendationRuleUpdate,
    current_user: User = Depends(require_role(UserRole.MEDICAL)),
    db: Session = Depends(get_db),
) -> RecommendationRule:
    rule = _get_rule(db, rule_id)
    for field, value in payload.model_dump().items():
        setattr(rule, field, value)
    db.commit()
    db.refresh(rule)
    return rule


@router.delete("/{rule_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_rule(
    rule_id: int,
    current_user: User = Depends(require_role(UserRole.MEDICAL)),
    db: Session = Depends(get_db),
) -> None:
    rule = _get_rule(db, rule_id)
    db.delete(rule)
    db.commit()
