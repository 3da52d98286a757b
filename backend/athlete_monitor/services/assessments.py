import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.enums import AthleteStatus
from ..core.errors import ConflictError
from ..engine.classifier import classify_status
from ..models.assessment import Assessment, AssessmentMetric
from ..models.athlete import Athlete
from ..models.user import User
from ..schemas.assessment import AssessmentCreate

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Assessment already exists for this athlete on the selected date."


def submit_assessment(
    db: Session, athlete: Athlete, author: User, payload: AssessmentCreate
) -> tuple[Assessment, AthleteStatus]:
    """Store an assessment and refresh the athlete's cached status in one transaction.

    The cached status follows the most recent assessment only, so a back-dated
    submission is recorded without touching it.
    """
    existing = (
        db.query(Assessment.id)
        .filter(Assessment.athlete_id == athlete.id, Assessment.date == payload.date)
        .first()
    )
    if existing:
        raise ConflictError(DUPLICATE_MESSAGE)

    assessment = Assessment(
        athlete_id=athlete.id,
        author_id=author.id,
        date=payload.date,
        weight_kg=payload.weight_kg,
        notes=payload.notes,
    )
    for category, metrics in payload.metrics.items():
        for name, value in metrics.items():
            assessment.metrics.append(AssessmentMetric(category=category, name=name, value=value))

    status = classify_status(payload.metrics)
    if athlete.last_assessment_date is None or payload.date >= athlete.last_assessment_date:
        athlete.status = status
        athlete.last_assessment_date = payload.date

    db.add(assessment)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(DUPLICATE_MESSAGE) from None
    db.refresh(assessment)
    logger.info(
        "Recorded assessment %s for athlete %s on %s (status %s)",
        assessment.id,
        athlete.id,
        payload.date.isoformat(),
        status.value,
    )
    return assessment, status


def latest_assessment(db: Session, athlete_id: int) -> Optional[Assessment]:
    return (
        db.query(Assessment)
        .filter(Assessment.athlete_id == athlete_id)
        .order_by(Assessment.date.desc(), Assessment.id.desc())
        .first()
    )
