from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.enums import UserRole
from ..core.errors import NotFoundError
from ..database import get_db
from ..dependencies import get_current_user, get_team_athlete, require_role
from ..engine.metrics import METRIC_SCHEMA
from ..models.assessment import Assessment
from ..models.athlete import Athlete
from ..models.user import User
from ..schemas.assessment import AssessmentCreate, AssessmentCreated, AssessmentRead, MetricRead
from ..services.assessments import submit_assessment

router = APIRouter(prefix="/assessments", tags=["assessments"])


def _to_read(assessment: Assessment) -> AssessmentRead:
    return AssessmentRead(
        id=assessment.id,
        athlete_id=assessment.athlete_id,
        author_id=assessment.author_id,
        assessor_name=assessment.author.name,
        date=assessment.date,
        weight_kg=assessment.weight_kg,
        notes=assessment.notes,
        metrics=[MetricRead.model_validate(metric) for metric in assessment.metrics],
    )


@router.get("/metrics/structure", response_model=dict[str, list[str]])
def metric_structure(current_user: User = Depends(get_current_user)) -> dict[str, list[str]]:
    return {category: list(names) for category, names in METRIC_SCHEMA.items()}


@router.post("", response_model=AssessmentCreated, status_code=status.HTTP_201_CREATED)
def create_assessment(
    payload: AssessmentCreate,
    current_user: User = Depends(require_role(UserRole.MEDICAL)),
    db: Session = Depends(get_db),
) -> AssessmentCreated:
    athlete = get_team_athlete(db, payload.athlete_id, current_user)
    assessment, athlete_status = submit_assessment(db, athlete, current_user, payload)
    return AssessmentCreated(assessment_id=assessment.id, status=athlete_status)


@router.get("/athlete/{athlete_id}", response_model=list[AssessmentRead])
def list_athlete_assessments(
    athlete_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[AssessmentRead]:
    athlete = get_team_athlete(db, athlete_id, current_user)
    assessments = (
        db.query(Assessment)
        .filter(Assessment.athlete_id == athlete.id)
        .order_by(Assessment.date.desc())
        .all()
    )
    return [_to_read(assessment) for assessment in assessments]


@router.get("/{assessment_id}", response_model=AssessmentRead)
def read_assessment(
    assessment_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> AssessmentRead:
    assessment = (
        db.query(Assessment)
        .join(Athlete, Assessment.athlete_id == Athlete.id)
        .filter(Assessment.id == assessment_id, Athlete.team_id == current_user.team_id)
        .first()
    )
    if not assessment:
        raise NotFoundError("Assessment not found.")
    return _to_read(assessment)
