from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import and_, func
from sqlalchemy.orm import Session

from ..core.config import get_settings
from ..core.enums import AthleteStatus, Position
from ..database import get_db
from ..dependencies import get_current_user, get_team_athlete
from ..engine.metrics import MENTAL, PHYSICAL, SLEEP, SLEEP_HOURS, metric_max_value
from ..models.assessment import Assessment, AssessmentMetric
from ..models.athlete import Athlete
from ..models.user import User
from ..schemas.dashboard import (
    CategoryMetric,
    CategorySnapshot,
    MetricSeries,
    PerformancePoint,
    PhysicalOverview,
    SleepOverview,
    TeamAthleteRow,
    TeamOverview,
)
from ..services.assessments import latest_assessment

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/athlete/{athlete_id}/performance", response_model=list[MetricSeries])
def athlete_performance(
    athlete_id: int,
    category: Optional[str] = Query(default=None),
    metric: Optional[str] = Query(default=None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[MetricSeries]:
    athlete = get_team_athlete(db, athlete_id, current_user)
    query = (
        db.query(Assessment.date, AssessmentMetric.category, AssessmentMetric.name, AssessmentMetric.value)
        .join(AssessmentMetric, AssessmentMetric.assessment_id == Assessment.id)
        .filter(Assessment.athlete_id == athlete.id)
    )
    if category:
        query = query.filter(AssessmentMetric.category == category)
    if metric:
        query = query.filter(AssessmentMetric.name == metric)
    rows = query.order_by(Assessment.date.asc()).all()

    grouped: dict[tuple[str, str], list[PerformancePoint]] = {}
    for row_date, row_category, row_metric, value in rows:
        points = grouped.setdefault((row_category, row_metric), [])
        change = 0.0
        if points and points[-1].value > 0:
            previous = points[-1].value
            change = round((value - previous) / previous * 100, 1)
        points.append(PerformancePoint(date=row_date, value=value, percentage_change=change))

    return [
        MetricSeries(category=key[0], metric=key[1], data=points)
        for key, points in grouped.items()
    ]


def _latest_category(db: Session, athlete_id: int, category: str) -> CategorySnapshot:
    assessment = latest_assessment(db, athlete_id)
    if assessment is None:
        return CategorySnapshot(date=None, metrics=[])
    metrics = [
        CategoryMetric(metric=m.name, value=m.value, max_value=metric_max_value(m.name))
        for m in assessment.metrics
        if m.category == category
    ]
    return CategorySnapshot(date=assessment.date, metrics=metrics)


@router.get("/athlete/{athlete_id}/physical", response_model=PhysicalOverview)
def athlete_physical(
    athlete_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> PhysicalOverview:
    athlete = get_team_athlete(db, athlete_id, current_user)
    snapshot = _latest_category(db, athlete.id, PHYSICAL)
    overall = 0
    if snapshot.metrics:
        total = sum(m.value for m in snapshot.metrics)
        overall = round(total / (len(snapshot.metrics) * 10) * 100)
    return PhysicalOverview(**snapshot.model_dump(), overall_score=overall)


@router.get("/athlete/{athlete_id}/mental", response_model=CategorySnapshot)
def athlete_mental(
    athlete_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> CategorySnapshot:
    athlete = get_team_athlete(db, athlete_id, current_user)
    return _latest_category(db, athlete.id, MENTAL)


@router.get("/athlete/{athlete_id}/sleep", response_model=SleepOverview)
def athlete_sleep(
    athlete_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> SleepOverview:
    athlete = get_team_athlete(db, athlete_id, current_user)
    snapshot = _latest_category(db, athlete.id, SLEEP)
    settings = get_settings()
    hours = next((m.value for m in snapshot.metrics if m.metric == SLEEP_HOURS), None)
    warning = None
    if hours is not None and hours < settings.sleep_warning_hours:
        warning = (
            f"Atlet kurang tidur! Disarankan minimal {settings.sleep_warning_hours}-9 jam per malam."
        )
    return SleepOverview(**snapshot.model_dump(), warning=warning)


@router.get("/team/overview", response_model=TeamOverview)
def team_overview(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> TeamOverview:
    athletes = (
        db.query(Athlete)
        .filter(Athlete.team_id == current_user.team_id)
        .order_by(Athlete.name)
        .all()
    )
    status_counts = {status.value: 0 for status in AthleteStatus}
    position_counts = {position.value: 0 for position in Position}
    for athlete in athletes:
        status_counts[athlete.status.value] += 1
        position_counts[athlete.position.value] += 1

    latest_dates = (
        db.query(Assessment.athlete_id, func.max(Assessment.date).label("latest"))
        .join(Athlete, Assessment.athlete_id == Athlete.id)
        .filter(Athlete.team_id == current_user.team_id)
        .group_by(Assessment.athlete_id)
        .subquery()
    )
    physical_values = [
        value
        for (value,) in db.query(AssessmentMetric.value)
        .join(Assessment, AssessmentMetric.assessment_id == Assessment.id)
        .join(
            latest_dates,
            and_(
                Assessment.athlete_id == latest_dates.c.athlete_id,
                Assessment.date == latest_dates.c.latest,
            ),
        )
        .filter(AssessmentMetric.category == PHYSICAL)
        .all()
    ]
    avg_fitness = 0
    if physical_values:
        avg_fitness = round(sum(physical_values) / len(physical_values) * 10)

    return TeamOverview(
        total_athletes=len(athletes),
        status_distribution=status_counts,
        position_distribution=position_counts,
        avg_team_fitness=avg_fitness,
        athletes=[TeamAthleteRow.model_validate(athlete) for athlete in athletes],
    )
