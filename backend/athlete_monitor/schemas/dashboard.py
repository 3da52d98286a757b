import datetime as dt
from typing import Optional

from pydantic import BaseModel

from ..core.enums import AthleteStatus, Position


class PerformancePoint(BaseModel):
    date: dt.date
    value: int
    percentage_change: float


class MetricSeries(BaseModel):
    category: str
    metric: str
    data: list[PerformancePoint]


class CategoryMetric(BaseModel):
    metric: str
    value: int
    max_value: int


class CategorySnapshot(BaseModel):
    date: Optional[dt.date] = None
    metrics: list[CategoryMetric]


class PhysicalOverview(CategorySnapshot):
    overall_score: int


class SleepOverview(CategorySnapshot):
    warning: Optional[str] = None


class TeamAthleteRow(BaseModel):
    id: int
    name: str
    position: Position
    status: AthleteStatus
    last_assessment_date: Optional[dt.date] = None

    model_config = {"from_attributes": True}


class TeamOverview(BaseModel):
    total_athletes: int
    status_distribution: dict[str, int]
    position_distribution: dict[str, int]
    avg_team_fitness: int
    athletes: list[TeamAthleteRow]
