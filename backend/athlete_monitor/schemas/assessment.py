import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..core.enums import AthleteStatus
from ..engine.metrics import validate_snapshot


class AssessmentCreate(BaseModel):
    athlete_id: int
    date: dt.date
    weight_kg: Optional[float] = Field(default=None, gt=0)
    notes: Optional[str] = None
    metrics: dict[str, dict[str, int]]

    @field_validator("metrics")
    @classmethod
    def _check_snapshot(cls, value: dict[str, dict[str, int]]) -> dict[str, dict[str, int]]:
        validate_snapshot(value)
        return value


class AssessmentCreated(BaseModel):
    assessment_id: int
    status: AthleteStatus


class MetricRead(BaseModel):
    category: str
    name: str
    value: int

    model_config = {"from_attributes": True}


class AssessmentRead(BaseModel):
    id: int
    athlete_id: int
    author_id: int
    assessor_name: str
    date: dt.date
    weight_kg: Optional[float] = None
    notes: Optional[str] = None
    metrics: list[MetricRead]
