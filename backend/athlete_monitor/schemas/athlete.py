import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from ..core.enums import AthleteStatus, Position


class AthleteCreate(BaseModel):
    name: str = Field(min_length=1, max_length=150)
    position: Position


class AthleteUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=150)
    position: Optional[Position] = None


class AthleteStatusOverride(BaseModel):
    status: AthleteStatus


class AthleteRead(BaseModel):
    id: int
    team_id: int
    name: str
    position: Position
    status: AthleteStatus
    last_assessment_date: Optional[dt.date] = None

    model_config = {"from_attributes": True}


class LatestAssessmentSummary(BaseModel):
    id: int
    date: dt.date
    weight_kg: Optional[float] = None
    notes: Optional[str] = None

    model_config = {"from_attributes": True}


class AthleteDetail(AthleteRead):
    team_name: str
    latest_assessment: Optional[LatestAssessmentSummary] = None
