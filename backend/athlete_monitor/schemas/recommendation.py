from typing import Annotated, Optional

from pydantic import BaseModel, Field, StringConstraints

from ..core.enums import AthleteStatus, Position


CriteriaName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=60)]


class CriteriaWeightCreate(BaseModel):
    position: Position
    criteria_name: CriteriaName
    weight: float = Field(ge=0, le=1)


class CriteriaWeightUpdate(BaseModel):
    weight: float = Field(ge=0, le=1)


class CriteriaWeightRead(CriteriaWeightCreate):
    id: int

    model_config = {"from_attributes": True}


class CriteriaWeightListing(BaseModel):
    weights: list[CriteriaWeightRead]
    totals: dict[str, float]


class RecommendationRuleBase(BaseModel):
    priority: int = Field(ge=1)
    trigger_condition: str = Field(min_length=1)
    recommendation_text: str = Field(min_length=1)


class RecommendationRuleCreate(RecommendationRuleBase):
    pass


class RecommendationRuleUpdate(RecommendationRuleBase):
    pass


class RecommendationRuleRead(RecommendationRuleBase):
    id: int

    model_config = {"from_attributes": True}


class RuleBasedRecommendation(BaseModel):
    rule_id: Optional[int] = None
    priority: int
    recommendation: str

    model_config = {"from_attributes": True}


class TrainingSuggestion(BaseModel):
    exercise_id: int
    name: str
    type: str
    focus_area: str
    description: Optional[str] = None
    score: float

    model_config = {"from_attributes": True}


class AthleteBrief(BaseModel):
    id: int
    name: str
    status: AthleteStatus
    position: Position

    model_config = {"from_attributes": True}


class AthleteRecommendations(BaseModel):
    athlete: AthleteBrief
    rule_based: list[RuleBasedRecommendation]
    training_suggestions: list[TrainingSuggestion]


class TrainingSuggestions(BaseModel):
    recommendations: list[TrainingSuggestion]
