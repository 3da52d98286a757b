import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.errors import ConfigurationGapError
from ..database import get_db
from ..dependencies import get_current_user, get_team_athlete
from ..models.user import User
from ..schemas.recommendation import (
    AthleteBrief,
    AthleteRecommendations,
    RuleBasedRecommendation,
    TrainingSuggestion,
    TrainingSuggestions,
)
from ..services.recommendations import evaluate_recommendations, recommend_athlete_training

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


@router.get("/athlete/{athlete_id}", response_model=AthleteRecommendations)
def athlete_recommendations(
    athlete_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> AthleteRecommendations:
    athlete = get_team_athlete(db, athlete_id, current_user)
    matches = evaluate_recommendations(db, athlete.id)
    try:
        suggestions = recommend_athlete_training(db, athlete)
    except ConfigurationGapError as exc:
        logger.warning("No training suggestions for athlete %s: %s", athlete.id, exc.message)
        suggestions = []
    return AthleteRecommendations(
        athlete=AthleteBrief.model_validate(athlete),
        rule_based=[RuleBasedRecommendation.model_validate(match) for match in matches],
        training_suggestions=[TrainingSuggestion.model_validate(item) for item in suggestions],
    )


@router.get("/athlete/{athlete_id}/training", response_model=TrainingSuggestions)
def athlete_training_suggestions(
    athlete_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> TrainingSuggestions:
    athlete = get_team_athlete(db, athlete_id, current_user)
    suggestions = recommend_athlete_training(db, athlete)
    return TrainingSuggestions(
        recommendations=[TrainingSuggestion.model_validate(item) for item in suggestions]
    )
