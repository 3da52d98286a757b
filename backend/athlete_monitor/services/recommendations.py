from sqlalchemy.orm import Session

from ..core.config import Settings, get_settings
from ..engine.metrics import flatten_snapshot
from ..engine.recommender import (
    ExerciseCandidate,
    ScoredExercise,
    ScoringPolicy,
    WeightedCriterion,
    recommend_training,
)
from ..engine.rules import RuleDefinition, RuleMatch, evaluate_rules
from ..models.athlete import Athlete
from ..models.exercise import Exercise
from ..models.recommendation import CriteriaWeight, RecommendationRule
from .assessments import latest_assessment


def load_rules(db: Session) -> list[RuleDefinition]:
    rows = db.query(RecommendationRule).order_by(RecommendationRule.id).all()
    return [
        RuleDefinition(
            rule_id=row.id,
            priority=row.priority,
            trigger_condition=row.trigger_condition,
            recommendation_text=row.recommendation_text,
        )
        for row in rows
    ]


def evaluate_recommendations(db: Session, athlete_id: int) -> list[RuleMatch]:
    """Match every rule against the athlete's most recent assessment."""
    assessment = latest_assessment(db, athlete_id)
    if assessment is None:
        return []
    metric_map = flatten_snapshot(assessment.snapshot())
    return evaluate_rules(load_rules(db), metric_map)


def scoring_policy(settings: Settings) -> ScoringPolicy:
    return ScoringPolicy(
        scale_factor=settings.recommendation_scale_factor,
        rehab_penalty=settings.recommendation_rehab_penalty,
        limit=settings.recommendation_limit,
    )


def recommend_athlete_training(
    db: Session, athlete: Athlete, settings: Settings | None = None
) -> list[ScoredExercise]:
    settings = settings or get_settings()
    weights = (
        db.query(CriteriaWeight)
        .filter(CriteriaWeight.position == athlete.position)
        .order_by(CriteriaWeight.criteria_name)
        .all()
    )
    exercises = db.query(Exercise).order_by(Exercise.id).all()
    return recommend_training(
        athlete.position,
        athlete.status,
        [WeightedCriterion(w.criteria_name, w.weight) for w in weights],
        [
            ExerciseCandidate(
                exercise_id=e.id,
                name=e.name,
                type=e.type,
                focus_area=e.focus_area,
                description=e.description,
            )
            for e in exercises
        ],
        scoring_policy(settings),
    )
