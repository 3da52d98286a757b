"""Ranks the exercise catalog against position-specific criteria weights.

Matching policy: a weight contributes to an exercise when its criteria name is
contained in the exercise focus area, compared case-insensitively, so a
"Kekuatan" weight scores a "Kekuatan Kaki" exercise. Athletes in
rehabilitation have non-rehab exercises penalised, and scores never drop
below zero.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..core.enums import AthleteStatus
from ..core.errors import ConfigurationGapError

REHAB_TYPE_MARKER = "rehab"


@dataclass(frozen=True)
class ScoringPolicy:
    scale_factor: float = 10.0
    rehab_penalty: float = 5.0
    limit: int = 5


DEFAULT_POLICY = ScoringPolicy()


@dataclass(frozen=True)
class WeightedCriterion:
    criteria_name: str
    weight: float


@dataclass(frozen=True)
class ExerciseCandidate:
    exercise_id: int
    name: str
    type: str
    focus_area: str
    description: str | None = None


@dataclass(frozen=True)
class ScoredExercise:
    exercise_id: int
    name: str
    type: str
    focus_area: str
    description: str | None
    score: float


def criterion_matches(criteria_name: str, focus_area: str) -> bool:
    needle = criteria_name.strip().lower()
    # An empty name would be contained in every focus area.
    return bool(needle) and needle in focus_area.lower()


def score_exercise(
    exercise: ExerciseCandidate,
    weights: Iterable[WeightedCriterion],
    status: AthleteStatus,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> float:
    score = sum(
        criterion.weight * policy.scale_factor
        for criterion in weights
        if criterion_matches(criterion.criteria_name, exercise.focus_area)
    )
    if status == AthleteStatus.REHABILITASI and REHAB_TYPE_MARKER not in exercise.type.lower():
        score -= policy.rehab_penalty
    return round(max(score, 0.0), 4)


def recommend_training(
    position: str,
    status: AthleteStatus,
    weights: Sequence[WeightedCriterion],
    exercises: Iterable[ExerciseCandidate],
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> list[ScoredExercise]:
    """Top ``policy.limit`` exercises by score, ties kept in catalog order."""
    if not weights:
        raise ConfigurationGapError(position)

    scored = [
        ScoredExercise(
            exercise_id=exercise.exercise_id,
            name=exercise.name,
            type=exercise.type,
            focus_area=exercise.focus_area,
            description=exercise.description,
            score=score_exercise(exercise, weights, status, policy),
        )
        for exercise in exercises
    ]
    scored.sort(key=lambda item: item.score, reverse=True)
    return scored[: policy.limit]
