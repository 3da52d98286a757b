import pytest

from athlete_monitor.core.enums import AthleteStatus, Position
from athlete_monitor.core.errors import ConfigurationGapError
from athlete_monitor.engine.recommender import (
    ExerciseCandidate,
    ScoringPolicy,
    WeightedCriterion,
    recommend_training,
    score_exercise,
)

SPRINT = ExerciseCandidate(1, "Sprint 100m", "Cardio", "Kecepatan", "Latihan sprint jarak pendek")
SQUAT = ExerciseCandidate(2, "Squat", "Strength", "Kekuatan Kaki", "Latihan kekuatan otot kaki")
PLANK = ExerciseCandidate(3, "Plank", "Core", "Keseimbangan", "Latihan stabilitas core")
STRETCH = ExerciseCandidate(4, "Yoga Stretch", "Flexibility", "Fleksibilitas", None)
REHAB_WALK = ExerciseCandidate(5, "Aqua Walk", "Rehab Cardio", "Daya Tahan", None)

WEIGHTS = [
    WeightedCriterion("Kecepatan", 0.25),
    WeightedCriterion("Kekuatan", 0.2),
    WeightedCriterion("Daya Tahan", 0.2),
    WeightedCriterion("Fleksibilitas", 0.15),
    WeightedCriterion("Keseimbangan", 0.1),
]


def test_single_matching_weight_scores_weight_times_scale():
    score = score_exercise(SPRINT, [WeightedCriterion("Kecepatan", 0.25)], AthleteStatus.FIT)
    assert score == 2.5


def test_focus_area_matches_by_case_insensitive_containment():
    assert score_exercise(SQUAT, [WeightedCriterion("kekuatan", 0.2)], AthleteStatus.FIT) == 2.0
    assert score_exercise(SQUAT, [WeightedCriterion("Kaki Kuat", 0.2)], AthleteStatus.FIT) == 0.0


def test_rehabilitation_penalty_spares_rehab_exercises():
    weights = [WeightedCriterion("Daya Tahan", 0.8), WeightedCriterion("Kecepatan", 0.9)]
    assert score_exercise(REHAB_WALK, weights, AthleteStatus.REHABILITASI) == 8.0
    assert score_exercise(SPRINT, weights, AthleteStatus.REHABILITASI) == 4.0


def test_negative_scores_clamp_to_zero():
    assert score_exercise(PLANK, WEIGHTS, AthleteStatus.REHABILITASI) == 0.0


def test_ranking_is_descending_and_limited():
    catalog = [PLANK, STRETCH, SPRINT, SQUAT, REHAB_WALK]
    ranked = recommend_training(
        Position.STRIKER, AthleteStatus.FIT, WEIGHTS, catalog, ScoringPolicy(limit=3)
    )
    assert [item.name for item in ranked] == ["Sprint 100m", "Squat", "Aqua Walk"]
    assert [item.score for item in ranked] == [2.5, 2.0, 2.0]


def test_ranking_carries_exercise_fields():
    (top,) = recommend_training(
        Position.STRIKER, AthleteStatus.FIT, WEIGHTS, [SPRINT], ScoringPolicy(limit=5)
    )
    assert (top.exercise_id, top.type, top.focus_area, top.description) == (
        1,
        "Cardio",
        "Kecepatan",
        "Latihan sprint jarak pendek",
    )


def test_ranking_is_idempotent():
    catalog = [PLANK, STRETCH, SPRINT, SQUAT, REHAB_WALK]
    first = recommend_training(Position.DEFENDER, AthleteStatus.FIT, WEIGHTS, catalog)
    second = recommend_training(Position.DEFENDER, AthleteStatus.FIT, WEIGHTS, catalog)
    assert first == second


def test_scale_factor_is_configurable():
    policy = ScoringPolicy(scale_factor=100.0)
    assert score_exercise(SPRINT, WEIGHTS, AthleteStatus.PRIMA, policy) == 25.0


def test_missing_weights_signal_configuration_gap():
    with pytest.raises(ConfigurationGapError) as excinfo:
        recommend_training(Position.GOALKEEPER, AthleteStatus.FIT, [], [SPRINT])
    assert "Goalkeeper" in str(excinfo.value)


def test_blank_criteria_name_matches_nothing():
    blank = [WeightedCriterion("   ", 1.0), WeightedCriterion("", 1.0)]
    assert score_exercise(SPRINT, blank, AthleteStatus.FIT) == 0.0
