from .user import Team, User
from .athlete import Athlete
from .assessment import Assessment, AssessmentMetric
from .exercise import Exercise, TrainingProgram
from .recommendation import CriteriaWeight, RecommendationRule

__all__ = [
    "Team",
    "User",
    "Athlete",
    "Assessment",
    "AssessmentMetric",
    "Exercise",
    "TrainingProgram",
    "CriteriaWeight",
    "RecommendationRule",
]
