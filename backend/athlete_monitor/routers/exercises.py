from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.enums import UserRole
from ..core.errors import NotFoundError
from ..database import get_db
from ..dependencies import get_current_user, get_team_athlete, require_role
from ..models.exercise import Exercise, TrainingProgram
from ..models.user import User
from ..schemas.exercise import (
    ExerciseCreate,
    ExerciseRead,
    TrainingProgramCreate,
    TrainingProgramRead,
)

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("", response_model=list[ExerciseRead])
def list_exercises(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[Exercise]:
    return db.query(Exercise).order_by(Exercise.name).all()


@router.post("", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
def create_exercise(
    payload: ExerciseCreate,
    current_user: User = Depends(require_role(UserRole.MEDICAL)),
    db: Session = Depends(get_db),
) -> Exercise:
    exercise = Exercise(**payload.model_dump())
    db.add(exercise)
    db.commit()
    db.refresh(exercise)
    return exercise


@router.get("/programs/athlete/{athlete_id}", response_model=list[TrainingProgramRead])
def list_athlete_programs(
    athlete_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[TrainingProgram]:
    athlete = get_team_athlete(db, athlete_id, current_user)
    return (
        db.query(TrainingProgram)
        .filter(TrainingProgram.athlete_id == athlete.id)
        .order_by(TrainingProgram.id)
        .all()
    )


@router.post("/programs", response_model=TrainingProgramRead, status_code=status.HTTP_201_CREATED)
def create_program(
    payload: TrainingProgramCreate,
    current_user: User = Depends(require_role(UserRole.MEDICAL)),
    db: Session = Depends(get_db),
) -> TrainingProgram:
    get_team_athlete(db, payload.athlete_id, current_user)
    if not db.get(Exercise, payload.exercise_id):
        raise NotFoundError("Exercise not found.")
    program = TrainingProgram(**payload.model_dump())
    db.add(program)
    db.commit()
    db.refresh(program)
    return program
