from typing import Optional

from pydantic import BaseModel, Field


class ExerciseBase(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    type: str = Field(min_length=1, max_length=60)
    focus_area: str = Field(min_length=1, max_length=120)
    description: Optional[str] = None


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseRead(ExerciseBase):
    id: int

    model_config = {"from_attributes": True}


class TrainingProgramBase(BaseModel):
    frequency: Optional[str] = None
    intensity: Optional[str] = None
    time: Optional[str] = None
    type_fitt: Optional[str] = None
    volume: Optional[str] = None
    progression: Optional[str] = None
    sets: Optional[int] = Field(default=None, ge=0)
    reps: Optional[int] = Field(default=None, ge=0)


class TrainingProgramCreate(TrainingProgramBase):
    athlete_id: int
    exercise_id: int


class TrainingProgramRead(TrainingProgramBase):
    id: int
    athlete_id: int
    exercise: ExerciseRead

    model_config = {"from_attributes": True}
