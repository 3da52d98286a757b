from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..database import Base
from .athlete import Athlete


class Exercise(Base):
    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    type: Mapped[str] = mapped_column(String(60), nullable=False)
    focus_area: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)


class TrainingProgram(Base):
    """FITT prescription of one exercise for one athlete."""

    __tablename__ = "training_programs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    athlete_id: Mapped[int] = mapped_column(
        ForeignKey("athletes.id", ondelete="CASCADE"), index=True, nullable=False
    )
    exercise_id: Mapped[int] = mapped_column(ForeignKey("exercises.id"), nullable=False)
    frequency: Mapped[Optional[str]] = mapped_column(String(80))
    intensity: Mapped[Optional[str]] = mapped_column(String(80))
    time: Mapped[Optional[str]] = mapped_column(String(80))
    type_fitt: Mapped[Optional[str]] = mapped_column(String(80))
    volume: Mapped[Optional[str]] = mapped_column(String(80))
    progression: Mapped[Optional[str]] = mapped_column(Text)
    sets: Mapped[Optional[int]] = mapped_column(Integer)
    reps: Mapped[Optional[int]] = mapped_column(Integer)

    athlete: Mapped[Athlete] = relationship(back_populates="training_programs")
    exercise: Mapped[Exercise] = relationship(lazy="joined")
