from datetime import date
from typing import Optional

from sqlalchemy import Date, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.enums import AthleteStatus, Position, enum_values
from ..database import Base


class Athlete(Base):
    __tablename__ = "athletes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    team_id: Mapped[int] = mapped_column(ForeignKey("teams.id"), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    position: Mapped[Position] = mapped_column(
        Enum(Position, native_enum=False, values_callable=enum_values), nullable=False
    )
    status: Mapped[AthleteStatus] = mapped_column(
        Enum(AthleteStatus, native_enum=False, values_callable=enum_values),
        default=AthleteStatus.FIT,
        nullable=False,
    )
    last_assessment_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    assessments: Mapped[list["Assessment"]] = relationship(  # noqa: F821
        back_populates="athlete", cascade="all, delete-orphan"
    )
    training_programs: Mapped[list["TrainingProgram"]] = relationship(  # noqa: F821
        back_populates="athlete", cascade="all, delete-orphan"
    )
