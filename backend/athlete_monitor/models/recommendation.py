from sqlalchemy import Enum, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..core.enums import Position, enum_values
from ..database import Base


class CriteriaWeight(Base):
    __tablename__ = "criteria_weights"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    position: Mapped[Position] = mapped_column(
        Enum(Position, native_enum=False, values_callable=enum_values), index=True, nullable=False
    )
    criteria_name: Mapped[str] = mapped_column(String(60), nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=False)


class RecommendationRule(Base):
    __tablename__ = "recommendation_rules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    priority: Mapped[int] = mapped_column(Integer, nullable=False)
    # Stored verbatim; parsed only when rules are evaluated.
    trigger_condition: Mapped[str] = mapped_column(Text, nullable=False)
    recommendation_text: Mapped[str] = mapped_column(Text, nullable=False)
