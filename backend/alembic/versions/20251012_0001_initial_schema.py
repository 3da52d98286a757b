"""initial schema

Revision ID: 20251012_0001
Revises: 
Create Date: 2025-10-12 00:00:00
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20251012_0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "teams",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False, unique=True),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("team_id", sa.Integer(), sa.ForeignKey("teams.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("NOW()")),
    )
    op.create_index("ix_users_id", "users", ["id"], unique=False)
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_team_id", "users", ["team_id"], unique=False)

    op.create_table(
        "athletes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("team_id", sa.Integer(), sa.ForeignKey("teams.id"), nullable=False),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("position", sa.String(length=20), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="Fit"),
        sa.Column("last_assessment_date", sa.Date(), nullable=True),
    )
    op.create_index("ix_athletes_team_id", "athletes", ["team_id"], unique=False)

    op.create_table(
        "assessments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("athlete_id", sa.Integer(), sa.ForeignKey("athletes.id", ondelete="CASCADE"), nullable=False),
        sa.Column("author_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("weight_kg", sa.Float(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("NOW()"), nullable=False),
        sa.UniqueConstraint("athlete_id", "date", name="assessment_athlete_date_unique"),
    )
    op.create_index("ix_assessments_athlete_id", "assessments", ["athlete_id"], unique=False)

    op.create_table(
        "assessment_metrics",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "assessment_id",
            sa.Integer(),
            sa.ForeignKey("assessments.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("category", sa.String(length=60), nullable=False),
        sa.Column("name", sa.String(length=60), nullable=False),
        sa.Column("value", sa.Integer(), nullable=False),
    )
    op.create_index(
        "ix_assessment_metrics_assessment_id", "assessment_metrics", ["assessment_id"], unique=False
    )

    op.create_table(
        "exercises",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("type", sa.String(length=60), nullable=False),
        sa.Column("focus_area", sa.String(length=120), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )

    op.create_table(
        "training_programs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("athlete_id", sa.Integer(), sa.ForeignKey("athletes.id", ondelete="CASCADE"), nullable=False),
        sa.Column("exercise_id", sa.Integer(), sa.ForeignKey("exercises.id"), nullable=False),
        sa.Column("frequency", sa.String(length=80), nullable=True),
        sa.Column("intensity", sa.String(length=80), nullable=True),
        sa.Column("time", sa.String(length=80), nullable=True),
        sa.Column("type_fitt", sa.String(length=80), nullable=True),
        sa.Column("volume", sa.String(length=80), nullable=True),
        sa.Column("progression", sa.Text(), nullable=True),
        sa.Column("sets", sa.Integer(), nullable=True),
        sa.Column("reps", sa.Integer(), nullable=True),
    )
    op.create_index("ix_training_programs_athlete_id", "training_programs", ["athlete_id"], unique=False)

    op.create_table(
        "criteria_weights",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("position", sa.String(length=20), nullable=False),
        sa.Column("criteria_name", sa.String(length=60), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
    )
    op.create_index("ix_criteria_weights_position", "criteria_weights", ["position"], unique=False)

    op.create_table(
        "recommendation_rules",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("priority", sa.Integer(), nullable=False),
        sa.Column("trigger_condition", sa.Text(), nullable=False),
        sa.Column("recommendation_text", sa.Text(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("recommendation_rules")
    op.drop_index("ix_criteria_weights_position", table_name="criteria_weights")
    op.drop_table("criteria_weights")
    op.drop_index("ix_training_programs_athlete_id", table_name="training_programs")
    op.drop_table("training_programs")
    op.drop_table("exercises")
    op.drop_index("ix_assessment_metrics_assessment_id", table_name="assessment_metrics")
    op.drop_table("assessment_metrics")
    op.drop_index("ix_assessments_athlete_id", table_name="assessments")
    op.drop_table("assessments")
    op.drop_index("ix_athletes_team_id", table_name="athletes")
    op.drop_table("athletes")
    op.drop_index("ix_users_team_id", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_index("ix_users_id", table_name="users")
    op.drop_table("users")
    op.drop_table("teams")
