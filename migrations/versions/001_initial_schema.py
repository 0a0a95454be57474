"""
001 — Initial schema: risk_assessments + health_recommendations

Revision ID: 001
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY, JSON

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "risk_assessments",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(36), nullable=False),
        sa.Column("assessment_type", sa.String(50), nullable=False),

        sa.Column("assessment_data", JSON, nullable=False),
        sa.Column("results_data", JSON, nullable=False),

        sa.Column("risk_percentage", sa.Float, nullable=False),
        sa.Column("risk_level", sa.String(20), nullable=False),
        sa.Column("recommendations", ARRAY(sa.Text), nullable=True),

        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    op.create_index("ix_risk_assessments_user_id", "risk_assessments", ["user_id"])
    op.create_index("ix_risk_assessments_assessment_type", "risk_assessments", ["assessment_type"])
    op.create_index("ix_risk_assessments_created_at", "risk_assessments", ["created_at"])

    op.create_table(
        "health_recommendations",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "risk_assessment_id",
            sa.String(36),
            sa.ForeignKey("risk_assessments.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("priority", sa.Integer, nullable=False, server_default="1"),
        sa.Column("completed", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    op.create_index(
        "ix_health_recommendations_risk_assessment_id",
        "health_recommendations",
        ["risk_assessment_id"],
    )


def downgrade() -> None:
    op.drop_table("health_recommendations")
    op.drop_table("risk_assessments")
