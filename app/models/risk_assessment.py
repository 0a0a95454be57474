"""
Assessment log — every submitted questionnaire is stored.
Tables: risk_assessments, health_recommendations

Rows are append-only and owned by the submitting user. The only field that
changes after insert is health_recommendations.completed.
"""
from datetime import datetime, timezone

from sqlalchemy import ARRAY, JSON, Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class RiskAssessment(Base):
    __tablename__ = "risk_assessments"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), nullable=False, index=True)
    assessment_type = Column(String(50), nullable=False, index=True)

    # ── Input / output blobs ──
    assessment_data = Column(JSON, nullable=False)
    results_data = Column(JSON, nullable=False)

    # ── Denormalised for querying ──
    risk_percentage = Column(Float, nullable=False)
    risk_level = Column(String(20), nullable=False)
    recommendations = Column(ARRAY(Text), nullable=True)

    # ── Metadata ──
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    def __repr__(self):
        return f"<RiskAssessment {self.id} type={self.assessment_type} level={self.risk_level}>"


class HealthRecommendation(Base):
    __tablename__ = "health_recommendations"

    id = Column(String(36), primary_key=True)
    risk_assessment_id = Column(
        String(36), ForeignKey("risk_assessments.id", ondelete="CASCADE"), nullable=True, index=True,
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(50), nullable=False)
    priority = Column(Integer, nullable=False, default=1)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    def __repr__(self):
        return f"<HealthRecommendation {self.id} completed={self.completed}>"
