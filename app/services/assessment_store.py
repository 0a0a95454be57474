"""
Persistence adapter for the assessment log.

Writes one risk_assessments row per submission (input blob, result blob,
denormalised risk columns) plus one health_recommendations row per
recommendation, in a single transaction. Reads are always scoped to the
owning user.
"""
from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.risk_assessment import HealthRecommendation, RiskAssessment
from app.schemas.assessment_request import CalculatorRequest
from app.schemas.assessment_response import AssessmentResponse

TITLE_MAX_LENGTH = 255


def build_records(
    user_id: str,
    request: CalculatorRequest,
    response: AssessmentResponse,
) -> tuple[RiskAssessment, list[HealthRecommendation]]:
    result = response.result

    assessment = RiskAssessment(
        id=response.assessment_id,
        user_id=user_id,
        assessment_type=response.assessment_type,
        assessment_data=request.assessment_data.model_dump(mode="json"),
        results_data=result.model_dump(mode="json"),
        risk_percentage=result.risk_percentage,
        risk_level=result.risk_level.value,
        recommendations=list(result.recommendations),
        created_at=response.evaluated_at,
        updated_at=response.evaluated_at,
    )

    # Recommendation order is display order, so it doubles as priority.
    recommendations = [
        HealthRecommendation(
            id=str(uuid.uuid4()),
            risk_assessment_id=response.assessment_id,
            title=text[:TITLE_MAX_LENGTH],
            description=text,
            category=response.assessment_type,
            priority=position,
            completed=False,
            created_at=response.evaluated_at,
        )
        for position, text in enumerate(result.recommendations, start=1)
    ]
    return assessment, recommendations


async def save_assessment(
    db: AsyncSession,
    user_id: str,
    request: CalculatorRequest,
    response: AssessmentResponse,
) -> RiskAssessment:
    """Raises SQLAlchemyError on failure; the caller rolls back."""
    assessment, recommendations = build_records(user_id, request, response)
    db.add(assessment)
    db.add_all(recommendations)
    await db.commit()
    return assessment


async def list_history(db: AsyncSession, user_id: str, limit: int = 100) -> list[RiskAssessment]:
    stmt = (
        select(RiskAssessment)
        .where(RiskAssessment.user_id == user_id)
        .order_by(RiskAssessment.created_at.desc())
        .limit(limit)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def latest_assessment(db: AsyncSession, user_id: str) -> Optional[RiskAssessment]:
    history = await list_history(db, user_id, limit=1)
    return history[0] if history else None


async def list_recommendations(
    db: AsyncSession,
    user_id: str,
    assessment_id: str,
) -> list[HealthRecommendation]:
    stmt = (
        select(HealthRecommendation)
        .join(RiskAssessment, HealthRecommendation.risk_assessment_id == RiskAssessment.id)
        .where(RiskAssessment.id == assessment_id, RiskAssessment.user_id == user_id)
        .order_by(HealthRecommendation.priority)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def set_recommendation_completed(
    db: AsyncSession,
    user_id: str,
    recommendation_id: str,
    completed: bool,
) -> Optional[HealthRecommendation]:
    """Returns None when the recommendation does not exist or is not the user's."""
    stmt = (
        select(HealthRecommendation)
        .join(RiskAssessment, HealthRecommendation.risk_assessment_id == RiskAssessment.id)
        .where(HealthRecommendation.id == recommendation_id, RiskAssessment.user_id == user_id)
    )
    result = await db.execute(stmt)
    recommendation = result.scalar_one_or_none()
    if recommendation is None:
        return None

    recommendation.completed = completed
    await db.commit()
    return recommendation
