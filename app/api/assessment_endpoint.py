"""
/v1/assessments — questionnaire scoring + assessment history.

POST /calculate → score → persist → respond with the stored row.
GET  /checkup-plan → annual check-up plan from the latest assessment of each type.
Every read is scoped to the caller; rows are never updated except the
per-recommendation `completed` flag.
"""
from __future__ import annotations

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import current_user_id
from app.models.database import get_db
from app.schemas.assessment_request import AssessmentRequest
from app.schemas.assessment_response import (
    AssessmentRecord,
    CheckupItem,
    HealthRecommendationResponse,
    RecommendationUpdate,
)
from app.scoring.checkup import DEFAULT_AGE, build_checkup_plan, latest_per_type
from app.scoring.engine import evaluate
from app.services import assessment_store
from app.services.event_publisher import publish_assessment_event

logger = structlog.get_logger()
router = APIRouter(prefix="/v1/assessments", tags=["assessments"])

HISTORY_MAX_LIMIT = 500


@router.post(
    "/calculate",
    response_model=AssessmentRecord,
    summary="Score a risk questionnaire and store the result",
    description="Body: {assessment_type, assessment_data}. Returns the persisted assessment row.",
)
async def calculate_assessment(
    request: AssessmentRequest,
    user_id: str = Depends(current_user_id),
    db: AsyncSession = Depends(get_db),
) -> AssessmentRecord:
    calc_request = request.root

    logger.info(
        "risk_assessment_started",
        assessment_type=calc_request.assessment_type,
        user_id=user_id,
    )

    # ── Score ──
    try:
        response = evaluate(calc_request)
    except Exception as e:
        logger.error("scoring_failed", assessment_type=calc_request.assessment_type, error=str(e))
        raise HTTPException(status_code=500, detail=f"Scoring engine error: {e}")

    # ── Persist ──
    try:
        assessment = await assessment_store.save_assessment(db, user_id, calc_request, response)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("assessment_save_failed", assessment_id=response.assessment_id, error=str(e))
        raise HTTPException(status_code=503, detail="Could not save risk assessment")

    # ── Publish to Kafka (fire-and-forget) ──
    await publish_assessment_event(response, user_id)

    return AssessmentRecord.model_validate(assessment)


def _read_failed(error: SQLAlchemyError, **context) -> HTTPException:
    logger.error("assessment_read_failed", error=str(error), **context)
    return HTTPException(status_code=503, detail="Could not load risk assessments")


@router.get("/history", response_model=list[AssessmentRecord])
async def assessment_history(
    limit: int = Query(100, ge=1, le=HISTORY_MAX_LIMIT),
    user_id: str = Depends(current_user_id),
    db: AsyncSession = Depends(get_db),
):
    try:
        rows = await assessment_store.list_history(db, user_id, limit=limit)
    except SQLAlchemyError as e:
        raise _read_failed(e, user_id=user_id)
    return [AssessmentRecord.model_validate(r) for r in rows]


@router.get("/latest", response_model=Optional[AssessmentRecord])
async def latest_assessment(
    user_id: str = Depends(current_user_id),
    db: AsyncSession = Depends(get_db),
):
    try:
        row = await assessment_store.latest_assessment(db, user_id)
    except SQLAlchemyError as e:
        raise _read_failed(e, user_id=user_id)
    return AssessmentRecord.model_validate(row) if row else None


@router.get(
    "/checkup-plan",
    response_model=list[CheckupItem],
    summary="Annual check-up plan",
    description="Age-gated base examinations plus risk-driven ones for high or very_high latest assessments.",
)
async def checkup_plan(
    age: int = Query(DEFAULT_AGE, ge=0, le=120),
    user_id: str = Depends(current_user_id),
    db: AsyncSession = Depends(get_db),
):
    try:
        rows = await assessment_store.list_history(db, user_id, limit=HISTORY_MAX_LIMIT)
    except SQLAlchemyError as e:
        raise _read_failed(e, user_id=user_id)

    plan = build_checkup_plan(latest_per_type(rows), age=age)
    logger.info("checkup_plan_built", user_id=user_id, age=age, items=len(plan))
    return plan


@router.get("/health", tags=["health"])
async def health():
    return {"status": "ok", "service": "wh-risk-engine"}


@router.get("/{assessment_id}/recommendations", response_model=list[HealthRecommendationResponse])
async def assessment_recommendations(
    assessment_id: str,
    user_id: str = Depends(current_user_id),
    db: AsyncSession = Depends(get_db),
):
    try:
        rows = await assessment_store.list_recommendations(db, user_id, assessment_id)
    except SQLAlchemyError as e:
        raise _read_failed(e, user_id=user_id, assessment_id=assessment_id)
    return [HealthRecommendationResponse.model_validate(r) for r in rows]


@router.put("/recommendations/{recommendation_id}", response_model=HealthRecommendationResponse)
async def update_recommendation(
    recommendation_id: str,
    update: RecommendationUpdate,
    user_id: str = Depends(current_user_id),
    db: AsyncSession = Depends(get_db),
):
    try:
        row = await assessment_store.set_recommendation_completed(
            db, user_id, recommendation_id, update.completed,
        )
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("recommendation_update_failed", recommendation_id=recommendation_id, error=str(e))
        raise HTTPException(status_code=503, detail="Could not update recommendation")

    if row is None:
        raise HTTPException(404, "Recommendation not found")

    logger.info(
        "recommendation_updated",
        recommendation_id=recommendation_id,
        completed=update.completed,
        user_id=user_id,
    )
    return HealthRecommendationResponse.model_validate(row)
