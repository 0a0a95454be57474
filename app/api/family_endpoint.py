"""
POST /functions/v1/analyze-family-risks

Family medical risk analysis. Stateless: the caller sends the family
members and their medical history, nothing is read from or written to the
database. Failures come back as HTTP 500 {"error": "..."}.
"""
from __future__ import annotations

import random

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.auth import verify_token
from app.core.config import Settings, get_settings
from app.schemas.family_risk import FamilyRiskRequest, FamilyRiskResponse
from app.scoring.family import analyze_family_risks

logger = structlog.get_logger()
router = APIRouter(prefix="/functions/v1", tags=["family"])


def get_random_source(settings: Settings = Depends(get_settings)) -> random.Random:
    """Seeded from FAMILY_RISK_SEED when set, otherwise from OS entropy."""
    return random.Random(settings.family_risk_seed)


@router.post(
    "/analyze-family-risks",
    response_model=FamilyRiskResponse,
    summary="Estimate hereditary risk per condition category for a family",
)
async def analyze_family(
    request: FamilyRiskRequest,
    token_payload: dict = Depends(verify_token),
    rng: random.Random = Depends(get_random_source),
):
    logger.info(
        "family_risk_analysis_started",
        family_group_id=request.family_group_id,
        members=len(request.family_data),
        history_records=len(request.medical_history),
        caller=token_payload.get("sub", "unknown"),
    )

    try:
        return analyze_family_risks(request.family_data, request.medical_history, rng=rng)
    except Exception as e:
        logger.error("family_risk_analysis_failed", family_group_id=request.family_group_id, error=str(e))
        return JSONResponse(status_code=500, content={"error": str(e)})
