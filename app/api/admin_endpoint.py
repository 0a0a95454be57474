"""
Admin API — algorithm check harness.

GET /v1/admin/algorithm-check
  → Runs the simulated QRISK3 / Gail functions against their fixtures
    and reports actual vs expected per fixture (±2 tolerance).

Nothing here touches user data.
"""
from __future__ import annotations

from dataclasses import asdict
from typing import Optional

import structlog
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.core.auth import require_admin
from app.scoring import harness

logger = structlog.get_logger()
router = APIRouter(prefix="/v1/admin", tags=["admin"])


class FixtureResultResponse(BaseModel):
    name: str
    algorithm: str
    passed: bool
    actual_risk: float
    expected_risk: float
    actual_level: str
    expected_level: str
    error: Optional[str] = None


class AlgorithmCheckResponse(BaseModel):
    passed: int
    total: int
    tolerance: float
    all_passed: bool
    results: list[FixtureResultResponse]


@router.get(
    "/algorithm-check",
    response_model=AlgorithmCheckResponse,
    summary="Run the calculator fixture checks",
)
async def algorithm_check(algorithm: Optional[str] = None, token: dict = Depends(require_admin)):
    fixtures = [f for f in harness.ALL_FIXTURES if algorithm is None or f.algorithm == algorithm]
    results = harness.run_all(fixtures)
    passed = sum(r.passed for r in results)

    logger.info(
        "algorithm_check_requested",
        requested_by=token.get("sub", "unknown"),
        algorithm=algorithm or "all",
        passed=passed,
        total=len(results),
    )

    return AlgorithmCheckResponse(
        passed=passed,
        total=len(results),
        tolerance=harness.TOLERANCE,
        all_passed=passed == len(results),
        results=[FixtureResultResponse(**asdict(r)) for r in results],
    )
