"""
Risk Assessment Engine

Orchestrates:
  1. Dispatch on assessment_type to the matching calculator
  2. Timing + structured logging
  3. Response envelope (assessment id, engine version, timestamp)

Called synchronously by the API endpoint. Calculators are pure functions
of their input, so the engine holds no state between calls.
"""
from __future__ import annotations

import time
import uuid
from datetime import datetime, timezone
from typing import Callable, Union

import structlog

from app.core.config import get_settings
from app.schemas.assessment_request import (
    AssessmentRequest,
    AssessmentType,
    CalculatorRequest,
)
from app.schemas.assessment_response import AssessmentResponse
from app.scoring.bcsc import calculate_bcsc_risk
from app.scoring.brca import calculate_brca_risk
from app.scoring.cancer import calculate_cancer_risk
from app.scoring.crc_pro import calculate_crc_pro_risk
from app.scoring.demport import calculate_demport_risk
from app.scoring.framingham import calculate_framingham_risk
from app.scoring.qrisk3 import calculate_qrisk3_risk

logger = structlog.get_logger()


CALCULATORS: dict[str, Callable] = {
    AssessmentType.BRCA.value: calculate_brca_risk,
    AssessmentType.QRISK3.value: calculate_qrisk3_risk,
    AssessmentType.BCSC.value: calculate_bcsc_risk,
    AssessmentType.FRAMINGHAM_ALZHEIMER.value: calculate_framingham_risk,
    AssessmentType.CANCER.value: calculate_cancer_risk,
    AssessmentType.CRC_PRO.value: calculate_crc_pro_risk,
    AssessmentType.DEMPORT.value: calculate_demport_risk,
}


def evaluate(
    request: Union[AssessmentRequest, CalculatorRequest],
) -> AssessmentResponse:
    """
    Main scoring entry point.
    """
    t0 = time.perf_counter_ns()
    assessment_id = str(uuid.uuid4())

    calc_request: CalculatorRequest = request.root if isinstance(request, AssessmentRequest) else request
    calculator = CALCULATORS[calc_request.assessment_type]

    result = calculator(calc_request.assessment_data)

    elapsed_ms = int((time.perf_counter_ns() - t0) / 1_000_000)

    logger.info(
        "risk_assessment_complete",
        assessment_id=assessment_id,
        assessment_type=calc_request.assessment_type,
        risk_percentage=result.risk_percentage,
        risk_level=result.risk_level.value,
        recommendations_count=len(result.recommendations),
        elapsed_ms=elapsed_ms,
    )

    return AssessmentResponse(
        assessment_id=assessment_id,
        assessment_type=calc_request.assessment_type,
        engine_version=get_settings().engine_version,
        result=result,
        evaluated_at=datetime.now(timezone.utc),
        processing_time_ms=elapsed_ms,
    )
