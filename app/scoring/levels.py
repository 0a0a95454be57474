"""
Shared helpers for turning a raw risk number into what the client sees.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from app.schemas.assessment_response import RiskLevel


def classify(
    value: float,
    thresholds: Sequence[tuple[float, RiskLevel]],
    default: RiskLevel = RiskLevel.LOW,
) -> RiskLevel:
    """
    Step function over descending (threshold, level) pairs: the first
    threshold the value reaches decides the level.
    """
    for threshold, level in thresholds:
        if value >= threshold:
            return level
    return default


def clamp(value: float, lower: float, upper: float) -> float:
    return min(max(value, lower), upper)


def round_half_up(value: float, digits: int = 0) -> float:
    # Python's round() is banker's rounding; displayed risks round .5 up.
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
