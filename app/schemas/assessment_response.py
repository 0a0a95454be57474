"""
Outbound assessment payloads.

Every calculator returns the common triple (risk_percentage, risk_level,
recommendations); calculator-specific extras live on the tagged subclasses
so the persisted `results_data` blob has a known shape per type.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    MODERATE = "moderate"
    INTERMEDIATE = "intermediate"
    HIGH = "high"
    VERY_HIGH = "very_high"


class RiskResult(BaseModel):
    risk_percentage: float = Field(ge=0, le=100)
    risk_level: RiskLevel
    recommendations: list[str] = []


class BRCAResult(RiskResult):
    assessment_type: Literal["BRCA"] = "BRCA"


class QRISK3Result(RiskResult):
    assessment_type: Literal["QRISK3"] = "QRISK3"


class BCSCResult(RiskResult):
    """risk_percentage is the 5-year risk."""
    assessment_type: Literal["BCSC"] = "BCSC"
    five_year_risk: float
    lifetime_risk: float


class FraminghamAlzheimerResult(RiskResult):
    """risk_percentage is the 10-year risk."""
    assessment_type: Literal["framingham_alzheimer"] = "framingham_alzheimer"
    ten_year_risk: float
    lifetime_risk: float
    risk_factors: list[str] = []
    protective_factors: list[str] = []


class CancerSiteRisk(BaseModel):
    """Risk for one cancer site inside a general cancer assessment."""
    cancer_type: str
    name: str
    ten_year_risk: float
    lifetime_risk: float
    risk_level: RiskLevel
    major_risk_factors: list[str] = []


class CancerResult(RiskResult):
    """risk_percentage is the combined 10-year risk across the scored sites."""
    assessment_type: Literal["cancer"] = "cancer"
    ten_year_risk: float
    lifetime_risk: float
    cancer_types: list[CancerSiteRisk]
    screening_recommendations: list[str] = []
    lifestyle_recommendations: list[str] = []
    population_percentile: int


class CRCProResult(RiskResult):
    assessment_type: Literal["crc_pro"] = "crc_pro"


class DemPortResult(RiskResult):
    """risk_percentage is the 10-year risk."""
    assessment_type: Literal["demport"] = "demport"
    ten_year_risk: float
    lifetime_risk: float
    risk_factors: list[str] = []
    protective_factors: list[str] = []
    population_percentile: int


AssessmentResult = Annotated[
    Union[
        BRCAResult,
        QRISK3Result,
        BCSCResult,
        FraminghamAlzheimerResult,
        CancerResult,
        CRCProResult,
        DemPortResult,
    ],
    Field(discriminator="assessment_type"),
]


class AssessmentResponse(BaseModel):
    """Returned by the scoring engine before persistence."""
    assessment_id: str = Field(description="UUID, becomes the stored row id")
    assessment_type: str
    engine_version: str
    result: AssessmentResult
    evaluated_at: datetime
    processing_time_ms: int


class AssessmentRecord(BaseModel):
    """One persisted row of the assessment log."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    assessment_type: str
    assessment_data: dict[str, Any]
    results_data: dict[str, Any]
    risk_percentage: float
    risk_level: str
    recommendations: Optional[list[str]] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class HealthRecommendationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    risk_assessment_id: Optional[str] = None
    title: str
    description: str
    category: str
    priority: int
    completed: bool
    created_at: datetime


class RecommendationUpdate(BaseModel):
    completed: bool


class CheckupUrgency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class CheckupCategory(str, Enum):
    GENERAL = "general"
    CARDIOVASCULAR = "cardiovascular"
    CANCER = "cancer"
    REPRODUCTIVE = "reproductive"
    METABOLIC = "metabolic"


class CheckupItem(BaseModel):
    """One entry of the annual check-up plan."""
    id: str
    name: str
    description: str
    frequency: str
    min_age: int
    risk_factors: list[str] = []
    urgency: CheckupUrgency
    category: CheckupCategory
