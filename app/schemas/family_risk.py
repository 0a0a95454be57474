"""
Payloads for the family-risk analysis function.

Wire names follow the family function contract: the request body is
{familyGroupId, familyData[], medicalHistory[]} and the response is
{risks[], recommendations[], confidenceScore}.

Each medical history record carries a structured `condition_category`.
Clients that only send a free-text diagnosis get it derived here, at the
boundary, from the keyword table below; scoring never looks at the text.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.schemas.assessment_response import RiskLevel


class ConditionCategory(str, Enum):
    CARDIOVASCULAR = "cardiovascular"
    ONCOLOGY = "oncology"
    DIABETES = "diabetes"
    HYPERTENSION = "hypertension"
    THYROID = "thyroid"
    OSTEOPOROSIS = "osteoporosis"
    DEPRESSION_ANXIETY = "depression_anxiety"
    OTHER = "other"


# First match wins. Cardiovascular claims the hypertension stems, so a
# diagnosis named "hypertension" lands there; the hypertension bucket only
# catches blood-pressure wording.
CONDITION_KEYWORDS: list[tuple[ConditionCategory, tuple[str, ...]]] = [
    (ConditionCategory.CARDIOVASCULAR, (
        "сердц", "инфаркт", "инсульт", "гипертони",
        "heart", "cardi", "infarct", "stroke", "coronary", "hypertensi",
    )),
    (ConditionCategory.ONCOLOGY, (
        "рак", "онкол", "опухоль",
        "cancer", "oncolog", "tumor", "tumour", "carcinoma", "lymphoma", "leukemia", "melanoma",
    )),
    (ConditionCategory.DIABETES, (
        "диабет", "сахар",
        "diabet", "blood sugar",
    )),
    (ConditionCategory.HYPERTENSION, (
        "давлени",
        "blood pressure",
    )),
    (ConditionCategory.THYROID, (
        "щитовидн",
        "thyroid",
    )),
    (ConditionCategory.OSTEOPOROSIS, (
        "остеопороз", "перелом",
        "osteopor", "fracture",
    )),
    (ConditionCategory.DEPRESSION_ANXIETY, (
        "депресси", "тревож",
        "depress", "anxiety",
    )),
]


def categorize_condition(condition_name: str) -> ConditionCategory:
    name = condition_name.lower()
    for category, keywords in CONDITION_KEYWORDS:
        if any(k in name for k in keywords):
            return category
    return ConditionCategory.OTHER


class FamilyMember(BaseModel):
    id: str
    name: str
    relationship: str = Field(description="mother, father, sister, ... (Russian names accepted)")
    gender: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)
    medical_notes: Optional[str] = None
    is_alive: bool = True


class MedicalHistoryRecord(BaseModel):
    id: str
    family_member_id: str
    condition_name: str
    condition_type: Optional[str] = None
    condition_category: Optional[ConditionCategory] = None
    age_at_diagnosis: Optional[float] = Field(None, ge=0)
    severity: Optional[str] = None
    treatment: Optional[str] = None
    outcome: Optional[str] = None

    @model_validator(mode="after")
    def derive_category(self) -> "MedicalHistoryRecord":
        if self.condition_category is None:
            self.condition_category = categorize_condition(self.condition_name)
        return self


class FamilyRiskRequest(BaseModel):
    """POST /functions/v1/analyze-family-risks"""
    model_config = ConfigDict(populate_by_name=True)

    family_group_id: Optional[str] = Field(None, alias="familyGroupId")
    family_data: list[FamilyMember] = Field(alias="familyData")
    medical_history: list[MedicalHistoryRecord] = Field(alias="medicalHistory")


class RiskAnalysisResult(BaseModel):
    """Risk estimate for one condition category."""
    condition_name: str
    condition_category: ConditionCategory
    risk_level: RiskLevel
    risk_percentage: int = Field(ge=0, le=100)
    genetic_factor: int
    lifestyle_factor: int
    age_factor: int
    affected_relatives: list[str] = []
    recommendations: list[str] = []
    screening_advice: list[str] = []
    prevention_tips: list[str] = []
    confidence_score: int
    last_updated: datetime


class FamilyRiskResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    risks: list[RiskAnalysisResult]
    recommendations: list[str]
    confidence_score: int = Field(alias="confidenceScore")
