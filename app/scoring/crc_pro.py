"""
CRC-PRO Colorectal Cancer Risk

Additive point score. Protective exposures (activity, fibre, vegetables,
calcium, NSAIDs) subtract points. BMI is only scored when both height and
weight are known.

  risk = clamp(points, 0, 85)

Levels:  <15 low  →  <35 moderate  →  <60 high  →  very_high

Colonoscopy follow-up depends on the date of the last procedure, so the
scorer takes an optional reference date.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from app.schemas.assessment_request import (
    ActivityLevel,
    AlcoholConsumption,
    CRCProInput,
    IntakeLevel,
    LifetimeSmoking,
)
from app.schemas.assessment_response import CRCProResult, RiskLevel
from app.scoring.levels import clamp, classify

MAX_RISK = 85.0

LEVEL_THRESHOLDS = [
    (60.0, RiskLevel.VERY_HIGH),
    (35.0, RiskLevel.HIGH),
    (15.0, RiskLevel.MODERATE),
]

SCREENING_START_AGE = 45
COLONOSCOPY_INTERVAL_YEARS = 10
HIGH_RISK_INTERVAL_YEARS = 5


def _age_points(age: int) -> float:
    if age >= 50:
        points = 15.0
        if age >= 60:
            points += 10
        if age >= 70:
            points += 15
        return points
    if age >= 45:
        return 5.0
    return 0.0


def _bmi(data: CRCProInput) -> Optional[float]:
    if data.height_cm and data.weight_kg:
        return data.weight_kg / (data.height_cm / 100) ** 2
    return None


def calculate_crc_pro_risk(data: CRCProInput, today: Optional[date] = None) -> CRCProResult:
    today = today or date.today()
    points = _age_points(data.age)
    recommendations: list[str] = []

    # ── Family history ──
    if data.family_history_crc:
        points += 20
        recommendations.append(
            "Discuss starting screening earlier with your doctor because of the family history of colorectal cancer"
        )
    if data.family_history_polyps:
        points += 10
        recommendations.append("A family history of polyps raises your risk, consider regular colonoscopies")
    if data.family_history_ibd:
        points += 15
        recommendations.append("A family history of inflammatory bowel disease needs particular attention")

    # ── Personal history ──
    if data.personal_history_polyps:
        points += 25
        recommendations.append(
            "A personal history of polyps raises the risk considerably, regular follow-up is needed"
        )
    if data.personal_history_ibd:
        points += 30
        recommendations.append("Inflammatory bowel disease needs intensive monitoring")
    if data.diabetes_type2:
        points += 8
        recommendations.append("Type 2 diabetes raises colorectal cancer risk, keep your blood sugar under control")

    # ── Lifestyle ──
    if data.smoking_status == LifetimeSmoking.CURRENT:
        points += 12
        recommendations.append("Smoking raises cancer risk considerably, consider a smoking cessation programme")
    elif data.smoking_status == LifetimeSmoking.FORMER:
        points += 6

    if data.alcohol_consumption == AlcoholConsumption.HEAVY:
        points += 10
        recommendations.append("Heavy drinking raises the risk, consider cutting down")
    elif data.alcohol_consumption == AlcoholConsumption.MODERATE:
        points += 4

    if data.physical_activity == ActivityLevel.LOW:
        points += 8
        recommendations.append("Low physical activity raises the risk, increase your exercise")
    elif data.physical_activity == ActivityLevel.HIGH:
        points -= 5
        recommendations.append("High physical activity lowers the risk, keep up the active lifestyle")

    # ── Diet ──
    if data.red_meat_consumption == IntakeLevel.HIGH:
        points += 8
        recommendations.append("High red meat intake raises the risk, consider cutting down")
    if data.processed_meat_consumption == IntakeLevel.HIGH:
        points += 10
        recommendations.append("Processed meat raises the risk considerably, limit it")

    if data.fiber_intake == IntakeLevel.LOW:
        points += 6
        recommendations.append("Low fibre intake raises the risk, eat more vegetables and whole grains")
    elif data.fiber_intake == IntakeLevel.HIGH:
        points -= 4
        recommendations.append("High fibre intake lowers the risk, keep up the healthy diet")

    if data.vegetable_intake == IntakeLevel.LOW:
        points += 5
        recommendations.append("Eat more vegetables to lower the risk")
    elif data.vegetable_intake == IntakeLevel.HIGH:
        points -= 3

    # ── Supplements / medication ──
    if data.calcium_supplements:
        points -= 3
        recommendations.append("Calcium may lower the risk, continue as advised by your doctor")
    if data.nsaid_use:
        points -= 4
        recommendations.append("NSAIDs may lower the risk but need caution, consult your doctor")

    bmi = _bmi(data)
    if bmi is not None:
        if bmi >= 30:
            points += 12
            recommendations.append("Obesity raises colorectal cancer risk, consider losing weight")
        elif bmi >= 25:
            points += 6
            recommendations.append("Excess weight raises the risk, maintain a healthy weight")

    recommendations.extend(screening_recommendations(data, today))

    risk = clamp(points, 0, MAX_RISK)
    level = classify(risk, LEVEL_THRESHOLDS)

    if not recommendations:
        recommendations.append("Keep up a healthy lifestyle to lower the risk")
    recommendations.append("See your doctor regularly to monitor your health")
    if level in (RiskLevel.HIGH, RiskLevel.VERY_HIGH):
        recommendations.append("High risk needs a consultation with an oncologist or gastroenterologist")

    return CRCProResult(
        risk_percentage=risk,
        risk_level=level,
        recommendations=recommendations,
    )


def screening_recommendations(data: CRCProInput, today: date) -> list[str]:
    if not data.previous_colonoscopy:
        if data.age >= SCREENING_START_AGE:
            return ["Start colorectal cancer screening, discuss it with your doctor"]
        return []

    if data.last_colonoscopy_date is None:
        return []

    years_since = (today - data.last_colonoscopy_date).days / 365
    if years_since > COLONOSCOPY_INTERVAL_YEARS:
        return ["More than 10 years since your last colonoscopy, consider repeating it"]
    if years_since > HIGH_RISK_INTERVAL_YEARS and (data.personal_history_polyps or data.family_history_crc):
        return ["More frequent screening is advised when risk factors are present"]
    return []
