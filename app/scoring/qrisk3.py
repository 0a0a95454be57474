"""
QRISK3-style 10-year Cardiovascular Risk (simplified point score)

This is the questionnaire calculator users submit. It is a linear point
score divided by 5 and clamped to [1, 99], not the published QRISK3
Cox model.

The separate, cruder simulation used only by the algorithm-check harness
lives in app.scoring.harness.
"""
from __future__ import annotations

from app.schemas.assessment_request import Ethnicity, Gender, QRISK3Input, SmokingStatus
from app.schemas.assessment_response import QRISK3Result, RiskLevel
from app.scoring.levels import clamp, classify, round_half_up

SMOKING_POINTS: dict[SmokingStatus, float] = {
    SmokingStatus.NON_SMOKER: 0.0,
    SmokingStatus.EX_SMOKER: 8.0,
    SmokingStatus.LIGHT_SMOKER: 12.0,
    SmokingStatus.MODERATE_SMOKER: 18.0,
    SmokingStatus.HEAVY_SMOKER: 25.0,
}

ETHNICITY_POINTS: dict[Ethnicity, float] = {
    Ethnicity.WHITE: 0.0,
    Ethnicity.INDIAN: 5.0,
    Ethnicity.PAKISTANI: 8.0,
    Ethnicity.BANGLADESHI: 10.0,
    Ethnicity.OTHER_ASIAN: 3.0,
    Ethnicity.BLACK_CARIBBEAN: -2.0,
    Ethnicity.BLACK_AFRICAN: -3.0,
    Ethnicity.CHINESE: -5.0,
    Ethnicity.OTHER: 0.0,
}

LEVEL_THRESHOLDS = [
    (20.0, RiskLevel.HIGH),
    (10.0, RiskLevel.MEDIUM),
]

SCORE_DIVISOR = 5.0
MIN_RISK = 1.0
MAX_RISK = 99.0


def qrisk3_points(data: QRISK3Input) -> float:
    score = (data.age - 25) * 0.5

    if data.gender == Gender.MALE:
        score += 15

    score += SMOKING_POINTS[data.smoking_status]

    if data.diabetes:
        score += 20
    if data.angina_or_heart_attack:
        score += 25
    if data.chronic_kidney_disease:
        score += 15
    if data.atrial_fibrillation:
        score += 12
    if data.rheumatoid_arthritis:
        score += 8

    score += (data.cholesterol_hdl_ratio - 3) * 3
    score += (data.systolic_blood_pressure - 120) * 0.2

    if data.blood_pressure_treatment:
        score += 5

    if data.bmi > 30:
        score += 10
    elif data.bmi > 25:
        score += 5
    elif data.bmi < 20:
        score += 3

    if data.family_history_cvd:
        score += 8

    score += ETHNICITY_POINTS[data.ethnicity]
    return score


def calculate_qrisk3_risk(data: QRISK3Input) -> QRISK3Result:
    risk = clamp(qrisk3_points(data) / SCORE_DIVISOR, MIN_RISK, MAX_RISK)
    return QRISK3Result(
        risk_percentage=round_half_up(risk, 1),
        risk_level=classify(risk, LEVEL_THRESHOLDS),
        recommendations=qrisk3_recommendations(data, risk),
    )


def qrisk3_recommendations(data: QRISK3Input, risk: float) -> list[str]:
    recommendations: list[str] = []

    if risk >= 10:
        recommendations.append("Consult a cardiologist")
        recommendations.append("Consider statin therapy")
        recommendations.append("Regular blood pressure monitoring")

    if data.smoking_status != SmokingStatus.NON_SMOKER:
        recommendations.append("Stopping smoking is the top priority")
        recommendations.append("See a smoking cessation specialist")

    if data.bmi > 25:
        recommendations.append("Reduce weight to a normal BMI")
        recommendations.append("Consult a dietitian")

    if data.systolic_blood_pressure > 140:
        recommendations.append("Blood pressure control")
        if not data.blood_pressure_treatment:
            recommendations.append("Discuss antihypertensive medication with your doctor")

    recommendations.append("Regular physical activity (150 min/week)")
    recommendations.append("Mediterranean diet")
    recommendations.append("Limit salt intake")
    recommendations.append("Stress management")

    if risk < 10:
        recommendations.append("Keep up a healthy lifestyle")
        recommendations.append("Regular preventive check-ups")

    return recommendations
