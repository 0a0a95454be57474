"""
Framingham-style Alzheimer's / Dementia Risk

Additive point score over demographic, genetic, vascular and lifestyle
factors. Protective factors subtract points.

  10-year risk  = clamp(points × 2, 0.1, 50)
  lifetime risk = clamp(points × 4, 0.5, 80)

Levels (10-year):  <5 low  →  <15 intermediate  →  high
"""
from __future__ import annotations

from app.schemas.assessment_request import (
    ActivityLevel,
    AlcoholConsumption,
    Apoe4Status,
    FraminghamAlzheimerInput,
    Gender,
    LifetimeSmoking,
)
from app.schemas.assessment_response import FraminghamAlzheimerResult, RiskLevel
from app.scoring.levels import clamp, classify, round_half_up

# (minimum age, points, label)
AGE_POINTS = [
    (85, 4.0, "Age 85+"),
    (75, 3.0, "Age 75-84"),
    (65, 2.0, "Age 65-74"),
    (55, 1.0, "Age 55-64"),
]

LEVEL_THRESHOLDS = [
    (15.0, RiskLevel.HIGH),
    (5.0, RiskLevel.INTERMEDIATE),
]

BASE_RECOMMENDATIONS = [
    "Follow a Mediterranean diet",
    "Get enough sleep (7-9 hours a day)",
    "Manage stress",
    "Have regular medical check-ups",
]


def calculate_framingham_risk(data: FraminghamAlzheimerInput) -> FraminghamAlzheimerResult:
    points = 0.0
    risk_factors: list[str] = []
    protective_factors: list[str] = []
    recommendations: list[str] = []

    for min_age, age_points, label in AGE_POINTS:
        if data.age >= min_age:
            points += age_points
            risk_factors.append(label)
            break

    if data.gender == Gender.FEMALE:
        points += 0.5

    if data.apoe4_status == Apoe4Status.HOMOZYGOUS:
        points += 5
        risk_factors.append("Two copies of the APOE4 gene")
        recommendations.append("See a neurologist for a personal prevention plan")
    elif data.apoe4_status == Apoe4Status.HETEROZYGOUS:
        points += 2
        risk_factors.append("One copy of the APOE4 gene")
        recommendations.append("Consider joining a cognitive training programme")

    if data.education_years >= 16:
        points -= 1
        protective_factors.append("Higher education")
    elif data.education_years < 8:
        points += 1
        risk_factors.append("Low level of education")
        recommendations.append("Keep intellectually active: reading, puzzles, learning new things")

    if data.family_history_dementia:
        points += 1.5
        risk_factors.append("Family history of dementia")
        recommendations.append("Have regular cognitive testing")

    if data.cardiovascular_disease:
        points += 1.5
        risk_factors.append("Cardiovascular disease")
        recommendations.append("Keep cardiovascular health under control")

    if data.diabetes:
        points += 1
        risk_factors.append("Diabetes mellitus")
        recommendations.append("Keep blood glucose within the normal range")

    if data.hypertension:
        points += 0.5
        risk_factors.append("Arterial hypertension")
        recommendations.append("Control your blood pressure")

    if data.smoking_status == LifetimeSmoking.CURRENT:
        points += 1
        risk_factors.append("Smoking")
        recommendations.append("Quit smoking, it lowers the risk considerably")

    if data.physical_activity == ActivityLevel.HIGH:
        points -= 1
        protective_factors.append("High physical activity")
    elif data.physical_activity == ActivityLevel.LOW:
        points += 0.5
        risk_factors.append("Low physical activity")
        recommendations.append("Increase physical activity to 150 minutes per week")

    if data.bmi and data.bmi >= 30:
        points += 0.5
        risk_factors.append("Obesity")
        recommendations.append("Bring body weight to normal")

    if data.depression_history:
        points += 0.5
        risk_factors.append("History of depression")
        recommendations.append("Look after your mental health")

    if data.head_injury_history:
        points += 0.5
        risk_factors.append("Traumatic brain injury")

    if data.social_isolation:
        points += 0.5
        risk_factors.append("Social isolation")
        recommendations.append("Keep up social connections")

    if data.cognitive_complaints:
        points += 1
        risk_factors.append("Memory complaints")
        recommendations.append("See a neurologist for a cognitive assessment")

    if data.alcohol_consumption in (AlcoholConsumption.LIGHT, AlcoholConsumption.MODERATE):
        points -= 0.25
        protective_factors.append("Moderate alcohol consumption")
    elif data.alcohol_consumption == AlcoholConsumption.HEAVY:
        points += 0.5
        risk_factors.append("Alcohol abuse")
        recommendations.append("Cut down on alcohol")

    ten_year = clamp(points * 2, 0.1, 50)
    lifetime = clamp(points * 4, 0.5, 80)

    recommendations.extend(BASE_RECOMMENDATIONS)

    ten_year_rounded = round_half_up(ten_year, 1)
    return FraminghamAlzheimerResult(
        risk_percentage=ten_year_rounded,
        risk_level=classify(ten_year, LEVEL_THRESHOLDS),
        recommendations=list(dict.fromkeys(recommendations)),
        ten_year_risk=ten_year_rounded,
        lifetime_risk=round_half_up(lifetime, 1),
        risk_factors=risk_factors,
        protective_factors=protective_factors,
    )
