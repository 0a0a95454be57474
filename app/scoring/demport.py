"""
DemPoRT Dementia Population Risk Tool

Additive point score over demographic, vascular, lifestyle, medical,
cognitive/social and family factors. The 10-year risk starts from an
age-dependent baseline:

  baseline      = 15 if age >= 65 else 5
  10-year risk  = clamp(baseline + points × 1.8, 0.5, 60)
  lifetime risk = clamp(10-year × 2.5, 2, 85)
  percentile    = clamp((points + 5) × 8, 5, 95)

Levels (10-year):  <8 low  →  <20 intermediate  →  high
"""
from __future__ import annotations

from app.schemas.assessment_request import (
    ActivityLevel,
    AlcoholConsumption,
    Apoe4Status,
    DemPortInput,
    Gender,
    IntakeLevel,
    LifetimeSmoking,
    SleepQuality,
)
from app.schemas.assessment_response import DemPortResult, RiskLevel
from app.scoring.levels import clamp, classify, round_half_up

# (minimum age, points, label)
AGE_POINTS = [
    (85, 6.0, "Age 85+"),
    (75, 4.0, "Age 75-84"),
    (65, 2.5, "Age 65-74"),
    (55, 1.0, "Age 55-64"),
]
MIDLIFE_AGE = 45
MIDLIFE_POINTS = 0.3

ELDERLY_AGE = 65
ELDERLY_BASELINE = 15.0
YOUNGER_BASELINE = 5.0
POINT_WEIGHT = 1.8

LEVEL_THRESHOLDS = [
    (20.0, RiskLevel.HIGH),
    (8.0, RiskLevel.INTERMEDIATE),
]

BASE_RECOMMENDATIONS = [
    "Follow a Mediterranean diet",
    "Stay physically active",
    "Get enough sleep (7-9 hours a day)",
    "Stay socially active",
    "Have regular medical check-ups",
]


def calculate_demport_risk(data: DemPortInput) -> DemPortResult:
    points = 0.0
    risk_factors: list[str] = []
    protective_factors: list[str] = []
    recommendations: list[str] = []

    # ── Demographics ──
    for min_age, age_points, label in AGE_POINTS:
        if data.age >= min_age:
            points += age_points
            risk_factors.append(label)
            break
    else:
        if data.age >= MIDLIFE_AGE:
            points += MIDLIFE_POINTS

    if data.gender == Gender.FEMALE:
        points += 0.3

    if data.apoe4_status == Apoe4Status.HOMOZYGOUS:
        points += 8
        risk_factors.append("Two copies of the APOE4 gene")
        recommendations.append("See a geneticist and a neurologist")
    elif data.apoe4_status == Apoe4Status.HETEROZYGOUS:
        points += 3
        risk_factors.append("One copy of the APOE4 gene")
        recommendations.append("Step up dementia prevention")

    if data.education_years >= 16:
        points -= 1.5
        protective_factors.append("Higher education")
    elif data.education_years >= 12:
        points -= 0.5
        protective_factors.append("Secondary education")
    elif data.education_years < 8:
        points += 1
        risk_factors.append("Low level of education")
        recommendations.append("Increase intellectual activity")

    # ── Cardiovascular / metabolic ──
    if data.systolic_bp >= 160:
        points += 2
        risk_factors.append("High blood pressure")
        recommendations.append("Control your blood pressure")
    elif data.systolic_bp >= 140:
        points += 1
        risk_factors.append("Elevated blood pressure")

    if data.total_cholesterol >= 240:
        points += 1.5
        risk_factors.append("High cholesterol")
        recommendations.append("Control your cholesterol")

    if data.hdl_cholesterol < 40:
        points += 1
        risk_factors.append("Low HDL cholesterol")
        recommendations.append("Raise your HDL cholesterol")
    elif data.hdl_cholesterol >= 60:
        points -= 0.5
        protective_factors.append("High HDL cholesterol")

    if data.diabetes:
        points += 2
        risk_factors.append("Diabetes mellitus")
        recommendations.append("Keep blood glucose strictly under control")

    # ── Lifestyle ──
    if data.smoking_status == LifetimeSmoking.CURRENT:
        points += 1.5
        risk_factors.append("Smoking")
        recommendations.append("Quit smoking now")
    elif data.smoking_status == LifetimeSmoking.FORMER:
        points += 0.3
        risk_factors.append("Former smoking")

    if data.physical_activity == ActivityLevel.HIGH:
        points -= 1
        protective_factors.append("High physical activity")
    elif data.physical_activity == ActivityLevel.MODERATE:
        points -= 0.3
        protective_factors.append("Moderate physical activity")
    else:
        points += 0.8
        risk_factors.append("Low physical activity")
        recommendations.append("Increase physical activity")

    if data.bmi:
        if data.bmi >= 30:
            points += 1
            risk_factors.append("Obesity")
            recommendations.append("Bring body weight to normal")
        elif data.bmi < 18.5:
            points += 0.5
            risk_factors.append("Underweight")
        elif data.bmi < 25:
            points -= 0.3
            protective_factors.append("Normal body weight")

    if data.alcohol_consumption in (AlcoholConsumption.LIGHT, AlcoholConsumption.MODERATE):
        points -= 0.2
        protective_factors.append("Moderate alcohol consumption")
    elif data.alcohol_consumption == AlcoholConsumption.HEAVY:
        points += 1
        risk_factors.append("Alcohol abuse")
        recommendations.append("Cut down on alcohol")

    # ── Medical history ──
    if data.depression_history:
        points += 1
        risk_factors.append("History of depression")
        recommendations.append("Look after your mental health")

    if data.head_injury_history:
        points += 0.8
        risk_factors.append("Traumatic brain injury")

    if data.stroke_history:
        points += 2
        risk_factors.append("History of stroke")
        recommendations.append("Intensive prevention of vascular disease")

    if data.heart_disease:
        points += 1.5
        risk_factors.append("Cardiovascular disease")
        recommendations.append("Keep your heart condition under control")

    # ── Cognitive / social ──
    if data.cognitive_activities == IntakeLevel.HIGH:
        points -= 1
        protective_factors.append("High cognitive activity")
    elif data.cognitive_activities == IntakeLevel.LOW:
        points += 0.5
        risk_factors.append("Low cognitive activity")
        recommendations.append("Increase intellectual load")

    if data.social_engagement == IntakeLevel.HIGH:
        points -= 0.8
        protective_factors.append("High social engagement")
    elif data.social_engagement == IntakeLevel.LOW:
        points += 0.8
        risk_factors.append("Social isolation")
        recommendations.append("Build social connections")

    if data.sleep_quality == SleepQuality.GOOD:
        points -= 0.3
        protective_factors.append("Good sleep quality")
    elif data.sleep_quality == SleepQuality.POOR:
        points += 0.8
        risk_factors.append("Poor sleep quality")
        recommendations.append("Improve sleep hygiene")

    if data.stress_levels == IntakeLevel.HIGH:
        points += 0.8
        risk_factors.append("High stress")
        recommendations.append("Learn stress management techniques")
    elif data.stress_levels == IntakeLevel.LOW:
        points -= 0.3
        protective_factors.append("Low stress")

    # ── Family ──
    if data.family_dementia_history:
        points += 2
        risk_factors.append("Family history of dementia")
        recommendations.append("Regular follow-up with a neurologist")

    if data.family_cardiovascular_history:
        points += 0.5
        risk_factors.append("Family history of cardiovascular disease")

    baseline = ELDERLY_BASELINE if data.age >= ELDERLY_AGE else YOUNGER_BASELINE
    ten_year = clamp(baseline + points * POINT_WEIGHT, 0.5, 60)
    lifetime = clamp(ten_year * 2.5, 2, 85)

    recommendations.extend(BASE_RECOMMENDATIONS)

    ten_year_rounded = round_half_up(ten_year, 1)
    return DemPortResult(
        risk_percentage=ten_year_rounded,
        risk_level=classify(ten_year, LEVEL_THRESHOLDS),
        recommendations=list(dict.fromkeys(recommendations)),
        ten_year_risk=ten_year_rounded,
        lifetime_risk=round_half_up(lifetime, 1),
        risk_factors=risk_factors,
        protective_factors=protective_factors,
        population_percentile=int(round_half_up(clamp((points + 5) * 8, 5, 95))),
    )
