"""
BCSC-style 5-year Breast Cancer Risk

Log-odds model: intercept plus additive coefficients, converted with the
logistic function. Lifetime risk is a flat 4.5× multiple of the 5-year
risk, capped at 85%.

Levels (5-year risk):  <1.67 low  →  <3.0 intermediate  →  high
"""
from __future__ import annotations

import math

from app.schemas.assessment_request import BCSCInput, BreastDensity, RaceEthnicity
from app.schemas.assessment_response import BCSCResult, RiskLevel
from app.scoring.levels import classify, round_half_up

INTERCEPT = -6.5

# (minimum age, coefficient), descending; under 35 adds nothing
AGE_COEFFICIENTS = [
    (75, 1.9),
    (70, 1.8),
    (65, 1.7),
    (60, 1.6),
    (55, 1.4),
    (50, 1.2),
    (45, 0.8),
    (40, 0.5),
    (35, 0.0),
]

RACE_COEFFICIENTS: dict[RaceEthnicity, float] = {
    RaceEthnicity.AFRICAN_AMERICAN: 0.2,
    RaceEthnicity.HISPANIC: -0.1,
    RaceEthnicity.ASIAN: -0.3,
    RaceEthnicity.NATIVE_AMERICAN: 0.1,
}

DENSITY_COEFFICIENTS: dict[BreastDensity, float] = {
    BreastDensity.ALMOST_ENTIRELY_FATTY: -0.2,
    BreastDensity.SCATTERED_FIBROGLANDULAR: 0.0,
    BreastDensity.HETEROGENEOUSLY_DENSE: 0.3,
    BreastDensity.EXTREMELY_DENSE: 0.6,
}

FAMILY_HISTORY_COEF = 0.5
BIOPSY_COEF = 0.3
ATYPIA_COEF = 0.8
HORMONE_THERAPY_COEF = 0.4
NULLIPAROUS_COEF = 0.2
LATE_FIRST_BIRTH_COEF = 0.3

LIFETIME_MULTIPLIER = 4.5
MAX_LIFETIME_RISK = 85.0

LEVEL_THRESHOLDS = [
    (3.0, RiskLevel.HIGH),
    (1.67, RiskLevel.INTERMEDIATE),
]

DENSE_BREASTS = (BreastDensity.HETEROGENEOUSLY_DENSE, BreastDensity.EXTREMELY_DENSE)


def bcsc_log_odds(data: BCSCInput) -> float:
    log_odds = INTERCEPT

    for min_age, coef in AGE_COEFFICIENTS:
        if data.age >= min_age:
            log_odds += coef
            break

    log_odds += RACE_COEFFICIENTS.get(data.race_ethnicity, 0.0)

    if data.family_history_first_degree:
        log_odds += FAMILY_HISTORY_COEF

    # Atypia only counts on top of a recorded biopsy
    if data.previous_breast_biopsy:
        log_odds += BIOPSY_COEF
        if data.biopsy_with_atypia:
            log_odds += ATYPIA_COEF

    log_odds += DENSITY_COEFFICIENTS[data.breast_density]

    if data.current_hormone_therapy:
        log_odds += HORMONE_THERAPY_COEF

    if data.nulliparous:
        log_odds += NULLIPAROUS_COEF
    elif data.age_at_first_birth and data.age_at_first_birth > 30:
        log_odds += LATE_FIRST_BIRTH_COEF

    return log_odds


def calculate_bcsc_risk(data: BCSCInput) -> BCSCResult:
    odds = math.exp(bcsc_log_odds(data))
    five_year = odds / (1 + odds) * 100
    lifetime = min(five_year * LIFETIME_MULTIPLIER, MAX_LIFETIME_RISK)

    five_year_rounded = round_half_up(five_year, 2)
    return BCSCResult(
        risk_percentage=five_year_rounded,
        risk_level=classify(five_year, LEVEL_THRESHOLDS),
        recommendations=bcsc_recommendations(data, five_year, lifetime),
        five_year_risk=five_year_rounded,
        lifetime_risk=round_half_up(lifetime, 2),
    )


def bcsc_recommendations(data: BCSCInput, five_year: float, lifetime: float) -> list[str]:
    recommendations: list[str] = []

    if five_year >= 3.0 or lifetime >= 20:
        recommendations.append("Discuss starting screening before age 50 with your doctor")
        recommendations.append("Consider breast MRI in addition to mammography")
        recommendations.append("Cancer genetics consultation to assess the need for genetic testing")

    if five_year >= 1.67:
        recommendations.append("Annual mammography starting at age 40")
        recommendations.append("Consider chemoprevention (tamoxifen, raloxifene)")
    else:
        recommendations.append("Mammography every 2 years starting at age 50")

    if data.breast_density in DENSE_BREASTS:
        recommendations.append("Supplemental screening (ultrasound or tomosynthesis) due to dense breasts")
        recommendations.append("Discuss additional imaging methods with your doctor")

    recommendations.append("Maintain a healthy weight")
    recommendations.append("Regular physical activity (150 minutes per week)")
    recommendations.append("Limit alcohol consumption")

    if data.current_hormone_therapy:
        recommendations.append("Discuss the risks and benefits of hormone therapy with your doctor")

    recommendations.append("Monthly breast self-examination")
    recommendations.append("See a doctor immediately if you notice any changes")

    return recommendations
