"""
BRCA Hereditary Cancer Risk

Baseline risk, overridden by a known BRCA1/BRCA2 mutation, then adjusted by
multiplicative relative-risk factors and capped.

  baseline                5%
  BRCA1 mutation         72% female /  8% male   (replaces baseline)
  BRCA2 mutation         69% female /  6% male   (replaces, applied after BRCA1)
  family history breast  ×2.0
  family history ovarian ×1.5
  Ashkenazi ancestry     ×1.3
  age > 50               ×1.2
  age < 30               ×0.8
  cap                    85%

Levels:  <20 low  →  <50 medium  →  high
"""
from __future__ import annotations

from app.schemas.assessment_request import BRCAInput, Gender
from app.schemas.assessment_response import BRCAResult, RiskLevel
from app.scoring.levels import classify, round_half_up

BASELINE_RISK = 5.0
MAX_RISK = 85.0

# (female, male)
BRCA1_RISK = (72.0, 8.0)
BRCA2_RISK = (69.0, 6.0)

FAMILY_HISTORY_BREAST_RR = 2.0
FAMILY_HISTORY_OVARIAN_RR = 1.5
ASHKENAZI_RR = 1.3
AGE_OVER_50_RR = 1.2
AGE_UNDER_30_RR = 0.8

LEVEL_THRESHOLDS = [
    (50.0, RiskLevel.HIGH),
    (20.0, RiskLevel.MEDIUM),
]

MAMMOGRAPHY_THRESHOLD = 20.0


def _mutation_risk(table: tuple[float, float], gender: Gender) -> float:
    female, male = table
    return female if gender == Gender.FEMALE else male


def raw_brca_risk(data: BRCAInput) -> float:
    """Unrounded, capped lifetime risk in percent."""
    risk = BASELINE_RISK

    # Mutations replace the running value; BRCA2 is checked last and wins.
    if data.brca1_mutation:
        risk = _mutation_risk(BRCA1_RISK, data.gender)
    if data.brca2_mutation:
        risk = _mutation_risk(BRCA2_RISK, data.gender)

    if data.family_history_breast:
        risk *= FAMILY_HISTORY_BREAST_RR
    if data.family_history_ovarian:
        risk *= FAMILY_HISTORY_OVARIAN_RR
    if data.ashkenazi_ancestry:
        risk *= ASHKENAZI_RR

    if data.age > 50:
        risk *= AGE_OVER_50_RR
    elif data.age < 30:
        risk *= AGE_UNDER_30_RR

    return min(risk, MAX_RISK)


def calculate_brca_risk(data: BRCAInput) -> BRCAResult:
    risk = raw_brca_risk(data)
    return BRCAResult(
        risk_percentage=round_half_up(risk),
        risk_level=classify(risk, LEVEL_THRESHOLDS),
        recommendations=brca_recommendations(data, risk),
    )


def brca_recommendations(data: BRCAInput, risk: float) -> list[str]:
    recommendations: list[str] = []

    if data.brca1_mutation or data.brca2_mutation:
        recommendations.append("Mandatory consultation with a geneticist and an oncologist")
        recommendations.append("Consider prophylactic mastectomy")
        recommendations.append("Breast MRI every 6 months")
        if data.gender == Gender.FEMALE:
            recommendations.append("Consider prophylactic oophorectomy after age 35-40")

    if risk > MAMMOGRAPHY_THRESHOLD:
        recommendations.append("Annual mammography starting at age 40")
        recommendations.append("Clinical breast examination every 6 months")

    if data.family_history_breast or data.family_history_ovarian:
        recommendations.append("Genetic counselling for the family")
        recommendations.append("Consider genetic testing")

    recommendations.append("Maintain a healthy lifestyle")
    recommendations.append("Limit alcohol")
    recommendations.append("Regular physical activity")

    return recommendations
