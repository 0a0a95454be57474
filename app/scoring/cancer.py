"""
General Cancer Risk (multi-site)

Each cancer site starts from a baseline 10-year risk and is multiplied by
relative-risk factors, then capped. Sex-specific sites are only scored for
the matching sex:

  site        baseline  10y cap  lifetime ×   levels (10y)
  lung           0.5      50        4         <2   <8   <20
  breast (f)     2.5      30        3         <3   <10  <20
  colorectal     1.2      25        3.5       <2   <6   <15
  melanoma       0.3      15        6         <1   <3   <8
  prostate (m)   1.5      30        4         <3   <10  <20
  cervical (f)   0.8      10        5         <1   <3   <6

Overall 10-year risk is the sum of the rounded site risks (capped at 100 for
the persisted percentage); overall lifetime risk is the capped sum of the
site lifetime risks.

Overall levels:  <5 low  →  <15 moderate  →  <25 high  →  very_high
"""
from __future__ import annotations

from dataclasses import dataclass

from app.schemas.assessment_request import (
    ActivityLevel,
    AlcoholConsumption,
    CancerInput,
    CancerSite,
    Gender,
    IntakeLevel,
    LifetimeSmoking,
    RelativeDegree,
    ScreeningFrequency,
    SkinType,
)
from app.schemas.assessment_response import CancerResult, CancerSiteRisk, RiskLevel
from app.scoring.levels import clamp, classify, round_half_up

MAX_RISK = 100.0


@dataclass(frozen=True)
class SiteModel:
    site: CancerSite
    name: str
    baseline: float
    ten_year_cap: float
    lifetime_multiplier: float
    # (moderate, high, very_high) lower bounds on the 10-year risk
    bounds: tuple[float, float, float]

    def thresholds(self) -> list[tuple[float, RiskLevel]]:
        moderate, high, very_high = self.bounds
        return [
            (very_high, RiskLevel.VERY_HIGH),
            (high, RiskLevel.HIGH),
            (moderate, RiskLevel.MODERATE),
        ]


LUNG = SiteModel(CancerSite.LUNG, "Lung cancer", 0.5, 50, 4.0, (2, 8, 20))
BREAST = SiteModel(CancerSite.BREAST, "Breast cancer", 2.5, 30, 3.0, (3, 10, 20))
COLORECTAL = SiteModel(CancerSite.COLORECTAL, "Colorectal cancer", 1.2, 25, 3.5, (2, 6, 15))
MELANOMA = SiteModel(CancerSite.MELANOMA, "Melanoma", 0.3, 15, 6.0, (1, 3, 8))
PROSTATE = SiteModel(CancerSite.PROSTATE, "Prostate cancer", 1.5, 30, 4.0, (3, 10, 20))
CERVICAL = SiteModel(CancerSite.CERVICAL, "Cervical cancer", 0.8, 10, 5.0, (1, 3, 6))

OVERALL_THRESHOLDS = [
    (25.0, RiskLevel.VERY_HIGH),
    (15.0, RiskLevel.HIGH),
    (5.0, RiskLevel.MODERATE),
]

FAIR_SKIN = (SkinType.VERY_FAIR, SkinType.FAIR)
ELEVATED = (RiskLevel.HIGH, RiskLevel.VERY_HIGH)


def _site_result(model: SiteModel, risk: float, factors: list[str]) -> CancerSiteRisk:
    ten_year = min(model.ten_year_cap, risk)
    lifetime = min(MAX_RISK, risk * model.lifetime_multiplier)
    return CancerSiteRisk(
        cancer_type=model.site.value,
        name=model.name,
        ten_year_risk=round_half_up(ten_year, 1),
        lifetime_risk=round_half_up(lifetime, 1),
        risk_level=classify(ten_year, model.thresholds()),
        major_risk_factors=factors,
    )


def _family_site(data: CancerInput, site: CancerSite) -> bool:
    return data.family_cancer_history and site in data.family_cancer_types


def _pack_years(data: CancerInput) -> float:
    return data.cigarettes_per_day / 20 * data.smoking_years


def lung_risk(data: CancerInput) -> CancerSiteRisk:
    risk = LUNG.baseline
    factors: list[str] = []

    if data.smoking_status == LifetimeSmoking.CURRENT:
        risk *= 1 + _pack_years(data) * 0.1
        factors.append("Current smoking")
    elif data.smoking_status == LifetimeSmoking.FORMER:
        risk *= 1 + _pack_years(data) * 0.05
        factors.append("Former smoking")

    if data.age > 50:
        risk *= 1 + (data.age - 50) * 0.02

    if _family_site(data, CancerSite.LUNG):
        risk *= 1.8
        factors.append("Family history of lung cancer")

    if data.occupational_exposure:
        risk *= 1.3
        factors.append("Occupational exposure to carcinogens")

    return _site_result(LUNG, risk, factors)


def breast_risk(data: CancerInput) -> CancerSiteRisk:
    risk = BREAST.baseline
    factors: list[str] = []

    if data.age > 50:
        risk *= 1 + (data.age - 50) * 0.03

    if _family_site(data, CancerSite.BREAST):
        if data.family_cancer_degree == RelativeDegree.FIRST:
            risk *= 2.1
            factors.append("Family history of breast cancer (first-degree)")
        else:
            risk *= 1.5
            factors.append("Family history of breast cancer")

    if data.age_at_menarche and data.age_at_menarche < 12:
        risk *= 1.2
        factors.append("Early menarche")

    if data.age_at_menopause and data.age_at_menopause > 55:
        risk *= 1.3
        factors.append("Late menopause")

    if data.pregnancies_count == 0:
        risk *= 1.2
        factors.append("No pregnancies")

    if data.age_at_first_birth and data.age_at_first_birth > 30:
        risk *= 1.2
        factors.append("Late first birth")

    if data.hormone_replacement_therapy:
        risk *= 1.3
        factors.append("Hormone replacement therapy")

    if data.alcohol_consumption in (AlcoholConsumption.MODERATE, AlcoholConsumption.HEAVY):
        risk *= 1.2
        factors.append("Alcohol consumption")

    if data.age > 50 and data.bmi > 30:
        risk *= 1.3
        factors.append("Excess weight after menopause")

    return _site_result(BREAST, risk, factors)


def colorectal_risk(data: CancerInput) -> CancerSiteRisk:
    risk = COLORECTAL.baseline
    factors: list[str] = []

    if data.age > 50:
        risk *= 1 + (data.age - 50) * 0.04

    if _family_site(data, CancerSite.COLORECTAL):
        risk *= 2.3
        factors.append("Family history of colorectal cancer")

    if data.inflammatory_bowel_disease:
        risk *= 2.5
        factors.append("Inflammatory bowel disease")

    if data.red_meat_consumption == IntakeLevel.HIGH:
        risk *= 1.3
        factors.append("High red meat intake")

    if data.processed_meat_consumption == IntakeLevel.HIGH:
        risk *= 1.4
        factors.append("High processed meat intake")

    if data.fruit_vegetable_intake == IntakeLevel.LOW:
        risk *= 1.2
        factors.append("Low fruit and vegetable intake")

    if data.smoking_status == LifetimeSmoking.CURRENT:
        risk *= 1.2
        factors.append("Smoking")

    if data.alcohol_consumption == AlcoholConsumption.HEAVY:
        risk *= 1.4
        factors.append("Alcohol abuse")

    if data.bmi > 30:
        risk *= 1.3
        factors.append("Obesity")

    if data.physical_activity == ActivityLevel.LOW:
        risk *= 1.2
        factors.append("Low physical activity")

    return _site_result(COLORECTAL, risk, factors)


def melanoma_risk(data: CancerInput) -> CancerSiteRisk:
    risk = MELANOMA.baseline
    factors: list[str] = []

    if data.skin_type in FAIR_SKIN:
        risk *= 3
        factors.append("Fair skin type")

    if data.sun_exposure == IntakeLevel.HIGH:
        risk *= 2.5
        factors.append("High sun exposure")

    if _family_site(data, CancerSite.MELANOMA):
        risk *= 2.8
        factors.append("Family history of melanoma")

    if data.age > 40:
        risk *= 1 + (data.age - 40) * 0.02

    return _site_result(MELANOMA, risk, factors)


def prostate_risk(data: CancerInput) -> CancerSiteRisk:
    risk = PROSTATE.baseline
    factors: list[str] = []

    if data.age > 50:
        risk *= 1 + (data.age - 50) * 0.05

    if _family_site(data, CancerSite.PROSTATE):
        risk *= 2.2
        factors.append("Family history of prostate cancer")

    return _site_result(PROSTATE, risk, factors)


def cervical_risk(data: CancerInput) -> CancerSiteRisk:
    risk = CERVICAL.baseline
    factors: list[str] = []

    if data.smoking_status == LifetimeSmoking.CURRENT:
        risk *= 2.3
        factors.append("Smoking")

    if data.pap_smear_frequency == ScreeningFrequency.NEVER:
        risk *= 3.5
        factors.append("No screening")
    elif data.pap_smear_frequency == ScreeningFrequency.IRREGULAR:
        risk *= 1.8
        factors.append("Irregular screening")

    return _site_result(CERVICAL, risk, factors)


def site_risks(data: CancerInput) -> list[CancerSiteRisk]:
    female = data.gender == Gender.FEMALE
    sites = [lung_risk(data)]
    if female:
        sites.append(breast_risk(data))
    sites.append(colorectal_risk(data))
    sites.append(melanoma_risk(data))
    if not female:
        sites.append(prostate_risk(data))
    if female:
        sites.append(cervical_risk(data))
    return sites


def calculate_cancer_risk(data: CancerInput) -> CancerResult:
    sites = site_risks(data)
    ten_year = sum(s.ten_year_risk for s in sites)
    lifetime = min(MAX_RISK, sum(s.lifetime_risk for s in sites))
    ten_year_rounded = round_half_up(min(ten_year, MAX_RISK), 1)

    return CancerResult(
        risk_percentage=ten_year_rounded,
        risk_level=classify(ten_year, OVERALL_THRESHOLDS),
        recommendations=cancer_recommendations(data, sites),
        ten_year_risk=ten_year_rounded,
        lifetime_risk=round_half_up(lifetime, 1),
        cancer_types=sites,
        screening_recommendations=screening_recommendations(data),
        lifestyle_recommendations=lifestyle_recommendations(data),
        population_percentile=population_percentile(data, ten_year),
    )


def cancer_recommendations(data: CancerInput, sites: list[CancerSiteRisk]) -> list[str]:
    recommendations = [
        "Lead a healthy lifestyle",
        "Attend regular preventive check-ups",
    ]

    if any(s.risk_level in ELEVATED for s in sites):
        recommendations.append("See an oncologist about the elevated risks")
        recommendations.append("Consider genetic counselling")

    if data.smoking_status == LifetimeSmoking.CURRENT:
        recommendations.append("Quit smoking, the most important step to lower cancer risk")

    if data.alcohol_consumption == AlcoholConsumption.HEAVY:
        recommendations.append("Cut down on alcohol")

    return recommendations


def screening_recommendations(data: CancerInput) -> list[str]:
    screening: list[str] = []
    female = data.gender == Gender.FEMALE

    if female and data.age >= 40 and data.mammography_frequency != ScreeningFrequency.REGULAR:
        screening.append("Regular mammography (yearly after 40)")

    if data.age >= 45 and data.colonoscopy_frequency != ScreeningFrequency.REGULAR:
        screening.append("Colonoscopy every 10 years from age 45")

    if female and data.age >= 21 and data.pap_smear_frequency != ScreeningFrequency.REGULAR:
        screening.append("Cervical cytology every 3 years")

    if data.skin_type in FAIR_SKIN or data.sun_exposure == IntakeLevel.HIGH:
        screening.append("Yearly dermatology check")

    return screening


def lifestyle_recommendations(data: CancerInput) -> list[str]:
    lifestyle: list[str] = []

    if data.bmi > 25:
        lifestyle.append("Maintain a healthy weight")
    if data.physical_activity == ActivityLevel.LOW:
        lifestyle.append("Increase physical activity (at least 150 minutes a week)")
    if data.fruit_vegetable_intake == IntakeLevel.LOW:
        lifestyle.append("Eat more fruit and vegetables (at least 5 portions a day)")
    if data.red_meat_consumption == IntakeLevel.HIGH:
        lifestyle.append("Cut down on red meat")
    if data.processed_meat_consumption == IntakeLevel.HIGH:
        lifestyle.append("Avoid processed meat")
    if data.sun_exposure == IntakeLevel.HIGH:
        lifestyle.append("Protect yourself from the sun: sunscreen and protective clothing")

    return lifestyle


def population_percentile(data: CancerInput, ten_year: float) -> int:
    average_for_age = 8 if data.age > 50 else 3
    return int(clamp(round_half_up(ten_year / average_for_age * 50), 5, 95))
