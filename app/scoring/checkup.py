"""
Annual Check-up Plan

Builds the yearly preventive plan from the caller's age and their latest
stored assessments. Six age-gated base examinations are always considered;
a high or very_high assessment adds a risk-driven examination:

  assessment type contains     adds                 urgency
  qrisk / framingham           cardio-extended      critical
  cancer / bcsc / brca         oncology-screening   critical
  crc                          gastro-screening     high

Items below their minimum age are dropped; the rest are ordered by urgency
(critical first), keeping insertion order within the same urgency.
"""
from __future__ import annotations

from typing import Iterable, Protocol

from app.schemas.assessment_response import (
    CheckupCategory,
    CheckupItem,
    CheckupUrgency,
    RiskLevel,
)

DEFAULT_AGE = 30

URGENCY_ORDER = {
    CheckupUrgency.CRITICAL: 4,
    CheckupUrgency.HIGH: 3,
    CheckupUrgency.MEDIUM: 2,
    CheckupUrgency.LOW: 1,
}

ELEVATED_LEVELS = (RiskLevel.HIGH.value, RiskLevel.VERY_HIGH.value)


class ScoredAssessment(Protocol):
    assessment_type: str
    risk_level: str


def base_items(age: int) -> list[CheckupItem]:
    return [
        CheckupItem(
            id="general-checkup",
            name="General medical check-up",
            description="GP consultation, blood pressure, weight, full blood count",
            frequency="Yearly",
            min_age=18,
            urgency=CheckupUrgency.MEDIUM,
            category=CheckupCategory.GENERAL,
        ),
        CheckupItem(
            id="blood-tests",
            name="Blood chemistry panel",
            description="Glucose, cholesterol, liver function, creatinine",
            frequency="Yearly",
            min_age=25,
            urgency=CheckupUrgency.MEDIUM,
            category=CheckupCategory.METABOLIC,
        ),
        CheckupItem(
            id="gynecological",
            name="Gynaecological examination",
            description="Gynaecologist visit, cervical cytology (PAP test)",
            frequency="Yearly",
            min_age=21,
            urgency=CheckupUrgency.HIGH,
            category=CheckupCategory.REPRODUCTIVE,
        ),
        CheckupItem(
            id="mammography",
            name="Mammography",
            description="X-ray examination of the breasts",
            frequency="Yearly" if age >= 50 else "Every 2 years",
            min_age=40,
            risk_factors=["Family history of breast cancer"],
            urgency=CheckupUrgency.HIGH,
            category=CheckupCategory.CANCER,
        ),
        CheckupItem(
            id="colonoscopy",
            name="Colonoscopy",
            description="Endoscopic examination of the colon",
            frequency="Every 10 years",
            min_age=45,
            risk_factors=["Family history of colorectal cancer"],
            urgency=CheckupUrgency.MEDIUM,
            category=CheckupCategory.CANCER,
        ),
        CheckupItem(
            id="eye-exam",
            name="Eye examination",
            description="Visual acuity and intraocular pressure",
            frequency="Yearly" if age >= 40 else "Every 2 years",
            min_age=18,
            urgency=CheckupUrgency.LOW,
            category=CheckupCategory.GENERAL,
        ),
    ]


CARDIO_EXTENDED = CheckupItem(
    id="cardio-extended",
    name="Extended cardiology work-up",
    description="ECG, echocardiogram, Holter monitoring, cardiologist consultation",
    frequency="Every 6 months",
    min_age=18,
    risk_factors=["High cardiovascular risk"],
    urgency=CheckupUrgency.CRITICAL,
    category=CheckupCategory.CARDIOVASCULAR,
)

ONCOLOGY_SCREENING = CheckupItem(
    id="oncology-screening",
    name="Oncology screening",
    description="Oncologist consultation, additional markers, genetic testing",
    frequency="Every 6 months",
    min_age=18,
    risk_factors=["High cancer risk"],
    urgency=CheckupUrgency.CRITICAL,
    category=CheckupCategory.CANCER,
)

GASTRO_SCREENING = CheckupItem(
    id="gastro-screening",
    name="Gastroenterology screening",
    description="Colonoscopy, faecal occult blood test, gastroenterologist consultation",
    frequency="Every 3-5 years",
    min_age=40,
    risk_factors=["High colorectal cancer risk"],
    urgency=CheckupUrgency.HIGH,
    category=CheckupCategory.CANCER,
)

# (assessment type substrings, item)
RISK_ITEMS = [
    (("qrisk", "framingham"), CARDIO_EXTENDED),
    (("cancer", "bcsc", "brca"), ONCOLOGY_SCREENING),
    (("crc",), GASTRO_SCREENING),
]


def risk_items(assessments: Iterable[ScoredAssessment]) -> list[CheckupItem]:
    items: list[CheckupItem] = []
    for assessment in assessments:
        if assessment.risk_level not in ELEVATED_LEVELS:
            continue
        assessment_type = assessment.assessment_type.lower()
        for markers, item in RISK_ITEMS:
            if any(marker in assessment_type for marker in markers):
                items.append(item)
    return items


def latest_per_type(assessments: Iterable[ScoredAssessment]) -> list[ScoredAssessment]:
    """Keeps the first row of each type; expects newest-first input."""
    latest: dict[str, ScoredAssessment] = {}
    for assessment in assessments:
        latest.setdefault(assessment.assessment_type, assessment)
    return list(latest.values())


def build_checkup_plan(
    assessments: Iterable[ScoredAssessment] = (),
    age: int = DEFAULT_AGE,
) -> list[CheckupItem]:
    candidates = base_items(age) + risk_items(assessments)

    seen: set[str] = set()
    plan: list[CheckupItem] = []
    for item in candidates:
        if item.id in seen or age < item.min_age:
            continue
        seen.add(item.id)
        plan.append(item)

    # sorted() is stable, so same-urgency items keep their order
    return sorted(plan, key=lambda item: URGENCY_ORDER[item.urgency], reverse=True)
