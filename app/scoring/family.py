"""
Family Medical Risk Aggregator

For each of the seven condition categories:

  no history records      → low-risk placeholder, risk drawn from [5, 19]
  ≥1 history record       → genetic + age + lifestyle, capped at 95

    genetic   = Σ relationship weight of affected relatives, cap 50
                (10 when no record resolves to a known family member)
    age       = mean age at diagnosis: <40 → 35, <50 → 30, <60 → 25, else 20
                (25 when no ages are known)
    lifestyle = 40

Levels:  <40 low  →  <60 moderate  →  <80 high  →  very_high

All randomness comes from the caller's random.Random, so a seeded source
reproduces the output exactly.
"""
from __future__ import annotations

import math
import random
from collections import defaultdict
from datetime import datetime, timezone
from typing import Optional

import structlog

from app.schemas.assessment_response import RiskLevel
from app.schemas.family_risk import (
    ConditionCategory,
    FamilyMember,
    FamilyRiskResponse,
    MedicalHistoryRecord,
    RiskAnalysisResult,
)
from app.scoring import family_tables as tables
from app.scoring.levels import classify

logger = structlog.get_logger()

MAX_GENETIC_FACTOR = 50
NO_KNOWN_RELATIVE_GENETIC_FACTOR = 10
LIFESTYLE_FACTOR = 40
MAX_TOTAL_RISK = 95

# (mean age at diagnosis upper bound, factor): earlier onset scores higher
AGE_FACTOR_BRACKETS = [
    (40, 35),
    (50, 30),
    (60, 25),
]
LATE_ONSET_AGE_FACTOR = 20
UNKNOWN_AGE_FACTOR = 25

LEVEL_THRESHOLDS = [
    (80, RiskLevel.VERY_HIGH),
    (60, RiskLevel.HIGH),
    (40, RiskLevel.MODERATE),
]

# Placeholder for categories without any family history
BASELINE_RISK_RANGE = (5, 19)
BASELINE_GENETIC_FACTOR = 10
BASELINE_LIFESTYLE_FACTOR = 30
BASELINE_AGE_FACTOR = 20
BASELINE_CONFIDENCE = 75

CONFIDENCE_RANGE = (70, 89)


def group_by_category(
    medical_history: list[MedicalHistoryRecord],
) -> dict[ConditionCategory, list[MedicalHistoryRecord]]:
    groups: dict[ConditionCategory, list[MedicalHistoryRecord]] = defaultdict(list)
    for record in medical_history:
        groups[record.condition_category or ConditionCategory.OTHER].append(record)
    return groups


def affected_relatives(
    records: list[MedicalHistoryRecord],
    family: list[FamilyMember],
) -> list[FamilyMember]:
    """Family members named by at least one record, in family-list order."""
    affected_ids = {r.family_member_id for r in records}
    return [m for m in family if m.id in affected_ids]


def genetic_factor(relatives: list[FamilyMember]) -> int:
    if not relatives:
        return NO_KNOWN_RELATIVE_GENETIC_FACTOR
    total = sum(tables.relationship_weight(r.relationship) for r in relatives)
    return min(MAX_GENETIC_FACTOR, total)


def age_factor(records: list[MedicalHistoryRecord]) -> int:
    ages = [r.age_at_diagnosis for r in records if r.age_at_diagnosis is not None]
    if not ages:
        return UNKNOWN_AGE_FACTOR

    mean_age = sum(ages) / len(ages)
    for upper, factor in AGE_FACTOR_BRACKETS:
        if mean_age < upper:
            return factor
    return LATE_ONSET_AGE_FACTOR


def risk_level(total_risk: float) -> RiskLevel:
    return classify(total_risk, LEVEL_THRESHOLDS)


def general_recommendations(category: ConditionCategory) -> list[str]:
    return list(tables.GENERAL_RECOMMENDATIONS.get(category, tables.DEFAULT_RECOMMENDATIONS))


def specific_recommendations(category: ConditionCategory, level: RiskLevel) -> list[str]:
    recommendations = general_recommendations(category)
    if level in (RiskLevel.HIGH, RiskLevel.VERY_HIGH):
        recommendations.extend(tables.ELEVATED_RISK_RECOMMENDATIONS)
    return recommendations


def screening_advice(category: ConditionCategory) -> list[str]:
    return list(tables.SCREENING_ADVICE.get(category, tables.DEFAULT_SCREENING_ADVICE))


def prevention_tips(category: ConditionCategory) -> list[str]:
    return list(tables.PREVENTION_TIPS.get(category, tables.DEFAULT_PREVENTION_TIPS))


def analyze_condition(
    category: ConditionCategory,
    records: list[MedicalHistoryRecord],
    family: list[FamilyMember],
    rng: random.Random,
    now: datetime,
) -> RiskAnalysisResult:
    label = tables.CATEGORY_LABELS[category]

    if not records:
        return RiskAnalysisResult(
            condition_name=label,
            condition_category=category,
            risk_level=RiskLevel.LOW,
            risk_percentage=rng.randint(*BASELINE_RISK_RANGE),
            genetic_factor=BASELINE_GENETIC_FACTOR,
            lifestyle_factor=BASELINE_LIFESTYLE_FACTOR,
            age_factor=BASELINE_AGE_FACTOR,
            affected_relatives=[],
            recommendations=general_recommendations(category),
            screening_advice=screening_advice(category),
            prevention_tips=prevention_tips(category),
            confidence_score=BASELINE_CONFIDENCE,
            last_updated=now,
        )

    relatives = affected_relatives(records, family)
    genetic = genetic_factor(relatives)
    age = age_factor(records)
    total = min(MAX_TOTAL_RISK, genetic + age + LIFESTYLE_FACTOR)
    level = risk_level(total)

    return RiskAnalysisResult(
        condition_name=label,
        condition_category=category,
        risk_level=level,
        risk_percentage=math.floor(total),
        genetic_factor=genetic,
        lifestyle_factor=LIFESTYLE_FACTOR,
        age_factor=age,
        affected_relatives=[r.name for r in relatives],
        recommendations=specific_recommendations(category, level),
        screening_advice=screening_advice(category),
        prevention_tips=prevention_tips(category),
        confidence_score=rng.randint(*CONFIDENCE_RANGE),
        last_updated=now,
    )


def family_recommendations(risks: list[RiskAnalysisResult]) -> list[str]:
    recommendations = list(tables.FAMILY_RECOMMENDATIONS)
    if any(r.risk_level in (RiskLevel.HIGH, RiskLevel.VERY_HIGH) for r in risks):
        recommendations.extend(tables.FAMILY_HIGH_RISK_RECOMMENDATIONS)
    return recommendations


def overall_confidence(risks: list[RiskAnalysisResult]) -> int:
    if not risks:
        return 0
    return math.floor(sum(r.confidence_score for r in risks) / len(risks))


def analyze_family_risks(
    family: list[FamilyMember],
    medical_history: list[MedicalHistoryRecord],
    *,
    rng: random.Random,
    now: Optional[datetime] = None,
) -> FamilyRiskResponse:
    """
    Main entry point: one RiskAnalysisResult per scored category, plus the
    family-level recommendations and confidence.
    """
    stamp = now or datetime.now(timezone.utc)
    groups = group_by_category(medical_history)

    risks = [
        analyze_condition(category, groups.get(category, []), family, rng, stamp)
        for category in tables.SCORED_CATEGORIES
    ]

    logger.info(
        "family_risk_analysis_complete",
        members=len(family),
        history_records=len(medical_history),
        unscored_records=len(groups.get(ConditionCategory.OTHER, [])),
        elevated=[r.condition_category.value for r in risks
                  if r.risk_level in (RiskLevel.HIGH, RiskLevel.VERY_HIGH)],
    )

    return FamilyRiskResponse(
        risks=risks,
        recommendations=family_recommendations(risks),
        confidence_score=overall_confidence(risks),
    )
