"""
Static tables for the family risk aggregator: relationship weights,
category labels, and the canned advice lists per condition category.
"""
from __future__ import annotations

from app.schemas.family_risk import ConditionCategory

# Scored categories, in output order. OTHER is collected but never scored.
SCORED_CATEGORIES = [
    ConditionCategory.CARDIOVASCULAR,
    ConditionCategory.ONCOLOGY,
    ConditionCategory.DIABETES,
    ConditionCategory.HYPERTENSION,
    ConditionCategory.THYROID,
    ConditionCategory.OSTEOPOROSIS,
    ConditionCategory.DEPRESSION_ANXIETY,
]

CATEGORY_LABELS: dict[ConditionCategory, str] = {
    ConditionCategory.CARDIOVASCULAR: "Cardiovascular disease",
    ConditionCategory.ONCOLOGY: "Cancer",
    ConditionCategory.DIABETES: "Diabetes",
    ConditionCategory.HYPERTENSION: "Arterial hypertension",
    ConditionCategory.THYROID: "Thyroid disease",
    ConditionCategory.OSTEOPOROSIS: "Osteoporosis",
    ConditionCategory.DEPRESSION_ANXIETY: "Depression and anxiety disorders",
    ConditionCategory.OTHER: "Other conditions",
}

# ── Genetic weight by degree of kinship ──
PARENT_WEIGHT = 25
CHILD_WEIGHT = 20
SIBLING_WEIGHT = 15
GRANDPARENT_WEIGHT = 10
AUNT_UNCLE_WEIGHT = 5
UNKNOWN_RELATIONSHIP_WEIGHT = 5

RELATIONSHIP_WEIGHTS: dict[str, int] = {
    "mother": PARENT_WEIGHT,
    "father": PARENT_WEIGHT,
    "parent": PARENT_WEIGHT,
    "мать": PARENT_WEIGHT,
    "отец": PARENT_WEIGHT,
    "son": CHILD_WEIGHT,
    "daughter": CHILD_WEIGHT,
    "child": CHILD_WEIGHT,
    "сын": CHILD_WEIGHT,
    "дочь": CHILD_WEIGHT,
    "brother": SIBLING_WEIGHT,
    "sister": SIBLING_WEIGHT,
    "sibling": SIBLING_WEIGHT,
    "брат": SIBLING_WEIGHT,
    "сестра": SIBLING_WEIGHT,
    "grandfather": GRANDPARENT_WEIGHT,
    "grandmother": GRANDPARENT_WEIGHT,
    "grandparent": GRANDPARENT_WEIGHT,
    "дедушка": GRANDPARENT_WEIGHT,
    "бабушка": GRANDPARENT_WEIGHT,
    "uncle": AUNT_UNCLE_WEIGHT,
    "aunt": AUNT_UNCLE_WEIGHT,
    "дядя": AUNT_UNCLE_WEIGHT,
    "тётя": AUNT_UNCLE_WEIGHT,
    "тетя": AUNT_UNCLE_WEIGHT,
}


def relationship_weight(relationship: str) -> int:
    return RELATIONSHIP_WEIGHTS.get(relationship.strip().lower(), UNKNOWN_RELATIONSHIP_WEIGHT)


# ── Advice ──

GENERAL_RECOMMENDATIONS: dict[ConditionCategory, list[str]] = {
    ConditionCategory.CARDIOVASCULAR: [
        "Stay physically active (150 minutes a week)",
        "Monitor cholesterol and blood pressure",
        "Limit saturated fat and salt",
        "Quit smoking and limit alcohol",
    ],
    ConditionCategory.ONCOLOGY: [
        "Attend regular preventive check-ups",
        "Maintain a healthy weight",
        "Limit processed meat",
        "Protect yourself from UV radiation",
    ],
    ConditionCategory.DIABETES: [
        "Control your weight and blood sugar",
        "Eat a balanced diet",
        "Exercise regularly",
        "Limit simple carbohydrates",
    ],
}

DEFAULT_RECOMMENDATIONS = [
    "Lead a healthy lifestyle",
    "Attend regular medical check-ups",
    "Stay physically active",
    "Eat a balanced diet",
]

ELEVATED_RISK_RECOMMENDATIONS = [
    "See a specialist to draw up a personal prevention plan",
    "Consider genetic counselling",
    "Increase the frequency of medical examinations",
]

SCREENING_ADVICE: dict[ConditionCategory, list[str]] = {
    ConditionCategory.CARDIOVASCULAR: [
        "ECG and echocardiography yearly",
        "Lipid profile every 6 months",
        "Regular blood pressure measurement",
    ],
    ConditionCategory.ONCOLOGY: [
        "Cancer screening appropriate for age and sex",
        "Monthly self-examination",
        "Regular visits to an oncologist",
    ],
    ConditionCategory.DIABETES: [
        "Fasting glucose test yearly",
        "HbA1c every 3-6 months",
        "Eye examination yearly",
    ],
}

DEFAULT_SCREENING_ADVICE = ["Regular preventive check-ups"]

PREVENTION_TIPS: dict[ConditionCategory, list[str]] = {
    ConditionCategory.CARDIOVASCULAR: [
        "Mediterranean diet",
        "Stress management",
        "Enough sleep (7-9 hours)",
        "No smoking",
    ],
    ConditionCategory.ONCOLOGY: [
        "Antioxidant-rich diet",
        "Limit alcohol",
        "Maintain a healthy weight",
        "Avoid carcinogens",
    ],
    ConditionCategory.DIABETES: [
        "Portion control",
        "Low glycaemic index diet",
        "Regular physical activity",
        "Maintain a healthy weight",
    ],
}

DEFAULT_PREVENTION_TIPS = ["Healthy lifestyle"]

FAMILY_RECOMMENDATIONS = [
    "Create a family health plan based on the identified risks",
    "Discuss the analysis results with your family doctor",
    "Consider genetic counselling",
]

FAMILY_HIGH_RISK_RECOMMENDATIONS = [
    "Pay particular attention to preventing the identified high risks",
    "Increase the frequency of medical examinations",
]
