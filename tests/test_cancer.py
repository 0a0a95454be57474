"""
Unit tests for the multi-site cancer calculator.
"""
from app.schemas.assessment_request import CancerInput
from app.schemas.assessment_response import RiskLevel
from app.scoring.cancer import calculate_cancer_risk, lung_risk, breast_risk


def _make_cancer(**kwargs) -> CancerInput:
    defaults = {
        "age": 45,
        "gender": "female",
        "height": 165,
        "weight": 65,
        "smoking_status": "never",
        "skin_type": "medium",
        "sun_exposure": "moderate",
    }
    defaults.update(kwargs)
    return CancerInput(**defaults)


def _site(result, cancer_type):
    return next(s for s in result.cancer_types if s.cancer_type == cancer_type)


class TestSites:
    def test_female_sites(self):
        r = calculate_cancer_risk(_make_cancer())
        assert [s.cancer_type for s in r.cancer_types] == [
            "lung", "breast", "colorectal", "melanoma", "cervical",
        ]

    def test_male_sites(self):
        r = calculate_cancer_risk(_make_cancer(gender="male", age=30))
        assert [s.cancer_type for s in r.cancer_types] == [
            "lung", "colorectal", "melanoma", "prostate",
        ]

    def test_baseline_site_values(self):
        r = calculate_cancer_risk(_make_cancer())
        assert _site(r, "lung").ten_year_risk == 0.5
        assert _site(r, "breast").ten_year_risk == 2.5
        assert _site(r, "breast").lifetime_risk == 7.5
        assert _site(r, "colorectal").lifetime_risk == 4.2
        # 0.3 × 1.1 for age 45
        assert _site(r, "melanoma").ten_year_risk == 0.3
        assert _site(r, "cervical").ten_year_risk == 0.8
        assert all(s.risk_level == RiskLevel.LOW for s in r.cancer_types)

    def test_heavy_smoker_lung(self):
        # 80 pack-years: 0.5 × 9 × 1.2 (age 60) × 1.8 (family) = 9.72
        data = _make_cancer(
            age=60, smoking_status="current", cigarettes_per_day=40, smoking_years=40,
            family_cancer_history=True, family_cancer_types=["lung"],
        )
        lung = lung_risk(data)
        assert lung.ten_year_risk == 9.7
        assert lung.risk_level == RiskLevel.HIGH
        assert lung.major_risk_factors == ["Current smoking", "Family history of lung cancer"]

    def test_family_site_needs_history_flag(self):
        lung = lung_risk(_make_cancer(family_cancer_types=["lung"]))
        assert lung.ten_year_risk == 0.5

    def test_first_degree_breast(self):
        breast = breast_risk(_make_cancer(
            family_cancer_history=True, family_cancer_types=["breast"], family_cancer_degree="first",
        ))
        assert breast.ten_year_risk == 5.3  # 2.5 × 2.1
        assert breast.risk_level == RiskLevel.MODERATE
        assert breast.major_risk_factors == ["Family history of breast cancer (first-degree)"]

    def test_zero_pregnancies_counts_but_unknown_does_not(self):
        assert "No pregnancies" in breast_risk(_make_cancer(pregnancies_count=0)).major_risk_factors
        assert breast_risk(_make_cancer()).major_risk_factors == []


class TestOverall:
    def test_default_female(self):
        # 0.5 + 2.5 + 1.2 + 0.3 + 0.8
        r = calculate_cancer_risk(_make_cancer())
        assert r.ten_year_risk == 5.3
        assert r.risk_percentage == 5.3
        assert r.lifetime_risk == 19.7
        assert r.risk_level == RiskLevel.MODERATE
        assert r.population_percentile == 88
        assert r.recommendations == [
            "Lead a healthy lifestyle",
            "Attend regular preventive check-ups",
        ]
        assert r.lifestyle_recommendations == []

    def test_young_male_low(self):
        r = calculate_cancer_risk(_make_cancer(gender="male", age=30))
        assert r.ten_year_risk == 3.5
        assert r.risk_level == RiskLevel.LOW
        assert r.population_percentile == 58
        assert r.screening_recommendations == []

    def test_elevated_site_adds_specialist_advice(self):
        r = calculate_cancer_risk(_make_cancer(
            age=60, smoking_status="current", cigarettes_per_day=40, smoking_years=40,
            family_cancer_history=True, family_cancer_types=["lung"],
        ))
        assert "See an oncologist about the elevated risks" in r.recommendations
        assert "Consider genetic counselling" in r.recommendations
        assert "Quit smoking, the most important step to lower cancer risk" in r.recommendations

    def test_total_capped_at_100(self):
        r = calculate_cancer_risk(_make_cancer(
            age=100, gender="male", smoking_status="current", cigarettes_per_day=100, smoking_years=80,
            family_cancer_history=True,
            family_cancer_types=["lung", "colorectal", "melanoma", "prostate"],
            inflammatory_bowel_disease=True, alcohol_consumption="heavy",
            skin_type="very_fair", sun_exposure="high",
        ))
        assert r.risk_percentage == 100.0
        assert r.lifetime_risk == 100.0
        assert r.risk_level == RiskLevel.VERY_HIGH
        assert r.population_percentile == 95


class TestScreeningAndLifestyle:
    def test_default_female_screening(self):
        r = calculate_cancer_risk(_make_cancer())
        assert r.screening_recommendations == [
            "Regular mammography (yearly after 40)",
            "Colonoscopy every 10 years from age 45",
        ]

    def test_regular_screening_suppresses_advice(self):
        r = calculate_cancer_risk(_make_cancer(
            mammography_frequency="regular", colonoscopy_frequency="regular",
        ))
        assert r.screening_recommendations == []

    def test_fair_skin_dermatology(self):
        r = calculate_cancer_risk(_make_cancer(skin_type="fair"))
        assert "Yearly dermatology check" in r.screening_recommendations

    def test_lifestyle(self):
        r = calculate_cancer_risk(_make_cancer(
            weight=80, physical_activity="low", processed_meat_consumption="high", sun_exposure="high",
        ))
        assert r.lifestyle_recommendations == [
            "Maintain a healthy weight",
            "Increase physical activity (at least 150 minutes a week)",
            "Avoid processed meat",
            "Protect yourself from the sun: sunscreen and protective clothing",
        ]

    def test_same_input_same_output(self):
        data = _make_cancer(age=58, smoking_status="former", cigarettes_per_day=10, smoking_years=20)
        assert calculate_cancer_risk(data) == calculate_cancer_risk(data)
