"""
Unit tests for the DemPoRT dementia calculator.
"""
from app.schemas.assessment_request import DemPortInput
from app.schemas.assessment_response import RiskLevel
from app.scoring.demport import BASE_RECOMMENDATIONS, calculate_demport_risk


def _make_demport(**kwargs) -> DemPortInput:
    defaults = {
        "age": 65,
        "gender": "female",
        "education_years": 12,
        "apoe4_status": "unknown",
        "physical_activity": "moderate",
        "alcohol_consumption": "none",
    }
    defaults.update(kwargs)
    return DemPortInput(**defaults)


class TestDemPort:
    def test_default_profile_intermediate(self):
        # 2.5 + 0.3 - 0.5 - 0.3 = 2.0 → 15 + 3.6
        r = calculate_demport_risk(_make_demport())
        assert r.ten_year_risk == 18.6
        assert r.risk_percentage == 18.6
        assert r.lifetime_risk == 46.5
        assert r.risk_level == RiskLevel.INTERMEDIATE
        assert r.population_percentile == 56
        assert r.risk_factors == ["Age 65-74"]
        assert r.protective_factors == ["Secondary education", "Moderate physical activity"]
        assert r.recommendations == BASE_RECOMMENDATIONS

    def test_midlife_points_have_no_label(self):
        # 0.3 (age 45-54) - 0.3 (moderate activity) → baseline 5
        r = calculate_demport_risk(_make_demport(age=50, gender="male", education_years=10))
        assert r.ten_year_risk == 5.0
        assert r.risk_factors == []
        assert r.risk_level == RiskLevel.LOW

    def test_floor(self):
        r = calculate_demport_risk(_make_demport(
            age=40, gender="male", education_years=16, physical_activity="high", bmi=22,
            sleep_quality="good", stress_levels="low", social_engagement="high",
            cognitive_activities="high",
        ))
        assert r.ten_year_risk == 0.5
        assert r.lifetime_risk == 2.0
        assert r.population_percentile == 5
        assert r.risk_level == RiskLevel.LOW

    def test_high(self):
        r = calculate_demport_risk(_make_demport(age=85, apoe4_status="homozygous"))
        assert r.ten_year_risk == 39.3
        assert r.lifetime_risk == 85.0
        assert r.risk_level == RiskLevel.HIGH
        assert r.population_percentile == 95
        assert "See a geneticist and a neurologist" in r.recommendations

    def test_capped_at_60(self):
        r = calculate_demport_risk(_make_demport(
            age=85, apoe4_status="homozygous", stroke_history=True, diabetes=True,
            systolic_bp=170, total_cholesterol=250,
        ))
        assert r.ten_year_risk == 60.0
        assert r.lifetime_risk == 85.0

    def test_vascular_factors(self):
        r = calculate_demport_risk(_make_demport(systolic_bp=150, hdl_cholesterol=35, heart_disease=True))
        assert r.risk_factors == [
            "Age 65-74",
            "Elevated blood pressure",
            "Low HDL cholesterol",
            "Cardiovascular disease",
        ]
        assert "Control your blood pressure" not in r.recommendations

    def test_low_activity_is_a_risk(self):
        r = calculate_demport_risk(_make_demport(physical_activity="low"))
        assert "Low physical activity" in r.risk_factors
        assert "Increase physical activity" in r.recommendations

    def test_recommendations_unique(self):
        r = calculate_demport_risk(_make_demport(
            apoe4_status="heterozygous", smoking_status="current", bmi=32,
            sleep_quality="poor", family_dementia_history=True,
        ))
        assert len(r.recommendations) == len(set(r.recommendations))
        assert r.recommendations[-5:] == BASE_RECOMMENDATIONS

    def test_same_input_same_output(self):
        data = _make_demport(age=72, diabetes=True, stress_levels="high")
        assert calculate_demport_risk(data) == calculate_demport_risk(data)
