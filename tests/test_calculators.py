"""
Unit tests for the QRISK3, BCSC and Framingham-Alzheimer calculators.
"""
from app.schemas.assessment_request import BCSCInput, FraminghamAlzheimerInput, QRISK3Input
from app.schemas.assessment_response import RiskLevel
from app.scoring.bcsc import calculate_bcsc_risk
from app.scoring.framingham import BASE_RECOMMENDATIONS, calculate_framingham_risk
from app.scoring.qrisk3 import calculate_qrisk3_risk, qrisk3_points


def _make_qrisk3(**kwargs) -> QRISK3Input:
    defaults = {
        "age": 45,
        "gender": "female",
        "smoking_status": "non_smoker",
        "cholesterol_hdl_ratio": 4.0,
        "systolic_blood_pressure": 120.0,
        "bmi": 25.0,
        "ethnicity": "white",
    }
    defaults.update(kwargs)
    return QRISK3Input(**defaults)


def _make_bcsc(**kwargs) -> BCSCInput:
    defaults = {
        "age": 45,
        "race_ethnicity": "white",
        "breast_density": "scattered_fibroglandular",
    }
    defaults.update(kwargs)
    return BCSCInput(**defaults)


def _make_framingham(**kwargs) -> FraminghamAlzheimerInput:
    defaults = {
        "age": 65,
        "gender": "female",
        "education_years": 12,
        "apoe4_status": "unknown",
        "physical_activity": "moderate",
        "alcohol_consumption": "light",
    }
    defaults.update(kwargs)
    return FraminghamAlzheimerInput(**defaults)


class TestQRISK3:
    def test_default_profile_low(self):
        # (45-25)*0.5 + (4-3)*3 = 13 → 2.6%
        r = calculate_qrisk3_risk(_make_qrisk3())
        assert r.risk_percentage == 2.6
        assert r.risk_level == RiskLevel.LOW
        assert "Keep up a healthy lifestyle" in r.recommendations
        assert "Consult a cardiologist" not in r.recommendations

    def test_floor_at_one_percent(self):
        r = calculate_qrisk3_risk(_make_qrisk3(
            age=25, cholesterol_hdl_ratio=1.0, systolic_blood_pressure=70.0, ethnicity="chinese",
        ))
        assert r.risk_percentage == 1.0

    def test_medium(self):
        # 20 + 15 + 25 + 20 + 3 = 83 → 16.6%
        data = _make_qrisk3(age=65, gender="male", smoking_status="heavy_smoker", diabetes=True)
        assert qrisk3_points(data) == 83
        r = calculate_qrisk3_risk(data)
        assert r.risk_percentage == 16.6
        assert r.risk_level == RiskLevel.MEDIUM
        assert "Consult a cardiologist" in r.recommendations
        assert "Stopping smoking is the top priority" in r.recommendations

    def test_high(self):
        r = calculate_qrisk3_risk(_make_qrisk3(
            age=65, gender="male", smoking_status="heavy_smoker", diabetes=True, angina_or_heart_attack=True,
        ))
        assert r.risk_percentage == 21.6
        assert r.risk_level == RiskLevel.HIGH

    def test_untreated_hypertension_advice(self):
        recs = calculate_qrisk3_risk(_make_qrisk3(systolic_blood_pressure=150.0)).recommendations
        assert "Discuss antihypertensive medication with your doctor" in recs

    def test_treated_hypertension_no_medication_advice(self):
        recs = calculate_qrisk3_risk(_make_qrisk3(
            systolic_blood_pressure=150.0, blood_pressure_treatment=True,
        )).recommendations
        assert "Blood pressure control" in recs
        assert "Discuss antihypertensive medication with your doctor" not in recs

    def test_same_input_same_output(self):
        data = _make_qrisk3(age=58, gender="male", smoking_status="light_smoker", bmi=31.0)
        first = calculate_qrisk3_risk(data)
        assert calculate_qrisk3_risk(data) == first
        assert calculate_qrisk3_risk(data.model_copy()) == first


class TestBCSC:
    def test_default_profile_low(self):
        r = calculate_bcsc_risk(_make_bcsc())
        assert r.risk_level == RiskLevel.LOW
        assert 0.3 < r.five_year_risk < 0.4
        assert r.risk_percentage == r.five_year_risk
        assert "Mammography every 2 years starting at age 50" in r.recommendations

    def test_intermediate(self):
        # -6.5 + 1.6 + 0.5 + 0.6 = -3.8 → ~2.19%
        r = calculate_bcsc_risk(_make_bcsc(
            age=60, family_history_first_degree=True, breast_density="extremely_dense",
        ))
        assert r.risk_level == RiskLevel.INTERMEDIATE
        assert 2.1 < r.five_year_risk < 2.3
        assert "Annual mammography starting at age 40" in r.recommendations
        assert "Supplemental screening (ultrasound or tomosynthesis) due to dense breasts" in r.recommendations

    def test_high(self):
        r = calculate_bcsc_risk(_make_bcsc(
            age=75,
            family_history_first_degree=True,
            previous_breast_biopsy=True,
            biopsy_with_atypia=True,
            breast_density="extremely_dense",
            current_hormone_therapy=True,
            nulliparous=True,
        ))
        assert r.risk_level == RiskLevel.HIGH
        assert r.five_year_risk > 10
        assert r.lifetime_risk <= 85
        assert "Consider breast MRI in addition to mammography" in r.recommendations
        assert "Discuss the risks and benefits of hormone therapy with your doctor" in r.recommendations

    def test_atypia_needs_biopsy(self):
        base = calculate_bcsc_risk(_make_bcsc())
        atypia_only = calculate_bcsc_risk(_make_bcsc(biopsy_with_atypia=True))
        assert base.five_year_risk == atypia_only.five_year_risk

    def test_late_first_birth(self):
        base = calculate_bcsc_risk(_make_bcsc(age_at_first_birth=25))
        late = calculate_bcsc_risk(_make_bcsc(age_at_first_birth=32))
        assert late.five_year_risk > base.five_year_risk

    def test_same_input_same_output(self):
        data = _make_bcsc(age=62, previous_breast_biopsy=True, breast_density="heterogeneously_dense")
        first = calculate_bcsc_risk(data)
        assert calculate_bcsc_risk(data) == first
        assert calculate_bcsc_risk(data.model_copy()) == first


class TestFramingham:
    def test_default_profile_low(self):
        # age 65 (+2) + female (+0.5) + light alcohol (-0.25) = 2.25
        r = calculate_framingham_risk(_make_framingham())
        assert r.ten_year_risk == 4.5
        assert r.lifetime_risk == 9.0
        assert r.risk_level == RiskLevel.LOW
        assert r.risk_factors == ["Age 65-74"]
        assert r.protective_factors == ["Moderate alcohol consumption"]
        assert r.recommendations == BASE_RECOMMENDATIONS

    def test_high(self):
        r = calculate_framingham_risk(_make_framingham(age=85, apoe4_status="homozygous"))
        assert r.ten_year_risk == 18.5  # 4 + 0.5 + 5 - 0.25
        assert r.risk_level == RiskLevel.HIGH
        assert "Two copies of the APOE4 gene" in r.risk_factors

    def test_intermediate(self):
        r = calculate_framingham_risk(_make_framingham(family_history_dementia=True, diabetes=True))
        # 2.25 + 1.5 + 1 = 4.75 → 9.5
        assert r.ten_year_risk == 9.5
        assert r.risk_level == RiskLevel.INTERMEDIATE

    def test_floor(self):
        r = calculate_framingham_risk(_make_framingham(
            age=40, gender="male", education_years=16, physical_activity="high", alcohol_consumption="none",
        ))
        assert r.ten_year_risk == 0.1
        assert r.lifetime_risk == 0.5
        assert r.risk_level == RiskLevel.LOW

    def test_recommendations_unique(self):
        r = calculate_framingham_risk(_make_framingham(
            apoe4_status="heterozygous", smoking_status="current", bmi=32, cognitive_complaints=True,
        ))
        assert len(r.recommendations) == len(set(r.recommendations))
        assert r.recommendations[-4:] == BASE_RECOMMENDATIONS

    def test_same_input_same_output(self):
        data = _make_framingham(age=78, diabetes=True, physical_activity="low")
        first = calculate_framingham_risk(data)
        assert calculate_framingham_risk(data) == first
        assert calculate_framingham_risk(data.model_copy()) == first
