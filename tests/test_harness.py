"""
Tests for the algorithm check harness (simulated QRISK3 / Gail).
"""
from app.schemas.assessment_response import RiskLevel
from app.scoring.harness import (
    ALL_FIXTURES,
    GAIL_FIXTURES,
    QRISK3_FIXTURES,
    Fixture,
    GailSimInput,
    QRISK3SimInput,
    run_all,
    run_fixture,
    simulate_gail,
    simulate_qrisk3,
)


def _make_qrisk3(**kwargs) -> QRISK3SimInput:
    defaults = {
        "age": 45,
        "gender": "female",
        "systolic_bp": 120,
        "cholesterol_ratio": 4.0,
        "bmi": 22,
    }
    defaults.update(kwargs)
    return QRISK3SimInput(**defaults)


class TestQRISK3Simulation:
    def test_low_fixture_within_tolerance(self):
        result = run_fixture(QRISK3_FIXTURES[0])
        assert result.passed
        assert abs(result.actual_risk - 2.0) <= 2
        assert result.actual_level == "low"

    def test_high_fixture_is_capped_and_reported_failing(self):
        """The simulated score for the high fixture saturates at the 45% cap."""
        result = run_fixture(QRISK3_FIXTURES[1])
        assert result.actual_level == "high"
        assert result.actual_risk == 45.0
        assert not result.passed

    def test_moderate(self):
        # 10 + 3 (BP) + 2 (ratio) + 1 (BMI) = 16 → 12.8
        r = simulate_qrisk3(_make_qrisk3(systolic_bp=130, cholesterol_ratio=5.0, bmi=27))
        assert r.risk == 12.8
        assert r.level == RiskLevel.MODERATE

    def test_floor(self):
        assert simulate_qrisk3(_make_qrisk3(age=25)).risk == 0.1

    def test_comorbidity_points(self):
        base = simulate_qrisk3(_make_qrisk3(age=35))  # score 5 → 4.0
        ckd = simulate_qrisk3(_make_qrisk3(age=35, chronic_kidney_disease=True))  # 10 → 8.0
        assert base.risk == 4.0
        assert ckd.risk == 8.0

    def test_same_input_same_output(self):
        data = _make_qrisk3(age=60, smoking=True, diabetes=True)
        assert simulate_qrisk3(data) == simulate_qrisk3(data)


class TestGailSimulation:
    def test_low_fixture_passes(self):
        result = run_fixture(GAIL_FIXTURES[0])
        assert result.passed
        assert result.actual_risk == 0.6

    def test_high_fixture_fails_tolerance(self):
        result = run_fixture(GAIL_FIXTURES[1])
        assert result.actual_level == "high"
        assert not result.passed

    def test_nulliparous_increases_risk(self):
        base = simulate_gail(GailSimInput(
            age=45, age_at_menarche=13, age_at_first_birth=25,
            num_relatives=0, num_biopsies=0, hyperplasia="none",
        ))
        nulliparous = simulate_gail(GailSimInput(
            age=45, age_at_menarche=13, age_at_first_birth=None,
            num_relatives=0, num_biopsies=0, hyperplasia="none",
        ))
        assert nulliparous.risk > base.risk

    def test_same_input_same_output(self):
        data = GAIL_FIXTURES[1].input
        assert simulate_gail(data) == simulate_gail(data)


class TestRunner:
    def test_runs_every_fixture(self):
        results = run_all()
        assert len(results) == len(ALL_FIXTURES) == 4
        assert sum(r.passed for r in results) == 2

    def test_unknown_algorithm_reports_error(self):
        bogus = Fixture(
            name="bogus",
            algorithm="framingham",
            input=QRISK3_FIXTURES[0].input,
            expected_risk=1.0,
            expected_level=RiskLevel.LOW,
            description="not a simulated algorithm",
        )
        result = run_fixture(bogus)
        assert not result.passed
        assert result.actual_level == "error"
        assert "Unknown algorithm" in result.error
