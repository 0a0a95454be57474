"""
Integration tests for the full scoring engine.
Tests dispatch and the response envelope with realistic questionnaires.
"""
import uuid

import pytest
from pydantic import ValidationError

from app.schemas.assessment_request import (
    AssessmentRequest,
    BRCAInput,
    BRCARequest,
    FraminghamAlzheimerInput,
    FraminghamAlzheimerRequest,
)
from app.schemas.assessment_response import (
    BCSCResult,
    BRCAResult,
    CancerResult,
    CRCProResult,
    DemPortResult,
    FraminghamAlzheimerResult,
    QRISK3Result,
    RiskLevel,
)
from app.scoring.engine import evaluate


def _make_request(assessment_type: str, **data) -> AssessmentRequest:
    return AssessmentRequest.model_validate({"assessment_type": assessment_type, "assessment_data": data})


class TestEngineEndToEnd:

    def test_brca_carrier(self):
        """Female BRCA1 carrier aged 40 → 72%, high."""
        resp = evaluate(_make_request("BRCA", brca1_mutation=True, age=40, gender="female"))

        assert resp.assessment_type == "BRCA"
        assert isinstance(resp.result, BRCAResult)
        assert resp.result.risk_percentage == 72
        assert resp.result.risk_level == RiskLevel.HIGH

    def test_qrisk3_dispatch(self):
        resp = evaluate(_make_request("QRISK3", age=45))
        assert isinstance(resp.result, QRISK3Result)
        assert resp.result.risk_level == RiskLevel.LOW

    def test_bcsc_dispatch(self):
        resp = evaluate(_make_request("BCSC", age=60, breast_density="extremely_dense"))
        assert isinstance(resp.result, BCSCResult)
        assert resp.result.risk_percentage == resp.result.five_year_risk

    def test_framingham_dispatch(self):
        resp = evaluate(_make_request("framingham_alzheimer"))
        assert isinstance(resp.result, FraminghamAlzheimerResult)
        assert resp.result.ten_year_risk == 4.5

    def test_cancer_dispatch(self):
        resp = evaluate(_make_request("cancer", age=45, gender="female"))
        assert isinstance(resp.result, CancerResult)
        assert resp.result.risk_percentage == resp.result.ten_year_risk
        assert len(resp.result.cancer_types) == 5

    def test_crc_pro_dispatch(self):
        resp = evaluate(_make_request("crc_pro", age=40))
        assert isinstance(resp.result, CRCProResult)
        assert resp.result.risk_level == RiskLevel.LOW

    def test_demport_dispatch(self):
        resp = evaluate(_make_request("demport"))
        assert isinstance(resp.result, DemPortResult)
        assert resp.result.ten_year_risk == 18.6

    def test_accepts_inner_request(self):
        resp = evaluate(BRCARequest(assessment_data=BRCAInput(brca2_mutation=True, age=40)))
        assert resp.result.risk_percentage == 69

    def test_defaults_fill_missing_answers(self):
        req = FraminghamAlzheimerRequest(assessment_data=FraminghamAlzheimerInput())
        assert evaluate(req).result.risk_level == RiskLevel.LOW

    def test_envelope(self):
        resp = evaluate(_make_request("BRCA"))
        assert resp.engine_version == "1.0"
        assert str(uuid.UUID(resp.assessment_id)) == resp.assessment_id
        assert resp.evaluated_at.tzinfo is not None

    def test_each_call_gets_new_id(self):
        a = evaluate(_make_request("BRCA"))
        b = evaluate(_make_request("BRCA"))
        assert a.assessment_id != b.assessment_id
        assert a.result == b.result

    def test_processing_time_reasonable(self):
        """Scoring should complete in under 50ms (no I/O)."""
        resp = evaluate(_make_request("BCSC"))
        assert resp.processing_time_ms < 50


class TestRequestValidation:

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            _make_request("Gail", age=45)

    def test_out_of_range_age_rejected(self):
        with pytest.raises(ValidationError):
            _make_request("QRISK3", age=90)

    def test_unknown_enum_rejected(self):
        with pytest.raises(ValidationError):
            _make_request("BCSC", breast_density="very_dense")

    def test_unknown_cancer_site_rejected(self):
        with pytest.raises(ValidationError):
            _make_request("cancer", family_cancer_types=["liver"])
