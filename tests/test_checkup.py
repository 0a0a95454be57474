"""
Unit tests for the annual check-up plan.
"""
from dataclasses import dataclass

from app.schemas.assessment_response import CheckupUrgency
from app.scoring.checkup import build_checkup_plan, latest_per_type


@dataclass
class StoredAssessment:
    assessment_type: str
    risk_level: str


def _ids(plan):
    return [item.id for item in plan]


class TestBasePlan:
    def test_default_age(self):
        assert _ids(build_checkup_plan()) == [
            "gynecological", "general-checkup", "blood-tests", "eye-exam",
        ]

    def test_teenager_gets_nothing(self):
        assert build_checkup_plan(age=16) == []

    def test_age_gates(self):
        assert "blood-tests" not in _ids(build_checkup_plan(age=24))
        assert "mammography" in _ids(build_checkup_plan(age=40))
        assert "colonoscopy" not in _ids(build_checkup_plan(age=44))
        assert "colonoscopy" in _ids(build_checkup_plan(age=45))

    def test_frequencies_follow_age(self):
        plan = {item.id: item for item in build_checkup_plan(age=45)}
        assert plan["mammography"].frequency == "Every 2 years"
        assert plan["eye-exam"].frequency == "Yearly"
        plan = {item.id: item for item in build_checkup_plan(age=55)}
        assert plan["mammography"].frequency == "Yearly"

    def test_sorted_by_urgency(self):
        plan = build_checkup_plan(age=60)
        assert _ids(plan) == [
            "gynecological", "mammography",
            "general-checkup", "blood-tests", "colonoscopy",
            "eye-exam",
        ]
        assert plan[-1].urgency == CheckupUrgency.LOW


class TestRiskItems:
    def test_cardiovascular(self):
        plan = build_checkup_plan([StoredAssessment("framingham_alzheimer", "high")], age=30)
        assert plan[0].id == "cardio-extended"
        assert plan[0].frequency == "Every 6 months"

    def test_oncology_from_breast_assessments(self):
        for assessment_type in ("BRCA", "BCSC", "cancer"):
            plan = build_checkup_plan([StoredAssessment(assessment_type, "very_high")], age=30)
            assert plan[0].id == "oncology-screening"

    def test_gastro_needs_age_40(self):
        high_crc = [StoredAssessment("crc_pro", "very_high")]
        assert "gastro-screening" not in _ids(build_checkup_plan(high_crc, age=35))
        plan = build_checkup_plan(high_crc, age=45)
        assert _ids(plan)[:3] == ["gynecological", "mammography", "gastro-screening"]

    def test_moderate_levels_ignored(self):
        assessments = [StoredAssessment("QRISK3", "medium"), StoredAssessment("BRCA", "moderate")]
        assert build_checkup_plan(assessments) == build_checkup_plan()

    def test_no_duplicate_items(self):
        assessments = [StoredAssessment("BRCA", "high"), StoredAssessment("BCSC", "high")]
        assert _ids(build_checkup_plan(assessments)).count("oncology-screening") == 1


class TestLatestPerType:
    def test_keeps_newest(self):
        newest = StoredAssessment("QRISK3", "low")
        rows = [newest, StoredAssessment("BRCA", "high"), StoredAssessment("QRISK3", "high")]
        latest = latest_per_type(rows)
        assert latest[0] is newest
        assert [a.assessment_type for a in latest] == ["QRISK3", "BRCA"]
