"""
Unit Tests for the Domain Risk Scorer
"""
import pytest

from labinsight.core.patterns import RISK_DOMAINS, score_risks
from labinsight.core.patterns.risk import cardiovascular_risk, diabetes_risk, kidney_risk


class TestScoreRisks:

    def test_domain_keys(self, make_batch):
        scores = score_risks(make_batch(("Glucose", "90")))
        assert set(scores) == set(RISK_DOMAINS) == {"cardiovascular", "diabetes", "kidneyDisease"}

    def test_scenario_a(self, make_batch):
        scores = score_risks(make_batch(("Fasting Glucose", "145 mg/dL")))
        assert scores["diabetes"] == pytest.approx(50.0)
        assert scores["cardiovascular"] == 0.0
        assert scores["kidneyDisease"] == 0.0

    def test_healthy_panel_scores_zero(self, healthy_panel):
        assert score_risks(healthy_panel) == {
            "cardiovascular": 0.0,
            "diabetes": 0.0,
            "kidneyDisease": 0.0,
        }

    def test_scores_stay_within_bounds(self, make_batch):
        batch = make_batch(
            ("Total Cholesterol", "300"), ("HDL Cholesterol", "20"), ("LDL Cholesterol", "220"),
            ("Glucose", "250"), ("HbA1c", "9.1"),
            ("Creatinine", "4.0"), ("eGFR", "15"),
        )
        scores = score_risks(batch)
        assert all(0.0 <= v <= 100.0 for v in scores.values())
        assert scores == {
            "cardiovascular": pytest.approx(100.0),
            "diabetes": pytest.approx(100.0),
            "kidneyDisease": pytest.approx(100.0),
        }


class TestCardiovascularRisk:

    def test_ldl_only(self, make_batch):
        assert cardiovascular_risk(make_batch(("LDL Cholesterol", "170"))) == pytest.approx(3 / 7 * 100)

    def test_total_and_hdl(self, make_batch):
        batch = make_batch(("Total Cholesterol", "241"), ("HDL Cholesterol", "39"))
        assert cardiovascular_risk(batch) == pytest.approx(4 / 7 * 100)

    def test_short_hdl_name_matches_alias(self, make_batch):
        assert cardiovascular_risk(make_batch(("HDL", "35"))) == pytest.approx(2 / 7 * 100)

    def test_boundaries_are_strict(self, make_batch):
        batch = make_batch(("Total Cholesterol", "240"), ("HDL Cholesterol", "40"), ("LDL Cholesterol", "160"))
        assert cardiovascular_risk(batch) == 0.0


class TestDiabetesRisk:

    @pytest.mark.parametrize("glucose, expected", [
        ("126", 50.0),
        ("125.9", 30.0),
        ("100", 30.0),
        ("99", 0.0),
    ])
    def test_glucose_tiers(self, make_batch, glucose, expected):
        assert diabetes_risk(make_batch(("Glucose", glucose))) == pytest.approx(expected)

    def test_glucose_and_hba1c(self, make_batch):
        assert diabetes_risk(make_batch(("Glucose", "110"), ("HbA1c", "6.0"))) == pytest.approx(60.0)


class TestKidneyRisk:

    def test_moderate_both(self, make_batch):
        assert kidney_risk(make_batch(("Creatinine", "1.4"), ("eGFR", "45"))) == pytest.approx(60.0)

    def test_severe_creatinine(self, make_batch):
        assert kidney_risk(make_batch(("Creatinine", "2.1"))) == pytest.approx(50.0)

    def test_scorer_thresholds_differ_from_detector(self, make_batch):
        """Creatinine 1.4 scores on the kidney axis without forming a kidney pattern."""
        from labinsight.core.patterns.rules_organ import detect_kidney_dysfunction

        batch = make_batch(("Creatinine", "1.4"))
        assert kidney_risk(batch) == pytest.approx(30.0)
        assert detect_kidney_dysfunction(batch) is None
