"""
Unit Tests for Marker Resolution and Numeric Extraction
"""
import pytest

from labinsight.core.patterns import LabValue, MARKER_ALIASES, extract_number, parse_number, resolve
from labinsight.core.patterns.markers import marker_value, resolve_marker


class TestResolve:
    """Tests for alias-based marker resolution."""

    def test_first_matching_value_in_batch_order(self, make_batch):
        batch = make_batch(("Fasting Glucose", "110"), ("Glucose", "95"))
        assert resolve(batch, ["glucose"]).test_name == "Fasting Glucose"

    def test_first_alias_wins_over_batch_order(self, make_batch):
        batch = make_batch(("Serum ALT", "50"), ("Alanine Aminotransferase", "60"))
        found = resolve(batch, ["alanine aminotransferase", "alt"])
        assert found.test_name == "Alanine Aminotransferase"

    def test_case_insensitive(self, make_batch):
        batch = make_batch(("HEMOGLOBIN A1C", "6.1 %"))
        assert resolve(batch, MARKER_ALIASES["hba1c"]) is batch[0]

    def test_alias_containing_test_name(self, make_batch):
        """A short reported name matches a more specific alias."""
        batch = make_batch(("HDL", "35"))
        assert resolve(batch, ["hdl cholesterol"]) is batch[0]

    def test_bare_cholesterol_resolves_as_hdl(self, make_batch):
        batch = make_batch(("Cholesterol", "210"))
        assert resolve(batch, ["hdl cholesterol"]) is batch[0]

    def test_absent_marker(self, make_batch):
        batch = make_batch(("Sodium", "140"))
        assert resolve(batch, MARKER_ALIASES["creatinine"]) is None

    def test_empty_batch(self):
        assert resolve([], ["glucose"]) is None

    def test_blank_test_name_never_matches(self):
        batch = [LabValue(test_name="", result="5"), LabValue(test_name="   ", result="6")]
        assert resolve(batch, ["glucose"]) is None

    def test_resolve_marker_uses_alias_table(self, make_batch):
        batch = make_batch(("White Blood Cell Count", "12.0"))
        assert resolve_marker(batch, "wbc").test_name == "White Blood Cell Count"

    def test_marker_value_missing(self, make_batch):
        lab, value = marker_value(make_batch(("Sodium", "140")), "tsh")
        assert lab is None
        assert value == 0.0

    def test_marker_value_present(self, make_batch):
        lab, value = marker_value(make_batch(("TSH", "12.1 mIU/L")), "tsh")
        assert lab.test_name == "TSH"
        assert value == pytest.approx(12.1)


class TestExtractNumber:
    """Tests for the first-numeric-token extractor."""

    @pytest.mark.parametrize("raw, expected", [
        ("145 mg/dL", 145.0),
        ("7.2%", 7.2),
        ("<0.01 ng/mL", 0.01),
        (".5", 0.5),
        ("1.2.3", 1.2),
        ("120/80 mmHg", 120.0),
        ("Result 3.5 then 4", 3.5),
        ("0", 0.0),
    ])
    def test_first_token(self, raw, expected):
        assert extract_number(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", ["Normal", "", "Negative", ".", None])
    def test_no_number_is_zero(self, raw):
        assert extract_number(raw) == 0.0

    def test_parse_number_distinguishes_unparseable(self):
        assert parse_number("Negative") is None
        assert parse_number("0 mg/dL") == 0.0
        assert parse_number("5.7 %") == pytest.approx(5.7)
