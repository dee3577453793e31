"""
Pytest Configuration and Fixtures

Shared fixtures for lab-pattern engine tests.
"""
import pytest
from typing import List

from labinsight.core.patterns import LabValue, LabSnapshot


def labs(*pairs) -> List[LabValue]:
    """Build a batch from (test_name, result) pairs."""
    return [LabValue(test_name=name, result=result) for name, result in pairs]


@pytest.fixture
def healthy_panel() -> List[LabValue]:
    """A batch where every marker is within range."""
    return labs(
        ("Fasting Glucose", "88 mg/dL"),
        ("HbA1c", "5.2 %"),
        ("HDL Cholesterol", "55 mg/dL"),
        ("LDL Cholesterol", "110 mg/dL"),
        ("Total Cholesterol", "180 mg/dL"),
        ("Triglycerides", "120 mg/dL"),
        ("Creatinine", "0.9 mg/dL"),
        ("eGFR", "95 mL/min/1.73m2"),
        ("TSH", "2.1 mIU/L"),
        ("CRP", "1.0 mg/L"),
    )


@pytest.fixture
def unrelated_panel() -> List[LabValue]:
    """A batch with no marker any detector or scorer looks for."""
    return labs(
        ("Sodium", "140 mmol/L"),
        ("Potassium", "4.1 mmol/L"),
        ("Vitamin D", "32 ng/mL"),
    )


@pytest.fixture
def multi_pattern_panel() -> List[LabValue]:
    """Kidney, thyroid, diabetic and inflammation patterns, listed in reverse order."""
    return labs(
        ("ESR", "35 mm/hr"),
        ("CRP", "4.0 mg/L"),
        ("Glucose", "130 mg/dL"),
        ("TSH", "6.0 mIU/L"),
        ("Creatinine", "2.0 mg/dL"),
    )


@pytest.fixture
def glucose_history() -> List[LabSnapshot]:
    """Two quarterly panels, newest first."""
    return [
        LabSnapshot("2024-04-01", labs(("Glucose", "120 mg/dL"), ("HDL", "45 mg/dL"))),
        LabSnapshot("2024-01-01", labs(("Glucose", "140 mg/dL"), ("HDL", "35 mg/dL"))),
    ]


@pytest.fixture
def make_batch():
    """Factory fixture: make_batch(("TSH", "12.1"), ...) -> List[LabValue]."""
    return labs
