"""
Cardiac Pattern Rules

Markers consumed:
    troponin           (ng/mL) - injury: > 0.04
    total_cholesterol  (mg/dL) - high: > 240
    ldl                (mg/dL) - high: > 160
    hdl                (mg/dL) - low: < 40

Rule ordering (highest severity first):
    1. Acute cardiac injury  - troponin above the 99th-percentile cut-off
    2. Cardiac risk factors  - two or more adverse lipid markers
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from .base import LabPattern, LabValue, PatternType, Severity
from .markers import marker_value

# ── Thresholds ────────────────────────────────────────────────────────────────

TROPONIN_HIGH          = 0.04
TOTAL_CHOLESTEROL_HIGH = 240
LDL_HIGH               = 160
HDL_LOW                = 40

ACUTE_INJURY_CONFIDENCE = 0.95
RISK_FACTOR_CONFIDENCE  = 0.75


def _acute_cardiac_injury(troponin: LabValue) -> LabPattern:
    return LabPattern(
        pattern_type=PatternType.ACUTE_CARDIAC_INJURY,
        description="Elevated troponin indicates cardiac muscle injury",
        severity=Severity.CRITICAL,
        confidence=ACUTE_INJURY_CONFIDENCE,
        related_tests=[troponin.test_name],
        clinical_significance="Possible myocardial infarction or cardiac injury",
        recommendations=[
            "IMMEDIATE cardiology consultation",
            "ECG and cardiac monitoring",
            "Serial troponin measurements",
            "Consider emergency intervention",
        ],
    )


def detect_cardiac_pattern(batch: Sequence[LabValue]) -> Optional[LabPattern]:
    """
    Troponin-gated cardiac check.

    An elevated troponin returns ACUTE_CARDIAC_INJURY straight away and the
    lipid risk factors are never evaluated.  Otherwise two or more of
    total cholesterol > 240, LDL > 160, HDL < 40 give CARDIAC_RISK_FACTORS.
    """
    troponin, troponin_val = marker_value(batch, "troponin")
    if troponin is not None and troponin_val > TROPONIN_HIGH:
        return _acute_cardiac_injury(troponin)

    total, total_val = marker_value(batch, "total_cholesterol")
    ldl, ldl_val = marker_value(batch, "ldl")
    hdl, hdl_val = marker_value(batch, "hdl")

    related: List[str] = []
    if total is not None and total_val > TOTAL_CHOLESTEROL_HIGH:
        related.append(total.test_name)
    if ldl is not None and ldl_val > LDL_HIGH:
        related.append(ldl.test_name)
    if hdl is not None and hdl_val < HDL_LOW:
        related.append(hdl.test_name)

    if len(related) < 2:
        return None

    return LabPattern(
        pattern_type=PatternType.CARDIAC_RISK_FACTORS,
        description="Multiple cardiac risk factors identified",
        severity=Severity.MODERATE,
        confidence=RISK_FACTOR_CONFIDENCE,
        related_tests=related,
        clinical_significance="Increased cardiovascular disease risk",
        recommendations=[
            "Lifestyle modifications",
            "Consider statin therapy",
            "Blood pressure monitoring",
            "Cardiovascular risk assessment",
        ],
    )
