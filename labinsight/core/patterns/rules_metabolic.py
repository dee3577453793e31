"""
Metabolic Pattern Rules

Markers consumed:
    glucose        (mg/dL) - fasting normal: < 100
    hdl            (mg/dL) - low: < 40
    triglycerides  (mg/dL) - normal: < 150
    hba1c          (%)     - normal: < 5.7

Rules:
    1. Metabolic syndrome  - at least two of high glucose / low HDL / high TG
    2. Diabetic pattern    - ADA cut-offs on fasting glucose and HbA1c
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from .base import LabPattern, LabValue, PatternType, Severity
from .markers import marker_value

# ── Thresholds ────────────────────────────────────────────────────────────────

GLUCOSE_IMPAIRED   = 100    # impaired fasting glucose
GLUCOSE_DIABETIC   = 126    # ADA diabetes cut-off
HDL_LOW            = 40
TRIGLYCERIDES_HIGH = 150
HBA1C_PREDIABETIC  = 5.7
HBA1C_DIABETIC     = 6.5

METABOLIC_CONFIDENCE = 0.8
DIABETIC_CONFIDENCE  = 0.9


# ── Rule 1: Metabolic Syndrome ────────────────────────────────────────────────

def detect_metabolic_syndrome(batch: Sequence[LabValue]) -> Optional[LabPattern]:
    """
    Two or more of: glucose >= 100, HDL < 40, triglycerides >= 150.

    Three criteria escalate to HIGH.  Waist circumference and blood pressure
    are part of the clinical definition but are not lab values.
    """
    glucose, glucose_val = marker_value(batch, "glucose")
    hdl, hdl_val = marker_value(batch, "hdl")
    tg, tg_val = marker_value(batch, "triglycerides")

    related: List[str] = []
    if glucose is not None and glucose_val >= GLUCOSE_IMPAIRED:
        related.append(glucose.test_name)
    if hdl is not None and hdl_val < HDL_LOW:
        related.append(hdl.test_name)
    if tg is not None and tg_val >= TRIGLYCERIDES_HIGH:
        related.append(tg.test_name)

    score = len(related)
    if score < 2:
        return None

    return LabPattern(
        pattern_type=PatternType.METABOLIC_SYNDROME,
        description="Multiple markers suggest metabolic syndrome risk",
        severity=Severity.HIGH if score >= 3 else Severity.MODERATE,
        confidence=METABOLIC_CONFIDENCE,
        related_tests=related,
        clinical_significance="Increased risk for cardiovascular disease and type 2 diabetes",
        recommendations=[
            "Consider comprehensive metabolic evaluation",
            "Lifestyle modifications (diet and exercise)",
            "Monitor blood pressure and weight",
            "Consider cardiology consultation if high risk",
        ],
    )


# ── Rule 2: Diabetes / Pre-diabetes ──────────────────────────────────────────

def detect_diabetic_pattern(batch: Sequence[LabValue]) -> Optional[LabPattern]:
    """
    Glucose >= 126 or HbA1c >= 6.5 -> diabetes (HIGH).
    Otherwise glucose >= 100 or HbA1c >= 5.7 -> pre-diabetes (MODERATE).

    The glucose-derived and HbA1c-derived levels combine by taking the higher.
    """
    glucose, glucose_val = marker_value(batch, "glucose")
    hba1c, hba1c_val = marker_value(batch, "hba1c")

    related: List[str] = []
    sentences: List[str] = []
    levels: List[Severity] = []

    if glucose is not None:
        if glucose_val >= GLUCOSE_DIABETIC:
            levels.append(Severity.HIGH)
            sentences.append("Elevated fasting glucose indicates diabetes")
            related.append(glucose.test_name)
        elif glucose_val >= GLUCOSE_IMPAIRED:
            levels.append(Severity.MODERATE)
            sentences.append("Elevated fasting glucose suggests pre-diabetes")
            related.append(glucose.test_name)

    if hba1c is not None:
        if hba1c_val >= HBA1C_DIABETIC:
            levels.append(Severity.HIGH)
            sentences.append("Elevated HbA1c confirms diabetes diagnosis")
            related.append(hba1c.test_name)
        elif hba1c_val >= HBA1C_PREDIABETIC:
            levels.append(Severity.MODERATE)
            sentences.append("Elevated HbA1c suggests pre-diabetes")
            related.append(hba1c.test_name)

    if not levels:
        return None

    severity = Severity.highest(*levels)
    pattern_type = PatternType.DIABETES if severity == Severity.HIGH else PatternType.PRE_DIABETES

    return LabPattern(
        pattern_type=pattern_type,
        description=". ".join(sentences),
        severity=severity,
        confidence=DIABETIC_CONFIDENCE,
        related_tests=related,
        clinical_significance="Glucose metabolism dysfunction requiring management",
        recommendations=[
            "Diabetes education and lifestyle counseling",
            "Regular glucose monitoring",
            "Consider antidiabetic medications",
            "Screen for diabetic complications",
            "Ophthalmology and podiatry referrals",
        ],
    )
