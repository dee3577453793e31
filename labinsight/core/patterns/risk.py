"""
Domain Risk Scorer

Scores three clinical axes on a 0-100 scale from weighted threshold checks.

The thresholds and alias lists here are independent of the pattern
detectors and differ from them in places (e.g. creatinine > 1.3 scores,
while kidney_dysfunction needs > 1.5).

    cardiovascular : total cholesterol > 240 (+2), HDL < 40 (+2), LDL > 160 (+3)   / 7
    diabetes       : glucose >= 126 (+5) | >= 100 (+3), HbA1c >= 6.5 (+5) | >= 5.7 (+3)   / 10
    kidneyDisease  : creatinine > 2.0 (+5) | > 1.3 (+3), GFR < 30 (+5) | < 60 (+3)   / 10
"""
from __future__ import annotations

from typing import Dict, Sequence

from .base import LabValue
from .markers import extract_number, resolve

CARDIOVASCULAR = "cardiovascular"
DIABETES       = "diabetes"
KIDNEY_DISEASE = "kidneyDisease"

RISK_DOMAINS = (CARDIOVASCULAR, DIABETES, KIDNEY_DISEASE)

CARDIOVASCULAR_MAX = 7
DIABETES_MAX       = 10
KIDNEY_MAX         = 10


def _value(batch: Sequence[LabValue], *aliases: str):
    lab = resolve(batch, aliases)
    if lab is None:
        return None
    return extract_number(lab.result)


def _normalise(points: float, denominator: float) -> float:
    return min(points / denominator * 100, 100.0)


def cardiovascular_risk(batch: Sequence[LabValue]) -> float:
    points = 0
    total = _value(batch, "total cholesterol")
    hdl = _value(batch, "hdl cholesterol")
    ldl = _value(batch, "ldl cholesterol")

    if total is not None and total > 240:
        points += 2
    if hdl is not None and hdl < 40:
        points += 2
    if ldl is not None and ldl > 160:
        points += 3

    return _normalise(points, CARDIOVASCULAR_MAX)


def diabetes_risk(batch: Sequence[LabValue]) -> float:
    points = 0
    glucose = _value(batch, "glucose", "fasting glucose")
    hba1c = _value(batch, "hba1c")

    if glucose is not None:
        if glucose >= 126:
            points += 5
        elif glucose >= 100:
            points += 3

    if hba1c is not None:
        if hba1c >= 6.5:
            points += 5
        elif hba1c >= 5.7:
            points += 3

    return _normalise(points, DIABETES_MAX)


def kidney_risk(batch: Sequence[LabValue]) -> float:
    points = 0
    creatinine = _value(batch, "creatinine")
    gfr = _value(batch, "gfr", "egfr")

    if creatinine is not None:
        if creatinine > 2.0:
            points += 5
        elif creatinine > 1.3:
            points += 3

    if gfr is not None:
        if gfr < 30:
            points += 5
        elif gfr < 60:
            points += 3

    return _normalise(points, KIDNEY_MAX)


def score_risks(batch: Sequence[LabValue]) -> Dict[str, float]:
    """
    Compute every domain score for one batch.

    Returns:
        {"cardiovascular": float, "diabetes": float, "kidneyDisease": float},
        each clamped to [0, 100].
    """
    return {
        CARDIOVASCULAR: cardiovascular_risk(batch),
        DIABETES:       diabetes_risk(batch),
        KIDNEY_DISEASE: kidney_risk(batch),
    }
