"""
Marker Resolution & Numeric Extraction

Lab reports arrive with loosely formatted test names ("HDL Cholesterol",
"Glucose, Fasting", "hs-CRP") and free-form results ("145 mg/dL", "7.2%",
"Normal").  This module maps them onto canonical markers and numbers.

Resolution policy:
    Aliases are tried in list order.  For each alias the batch is scanned in
    input order and the first value whose test name contains the alias (or is
    contained in it) wins.  Matching is case-insensitive substring only.
"""
from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence

from .base import LabValue

# ── Canonical alias table ─────────────────────────────────────────────────────
# Order inside each group is the tie-break order.

MARKER_ALIASES: Dict[str, List[str]] = {
    "glucose":              ["glucose", "blood glucose", "fasting glucose"],
    "hba1c":                ["hba1c", "hemoglobin a1c", "glycated hemoglobin"],
    "hdl":                  ["hdl", "hdl cholesterol"],
    "ldl":                  ["ldl", "ldl cholesterol"],
    "total_cholesterol":    ["total cholesterol", "cholesterol"],
    "triglycerides":        ["triglycerides", "trig"],
    "creatinine":           ["creatinine", "serum creatinine"],
    "gfr":                  ["gfr", "egfr", "glomerular filtration"],
    "alt":                  ["alt", "alanine aminotransferase"],
    "ast":                  ["ast", "aspartate aminotransferase"],
    "alkaline_phosphatase": ["alkaline phosphatase", "alk phos", "alp"],
    "troponin":             ["troponin", "cardiac troponin"],
    "tsh":                  ["tsh", "thyroid stimulating hormone"],
    "t4":                   ["t4", "thyroxine", "free t4"],
    "t3":                   ["t3", "triiodothyronine", "free t3"],
    "crp":                  ["crp", "c-reactive protein", "high sensitivity crp"],
    "esr":                  ["esr", "sedimentation rate"],
    "wbc":                  ["wbc", "white blood cell", "leukocyte"],
}

# First numeric token: digits with an optional fraction, or a bare fraction.
_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+")


def resolve(batch: Sequence[LabValue], aliases: Sequence[str]) -> Optional[LabValue]:
    """
    Return the first lab value matching any alias, or None.

    Args:
        batch:   Lab values in the order they were reported.
        aliases: Acceptable names for one marker, most preferred first.
    """
    for alias in aliases:
        needle = alias.strip().lower()
        if not needle:
            continue
        for lab in batch:
            name = (lab.test_name or "").strip().lower()
            if not name:
                continue
            if needle in name or name in needle:
                return lab
    return None


def resolve_marker(batch: Sequence[LabValue], marker: str) -> Optional[LabValue]:
    """Resolve a canonical marker id through MARKER_ALIASES."""
    return resolve(batch, MARKER_ALIASES[marker])


def parse_number(result: Optional[str]) -> Optional[float]:
    """First numeric token in `result`, or None when there is none."""
    if not result:
        return None
    match = _NUMBER_RE.search(str(result))
    if match is None:
        return None
    return float(match.group(0))


def extract_number(result: Optional[str]) -> float:
    """
    First numeric token in `result` as a float, 0.0 when there is none.

    "145 mg/dL" -> 145.0, "7.2%" -> 7.2, "<0.01" -> 0.01, "Normal" -> 0.0.
    A 0.0 here can mean either a real zero or an unparseable result; use
    parse_number() when the two must be told apart.
    """
    value = parse_number(result)
    return 0.0 if value is None else value


def marker_value(batch: Sequence[LabValue], marker: str):
    """Resolve a canonical marker and extract its number in one step."""
    lab = resolve_marker(batch, marker)
    if lab is None:
        return None, 0.0
    return lab, extract_number(lab.result)
