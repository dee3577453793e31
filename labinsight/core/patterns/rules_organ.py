"""
Renal & Hepatic Pattern Rules

Markers consumed:
    creatinine            (mg/dL)           - elevated: > 1.5, severe: > 3.0
    gfr                   (mL/min/1.73m²)   - reduced: < 60, severe: < 30
    alt                   (U/L)             - elevated: > 40
    ast                   (U/L)             - elevated: > 40
    alkaline_phosphatase  (U/L)             - elevated: > 120
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from .base import LabPattern, LabValue, PatternType, Severity
from .markers import marker_value

# ── Thresholds ────────────────────────────────────────────────────────────────

CREATININE_HIGH     = 1.5
CREATININE_CRITICAL = 3.0
GFR_REDUCED         = 60
GFR_CRITICAL        = 30

ALT_HIGH = 40
AST_HIGH = 40
ALP_HIGH = 120

KIDNEY_CONFIDENCE = 0.85
LIVER_CONFIDENCE  = 0.8


# ── Rule 1: Kidney Dysfunction ────────────────────────────────────────────────

def detect_kidney_dysfunction(batch: Sequence[LabValue]) -> Optional[LabPattern]:
    """
    Creatinine > 1.5 or GFR < 60.

    Either marker alone is HIGH; creatinine > 3.0 or GFR < 30 is CRITICAL.
    When both markers trigger, the more severe level is kept.
    """
    creatinine, creat_val = marker_value(batch, "creatinine")
    gfr, gfr_val = marker_value(batch, "gfr")

    related: List[str] = []
    sentences: List[str] = []
    levels: List[Severity] = []

    if creatinine is not None and creat_val > CREATININE_HIGH:
        levels.append(Severity.CRITICAL if creat_val > CREATININE_CRITICAL else Severity.HIGH)
        sentences.append("Elevated creatinine suggests kidney dysfunction")
        related.append(creatinine.test_name)

    if gfr is not None and gfr_val < GFR_REDUCED:
        levels.append(Severity.CRITICAL if gfr_val < GFR_CRITICAL else Severity.HIGH)
        sentences.append("Reduced GFR indicates chronic kidney disease")
        related.append(gfr.test_name)

    if not levels:
        return None

    return LabPattern(
        pattern_type=PatternType.KIDNEY_DYSFUNCTION,
        description=". ".join(sentences),
        severity=Severity.highest(*levels),
        confidence=KIDNEY_CONFIDENCE,
        related_tests=related,
        clinical_significance="Kidney function impairment may require monitoring and treatment",
        recommendations=[
            "Monitor kidney function regularly",
            "Review medications for nephrotoxicity",
            "Consider nephrology consultation",
            "Manage blood pressure and diabetes if present",
        ],
    )


# ── Rule 2: Liver Dysfunction ─────────────────────────────────────────────────

def detect_liver_dysfunction(batch: Sequence[LabValue]) -> Optional[LabPattern]:
    """Two or more elevated enzymes among ALT, AST and alkaline phosphatase."""
    alt, alt_val = marker_value(batch, "alt")
    ast, ast_val = marker_value(batch, "ast")
    alp, alp_val = marker_value(batch, "alkaline_phosphatase")

    related: List[str] = []
    if alt is not None and alt_val > ALT_HIGH:
        related.append(alt.test_name)
    if ast is not None and ast_val > AST_HIGH:
        related.append(ast.test_name)
    if alp is not None and alp_val > ALP_HIGH:
        related.append(alp.test_name)

    elevated = len(related)
    if elevated < 2:
        return None

    return LabPattern(
        pattern_type=PatternType.LIVER_DYSFUNCTION,
        description="Multiple elevated liver enzymes suggest hepatic dysfunction",
        severity=Severity.HIGH if elevated >= 3 else Severity.MODERATE,
        confidence=LIVER_CONFIDENCE,
        related_tests=related,
        clinical_significance="Liver enzyme elevation may indicate hepatitis, fatty liver, or drug toxicity",
        recommendations=[
            "Review medications and alcohol use",
            "Consider hepatitis screening",
            "Monitor liver function trends",
            "Consider hepatology consultation if persistent",
        ],
    )
