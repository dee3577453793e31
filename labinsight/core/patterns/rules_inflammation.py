"""
Inflammation Pattern Rules

Markers consumed:
    crp  (mg/L)      - elevated: > 3.0
    esr  (mm/hr)     - elevated: > 30
    wbc  (10³/µL)    - elevated: > 11.0
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from .base import LabPattern, LabValue, PatternType, Severity
from .markers import marker_value

CRP_HIGH = 3.0
ESR_HIGH = 30
WBC_HIGH = 11.0

INFLAMMATION_CONFIDENCE = 0.7


def detect_systemic_inflammation(batch: Sequence[LabValue]) -> Optional[LabPattern]:
    """Two or more elevated inflammatory markers."""
    crp, crp_val = marker_value(batch, "crp")
    esr, esr_val = marker_value(batch, "esr")
    wbc, wbc_val = marker_value(batch, "wbc")

    related: List[str] = []
    if crp is not None and crp_val > CRP_HIGH:
        related.append(crp.test_name)
    if esr is not None and esr_val > ESR_HIGH:
        related.append(esr.test_name)
    if wbc is not None and wbc_val > WBC_HIGH:
        related.append(wbc.test_name)

    if len(related) < 2:
        return None

    return LabPattern(
        pattern_type=PatternType.SYSTEMIC_INFLAMMATION,
        description="Multiple elevated inflammatory markers",
        severity=Severity.MODERATE,
        confidence=INFLAMMATION_CONFIDENCE,
        related_tests=related,
        clinical_significance=(
            "Systemic inflammation may indicate infection, autoimmune disease, "
            "or chronic condition"
        ),
        recommendations=[
            "Investigate source of inflammation",
            "Consider infectious disease workup",
            "Monitor inflammatory markers",
            "Consider rheumatology consultation if persistent",
        ],
    )
