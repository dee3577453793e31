"""
Thyroid Pattern Rules

TSH drives the decision; free T4 / T3 are attached as supporting tests only.
"""
from __future__ import annotations

from typing import Optional, Sequence

from .base import LabPattern, LabValue, PatternType, Severity
from .markers import marker_value, resolve_marker

# ── Thresholds (mIU/L) ────────────────────────────────────────────────────────

TSH_HIGH          = 4.5
TSH_VERY_HIGH     = 10
TSH_LOW           = 0.4
TSH_SUPPRESSED    = 0.1

THYROID_CONFIDENCE = 0.85


def detect_thyroid_pattern(batch: Sequence[LabValue]) -> Optional[LabPattern]:
    """TSH > 4.5 -> hypothyroidism, TSH < 0.4 -> hyperthyroidism."""
    tsh, tsh_val = marker_value(batch, "tsh")
    if tsh is None:
        return None

    related = [tsh.test_name]
    for marker in ("t4", "t3"):
        lab = resolve_marker(batch, marker)
        if lab is not None:
            related.append(lab.test_name)

    if tsh_val > TSH_HIGH:
        return LabPattern(
            pattern_type=PatternType.HYPOTHYROIDISM,
            description="Elevated TSH suggests hypothyroidism",
            severity=Severity.HIGH if tsh_val > TSH_VERY_HIGH else Severity.MODERATE,
            confidence=THYROID_CONFIDENCE,
            related_tests=related,
            clinical_significance="Thyroid hormone deficiency affecting metabolism",
            recommendations=[
                "Consider thyroid hormone replacement",
                "Monitor thyroid function regularly",
                "Assess for symptoms of hypothyroidism",
                "Consider endocrinology consultation",
            ],
        )

    if tsh_val < TSH_LOW:
        return LabPattern(
            pattern_type=PatternType.HYPERTHYROIDISM,
            description="Suppressed TSH suggests hyperthyroidism",
            severity=Severity.HIGH if tsh_val < TSH_SUPPRESSED else Severity.MODERATE,
            confidence=THYROID_CONFIDENCE,
            related_tests=related,
            clinical_significance="Thyroid hormone excess affecting metabolism",
            recommendations=[
                "Consider anti-thyroid therapy",
                "Monitor cardiac function",
                "Assess for thyroid nodules/goiter",
                "Consider endocrinology consultation",
            ],
        )

    return None
