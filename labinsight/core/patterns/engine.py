"""
Lab Pattern Engine

Central dispatcher.  Runs every pattern detector over one batch of lab
values in a fixed order, and pairs the result with the domain risk scores.

Usage:
    from labinsight.core.patterns import LabPatternEngine

    engine = LabPatternEngine()
    result = engine.analyze(lab_values)
    for p in result["patterns"]:
        print(p.pattern_type.value, p.severity.value, p.related_tests)

Adding a new detector:
    1. Implement detect_<pattern>(batch) -> Optional[LabPattern] in a rules_*.py module
    2. Add it to DETECTORS below at the position it should report in.
"""
from __future__ import annotations

from typing import Any, Dict, List, Sequence

from labinsight.utils import get_logger
from .base import LabPattern, LabSnapshot, LabValue, Severity, TrendAnalysis
from .risk import score_risks
from .rules_cardiac import detect_cardiac_pattern
from .rules_endocrine import detect_thyroid_pattern
from .rules_inflammation import detect_systemic_inflammation
from .rules_metabolic import detect_diabetic_pattern, detect_metabolic_syndrome
from .rules_organ import detect_kidney_dysfunction, detect_liver_dysfunction
from .trends import analyze_trends

logger = get_logger(__name__)

# ── Registry: evaluation order == output order ───────────────────────────────
DETECTORS = [
    detect_metabolic_syndrome,
    detect_kidney_dysfunction,
    detect_liver_dysfunction,
    detect_cardiac_pattern,        # troponin-gated, then lipid risk factors
    detect_thyroid_pattern,
    detect_diabetic_pattern,
    detect_systemic_inflammation,
]


def detect_all(batch: Sequence[LabValue]) -> List[LabPattern]:
    """
    Run every detector and collect the patterns found.

    Returns:
        Patterns in detector order (not input order).  An empty list is the
        normal result for a batch with no qualifying markers.
    """
    patterns: List[LabPattern] = []
    for detector in DETECTORS:
        try:
            pattern = detector(batch)
        except Exception as exc:
            # one failing detector must not block the others
            logger.error(
                f"LabPatternEngine: detector {detector.__name__} raised {exc}",
                exc_info=True,
            )
            continue
        if pattern is not None:
            patterns.append(pattern)

    if patterns:
        logger.info(
            f"LabPatternEngine: {len(patterns)} pattern(s) from {len(batch)} lab value(s) - "
            + ", ".join(p.pattern_type.value for p in patterns)
        )
    else:
        logger.debug(f"LabPatternEngine: no patterns in {len(batch)} lab value(s)")
    return patterns


class LabPatternEngine:
    """
    Turns a batch of lab values into named patterns and domain risk scores.

    Stateless; safe to call from multiple threads / concurrent requests.
    """

    def analyze(self, batch: Sequence[LabValue]) -> Dict[str, Any]:
        """
        Detect patterns and score risks for one batch.

        Returns:
            {"patterns": List[LabPattern], "riskScores": Dict[str, float]}
        """
        batch = list(batch)
        return {
            "patterns": detect_all(batch),
            "riskScores": score_risks(batch),
        }

    def detect(self, batch: Sequence[LabValue]) -> List[LabPattern]:
        return detect_all(list(batch))

    def score(self, batch: Sequence[LabValue]) -> Dict[str, float]:
        return score_risks(list(batch))

    def trends(self, history: Sequence[LabSnapshot]) -> List[TrendAnalysis]:
        return analyze_trends(history)

    @staticmethod
    def registered_detectors() -> List[str]:
        """Detector names in evaluation order."""
        return [d.__name__ for d in DETECTORS]

    @staticmethod
    def summarise(patterns: List[LabPattern]) -> Dict[str, Any]:
        """
        Build a compact summary dict suitable for JSON API responses.

        Example output:
        {
            "total_patterns": 2,
            "critical_count": 1,
            "high_count": 1,
            "moderate_count": 0,
            "low_count": 0,
            "highest_severity": "critical",
            "pattern_types": ["kidney_dysfunction", "diabetes"],
            "recommendations": ["Monitor kidney function regularly", ...],
            "patterns": [{...}, {...}]
        }
        """
        counts = {level: 0 for level in Severity}
        for p in patterns:
            counts[p.severity] += 1

        # Deduplicated recommendations (preserves detector order)
        seen = set()
        recommendations = []
        for p in patterns:
            for rec in p.recommendations:
                if rec not in seen:
                    seen.add(rec)
                    recommendations.append(rec)

        highest = Severity.highest(*(p.severity for p in patterns)) if patterns else None

        return {
            "total_patterns":   len(patterns),
            "critical_count":   counts[Severity.CRITICAL],
            "high_count":       counts[Severity.HIGH],
            "moderate_count":   counts[Severity.MODERATE],
            "low_count":        counts[Severity.LOW],
            "highest_severity": highest.value if highest is not None else None,
            "pattern_types":    [p.pattern_type.value for p in patterns],
            "recommendations":  recommendations,
            "patterns":         [p.to_dict() for p in patterns],
        }
