"""
Lab Pattern Layer

Detects cross-marker clinical patterns and scores domain risk from a batch
of structured lab values.

Usage:
    from labinsight.core.patterns import LabPatternEngine, LabValue

    engine = LabPatternEngine()
    result = engine.analyze([LabValue("Fasting Glucose", "145 mg/dL")])
    # result["patterns"]   -> [LabPattern(pattern_type=DIABETES, ...)]
    # result["riskScores"] -> {"cardiovascular": 0.0, "diabetes": 50.0, "kidneyDisease": 0.0}
"""
from .base import (
    LabPattern,
    LabSnapshot,
    LabValue,
    PatternType,
    Severity,
    TrendAnalysis,
    TrendDirection,
    TrendStatus,
)
from .markers import MARKER_ALIASES, extract_number, parse_number, resolve
from .risk import RISK_DOMAINS, score_risks
from .trends import analyze_trends
from .engine import DETECTORS, LabPatternEngine, detect_all

__all__ = [
    "LabPatternEngine",
    "LabPattern",
    "LabSnapshot",
    "LabValue",
    "PatternType",
    "Severity",
    "TrendAnalysis",
    "TrendDirection",
    "TrendStatus",
    "MARKER_ALIASES",
    "DETECTORS",
    "RISK_DOMAINS",
    "resolve",
    "extract_number",
    "parse_number",
    "detect_all",
    "score_risks",
    "analyze_trends",
]
