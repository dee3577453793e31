"""
Lab Pattern Layer - Base Types

Defines the data contracts shared by the marker resolver, the pattern
detectors, the risk scorer and the trend analyzer.  Everything here is
created per analysis call and discarded once the caller has serialised it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Severity(str, Enum):
    """
    Ordered severity tier of a detected pattern.

    LOW      – informational, no action implied
    MODERATE – follow up at the next routine visit
    HIGH     – schedule clinical review
    CRITICAL – needs prompt medical attention
    """
    LOW      = "low"
    MODERATE = "moderate"
    HIGH     = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    def __lt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def highest(cls, *levels: "Severity") -> "Severity":
        """Combine sub-check severities by taking the most severe one."""
        return max(levels, key=lambda s: s.rank, default=cls.LOW)


_SEVERITY_RANK = {
    Severity.LOW:      0,
    Severity.MODERATE: 1,
    Severity.HIGH:     2,
    Severity.CRITICAL: 3,
}


class PatternType(str, Enum):
    """Closed set of cross-marker findings the detectors can emit."""
    METABOLIC_SYNDROME    = "metabolic_syndrome"
    KIDNEY_DYSFUNCTION    = "kidney_dysfunction"
    LIVER_DYSFUNCTION     = "liver_dysfunction"
    ACUTE_CARDIAC_INJURY  = "acute_cardiac_injury"
    CARDIAC_RISK_FACTORS  = "cardiac_risk_factors"
    HYPOTHYROIDISM        = "hypothyroidism"
    HYPERTHYROIDISM       = "hyperthyroidism"
    DIABETES              = "diabetes"
    PRE_DIABETES          = "pre_diabetes"
    SYSTEMIC_INFLAMMATION = "systemic_inflammation"


@dataclass(frozen=True)
class LabValue:
    """One reported lab result, already normalised by the retrieval service."""
    test_name: str                          # e.g. "Fasting Glucose"
    result: str                             # free-form, e.g. "145 mg/dL"
    unit: Optional[str] = None
    reference_range: Optional[str] = None
    status: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "LabValue":
        """Accept both snake_case and the portal's camelCase keys."""
        return cls(
            test_name=str(data.get("test_name", data.get("testName", ""))),
            result=str(data.get("result", "")),
            unit=data.get("unit"),
            reference_range=data.get("reference_range", data.get("referenceRange")),
            status=data.get("status"),
        )


@dataclass
class LabPattern:
    """
    One named cross-marker finding.

    A single batch can produce 0-N patterns, at most one per detector.
    """
    # ── Core identity ─────────────────────────────────────────────────────
    pattern_type: PatternType
    description: str
    severity: Severity
    confidence: float                       # fixed per detector, 0-1

    # ── Evidence ──────────────────────────────────────────────────────────
    # Test names of the markers that satisfied their individual check,
    # in the order the detector checked them.
    related_tests: List[str] = field(default_factory=list)

    # ── Guidance ──────────────────────────────────────────────────────────
    clinical_significance: str = ""
    recommendations: List[str] = field(default_factory=list)

    # ── Serialisation ─────────────────────────────────────────────────────
    def to_dict(self) -> dict:
        return {
            "patternType": self.pattern_type.value,
            "description": self.description,
            "severity": self.severity.value,
            "confidence": self.confidence,
            "relatedTests": list(self.related_tests),
            "clinicalSignificance": self.clinical_significance,
            "recommendations": list(self.recommendations),
        }


class TrendStatus(str, Enum):
    IMPROVING         = "improving"
    STABLE            = "stable"
    WORSENING         = "worsening"
    INSUFFICIENT_DATA = "insufficient_data"


class TrendDirection(str, Enum):
    INCREASING  = "increasing"
    DECREASING  = "decreasing"
    FLUCTUATING = "fluctuating"
    STABLE      = "stable"


@dataclass
class LabSnapshot:
    """A dated batch of lab values from a patient's history."""
    date: str                               # ISO-8601, e.g. "2024-03-01"
    lab_values: List[LabValue] = field(default_factory=list)


@dataclass
class TrendAnalysis:
    """How one marker moved across a patient's snapshots."""
    test_name: str
    trend: TrendStatus
    direction: TrendDirection
    change_percent: float
    time_span: str
    interpretation: str

    def to_dict(self) -> dict:
        return {
            "testName": self.test_name,
            "trend": self.trend.value,
            "direction": self.direction.value,
            "changePercent": self.change_percent,
            "timeSpan": self.time_span,
            "interpretation": self.interpretation,
        }
