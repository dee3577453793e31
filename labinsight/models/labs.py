"""
API request / response models for the lab analysis endpoints.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from labinsight.core.patterns import LabSnapshot, LabValue


class LabValueInput(BaseModel):
    """One lab result as sent by the portal (camelCase or snake_case)."""
    model_config = ConfigDict(populate_by_name=True)

    test_name: str = Field(..., alias="testName")
    result: str
    unit: Optional[str] = None
    reference_range: Optional[str] = Field(None, alias="referenceRange")
    status: Optional[str] = None

    def to_lab_value(self) -> LabValue:
        return LabValue.from_dict(self.model_dump())


class LabAnalysisRequest(BaseModel):
    """Batch of lab values submitted for one analysis call."""
    model_config = ConfigDict(populate_by_name=True)

    patient_id: Optional[str] = Field("GUEST", alias="patientId")
    lab_values: List[LabValueInput] = Field(default_factory=list, alias="labValues")

    def batch(self) -> List[LabValue]:
        return [lv.to_lab_value() for lv in self.lab_values]


class LabPatternResponse(BaseModel):
    """Serialised LabPattern (camelCase keys, string tags)."""
    patternType: str
    description: str
    severity: str
    confidence: float
    relatedTests: List[str]
    clinicalSignificance: str
    recommendations: List[str]


class PatternsResponse(BaseModel):
    patterns: List[LabPatternResponse]


class RiskScoresResponse(BaseModel):
    riskScores: Dict[str, float]


class LabAnalysisResponse(BaseModel):
    """Full analysis: patterns, risk scores and a summary block."""
    analysis_id: str
    patient_id: Optional[str] = None
    timestamp: str
    patterns: List[LabPatternResponse]
    riskScores: Dict[str, float]
    summary: Dict[str, Any]


class LabSnapshotInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str
    lab_values: List[LabValueInput] = Field(default_factory=list, alias="labValues")

    def to_snapshot(self) -> LabSnapshot:
        return LabSnapshot(
            date=self.date,
            lab_values=[lv.to_lab_value() for lv in self.lab_values],
        )


class TrendRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    patient_id: Optional[str] = Field("GUEST", alias="patientId")
    history: List[LabSnapshotInput] = Field(default_factory=list)


class TrendResponse(BaseModel):
    trends: List[Dict[str, Any]]


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str
    uptime_seconds: float
