"""
Pydantic models for the LabInsight HTTP API.
"""
from .labs import (
    LabValueInput,
    LabAnalysisRequest,
    LabPatternResponse,
    PatternsResponse,
    RiskScoresResponse,
    LabAnalysisResponse,
    LabSnapshotInput,
    TrendRequest,
    TrendResponse,
    HealthResponse,
)

__all__ = [
    "LabValueInput",
    "LabAnalysisRequest",
    "LabPatternResponse",
    "PatternsResponse",
    "RiskScoresResponse",
    "LabAnalysisResponse",
    "LabSnapshotInput",
    "TrendRequest",
    "TrendResponse",
    "HealthResponse",
]
