"""
LabInsight Error Types

The pattern engine never raises on malformed lab values: an unreadable
result simply fails its threshold check.  Errors come from the service
layer around it (oversized batches, undated history, bad settings) and
each one knows the error code and HTTP status the API reports it with.
"""
from typing import Optional, Dict, Any


class LabInsightError(Exception):
    """Root of the LabInsight error tree; rendered as {error, message, details}."""

    code = "UNKNOWN_ERROR"
    http_status = 400

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.details = dict(details or {})

    def to_dict(self) -> Dict[str, Any]:
        """Response body for the API error handler."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class LabInputError(LabInsightError):
    """A submitted lab batch was rejected before analysis."""

    code = "LAB_INPUT_ERROR"
    http_status = 413

    def __init__(
        self,
        message: str,
        field: str = "lab_values",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details={"field": field, **(details or {})})
        self.field = field


class TrendAnalysisError(LabInsightError):
    """A lab history could not be arranged into a time series."""

    code = "TREND_ERROR"
    http_status = 422


class ConfigurationError(LabInsightError):
    """An environment setting holds an unusable value."""

    code = "CONFIG_ERROR"
    http_status = 500

    def __init__(
        self,
        message: str,
        setting: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details={"setting": setting, **(details or {})})
        self.setting = setting
