"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    LabInsightError,
    LabInputError,
    TrendAnalysisError,
    ConfigurationError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "LabInsightError",
    "LabInputError",
    "TrendAnalysisError",
    "ConfigurationError",
]
