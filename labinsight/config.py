"""
LabInsight - Configuration

Service settings read from the environment.  A project-level .env file is
loaded first, so local development can keep overrides there.
"""
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from labinsight.utils.exceptions import ConfigurationError

PROJECT_ROOT = Path(__file__).resolve().parent.parent

load_dotenv(PROJECT_ROOT / ".env")

APP_NAME = "LabInsight Pattern API"
APP_VERSION = "1.0.0"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"{name} must be an integer, got {raw!r}", setting=name
        ) from exc
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}", setting=name)
    return value


class Settings:
    """Snapshot of LABINSIGHT_* environment variables."""

    def __init__(self):
        self.app_name: str = APP_NAME
        self.version: str = APP_VERSION
        self.log_level: str = os.getenv("LABINSIGHT_LOG_LEVEL", "INFO").upper()
        self.log_file: Optional[str] = os.getenv("LABINSIGHT_LOG_FILE") or None
        self.max_batch_size: int = _env_int("LABINSIGHT_MAX_BATCH_SIZE", 500)
        self.cors_origins: List[str] = [
            origin.strip()
            for origin in os.getenv("LABINSIGHT_CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ] or ["*"]

    def __repr__(self) -> str:
        return (
            f"Settings(log_level={self.log_level!r}, log_file={self.log_file!r}, "
            f"max_batch_size={self.max_batch_size}, cors_origins={self.cors_origins!r})"
        )


settings = Settings()
