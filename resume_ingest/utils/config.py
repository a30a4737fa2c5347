"""
Configuration management for resume-ingest.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent
PACKAGE_DIR = ROOT_DIR / "resume_ingest"
LOGS_DIR = ROOT_DIR / "logs"


class IngestSettings(BaseSettings):
    """Thresholds for the document ingestion pipeline."""

    model_config = SettingsConfigDict(env_prefix="INGEST_")

    # Input limits
    max_file_size_mb: int = 50

    # Layout
    column_reorder_threshold: float = 0.5

    # Scanned-PDF detection
    min_chars_per_page: int = 100
    max_garbage_ratio: float = 0.3

    # Warning thresholds (0-100)
    pdf_low_confidence_threshold: int = 20
    docx_low_confidence_threshold: int = 30
    section_low_confidence_threshold: int = 40

    # Header / summary
    header_max_lines: int = 20
    summary_max_chars: int = 1000

    @field_validator("column_reorder_threshold", "max_garbage_ratio")
    @classmethod
    def validate_ratio(cls, v: float) -> float:
        """Ratios must lie in [0, 1]."""
        if not 0.0 <= v <= 1.0:
            raise ValueError("ratio must be between 0 and 1")
        return v

    @property
    def max_file_size_bytes(self) -> int:
        """Maximum accepted upload size in bytes."""
        return self.max_file_size_mb * 1024 * 1024


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path | None = None
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "resume-ingest"
    version: str = "0.1.0"
    description: str = "Heuristic resume ingestion from PDF and DOCX"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    ingest: IngestSettings = Field(default_factory=IngestSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
