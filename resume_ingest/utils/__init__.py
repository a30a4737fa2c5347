"""
Utility modules for resume-ingest.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants and heuristic tables
"""

from resume_ingest.utils.config import (
    AppSettings,
    IngestSettings,
    LoggingSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
    PACKAGE_DIR,
    LOGS_DIR,
)
from resume_ingest.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    SUPPORTED_RESUME_FORMATS,
    FileKind,
    ResumeFormat,
    SectionKind,
)
from resume_ingest.utils.logger import (
    setup_logging,
    get_logger,
    log,
)

__all__ = [
    # Config
    "AppSettings",
    "IngestSettings",
    "LoggingSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    "PACKAGE_DIR",
    "LOGS_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "SUPPORTED_RESUME_FORMATS",
    "FileKind",
    "ResumeFormat",
    "SectionKind",
    # Logger
    "setup_logging",
    "get_logger",
    "log",
]
