"""
Utility modules for ResumeCraft import.

This package contains shared utilities used across the pipeline:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
"""

from resumecraft.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
)
from resumecraft.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    SUPPORTED_DOCUMENT_FORMATS,
    CANONICAL_HEADERS,
    PROFICIENCY_RANK,
    CollectionKind,
    SectionKey,
)
from resumecraft.utils.logger import (
    setup_logging,
    get_logger,
    LoggerMixin,
    log_import,
)

__all__ = [
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "SUPPORTED_DOCUMENT_FORMATS",
    "CANONICAL_HEADERS",
    "PROFICIENCY_RANK",
    "CollectionKind",
    "SectionKey",
    # Logger
    "setup_logging",
    "get_logger",
    "LoggerMixin",
    "log_import",
]
