"""Shared utilities for XML tag reporting.

This module provides the configuration object, the error taxonomy and the
correlation-aware logger used across the tree, api and cli layers.
"""

from .config import (
    DEFAULT_FILES,
    DEFAULT_TAGS,
    ConfigError,
    ConfigValidationError,
    ReportConfig,
)
from .errors import (
    ExtractionError,
    ParseError,
    ReadError,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    "DEFAULT_FILES",
    "DEFAULT_TAGS",
    "ConfigError",
    "ConfigValidationError",
    "ReportConfig",
    "ExtractionError",
    "ParseError",
    "ReadError",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
]
