"""
Blog data - Shared module.

This module contains configuration, logging and error handling used across
the data layer.
"""

from shared.config import Settings, get_settings
from shared.logging_config import configure_logging
from shared.errors import (
    ConnectivityError,
    ConstraintViolationError,
    DataAccessError,
    ErrorCategory,
    ErrorLogger,
    RecordNotFoundError,
    get_error_logger,
    translate_db_error,
)

__all__ = [
    # Core utilities
    "Settings",
    "get_settings",
    "configure_logging",
    # Error handling
    "ErrorCategory",
    "ErrorLogger",
    "get_error_logger",
    "translate_db_error",
    "DataAccessError",
    "ConstraintViolationError",
    "ConnectivityError",
    "RecordNotFoundError",
]
