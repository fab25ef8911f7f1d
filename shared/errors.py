"""
Unified Error Handling System for the data layer.

This module provides the error taxonomy used by the data-access client,
the seeder and the factories: error categories, a small exception
hierarchy, translation of SQLAlchemy/driver errors, and centralized error
logging with structured context.

Usage:
    from shared.errors import ErrorCategory, get_error_logger

    log_ref = get_error_logger().log_error(
        error=exc,
        category=ErrorCategory.CONSTRAINT_ERROR,
        operation="seed.users",
        context={"iteration": 3},
    )
"""

import logging
import uuid
from datetime import datetime, UTC
from enum import Enum
from typing import Any

from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)


logger = logging.getLogger(__name__)


class ErrorCategory(str, Enum):
    """Categories of errors for proper handling and logging.

    CALLER ERRORS:
    - CONSTRAINT_ERROR: A write violated a schema rule (unique, FK, not null)
    - NOT_FOUND_ERROR: update/delete targeted a missing record
    - VALIDATION_ERROR: Input rejected before reaching the store

    SYSTEM ERRORS:
    - CONNECTIVITY_ERROR: The store is unreachable
    - CONFIGURATION_ERROR: Missing or invalid configuration
    - UNEXPECTED_ERROR: Unknown/unhandled exceptions
    """
    # Caller errors
    CONSTRAINT_ERROR = "constraint_error"
    NOT_FOUND_ERROR = "not_found_error"
    VALIDATION_ERROR = "validation_error"

    # System errors
    CONNECTIVITY_ERROR = "connectivity_error"
    CONFIGURATION_ERROR = "configuration_error"
    UNEXPECTED_ERROR = "unexpected_error"


SYSTEM_CATEGORIES = frozenset({
    ErrorCategory.CONNECTIVITY_ERROR,
    ErrorCategory.CONFIGURATION_ERROR,
    ErrorCategory.UNEXPECTED_ERROR,
})


class DataAccessError(Exception):
    """Base class for failures surfaced by the data-access client."""

    category: ErrorCategory = ErrorCategory.UNEXPECTED_ERROR

    def __init__(
        self,
        message: str,
        *,
        entity: str | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.entity = entity
        self.operation = operation


class ConstraintViolationError(DataAccessError):
    """A requested write violates a schema rule."""

    category = ErrorCategory.CONSTRAINT_ERROR


class ConnectivityError(DataAccessError):
    """The store could not be reached."""

    category = ErrorCategory.CONNECTIVITY_ERROR


class RecordNotFoundError(DataAccessError):
    """update/delete targeted an identifier that does not exist."""

    category = ErrorCategory.NOT_FOUND_ERROR


def translate_db_error(
    exc: BaseException,
    *,
    entity: str | None = None,
    operation: str | None = None,
) -> DataAccessError:
    """Map a SQLAlchemy or driver exception onto the data-access taxonomy.

    Args:
        exc: The exception raised by the session/engine
        entity: Entity kind the operation targeted
        operation: Operation name (insert, find_one, ...)

    Returns:
        DataAccessError subclass wrapping the original error
    """
    if isinstance(exc, DataAccessError):
        return exc

    where = f"{operation or 'operation'} on {entity or 'store'}"

    if isinstance(exc, IntegrityError):
        detail = str(exc.orig) if exc.orig is not None else str(exc)
        return ConstraintViolationError(
            f"Constraint violated during {where}: {detail}",
            entity=entity,
            operation=operation,
        )

    if isinstance(exc, (OperationalError, InterfaceError, PoolTimeoutError, OSError)):
        return ConnectivityError(
            f"Store unreachable during {where}: {exc}",
            entity=entity,
            operation=operation,
        )

    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return ConnectivityError(
            f"Connection lost during {where}: {exc}",
            entity=entity,
            operation=operation,
        )

    if isinstance(exc, SQLAlchemyError):
        return DataAccessError(
            f"Database error during {where}: {exc}",
            entity=entity,
            operation=operation,
        )

    return DataAccessError(
        f"Unexpected error during {where}: {exc}",
        entity=entity,
        operation=operation,
    )


def category_for(error: BaseException) -> ErrorCategory:
    """Return the ErrorCategory of an exception (UNEXPECTED for foreign ones)."""
    if isinstance(error, DataAccessError):
        return error.category
    return ErrorCategory.UNEXPECTED_ERROR


class ErrorLogger:
    """Centralized error logging with structured context.

    Provides consistent error logging with a correlation reference,
    the error category and whatever context the caller attaches.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.ErrorLogger")

    def _generate_log_ref(self) -> str:
        """Generate unique reference ID for error correlation."""
        return f"err_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}"

    def log_error(
        self,
        error: BaseException,
        category: ErrorCategory | None = None,
        *,
        operation: str | None = None,
        context: dict[str, Any] | None = None,
        exc_info: bool = True,
    ) -> str:
        """Log error with full structured context.

        Args:
            error: The exception that occurred
            category: Error category (derived from the error when omitted)
            operation: Optional name of the failing operation
            context: Additional context data
            exc_info: Whether to include stack trace

        Returns:
            log_ref: Unique reference ID for this error instance
        """
        category = category or category_for(error)
        log_ref = self._generate_log_ref()

        log_data = {
            "log_ref": log_ref,
            "error_category": category.value,
            "operation": operation,
            "error_type": type(error).__name__,
            "context": context or {},
        }

        message = f"[{log_ref}] {category.value}: {error}"
        if category in SYSTEM_CATEGORIES:
            self.logger.error(message, extra=log_data, exc_info=exc_info)
        else:
            self.logger.warning(message, extra=log_data, exc_info=exc_info)

        return log_ref


# Global error logger instance
_error_logger = ErrorLogger()


def get_error_logger() -> ErrorLogger:
    """Get the global error logger instance."""
    return _error_logger
