"""Error types for sound-index.

Encoding itself never fails on string input. Errors come from the
surrounding layers: non-string arguments, bad settings, missing settings
files.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from sound_index.logging import get_logger

logger = get_logger(__name__)


class ErrorCategory(str, Enum):
    """Categories of errors for handling decisions."""

    VALIDATION = "validation"  # Bad argument
    CONFIGURATION = "configuration"  # Bad settings
    RESOURCE = "resource"  # Missing settings file
    INTERNAL = "internal"  # Bug in code


class SoundIndexError(Exception):
    """Base exception for sound-index errors.

    Attributes:
        message: Human-readable error message
        category: Error category for handling
        context: Additional context information
        recoverable: Whether the error is recoverable
    """

    category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        context: dict | None = None,
        recoverable: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} (context: {self.context})"
        return self.message


class ValidationError(SoundIndexError):
    """Argument of the wrong type was passed to an encoder."""

    category = ErrorCategory.VALIDATION

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message, context, recoverable=False)


class ConfigurationError(SoundIndexError):
    """Encoder settings are invalid or name an unknown algorithm."""

    category = ErrorCategory.CONFIGURATION

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message, context, recoverable=False)


class ResourceError(SoundIndexError):
    """A settings file could not be found."""

    category = ErrorCategory.RESOURCE

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message, context, recoverable=False)


class ErrorContext:
    """Context manager that logs a failed operation and runs an optional rollback.

    The exception is never suppressed.
    """

    def __init__(
        self,
        operation: str,
        rollback: Callable[[], None] | None = None,
        context: dict | None = None,
    ):
        """Initialize error context.

        Args:
            operation: Name of the operation being performed
            rollback: Optional rollback function to call on error
            context: Additional context to include in log records
        """
        self.operation = operation
        self.rollback = rollback
        self.context = context or {}
        self.error: Exception | None = None

    def __enter__(self) -> "ErrorContext":
        logger.debug(f"Starting operation: {self.operation}")
        return self

    def __exit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: Any) -> bool:
        if exc_val is None:
            logger.debug(f"Completed operation: {self.operation}")
            return False

        self.error = exc_val
        logger.error(
            f"Error in {self.operation}: {exc_val}",
            extra={
                "operation": self.operation,
                "error_type": type(exc_val).__name__,
                **self.context,
            },
        )

        if self.rollback:
            try:
                logger.info(f"Rolling back {self.operation}")
                self.rollback()
            except Exception as rollback_error:
                logger.error(f"Rollback failed for {self.operation}: {rollback_error}")

        return False


def format_error_for_display(error: Exception) -> str:
    """Format an error message for user display.

    Args:
        error: Error to format

    Returns:
        Human-readable error message
    """
    if isinstance(error, SoundIndexError):
        category = error.category.value
        if error.context:
            context_str = ", ".join(f"{k}={v}" for k, v in error.context.items())
            return f"[{category}] {error.message} ({context_str})"
        return f"[{category}] {error.message}"

    return f"[error] {type(error).__name__}: {error}"
