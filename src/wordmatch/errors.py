"""Error types for wordmatch.

The matching core is pure and raises nothing of its own beyond parameter
validation. Everything here serves the collaborators around it:
- Custom exception hierarchy with categories
- Dictionary loading failures
- Consistent logging of failed operations
- User-facing error formatting
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from wordmatch.logging import get_logger

logger = get_logger(__name__)


class ErrorCategory(str, Enum):
    """Categories of errors for handling decisions."""

    VALIDATION = "validation"  # Bad input or parameter
    CONFIGURATION = "configuration"  # Bad or missing config
    RESOURCE = "resource"  # Dictionary file/URL unavailable
    INTERNAL = "internal"  # Bug in code


class WordMatchError(Exception):
    """Base exception for wordmatch errors.

    Attributes:
        message: Human-readable error message
        category: Error category for handling
        context: Additional context information
        recoverable: Whether the caller can reasonably try again
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


class ValidationError(WordMatchError):
    """Invalid argument passed to a matching operation.

    Examples: negative result limit, negative penalty cost.
    """

    category = ErrorCategory.VALIDATION

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message, context, recoverable=False)


class ConfigurationError(WordMatchError):
    """Configuration error.

    Examples: unreadable config file, no dictionary source given.
    """

    category = ErrorCategory.CONFIGURATION

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message, context, recoverable=False)


class ResourceError(WordMatchError):
    """Resource not found or unavailable."""

    category = ErrorCategory.RESOURCE

    def __init__(
        self,
        message: str,
        context: dict | None = None,
        recoverable: bool = False,
    ):
        super().__init__(message, context, recoverable=recoverable)


class DictionaryUnavailableError(ResourceError):
    """The word list could not be read or fetched.

    Network failures are marked recoverable, missing files are not.

    Attributes:
        source: Path or URL that failed to load
    """

    def __init__(
        self,
        message: str,
        source: str,
        recoverable: bool = False,
        context: dict | None = None,
    ):
        super().__init__(
            message,
            context={"source": source, **(context or {})},
            recoverable=recoverable,
        )
        self.source = source


class ErrorContext:
    """Context manager that logs the outcome of an operation.

    Failures are logged with the operation name and context at ``level``,
    then re-raised unchanged. Callers that report the failure to the user
    themselves pass a lower level.
    """

    def __init__(
        self,
        operation: str,
        context: dict | None = None,
        level: int = logging.ERROR,
    ):
        self.operation = operation
        self.context = context or {}
        self.level = level
        self.error: Exception | None = None

    def __enter__(self) -> "ErrorContext":
        logger.debug(f"Starting operation: {self.operation}")
        return self

    def __exit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: Any) -> bool:
        if exc_val is None:
            logger.debug(f"Completed operation: {self.operation}")
            return False

        self.error = exc_val
        logger.log(
            self.level,
            f"Error in {self.operation}: {exc_val}",
            extra={
                "operation": self.operation,
                "error_type": type(exc_val).__name__,
                **self.context,
            },
        )
        return False


def format_error_for_display(error: Exception) -> str:
    """Format an error message for user display.

    Args:
        error: Error to format

    Returns:
        Human-readable error message
    """
    if isinstance(error, WordMatchError):
        category = error.category.value

        if error.context:
            context_str = ", ".join(f"{k}={v}" for k, v in error.context.items())
            return f"[{category}] {error.message} ({context_str})"

        return f"[{category}] {error.message}"

    return f"[error] {type(error).__name__}: {error}"
