"""
Error handling and exception hierarchy for the formguard library.

This module defines the exceptions raised by the library. Per-rule validation
failures are never raised: they are collected as ``ValidationError`` data on
the result. Exceptions are reserved for:

- the terminal fail-fast signal (``ValidationFailure``), carrying the full result
- misconfigured sanitizers (``SanitizationError``)
- invalid configuration values (``ConfigurationError``)
- use of a validation session after it has executed (``SessionStateError``)
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from formguard.results import ValidationResult


class ErrorSeverity(Enum):
    """Error severity levels for monitoring and alerting."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification and handling."""
    VALIDATION = "validation"
    SANITIZATION = "sanitization"
    CONFIGURATION = "configuration"
    USAGE = "usage"


# ==================== EXCEPTION HIERARCHY ====================

class FormguardError(Exception):
    """
    Base exception class for all library errors.

    Carries a machine-readable error code, structured details and a
    classification so host applications can map library failures onto
    their own error responses.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.USAGE
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.severity = severity
        self.category = category
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format for logging and API responses."""
        return {
            'error_code': self.error_code,
            'message': self.message,
            'severity': self.severity.value,
            'category': self.category.value,
            'timestamp': self.timestamp.isoformat(),
            'details': self.details,
            'type': self.__class__.__name__
        }


class ValidationFailure(FormguardError):
    """
    Raised by a fail-fast session whose aggregated result is invalid.

    The complete ``ValidationResult`` is available on ``result`` so callers
    can inspect every collected error and the sanitized values.
    """

    def __init__(self, message: str, result: "ValidationResult", **kwargs):
        super().__init__(
            message=message,
            error_code="validation_failed",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            **kwargs
        )
        self.result = result
        self.details['field_errors'] = {
            field_name: [error.message for error in errors]
            for field_name, errors in result.errors_by_field().items()
        }

    @property
    def errors(self):
        return self.result.errors


class SanitizationError(FormguardError):
    """Raised when a sanitizer is constructed with invalid parameters."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            error_code=kwargs.pop('error_code', 'invalid_sanitizer'),
            severity=ErrorSeverity.MEDIUM,
            category=ErrorCategory.SANITIZATION,
            **kwargs
        )


class ConfigurationError(FormguardError):
    """Raised for invalid configuration values."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            error_code=kwargs.pop('error_code', 'invalid_configuration'),
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.CONFIGURATION,
            **kwargs
        )


class SessionStateError(FormguardError):
    """Raised when a validation session is used after it has executed."""

    def __init__(self, message: str = "Validation session has already executed", **kwargs):
        super().__init__(
            message=message,
            error_code='session_executed',
            severity=ErrorSeverity.MEDIUM,
            category=ErrorCategory.USAGE,
            **kwargs
        )


__all__ = [
    'ErrorSeverity',
    'ErrorCategory',
    'FormguardError',
    'ValidationFailure',
    'SanitizationError',
    'ConfigurationError',
    'SessionStateError',
]
