"""
Cross-cutting utilities for the formguard library.

- config: environment-driven settings
- error_handling: exception hierarchy
- logging: structlog configuration and security event logging
"""

from .config import Settings, get_settings
from .error_handling import (
    ErrorCategory,
    ErrorSeverity,
    FormguardError,
    ValidationFailure,
    SanitizationError,
    ConfigurationError,
    SessionStateError,
)
from .logging import (
    LogCategory,
    SecurityEventType,
    configure_logging,
    get_logger,
    log_security_event,
)

__all__ = [
    'Settings',
    'get_settings',
    'ErrorCategory',
    'ErrorSeverity',
    'FormguardError',
    'ValidationFailure',
    'SanitizationError',
    'ConfigurationError',
    'SessionStateError',
    'LogCategory',
    'SecurityEventType',
    'configure_logging',
    'get_logger',
    'log_security_event',
]
