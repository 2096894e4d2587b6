"""
Structured logging utilities for the formguard library.

Uses structlog for structured output. Host applications call
``configure_logging`` once at startup; library modules obtain loggers via
``get_logger``. Security-relevant sanitization events (SQL keyword or
script content removed from input) are emitted through ``log_security_event``
so they can be routed separately from ordinary debug output.
"""

import logging
from enum import Enum
from typing import Any, Optional

import structlog


class LogCategory(Enum):
    """Log categories for routing and filtering."""
    VALIDATION = "validation"
    SANITIZATION = "sanitization"
    SECURITY = "security"
    CONFIGURATION = "configuration"


class SecurityEventType(Enum):
    """Security event types raised while sanitizing untrusted input."""
    SQL_INJECTION_ATTEMPT = "sql_injection_attempt"
    XSS_ATTEMPT = "xss_attempt"


# Maximum number of input characters copied into a log entry
MAX_LOGGED_INPUT = 100

_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}


def configure_logging(level: str = "INFO", log_format: str = "json") -> None:
    """
    Configure structlog for the library.

    Args:
        level: Minimum log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: ``console`` for colored development output, anything
            else for JSON lines
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    if log_format == 'console':
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True)
        ]
    else:
        processors = shared_processors + [
            structlog.processors.JSONRenderer()
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            _LEVELS.get(level.upper(), logging.INFO)
        ),
        logger_factory=structlog.WriteLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "formguard") -> Any:
    """Get a structlog logger bound to the given name."""
    return structlog.get_logger(name)


def truncate_for_log(value: Optional[str]) -> Optional[str]:
    """Trim untrusted input before it is written to a log entry."""
    if value is None:
        return None
    return value[:MAX_LOGGED_INPUT]


def log_security_event(
    event_type: SecurityEventType,
    description: str,
    input_value: Optional[str] = None,
    **details: Any
) -> None:
    """
    Log a security event detected during sanitization.

    Args:
        event_type: Kind of hostile content that was found
        description: Human-readable description of what happened
        input_value: The offending input; only the first 100 characters are logged
        **details: Additional structured fields
    """
    logger = get_logger("formguard.security")
    logger.warning(
        description,
        category=LogCategory.SECURITY.value,
        event_type=event_type.value,
        input_value=truncate_for_log(input_value),
        **details
    )


__all__ = [
    'LogCategory',
    'SecurityEventType',
    'configure_logging',
    'get_logger',
    'log_security_event',
    'truncate_for_log',
]
