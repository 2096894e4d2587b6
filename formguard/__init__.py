"""
formguard: field validation and sanitization for untrusted input.

Register each input as a named field on a validation session, chain
sanitizers and validators onto it, and execute the session to get an
immutable result with every error and every sanitized value::

    from formguard import Validator, Validators, Sanitizers

    session = Validator.create()
    session.field("email", form["email"]) \\
        .sanitize(Sanitizers.trim()) \\
        .sanitize(Sanitizers.to_lower_case()) \\
        .validate(Validators.not_blank()) \\
        .validate(Validators.is_email())
    result = session.execute()
"""

from formguard.core import (
    FieldValidator,
    SanitizerRule,
    SessionState,
    Validator,
    ValidatorBuilder,
    ValidatorConfig,
    ValidatorRule,
    create,
)
from formguard.results import ValidationError, ValidationResult
from formguard.sanitizers import Sanitizer, SanitizerBuilder, Sanitizers
from formguard.utils import (
    ConfigurationError,
    FormguardError,
    SanitizationError,
    SessionStateError,
    Settings,
    ValidationFailure,
    configure_logging,
    get_settings,
)
from formguard.validators import CrossValidators, Validators

__version__ = "0.1.0"

__all__ = [
    'create',
    'Validator',
    'ValidatorBuilder',
    'ValidatorConfig',
    'SessionState',
    'FieldValidator',
    'SanitizerRule',
    'ValidatorRule',
    'ValidationError',
    'ValidationResult',
    'Validators',
    'CrossValidators',
    'Sanitizers',
    'Sanitizer',
    'SanitizerBuilder',
    'FormguardError',
    'ValidationFailure',
    'SanitizationError',
    'ConfigurationError',
    'SessionStateError',
    'Settings',
    'get_settings',
    'configure_logging',
]
