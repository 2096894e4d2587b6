"""
Validation session: registers field pipelines and freezes them into a result.

Usage::

    from formguard import Validator, Validators, Sanitizers

    session = Validator.create()
    session.field("username", raw_username) \\
        .sanitize(Sanitizers.trim()) \\
        .sanitize(Sanitizers.to_lower_case()) \\
        .validate(Validators.not_blank()) \\
        .validate(Validators.is_alphanumeric())
    session.field("age", 25) \\
        .validate(Validators.range(18, 120))
    result = session.execute()

    if result.is_valid:
        username = result.get_sanitized_value("username")
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from formguard.core.config import ValidatorConfig
from formguard.core.field import FieldValidator
from formguard.results import ValidationError, ValidationResult
from formguard.utils.error_handling import SessionStateError, ValidationFailure
from formguard.utils.logging import LogCategory, get_logger

logger = get_logger("formguard.validation")


class SessionState(Enum):
    """Lifecycle of a validation session. Sessions are single-use."""
    ACCUMULATING = "accumulating"
    EXECUTED = "executed"


class ValidatorBuilder:
    """
    Owns the field pipelines and cross-field errors of one validation run.

    A session is mutable while fields and rules are being registered and must
    not be shared between concurrent callers. ``execute()`` (or ``outcome()``)
    ends the session; the ``ValidationResult`` it produces is immutable.
    """

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self.config = config or ValidatorConfig()
        self._fields: List[FieldValidator] = []
        self._cross_field_errors: List[ValidationError] = []
        self._state = SessionState.ACCUMULATING

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def fields(self) -> List[FieldValidator]:
        """Registered field pipelines in registration order."""
        return list(self._fields)

    def field(self, name: str, value: Any) -> FieldValidator:
        """
        Register a field to sanitize and validate.

        Registering the same name twice is allowed: both pipelines' errors
        are kept, and the later pipeline's value wins in the result.

        Args:
            name: Field name used in errors and in the result mapping
            value: Raw input value

        Returns:
            The new field pipeline for chaining sanitize/validate calls
        """
        self._ensure_accumulating()
        field_validator = FieldValidator(name, value, fail_fast=self.config.fail_fast)
        self._fields.append(field_validator)
        return field_validator

    def add_cross_field_error(self, error: Optional[ValidationError]) -> "ValidatorBuilder":
        """
        Add an error computed from several fields, e.g. ``CrossValidators.date_order``.

        None is ignored so a cross-field rule's result can be passed directly.
        """
        self._ensure_accumulating()
        if error is not None:
            self._cross_field_errors.append(error)
        return self

    def execute(self) -> ValidationResult:
        """
        Collect every field's errors and final value into a result.

        Returns:
            The immutable ValidationResult

        Raises:
            ValidationFailure: In fail-fast mode when the result is invalid
            SessionStateError: If the session has already executed
        """
        result = self._finish()
        if self.config.fail_fast and not result.is_valid:
            raise self._failure(result)
        return result

    def outcome(self) -> Union[ValidationResult, ValidationFailure]:
        """
        Like ``execute()``, but return the fail-fast failure instead of raising it.
        """
        result = self._finish()
        if self.config.fail_fast and not result.is_valid:
            return self._failure(result)
        return result

    def _finish(self) -> ValidationResult:
        self._ensure_accumulating()

        all_errors: List[ValidationError] = []
        sanitized_values: Dict[str, Any] = {}

        for field_validator in self._fields:
            all_errors.extend(field_validator.errors)
            sanitized_values[field_validator.name] = field_validator.value
            field_validator.freeze()

        all_errors.extend(self._cross_field_errors)
        self._state = SessionState.EXECUTED

        result = ValidationResult(errors=all_errors, sanitized_values=sanitized_values)
        logger.debug(
            "validation.executed",
            category=LogCategory.VALIDATION.value,
            field_count=len(self._fields),
            error_count=len(result.errors),
            cross_field_error_count=len(self._cross_field_errors),
            fail_fast=self.config.fail_fast,
        )
        return result

    def _failure(self, result: ValidationResult) -> ValidationFailure:
        logger.info(
            "validation.failed_fast",
            category=LogCategory.VALIDATION.value,
            error_count=len(result.errors),
            fields=sorted(result.errors_by_field()),
        )
        return ValidationFailure("Validation failed", result)

    def _ensure_accumulating(self) -> None:
        if self._state is not SessionState.ACCUMULATING:
            raise SessionStateError()


class Validator:
    """Entry point for creating validation sessions."""

    @staticmethod
    def create(config: Optional[ValidatorConfig] = None) -> ValidatorBuilder:
        """
        Create a new validation session.

        Args:
            config: Session configuration; defaults to collect-all mode

        Returns:
            A session in the accumulating state
        """
        return ValidatorBuilder(config)


def create(config: Optional[ValidatorConfig] = None) -> ValidatorBuilder:
    """Create a new validation session. Same as ``Validator.create``."""
    return Validator.create(config)


__all__ = ['SessionState', 'ValidatorBuilder', 'Validator', 'create']
