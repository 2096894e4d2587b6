"""
Per-field sanitize/validate pipeline.
"""

from typing import Any, List

from formguard.core.rules import SanitizerRule, ValidatorRule
from formguard.results import ValidationError
from formguard.utils.error_handling import SessionStateError


class FieldValidator:
    """
    Accumulates sanitizers and validators for one named value.

    Rules are applied eagerly, in call order: a validator sees the value as
    sanitized by every ``sanitize`` call made before it, and a later
    sanitizer never changes the outcome of an earlier validator.

    Instances are created by ``ValidatorBuilder.field`` and owned by that
    session; they do not reference the session.
    """

    def __init__(self, name: str, value: Any, fail_fast: bool = False):
        self.name = name
        self._value = value
        self._errors: List[ValidationError] = []
        self._fail_fast = fail_fast
        self._frozen = False

    @property
    def value(self) -> Any:
        """Current (possibly sanitized) value."""
        return self._value

    @property
    def errors(self) -> List[ValidationError]:
        return list(self._errors)

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def validate(self, rule: ValidatorRule) -> "FieldValidator":
        """
        Apply a validation rule to the current value.

        In fail-fast mode the rule is skipped once this field already has
        an error. A non-None result from the rule is recorded.

        Args:
            rule: Callable ``(field_name, value) -> ValidationError | None``

        Returns:
            This field validator for chaining
        """
        self._ensure_open()
        if self._fail_fast and self._errors:
            return self

        error = rule(self.name, self._value)
        if error is not None:
            self._errors.append(error)
        return self

    def sanitize(self, rule: SanitizerRule) -> "FieldValidator":
        """
        Apply a sanitization rule to the current value.

        Only string values are sanitized; any other value is left as is.

        Returns:
            This field validator for chaining
        """
        self._ensure_open()
        if isinstance(self._value, str):
            self._value = rule(self._value)
        return self

    def freeze(self) -> None:
        """Make the pipeline read-only; called when the owning session executes."""
        self._frozen = True

    def _ensure_open(self) -> None:
        if self._frozen:
            raise SessionStateError(
                f"Field '{self.name}' belongs to a session that has already executed",
                details={'field': self.name}
            )

    def __repr__(self) -> str:
        return (
            f"FieldValidator(name={self.name!r}, value={self._value!r}, "
            f"errors={len(self._errors)})"
        )


__all__ = ['FieldValidator']
