"""
Validation result types.

``ValidationError`` describes one failed rule for one field (or, for
cross-field rules, for a comma-joined list of fields). ``ValidationResult``
is the immutable snapshot produced when a validation session executes: the
ordered error list plus the final sanitized value of every registered field.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationError:
    """
    A single validation failure.

    Attributes:
        field_name: Name of the field that failed, or ``"a,b"`` for
            cross-field rules
        message: Human-readable message, e.g. ``"must be a valid email"``
        code: Machine-readable rule identifier, e.g. ``"isEmail"``
        rejected_value: The value that was rejected, when available
    """
    field_name: str
    message: str
    code: str
    rejected_value: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert validation error to dictionary format for API responses."""
        error_dict = {
            'field': self.field_name,
            'message': self.message,
            'code': self.code,
        }
        if self.rejected_value is not None:
            error_dict['rejected_value'] = self.rejected_value
        return error_dict

    def __str__(self) -> str:
        return f"{self.field_name}: {self.message}"


@dataclass(frozen=True)
class ValidationResult:
    """
    Immutable outcome of a validation session.

    ``errors`` holds per-field errors in field registration order (and rule
    order within a field), followed by cross-field errors. ``sanitized_values``
    has one entry per registered field name, whether or not that field is
    valid. The result is falsy when invalid::

        result = session.execute()
        if not result:
            return render_form(errors=result.errors)
    """
    errors: Tuple[ValidationError, ...] = ()
    sanitized_values: Mapping[str, Any] = field(default_factory=dict)

    # Sanitized values may be unhashable, so results compare by value only
    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, 'errors', tuple(self.errors))
        object.__setattr__(
            self, 'sanitized_values', MappingProxyType(dict(self.sanitized_values))
        )

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid

    def errors_for_field(self, field_name: str) -> List[ValidationError]:
        """Get the errors recorded for one field, in rule order."""
        return [error for error in self.errors if error.field_name == field_name]

    def errors_by_field(self) -> Dict[str, List[ValidationError]]:
        """Group errors by field name, preserving first-seen order."""
        grouped: Dict[str, List[ValidationError]] = {}
        for error in self.errors:
            grouped.setdefault(error.field_name, []).append(error)
        return grouped

    def get_sanitized_value(self, field_name: str, default: Any = None) -> Any:
        """Get the final value of a field, or ``default`` if it was never registered."""
        return self.sanitized_values.get(field_name, default)

    def get_sanitized_value_as(self, field_name: str, expected_type: Type[T]) -> Optional[T]:
        """
        Get the final value of a field only if it has the expected type.

        Args:
            field_name: Name of the registered field
            expected_type: Type the value must be an instance of

        Returns:
            The value, or None when the field is missing or of another type
        """
        value = self.sanitized_values.get(field_name)
        if isinstance(value, expected_type):
            return value
        return None

    @property
    def error_message(self) -> str:
        """All errors as ``"field: message"`` pairs joined by ``"; "``; empty when valid."""
        return "; ".join(str(error) for error in self.errors)

    def to_dict(self) -> Dict[str, Any]:
        """Convert validation result to dictionary format."""
        return {
            'is_valid': self.is_valid,
            'errors': [error.to_dict() for error in self.errors],
            'data': dict(self.sanitized_values),
        }


__all__ = [
    'ValidationError',
    'ValidationResult',
]
