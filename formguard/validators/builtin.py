"""
Built-in validation rules.

Each ``Validators`` method returns a validator closed over its parameters::

    rule = Validators.min_length(3)
    rule("username", "ab")   # ValidationError(..., code="minLength")
    rule("username", "abc")  # None

Every validator except ``not_null``, ``not_empty`` and ``not_blank`` treats
None as passing; presence is policed only by those three. Error codes are
the camelCase rule names (``notBlank``, ``isEmail``, ``minLength``...) and are
stable identifiers for host applications.
"""

import ipaddress
import re
from datetime import date, datetime
from numbers import Number
from typing import Any, Collection, Optional, Union
from urllib.parse import urlparse

from formguard.core.rules import ValidatorRule
from formguard.results import ValidationError

# Local part: segments of [A-Za-z0-9+_] joined by single dots. Domain: labels
# of alphanumerics with internal hyphens only, at least one dot, 2+ letter TLD.
EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9+_]+(\.[A-Za-z0-9+_]+)*"
    r"@[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?"
    r"(\.[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?)*"
    r"\.[A-Za-z]{2,}"
)

UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)

IPV4_PATTERN = re.compile(
    r"((25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
    r"(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
)

PHONE_PATTERN = re.compile(r"[+]?[(]?[0-9]{1,4}[)]?[-\s.()0-9]*[0-9]")

ALPHA_PATTERN = re.compile(r"[a-zA-Z]+")
ALPHANUMERIC_PATTERN = re.compile(r"[a-zA-Z0-9]+")
NUMERIC_PATTERN = re.compile(r"[0-9]+")

URL_SCHEMES = frozenset({'http', 'https', 'ftp', 'file', 'jar'})
# Schemes that require an authority component (scheme://host)
URL_HIERARCHICAL_SCHEMES = frozenset({'http', 'https', 'ftp'})
# RFC 3986 unreserved and reserved characters plus percent escapes
URI_CHARACTERS_PATTERN = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*")
BAD_PERCENT_ESCAPE_PATTERN = re.compile(r"%(?![0-9A-Fa-f]{2})")

DateLike = Union[date, datetime]


def _is_well_formed_url(value: str) -> bool:
    if not value or not URI_CHARACTERS_PATTERN.fullmatch(value):
        return False
    if BAD_PERCENT_ESCAPE_PATTERN.search(value):
        return False
    try:
        parsed = urlparse(value)
        # Accessing port validates it
        parsed.port
    except ValueError:
        return False

    scheme = parsed.scheme.lower()
    if scheme not in URL_SCHEMES:
        return False
    if scheme in URL_HIERARCHICAL_SCHEMES and not parsed.hostname:
        return False
    return bool(parsed.netloc or parsed.path)


def _is_ipv6(value: str) -> bool:
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def _format_collection(values: Collection[Any]) -> str:
    return "[" + ", ".join(str(value) for value in values) + "]"


class Validators:
    """Catalog of reusable, stateless validator constructors."""

    # ---------------------------------------------------------------------
    # Presence
    # ---------------------------------------------------------------------

    @staticmethod
    def not_null() -> ValidatorRule:
        """Value must not be None."""
        def check(field_name: str, value: Any) -> Optional[ValidationError]:
            if value is None:
                return ValidationError(field_name, "must not be null", "notNull", value)
            return None
        return check

    @staticmethod
    def not_empty() -> ValidatorRule:
        """Value must not be None or have zero length."""
        def check(field_name: str, value: Optional[str]) -> Optional[ValidationError]:
            if value is None or len(value) == 0:
                return ValidationError(field_name, "must not be empty", "notEmpty", value)
            return None
        return check

    @staticmethod
    def not_blank() -> ValidatorRule:
        """Value must contain at least one non-whitespace character."""
        def check(field_name: str, value: Optional[str]) -> Optional[ValidationError]:
            if value is None or not value.strip():
                return ValidationError(field_name, "must not be blank", "notBlank", value)
            return None
        return check

    # ---------------------------------------------------------------------
    # Format
    # ---------------------------------------------------------------------

    @staticmethod
    def is_email() -> ValidatorRule:
        """
        Value must be an email address under a strict grammar.

        Dots in the local part may not lead, trail or repeat, and domain
        labels may not start or end with a hyphen. Quoted local parts, IP
        literals and other RFC 5322 forms are rejected.
        """
        def check(field_name: str, value: Optional[str]) -> Optional[ValidationError]:
            if value is not None and not EMAIL_PATTERN.fullmatch(value):
                return ValidationError(field_name, "must be a valid email", "isEmail", value)
            return None
        return check

    @staticmethod
    def is_url() -> ValidatorRule:
        """
        Value must be an absolute http, https, ftp, file or jar URL.

        Characters outside the URI grammar and malformed percent escapes fail;
        well-formed escapes such as ``%20`` pass.
        """
        def check(field_name: str, value: Optional[str]) -> Optional[ValidationError]:
            if value is not None and not _is_well_formed_url(value):
                return ValidationError(field_name, "must be a valid URL", "isUrl", value)
            return None
        return check

    @staticmethod
    def is_uuid() -> ValidatorRule:
        """Value must use the canonical 8-4-4-4-12 hex grouping."""
        def check(field_name: str, value: Optional[str]) -> Optional[ValidationError]:
            if value is not None and not UUID_PATTERN.fullmatch(value):
                return ValidationError(field_name, "must be a valid UUID", "isUuid", value)
            return None
        return check

    @staticmethod
    def is_ip_address() -> ValidatorRule:
        """
        Value must be a dotted-quad IPv4 address or a parsable IPv6 address.

        IPv6 parsing is purely syntactic; no name resolution is performed.
        """
        def check(field_name: str, value: Optional[str]) -> Optional[ValidationError]:
            if value is None:
                return None
            if IPV4_PATTERN.fullmatch(value) or _is_ipv6(value):
                return None
            return ValidationError(field_name, "must be a valid IP address", "isIpAddress", value)
        return check

    @staticmethod
    def is_phone_number() -> ValidatorRule:
        """
        Value must look like a phone number.

        Accepts an optional leading ``+``, an optional parenthesized prefix,
        digits with space, dot, dash or parenthesis separators, and a final digit.
        """
        def check(field_name: str, value: Optional[str]) -> Optional[ValidationError]:
            if value is not None and not PHONE_PATTERN.fullmatch(value):
                return ValidationError(
                    field_name, "must be a valid phone number", "isPhoneNumber", value
                )
            return None
        return check

    # ---------------------------------------------------------------------
    # Length
    # ---------------------------------------------------------------------

    @staticmethod
    def min_length(min_length: int) -> ValidatorRule:
        def check(field_name: str, value: Optional[str]) -> Optional[ValidationError]:
            if value is not None and len(value) < min_length:
                return ValidationError(
                    field_name, f"must be at least {min_length} characters", "minLength", value
                )
            return None
        return check

    @staticmethod
    def max_length(max_length: int) -> ValidatorRule:
        def check(field_name: str, value: Optional[str]) -> Optional[ValidationError]:
            if value is not None and len(value) > max_length:
                return ValidationError(
                    field_name, f"must be at most {max_length} characters", "maxLength", value
                )
            return None
        return check

    @staticmethod
    def length(min_length: int, max_length: int) -> ValidatorRule:
        """Length must be within ``[min_length, max_length]``, bounds included."""
        def check(field_name: str, value: Optional[str]) -> Optional[ValidationError]:
            if value is not None and not (min_length <= len(value) <= max_length):
                return ValidationError(
                    field_name,
                    f"must be between {min_length} and {max_length} characters",
                    "length",
                    value
                )
            return None
        return check

    # ---------------------------------------------------------------------
    # Numeric (compared as floats)
    # ---------------------------------------------------------------------

    @staticmethod
    def min(min_value: Number) -> ValidatorRule:
        def check(field_name: str, value: Optional[Number]) -> Optional[ValidationError]:
            if value is not None and float(value) < float(min_value):
                return ValidationError(field_name, f"must be at least {min_value}", "min", value)
            return None
        return check

    @staticmethod
    def max(max_value: Number) -> ValidatorRule:
        def check(field_name: str, value: Optional[Number]) -> Optional[ValidationError]:
            if value is not None and float(value) > float(max_value):
                return ValidationError(field_name, f"must be at most {max_value}", "max", value)
            return None
        return check

    @staticmethod
    def range(min_value: Number, max_value: Number) -> ValidatorRule:
        """Value must be within ``[min_value, max_value]``, bounds included."""
        def check(field_name: str, value: Optional[Number]) -> Optional[ValidationError]:
            if value is None:
                return None
            number = float(value)
            if number < float(min_value) or number > float(max_value):
                return ValidationError(
                    field_name, f"must be between {min_value} and {max_value}", "range", value
                )
            return None
        return check

    # ---------------------------------------------------------------------
    # Pattern and character classes
    # ---------------------------------------------------------------------

    @staticmethod
    def pattern(regex: str) -> ValidatorRule:
        """
        Value must match ``regex`` in full.

        The pattern is compiled once, when the rule is built. The error does
        not carry the rejected value.
        """
        compiled = re.compile(regex)

        def check(field_name: str, value: Optional[str]) -> Optional[ValidationError]:
            if value is not None and not compiled.fullmatch(value):
                return ValidationError(field_name, f"must match pattern: {regex}", "pattern")
            return None
        return check

    @staticmethod
    def is_alpha() -> ValidatorRule:
        """Value must be one or more ASCII letters."""
        def check(field_name: str, value: Optional[str]) -> Optional[ValidationError]:
            if value is not None and not ALPHA_PATTERN.fullmatch(value):
                return ValidationError(
                    field_name, "must contain only alphabetic characters", "isAlpha", value
                )
            return None
        return check

    @staticmethod
    def is_alphanumeric() -> ValidatorRule:
        """Value must be one or more ASCII letters or digits."""
        def check(field_name: str, value: Optional[str]) -> Optional[ValidationError]:
            if value is not None and not ALPHANUMERIC_PATTERN.fullmatch(value):
                return ValidationError(
                    field_name,
                    "must contain only alphanumeric characters",
                    "isAlphanumeric",
                    value
                )
            return None
        return check

    @staticmethod
    def is_numeric() -> ValidatorRule:
        """Value must be one or more ASCII digits; signs and decimal points fail."""
        def check(field_name: str, value: Optional[str]) -> Optional[ValidationError]:
            if value is not None and not NUMERIC_PATTERN.fullmatch(value):
                return ValidationError(
                    field_name, "must contain only numeric characters", "isNumeric", value
                )
            return None
        return check

    # ---------------------------------------------------------------------
    # Dates
    # ---------------------------------------------------------------------

    @staticmethod
    def is_date(date_format: str) -> ValidatorRule:
        """
        Value must parse as a date under ``date_format``.

        Args:
            date_format: ``datetime.strptime`` format, e.g. ``"%Y-%m-%d"``
        """
        def check(field_name: str, value: Optional[str]) -> Optional[ValidationError]:
            if value is None:
                return None
            try:
                datetime.strptime(value, date_format)
            except ValueError:
                return ValidationError(
                    field_name, f"must be a valid date in format: {date_format}", "isDate", value
                )
            return None
        return check

    @staticmethod
    def is_before(reference: DateLike) -> ValidatorRule:
        """Value must be strictly before ``reference``; an equal date fails."""
        def check(field_name: str, value: Optional[DateLike]) -> Optional[ValidationError]:
            if value is not None and not value < reference:
                return ValidationError(field_name, f"must be before {reference}", "isBefore", value)
            return None
        return check

    @staticmethod
    def is_after(reference: DateLike) -> ValidatorRule:
        """Value must be strictly after ``reference``; an equal date fails."""
        def check(field_name: str, value: Optional[DateLike]) -> Optional[ValidationError]:
            if value is not None and not value > reference:
                return ValidationError(field_name, f"must be after {reference}", "isAfter", value)
            return None
        return check

    # ---------------------------------------------------------------------
    # Membership
    # ---------------------------------------------------------------------

    @staticmethod
    def is_in(allowed_values: Collection[Any]) -> ValidatorRule:
        allowed = tuple(allowed_values)
        message = f"must be one of: {_format_collection(allowed)}"

        def check(field_name: str, value: Any) -> Optional[ValidationError]:
            if value is not None and value not in allowed:
                return ValidationError(field_name, message, "isIn", value)
            return None
        return check

    @staticmethod
    def is_not_in(disallowed_values: Collection[Any]) -> ValidatorRule:
        disallowed = tuple(disallowed_values)
        message = f"must not be one of: {_format_collection(disallowed)}"

        def check(field_name: str, value: Any) -> Optional[ValidationError]:
            if value is not None and value in disallowed:
                return ValidationError(field_name, message, "isNotIn", value)
            return None
        return check


__all__ = ['Validators']
