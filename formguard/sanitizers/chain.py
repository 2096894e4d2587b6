"""
Standalone sanitizer chains for values that need cleaning without validation.

Usage::

    from formguard import Sanitizer

    clean = Sanitizer.create(raw_comment) \\
        .remove_html() \\
        .normalize_whitespace() \\
        .max_length(500) \\
        .sanitize()
"""

from typing import List, Optional

from formguard.core.rules import SanitizerRule
from formguard.sanitizers.builtin import Sanitizers


class SanitizerBuilder:
    """
    Collects sanitizer rules and applies them in order on ``sanitize()``.

    Rules are deferred until ``sanitize()`` is called, so the same chain can
    be evaluated more than once. A None input yields None.
    """

    def __init__(self, value: Optional[str]):
        self._value = value
        self._rules: List[SanitizerRule] = []

    def apply(self, rule: SanitizerRule) -> "SanitizerBuilder":
        self._rules.append(rule)
        return self

    def sanitize(self) -> Optional[str]:
        result = self._value
        for rule in self._rules:
            if result is None:
                break
            result = rule(result)
        return result

    def trim(self) -> "SanitizerBuilder":
        return self.apply(Sanitizers.trim())

    def to_lower_case(self, locale: Optional[str] = None) -> "SanitizerBuilder":
        return self.apply(Sanitizers.to_lower_case(locale))

    def to_upper_case(self, locale: Optional[str] = None) -> "SanitizerBuilder":
        return self.apply(Sanitizers.to_upper_case(locale))

    def remove_html(self) -> "SanitizerBuilder":
        return self.apply(Sanitizers.remove_html())

    def escape_html(self) -> "SanitizerBuilder":
        return self.apply(Sanitizers.escape_html())

    def escape_xss(self) -> "SanitizerBuilder":
        return self.apply(Sanitizers.escape_xss())

    def remove_non_printable(self) -> "SanitizerBuilder":
        return self.apply(Sanitizers.remove_non_printable())

    def remove_non_alphanumeric(self) -> "SanitizerBuilder":
        return self.apply(Sanitizers.remove_non_alphanumeric())

    def remove_non_numeric(self) -> "SanitizerBuilder":
        return self.apply(Sanitizers.remove_non_numeric())

    def remove_non_alpha(self) -> "SanitizerBuilder":
        return self.apply(Sanitizers.remove_non_alpha())

    def normalize_whitespace(self) -> "SanitizerBuilder":
        return self.apply(Sanitizers.normalize_whitespace())

    def max_length(self, max_length: int) -> "SanitizerBuilder":
        return self.apply(Sanitizers.max_length(max_length))

    def remove_pattern(self, regex: str) -> "SanitizerBuilder":
        return self.apply(Sanitizers.remove_pattern(regex))

    def replace_pattern(self, regex: str, replacement: str) -> "SanitizerBuilder":
        return self.apply(Sanitizers.replace_pattern(regex, replacement))

    def strip_sql_keywords(self) -> "SanitizerBuilder":
        return self.apply(Sanitizers.strip_sql_keywords())

    def strip_sql_comments(self) -> "SanitizerBuilder":
        return self.apply(Sanitizers.strip_sql_comments())

    def allow_only(self, allowed_chars: str) -> "SanitizerBuilder":
        return self.apply(Sanitizers.allow_only(allowed_chars))

    def deny(self, denied_chars: str) -> "SanitizerBuilder":
        return self.apply(Sanitizers.deny(denied_chars))


class Sanitizer:
    """Entry point for standalone sanitizer chains."""

    @staticmethod
    def create(value: Optional[str]) -> SanitizerBuilder:
        return SanitizerBuilder(value)


__all__ = ['Sanitizer', 'SanitizerBuilder']
