"""
Built-in sanitization rules.

Each ``Sanitizers`` method returns a text transformation closed over its
parameters. Every sanitizer passes None through unchanged, so rules can be
composed freely on optional input.

HTML stripping uses bleach with an empty tag allowlist; escaping uses the
standard library ``html.escape``. Removal of SQL keywords or script content
is reported through ``log_security_event`` so hostile input is visible in
the security log even though the sanitized value is accepted.
"""

import html
import re
from typing import Optional

import bleach

from formguard.core.config import system_locale
from formguard.core.rules import SanitizerRule
from formguard.utils.error_handling import SanitizationError
from formguard.utils.logging import (
    LogCategory,
    SecurityEventType,
    get_logger,
    log_security_event,
)

logger = get_logger("formguard.sanitization")

# <script> and <style> elements are removed together with their content;
# bleach would otherwise keep their text. An element with no closing tag
# runs to the end of the input.
SCRIPT_STYLE_PATTERN = re.compile(
    r"<(script|style)\b[^>]*>.*?(?:</\1\s*>|\Z)", re.IGNORECASE | re.DOTALL
)

# Control characters other than \t, \n and \r
NON_PRINTABLE_PATTERN = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
NON_ALPHANUMERIC_PATTERN = re.compile(r"[^a-zA-Z0-9]")
NON_NUMERIC_PATTERN = re.compile(r"[^0-9]")
NON_ALPHA_PATTERN = re.compile(r"[^a-zA-Z]")
WHITESPACE_PATTERN = re.compile(r"\s+")

# Longer keywords precede their prefixes so EXECUTE is not left as "UTE"
SQL_KEYWORDS = (
    'JAVASCRIPT', 'EXECUTE', 'ONERROR', 'SELECT', 'INSERT', 'UPDATE', 'DELETE',
    'CREATE', 'SCRIPT', 'ONLOAD', 'ALTER', 'UNION', 'DROP', 'EXEC',
)
SQL_KEYWORD_PATTERN = re.compile("|".join(SQL_KEYWORDS), re.IGNORECASE)
SQL_LINE_COMMENT_PATTERN = re.compile(r"--[^\n]*")
SQL_BLOCK_COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)

TURKIC_LANGUAGES = frozenset({'tr', 'az'})


def _is_turkic(locale_name: Optional[str]) -> bool:
    if not locale_name:
        return False
    language = re.split(r"[-_.@]", locale_name, maxsplit=1)[0]
    return language.lower() in TURKIC_LANGUAGES


def _compile(regex: str) -> "re.Pattern":
    try:
        return re.compile(regex)
    except re.error as e:
        raise SanitizationError(
            f"Invalid regular expression: {regex}",
            details={'pattern': regex, 'reason': str(e)}
        )


class Sanitizers:
    """Catalog of reusable, stateless sanitizer constructors."""

    @staticmethod
    def trim() -> SanitizerRule:
        """Strip leading and trailing whitespace."""
        def apply(value: Optional[str]) -> Optional[str]:
            return value.strip() if value is not None else None
        return apply

    @staticmethod
    def to_lower_case(locale: Optional[str] = None) -> SanitizerRule:
        """
        Convert to lower case.

        Args:
            locale: Locale name such as ``"tr_TR"``. Turkish and Azerbaijani
                map ``I`` to dotless ``ı`` and ``İ`` to ``i``. Defaults to
                the process locale, read when the rule is built.
        """
        turkic = _is_turkic(locale if locale is not None else system_locale())

        def apply(value: Optional[str]) -> Optional[str]:
            if value is None:
                return None
            if turkic:
                value = value.replace('I', 'ı').replace('İ', 'i')
            return value.lower()
        return apply

    @staticmethod
    def to_upper_case(locale: Optional[str] = None) -> SanitizerRule:
        """
        Convert to upper case.

        Args:
            locale: Locale name such as ``"tr_TR"``. Turkish and Azerbaijani
                map ``i`` to dotted ``İ``. Defaults to the process
                locale, read when the rule is built.
        """
        turkic = _is_turkic(locale if locale is not None else system_locale())

        def apply(value: Optional[str]) -> Optional[str]:
            if value is None:
                return None
            if turkic:
                value = value.replace('i', 'İ')
            return value.upper()
        return apply

    @staticmethod
    def remove_html() -> SanitizerRule:
        """
        Remove all HTML markup, keeping text content.

        Script and style elements are dropped with their content, including
        unclosed ones, which run to the end of the input. Every other tag is
        stripped by bleach and its text kept.
        """
        def apply(value: Optional[str]) -> Optional[str]:
            if value is None:
                return None
            removed = [match.group(1).lower() for match in SCRIPT_STYLE_PATTERN.finditer(value)]
            if "script" in removed:
                log_security_event(
                    SecurityEventType.XSS_ATTEMPT,
                    "Script content removed from input",
                    input_value=value,
                    sanitizer="remove_html",
                )
            stripped = SCRIPT_STYLE_PATTERN.sub("", value)
            return bleach.clean(
                stripped,
                tags=set(),
                attributes={},
                strip=True,
                strip_comments=True
            )
        return apply

    @staticmethod
    def escape_html() -> SanitizerRule:
        """Escape ``& < > " '`` as HTML entities."""
        def apply(value: Optional[str]) -> Optional[str]:
            return html.escape(value, quote=True) if value is not None else None
        return apply

    @staticmethod
    def escape_xss() -> SanitizerRule:
        """Escape for safe embedding in HTML element content."""
        def apply(value: Optional[str]) -> Optional[str]:
            return html.escape(value, quote=False) if value is not None else None
        return apply

    @staticmethod
    def remove_non_printable() -> SanitizerRule:
        """Delete control characters, keeping tab, newline and carriage return."""
        def apply(value: Optional[str]) -> Optional[str]:
            return NON_PRINTABLE_PATTERN.sub("", value) if value is not None else None
        return apply

    @staticmethod
    def remove_non_alphanumeric() -> SanitizerRule:
        def apply(value: Optional[str]) -> Optional[str]:
            return NON_ALPHANUMERIC_PATTERN.sub("", value) if value is not None else None
        return apply

    @staticmethod
    def remove_non_numeric() -> SanitizerRule:
        def apply(value: Optional[str]) -> Optional[str]:
            return NON_NUMERIC_PATTERN.sub("", value) if value is not None else None
        return apply

    @staticmethod
    def remove_non_alpha() -> SanitizerRule:
        def apply(value: Optional[str]) -> Optional[str]:
            return NON_ALPHA_PATTERN.sub("", value) if value is not None else None
        return apply

    @staticmethod
    def normalize_whitespace() -> SanitizerRule:
        """Collapse whitespace runs to a single space and strip the ends."""
        def apply(value: Optional[str]) -> Optional[str]:
            if value is None:
                return None
            return WHITESPACE_PATTERN.sub(" ", value).strip()
        return apply

    @staticmethod
    def max_length(max_length: int) -> SanitizerRule:
        """
        Truncate to at most ``max_length`` characters.

        Raises:
            SanitizationError: If ``max_length`` is negative
        """
        if max_length < 0:
            raise SanitizationError(
                f"max_length must not be negative, got {max_length}",
                details={'max_length': max_length}
            )

        def apply(value: Optional[str]) -> Optional[str]:
            return value[:max_length] if value is not None else None
        return apply

    @staticmethod
    def remove_pattern(regex: str) -> SanitizerRule:
        """
        Delete every match of ``regex``.

        Raises:
            SanitizationError: If ``regex`` does not compile
        """
        compiled = _compile(regex)

        def apply(value: Optional[str]) -> Optional[str]:
            return compiled.sub("", value) if value is not None else None
        return apply

    @staticmethod
    def replace_pattern(regex: str, replacement: str) -> SanitizerRule:
        """
        Replace every match of ``regex``; ``replacement`` may use ``\\1`` group references.

        Raises:
            SanitizationError: If ``regex`` does not compile
        """
        compiled = _compile(regex)

        def apply(value: Optional[str]) -> Optional[str]:
            return compiled.sub(replacement, value) if value is not None else None
        return apply

    @staticmethod
    def strip_sql_keywords() -> SanitizerRule:
        """
        Delete common SQL and script keywords, case-insensitively.

        Keywords are removed wherever they occur, including inside longer
        words ("selection" becomes "ion"). This is a blunt filter, not a
        substitute for parameterized queries.
        """
        def apply(value: Optional[str]) -> Optional[str]:
            if value is None:
                return None
            cleaned = SQL_KEYWORD_PATTERN.sub("", value)
            if cleaned != value:
                log_security_event(
                    SecurityEventType.SQL_INJECTION_ATTEMPT,
                    "SQL keywords removed from input",
                    input_value=value,
                    sanitizer="strip_sql_keywords",
                )
            return cleaned
        return apply

    @staticmethod
    def strip_sql_comments() -> SanitizerRule:
        """Delete ``--`` line comments and ``/* */`` block comments."""
        def apply(value: Optional[str]) -> Optional[str]:
            if value is None:
                return None
            cleaned = SQL_BLOCK_COMMENT_PATTERN.sub("", value)
            cleaned = SQL_LINE_COMMENT_PATTERN.sub("", cleaned)
            if cleaned != value:
                logger.debug(
                    "sanitization.sql_comments_removed",
                    category=LogCategory.SANITIZATION.value,
                    removed_chars=len(value) - len(cleaned),
                )
            return cleaned
        return apply

    @staticmethod
    def allow_only(allowed_chars: str) -> SanitizerRule:
        """Keep only characters in ``allowed_chars``; an empty set keeps nothing."""
        pattern = re.compile(f"[^{re.escape(allowed_chars)}]") if allowed_chars else None

        def apply(value: Optional[str]) -> Optional[str]:
            if value is None:
                return None
            if pattern is None:
                return ""
            return pattern.sub("", value)
        return apply

    @staticmethod
    def deny(denied_chars: str) -> SanitizerRule:
        """Remove every character in ``denied_chars``."""
        pattern = re.compile(f"[{re.escape(denied_chars)}]") if denied_chars else None

        def apply(value: Optional[str]) -> Optional[str]:
            if value is None or pattern is None:
                return value
            return pattern.sub("", value)
        return apply


__all__ = ['Sanitizers']
