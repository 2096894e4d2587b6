"""
Rule contracts shared by validators and sanitizers.

A sanitizer is any callable taking the current text (or None) and returning
the new text; None passes through unchanged. A validator is any callable
taking the field name and current value and returning a ``ValidationError``
on failure or None on success. Plain functions and lambdas satisfy both
contracts, so custom rules need no base class::

    def no_admin(field_name, value):
        if value is not None and value.startswith("admin"):
            return ValidationError(field_name, "Cannot start with 'admin'", "custom.admin")
        return None
"""

from typing import Any, Callable, Optional

from formguard.results import ValidationError

# (text) -> text
SanitizerRule = Callable[[Optional[str]], Optional[str]]

# (field_name, value) -> error or None
ValidatorRule = Callable[[str, Any], Optional[ValidationError]]

__all__ = ['SanitizerRule', 'ValidatorRule']
