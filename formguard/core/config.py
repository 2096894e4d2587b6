"""
Validation session configuration.
"""

import locale
from dataclasses import dataclass, field, replace
from typing import Optional

from formguard.utils.error_handling import ConfigurationError

FALLBACK_LOCALE = "en_US"


def system_locale() -> str:
    """Locale of the running process, or ``en_US`` when none is set."""
    try:
        name = locale.getlocale()[0]
    except ValueError:
        name = None
    return name or FALLBACK_LOCALE


@dataclass(frozen=True)
class ValidatorConfig:
    """
    Configuration for a validation session.

    Attributes:
        fail_fast: Skip further validators on a field once it has an error,
            and raise ``ValidationFailure`` from ``execute()`` when the
            result is invalid
        message_prefix: Stored for host applications that namespace their
            messages; the library itself does not apply it
        default_locale: Locale name for locale-sensitive case conversion
    """
    fail_fast: bool = False
    message_prefix: str = ""
    default_locale: str = field(default_factory=system_locale)

    def __post_init__(self):
        """Validate configuration values"""
        if not isinstance(self.fail_fast, bool):
            raise ConfigurationError(
                f"fail_fast must be a bool, got {type(self.fail_fast).__name__}"
            )
        if not isinstance(self.message_prefix, str):
            raise ConfigurationError(
                f"message_prefix must be a string, got {type(self.message_prefix).__name__}"
            )
        if not isinstance(self.default_locale, str) or not self.default_locale.strip():
            raise ConfigurationError("default_locale must be a non-empty locale name")

    def with_options(
        self,
        fail_fast: Optional[bool] = None,
        message_prefix: Optional[str] = None,
        default_locale: Optional[str] = None
    ) -> "ValidatorConfig":
        """Return a copy with the given options replaced."""
        changes = {}
        if fail_fast is not None:
            changes['fail_fast'] = fail_fast
        if message_prefix is not None:
            changes['message_prefix'] = message_prefix
        if default_locale is not None:
            changes['default_locale'] = default_locale
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> "ValidatorConfig":
        """Build a configuration from ``FORMGUARD_*`` environment variables."""
        from formguard.utils.config import Settings

        return Settings.from_env().to_validator_config()


__all__ = ['ValidatorConfig', 'system_locale']
