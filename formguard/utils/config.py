"""
Environment-driven settings for the formguard library.

Settings are read from ``FORMGUARD_*`` environment variables, validated on
construction, and cached for the life of the process. They provide the
defaults for validation sessions (``to_validator_config``) and for logging
(``configure_logging``).

Environment variables:
- FORMGUARD_FAIL_FAST: ``true``/``false`` (default ``false``)
- FORMGUARD_MESSAGE_PREFIX: string stored on the session config (default empty)
- FORMGUARD_DEFAULT_LOCALE: locale name such as ``en_US`` or ``tr_TR``
- FORMGUARD_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default INFO)
- FORMGUARD_LOG_FORMAT: ``json`` or ``console`` (default json)
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional, TYPE_CHECKING

from formguard.utils.error_handling import ConfigurationError

if TYPE_CHECKING:
    from formguard.core.config import ValidatorConfig


ENV_PREFIX = "FORMGUARD_"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("json", "console")

_TRUE_VALUES = ('true', '1', 'yes', 'on')
_FALSE_VALUES = ('false', '0', 'no', 'off')


def _parse_bool(name: str, raw: Optional[str], default: bool) -> bool:
    if raw is None or raw.strip() == "":
        return default
    lower_value = raw.strip().lower()
    if lower_value in _TRUE_VALUES:
        return True
    if lower_value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid boolean value for {name}: {raw!r}",
        details={'variable': name, 'value': raw}
    )


@dataclass(frozen=True)
class Settings:
    """Process-wide library settings with validation."""
    fail_fast: bool = False
    message_prefix: str = ""
    default_locale: Optional[str] = None
    log_level: str = "INFO"
    log_format: str = "json"

    def __post_init__(self):
        """Validate settings after initialization"""
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Unsupported log level: {self.log_level}",
                details={'allowed': list(VALID_LOG_LEVELS)}
            )
        if self.log_format not in VALID_LOG_FORMATS:
            raise ConfigurationError(
                f"Unsupported log format: {self.log_format}",
                details={'allowed': list(VALID_LOG_FORMATS)}
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from; defaults to ``os.environ``

        Returns:
            Validated Settings instance

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ

        def get(key: str) -> Optional[str]:
            return env.get(ENV_PREFIX + key)

        return cls(
            fail_fast=_parse_bool(ENV_PREFIX + "FAIL_FAST", get("FAIL_FAST"), False),
            message_prefix=get("MESSAGE_PREFIX") or "",
            default_locale=get("DEFAULT_LOCALE") or None,
            log_level=(get("LOG_LEVEL") or "INFO").upper(),
            log_format=(get("LOG_FORMAT") or "json").lower(),
        )

    def to_validator_config(self) -> "ValidatorConfig":
        """Create a session configuration from these settings."""
        from formguard.core.config import ValidatorConfig

        if self.default_locale:
            return ValidatorConfig(
                fail_fast=self.fail_fast,
                message_prefix=self.message_prefix,
                default_locale=self.default_locale,
            )
        return ValidatorConfig(fail_fast=self.fail_fast, message_prefix=self.message_prefix)

    def configure_logging(self) -> None:
        """Apply the logging settings."""
        from formguard.utils.logging import configure_logging

        configure_logging(level=self.log_level, log_format=self.log_format)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings for this process."""
    return Settings.from_env()


__all__ = [
    'ENV_PREFIX',
    'Settings',
    'get_settings',
]
