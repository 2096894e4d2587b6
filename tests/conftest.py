"""
Pytest configuration and shared fixtures for the formguard test suite.

Markers are registered here and applied automatically from the test's
location: everything under ``tests/unit`` is marked ``unit`` and everything
under ``tests/integration`` is marked ``integration``.
"""

import sys
from pathlib import Path

import pytest
import structlog

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from formguard import Validator, ValidatorConfig  # noqa: E402
from formguard.utils.config import ENV_PREFIX, get_settings  # noqa: E402


# =============================================================================
# PYTEST CONFIGURATION AND MARKERS
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers",
        "unit: Unit tests for individual rules, results and configuration"
    )
    config.addinivalue_line(
        "markers",
        "integration: Integration tests for complete validation sessions"
    )
    config.addinivalue_line(
        "markers",
        "security: Tests for hostile-input sanitization and security logging"
    )


def pytest_collection_modifyitems(config, items):
    """Apply markers based on test location."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "integration" in path:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults so one test's logging setup never leaks into another."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove every FORMGUARD_* variable and clear the cached settings."""
    import os

    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def session():
    """A collect-all validation session."""
    return Validator.create()


@pytest.fixture
def fail_fast_session():
    """A fail-fast validation session."""
    return Validator.create(ValidatorConfig(fail_fast=True))


@pytest.fixture
def registration_form():
    """Raw registration form input as submitted by a browser."""
    return {
        'username': '  JohnDoe123  ',
        'email': '  John.Doe@Example.COM ',
        'phone': '+1 (555) 123-4567',
        'age': 25,
        'bio': "<script>alert('x')</script>Hello<p>Safe</p>",
    }
