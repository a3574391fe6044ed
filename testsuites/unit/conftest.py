"""
================================================================================
Unit Test Configuration
================================================================================

Fixtures for browser-free tests: fake pages and a clean configuration
singleton around every test.

================================================================================
"""

import pytest

from testsuites.ui_testing.framework.config_loader import ConfigLoader
from testsuites.unit.fakes import FakePage


@pytest.fixture(autouse=True)
def fresh_config():
    """Each test sees config/config.yaml plus its own env overrides."""
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()
