"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers, sets up logging and tags tests by directory.

================================================================================
"""

import pytest

from testsuites.ui_testing.framework.logger import init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Live browser tests against the travel site"
    )
    config.addinivalue_line(
        "markers", "unit: Browser-free tests of the framework and page objects"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "navigation: Tests related to the product tab bar"
    )
    config.addinivalue_line(
        "markers", "flights: Tests related to flight search and results"
    )

    init_logger()


def pytest_collection_modifyitems(config, items):
    """Auto-add the 'ui' or 'unit' marker based on the test's directory."""
    for item in items:
        parts = item.path.parts
        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)
        elif "unit" in parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Travel UI Automation Suite",
        "=" * 60,
        "",
    ]
