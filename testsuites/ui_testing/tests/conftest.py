"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for live browser scenarios: browser lifecycle, page objects and
failure capture.

Key Features:
- Live scenarios are opt-in (UI_RUN_LIVE=true); they hit a real website
- Fresh browser context per test for isolation
- Page Object fixtures for every page
- Screenshot + URL attached to Allure on failure

================================================================================
"""

from typing import AsyncGenerator

import pytest
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.config_loader import get_config
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.pages.enums import NavigationTab
from testsuites.ui_testing.pages.flight_results_page import FlightResultsPage
from testsuites.ui_testing.pages.flights_page import FlightsPage
from testsuites.ui_testing.pages.home_page import HomePage


# ================================================================================
# Collection
# ================================================================================

def pytest_collection_modifyitems(config, items):
    """Skip live scenarios unless explicitly enabled."""
    if get_config("ui.run_live", False):
        return

    skip_live = pytest.mark.skip(
        reason="live UI scenario; set UI_RUN_LIVE=true to run against UI_BASE_URL"
    )
    for item in items:
        if "ui_testing" in item.path.parts:
            item.add_marker(skip_live)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """Browser launched from configuration (ui.browser / ui.headless)."""
    async with BrowserManager() as manager:
        yield manager


@pytest.fixture
async def page(request, browser_manager: BrowserManager) -> AsyncGenerator[Page, None]:
    """
    Page in an isolated context.

    Records matching network responses from the start of the test and, when
    the test body failed, attaches a full-page screenshot, the current URL
    and those responses to Allure.
    """
    page = await browser_manager.new_page()
    recorder = BasePage(page)
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            await recorder.capture_failure(request.node.name)
        except PlaywrightError as e:
            logger.warning(f"Failed to capture failure details: {e}")
    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def home_page(page: Page) -> HomePage:
    return HomePage(page)


@pytest.fixture
def flights_page(page: Page) -> FlightsPage:
    return FlightsPage(page)


@pytest.fixture
def flight_results_page(page: Page) -> FlightResultsPage:
    return FlightResultsPage(page)


@pytest.fixture
async def flights_search(flights_page: FlightsPage) -> FlightsPage:
    """Flights page opened from the home page through the Flights tab."""
    await flights_page.goto("/")
    await flights_page.navigation.navigate_to(NavigationTab.FLIGHTS)
    return flights_page


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item for fixture teardown."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


# ================================================================================
# Test Data
# ================================================================================

@pytest.fixture
def test_data():
    """Common routes and passengers for flight scenarios."""
    return {
        "origin": {"query": "Ho Chi Minh", "code": "SGN", "display": "Ho Chi Minh City (SGN)"},
        "destination": {"query": "Bangkok", "code": "BKK", "display": "Bangkok (BKK)"},
        "alternate_destination": {"query": "Hanoi", "code": "HAN"},
        "adults": 2,
        "days_from_today": 2,
    }
