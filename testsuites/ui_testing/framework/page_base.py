"""
================================================================================
Base Page Object
================================================================================

Foundation class for the Page Object Model.

Provides:
    - Shared Playwright page handle and base URL
    - goto(path) navigation helper
    - Smart element location with fallbacks
    - Screenshot and failure-capture utilities
    - Response capture for debugging

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Page, Response

from .config_loader import get_config
from .smart_locator import SmartLocator


SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"

MAX_CAPTURED_RESPONSES = 20


class BasePage:
    """
    Base class for all page objects and page components.

    Components such as ``Navigation`` are composed into feature pages and
    share the same ``Page`` handle, so every object built on one page sees
    the same browser state.

    Usage:
        class HomePage(BasePage):
            URL_PATH = "/"

            async def get_page_title(self) -> str:
                return await self.page.title()
    """

    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        page: Page,
        base_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application (defaults to ``ui.base_url``)
        """
        self.page = page
        if not base_url:
            base_url = get_config("ui.base_url", "https://www.agoda.com")
        self.base_url = base_url.rstrip("/")

        self._smart_locators: List[SmartLocator] = []
        self._captured_responses: List[Dict[str, Any]] = []
        self._capture_pattern: str = get_config("ui.capture_url_pattern", "/api/")
        self.page.on("response", self._capture_response)

    async def _capture_response(self, response: Response) -> None:
        """Keep the last few matching responses for failure diagnostics."""
        if self._capture_pattern not in response.url:
            return
        self._captured_responses.append({
            "timestamp": datetime.now().isoformat(),
            "url": response.url,
            "status": response.status,
        })
        if len(self._captured_responses) > MAX_CAPTURED_RESPONSES:
            self._captured_responses.pop(0)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def goto(self, path: str = "/", wait_until: str = "domcontentloaded") -> None:
        """
        Navigate to a path relative to the base URL.

        Args:
            path: URL path, e.g. "/" or "/flights"
            wait_until: 'load', 'domcontentloaded', 'networkidle' or 'commit'
        """
        if not path.startswith("/"):
            path = f"/{path}"
        full_url = f"{self.base_url}{path}"
        with allure.step(f"Navigate to {path}"):
            await self.page.goto(full_url, wait_until=wait_until)
            logger.debug(f"Navigated to: {full_url}")

    async def navigate(self, wait_until: str = "domcontentloaded") -> None:
        """Navigate to this page's ``URL_PATH``."""
        await self.goto(self.URL_PATH, wait_until=wait_until)

    async def wait_for_page_load(
        self,
        state: str = "domcontentloaded",
        timeout: int = 15000,
    ) -> None:
        """
        Wait for the page to reach a load state.

        The target is a single-page application with background traffic, so
        'networkidle' is only safe right after a full search submission.
        """
        await self.page.wait_for_load_state(state, timeout=timeout)

    async def wait(self, ms: int) -> None:
        """Fixed delay, for animations the DOM does not signal."""
        await self.page.wait_for_timeout(ms)

    def smart_locator(
        self,
        primary: str,
        fallbacks: Optional[List[str]] = None,
        name: str = "custom_element",
    ) -> SmartLocator:
        """
        Build a SmartLocator with primary + fallback selectors.

        Args:
            primary: Primary selector (recommended: automation attribute)
            fallbacks: Fallback selectors to try when primary fails
            name: Human-readable element name for logging/Allure

        Returns:
            SmartLocator instance configured for a single element
        """
        locators: Dict[str, str] = {"primary": primary}
        for i, fb in enumerate(fallbacks or [], start=1):
            locators[f"fallback_{i}"] = fb
        smart = SmartLocator(self.page, element_name=name, locators=locators)
        self._smart_locators.append(smart)
        return smart

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """Attach screenshot, current URL and recent responses to Allure."""
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", full_page=True)

            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )

            if self._captured_responses:
                allure.attach(
                    json.dumps(self._captured_responses[-10:], indent=2),
                    name="Recent Responses",
                    attachment_type=allure.attachment_type.JSON,
                )

    @property
    def captured_responses(self) -> List[Dict[str, Any]]:
        return list(self._captured_responses)

    def get_locator_health_report(self) -> str:
        """Health report across every smart locator this page created."""
        fallback_reports = [
            smart.get_health_report()
            for smart in self._smart_locators
            if any(record.used_fallback for record in smart.health_records)
        ]
        if not fallback_reports:
            return "All elements used primary locators. No maintenance needed."
        return "\n".join(fallback_reports)


# Backward-compatible alias
PageBase = BasePage

__all__ = [
    "BasePage",
    "PageBase",
]
