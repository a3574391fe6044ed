"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - One browser instance per manager
    - Isolated contexts per test
    - Locale / timezone / viewport presets from configuration

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from .config_loader import get_config


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class BrowserManager:
    """
    Manages a browser instance and its contexts for UI testing.

    Usage:
        async with BrowserManager() as manager:
            page = await manager.new_page()
            await page.goto("https://www.agoda.com")
    """

    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": [
            "--disable-blink-features=AutomationControlled",
        ],
    }

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode (defaults to ``ui.headless``)
            browser_type: 'chromium', 'firefox' or 'webkit' (defaults to ``ui.browser``)
        """
        self.headless = get_config("ui.headless", True) if headless is None else headless
        self.browser_type = browser_type or get_config("ui.browser", "chromium")
        if self.browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{self.browser_type}', "
                f"expected one of {SUPPORTED_BROWSERS}"
            )

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @staticmethod
    def default_context_options() -> Dict[str, Any]:
        """Context options derived from configuration."""
        return {
            "viewport": {
                "width": get_config("ui.viewport_width", 1920),
                "height": get_config("ui.viewport_height", 1080),
            },
            "locale": get_config("ui.locale", "en-US"),
            "timezone_id": get_config("ui.timezone", "Asia/Ho_Chi_Minh"),
            "base_url": get_config("ui.base_url", "https://www.agoda.com"),
            "ignore_https_errors": True,
        }

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self.browser_type)

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }
        if self.browser_type != "chromium":
            launch_options.pop("args")

        try:
            self._browser = await browser_launcher.launch(**launch_options)
        except Exception:
            # __aexit__ never runs when __aenter__ fails; stop the driver here.
            await self.close()
            raise
        logger.debug(
            f"Browser started: {self.browser_type} (headless={self.headless})"
        )

    async def close(self) -> None:
        """Close all contexts, the browser and Playwright."""
        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.debug(f"Context already closed: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create an isolated browser context.

        Args:
            **options: Overrides for the configured context options
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = await self._browser.new_context(
            **{**self.default_context_options(), **options}
        )
        context.set_default_timeout(get_config("ui.default_timeout_ms", 15000))
        self._contexts.append(context)
        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """Create a page in ``context`` or in a fresh context."""
        if context is None:
            context = await self.new_context(**context_options)
        return await context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
]
