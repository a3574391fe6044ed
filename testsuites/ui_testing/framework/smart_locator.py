"""
================================================================================
Smart Locator
================================================================================

Element location with ordered fallback strategies.

The target site's markup is an implicit contract: automation attributes
(data-selenium, data-testid) are preferred, ARIA roles and visible text are
kept as fallbacks. When a fallback is needed the primary selector is stale,
so every fallback hit is logged and recorded for the health report.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from loguru import logger
from playwright.async_api import Locator, Page


class ElementNotFoundError(Exception):
    """Raised when all locator strategies fail to find element."""
    pass


@dataclass
class LocatorHealth:
    """
    Outcome of one successful resolution.

    Attributes:
        element_name: Human-readable element name
        primary_selector: The preferred selector
        used_fallback: Whether a fallback was used
        fallback_name: Name of fallback used (if any)
        fallback_selector: The fallback selector used (if any)
    """
    element_name: str
    primary_selector: str
    used_fallback: bool = False
    fallback_name: Optional[str] = None
    fallback_selector: Optional[str] = None


class SmartLocator:
    """
    Resolve one element through a primary selector and ordered fallbacks.

    Locator priority order used by the page objects:
        1. data-selenium / data-testid (automation attributes)
        2. role + accessible name
        3. visible text

    Usage:
        >>> tab = SmartLocator(
        ...     page,
        ...     element_name="Flights tab",
        ...     locators={
        ...         "primary": '[data-selenium="agodaFlightsTab"]',
        ...         "fallback_1": '[data-testid="agodaFlightsTab"]',
        ...     },
        ... )
        >>> await (await tab.locate()).click()
    """

    def __init__(
        self,
        page: Page,
        element_name: str = "custom_element",
        locators: Optional[Dict[str, str]] = None,
    ):
        """
        Args:
            page: Playwright Page object
            element_name: Human-readable element name for logs and reports
            locators: Ordered mapping strategy name -> selector; the
                "primary" entry is expected first
        """
        self.page = page
        self.element_name = element_name
        self.locators: Dict[str, str] = dict(locators or {})
        self._health_records: List[LocatorHealth] = []
        self._fallback_used: Dict[str, LocatorHealth] = {}

    async def locate(self, timeout: int = 5000) -> Locator:
        """
        Locate element using smart fallback strategy.

        Tries each strategy in order, waiting up to ``timeout`` ms for the
        element to become visible.

        Returns:
            Playwright Locator for the found element

        Raises:
            ElementNotFoundError: When all strategies fail
        """
        if not self.locators:
            raise ElementNotFoundError(
                f"No locators defined for element: {self.element_name}"
            )

        primary = self.locators.get("primary", next(iter(self.locators.values())))
        errors = []

        for strategy_name, selector in self.locators.items():
            try:
                locator = self.page.locator(selector)
                await locator.wait_for(state="visible", timeout=timeout)
            except Exception as e:
                errors.append(f"{strategy_name}: {selector} -> {str(e)[:80]}")
                continue

            is_primary = selector == primary
            health = LocatorHealth(
                element_name=self.element_name,
                primary_selector=primary,
                used_fallback=not is_primary,
                fallback_name=None if is_primary else strategy_name,
                fallback_selector=None if is_primary else selector,
            )
            self._health_records.append(health)

            if is_primary:
                logger.debug(f"Element '{self.element_name}' found: {selector}")
            else:
                logger.warning(
                    f"Element '{self.element_name}' used fallback: "
                    f"{strategy_name} -> {selector}"
                )
                self._fallback_used[self.element_name] = health

            return locator

        error_msg = (
            f"All locators failed for '{self.element_name}':\n"
            + "\n".join(f"  - {err}" for err in errors)
        )
        logger.error(error_msg)
        raise ElementNotFoundError(error_msg)

    async def click(self, timeout: int = 5000, **kwargs) -> None:
        """Locate then click; extra kwargs go to ``Locator.click``."""
        locator = await self.locate(timeout=timeout)
        await locator.click(**kwargs)

    async def is_visible(self, timeout: int = 2000) -> bool:
        """True if any strategy resolves to a visible element."""
        try:
            await self.locate(timeout=timeout)
            return True
        except ElementNotFoundError:
            return False

    @property
    def health_records(self) -> List[LocatorHealth]:
        return list(self._health_records)

    def get_health_report(self) -> str:
        """
        Summarize which elements needed a fallback.

        Returns:
            Formatted report; elements listed here have a stale primary selector
        """
        if not self._fallback_used:
            return "All elements used primary locators. No maintenance needed."

        report_lines = [
            "Locator Health Report - Fallbacks Used:",
            "",
            "Consider updating the primary selectors:",
            "",
        ]
        for element_name, health in self._fallback_used.items():
            report_lines.extend([
                f"  [{element_name}]",
                f"    Failed primary: {health.primary_selector}",
                f"    Used: {health.fallback_name} -> {health.fallback_selector}",
                "",
            ])
        return "\n".join(report_lines)


__all__ = [
    "SmartLocator",
    "ElementNotFoundError",
    "LocatorHealth",
]
