"""
================================================================================
Navigation Component (Async / Playwright)
================================================================================

Top navigation bar shared by the home and product pages.

Tabs are addressed by their ``data-selenium`` attribute, which the site
keeps stable across redesigns; the test-id and visible label are fallbacks.

================================================================================
"""

from __future__ import annotations

from typing import Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator

from testsuites.ui_testing.framework.config_loader import get_config
from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.framework.smart_locator import SmartLocator
from testsuites.ui_testing.pages.enums import NavigationTab


TABS_CONTAINER = "#Tabs-Container"
TAB_ROLE = '[role="tab"]'
ACTIVE_TAB = '[role="tab"][aria-selected="true"]'


class Navigation(PageBase):
    """Navigation bar component (async)."""

    def __init__(self, page, base_url: str = ""):
        super().__init__(page, base_url)
        self._tab_locators: Dict[NavigationTab, SmartLocator] = {}

    @property
    def tabs_container(self) -> Locator:
        return self.page.locator(TABS_CONTAINER)

    def get_tab(self, tab: NavigationTab) -> Locator:
        """Tab element by its ``data-selenium`` attribute."""
        return self.page.locator(f'[data-selenium="{tab.value}"]')

    def get_tab_by_test_id(self, tab: NavigationTab) -> Locator:
        return self.page.get_by_test_id(tab.value)

    def tab_locator(self, tab: NavigationTab) -> SmartLocator:
        """Tab with fallbacks: data-selenium, then test-id, then label text."""
        if tab not in self._tab_locators:
            self._tab_locators[tab] = self.smart_locator(
                primary=f'[data-selenium="{tab.value}"]',
                fallbacks=[
                    f'[data-testid="{tab.value}"]',
                    f'{TAB_ROLE}:has-text("{tab.label}")',
                ],
                name=f"{tab.label} tab",
            )
        return self._tab_locators[tab]

    @allure.step("Navigate to tab: {tab}")
    async def navigate_to(self, tab: NavigationTab) -> None:
        """
        Click a tab and wait for the section to settle.

        Args:
            tab: The navigation tab to click
        """
        await self.tab_locator(tab).click()
        await self._wait_for_navigation()
        logger.debug(f"Navigated to tab: {tab.label}")

    @allure.step("Navigate by label: {label}")
    async def navigate_by_label(self, label: str) -> None:
        """
        Click the tab whose visible text contains ``label``.

        Depends on the page locale; prefer ``navigate_to`` where the tab is known.
        """
        await self.page.locator(TAB_ROLE).filter(has_text=label).first.click()
        await self._wait_for_navigation()

    async def get_active_tab(self) -> Optional[NavigationTab]:
        """
        Currently selected tab, scoped to the tabs container.

        Returns:
            The NavigationTab, or None when nothing is selected or the
            selected tab is not one we know
        """
        active = self.tabs_container.locator(ACTIVE_TAB)
        if await active.count() == 0:
            return None
        value = await active.first.get_attribute("data-selenium")
        return NavigationTab.from_value(value)

    async def is_tab_visible(self, tab: NavigationTab) -> bool:
        return await self.get_tab(tab).is_visible()

    async def is_tab_enabled(self, tab: NavigationTab) -> bool:
        return not await self.get_tab(tab).is_disabled()

    async def get_all_available_tabs(self) -> List[NavigationTab]:
        """Known tabs present in the bar, in page order."""
        values = await self.page.locator(TAB_ROLE).evaluate_all(
            "elements => elements"
            ".map(el => el.getAttribute('data-selenium'))"
            ".filter(attr => attr !== null)"
        )
        tabs = [NavigationTab.from_value(value) for value in values]
        return [tab for tab in tabs if tab is not None]

    async def _wait_for_navigation(self) -> None:
        # DOM parsed plus a grace delay; the SPA never reaches network idle.
        await self.page.wait_for_load_state("domcontentloaded")
        await self.wait(get_config("navigation.settle_ms", 500))
