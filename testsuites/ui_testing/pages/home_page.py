"""
================================================================================
Home Page Object (Async / Playwright)
================================================================================

Landing page: hotel search box plus the shared navigation bar.

================================================================================
"""

from __future__ import annotations

import re

import allure
from playwright.async_api import Locator, Page

from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.pages.navigation import Navigation


class HomePage(PageBase):
    """Home page object (async)."""

    URL_PATH = "/"
    PAGE_TITLE = "Agoda"

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.navigation = Navigation(page, base_url)

    @property
    def search_button(self) -> Locator:
        return self.page.get_by_role("button", name=re.compile("search", re.IGNORECASE))

    @property
    def destination_input(self) -> Locator:
        return self.page.get_by_placeholder(re.compile("destination", re.IGNORECASE))

    @property
    def check_in_input(self) -> Locator:
        return self.page.get_by_placeholder(re.compile("check.in", re.IGNORECASE))

    @allure.step("Open home page")
    async def open(self) -> "HomePage":
        await self.navigate()
        return self

    @allure.step("Search hotels in {destination}")
    async def search_hotels(self, destination: str) -> None:
        await self.destination_input.fill(destination)
        await self.search_button.first.click()

    async def get_page_title(self) -> str:
        return await self.page.title()
