"""
================================================================================
Flight Results Page Object (Async / Playwright)
================================================================================

Read-mostly view over the search summary bar and the result cards.

The price node carries several figures (crossed-out original, final price,
currency annotations). The final price is picked by shape: the one fragment
made only of digits and thousands separators.

================================================================================
"""

from __future__ import annotations

import re
from typing import Iterable, NamedTuple

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator

from testsuites.ui_testing.framework.config_loader import get_config
from testsuites.ui_testing.framework.page_base import PageBase


FLYING_FROM_LABEL = "Flying from"
FLYING_TO_LABEL = "Flying to"
DEPARTURE_DATE_TEST_ID = "departure-date-input"
CABIN_CLASS_LABEL = '[data-element-name="flight-cabin-class"] p'
PASSENGER_BUTTON = '[data-element-name="flight-occupancy"] button'
PASSENGER_POPOVER_TEST_ID = "passenger-selection"
ADULTS_COUNT = '[data-component="adults-count"]'
CHILDREN_COUNT = '[data-component="children-count"]'
INFANTS_COUNT = '[data-component="infants-count"]'
FLIGHT_CARD = '[data-testid="web-refresh-flights-card"]'
FLIGHT_DETAILS_EXPAND = '[data-testid="flight-details-expand"]'
PRICE_FRAGMENTS = (
    '[data-testid="flight-price-breakdown"] span:not([data-testid="crossout-price"])'
)

NUMERIC_PRICE = re.compile(r"^[0-9,]+$")


class PassengerCounts(NamedTuple):
    adults: str
    children: str
    infants: str


def extract_numeric_price(fragments: Iterable[str]) -> str:
    """
    First fragment shaped like a plain amount ("1,234"), else "".

    Fragments are compared trimmed; anything with a currency sign or
    letters is skipped.
    """
    for fragment in fragments:
        candidate = fragment.strip()
        if NUMERIC_PRICE.match(candidate):
            return candidate
    return ""


class FlightResultsPage(PageBase):
    """Flight search results page object (async)."""

    URL_PATH = "/flights/results"
    PAGE_TITLE = "Flights"

    @property
    def flying_from_input(self) -> Locator:
        return self.page.get_by_label(FLYING_FROM_LABEL)

    @property
    def flying_to_input(self) -> Locator:
        return self.page.get_by_label(FLYING_TO_LABEL)

    @property
    def departure_date_button(self) -> Locator:
        return self.page.get_by_test_id(DEPARTURE_DATE_TEST_ID)

    @property
    def passenger_popover(self) -> Locator:
        return self.page.get_by_test_id(PASSENGER_POPOVER_TEST_ID)

    @property
    def flight_cards(self) -> Locator:
        return self.page.locator(FLIGHT_CARD)

    @allure.step("Wait for flight results")
    async def wait_for_results(self) -> None:
        """Results are fetched after submission; network idle is reachable here."""
        await self.wait_for_page_load(
            "networkidle",
            timeout=get_config("results.load_timeout_ms", 30000),
        )
        await self.wait(get_config("results.settle_ms", 3000))

    async def get_flying_from_value(self) -> str:
        return await self.flying_from_input.get_attribute("value") or ""

    async def get_flying_to_value(self) -> str:
        return await self.flying_to_input.get_attribute("value") or ""

    async def get_departure_date_text(self) -> str:
        """Date part only, e.g. "Wed, 11 Feb" from "Departure Wed, 11 Feb"."""
        text = await self.departure_date_button.inner_text()
        return text.replace("Departure", "", 1).strip()

    async def get_cabin_class_label(self) -> str:
        return (await self.page.locator(CABIN_CLASS_LABEL).first.inner_text()).strip()

    @allure.step("Open passenger selection")
    async def open_passenger_selection(self) -> None:
        await self.page.locator(PASSENGER_BUTTON).first.click()
        await self.passenger_popover.wait_for(state="visible")

    async def get_passenger_counts(self) -> PassengerCounts:
        return PassengerCounts(
            adults=(await self.page.locator(ADULTS_COUNT).inner_text()).strip(),
            children=(await self.page.locator(CHILDREN_COUNT).inner_text()).strip(),
            infants=(await self.page.locator(INFANTS_COUNT).inner_text()).strip(),
        )

    async def get_flight_cards_count(self) -> int:
        return await self.flight_cards.count()

    @allure.step("Click flight card #{index}")
    async def click_flight_card(self, index: int) -> None:
        await self.flight_cards.nth(index).click()

    async def is_flight_details_expanded_visible(self, card_index: int) -> bool:
        return await (
            self.flight_cards.nth(card_index).locator(FLIGHT_DETAILS_EXPAND).is_visible()
        )

    async def get_flight_price(self, card_index: int) -> str:
        """
        Final price shown on a card, e.g. "1,234".

        Returns "" when no fragment looks like a plain amount or the card
        cannot be read.
        """
        card = self.flight_cards.nth(card_index)
        try:
            fragments = await card.locator(PRICE_FRAGMENTS).all_text_contents()
        except PlaywrightError as e:
            logger.warning(f"Could not read price of card {card_index}: {e}")
            return ""

        price = extract_numeric_price(fragments)
        if not price:
            logger.warning(f"No numeric price among {fragments!r} on card {card_index}")
        return price
