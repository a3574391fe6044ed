"""
================================================================================
Flights Page Object (Async / Playwright)
================================================================================

Flight search form. Five independent controls:
  - trip type radios
  - origin / destination type-ahead with a suggestion list
  - departure date calendar
  - occupancy steppers (adults, children, infants)
  - cabin class button group

Setters are order-insensitive; the date picker is opened on demand.

================================================================================
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import List, NamedTuple, Optional, Tuple, Union

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page

from testsuites.ui_testing.framework.config_loader import get_config
from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.framework.polling import (
    PollingConfig,
    PollingExhaustedError,
    poll_until,
)
from testsuites.ui_testing.pages.enums import CabinClass, PassengerType, TripType
from testsuites.ui_testing.pages.navigation import Navigation


# ================================================================================
# Selectors
# ================================================================================

TRIP_TYPE_RADIO = 'input[type="radio"][value="{value}"]'

ORIGIN_INPUT = 'input[data-selenium="flight-origin-search-input"]'
DESTINATION_INPUT = 'input[data-selenium="flight-destination-search-input"]'
ORIGIN_DROPDOWN = "#autocompleteSearch-origin"
DESTINATION_DROPDOWN = "#autocompleteSearch-destination"
ENABLED_OPTION = 'li[role="option"]:not([aria-disabled="true"])'
AIRPORT_OPTION = 'li[role="option"][data-objectid="{code}"]:not([aria-disabled="true"])'
SWAP_BUTTON = 'button[data-element-name="flight-route-swap"]'

DEPARTURE_FIELD = "#flight-departure"
DEPARTURE_VALUE = 'div[data-element-name="flight-departure"] span'
DATE_PICKER_POPUP = ".Popup__content.DateSelector__PopupContent"
CALENDAR_LIST = f'{DATE_PICKER_POPUP} [role="list"]'
CALENDAR_DAY = '[role="button"]'

OCCUPANCY_BUTTON = '[data-element-name="flight-occupancy"]'
OCCUPANCY_POPOVER = '[data-testid="passenger-selection"]'
PASSENGER_COUNT = '[data-component="{kind}-count"]'
PASSENGER_INCREASE = '[data-component="{kind}-increase"]'
PASSENGER_DECREASE = '[data-component="{kind}-decrease"]'

CABIN_CLASS_GROUP = '[data-element-name="flight-cabin-class"]'
CABIN_CLASS_OPTION = f'{CABIN_CLASS_GROUP} button[data-element-value="{{value}}"]'
CABIN_CLASS_SELECTED = f'{CABIN_CLASS_GROUP} button[aria-pressed="true"]'

SEARCH_BUTTON = 'button[data-element-name="flight-search"]'


# ================================================================================
# Errors and value types
# ================================================================================

class DateNotFoundError(PollingExhaustedError):
    """
    Raised when the calendar never rendered a button for the requested day.

    ``last_result`` holds the day labels seen on the final attempt.
    """

    def __init__(self, day: int, attempts: int, last_result=None):
        super().__init__(f"calendar day {day}", attempts, last_result)
        self.day = day
        self.args = (
            f"Date not found in calendar: day {day} (after {attempts} attempts)",
        )


class OccupancyError(ValueError):
    """Raised for a passenger count the steppers can never reach."""
    pass


class Airport(NamedTuple):
    name: str
    code: str


DateLike = Union[date, datetime, str]


def to_date(value: DateLike) -> date:
    """Accept a date, a datetime or an ISO ``YYYY-MM-DD`` string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip())


def validate_passenger_count(kind: PassengerType, count: int) -> None:
    """
    Raises:
        OccupancyError: adults below 1 ("minimum 1 adult") or any
            negative count ("negative count")
    """
    if kind is PassengerType.ADULTS and count < kind.minimum:
        raise OccupancyError(
            f"Invalid {kind.value} count {count}: minimum 1 adult"
        )
    if count < 0:
        raise OccupancyError(
            f"Invalid {kind.value} count {count}: negative count"
        )


def stepper_plan(current: int, target: int) -> Tuple[Optional[str], int]:
    """
    Clicks needed to move a stepper from ``current`` to ``target``.

    Returns:
        ("increase", n), ("decrease", n) or (None, 0) when already there
    """
    if target > current:
        return "increase", target - current
    if target < current:
        return "decrease", current - target
    return None, 0


def parse_day_of_month(text: Optional[str]) -> Optional[int]:
    """Day from "Sun, 15 Feb", "Departure Sun, 15 Feb" or "2026-02-15"."""
    if not text:
        return None
    text = text.strip()
    try:
        return date.fromisoformat(text).day
    except ValueError:
        pass
    match = re.search(r"\b(\d{1,2})\b", text)
    return int(match.group(1)) if match else None


# ================================================================================
# Flights Page
# ================================================================================

class FlightsPage(PageBase):
    """Flight search form page object (async)."""

    URL_PATH = "/flights"
    PAGE_TITLE = "Flights"

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.navigation = Navigation(page, base_url)

    # ============================================================
    # Page Elements
    # ============================================================

    @property
    def origin_input(self) -> Locator:
        return self.page.locator(ORIGIN_INPUT)

    @property
    def destination_input(self) -> Locator:
        return self.page.locator(DESTINATION_INPUT)

    @property
    def origin_dropdown(self) -> Locator:
        return self.page.locator(ORIGIN_DROPDOWN)

    @property
    def destination_dropdown(self) -> Locator:
        return self.page.locator(DESTINATION_DROPDOWN)

    @property
    def swap_button(self) -> Locator:
        return self.page.locator(SWAP_BUTTON)

    @property
    def departure_date_field(self) -> Locator:
        return self.page.locator(DEPARTURE_FIELD)

    @property
    def date_picker_popup(self) -> Locator:
        return self.page.locator(DATE_PICKER_POPUP)

    @property
    def occupancy_popover(self) -> Locator:
        return self.page.locator(OCCUPANCY_POPOVER)

    @property
    def search_button(self) -> Locator:
        return self.page.locator(SEARCH_BUTTON)

    def trip_type_option(self, trip_type: TripType) -> Locator:
        return self.page.locator(TRIP_TYPE_RADIO.format(value=trip_type.value))

    def passenger_count(self, kind: PassengerType) -> Locator:
        return self.page.locator(PASSENGER_COUNT.format(kind=kind.value))

    def passenger_stepper(self, kind: PassengerType, direction: str) -> Locator:
        template = PASSENGER_INCREASE if direction == "increase" else PASSENGER_DECREASE
        return self.page.locator(template.format(kind=kind.value))

    # ============================================================
    # Trip type
    # ============================================================

    @allure.step("Select trip type: {trip_type}")
    async def select_trip_type(self, trip_type: TripType) -> None:
        await self.trip_type_option(trip_type).click()

    async def get_selected_trip_type(self) -> TripType:
        if await self.trip_type_option(TripType.ONE_WAY).is_checked():
            return TripType.ONE_WAY
        return TripType.ROUND_TRIP

    # ============================================================
    # Airports
    # ============================================================

    @allure.step("Select origin: {search_text} ({airport_code})")
    async def select_origin(self, search_text: str, airport_code: str) -> None:
        """
        Type the origin and pick it from the suggestion list.

        Args:
            search_text: Text to search (e.g., "Ho Chi Minh")
            airport_code: Airport code to select (e.g., "SGN")
        """
        await self._select_airport(self.origin_input, search_text, airport_code)

    @allure.step("Select destination: {search_text} ({airport_code})")
    async def select_destination(self, search_text: str, airport_code: str) -> None:
        """
        Type the destination and pick it from the suggestion list.

        Args:
            search_text: Text to search (e.g., "Bangkok")
            airport_code: Airport code to select (e.g., "BKK")
        """
        await self._select_airport(self.destination_input, search_text, airport_code)

    async def _select_airport(
        self,
        field: Locator,
        search_text: str,
        airport_code: str,
    ) -> None:
        await field.fill(search_text)
        await field.click()
        await self.wait(get_config("airport.dropdown_delay_ms", 500))

        # Lists can hold duplicates and unbookable entries; match on code, skip disabled.
        option = self.page.locator(AIRPORT_OPTION.format(code=airport_code)).first
        await option.click()
        logger.debug(f"Selected airport {airport_code} for query '{search_text}'")

    async def get_origin_value(self) -> str:
        return await self.origin_input.input_value()

    async def get_destination_value(self) -> str:
        return await self.destination_input.input_value()

    @allure.step("Swap origin and destination")
    async def swap_airports(self) -> None:
        await self.swap_button.click()

    async def clear_origin(self) -> None:
        await self.origin_input.clear()

    async def clear_destination(self) -> None:
        await self.destination_input.clear()

    async def is_origin_dropdown_visible(self) -> bool:
        return await self.origin_dropdown.is_visible()

    async def is_destination_dropdown_visible(self) -> bool:
        return await self.destination_dropdown.is_visible()

    async def get_available_airports(self, input_field: str) -> List[Airport]:
        """
        Enabled suggestions currently listed under a field.

        Args:
            input_field: "origin" or "destination"
        """
        if input_field not in ("origin", "destination"):
            raise ValueError(f"input_field must be 'origin' or 'destination', got {input_field!r}")
        container = self.origin_dropdown if input_field == "origin" else self.destination_dropdown

        airports: List[Airport] = []
        for option in await container.locator(ENABLED_OPTION).all():
            code = await option.get_attribute("data-objectid")
            name = await option.get_attribute("data-text")
            if code and name:
                airports.append(Airport(name=name, code=code))
        return airports

    # ============================================================
    # Departure date
    # ============================================================

    @allure.step("Open departure date picker")
    async def open_departure_date_picker(self) -> None:
        await self.departure_date_field.click()
        await self.date_picker_popup.wait_for(state="visible")

    async def is_date_picker_visible(self) -> bool:
        return await self.date_picker_popup.is_visible()

    @allure.step("Select departure date: {departure}")
    async def select_departure_date(self, departure: DateLike) -> date:
        """
        Pick a departure date in the calendar.

        Only the day of month is matched against the rendered buttons: the
        calendar must already show the target month.

        Args:
            departure: date, datetime or "YYYY-MM-DD"

        Returns:
            The requested date

        Raises:
            DateNotFoundError: No button for that day appeared in time
        """
        target = to_date(departure)
        if not await self.is_date_picker_visible():
            await self.open_departure_date_picker()
        await self._click_calendar_day(target.day)
        return target

    async def select_departure_date_from_today(self, days_from_today: int) -> date:
        """Select today + ``days_from_today``; returns the date selected."""
        return await self.select_departure_date(date.today() + timedelta(days=days_from_today))

    async def _click_calendar_day(self, day: int) -> None:
        calendar = self.page.locator(CALENDAR_LIST).first
        await calendar.wait_for(
            state="attached",
            timeout=get_config("calendar.attach_timeout_ms", 5000),
        )
        # Day buttons are populated after the list attaches.
        await self.wait(get_config("calendar.settle_ms", 1000))

        wanted = str(day)

        async def scan_days() -> Tuple[Optional[Locator], List[str]]:
            """First button labelled ``day`` plus every label seen on this pass."""
            seen: List[str] = []
            for button in await calendar.locator(CALENDAR_DAY).all():
                text = (await button.text_content() or "").strip()
                if text == wanted:
                    return button, seen
                seen.append(text)
            return None, seen

        config = PollingConfig(
            max_attempts=get_config("calendar.max_attempts", 10),
            interval_ms=get_config("calendar.retry_interval_ms", 500),
        )
        try:
            button, _ = await poll_until(
                scan_days,
                lambda scan: scan[0] is not None,
                config=config,
                description=f"calendar day {day}",
                sleep=self.page.wait_for_timeout,
            )
        except PollingExhaustedError as e:
            _, seen = e.last_result
            raise DateNotFoundError(day, e.attempts, seen) from e

        await button.scroll_into_view_if_needed()
        # Neighbouring day cells overlap the hit target.
        await button.click(force=True)
        logger.debug(f"Clicked calendar day {day}")

    async def get_selected_departure_date(self) -> Optional[str]:
        """Displayed departure date text, or None if it cannot be read."""
        try:
            text = await self.page.locator(DEPARTURE_VALUE).first.text_content()
        except PlaywrightError as e:
            logger.warning(f"Could not read departure date: {e}")
            return None
        return text.strip() if text else None

    async def get_selected_departure_day(self) -> Optional[int]:
        return parse_day_of_month(await self.get_selected_departure_date())

    # ============================================================
    # Occupancy
    # ============================================================

    @allure.step("Open occupancy selector")
    async def open_occupancy(self) -> None:
        if await self.occupancy_popover.is_visible():
            return
        await self.page.locator(OCCUPANCY_BUTTON).first.click()
        await self.occupancy_popover.wait_for(state="visible")

    async def get_count(self, kind: PassengerType) -> int:
        """Displayed stepper value for ``kind``."""
        text = await self.passenger_count(kind).inner_text()
        return int(text.strip())

    @allure.step("Set {kind} count to {count}")
    async def set_count(self, kind: PassengerType, count: int) -> None:
        """
        Drive a stepper to an absolute count.

        The widget only has +/- buttons: read the displayed value and click
        the difference.

        Raises:
            OccupancyError: ``count`` is below the minimum for ``kind``
        """
        validate_passenger_count(kind, count)
        await self.open_occupancy()

        current = await self.get_count(kind)
        direction, clicks = stepper_plan(current, count)
        if direction is None:
            logger.debug(f"{kind.value} already at {count}")
            return

        stepper = self.passenger_stepper(kind, direction)
        for _ in range(clicks):
            await stepper.click()
        logger.debug(f"{kind.value}: {current} -> {count} ({clicks}x {direction})")

    async def set_adults(self, count: int) -> None:
        await self.set_count(PassengerType.ADULTS, count)

    async def set_children(self, count: int) -> None:
        await self.set_count(PassengerType.CHILDREN, count)

    async def set_infants(self, count: int) -> None:
        await self.set_count(PassengerType.INFANTS, count)

    # ============================================================
    # Cabin class
    # ============================================================

    @allure.step("Select cabin class: {cabin_class}")
    async def select_cabin_class(self, cabin_class: CabinClass) -> None:
        await self.page.locator(CABIN_CLASS_OPTION.format(value=cabin_class.value)).click()

    async def get_selected_cabin_class(self) -> Optional[CabinClass]:
        """Selected cabin class, or None if nothing readable is selected."""
        selected = self.page.locator(CABIN_CLASS_SELECTED)
        try:
            if await selected.count() == 0:
                return None
            value = await selected.first.get_attribute("data-element-value")
        except PlaywrightError as e:
            logger.warning(f"Could not read cabin class: {e}")
            return None
        try:
            return CabinClass(value)
        except ValueError:
            logger.warning(f"Unknown cabin class value: {value!r}")
            return None

    # ============================================================
    # Search
    # ============================================================

    @allure.step("Search flights")
    async def search_flights(self) -> None:
        await self.search_button.click()

    async def is_search_button_visible(self) -> bool:
        return await self.search_button.is_visible()

    async def is_search_button_enabled(self) -> bool:
        return not await self.search_button.is_disabled()
