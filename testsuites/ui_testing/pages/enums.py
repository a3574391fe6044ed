"""
Closed value sets used by the page objects.

Enum values are the identifiers the site puts in its markup
(``data-selenium`` for tabs, radio ``value`` for trip types, etc.), so a
member can be dropped straight into a selector.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class NavigationTab(str, Enum):
    """Product tabs of the top navigation bar."""

    HOTELS = "allRoomsTab"
    FLIGHTS = "agodaFlightsTab"
    HOMES = "homesTab"
    PACKAGES = "agodaPackagesTab"
    ACTIVITIES = "agodaActivitiesTab"
    AIRPORT_TRANSFER = "agodaJourneyTab"

    @property
    def label(self) -> str:
        return NAVIGATION_TAB_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "NavigationTab":
        for tab, tab_label in NAVIGATION_TAB_LABELS.items():
            if tab_label.lower() == label.strip().lower():
                return tab
        raise ValueError(f"Unknown navigation tab label: {label!r}")

    @classmethod
    def from_value(cls, value: Optional[str]) -> Optional["NavigationTab"]:
        """Map a ``data-selenium`` value to a tab, ``None`` if unknown."""
        try:
            return cls(value)
        except ValueError:
            return None


NAVIGATION_TAB_LABELS = {
    NavigationTab.HOTELS: "Hotels",
    NavigationTab.FLIGHTS: "Flights",
    NavigationTab.HOMES: "Homes & Apts",
    NavigationTab.PACKAGES: "Flight + Hotel",
    NavigationTab.ACTIVITIES: "Activities",
    NavigationTab.AIRPORT_TRANSFER: "Airport transfer",
}


class TripType(str, Enum):
    ONE_WAY = "one-way"
    ROUND_TRIP = "round-trip"


class CabinClass(str, Enum):
    """Fare classes offered by the cabin button group."""

    ECONOMY = "economy"
    PREMIUM_ECONOMY = "premium-economy"
    BUSINESS = "business"
    FIRST = "first"

    @property
    def label(self) -> str:
        return CABIN_CLASS_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "CabinClass":
        for cabin, cabin_label in CABIN_CLASS_LABELS.items():
            if cabin_label.lower() == label.strip().lower():
                return cabin
        raise ValueError(f"Unknown cabin class label: {label!r}")


CABIN_CLASS_LABELS = {
    CabinClass.ECONOMY: "Economy",
    CabinClass.PREMIUM_ECONOMY: "Premium economy",
    CabinClass.BUSINESS: "Business",
    CabinClass.FIRST: "First",
}


class PassengerType(str, Enum):
    """Occupancy steppers; the value is the ``data-component`` prefix."""

    ADULTS = "adults"
    CHILDREN = "children"
    INFANTS = "infants"

    @property
    def minimum(self) -> int:
        return 1 if self is PassengerType.ADULTS else 0

    @property
    def singular(self) -> str:
        return {
            PassengerType.ADULTS: "adult",
            PassengerType.CHILDREN: "child",
            PassengerType.INFANTS: "infant",
        }[self]
