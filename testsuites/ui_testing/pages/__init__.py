"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the travel-booking site.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Read accessors used by assertions

Author: Automation Team
License: MIT
================================================================================
"""

from .enums import CabinClass, NavigationTab, PassengerType, TripType
from .navigation import Navigation
from .home_page import HomePage
from .flights_page import (
    Airport,
    DateNotFoundError,
    FlightsPage,
    OccupancyError,
)
from .flight_results_page import FlightResultsPage, PassengerCounts

__all__ = [
    "CabinClass",
    "NavigationTab",
    "PassengerType",
    "TripType",
    "Navigation",
    "HomePage",
    "Airport",
    "DateNotFoundError",
    "FlightsPage",
    "OccupancyError",
    "FlightResultsPage",
    "PassengerCounts",
]
