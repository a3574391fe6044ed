"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based helpers shared by every page object.

Components:
    - config_loader: YAML configuration with environment overrides
    - logger: Loguru sink setup
    - polling: Bounded retry loop for asynchronously rendered content
    - smart_locator: Element location with fallback strategies
    - page_base: Base page object (shared page handle, goto)
    - browser_manager: Browser lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError, get_config
from .polling import PollingConfig, PollingExhaustedError, poll_until
from .smart_locator import SmartLocator, ElementNotFoundError
from .page_base import BasePage
from .browser_manager import BrowserManager

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "get_config",
    "PollingConfig",
    "PollingExhaustedError",
    "poll_until",
    "SmartLocator",
    "ElementNotFoundError",
    "BasePage",
    "BrowserManager",
]
