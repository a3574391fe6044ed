"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration for the UI suite with environment variable override.

Features:
    - Single YAML file (config/config.yaml) loaded once per process
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access with defaults
    - Type coercion of env strings to the default's type

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parent.parent.parent.parent / "config" / "config.yaml"
)


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_BASE_URL)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.base_url", "https://www.agoda.com")
        'https://www.agoda.com'

        >>> config.get("calendar.max_attempts", 10)
        10

    Environment Variable Mapping:
        - ui.base_url -> UI_BASE_URL
        - navigation.settle_ms -> NAVIGATION_SETTLE_MS
        - calendar.max_attempts -> CALENDAR_MAX_ATTEMPTS
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Return the process-wide instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "ui.base_url")
            default: Default value if key not found

        Returns:
            Configuration value or default. Environment strings take the
            type of the default, or of the YAML value when no default is given.
        """
        file_value = self._lookup(key)

        env_value = os.environ.get(key.upper().replace(".", "_"))
        if env_value is not None:
            reference = default if default is not None else file_value
            return self._convert_type(env_value, reference)

        return default if file_value is None else file_value

    def _lookup(self, key: str) -> Any:
        """YAML value at a dot-notation path, or None."""
        value: Any = self._config
        for part in key.split("."):
            if not isinstance(value, dict):
                return None
            value = value.get(part)
        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get an entire configuration section, or {} if absent."""
        return self._config.get(section, {}) or {}

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """Convert an env string to match the type of the default."""
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next instantiation re-reads the file."""
        cls._instance = None
        cls._config = {}


def get_config(key: str, default: Any = None) -> Any:
    """Shortcut for ``ConfigLoader().get(key, default)``."""
    return ConfigLoader().get(key, default)


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "get_config",
]
