import pytest
import yaml

from testsuites.ui_testing.framework.config_loader import (
    DEFAULT_CONFIG_PATH,
    ConfigLoader,
    ConfigurationError,
)


def test_env_override_and_defaults(monkeypatch, tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.dump({"ui": {"locale": "vi-VN", "viewport_width": 1280}}),
        encoding="utf-8",
    )

    ConfigLoader.reset()
    loader = ConfigLoader(config_path=config_path)
    assert loader.get("ui.locale") == "vi-VN"
    assert loader.get("ui.timezone", "UTC") == "UTC"

    ConfigLoader.reset()
    monkeypatch.setenv("UI_LOCALE", "th-TH")
    loader = ConfigLoader(config_path=config_path)
    assert loader.get("ui.locale") == "th-TH"


def test_env_values_are_coerced_to_default_type(monkeypatch, tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("CALENDAR_MAX_ATTEMPTS", "3")
    monkeypatch.setenv("UI_HEADLESS", "false")
    monkeypatch.setenv("UI_SCALE", "1.5")

    loader = ConfigLoader(config_path=config_path)

    assert loader.get("calendar.max_attempts", 10) == 3
    assert loader.get("ui.headless", True) is False
    assert loader.get("ui.scale", 1.0) == 1.5
    assert loader.get("calendar.max_attempts") == "3"


def test_reload_updates_values(monkeypatch, tmp_path):
    monkeypatch.delenv("NAVIGATION_SETTLE_MS", raising=False)
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"navigation": {"settle_ms": 500}}), encoding="utf-8")

    loader = ConfigLoader(config_path=config_path)
    assert loader.get("navigation.settle_ms") == 500

    config_path.write_text(yaml.dump({"navigation": {"settle_ms": 800}}), encoding="utf-8")
    loader.reload()
    assert loader.get("navigation.settle_ms") == 800


def test_env_values_take_yaml_type_without_default(monkeypatch, tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.dump({"navigation": {"settle_ms": 500}, "ui": {"headless": True}}),
        encoding="utf-8",
    )
    monkeypatch.setenv("NAVIGATION_SETTLE_MS", "250")
    monkeypatch.setenv("UI_HEADLESS", "off")

    loader = ConfigLoader(config_path=config_path)

    assert loader.get("navigation.settle_ms") == 250
    assert loader.get("ui.headless") is False


def test_missing_file_falls_back_to_defaults(tmp_path):
    loader = ConfigLoader(config_path=tmp_path / "absent.yaml")
    assert loader.get("results.settle_ms", 3000) == 3000
    assert loader.get_section("results") == {}


def test_invalid_yaml_raises(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("ui: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ConfigLoader(config_path=config_path)


def test_shipped_config_has_calendar_bounds(monkeypatch):
    monkeypatch.delenv("CALENDAR_MAX_ATTEMPTS", raising=False)
    monkeypatch.delenv("CALENDAR_ATTACH_TIMEOUT_MS", raising=False)

    loader = ConfigLoader(config_path=DEFAULT_CONFIG_PATH)

    assert loader.get("calendar.max_attempts") == 10
    assert loader.get("calendar.attach_timeout_ms") == 5000
    assert loader.get_section("navigation")["settle_ms"] == 500
