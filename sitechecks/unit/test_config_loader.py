import pytest
import yaml

from sitechecks.ui_testing.framework.config_loader import (
    ConfigLoader,
    ConfigurationError,
)


@pytest.fixture(autouse=True)
def _reset_config(monkeypatch):
    for name in (
        "SITECHECKS_CONFIG",
        "UI_BROWSER",
        "UI_HEADLESS",
        "UI_SLOW_MO",
        "UI_TIMEOUTS_OVERLAY",
        "UI_TIMEOUTS_ELEMENT",
        "SCENARIOS_LEAGUE_TEAM",
        "SCENARIOS_LEAGUE_EXPECTED_POSITION",
        "SCENARIOS_SEARCH_EXPECTED_SUBJECT",
    ):
        monkeypatch.delenv(name, raising=False)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


def test_env_override_and_defaults(monkeypatch, tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.dump({"ui": {"browser": "firefox", "timeouts": {"overlay": 2000}}}),
        encoding="utf-8",
    )

    loader = ConfigLoader(config_path=config_path)
    assert loader.get("ui.browser") == "firefox"
    assert loader.get("ui.timeouts.overlay") == 2000
    assert loader.get("ui.timeouts.element", 30000) == 30000

    ConfigLoader.reset()
    monkeypatch.setenv("UI_BROWSER", "webkit")
    monkeypatch.setenv("UI_TIMEOUTS_OVERLAY", "500")
    loader = ConfigLoader(config_path=config_path)
    assert loader.get("ui.browser") == "webkit"
    assert loader.get("ui.timeouts.overlay") == 500


def test_env_bool_is_coerced(monkeypatch, tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"ui": {"headless": True}}), encoding="utf-8")
    monkeypatch.setenv("UI_HEADLESS", "false")

    loader = ConfigLoader(config_path=config_path)
    assert loader.get("ui.headless") is False
    assert loader.get("ui.headless", True) is False


def test_config_path_from_environment(monkeypatch, tmp_path):
    config_path = tmp_path / "other.yaml"
    config_path.write_text(yaml.dump({"scenarios": {"league": {"team": "Arsenal"}}}), encoding="utf-8")
    monkeypatch.setenv("SITECHECKS_CONFIG", str(config_path))

    loader = ConfigLoader()
    assert loader.path == config_path
    assert loader.get_section("scenarios.league") == {"team": "Arsenal"}


def test_missing_file_uses_defaults(tmp_path):
    loader = ConfigLoader(config_path=tmp_path / "absent.yaml")
    assert loader.get("ui.browser", "chromium") == "chromium"
    assert loader.get_section("ui") == {}


def test_invalid_yaml_raises(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("ui: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ConfigLoader(config_path=config_path)


def test_reload_updates_values(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"ui": {"slow_mo": 0}}), encoding="utf-8")

    loader = ConfigLoader(config_path=config_path)
    assert loader.get("ui.slow_mo") == 0

    config_path.write_text(yaml.dump({"ui": {"slow_mo": 250}}), encoding="utf-8")
    loader.reload()
    assert loader.get("ui.slow_mo") == 250


def test_repository_config_declares_scenarios():
    loader = ConfigLoader()
    assert loader.get("scenarios.league.team") == "Liverpool"
    assert str(loader.get("scenarios.league.expected_position")) == "1"
    assert loader.get("scenarios.search.expected_subject") == "artificial intelligence"
