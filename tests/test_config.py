"""Tests for ship_captain_crew/config: Settings and logging setup."""

import logging

import pytest

from ship_captain_crew.config.settings import Settings, configure_logging, get_settings
from ship_captain_crew.engine.base import InvalidConfiguration


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for Settings and get_settings."""

    def test_defaults(self, monkeypatch):
        for name in ("SCC_DEFAULT_PLAYERS", "SCC_DEFAULT_DICE", "SCC_MAX_ROLLS", "SCC_RANDOM_SEED"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.default_players == 2
        assert settings.default_dice == 5
        assert settings.max_rolls == 3
        assert settings.random_seed is None
        assert settings.log_level == "INFO"

    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("SCC_MAX_ROLLS", "4")
        monkeypatch.setenv("SCC_DEFAULT_PLAYERS", "5")
        monkeypatch.setenv("SCC_RANDOM_SEED", "17")
        settings = Settings(_env_file=None)
        assert settings.max_rolls == 4
        assert settings.default_players == 5
        assert settings.random_seed == 17

    def test_to_game_config(self):
        config = Settings(_env_file=None, default_players=3, max_rolls=2).to_game_config()
        assert (config.num_players, config.num_dice, config.max_rolls) == (3, 5, 2)

    def test_to_game_config_override(self):
        config = Settings(_env_file=None).to_game_config(num_players=6)
        assert config.num_players == 6

    def test_to_game_config_invalid(self):
        with pytest.raises(InvalidConfiguration):
            Settings(_env_file=None).to_game_config(num_players=1)

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_applies_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        configure_logging(Settings(_env_file=None, log_level="warning"))
        assert calls["level"] == "WARNING"

    def test_debug_overrides_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        configure_logging(Settings(_env_file=None, debug=True, log_level="ERROR"))
        assert calls["level"] == logging.DEBUG
