"""Tests for configuration loading"""
from netrange.config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_DISPLAY,
    NetRangeConfig,
    get_config,
    set_config,
)


class TestFromEnv:
    """NetRangeConfig.from_env"""

    def test_defaults(self, monkeypatch):
        for name in ("NETRANGE_LOG_LEVEL", "NETRANGE_LOG_FILE", "NETRANGE_MAX_DISPLAY"):
            monkeypatch.delenv(name, raising=False)

        config = NetRangeConfig.from_env()

        assert config.log_level == DEFAULT_LOG_LEVEL
        assert config.log_file is None
        assert config.max_display == DEFAULT_MAX_DISPLAY

    def test_values(self, monkeypatch):
        monkeypatch.setenv("NETRANGE_LOG_LEVEL", "debug")
        monkeypatch.setenv("NETRANGE_LOG_FILE", "/tmp/netrange.log")
        monkeypatch.setenv("NETRANGE_MAX_DISPLAY", "10")

        config = NetRangeConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.log_file == "/tmp/netrange.log"
        assert config.max_display == 10

    def test_bad_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("NETRANGE_LOG_LEVEL", "LOUD")
        monkeypatch.setenv("NETRANGE_MAX_DISPLAY", "lots")

        config = NetRangeConfig.from_env()

        assert config.log_level == DEFAULT_LOG_LEVEL
        assert config.max_display == DEFAULT_MAX_DISPLAY

    def test_non_positive_display_falls_back(self, monkeypatch):
        monkeypatch.setenv("NETRANGE_MAX_DISPLAY", "0")

        assert NetRangeConfig.from_env().max_display == DEFAULT_MAX_DISPLAY


class TestGlobalConfig:
    """get_config / set_config"""

    def test_set_and_get(self):
        config = NetRangeConfig(max_display=5)
        set_config(config)

        assert get_config() is config

    def test_reload_from_env(self, monkeypatch):
        monkeypatch.setenv("NETRANGE_MAX_DISPLAY", "7")
        set_config(None)

        config = get_config()

        assert config.max_display == 7
        assert get_config() is config
