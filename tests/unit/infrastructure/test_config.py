"""Unit tests for environment configuration helpers."""

import pytest

from infrastructure.config import (
    get_app_version,
    get_log_level,
    get_macro_strategy,
    load_env_file,
)


class TestConfigGetters:
    """Test env var getters and their defaults."""

    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch):
        for key in ("LOG_LEVEL", "MACRO_STRATEGY", "APP_VERSION"):
            monkeypatch.delenv(key, raising=False)

    def test_defaults(self):
        assert get_log_level() == "INFO"
        assert get_macro_strategy() == "weight_anchored"
        assert get_app_version() == "0.0.0-dev"

    def test_log_level_upper_cased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert get_log_level() == "DEBUG"

    def test_macro_strategy_normalized(self, monkeypatch):
        monkeypatch.setenv("MACRO_STRATEGY", "  Percentage_Split ")

        assert get_macro_strategy() == "percentage_split"

    def test_app_version(self, monkeypatch):
        monkeypatch.setenv("APP_VERSION", "1.4.2")

        assert get_app_version() == "1.4.2"


class TestLoadEnvFile:
    """Test .env loading."""

    def test_missing_file(self, tmp_path):
        assert load_env_file(tmp_path / "missing.env") is False

    def test_loads_values(self, tmp_path, monkeypatch):
        # registered first so monkeypatch restores the prior value on teardown
        monkeypatch.setenv("MACRO_STRATEGY", "unset")
        monkeypatch.delenv("MACRO_STRATEGY")
        env_file = tmp_path / ".env"
        env_file.write_text("MACRO_STRATEGY=percentage_split\n")

        assert load_env_file(env_file) is True
        assert get_macro_strategy() == "percentage_split"

    def test_does_not_override_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=DEBUG\n")

        load_env_file(env_file)

        assert get_log_level() == "WARNING"
