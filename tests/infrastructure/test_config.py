"""Tests for Settings.from_env."""

import logging
from pathlib import Path

import pytest

from shop.infrastructure.config import DEFAULT_SEED_PATH, Settings


class TestSettingsFromEnv:

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.seed_path == DEFAULT_SEED_PATH
        assert settings.log_level == "WARNING"
        assert settings.release_superseded_reservations is True

    def test_overrides(self):
        settings = Settings.from_env({
            "SHOP_SEED_PATH": "/tmp/catalog.json",
            "SHOP_LOG_LEVEL": "debug",
        })
        assert settings.seed_path == Path("/tmp/catalog.json")
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("raw", ["0", "false", "No", " off "])
    def test_release_superseded_can_be_disabled(self, raw):
        settings = Settings.from_env({"SHOP_RELEASE_SUPERSEDED": raw})
        assert settings.release_superseded_reservations is False

    def test_release_superseded_enabled_by_other_values(self):
        settings = Settings.from_env({"SHOP_RELEASE_SUPERSEDED": "1"})
        assert settings.release_superseded_reservations is True

    def test_unknown_log_level_falls_back_to_default(self, caplog):
        with caplog.at_level(logging.WARNING):
            settings = Settings.from_env({"SHOP_LOG_LEVEL": "verbose"})

        assert settings.log_level == "WARNING"
        assert "Ignoring unknown SHOP_LOG_LEVEL 'verbose'" in caplog.text
