import argparse
import json

import pygame
import pytest
from pydantic import ValidationError

from client.config_manager import DEFAULT_KEY_BINDINGS, ConfigManager
from core.config import Settings
from main import build_settings, main


class TestConfigManager:
    def test_defaults_without_file(self, tmp_path):
        config = ConfigManager(tmp_path / "missing.json")

        assert config.get_keys_for_action("reload") == DEFAULT_KEY_BINDINGS["reload"]
        assert config.is_key_for_action(pygame.K_e, "simulate_error")
        assert not config.is_key_for_action(pygame.K_e, "reload")
        assert config.get_keys_for_action("unknown") == []

    def test_file_overrides_and_merges_defaults(self, tmp_path):
        path = tmp_path / "client_config.json"
        path.write_text(json.dumps({"key_bindings": {"reload": [pygame.K_SPACE]}}))

        config = ConfigManager(path)

        assert config.get_keys_for_action("reload") == [pygame.K_SPACE]
        assert config.get_keys_for_action("quit") == DEFAULT_KEY_BINDINGS["quit"]

    def test_unreadable_file_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "client_config.json"
        path.write_text("{not json")

        config = ConfigManager(path)

        assert config.get_keys_for_action("reload") == DEFAULT_KEY_BINDINGS["reload"]

    @pytest.mark.parametrize(
        "content",
        [
            [1, 2],
            {"key_bindings": [114]},
            {"key_bindings": {"reload": 114}},
            {"key_bindings": {"reload": ["r"]}},
        ],
    )
    def test_malformed_bindings_fall_back_to_defaults(self, tmp_path, content):
        path = tmp_path / "client_config.json"
        path.write_text(json.dumps(content))

        config = ConfigManager(path)

        assert config.get_keys_for_action("reload") == DEFAULT_KEY_BINDINGS["reload"]
        assert config.is_key_for_action(pygame.K_r, "reload")

    def test_reload_config_reads_the_file_again(self, tmp_path):
        path = tmp_path / "client_config.json"
        config = ConfigManager(path)
        path.write_text(json.dumps({"key_bindings": {"quit": [pygame.K_q]}}))

        config.reload_config()

        assert config.is_key_for_action(pygame.K_q, "quit")


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.fetch_delay_unit == 1.0
        assert settings.fetch_failure_rate == 0.2
        assert settings.fetch_seed is None

    @pytest.mark.parametrize(
        "overrides",
        [{"fetch_failure_rate": 1.5}, {"fetch_delay_unit": 0}, {"client_fps": 0}],
    )
    def test_rejects_invalid_values(self, overrides):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **overrides)

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("FETCH_SEED", "7")

        assert Settings(_env_file=None).fetch_seed == 7


class TestCli:
    def test_build_settings_applies_flags(self):
        args = argparse.Namespace(debug=True, seed=3, failure_rate=0.0, delay_unit=0.5)

        settings = build_settings(args)

        assert settings.debug is True
        assert settings.fetch_seed == 3
        assert settings.fetch_failure_rate == 0.0
        assert settings.fetch_delay_unit == 0.5

    def test_invalid_flag_exits(self):
        with pytest.raises(SystemExit):
            main(["--failure-rate", "2"])
