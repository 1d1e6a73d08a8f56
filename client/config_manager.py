"""
Configuration manager for client key bindings.
"""

import json
import logging
from pathlib import Path
from typing import Any

import pygame

from core.constants import CLIENT_CONFIG_FILE

logger = logging.getLogger(__name__)

DEFAULT_KEY_BINDINGS: dict[str, list[int]] = {
    "reload": [pygame.K_r, pygame.K_F5],
    "simulate_error": [pygame.K_e],
    "quit": [pygame.K_ESCAPE],
}


class ConfigManager:
    """Manages client key bindings, read from a JSON file merged with defaults."""

    def __init__(self, config_file: Path = CLIENT_CONFIG_FILE) -> None:
        self.config_file = config_file
        self.config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file or create default."""
        default_config = {"key_bindings": {k: list(v) for k, v in DEFAULT_KEY_BINDINGS.items()}}

        if self.config_file.exists():
            try:
                with open(self.config_file) as f:
                    loaded_config = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning(f"Ignoring unreadable {self.config_file}: {e}")
                return default_config

            if not isinstance(loaded_config, dict):
                logger.warning(f"Ignoring malformed {self.config_file}: expected an object")
                return default_config

            bindings = loaded_config.get("key_bindings", {})
            if not self._valid_bindings(bindings):
                logger.warning(f"Ignoring malformed key bindings in {self.config_file}")
                return default_config

            # Merge with defaults to ensure all actions exist
            for action, keys in default_config["key_bindings"].items():
                bindings.setdefault(action, keys)
            loaded_config["key_bindings"] = bindings
            return loaded_config

        return default_config

    @staticmethod
    def _valid_bindings(bindings: Any) -> bool:
        """Bindings must map each action to a list of integer key codes."""
        if not isinstance(bindings, dict):
            return False
        return all(
            isinstance(keys, list) and all(isinstance(key, int) for key in keys)
            for keys in bindings.values()
        )

    def get_keys_for_action(self, action: str) -> list[int]:
        """Get list of keys bound to an action."""
        return self.config["key_bindings"].get(action, [])

    def is_key_for_action(self, key: int, action: str) -> bool:
        """Check if a key is bound to a specific action."""
        return key in self.get_keys_for_action(action)

    def reload_config(self) -> None:
        """Reload configuration from file."""
        self.config = self._load_config()
