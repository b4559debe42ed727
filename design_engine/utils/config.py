"""
Configuration for the design engine.
"""

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "viewport": {
        "width": 1200,
        "height": 800
    },
    "network": {
        "timeout": 30,
        "retries": 3,
        "user_agent": "DesignEngine/1.0 (+https://github.com/design-engine/design-engine)"
    },
    "logging": {
        "console_level": "WARNING",
        "file": None
    }
}


class Config:
    """
    Configuration store backed by an optional JSON file.

    Values in the file are merged over ``DEFAULT_CONFIG``; keys can be
    addressed with dots, e.g. ``viewport.width``.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration.

        Args:
            config_path: Path to a JSON config file. Without one the
                defaults are used and nothing is read from disk.
        """
        self.config_path = config_path
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._lock = threading.Lock()

        if config_path:
            self.load()

        logger.debug(f"Configuration initialized (config_path: {config_path})")

    def load(self) -> None:
        """Load configuration from file, keeping defaults for missing keys."""
        if not self.config_path or not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Error loading configuration from {self.config_path}: {e}")
            return

        if not isinstance(loaded, dict):
            logger.warning(f"Ignoring configuration in {self.config_path}: top level is not an object")
            return

        with self._lock:
            self.config = _merge(copy.deepcopy(DEFAULT_CONFIG), loaded)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def save(self) -> None:
        """Save configuration to file."""
        if not self.config_path:
            raise ValueError("No config_path set")

        with self._lock:
            config_copy = copy.deepcopy(self.config)

        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(config_copy, f, indent=4)

        logger.debug(f"Configuration saved to {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key, nested with dots (``network.timeout``)
            default: Value returned when the key does not exist

        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            node: Any = self.config
            for part in key.split('.'):
                if not isinstance(node, dict) or part not in node:
                    return default
                node = node[part]
            return node

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value, creating intermediate sections.

        Args:
            key: Configuration key, nested with dots
            value: Configuration value
        """
        with self._lock:
            parts = key.split('.')
            node = self.config
            for part in parts[:-1]:
                if not isinstance(node.get(part), dict):
                    node[part] = {}
                node = node[part]
            node[parts[-1]] = value

    def get_viewport(self) -> Dict[str, int]:
        """Viewport from ``viewport.width``/``viewport.height``."""
        return {
            "width": int(self.get("viewport.width", DEFAULT_CONFIG["viewport"]["width"])),
            "height": int(self.get("viewport.height", DEFAULT_CONFIG["viewport"]["height"])),
        }

    def get_all(self) -> Dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self.config)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base
