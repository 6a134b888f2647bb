"""
Configuration Manager - Load and persist display and server defaults
"""

from __future__ import annotations

import copy
import json
import os
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from linecmp.models.display import DEFAULT_MAX_LINES, CompareMode, DisplayConfig

DEFAULT_CONFIG_FILE = Path("~/.linecmp/config.json")


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None

    def __init__(self, config_file: str | os.PathLike | None = None):
        self._config_file = Path(config_file or DEFAULT_CONFIG_FILE).expanduser()
        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def set_instance(cls, instance: "ConfigManager | None"):
        """Replace the singleton (None resets it)"""
        cls._instance = instance

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, merged over the defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"[ConfigManager] Error loading config {self._config_file}: {e}", file=sys.stderr)
            return config

        if not isinstance(stored, dict):
            print(f"[ConfigManager] Ignoring config {self._config_file}: top level is not an object", file=sys.stderr)
            return config

        for key, value in stored.items():
            default = config.get(key)
            if isinstance(default, dict) and not isinstance(value, dict):
                print(
                    f"[ConfigManager] Ignoring section '{key}' in {self._config_file}: expected an object",
                    file=sys.stderr,
                )
            elif isinstance(value, dict) and isinstance(default, dict):
                config[key] = {**default, **value}
            else:
                config[key] = value
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "display": {"max_lines": DEFAULT_MAX_LINES, "show_full": False},
            "server": {"host": "127.0.0.1", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return copy.deepcopy(self._config)

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        self._config.update(config)

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)

    def display_defaults(self, mode: CompareMode = CompareMode.COMMON, **overrides: Any) -> DisplayConfig:
        """
        Build a DisplayConfig from the stored display section.

        Keyword overrides (show_full, max_lines) win over stored values. Stored
        values that fail validation are dropped with a warning and the built-in
        default applies to that field instead.
        """
        display = self._config.get("display", {})
        stored = {key: display[key] for key in ("show_full", "max_lines") if key in display}

        try:
            return DisplayConfig(mode=mode, **{**stored, **overrides})
        except ValidationError as e:
            invalid = {error["loc"][0] for error in e.errors() if error["loc"]}
            print(
                f"[ConfigManager] Ignoring invalid display settings in {self._config_file}: "
                f"{', '.join(sorted(map(str, invalid)))}",
                file=sys.stderr,
            )

        stored = {key: value for key, value in stored.items() if key not in invalid}
        return DisplayConfig(mode=mode, **{**stored, **overrides})
