"""Configuration management for the stress item module.

This module provides the configuration dataclass and a manager that
persists it as a JSON file the host (or an operator) can edit.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Callable, Optional
import json
import logging
import os

logger = logging.getLogger(__name__)

# Environment variable pointing at the JSON config file
CONFIG_ENV_VAR = "STRESS_MODULE_CONFIG"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class Config:
    """
    Module configuration.

    All fields have sensible defaults - the module works without any
    configuration file.
    """

    # File checked by the stress.file item
    sentinel_path: str = "/tmp/stress_file"

    # Level applied to the "stress_module" logger on init()
    log_level: str = "WARNING"

    def is_valid(self) -> tuple[bool, str]:
        """
        Check if config can be used.

        Returns:
            Tuple of (is_valid, error_message). If valid, error_message is empty string.

        Examples:
            >>> Config().is_valid()
            (True, '')

            >>> Config(log_level="LOUD").is_valid()
            (False, 'Unknown log level: LOUD')
        """
        if not self.sentinel_path:
            return False, "Sentinel path must not be empty"
        if self.log_level.upper() not in _LOG_LEVELS:
            return False, f"Unknown log level: {self.log_level}"
        return True, ""

    def to_dict(self) -> dict:
        """Convert to dict for JSON storage."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """
        Create from dict, using defaults for missing keys.

        Keys that are not dataclass fields are ignored, so older or newer
        config files still load.

        Examples:
            >>> Config.from_dict({"sentinel_path": "/run/stress"})
            Config(sentinel_path='/run/stress', log_level='WARNING')
        """
        return cls(
            **{k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        )


class ConfigManager:
    """
    Manages configuration persistence.

    The config file is taken from the `path` argument, else from the
    STRESS_MODULE_CONFIG environment variable. With neither, load() returns
    defaults and save() is not possible.
    """

    def __init__(self, path: Optional[Path] = None):
        if path is None and os.environ.get(CONFIG_ENV_VAR):
            path = Path(os.environ[CONFIG_ENV_VAR])
        self._path = Path(path) if path is not None else None
        self._listeners: list[Callable[[Config], None]] = []

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def load(self) -> Config:
        """
        Load config, merging defaults with values from the file.

        A missing file means defaults. An unreadable or malformed file is
        logged and also falls back to defaults, so the host can still load
        the module.
        """
        if self._path is None or not self._path.exists():
            return Config()

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8")) or {}
        except (OSError, ValueError) as e:
            logger.warning("Could not read config %s, using defaults: %s", self._path, e)
            return Config()

        if not isinstance(raw, dict):
            logger.warning("Config %s is not a JSON object, using defaults", self._path)
            return Config()

        return Config.from_dict(raw)

    def save(self, config: Config) -> None:
        """
        Save config and notify listeners.

        Raises:
            RuntimeError: If the manager has no file path.
        """
        if self._path is None:
            raise RuntimeError(f"No config path set (use {CONFIG_ENV_VAR})")

        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
        for listener in self._listeners:
            listener(config)

    def on_change(self, callback: Callable[[Config], None]) -> None:
        """
        Register callback for config changes.

        Callback will be invoked after config is saved to disk.

        Examples:
            >>> manager = ConfigManager(Path("stress.json"))
            >>> manager.on_change(module.update_config)
        """
        self._listeners.append(callback)

    def get_default(self) -> Config:
        """Get default config (ignores the file)."""
        return Config()
