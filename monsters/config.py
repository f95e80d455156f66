"""
Configuration management for the monster store.
Handles the database location, declared schema version and logging settings.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from monsters.database.base import default_db_path
from monsters.database.schema import SCHEMA_VERSION

logger = logging.getLogger(__name__)


class Config:
    """
    Application configuration with JSON persistence.

    The backing store is a JSON file on disk; keys missing from the file
    fall back to DEFAULT_CONFIG.
    """

    # NOTE: This structure is treated as immutable. Always use
    # _default_config_deepcopy() when you need a fresh copy of defaults.
    DEFAULT_CONFIG: Dict[str, Any] = {
        "database": {
            # Empty = ~/.monster_store/monster.db
            "path": "",
            # Raising this drops and recreates the monster table on next open
            "schema_version": SCHEMA_VERSION,
        },
        "logging": {
            "debug": False,
        },
    }

    def __init__(self, config_file: Optional[Path] = None) -> None:
        """
        Initialize configuration.

        Args:
            config_file: Optional path to config JSON file. When omitted,
                         ~/.monster_store/config.json is used.
        """
        self.config_file: Path = self._resolve_config_path(config_file)
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        self.data: Dict[str, Any] = self._load()
        logger.info(f"Config loaded from {self.config_file}")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_config_path(config_file: Optional[Path]) -> Path:
        if config_file is not None:
            return Path(config_file)
        return Path.home() / ".monster_store" / "config.json"

    def _load(self) -> Dict[str, Any]:
        """Load configuration from JSON file, merging with defaults."""
        if not self.config_file.exists():
            logger.info("No config file found, using defaults")
            return self._default_config_deepcopy()

        try:
            with self.config_file.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error(f"Failed to load config: {exc}. Using defaults.")
            return self._default_config_deepcopy()

        if not isinstance(raw, dict):
            logger.error("Config file does not hold a JSON object. Using defaults.")
            return self._default_config_deepcopy()

        return self._merge_with_defaults(raw)

    @classmethod
    def _default_config_deepcopy(cls) -> Dict[str, Any]:
        return copy.deepcopy(cls.DEFAULT_CONFIG)

    def _merge_with_defaults(self, user_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge user config with defaults to handle new keys.

        Nested sections are merged key by key so a file that only sets
        ``database.path`` keeps the default schema version.
        """
        merged = self._default_config_deepcopy()

        for key, value in user_config.items():
            if key in merged and isinstance(merged[key], dict):
                if isinstance(value, dict):
                    merged[key].update(value)
                else:
                    logger.error(f"Config section '{key}' is not an object. Using defaults.")
            else:
                merged[key] = value

        return merged

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self) -> None:
        """Persist the current configuration to the config file."""
        try:
            with self.config_file.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=2, ensure_ascii=False)
            logger.info("Configuration saved")
        except OSError as exc:
            logger.error(f"Failed to save config: {exc}")

    # ------------------------------------------------------------------
    # Database
    # ------------------------------------------------------------------

    @property
    def db_path(self) -> Path:
        raw = self.data["database"].get("path") or ""
        return Path(raw).expanduser() if raw else default_db_path()

    @db_path.setter
    def db_path(self, value: Optional[Path]) -> None:
        self.data["database"]["path"] = str(value) if value else ""
        self.save()

    @property
    def schema_version(self) -> int:
        try:
            version = int(self.data["database"].get("schema_version", SCHEMA_VERSION))
        except (TypeError, ValueError):
            logger.warning("Invalid schema_version in config, using default")
            return SCHEMA_VERSION
        return max(1, version)

    @schema_version.setter
    def schema_version(self, value: int) -> None:
        if value < 1:
            raise ValueError(f"schema_version must be >= 1, was {value}")
        self.data["database"]["schema_version"] = int(value)
        self.save()

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    @property
    def debug(self) -> bool:
        return bool(self.data["logging"].get("debug", False))

    @debug.setter
    def debug(self, value: bool) -> None:
        self.data["logging"]["debug"] = bool(value)
        self.save()
