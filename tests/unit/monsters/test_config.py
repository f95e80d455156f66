from __future__ import annotations

"""
Unit tests for monsters.config module
"""

import json
import uuid
from pathlib import Path

import pytest

from monsters.config import Config
from monsters.database import SCHEMA_VERSION, default_db_path

pytestmark = pytest.mark.unit


# -------------------------
# Helper
# -------------------------

def get_unique_config_path(tmp_path):
    """Generate a unique config file path to prevent test interference"""
    return tmp_path / f"config_{uuid.uuid4().hex}.json"


# -------------------------
# Initialization Tests
# -------------------------

class TestConfigInitialization:
    def test_creates_config_file_on_save(self, tmp_path):
        config_file = get_unique_config_path(tmp_path)
        config = Config(config_file)
        config.save()

        assert config_file.exists()

    def test_loads_defaults_for_new_config(self, temp_config):
        assert temp_config.db_path == default_db_path()
        assert temp_config.schema_version == SCHEMA_VERSION
        assert temp_config.debug is False

    def test_defaults_are_not_shared(self, tmp_path):
        cfg1 = Config(get_unique_config_path(tmp_path))
        cfg1.data["database"]["path"] = "changed.db"

        cfg2 = Config(get_unique_config_path(tmp_path))

        assert cfg2.data["database"]["path"] == ""
        assert Config.DEFAULT_CONFIG["database"]["path"] == ""

    def test_loads_existing_config(self, tmp_path):
        config_file = get_unique_config_path(tmp_path)

        cfg1 = Config(config_file)
        cfg1.db_path = tmp_path / "custom.db"
        cfg1.debug = True

        cfg2 = Config(config_file)
        assert cfg2.db_path == tmp_path / "custom.db"
        assert cfg2.debug is True

    def test_merges_partial_file_with_defaults(self, tmp_path):
        config_file = get_unique_config_path(tmp_path)
        config_file.write_text(json.dumps({"database": {"path": "x.db"}}), encoding="utf-8")

        cfg = Config(config_file)

        assert cfg.db_path == Path("x.db")
        assert cfg.schema_version == SCHEMA_VERSION
        assert cfg.debug is False

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path):
        config_file = get_unique_config_path(tmp_path)
        config_file.write_text("{not json", encoding="utf-8")

        cfg = Config(config_file)

        assert cfg.data == Config.DEFAULT_CONFIG

    def test_non_object_section_falls_back_to_default_section(self, tmp_path):
        config_file = get_unique_config_path(tmp_path)
        config_file.write_text(
            json.dumps({"database": "x", "logging": {"debug": True}}), encoding="utf-8"
        )

        cfg = Config(config_file)

        assert cfg.db_path == default_db_path()
        assert cfg.schema_version == SCHEMA_VERSION
        assert cfg.debug is True

    def test_non_object_file_falls_back_to_defaults(self, tmp_path):
        config_file = get_unique_config_path(tmp_path)
        config_file.write_text("[1, 2, 3]", encoding="utf-8")

        cfg = Config(config_file)

        assert cfg.data == Config.DEFAULT_CONFIG


# -------------------------
# Schema version
# -------------------------

class TestSchemaVersion:
    def test_set_schema_version_persists(self, tmp_path):
        config_file = get_unique_config_path(tmp_path)
        Config(config_file).schema_version = 3

        assert Config(config_file).schema_version == 3

    def test_rejects_version_below_one(self, temp_config):
        with pytest.raises(ValueError):
            temp_config.schema_version = 0

    def test_invalid_stored_version_uses_default(self, tmp_path):
        config_file = get_unique_config_path(tmp_path)
        config_file.write_text(
            json.dumps({"database": {"schema_version": "abc"}}), encoding="utf-8"
        )

        assert Config(config_file).schema_version == SCHEMA_VERSION

    def test_clearing_db_path_restores_default(self, temp_config, tmp_path):
        temp_config.db_path = tmp_path / "custom.db"
        temp_config.db_path = None

        assert temp_config.db_path == default_db_path()
