"""Tests for monsters/models.py and monsters/images.py"""
from __future__ import annotations

import random
import sqlite3
from dataclasses import FrozenInstanceError

import pytest
from pydantic import ValidationError

from monsters.images import IMAGE_COUNT, IMAGE_PREFIX, random_image_name
from monsters.models import Monster, MonsterInput

pytestmark = pytest.mark.unit

VALID_IMAGE_NAMES = {f"{IMAGE_PREFIX}{n}" for n in range(1, IMAGE_COUNT + 1)}


# -------------------------
# MonsterInput
# -------------------------

class TestMonsterInput:
    def test_accepts_valid_fields(self):
        payload = MonsterInput(name="Grok", description="A rock monster", scariness=7)
        assert payload.scariness == 7

    @pytest.mark.parametrize(
        "fields",
        [
            {"name": None, "description": "d", "scariness": 1},
            {"name": "n", "description": None, "scariness": 1},
            {"name": "n", "description": "d", "scariness": "7"},
            {"name": "n", "description": "d", "scariness": 7.5},
            {"name": "n", "description": "d", "scariness": True},
            {"name": 5, "description": "d", "scariness": 1},
        ],
    )
    def test_rejects_invalid_fields(self, fields):
        with pytest.raises(ValidationError):
            MonsterInput(**fields)


# -------------------------
# Monster
# -------------------------

class TestMonster:
    def test_from_row(self):
        conn = sqlite3.connect(":memory:")
        conn.row_factory = sqlite3.Row
        row = conn.execute(
            "SELECT 3 AS ID, 'Grok' AS NAME, 'A rock monster' AS DESCRIPTION, "
            "7 AS SCARINESS, 'monster_4' AS IMAGE, NULL AS VOTES, 2 AS STARS"
        ).fetchone()
        conn.close()

        monster = Monster.from_row(row)

        assert monster == Monster(3, "Grok", "A rock monster", 7, "monster_4", 0, 2)

    def test_is_frozen(self):
        monster = Monster(1, "Grok", "A rock monster", 7, "monster_1")
        with pytest.raises(FrozenInstanceError):
            monster.name = "Grak"


# -------------------------
# Image names
# -------------------------

class TestImageNames:
    def test_random_image_name_in_range(self):
        rng = random.Random(0)
        names = {random_image_name(rng) for _ in range(2000)}

        assert all(n in VALID_IMAGE_NAMES for n in names)
        assert len(names) == IMAGE_COUNT

    def test_random_image_name_without_rng(self):
        assert random_image_name() in VALID_IMAGE_NAMES

