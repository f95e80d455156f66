"""
Tests for monsters/database/repositories/monster_repository.py

Exercises the Result-returning API that distinguishes missing rows from
failed writes.
"""
import pytest

from monsters.errors import StoreError
from monsters.models import MonsterInput
from monsters.result import Err, Ok

pytestmark = pytest.mark.unit


def _payload(name="Grok", description="A rock monster", scariness=7):
    return MonsterInput(name=name, description=description, scariness=scariness)


@pytest.fixture
def repo(temp_db):
    return temp_db.monsters


class TestInsert:
    """Tests for insert method."""

    def test_insert_returns_ok_with_id(self, repo):
        result = repo.insert(_payload())

        assert isinstance(result, Ok)
        assert result.unwrap() == 1

    def test_insert_increments_ids(self, repo):
        id1 = repo.insert(_payload("A")).unwrap()
        id2 = repo.insert(_payload("B")).unwrap()

        assert id2 > id1

    def test_insert_failure_is_write_failed(self, repo, temp_db):
        temp_db.conn.execute("DROP TABLE monster")
        temp_db.conn.commit()

        result = repo.insert(_payload())

        assert result == Err(StoreError.WRITE_FAILED)


class TestUpdate:
    """Tests for update method."""

    def test_update_existing(self, repo):
        monster_id = repo.insert(_payload()).unwrap()

        result = repo.update(monster_id, _payload("Grak", "A bigger rock monster", 9))

        assert result.is_ok()
        assert repo.get(monster_id).unwrap().name == "Grak"

    def test_update_missing_is_not_found(self, repo):
        assert repo.update(123, _payload()) == Err(StoreError.NOT_FOUND)

    def test_update_failure_is_write_failed(self, repo, temp_db):
        monster_id = repo.insert(_payload()).unwrap()
        temp_db.conn.execute("DROP TABLE monster")
        temp_db.conn.commit()

        assert repo.update(monster_id, _payload()) == Err(StoreError.WRITE_FAILED)


class TestDelete:
    """Tests for delete method."""

    def test_delete_existing(self, repo):
        monster_id = repo.insert(_payload()).unwrap()

        assert repo.delete(monster_id).is_ok()
        assert repo.list_all() == []

    def test_delete_missing_is_not_found(self, repo):
        assert repo.delete(123) == Err(StoreError.NOT_FOUND)

    def test_delete_twice(self, repo):
        monster_id = repo.insert(_payload()).unwrap()

        assert repo.delete(monster_id).is_ok()
        assert repo.delete(monster_id).error is StoreError.NOT_FOUND


class TestRead:
    """Tests for get and list_all methods."""

    def test_get_missing_is_not_found(self, repo):
        assert repo.get(5) == Err(StoreError.NOT_FOUND)

    def test_get_maps_all_columns(self, repo):
        monster_id = repo.insert(_payload()).unwrap()

        monster = repo.get(monster_id).unwrap()

        assert monster.to_dict() == {
            "id": monster_id,
            "name": "Grok",
            "description": "A rock monster",
            "scariness": 7,
            "image_name": monster.image_name,
            "votes": 0,
            "stars": 0,
        }

    def test_list_all_in_storage_order(self, repo):
        for name in ("A", "B", "C"):
            repo.insert(_payload(name))

        assert [m.name for m in repo.list_all()] == ["A", "B", "C"]

