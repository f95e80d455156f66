import time
from pathlib import Path

import pytest

from monsters.config import Config
from monsters.database import MonsterDatabase


@pytest.fixture
def temp_config(tmp_path):
    """
    Provide a fresh Config backed by a unique file.

    This fixture GUARANTEES a clean config or fails loudly.
    """
    config_path = tmp_path / f"config_{id(tmp_path)}_{time.time_ns()}.json"
    config = Config(config_file=config_path)

    assert config.data == Config.DEFAULT_CONFIG, \
        f"FIXTURE CONTAMINATED! data={config.data}, file={config.config_file}"

    return config


@pytest.fixture
def temp_db(tmp_path):
    db_path = tmp_path / f"db_{id(tmp_path)}_{time.time_ns()}.db"
    db = MonsterDatabase(db_path=db_path)
    yield db
    db.close()


def pytest_collection_modifyitems(config, items):
    """Assign tier markers based on test location."""
    for item in items:
        path = Path(str(item.fspath)).as_posix()

        if "/tests/integration/" in path:
            item.add_marker(pytest.mark.integration)
        elif "/tests/unit/" in path:
            item.add_marker(pytest.mark.unit)
