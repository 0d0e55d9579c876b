import shutil
from pathlib import Path

import pytest

from urb_companion.storage import Storage

TEST_DATA_DIR = Path("data-tests")


@pytest.fixture(autouse=True)
def clean_test_data():
    """Wipe data-tests/ before every test."""
    if TEST_DATA_DIR.exists():
        shutil.rmtree(TEST_DATA_DIR)
    TEST_DATA_DIR.mkdir(parents=True)
    yield
    # leave data-tests around after tests for inspection; CI can ignore it


@pytest.fixture
def storage() -> Storage:
    return Storage(TEST_DATA_DIR)


class ScriptedRandom:
    """randint() source that returns the given values in order."""

    def __init__(self, *values: int) -> None:
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        value = self._values.pop(0)
        assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
        return value


@pytest.fixture
def scripted():
    """Build a ScriptedRandom: scripted(10, 4, 3) rolls 10, then 4, then 3."""
    return ScriptedRandom


@pytest.fixture
def data_dir() -> Path:
    return TEST_DATA_DIR
