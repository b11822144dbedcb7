import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from phraser.exceptions import StorageError
from phraser.services import ItemRepository, MemoryStore, ScoringTracker


class CountingStore(MemoryStore):
    """Memory store that counts raw writes."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.writes = 0

    def _write(self, key, payload):
        self.writes += 1
        super()._write(key, payload)


class BrokenWriteStore(MemoryStore):
    """Memory store whose writes always fail."""

    def _write(self, key, payload):
        raise StorageError("disk full")


class SequenceRandom:
    """Deterministic uniform source that replays fixed values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def __call__(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def counting_store():
    return CountingStore()


@pytest.fixture
def repository(memory_store):
    return ItemRepository(memory_store)


@pytest.fixture
def tracker(repository):
    return ScoringTracker(repository)
