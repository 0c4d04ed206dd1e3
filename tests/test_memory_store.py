"""Tests for the in-memory state store."""

from cache.memory import MemoryStateStore
from cache.store import StateStore


class RecordingStore(StateStore):
    """Store relying on the default sequential set_many."""

    def __init__(self):
        self.writes = []

    def get(self, key):
        return None

    def set(self, key, value):
        self.writes.append((key, value))


def test_memory_store_get_set():
    store = MemoryStateStore()

    assert store.get("lobby:r1") is None
    store.set("lobby:r1", "{}")
    store.set_many({"lobby:r1:status": "Creating", "lobby:r1:task": "t"})

    assert store.get("lobby:r1") == "{}"
    assert store.get("lobby:r1:status") == "Creating"
    assert sorted(store.keys()) == ["lobby:r1", "lobby:r1:status", "lobby:r1:task"]
    assert store.ping() is True


def test_default_set_many_writes_in_order():
    store = RecordingStore()

    store.set_many({"lobby:r1": "{}", "lobby:r1:status": "Creating"})

    assert store.writes == [("lobby:r1", "{}"), ("lobby:r1:status", "Creating")]
