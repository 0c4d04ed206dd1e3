"""
Pytest fixtures for tests.

Provides in-memory fakes for the state store and task launcher so the
lifecycle manager and the API can be exercised without Redis or AWS.
"""

import threading

import pytest

from app import create_app
from cache.memory import MemoryStateStore
from launcher.base import TaskLauncher
from lobby import LobbyManager
from lobby.errors import StoreError


class FlakyStore(MemoryStateStore):
    """Memory store that fails reads or writes on selected keys."""

    def __init__(self):
        super().__init__()
        self.fail_get = set()
        self.fail_set = set()

    def get(self, key):
        if key in self.fail_get:
            raise StoreError(f"read failed for {key}")
        return super().get(key)

    def set(self, key, value):
        if key in self.fail_set:
            raise StoreError(f"write failed for {key}")
        super().set(key, value)

    def set_many(self, values):
        failing = [key for key in values if key in self.fail_set]
        if failing:
            raise StoreError(f"write failed for {failing[0]}")
        super().set_many(values)


class FakeLauncher(TaskLauncher):
    """
    Launcher that records every call and hands out one handle per identity.

    Set ``error`` to make launches fail, ``before_launch`` to run a hook
    inside the call, and ``release`` to hold the first call until the event
    is set.
    """

    def __init__(self, handle=None):
        self.handle = handle
        self.calls = []
        self.handles = {}
        self.error = None
        self.before_launch = None
        self.release = None
        self.entered = threading.Event()
        self._lock = threading.Lock()

    def launch(self, reference_id, parameters=None):
        with self._lock:
            self.calls.append((reference_id, parameters))
            first = len(self.calls) == 1

        if first and self.release is not None:
            self.entered.set()
            self.release.wait(timeout=5)

        if self.before_launch:
            self.before_launch()
        if self.error:
            raise self.error

        with self._lock:
            if reference_id not in self.handles:
                self.handles[reference_id] = self.handle or f"task-{len(self.handles) + 1}"
            return self.handles[reference_id]

    def distinct_launches(self, reference_id):
        return 1 if reference_id in self.handles else 0


@pytest.fixture
def store():
    """Fresh flaky memory store with no failures configured."""
    return FlakyStore()


@pytest.fixture
def launcher():
    """Fake launcher that always succeeds."""
    return FakeLauncher()


@pytest.fixture
def manager(store, launcher):
    """Lobby manager wired to the fakes."""
    return LobbyManager(store, launcher)


@pytest.fixture
def client(manager):
    """Flask test client serving the fake-backed manager."""
    app = create_app(manager)
    app.config['TESTING'] = True
    return app.test_client()
