"""
In-process state store.

Used for local runs without Redis and as the store in tests. State is
lost when the process exits.
"""

import logging
import threading
from typing import Dict, Optional

from .store import StateStore

logger = logging.getLogger(__name__)


class MemoryStateStore(StateStore):
    """Thread-safe dictionary store."""

    def __init__(self):
        self._data: Dict[str, str] = {}
        self._lock = threading.Lock()
        logger.info("Using in-memory state store")

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def set_many(self, values: Dict[str, str]) -> None:
        with self._lock:
            self._data.update(values)

    def keys(self):
        """Snapshot of stored keys."""
        with self._lock:
            return list(self._data)
