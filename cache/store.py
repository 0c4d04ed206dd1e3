"""
State store interface for lobby data.

The lifecycle manager only needs get/set on string keys. Back-ends that
can write several keys atomically override ``set_many``.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional


class StateStore(ABC):
    """Key-value store consumed by the lobby lifecycle manager."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read a key.

        Returns:
            The stored value, or None if the key is absent

        Raises:
            StoreError: If the back-end cannot be reached
        """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Write a key.

        Raises:
            StoreError: If the write was not acknowledged
        """

    def set_many(self, values: Dict[str, str]) -> None:
        """
        Write several keys, in insertion order.

        This default is not atomic: a failure part way through leaves the
        earlier keys written.
        """
        for key, value in values.items():
            self.set(key, value)

    def ping(self) -> bool:
        """Check if the store is reachable."""
        return True
