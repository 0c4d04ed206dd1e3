"""
Task launcher interface.

A launcher starts the remote process that hosts a lobby. Implementations
must be idempotent per reference id: launching twice for the same id
returns the same handle instead of starting a second process.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional


class TaskLauncher(ABC):
    """Starts hosting processes for lobbies."""

    @abstractmethod
    def launch(self, reference_id: str, parameters: Optional[Dict[str, str]] = None) -> str:
        """
        Start the hosting process for a lobby.

        Args:
            reference_id: Lobby reference identity, also the idempotency key
            parameters: Extra environment values passed to the hosting process

        Returns:
            Opaque task handle

        Raises:
            LaunchError: If the process could not be started
        """
