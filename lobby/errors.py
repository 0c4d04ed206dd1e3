"""
Lobby lifecycle errors.

Adapters translate back-end exceptions into these so the lifecycle
manager never has to know which store or launcher it is talking to.
"""


class LobbyError(Exception):
    """Base exception for lobby lifecycle errors."""
    pass


class ValidationError(LobbyError):
    """Raised when a creation request is malformed, before any side effect."""
    pass


class StoreError(LobbyError):
    """Raised when the state store cannot be read or written."""
    pass


class LaunchError(LobbyError):
    """Raised when the task launcher fails to start a hosting process."""

    def __init__(self, message: str, transient: bool = False):
        super().__init__(message)
        self.transient = transient


class NotFoundError(LobbyError):
    """Raised when a well-formed lookup hits a key that does not exist."""
    pass
