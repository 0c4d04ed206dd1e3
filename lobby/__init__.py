"""
Lobby Module for the lobby control plane.

Contains the lobby lifecycle logic: identity, persisted state, the
status state machine and coordination with the task launcher.
"""

from .errors import LobbyError, ValidationError, StoreError, LaunchError, NotFoundError
from .models import LobbyStatus, LobbyRequest, StatusResult, CreateResult, NOT_FOUND
from .manager import LobbyManager

__all__ = [
    # Errors
    'LobbyError',
    'ValidationError',
    'StoreError',
    'LaunchError',
    'NotFoundError',

    # Data models
    'LobbyStatus',
    'LobbyRequest',
    'StatusResult',
    'CreateResult',
    'NOT_FOUND',

    # Managers
    'LobbyManager'
]
