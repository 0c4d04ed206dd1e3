"""
State Store Module for the lobby control plane.

Holds lobby payloads and statuses. Redis is the production back-end;
the in-memory store serves local runs and tests.
"""

from .store import StateStore
from .client import RedisStateStore
from .memory import MemoryStateStore
from .models import RedisKeys

__all__ = [
    'StateStore',
    'RedisStateStore',
    'MemoryStateStore',
    'RedisKeys'
]
