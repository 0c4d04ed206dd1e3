"""
Launcher Module for the lobby control plane.

Starts the remote process that hosts each lobby. Contains no lobby state
logic - only the orchestration back-ends.
"""

from .base import TaskLauncher
from .ecs import EcsTaskLauncher, idempotency_token
from .local import LocalTaskLauncher

__all__ = [
    'TaskLauncher',
    'EcsTaskLauncher',
    'LocalTaskLauncher',
    'idempotency_token'
]
