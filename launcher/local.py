"""
Local task launcher.

Stands in for the remote orchestrator when running the service on a
developer machine. Nothing is actually started; each reference id gets
one stable handle.
"""

import logging
import threading
import uuid
from typing import Dict, Optional

from .base import TaskLauncher

logger = logging.getLogger(__name__)


class LocalTaskLauncher(TaskLauncher):
    """In-process launcher that records launches instead of running them."""

    def __init__(self):
        self.handles: Dict[str, str] = {}
        self.parameters: Dict[str, Dict[str, str]] = {}
        self._lock = threading.Lock()

    def launch(self, reference_id: str, parameters: Optional[Dict[str, str]] = None) -> str:
        with self._lock:
            handle = self.handles.get(reference_id)
            if handle:
                logger.debug(f"Lobby {reference_id} already launched as {handle}")
                return handle

            handle = f"local-task-{uuid.uuid4().hex[:12]}"
            self.handles[reference_id] = handle
            self.parameters[reference_id] = dict(parameters or {})

        logger.info(f"Launched local task {handle} for lobby {reference_id}")
        return handle
