"""
Main lobby lifecycle management system.

Handles lobby creation and status, and coordinates between the state
store and the task launcher. Holds no state of its own beyond the two
injected clients, so any number of instances can serve requests.
"""

import json
import logging
from typing import Any, Dict, Optional, Union

from cache.models import RedisKeys
from cache.store import StateStore
from launcher.base import TaskLauncher
from .errors import LaunchError, NotFoundError, StoreError, ValidationError
from .models import CreateResult, LobbyRequest, LobbyStatus, NOT_FOUND, StatusResult

logger = logging.getLogger(__name__)


class LobbyManager:
    """Lobby lifecycle coordinator."""

    def __init__(self, store: StateStore, launcher: TaskLauncher):
        """
        Initialize the lobby manager.

        Args:
            store: State store holding lobby payloads and statuses
            launcher: Launcher that starts the hosting process for a lobby
        """
        self.store = store
        self.launcher = launcher

    def create_lobby(self, data: Union[LobbyRequest, Dict[str, Any]]) -> str:
        """
        Create a lobby and launch its hosting process.

        The payload and the Creating status are committed before the launch
        is attempted. A lobby that is already Running is returned as created
        without side effects; one still Creating keeps its payload and has
        its launch re-issued from that stored payload; a Failed one is
        recreated from this request.

        Args:
            data: Creation request, decoded or already parsed

        Returns:
            CreateResult.CREATED or CreateResult.ERROR

        Raises:
            ValidationError: If the request is malformed (nothing is written)
        """
        request = data if isinstance(data, LobbyRequest) else LobbyRequest.from_dict(data)
        reference_id = request.reference_id
        payload = request.to_json()

        logger.info(f"Creating lobby {reference_id} named '{request.lobby_name}'")

        try:
            existing = self._read_status(reference_id)
        except StoreError as e:
            logger.error(f"Cannot check existing state of lobby {reference_id}: {e}")
            return CreateResult.ERROR

        if existing is LobbyStatus.RUNNING:
            logger.info(f"Lobby {reference_id} is already running, nothing to do")
            return CreateResult.CREATED

        if existing is LobbyStatus.CREATING:
            logger.warning(f"Lobby {reference_id} is still creating, re-issuing launch")
            try:
                request = self._stored_request(reference_id, request)
            except StoreError as e:
                logger.error(f"Cannot read stored payload of lobby {reference_id}: {e}")
                return CreateResult.ERROR
        else:
            if existing is LobbyStatus.FAILED:
                logger.info(f"Retrying previously failed lobby {reference_id}")
            try:
                self.store.set_many({
                    RedisKeys.lobby_key(reference_id): payload,
                    RedisKeys.status_key(reference_id): LobbyStatus.CREATING.value
                })
            except StoreError as e:
                logger.error(f"Error saving lobby {reference_id}: {e}")
                return CreateResult.ERROR

        return self._launch(request)

    def status_lobby(self, reference_id: str) -> StatusResult:
        """
        Get the client-visible status of a lobby.

        Args:
            reference_id: Lobby reference identity

        Returns:
            StatusResult with the lowercase status and the stored payload.
            A missing status is reported as not_found; a payload that cannot
            be read is reported as empty data.

        Raises:
            StoreError: If the status itself cannot be read
        """
        self._require_reference_id(reference_id)

        status = self._read_status(reference_id)
        if status is None:
            return StatusResult(status=NOT_FOUND)

        data = None
        try:
            raw = self.store.get(RedisKeys.lobby_key(reference_id))
            if raw:
                data = json.loads(raw)
            if data is not None and not isinstance(data, dict):
                logger.warning(f"Stored payload of lobby {reference_id} is not a JSON object")
                data = None
        except StoreError as e:
            logger.warning(f"Could not read payload of lobby {reference_id}: {e}")
        except ValueError as e:
            logger.warning(f"Stored payload of lobby {reference_id} is not valid JSON: {e}")

        return StatusResult(status=status.client_value, data=data)

    def get_lobby_data(self, reference_id: str) -> Dict[str, Any]:
        """
        Get the original creation request of a lobby, regardless of status.

        Raises:
            NotFoundError: If no payload is stored for the lobby
            StoreError: If the store fails or the payload is corrupt
        """
        self._require_reference_id(reference_id)

        raw = self.store.get(RedisKeys.lobby_key(reference_id))
        if raw is None:
            raise NotFoundError(f"Lobby {reference_id} not found")

        try:
            return json.loads(raw)
        except ValueError as e:
            logger.error(f"Stored payload of lobby {reference_id} is not valid JSON: {e}")
            raise StoreError(f"Corrupt payload for lobby {reference_id}") from e

    def get_task_handle(self, reference_id: str) -> Optional[str]:
        """Get the launcher handle recorded for a lobby, if it was launched."""
        self._require_reference_id(reference_id)
        return self.store.get(RedisKeys.task_key(reference_id))

    def _stored_request(self, reference_id: str, incoming: LobbyRequest) -> LobbyRequest:
        """
        Rebuild the request a Creating lobby was committed with.

        Falls back to the incoming request only when the stored payload is
        missing or unusable, so a re-issued launch carries the same
        parameters as the first one.
        """
        try:
            return LobbyRequest.from_dict(self.get_lobby_data(reference_id))
        except (NotFoundError, ValidationError) as e:
            logger.warning(f"Stored payload of lobby {reference_id} unusable, launching from this request: {e}")
            return incoming

    def _launch(self, request: LobbyRequest) -> str:
        reference_id = request.reference_id

        try:
            task_handle = self.launcher.launch(reference_id, {'LOBBY_NAME': request.lobby_name})
        except LaunchError as e:
            logger.error(f"Error launching task for lobby {reference_id} (transient={e.transient}): {e}")
            self._mark_failed(reference_id)
            return CreateResult.ERROR

        try:
            # Handle first, so Running always has a handle next to it
            self.store.set_many({
                RedisKeys.task_key(reference_id): task_handle,
                RedisKeys.status_key(reference_id): LobbyStatus.RUNNING.value
            })
        except StoreError as e:
            logger.error(f"Task {task_handle} started but lobby {reference_id} could not be marked running: {e}")
            return CreateResult.ERROR

        logger.info(f"Lobby {reference_id} running as task {task_handle}")
        return CreateResult.CREATED

    def _mark_failed(self, reference_id: str) -> None:
        try:
            self.store.set(RedisKeys.status_key(reference_id), LobbyStatus.FAILED.value)
        except StoreError as e:
            logger.error(f"Could not mark lobby {reference_id} as failed, it stays Creating: {e}")

    def _read_status(self, reference_id: str) -> Optional[LobbyStatus]:
        raw = self.store.get(RedisKeys.status_key(reference_id))
        if raw is None:
            return None

        try:
            return LobbyStatus.parse(raw)
        except ValueError as e:
            logger.error(f"Lobby {reference_id} has an unreadable status: {e}")
            raise StoreError(f"Corrupt status for lobby {reference_id}") from e

    @staticmethod
    def _require_reference_id(reference_id: str) -> None:
        if not isinstance(reference_id, str) or not reference_id.strip():
            raise ValidationError("referenceID must be a non-empty string")
