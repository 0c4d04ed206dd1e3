"""
Data models for lobby lifecycle management.

These are pure data structures passed between the lifecycle manager,
the state store and the API handlers.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from .errors import ValidationError


class LobbyStatus(Enum):
    """Stored lifecycle states of a lobby."""
    CREATING = 'Creating'
    RUNNING = 'Running'
    FAILED = 'Failed'

    @property
    def client_value(self) -> str:
        """Lowercase form reported to API clients."""
        return self.value.lower()

    @classmethod
    def parse(cls, raw: str) -> 'LobbyStatus':
        """Parse a stored status string."""
        for status in cls:
            if status.value == raw:
                return status
        raise ValueError(f"Unknown lobby status: {raw!r}")


# Computed result for a lobby with no stored status
NOT_FOUND = 'not_found'


class CreateResult:
    """Client-visible results of a create request."""
    CREATED = 'created'
    ERROR = 'error'


@dataclass
class LobbyRequest:
    """A lobby creation request, kept verbatim as the stored payload."""
    reference_id: str
    lobby_name: str
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.reference_id, str) or not self.reference_id.strip():
            raise ValidationError("referenceID must be a non-empty string")
        if not isinstance(self.lobby_name, str) or not self.lobby_name.strip():
            raise ValidationError("lobbyName must be a non-empty string")

    @classmethod
    def from_dict(cls, data: Any) -> 'LobbyRequest':
        """
        Build a request from decoded JSON.

        Args:
            data: Decoded request body

        Returns:
            LobbyRequest with unknown fields preserved in ``extra``

        Raises:
            ValidationError: If the body is not an object or a required field is missing
        """
        if not isinstance(data, dict):
            raise ValidationError("Lobby request must be a JSON object")

        extra = {k: v for k, v in data.items() if k not in ('referenceID', 'lobbyName')}
        return cls(
            reference_id=data.get('referenceID'),
            lobby_name=data.get('lobbyName'),
            extra=extra
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert back to the wire shape the client sent.

        Field values are unchanged, but key order is normalized:
        referenceID and lobbyName come first, then the extra fields in
        the order they were received.
        """
        data = {'referenceID': self.reference_id, 'lobbyName': self.lobby_name}
        data.update(self.extra)
        return data

    def to_json(self) -> str:
        """Serialize for storage."""
        try:
            return json.dumps(self.to_dict())
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Lobby request is not serializable: {e}")


@dataclass
class StatusResult:
    """Status of a lobby as reported to clients."""
    status: str
    data: Optional[Dict[str, Any]] = None

    @property
    def found(self) -> bool:
        return self.status != NOT_FOUND

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'status': self.status,
            'data': self.data or {}
        }
