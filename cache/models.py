"""
Redis key layout for lobby state.

Every lobby is stored under a handful of string keys sharing the
``lobby:<referenceID>`` prefix. Reference ids are opaque and inserted
as-is.
"""


class RedisKeys:
    """Redis key patterns for consistent data organization."""

    # Serialized creation request
    LOBBY = "lobby:{reference_id}"

    # Creating | Running | Failed
    LOBBY_STATUS = "lobby:{reference_id}:status"

    # Handle returned by the task launcher
    LOBBY_TASK = "lobby:{reference_id}:task"

    @staticmethod
    def lobby_key(reference_id: str) -> str:
        return RedisKeys.LOBBY.format(reference_id=reference_id)

    @staticmethod
    def status_key(reference_id: str) -> str:
        return RedisKeys.LOBBY_STATUS.format(reference_id=reference_id)

    @staticmethod
    def task_key(reference_id: str) -> str:
        return RedisKeys.LOBBY_TASK.format(reference_id=reference_id)
