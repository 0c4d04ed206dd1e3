"""
Redis State Store for the lobby control plane.

Manages the Redis connection and translates Redis failures into
StoreError so callers can tell an unreachable store from a missing key.
"""

import logging
from typing import Dict, Optional

import redis
from redis.exceptions import RedisError

from lobby.errors import StoreError
from .store import StateStore

logger = logging.getLogger(__name__)


class RedisStateStore(StateStore):
    """Redis-backed state store with optional key expiry."""

    def __init__(self, client: Optional[redis.Redis] = None, url: Optional[str] = None,
                 host: str = 'localhost', port: int = 6379, db: int = 0,
                 password: Optional[str] = None, socket_timeout: float = 5,
                 ttl_seconds: int = 0):
        """
        Initialize the Redis store.

        Args:
            client: Pre-built redis client (takes precedence over connection settings)
            url: Redis URL, used instead of host/port when given
            host: Redis host
            port: Redis port
            db: Redis database number
            password: Redis password
            socket_timeout: Socket and connect timeout in seconds
            ttl_seconds: Expiry applied to every write, 0 for none
        """
        self.ttl_seconds = ttl_seconds

        if client is not None:
            self.client = client
        elif url:
            self.client = redis.from_url(
                url,
                decode_responses=True,
                socket_timeout=socket_timeout,
                socket_connect_timeout=socket_timeout
            )
        else:
            self.client = redis.Redis(
                host=host,
                port=port,
                db=db,
                password=password,
                decode_responses=True,
                socket_timeout=socket_timeout,
                socket_connect_timeout=socket_timeout
            )

    def ping(self) -> bool:
        """Check if Redis is connected and available."""
        try:
            return bool(self.client.ping())
        except RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.client.get(key)
        except RedisError as e:
            logger.error(f"Redis get failed for key {key}: {e}")
            raise StoreError(f"Failed to read {key}") from e

        if isinstance(value, bytes):
            value = value.decode('utf-8')
        return value

    def set(self, key: str, value: str) -> None:
        try:
            if self.ttl_seconds:
                ok = self.client.setex(key, self.ttl_seconds, value)
            else:
                ok = self.client.set(key, value)
        except RedisError as e:
            logger.error(f"Redis set failed for key {key}: {e}")
            raise StoreError(f"Failed to write {key}") from e

        if not ok:
            raise StoreError(f"Redis did not acknowledge write to {key}")

    def set_many(self, values: Dict[str, str]) -> None:
        """Write all keys in a single MULTI/EXEC transaction."""
        try:
            pipe = self.client.pipeline(transaction=True)
            for key, value in values.items():
                if self.ttl_seconds:
                    pipe.setex(key, self.ttl_seconds, value)
                else:
                    pipe.set(key, value)
            results = pipe.execute()
        except RedisError as e:
            logger.error(f"Redis transaction failed for keys {list(values)}: {e}")
            raise StoreError(f"Failed to write {', '.join(values)}") from e

        if not all(results):
            raise StoreError(f"Redis did not acknowledge writes to {', '.join(values)}")
