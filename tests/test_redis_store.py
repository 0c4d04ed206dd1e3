"""Tests for the Redis state store adapter."""

from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError, TimeoutError

from cache.client import RedisStateStore
from lobby.errors import StoreError


@pytest.fixture
def redis_mock():
    client = MagicMock()
    client.set.return_value = True
    client.setex.return_value = True
    return client


class TestRedisStateStore:
    """Redis adapter behaviour with a mocked client."""

    def test_get_returns_value(self, redis_mock):
        redis_mock.get.return_value = "Running"
        store = RedisStateStore(client=redis_mock)

        assert store.get("lobby:r1:status") == "Running"
        redis_mock.get.assert_called_once_with("lobby:r1:status")

    def test_get_decodes_bytes(self, redis_mock):
        redis_mock.get.return_value = b'{"referenceID": "r1"}'
        store = RedisStateStore(client=redis_mock)

        assert store.get("lobby:r1") == '{"referenceID": "r1"}'

    def test_missing_key_is_none(self, redis_mock):
        redis_mock.get.return_value = None
        store = RedisStateStore(client=redis_mock)

        assert store.get("lobby:r1:status") is None

    @pytest.mark.parametrize("error", [ConnectionError("down"), TimeoutError("slow")])
    def test_get_failure_raises_store_error(self, redis_mock, error):
        redis_mock.get.side_effect = error
        store = RedisStateStore(client=redis_mock)

        with pytest.raises(StoreError):
            store.get("lobby:r1:status")

    def test_set_without_ttl(self, redis_mock):
        store = RedisStateStore(client=redis_mock)

        store.set("lobby:r1:status", "Creating")

        redis_mock.set.assert_called_once_with("lobby:r1:status", "Creating")
        redis_mock.setex.assert_not_called()

    def test_set_with_ttl(self, redis_mock):
        store = RedisStateStore(client=redis_mock, ttl_seconds=600)

        store.set("lobby:r1:status", "Creating")

        redis_mock.setex.assert_called_once_with("lobby:r1:status", 600, "Creating")
        redis_mock.set.assert_not_called()

    def test_unacknowledged_set_raises(self, redis_mock):
        redis_mock.set.return_value = None
        store = RedisStateStore(client=redis_mock)

        with pytest.raises(StoreError):
            store.set("lobby:r1", "{}")

    def test_set_failure_raises_store_error(self, redis_mock):
        redis_mock.set.side_effect = ConnectionError("down")
        store = RedisStateStore(client=redis_mock)

        with pytest.raises(StoreError):
            store.set("lobby:r1", "{}")

    def test_set_many_uses_transaction(self, redis_mock):
        pipe = MagicMock()
        pipe.execute.return_value = [True, True]
        redis_mock.pipeline.return_value = pipe
        store = RedisStateStore(client=redis_mock)

        store.set_many({"lobby:r1": "{}", "lobby:r1:status": "Creating"})

        redis_mock.pipeline.assert_called_once_with(transaction=True)
        assert [c.args for c in pipe.set.call_args_list] == [
            ("lobby:r1", "{}"),
            ("lobby:r1:status", "Creating"),
        ]
        pipe.execute.assert_called_once()

    def test_set_many_with_ttl(self, redis_mock):
        pipe = MagicMock()
        pipe.execute.return_value = [True, True]
        redis_mock.pipeline.return_value = pipe
        store = RedisStateStore(client=redis_mock, ttl_seconds=60)

        store.set_many({"lobby:r1": "{}", "lobby:r1:status": "Creating"})

        assert pipe.setex.call_count == 2
        pipe.set.assert_not_called()

    def test_set_many_failure_raises_store_error(self, redis_mock):
        pipe = MagicMock()
        pipe.execute.side_effect = ConnectionError("down")
        redis_mock.pipeline.return_value = pipe
        store = RedisStateStore(client=redis_mock)

        with pytest.raises(StoreError):
            store.set_many({"lobby:r1": "{}", "lobby:r1:status": "Creating"})

    def test_ping(self, redis_mock):
        redis_mock.ping.return_value = True
        assert RedisStateStore(client=redis_mock).ping() is True

        redis_mock.ping.side_effect = ConnectionError("down")
        assert RedisStateStore(client=redis_mock).ping() is False

    def test_url_connection(self, monkeypatch):
        from_url = MagicMock()
        monkeypatch.setattr("cache.client.redis.from_url", from_url)

        store = RedisStateStore(url="redis://cache:6379/2", socket_timeout=3)

        assert store.client is from_url.return_value
        from_url.assert_called_once_with(
            "redis://cache:6379/2",
            decode_responses=True,
            socket_timeout=3,
            socket_connect_timeout=3
        )
