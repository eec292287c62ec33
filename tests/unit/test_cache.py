"""
Unit tests for the telemetry store connection lifecycle.
"""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from hostelhub.config import Settings
from hostelhub.core.cache import (
    ConnectionState,
    TelemetryStore,
    close_telemetry_store,
    get_telemetry_store,
    init_telemetry_store,
)


def _settings(**overrides) -> Settings:
    values = {"secret_key": "x" * 32, "redis_host": ""}
    values.update(overrides)
    return Settings(**values)


@pytest.mark.unit
class TestTelemetryStore:
    """Tests for TelemetryStore state transitions."""

    def test_blank_host_is_local_mode(self):
        store = TelemetryStore.from_settings(_settings(redis_host="  "))

        assert store.is_configured is False
        assert store.client is None
        assert store.state is ConnectionState.DISCONNECTED

    def test_configured_host_builds_client(self):
        store = TelemetryStore.from_settings(
            _settings(redis_host="cache.example.com", redis_tls=False)
        )

        assert store.is_configured is True
        assert store.is_ready is False
        kwargs = store.client.connection_pool.connection_kwargs
        assert kwargs["host"] == "cache.example.com"
        assert kwargs["port"] == 6379

    async def test_local_mode_never_connects(self):
        store = TelemetryStore(None)

        assert await store.connect() is False
        assert store.state is ConnectionState.DISCONNECTED

    async def test_connect_moves_to_ready(self, mock_redis):
        store = TelemetryStore(mock_redis)

        assert await store.connect() is True
        assert store.state is ConnectionState.READY
        assert store.is_ready is True
        mock_redis.ping.assert_awaited_once()

    async def test_failed_ping_stays_disconnected(self, mock_redis):
        mock_redis.ping = AsyncMock(side_effect=RedisConnectionError("refused"))
        store = TelemetryStore(mock_redis)

        assert await store.connect() is False
        assert store.state is ConnectionState.DISCONNECTED

    async def test_connect_timeout_stays_disconnected(self, mock_redis):
        async def hang():
            await asyncio.sleep(10)

        mock_redis.ping = AsyncMock(side_effect=hang)
        store = TelemetryStore(mock_redis, connect_timeout=0.01)

        assert await store.connect() is False
        assert store.state is ConnectionState.DISCONNECTED

    async def test_mark_unavailable_drops_ready_store(self, mock_redis):
        store = TelemetryStore(mock_redis)
        await store.connect()

        store.mark_unavailable(RedisConnectionError("gone"))

        assert store.state is ConnectionState.DISCONNECTED
        assert store.is_ready is False

    async def test_close(self, mock_redis):
        store = TelemetryStore(mock_redis)
        await store.connect()

        await store.close()

        assert store.state is ConnectionState.DISCONNECTED
        mock_redis.aclose.assert_awaited_once()


@pytest.mark.unit
class TestModuleStore:
    """Tests for the shared store helpers."""

    def test_get_telemetry_store_is_shared(self):
        assert get_telemetry_store() is get_telemetry_store()

    async def test_init_and_close(self, mock_redis):
        store = TelemetryStore(mock_redis)

        with patch("hostelhub.core.cache.TelemetryStore.from_settings", return_value=store):
            initialized = await init_telemetry_store()

        assert initialized is store
        assert store.is_ready is True

        await close_telemetry_store()
        mock_redis.aclose.assert_awaited_once()
        assert get_telemetry_store() is not store
