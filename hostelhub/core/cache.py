"""
Telemetry Store Module

Owns the Redis client used for view-count bookkeeping. Redis is optional:
without a configured host the store stays disconnected ("local mode") and
every telemetry feature degrades to "not trending".
"""

import asyncio
import logging
from enum import Enum

import redis.asyncio as redis
from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from hostelhub.config import Settings, get_settings

logger = logging.getLogger(__name__)

# Errors that mean the connection itself is gone, not that a command was bad
FATAL_ERRORS: tuple[type[Exception], ...] = (RedisConnectionError, RedisTimeoutError)


class ConnectionState(str, Enum):
    """Lifecycle of the telemetry store connection."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    READY = "ready"


class TelemetryStore:
    """
    Explicit holder for the telemetry Redis client and its connection state.

    Transitions: DISCONNECTED -> CONNECTING -> READY, and READY -> DISCONNECTED
    on a fatal error. A store built without a client never leaves DISCONNECTED.
    """

    def __init__(self, client: redis.Redis | None, connect_timeout: float = 10.0):
        self._client = client
        self._connect_timeout = connect_timeout
        self._state = ConnectionState.DISCONNECTED

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "TelemetryStore":
        """
        Build a store from application settings.

        A blank redis_host yields a store in local mode (no client).
        """
        settings = settings or get_settings()

        if not settings.telemetry_enabled:
            logger.info("Redis not configured - running in local mode (trending disabled)")
            return cls(None)

        client = redis.Redis(
            host=settings.redis_host.strip(),
            port=settings.redis_port,
            ssl=settings.redis_tls,
            ssl_cert_reqs="required" if settings.redis_tls_verify else "none",
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry=Retry(ExponentialBackoff(cap=3.0, base=0.1), settings.redis_max_retries),
            retry_on_error=[RedisConnectionError, RedisTimeoutError],
        )
        logger.info(
            f"Redis configuration detected: {settings.redis_host}:{settings.redis_port}",
            extra={"tls": settings.redis_tls},
        )
        return cls(client, connect_timeout=settings.redis_connect_timeout_seconds)

    @property
    def client(self) -> redis.Redis | None:
        return self._client

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    @property
    def is_ready(self) -> bool:
        return self._client is not None and self._state is ConnectionState.READY

    async def connect(self) -> bool:
        """
        Verify connectivity and move to READY.

        Never raises: on failure the store stays DISCONNECTED and the app
        keeps running without telemetry.

        Returns:
            True if the store is ready
        """
        if self._client is None:
            return False

        self._state = ConnectionState.CONNECTING
        try:
            result = await asyncio.wait_for(self._client.ping(), timeout=self._connect_timeout)
            if not result:
                raise RedisConnectionError("Redis ping failed")
        except (asyncio.TimeoutError, RedisError, OSError) as e:
            self._state = ConnectionState.DISCONNECTED
            logger.warning(f"Failed to connect to Redis, continuing without trending: {e}")
            return False

        self._state = ConnectionState.READY
        logger.info("Redis client ready")
        return True

    def mark_unavailable(self, exc: BaseException) -> None:
        """Drop to DISCONNECTED after a fatal connection error."""
        if self._state is not ConnectionState.DISCONNECTED:
            logger.error(f"Redis connection lost, disabling telemetry: {exc}")
        self._state = ConnectionState.DISCONNECTED

    async def close(self) -> None:
        """Close the client connection pool."""
        self._state = ConnectionState.DISCONNECTED
        if self._client is not None:
            await self._client.aclose()


# Module-level store (initialized on startup)
_telemetry_store: TelemetryStore | None = None


def get_telemetry_store() -> TelemetryStore:
    """
    Get the shared telemetry store.

    Creates the store on first call; it is not connected until
    init_telemetry_store() runs.
    """
    global _telemetry_store

    if _telemetry_store is None:
        _telemetry_store = TelemetryStore.from_settings()

    return _telemetry_store


async def init_telemetry_store() -> TelemetryStore:
    """
    Create and connect the shared telemetry store.

    Called on application startup.
    """
    store = get_telemetry_store()
    await store.connect()
    return store


async def close_telemetry_store() -> None:
    """
    Close the telemetry store.

    Called on application shutdown.
    """
    global _telemetry_store

    if _telemetry_store is not None:
        await _telemetry_store.close()
        _telemetry_store = None


def reset_telemetry_store() -> None:
    """Reset the telemetry store (for testing)."""
    global _telemetry_store
    _telemetry_store = None
