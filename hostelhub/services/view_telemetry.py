"""
View Telemetry Service

Counts page and hostel views in Redis and answers "what is trending" queries.

Telemetry is advisory only: every public method swallows store errors, logs
them, and returns a neutral result ("no data" / not trending). Nothing here
may fail the request that called it.
"""

import logging
import re
from typing import Annotated

from fastapi import Depends
from redis.asyncio import Redis

from hostelhub.core.cache import FATAL_ERRORS, TelemetryStore, get_telemetry_store
from hostelhub.models.contracts.telemetry import EntityViewLeader, PageViewLeader

logger = logging.getLogger(__name__)

# Redis keys
PAGE_VIEWS_KEY = "pageViews"
ENTITY_KEY_PREFIX = "hostel:"
ENTITY_LEADERBOARD_KEY = "hostelViews"
ENTITY_BACKFILL_MARKER_KEY = "hostelViews:backfilled"

STATIC_ASSET_PATTERN = re.compile(
    r"\.(js|css|png|jpg|jpeg|gif|ico|svg|woff|woff2|ttf)$", re.IGNORECASE
)


def entity_key(entity_id: str | int) -> str:
    """Generate Redis counter key for a hostel."""
    return f"{ENTITY_KEY_PREFIX}{entity_id}"


def should_track(method: str, path: str) -> bool:
    """
    Decide whether a request counts as a page view.

    Only GET requests for pages qualify: API calls and static assets don't.
    """
    if method.upper() != "GET":
        return False
    if path.startswith("/api/"):
        return False
    return STATIC_ASSET_PATTERN.search(path) is None


def _id_sort_key(entity_id: str) -> tuple[int, int | str]:
    # Numeric ids compare numerically and sort ahead of anything else
    if entity_id.isascii() and entity_id.isdigit():
        return (0, int(entity_id))
    return (1, entity_id)


def is_entity_leader(leader: EntityViewLeader | None, entity_id: str | int) -> bool:
    """Check whether entity_id currently holds the top view count."""
    return leader is not None and leader.score > 0 and leader.entity_id == str(entity_id)


class ViewTelemetry:
    """Page and hostel view counters backed by the telemetry store."""

    def __init__(self, store: TelemetryStore):
        self.store = store

    def _client(self) -> Redis | None:
        if not self.store.is_ready:
            return None
        return self.store.client

    def _handle_error(self, action: str, exc: Exception) -> None:
        if isinstance(exc, FATAL_ERRORS):
            self.store.mark_unavailable(exc)
        logger.error(f"Error {action}: {exc}")

    # ========================================================================
    # Recording
    # ========================================================================

    async def record_page_view(self, path: str) -> None:
        """Increment the view score for a page path."""
        client = self._client()
        if client is None:
            return

        try:
            await client.zincrby(PAGE_VIEWS_KEY, 1, path)
        except Exception as e:
            self._handle_error("tracking page view", e)

    async def record_entity_view(self, entity_id: str | int) -> int | None:
        """
        Increment the view counter for a hostel.

        The counter and its leaderboard score move together in one MULTI/EXEC.
        If the leaderboard lags the counter (a counter older than the
        leaderboard), ZADD GT lifts it to the counter value.

        Returns:
            The new view count, or None if telemetry is unavailable
        """
        client = self._client()
        if client is None:
            return None

        member = str(entity_id)
        try:
            async with client.pipeline(transaction=True) as pipe:
                count, indexed = await (
                    pipe.incr(entity_key(entity_id))
                    .zincrby(ENTITY_LEADERBOARD_KEY, 1, member)
                    .execute()
                )
            count = int(count)
            if indexed < count:
                await client.zadd(ENTITY_LEADERBOARD_KEY, {member: count}, gt=True)
        except Exception as e:
            self._handle_error("caching hostel view", e)
            return None

        logger.debug(f"Cached hostel view for hostel ID: {entity_id}, total views: {count}")
        return count

    # ========================================================================
    # Leaders
    # ========================================================================

    async def most_viewed_page(self) -> PageViewLeader | None:
        """
        Get the most viewed page.

        Ties go to the lexicographically smallest path.
        """
        client = self._client()
        if client is None:
            return None

        try:
            top = await client.zrevrange(PAGE_VIEWS_KEY, 0, 0, withscores=True)
            if not top:
                return None
            score = top[0][1]
            tied = await client.zrangebyscore(PAGE_VIEWS_KEY, score, score)
        except Exception as e:
            self._handle_error("getting most viewed page", e)
            return None

        path = min(tied) if tied else top[0][0]
        return PageViewLeader(path=path, score=int(score))

    async def most_viewed_entity(self) -> EntityViewLeader | None:
        """
        Get the most viewed hostel.

        Reads the leaderboard. The first query against a store that has no
        backfill marker seeds the leaderboard from every hostel:* counter, so
        counters written before the leaderboard existed still compete.
        Ties go to the lowest hostel id.
        """
        client = self._client()
        if client is None:
            return None

        try:
            await self._backfill_index(client)
            return await self._leader_from_index(client)
        except Exception as e:
            self._handle_error("getting most viewed hostel", e)
            return None

    async def _backfill_index(self, client: Redis) -> None:
        if await client.exists(ENTITY_BACKFILL_MARKER_KEY):
            return

        counts = await self._scan_counters(client)
        if counts:
            # GT never lowers a score a concurrent view already raised
            await client.zadd(ENTITY_LEADERBOARD_KEY, counts, gt=True)
        await client.set(ENTITY_BACKFILL_MARKER_KEY, "1")
        logger.info(f"Backfilled hostel leaderboard from {len(counts)} counters")

    async def _leader_from_index(self, client: Redis) -> EntityViewLeader | None:
        top = await client.zrevrange(ENTITY_LEADERBOARD_KEY, 0, 0, withscores=True)
        if not top:
            return None

        score = top[0][1]
        if score <= 0:
            return None

        tied = await client.zrangebyscore(ENTITY_LEADERBOARD_KEY, score, score)
        entity_id = min(tied, key=_id_sort_key) if tied else top[0][0]
        return EntityViewLeader(entity_id=entity_id, score=int(score))

    async def _scan_counters(self, client: Redis) -> dict[str, int]:
        # O(number of hostels ever viewed)
        keys = [key async for key in client.scan_iter(match=f"{ENTITY_KEY_PREFIX}*", count=500)]
        if not keys:
            return {}

        values = await client.mget(keys)
        counts: dict[str, int] = {}
        for key, raw in zip(keys, values):
            try:
                views = int(raw)
            except (TypeError, ValueError):
                continue
            if views > 0:
                counts[key[len(ENTITY_KEY_PREFIX):]] = views
        return counts

    # ========================================================================
    # Predicates
    # ========================================================================

    async def is_trending(self, path: str) -> bool:
        """Check if path is the most viewed page."""
        leader = await self.most_viewed_page()
        return leader is not None and leader.path == path

    async def is_trending_entity(self, entity_id: str | int) -> bool:
        """Check if a hostel is the most viewed hostel."""
        return is_entity_leader(await self.most_viewed_entity(), entity_id)


def get_view_telemetry() -> ViewTelemetry:
    """Dependency for getting the view telemetry service."""
    return ViewTelemetry(get_telemetry_store())


# Type alias for dependency injection
ViewTelemetryDep = Annotated[ViewTelemetry, Depends(get_view_telemetry)]
