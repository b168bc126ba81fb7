"""Redis cache for unit display data"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import Any

import redis.asyncio as redis

from app.application.dtos.tenancy import UnitDetails
from app.domain.enums import UnitStatus
from app.infrastructure.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

UNIT_DETAILS_KEY = "unit:id:{unit_id}"


def unit_details_key(unit_id: str) -> str:
    return UNIT_DETAILS_KEY.format(unit_id=unit_id)


class CacheService:
    """
    Async Redis cache with TTL support.

    Only unit display data ("my department" view) is cached. Occupancy
    decisions and contract health never read from here.

    Every operation is best effort: with Redis down or misbehaving, reads are
    misses and writes are skipped, so callers fall back to the database.
    """

    def __init__(self, redis_client: redis.Redis | None = None, settings: Settings | None = None):
        self.redis = redis_client
        self.settings = settings or get_settings()
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Open the Redis connection (app startup). Failure disables the cache."""
        if self.redis is not None:
            return

        client = redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=self.settings.redis_password or None,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_keepalive=True,
        )
        try:
            await client.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis unreachable (%s); unit details will be read from the database", e)
            await client.aclose()
            return

        self.redis = client
        self._connected = True
        logger.info("Redis cache connected: %s:%s", self.settings.redis_host, self.settings.redis_port)

    async def disconnect(self) -> None:
        if self.redis is None:
            return
        await self.redis.aclose()
        self.redis = None
        self._connected = False
        logger.info("Redis cache disconnected")

    def is_available(self) -> bool:
        return self._connected and self.redis is not None

    # Unit display data
    async def get_unit_details(self, unit_id: str) -> UnitDetails | None:
        cached = await self.get(unit_details_key(unit_id))
        if not isinstance(cached, dict):
            return None
        try:
            return UnitDetails(**{**cached, "status": UnitStatus(cached["status"])})
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Discarding malformed cached details for unit %s: %s", unit_id, e)
            await self.invalidate_unit(unit_id)
            return None

    async def set_unit_details(self, details: UnitDetails) -> bool:
        payload = asdict(details)
        payload["status"] = details.status.value
        return await self.set(
            unit_details_key(details.id), payload, ttl=self.settings.cache_ttl_units
        )

    async def invalidate_unit(self, unit_id: str) -> bool:
        return await self.delete(unit_details_key(unit_id))

    # Raw JSON values
    async def get(self, key: str) -> Any | None:
        """Cached value for key, None on a miss or when Redis fails"""
        if not self.is_available():
            return None
        try:
            raw = await self.redis.get(key)  # type: ignore[union-attr]
            value = json.loads(raw) if raw else None
        except (redis.RedisError, ValueError) as e:
            logger.error("Cache read failed for %s: %s", key, e)
            return None
        logger.debug("Cache %s: %s", "HIT" if value is not None else "MISS", key)
        return value

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value as JSON for ttl seconds; False when nothing was stored"""
        if not self.is_available():
            return False
        try:
            await self.redis.setex(key, ttl, json.dumps(value))  # type: ignore[union-attr]
        except (redis.RedisError, TypeError, ValueError) as e:
            logger.error("Cache write failed for %s: %s", key, e)
            return False
        return True

    async def delete(self, key: str) -> bool:
        if not self.is_available():
            return False
        try:
            await self.redis.delete(key)  # type: ignore[union-attr]
        except redis.RedisError as e:
            logger.error("Cache delete failed for %s: %s", key, e)
            return False
        return True
