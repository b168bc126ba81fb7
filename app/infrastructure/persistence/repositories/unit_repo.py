from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.tenancy import UnitDetails
from app.domain.entities import UnitEntity
from app.domain.enums import UnitStatus
from app.domain.exceptions import ConcurrentUpdateException
from app.infrastructure.cache.redis_cache import CacheService
from app.infrastructure.persistence.database import add_after_commit
from app.infrastructure.persistence.models.unit import Unit
from app.infrastructure.persistence.repositories.base import BaseRepository


class UnitRepository(BaseRepository[Unit]):
    """
    Repository for units with Redis caching of display data.

    Occupancy decisions always read the database through find_by_id();
    only get_details() (display data) is served from cache.
    """

    def __init__(self, db: AsyncSession, cache_service: CacheService | None = None):
        super().__init__(db, Unit)
        self.cache = cache_service

    async def find_by_id(self, unit_id: str) -> UnitEntity | None:
        unit = await self.get_by_id(unit_id)
        if unit is None:
            return None
        return UnitEntity(
            id=unit.id,
            code=unit.code,
            name=unit.name,
            status=UnitStatus(unit.status),
            current_tenant_id=unit.current_tenant_id,
            is_active=unit.is_active,
            version=unit.version,
        )

    async def save(self, unit: UnitEntity) -> UnitEntity:
        """
        Persist unit occupancy if the unit is unchanged since it was loaded.

        Raises:
            ConcurrentUpdateException: If another writer saved the unit first
        """
        updated = await self._compare_and_swap(
            unit.id,
            unit.version,
            {"status": unit.status.value, "current_tenant_id": unit.current_tenant_id},
        )
        if not updated:
            raise ConcurrentUpdateException("Unit", unit.id)

        unit.version += 1
        return unit

    async def get_details(self, unit_id: str) -> UnitDetails | None:
        """Get unit display data, cache-aside"""
        if self.cache and self.cache.is_available():
            cached = await self.cache.get_unit_details(unit_id)
            if cached is not None:
                return cached

        # Cache miss - query database
        unit = await self.get_by_id(unit_id)
        if unit is None:
            return None

        details = UnitDetails(
            id=unit.id,
            code=unit.code,
            name=unit.name,
            status=UnitStatus(unit.status),
            description=unit.description,
            monthly_price=unit.monthly_price,
            address=unit.address or {},
            features=unit.features or {},
            inventory=unit.inventory or [],
            images=unit.images or [],
        )

        if self.cache and self.cache.is_available():
            await self.cache.set_unit_details(details)

        return details

    # Cache invalidation hook
    async def _on_after_write(self, id: str) -> None:
        """
        Drop cached display data now and again once the transaction commits.

        A reader between the two deletes may re-cache the pre-commit row;
        the second delete evicts it.
        """
        await super()._on_after_write(id)
        if self.cache is None:
            return

        cache = self.cache

        async def invalidate() -> None:
            if cache.is_available():
                await cache.invalidate_unit(id)

        await invalidate()
        add_after_commit(self.db, invalidate)
