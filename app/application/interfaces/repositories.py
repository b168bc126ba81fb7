"""
Repository interfaces (ports) for the application layer.

These protocols define the contracts between use cases and persistence.
Following Dependency Inversion Principle (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.tenancy import TenancyRecord, UnitDetails
    from app.domain.entities import TenantEntity, UnitEntity


class ITenantRepository(Protocol):
    """Protocol for the tenant aggregate store"""

    async def find_by_id(self, tenant_id: str) -> TenantEntity | None:
        """Load a tenant aggregate"""
        ...

    async def save(self, tenant: TenantEntity) -> TenantEntity:
        """
        Persist a tenant aggregate if its version is unchanged since load.

        Raises:
            ConcurrentUpdateException: If another writer saved first
            ConflictException: If the unit is already held by another tenant
        """
        ...

    async def get_tenancy_record(self, tenant_id: str) -> TenancyRecord | None:
        """Raw persisted tenancy fields (read model, bypasses the aggregate)"""
        ...

    async def list_assigned(self) -> list[TenancyRecord]:
        """Raw tenancy fields of every tenant currently holding a unit"""
        ...


class IUnitRepository(Protocol):
    """Protocol for the unit aggregate store"""

    async def find_by_id(self, unit_id: str) -> UnitEntity | None:
        """Load a unit aggregate (never cached)"""
        ...

    async def save(self, unit: UnitEntity) -> UnitEntity:
        """Persist unit occupancy if its version is unchanged since load"""
        ...

    async def get_details(self, unit_id: str) -> UnitDetails | None:
        """Display data of a unit (may be served from cache)"""
        ...
