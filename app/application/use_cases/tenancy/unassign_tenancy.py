"""
Tenancy unassignment use case.

Clears a tenant's unit and contract and frees the unit in the same
transaction.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from app.application.validators import validate_identifier
from app.domain.exceptions import (
    AssignmentError,
    ConflictException,
    ResourceNotFoundException,
)
from app.shared.logging import get_logger

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ITenantRepository, IUnitRepository
    from app.domain.entities import TenantEntity

logger = get_logger(__name__)


class UnassignTenancyUseCase:
    """Remove a tenant's unit assignment"""

    def __init__(self, tenant_repo: ITenantRepository, unit_repo: IUnitRepository) -> None:
        self.tenant_repo = tenant_repo
        self.unit_repo = unit_repo

    async def execute(self, tenant_id: str, *, now: datetime | None = None) -> TenantEntity:
        """
        Unassign the tenant's current unit.

        Unassigning while the contract is still running is allowed and logged.

        Raises:
            ValidationException: If tenant_id is blank
            ResourceNotFoundException: If the tenant does not exist
            ConflictException: If the tenant has no unit, or the record changed concurrently
        """
        tenant_id = validate_identifier(tenant_id, "tenant_id")

        tenant = await self.tenant_repo.find_by_id(tenant_id)
        if tenant is None:
            raise ResourceNotFoundException("Tenant", tenant_id)

        if not tenant.is_assigned:
            raise ConflictException(
                "Tenant has no unit assigned", {"tenant_id": tenant_id}
            )

        if tenant.has_active_contract(now):
            logger.warning(
                "Unassigning unit %s from tenant %s while the contract is still active",
                tenant.unit_id,
                tenant_id,
            )

        try:
            previous = tenant.unassign(now=now)
        except AssignmentError as e:
            raise ConflictException(e.message, e.details) from e

        updated = await self.tenant_repo.save(tenant)
        await self._release_unit(previous.unit_id, tenant_id)

        logger.info("Unassigned unit %s from tenant %s", previous.unit_id, tenant_id)
        return updated

    async def _release_unit(self, unit_id: str, tenant_id: str) -> None:
        """Free the unit if it is still held by this tenant"""
        unit = await self.unit_repo.find_by_id(unit_id)
        if unit is None:
            logger.warning("Unit %s no longer exists; nothing to release", unit_id)
            return

        if not unit.release(tenant_id):
            logger.warning(
                "Unit %s is not held by tenant %s (held by %s); occupancy left unchanged",
                unit_id,
                tenant_id,
                unit.current_tenant_id,
            )
            return

        await self.unit_repo.save(unit)
