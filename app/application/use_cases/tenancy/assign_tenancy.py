"""
Tenancy assignment use case.

Binds a tenant to a unit under a dated contract and marks the unit occupied.
Both writes are version-checked and run inside the caller's database
transaction, so either both persist or neither does.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from app.application.validators import validate_assign_command
from app.domain.enums import UserRole
from app.domain.exceptions import (
    AssignmentError,
    ConflictException,
    ResourceNotFoundException,
)
from app.shared.logging import get_logger

if TYPE_CHECKING:
    from app.application.dtos.tenancy import AssignTenancyCommand
    from app.application.interfaces.repositories import ITenantRepository, IUnitRepository
    from app.domain.entities import TenantEntity

logger = get_logger(__name__)


class AssignTenancyUseCase:
    """Assign a unit to a tenant (DIP - depends on repository ports)"""

    def __init__(self, tenant_repo: ITenantRepository, unit_repo: IUnitRepository) -> None:
        self.tenant_repo = tenant_repo
        self.unit_repo = unit_repo

    async def execute(
        self, command: AssignTenancyCommand, *, now: datetime | None = None
    ) -> TenantEntity:
        """
        Assign a unit to a tenant.

        Args:
            command: Tenant id, unit id and contract dates
            now: Evaluation instant for the "start not in the past" rule (defaults to now)

        Returns:
            The updated tenant

        Raises:
            ValidationException: If the input is malformed or the contract dates are invalid
            ResourceNotFoundException: If the tenant or the unit does not exist
            ConflictException: If the tenant is inactive, not a tenant, already assigned,
                the unit is unavailable, or another request changed either record first
        """
        # 1. Validate shape and contract dates before touching storage
        command = validate_assign_command(command, now=now)

        # 2. Load the tenant
        tenant = await self.tenant_repo.find_by_id(command.tenant_id)
        if tenant is None:
            raise ResourceNotFoundException("Tenant", command.tenant_id)

        # 3. Business preconditions, each with its own message
        if not tenant.is_active:
            raise ConflictException(
                "Cannot assign a unit to an inactive tenant",
                {"tenant_id": tenant.id},
            )

        if tenant.role != UserRole.TENANT:
            raise ConflictException(
                f"Only users with role '{UserRole.TENANT.value}' can be assigned a unit",
                {"tenant_id": tenant.id, "role": tenant.role.value},
            )

        if tenant.is_assigned:
            raise ConflictException(
                f"Tenant is already assigned to unit {tenant.unit_id}. "
                "Unassign the current unit first.",
                {"tenant_id": tenant.id, "unit_id": tenant.unit_id},
            )

        # 4. Load the unit and claim it
        unit = await self.unit_repo.find_by_id(command.unit_id)
        if unit is None:
            raise ResourceNotFoundException("Unit", command.unit_id)

        # 5. State transitions on both aggregates
        try:
            tenant.assign(
                command.unit_id,
                command.contract_start,
                command.contract_end,
                now=now,
            )
            unit.occupy(tenant.id)
        except AssignmentError as e:
            raise ConflictException(e.message, e.details) from e

        # 6. Persist (version-checked, same transaction)
        updated = await self.tenant_repo.save(tenant)
        await self.unit_repo.save(unit)

        logger.info(
            "Assigned unit %s to tenant %s (%s to %s)",
            command.unit_id,
            tenant.id,
            command.contract_start.date().isoformat(),
            command.contract_end.date().isoformat(),
        )
        return updated
