"""
"My department" read projection.

Reads the persisted tenancy fields directly (not the aggregate) and
recomputes contract health with compute_contract_window() on every call.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from app.application.dtos.tenancy import ContractInfo, TenantInfo, TenantUnitResult
from app.application.validators import validate_identifier
from app.domain.exceptions import ResourceNotFoundException
from app.domain.value_objects.contract_window import compute_contract_window, utc_now
from app.shared.logging import get_logger

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ITenantRepository, IUnitRepository

logger = get_logger(__name__)


class GetTenantUnitUseCase:
    """Unit, contract health and tenant details for one tenant"""

    def __init__(self, tenant_repo: ITenantRepository, unit_repo: IUnitRepository) -> None:
        self.tenant_repo = tenant_repo
        self.unit_repo = unit_repo

    async def execute(self, tenant_id: str, *, now: datetime | None = None) -> TenantUnitResult:
        """
        Raises:
            ResourceNotFoundException: If the tenant does not exist, has no unit,
                has incomplete contract dates, or the unit no longer exists
        """
        tenant_id = validate_identifier(tenant_id, "tenant_id")

        record = await self.tenant_repo.get_tenancy_record(tenant_id)
        if record is None:
            raise ResourceNotFoundException("Tenant", tenant_id)

        if not record.unit_id:
            raise ResourceNotFoundException(
                "Unit", tenant_id, message="Tenant has no unit assigned"
            )

        if record.contract_start is None or record.contract_end is None:
            logger.error(
                "Tenant %s holds unit %s without complete contract dates",
                tenant_id,
                record.unit_id,
            )
            raise ResourceNotFoundException(
                "Contract", tenant_id, message="Tenant has no valid contract information"
            )

        unit = await self.unit_repo.get_details(record.unit_id)
        if unit is None:
            raise ResourceNotFoundException("Unit", record.unit_id)

        window = compute_contract_window(
            record.contract_start, record.contract_end, now or utc_now()
        )

        return TenantUnitResult(
            unit=unit,
            contract_info=ContractInfo(
                start_date=record.contract_start,
                end_date=record.contract_end,
                is_active=window.is_active,
                days_until_expiry=window.days_until_expiry,
                is_expiring_soon=window.is_expiring_soon,
            ),
            tenant_info=TenantInfo(
                id=record.tenant_id,
                full_name=record.full_name,
                email=record.email,
                phone=record.phone,
            ),
        )
