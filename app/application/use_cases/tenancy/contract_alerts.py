"""
Contract alert report.

Scans assigned tenants and reports contracts that are expired or end within
the reminder horizon. Alerts are computed on demand, not stored.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from app.application.dtos.tenancy import ContractAlert
from app.application.validators import validate_identifier
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.domain.value_objects.contract_alert import (
    DEFAULT_REMINDER_HORIZON_DAYS,
    classify_contract_window,
    describe_contract_alert,
)
from app.domain.value_objects.contract_window import EXPIRING_SOON_DAYS, compute_contract_window, utc_now
from app.shared.logging import get_logger

if TYPE_CHECKING:
    from app.application.dtos.tenancy import TenancyRecord
    from app.application.interfaces.repositories import ITenantRepository

logger = get_logger(__name__)


class ListContractAlertsUseCase:
    def __init__(
        self,
        tenant_repo: ITenantRepository,
        default_horizon_days: int = DEFAULT_REMINDER_HORIZON_DAYS,
    ) -> None:
        self.tenant_repo = tenant_repo
        self.default_horizon_days = default_horizon_days

    async def execute(
        self, *, now: datetime | None = None, horizon_days: int | None = None
    ) -> list[ContractAlert]:
        """
        Build alerts for expired and soon-to-expire contracts of every tenant.

        Args:
            now: Evaluation instant (defaults to now)
            horizon_days: Report renewal reminders up to this many days ahead

        Returns:
            Alerts ordered by days until expiry (most urgent first)
        """
        horizon = self._resolve_horizon(horizon_days)
        at = now or utc_now()

        alerts: list[ContractAlert] = []
        for record in await self.tenant_repo.list_assigned():
            alert = self._build_alert(record, at, horizon)
            if alert is not None:
                alerts.append(alert)

        alerts.sort(key=lambda alert: alert.days_until_expiry)
        logger.info("Generated %d contract alert(s)", len(alerts))
        return alerts

    async def execute_for_tenant(
        self, tenant_id: str, *, now: datetime | None = None, horizon_days: int | None = None
    ) -> list[ContractAlert]:
        """
        Alerts concerning one tenant's own contract.

        Returns an empty list when the tenant holds no unit or the contract
        ends beyond the horizon.

        Raises:
            ResourceNotFoundException: If the tenant does not exist
        """
        tenant_id = validate_identifier(tenant_id, "tenant_id")
        horizon = self._resolve_horizon(horizon_days)

        record = await self.tenant_repo.get_tenancy_record(tenant_id)
        if record is None:
            raise ResourceNotFoundException("Tenant", tenant_id)

        alert = self._build_alert(record, now or utc_now(), horizon)
        return [alert] if alert is not None else []

    def _resolve_horizon(self, horizon_days: int | None) -> int:
        horizon = self.default_horizon_days if horizon_days is None else horizon_days
        if horizon < EXPIRING_SOON_DAYS:
            raise ValidationException(
                f"horizon_days must be at least {EXPIRING_SOON_DAYS}", field="horizon_days"
            )
        return horizon

    @staticmethod
    def _build_alert(record: TenancyRecord, at: datetime, horizon: int) -> ContractAlert | None:
        if record.unit_id is None:
            return None
        if record.contract_start is None or record.contract_end is None:
            logger.warning("Skipping tenant %s: incomplete contract data", record.tenant_id)
            return None

        window = compute_contract_window(record.contract_start, record.contract_end, at)
        classification = classify_contract_window(window, horizon)
        if classification is None:
            return None

        alert_type, severity = classification
        return ContractAlert(
            tenant_id=record.tenant_id,
            tenant_name=record.full_name,
            unit_id=record.unit_id,
            alert_type=alert_type,
            severity=severity,
            days_until_expiry=window.days_until_expiry,
            contract_end_date=record.contract_end,
            message=describe_contract_alert(alert_type, window.days_until_expiry),
        )
