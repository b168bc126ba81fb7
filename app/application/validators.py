"""
Input validation for tenancy use cases.

Runs before any repository is touched. The contract date rules are checked
here and again by TenantEntity.assign(); both layers reject the same input.
"""

from datetime import datetime, timedelta
from typing import Any

from app.application.dtos.tenancy import AssignTenancyCommand
from app.domain.exceptions import ValidationException
from app.domain.value_objects.contract_window import MIN_CONTRACT_DAYS, as_utc, utc_now


def validate_identifier(value: Any, field: str) -> str:
    """Ensure an id is a non-blank string and return it stripped"""
    if not isinstance(value, str) or not value.strip():
        raise ValidationException(f"{field} is required", field=field)
    return value.strip()


def _require_datetime(value: Any, field: str) -> datetime:
    if not isinstance(value, datetime):
        raise ValidationException(f"{field} must be a valid date", field=field)
    return as_utc(value)


def validate_contract_period(
    contract_start: datetime, contract_end: datetime, *, now: datetime | None = None
) -> None:
    """
    Validate contract dates.

    Raises:
        ValidationException: If the end is not after the start, the start date is
            before today (UTC, time of day ignored) or the period is shorter than
            MIN_CONTRACT_DAYS
    """
    start, end = as_utc(contract_start), as_utc(contract_end)
    today = (as_utc(now) if now else utc_now()).date()

    if end <= start:
        raise ValidationException(
            "Contract end date must be after the start date", field="contract_end"
        )

    if start.date() < today:
        raise ValidationException(
            "Contract start date cannot be in the past", field="contract_start"
        )

    if end - start < timedelta(days=MIN_CONTRACT_DAYS):
        raise ValidationException(
            f"Contract must last at least {MIN_CONTRACT_DAYS} days", field="contract_end"
        )


def validate_assign_command(
    command: AssignTenancyCommand, *, now: datetime | None = None
) -> AssignTenancyCommand:
    """
    Structural then business validation of an assignment request.

    Returns:
        A normalized command (stripped ids, UTC dates)
    """
    tenant_id = validate_identifier(command.tenant_id, "tenant_id")
    unit_id = validate_identifier(command.unit_id, "unit_id")
    contract_start = _require_datetime(command.contract_start, "contract_start")
    contract_end = _require_datetime(command.contract_end, "contract_end")

    validate_contract_period(contract_start, contract_end, now=now)

    return AssignTenancyCommand(
        tenant_id=tenant_id,
        unit_id=unit_id,
        contract_start=contract_start,
        contract_end=contract_end,
    )
