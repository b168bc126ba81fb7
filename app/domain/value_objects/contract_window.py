"""
Contract window: the derived, time-dependent view of a tenancy contract.

This is the only place where contract health arithmetic lives. The tenant
aggregate, the "my unit" read projection and the contract alert report all
call compute_contract_window() instead of doing date math themselves.
"""

import math
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

MIN_CONTRACT_DAYS = 30
EXPIRING_SOON_DAYS = 30

_ONE_DAY_SECONDS = timedelta(days=1).total_seconds()


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime"""
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC and convert aware ones to UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


@dataclass(frozen=True)
class ContractWindow:
    """
    Contract health at a given instant.

    is_expiring_soon and "expired" (days_until_expiry <= 0) are mutually
    exclusive.
    """

    is_active: bool
    days_until_expiry: int
    is_expiring_soon: bool

    @property
    def is_expired(self) -> bool:
        return self.days_until_expiry <= 0


def compute_contract_window(
    contract_start: datetime, contract_end: datetime, now: datetime
) -> ContractWindow:
    """
    Derive contract health from the contract dates and the current instant.

    Args:
        contract_start: First instant covered by the contract
        contract_end: Last instant covered by the contract
        now: Instant to evaluate at

    Returns:
        ContractWindow where is_active is inclusive on both bounds and
        days_until_expiry is the ceiling of the remaining whole days
        (negative once expired).
    """
    start, end, at = as_utc(contract_start), as_utc(contract_end), as_utc(now)

    days_until_expiry = math.ceil((end - at).total_seconds() / _ONE_DAY_SECONDS)

    return ContractWindow(
        is_active=start <= at <= end,
        days_until_expiry=days_until_expiry,
        is_expiring_soon=0 < days_until_expiry <= EXPIRING_SOON_DAYS,
    )
