"""Domain value objects."""

from app.domain.value_objects.contract_alert import (
    classify_contract_window,
    describe_contract_alert,
)
from app.domain.value_objects.contract_window import (
    EXPIRING_SOON_DAYS,
    MIN_CONTRACT_DAYS,
    ContractWindow,
    as_utc,
    compute_contract_window,
    utc_now,
)
from app.domain.value_objects.tenancy import UNASSIGNED, Assigned, Tenancy, Unassigned

__all__ = [
    "ContractWindow",
    "compute_contract_window",
    "utc_now",
    "as_utc",
    "MIN_CONTRACT_DAYS",
    "EXPIRING_SOON_DAYS",
    "Tenancy",
    "Assigned",
    "Unassigned",
    "UNASSIGNED",
    "classify_contract_window",
    "describe_contract_alert",
]
