"""
Tenant domain entity.

A tenant is a user account that may be bound to one rentable unit under a
dated contract. This entity owns the tenancy state and every rule about how
it may change, independent of how it's stored in the database.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from app.domain.enums import UserRole
from app.domain.exceptions import (
    AlreadyAssignedError,
    InvalidRangeError,
    MinimumDurationError,
    NotAssignedError,
    PastStartDateError,
    RoleError,
)
from app.domain.value_objects.contract_window import (
    MIN_CONTRACT_DAYS,
    ContractWindow,
    as_utc,
    compute_contract_window,
    utc_now,
)
from app.domain.value_objects.tenancy import UNASSIGNED, Assigned, Tenancy


@dataclass
class TenantEntity:
    """
    Domain entity for a tenant and its current unit assignment.

    The tenancy field is replaced wholesale on every transition, never
    patched field by field. version is the optimistic concurrency token of
    the persisted record.
    """

    id: str
    email: str
    full_name: str
    role: UserRole
    is_active: bool = True
    phone: str | None = None
    tenancy: Tenancy = UNASSIGNED
    version: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = field(default=None, compare=False)

    @property
    def is_assigned(self) -> bool:
        return isinstance(self.tenancy, Assigned)

    @property
    def unit_id(self) -> str | None:
        if isinstance(self.tenancy, Assigned):
            return self.tenancy.unit_id
        return None

    def assign(
        self,
        unit_id: str,
        contract_start: datetime,
        contract_end: datetime,
        *,
        now: datetime | None = None,
    ) -> None:
        """
        Bind this tenant to a unit for the given contract period.

        Rules are checked in order and the first violation wins:
        role, current state, date ordering, start date, minimum duration.

        Raises:
            RoleError: If the user is not a tenant
            AlreadyAssignedError: If a unit is already assigned
            InvalidRangeError: If the contract does not end after it starts
            PastStartDateError: If the contract starts before today (UTC, date only)
            MinimumDurationError: If the contract is shorter than MIN_CONTRACT_DAYS
        """
        if self.role != UserRole.TENANT:
            raise RoleError(self.role.value)

        if isinstance(self.tenancy, Assigned):
            raise AlreadyAssignedError(self.tenancy.unit_id)

        start, end = as_utc(contract_start), as_utc(contract_end)
        current = as_utc(now) if now else utc_now()

        if end <= start:
            raise InvalidRangeError()

        if start.date() < current.date():
            raise PastStartDateError()

        if end - start < timedelta(days=MIN_CONTRACT_DAYS):
            raise MinimumDurationError(MIN_CONTRACT_DAYS)

        self.tenancy = Assigned(unit_id=unit_id, contract_start=start, contract_end=end)
        self.updated_at = current

    def unassign(self, *, now: datetime | None = None) -> Assigned:
        """
        Release the current unit and clear the contract.

        Returns:
            The tenancy that was cleared, so callers can free the unit.

        Raises:
            NotAssignedError: If no unit is assigned
        """
        if not isinstance(self.tenancy, Assigned):
            raise NotAssignedError()

        previous = self.tenancy
        self.tenancy = UNASSIGNED
        self.updated_at = as_utc(now) if now else utc_now()
        return previous

    def contract_status(self, now: datetime | None = None) -> ContractWindow | None:
        """Contract health at `now` (defaults to current time), None if unassigned"""
        if not isinstance(self.tenancy, Assigned):
            return None
        return compute_contract_window(
            self.tenancy.contract_start,
            self.tenancy.contract_end,
            now or utc_now(),
        )

    def has_active_contract(self, now: datetime | None = None) -> bool:
        status = self.contract_status(now)
        return status is not None and status.is_active
