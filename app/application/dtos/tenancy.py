"""DTOs for tenancy use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.domain.enums import ContractAlertSeverity, ContractAlertType, UnitStatus, UserRole


@dataclass(frozen=True)
class AssignTenancyCommand:
    """Raw input of an assignment request. Types are checked by the validator."""

    tenant_id: Any
    unit_id: Any
    contract_start: Any
    contract_end: Any


@dataclass(frozen=True)
class TenancyRecord:
    """Persisted tenancy fields as stored, before any invariant is applied."""

    tenant_id: str
    full_name: str
    email: str
    role: UserRole
    is_active: bool
    phone: str | None = None
    unit_id: str | None = None
    contract_start: datetime | None = None
    contract_end: datetime | None = None


@dataclass(frozen=True)
class UnitDetails:
    """Unit read-model for display. Occupancy is informational only."""

    id: str
    code: str
    name: str
    status: UnitStatus
    description: str | None = None
    monthly_price: float | None = None
    address: dict[str, Any] = field(default_factory=dict)
    features: dict[str, Any] = field(default_factory=dict)
    inventory: list[dict[str, Any]] = field(default_factory=list)
    images: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ContractInfo:
    start_date: datetime
    end_date: datetime
    is_active: bool
    days_until_expiry: int
    is_expiring_soon: bool


@dataclass(frozen=True)
class TenantInfo:
    id: str
    full_name: str
    email: str
    phone: str | None = None


@dataclass(frozen=True)
class TenantUnitResult:
    """Result of the "my department" query"""

    unit: UnitDetails
    contract_info: ContractInfo
    tenant_info: TenantInfo


@dataclass(frozen=True)
class ContractAlert:
    """Computed (non-persisted) contract renewal / expiry alert"""

    tenant_id: str
    tenant_name: str
    unit_id: str
    alert_type: ContractAlertType
    severity: ContractAlertSeverity
    days_until_expiry: int
    contract_end_date: datetime
    message: str
