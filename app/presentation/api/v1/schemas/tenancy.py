from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.application.dtos.tenancy import ContractAlert, TenantUnitResult
from app.domain.entities import TenantEntity
from app.domain.enums import ContractAlertSeverity, ContractAlertType, UnitStatus, UserRole
from app.domain.value_objects.contract_window import as_utc
from app.domain.value_objects.tenancy import Assigned


class AssignDepartmentRequest(BaseModel):
    """
    Body of PUT /tenants/{tenant_id}/assign-department.

    Accepts camelCase (unitId, contractStartDate, contractEndDate) or snake_case keys.
    Dates without an offset are taken as UTC.
    """

    model_config = ConfigDict(populate_by_name=True)

    unit_id: str = Field(..., min_length=1, alias="unitId", description="Unit to assign")
    contract_start_date: datetime = Field(..., alias="contractStartDate")
    contract_end_date: datetime = Field(..., alias="contractEndDate")

    @field_validator("unit_id")
    @classmethod
    def strip_unit_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("unitId must not be blank")
        return v

    @field_validator("contract_start_date", "contract_end_date")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class TenantResponse(BaseModel):
    """Tenant record returned by assignment endpoints"""

    id: str
    email: str
    full_name: str
    phone: str | None = None
    role: UserRole
    is_active: bool
    unit_id: str | None = None
    contract_start_date: datetime | None = None
    contract_end_date: datetime | None = None
    version: int
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, tenant: TenantEntity) -> TenantResponse:
        start = end = None
        if isinstance(tenant.tenancy, Assigned):
            start = tenant.tenancy.contract_start
            end = tenant.tenancy.contract_end
        return cls(
            id=tenant.id,
            email=tenant.email,
            full_name=tenant.full_name,
            phone=tenant.phone,
            role=tenant.role,
            is_active=tenant.is_active,
            unit_id=tenant.unit_id,
            contract_start_date=start,
            contract_end_date=end,
            version=tenant.version,
            updated_at=tenant.updated_at,
        )


class UnitResponse(BaseModel):
    id: str
    code: str
    name: str
    status: UnitStatus
    description: str | None = None
    monthly_price: float | None = None
    address: dict[str, Any] = Field(default_factory=dict)
    features: dict[str, Any] = Field(default_factory=dict)
    inventory: list[dict[str, Any]] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class ContractInfoResponse(BaseModel):
    start_date: datetime
    end_date: datetime
    is_active: bool
    days_until_expiry: int
    is_expiring_soon: bool

    model_config = ConfigDict(from_attributes=True)


class TenantInfoResponse(BaseModel):
    id: str
    full_name: str
    email: str
    phone: str | None = None

    model_config = ConfigDict(from_attributes=True)


class TenantUnitResponse(BaseModel):
    """Response of the "my department" view"""

    unit: UnitResponse
    contract_info: ContractInfoResponse
    tenant_info: TenantInfoResponse

    @classmethod
    def from_result(cls, result: TenantUnitResult) -> TenantUnitResponse:
        return cls(
            unit=UnitResponse.model_validate(result.unit),
            contract_info=ContractInfoResponse.model_validate(result.contract_info),
            tenant_info=TenantInfoResponse.model_validate(result.tenant_info),
        )


class ContractAlertResponse(BaseModel):
    tenant_id: str
    tenant_name: str
    unit_id: str
    alert_type: ContractAlertType
    severity: ContractAlertSeverity
    days_until_expiry: int
    contract_end_date: datetime
    message: str

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_alert(cls, alert: ContractAlert) -> ContractAlertResponse:
        return cls.model_validate(alert)


class MyContractAlertsResponse(BaseModel):
    """Contract alerts of the authenticated tenant"""

    alerts: list[ContractAlertResponse]
    has_expired_contract: bool
    has_expiring_contract: bool

    @classmethod
    def from_alerts(cls, alerts: list[ContractAlert]) -> MyContractAlertsResponse:
        return cls(
            alerts=[ContractAlertResponse.from_alert(alert) for alert in alerts],
            has_expired_contract=any(
                alert.alert_type == ContractAlertType.CONTRACT_EXPIRED for alert in alerts
            ),
            has_expiring_contract=any(
                alert.alert_type == ContractAlertType.CONTRACT_EXPIRING for alert in alerts
            ),
        )
