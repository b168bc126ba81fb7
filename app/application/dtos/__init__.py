"""Application DTOs."""

from app.application.dtos.tenancy import (
    AssignTenancyCommand,
    ContractAlert,
    ContractInfo,
    TenancyRecord,
    TenantInfo,
    TenantUnitResult,
    UnitDetails,
)

__all__ = [
    "AssignTenancyCommand",
    "ContractAlert",
    "ContractInfo",
    "TenancyRecord",
    "TenantInfo",
    "TenantUnitResult",
    "UnitDetails",
]
