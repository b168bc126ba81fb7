"""Application use cases."""

from app.application.use_cases.tenancy import (
    AssignTenancyUseCase,
    GetTenantUnitUseCase,
    ListContractAlertsUseCase,
    UnassignTenancyUseCase,
)

__all__ = [
    "AssignTenancyUseCase",
    "UnassignTenancyUseCase",
    "GetTenantUnitUseCase",
    "ListContractAlertsUseCase",
]
