"""Tenancy assignment and contract lifecycle use cases."""

from app.application.use_cases.tenancy.assign_tenancy import AssignTenancyUseCase
from app.application.use_cases.tenancy.contract_alerts import ListContractAlertsUseCase
from app.application.use_cases.tenancy.get_tenant_unit import GetTenantUnitUseCase
from app.application.use_cases.tenancy.unassign_tenancy import UnassignTenancyUseCase

__all__ = [
    "AssignTenancyUseCase",
    "UnassignTenancyUseCase",
    "GetTenantUnitUseCase",
    "ListContractAlertsUseCase",
]
