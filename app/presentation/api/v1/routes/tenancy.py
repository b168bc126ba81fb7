from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.application.dtos.tenancy import AssignTenancyCommand
from app.application.use_cases.tenancy import (
    AssignTenancyUseCase,
    GetTenantUnitUseCase,
    ListContractAlertsUseCase,
    UnassignTenancyUseCase,
)
from app.domain.exceptions import AuthorizationException
from app.domain.value_objects.contract_window import EXPIRING_SOON_DAYS
from app.infrastructure.security.jwt import AccessClaims
from app.presentation.api.dependencies import (
    get_assign_tenancy_use_case,
    get_contract_alerts_use_case,
    get_current_user,
    get_tenant_unit_use_case,
    get_unassign_tenancy_use_case,
    require_admin_alerts,
    require_admin_assign,
    require_admin_unassign,
)
from app.presentation.api.v1.schemas.tenancy import (
    AssignDepartmentRequest,
    ContractAlertResponse,
    MyContractAlertsResponse,
    TenantResponse,
    TenantUnitResponse,
)

router = APIRouter()


# Static paths are registered before "/{tenant_id}/..." so they are never captured as ids
@router.get("/me/department", response_model=TenantUnitResponse)
async def get_my_department(
    current_user: Annotated[AccessClaims, Depends(get_current_user)],
    use_case: Annotated[GetTenantUnitUseCase, Depends(get_tenant_unit_use_case)],
):
    """
    Unit and contract health of the authenticated tenant.

    Contract fields are recomputed on every call.
    """
    result = await use_case.execute(current_user.user_id)
    return TenantUnitResponse.from_result(result)


@router.get("/me/contract-alerts", response_model=MyContractAlertsResponse)
async def get_my_contract_alerts(
    current_user: Annotated[AccessClaims, Depends(get_current_user)],
    use_case: Annotated[ListContractAlertsUseCase, Depends(get_contract_alerts_use_case)],
    horizon_days: Annotated[int | None, Query(ge=EXPIRING_SOON_DAYS, le=365)] = None,
):
    """Alerts about the caller's own contract (empty when nothing is due)"""
    alerts = await use_case.execute_for_tenant(current_user.user_id, horizon_days=horizon_days)
    return MyContractAlertsResponse.from_alerts(alerts)


@router.get("/contracts/alerts", response_model=list[ContractAlertResponse])
async def list_contract_alerts(
    _: Annotated[AccessClaims, Depends(require_admin_alerts)],
    use_case: Annotated[ListContractAlertsUseCase, Depends(get_contract_alerts_use_case)],
    horizon_days: Annotated[int | None, Query(ge=EXPIRING_SOON_DAYS, le=365)] = None,
):
    """Expired, expiring and up-for-renewal contracts, most urgent first"""
    alerts = await use_case.execute(horizon_days=horizon_days)
    return [ContractAlertResponse.from_alert(alert) for alert in alerts]


@router.put("/{tenant_id}/assign-department", response_model=TenantResponse)
async def assign_department(
    tenant_id: str,
    data: AssignDepartmentRequest,
    _: Annotated[AccessClaims, Depends(require_admin_assign)],
    use_case: Annotated[AssignTenancyUseCase, Depends(get_assign_tenancy_use_case)],
):
    """
    Assign a unit to a tenant for a contract period.

    Request body: {"unitId": ..., "contractStartDate": ..., "contractEndDate": ...}
    """
    tenant = await use_case.execute(
        AssignTenancyCommand(
            tenant_id=tenant_id,
            unit_id=data.unit_id,
            contract_start=data.contract_start_date,
            contract_end=data.contract_end_date,
        )
    )
    return TenantResponse.from_entity(tenant)


@router.delete("/{tenant_id}/unassign-department", response_model=TenantResponse)
async def unassign_department(
    tenant_id: str,
    _: Annotated[AccessClaims, Depends(require_admin_unassign)],
    use_case: Annotated[UnassignTenancyUseCase, Depends(get_unassign_tenancy_use_case)],
):
    """Release the tenant's unit and clear the contract"""
    tenant = await use_case.execute(tenant_id)
    return TenantResponse.from_entity(tenant)


@router.get("/{tenant_id}/department", response_model=TenantUnitResponse)
async def get_tenant_department(
    tenant_id: str,
    current_user: Annotated[AccessClaims, Depends(get_current_user)],
    use_case: Annotated[GetTenantUnitUseCase, Depends(get_tenant_unit_use_case)],
):
    """Unit and contract health of any tenant (admins) or of oneself"""
    if not current_user.is_admin and current_user.user_id != tenant_id:
        raise AuthorizationException(resource="tenancy", action="read")

    result = await use_case.execute(tenant_id)
    return TenantUnitResponse.from_result(result)
