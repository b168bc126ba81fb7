from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.use_cases.tenancy import (
    AssignTenancyUseCase,
    GetTenantUnitUseCase,
    ListContractAlertsUseCase,
    UnassignTenancyUseCase,
)
from app.domain.enums import UserRole
from app.domain.exceptions import AuthenticationException, AuthorizationException
from app.infrastructure.cache.redis_cache import CacheService
from app.infrastructure.config.settings import get_settings
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import TenantRepository, UnitRepository
from app.infrastructure.security.jwt import AccessClaims, verify_token

security = HTTPBearer()

# Global service instances (singletons)
_cache_service: CacheService | None = None


async def get_cache_service() -> CacheService:
    """
    Cache service dependency (singleton)

    Returns global cache service instance.
    Initialized on app startup in main.py
    """
    global _cache_service
    if _cache_service is None:
        _cache_service = CacheService()
    return _cache_service


def set_cache_service(cache_service: CacheService | None):
    """Set global cache service (called on app startup)"""
    global _cache_service
    _cache_service = cache_service


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> AccessClaims:
    """
    Validate the bearer token and return the caller's claims (user id and role).
    """
    try:
        return verify_token(credentials.credentials)
    except AuthenticationException as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid authentication credentials: {e.message}",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


def require_role(role: UserRole, resource: str, action: str):
    """
    Dependency factory for route-level role checking.

    Usage:
        @router.put("/{tenant_id}/assign-department")
        async def assign(user: AccessClaims = Depends(require_role(UserRole.ADMIN, "tenancy", "assign"))):
            ...
    """

    async def role_checker(user: AccessClaims = Depends(get_current_user)) -> AccessClaims:
        if user.role != role:
            raise AuthorizationException(resource=resource, action=action)
        return user

    return role_checker


require_admin_assign = require_role(UserRole.ADMIN, "tenancy", "assign")
require_admin_unassign = require_role(UserRole.ADMIN, "tenancy", "unassign")
require_admin_alerts = require_role(UserRole.ADMIN, "contract_alerts", "read")


def _build_unit_repo(db: AsyncSession, cache: CacheService) -> UnitRepository:
    return UnitRepository(db, cache_service=cache)


# Read operations
async def get_tenant_unit_use_case(
    db: AsyncSession = Depends(get_db), cache: CacheService = Depends(get_cache_service)
) -> GetTenantUnitUseCase:
    """Tenant unit query with cached unit details"""
    return GetTenantUnitUseCase(TenantRepository(db), _build_unit_repo(db, cache))


async def get_contract_alerts_use_case(
    db: AsyncSession = Depends(get_db),
) -> ListContractAlertsUseCase:
    """Contract alert report"""
    return ListContractAlertsUseCase(
        TenantRepository(db),
        default_horizon_days=get_settings().contract_alert_horizon_days,
    )


# Transactional dependencies for write operations
async def get_assign_tenancy_use_case(
    db: AsyncSession = Depends(get_db_transactional),
    cache: CacheService = Depends(get_cache_service),
) -> AssignTenancyUseCase:
    """Assignment with tenant and unit written in one transaction"""
    return AssignTenancyUseCase(TenantRepository(db), _build_unit_repo(db, cache))


async def get_unassign_tenancy_use_case(
    db: AsyncSession = Depends(get_db_transactional),
    cache: CacheService = Depends(get_cache_service),
) -> UnassignTenancyUseCase:
    """Unassignment with tenant and unit written in one transaction"""
    return UnassignTenancyUseCase(TenantRepository(db), _build_unit_repo(db, cache))
