from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.tenancy import TenancyRecord
from app.domain.entities import TenantEntity
from app.domain.enums import UserRole
from app.domain.exceptions import ConcurrentUpdateException, ConflictException
from app.domain.value_objects.contract_window import as_utc
from app.domain.value_objects.tenancy import UNASSIGNED, Assigned, Tenancy
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def _aware(value: datetime | None) -> datetime | None:
    # SQLite drops tzinfo on DateTime(timezone=True) columns
    return as_utc(value) if value is not None else None


class TenantRepository(BaseRepository[User]):
    """
    Repository for the tenant aggregate (User rows with their tenancy columns).

    Writes are version-checked: save() fails with ConcurrentUpdateException
    when the row changed after it was loaded, closing the check-then-act race
    on "tenant is currently unassigned".
    """

    def __init__(self, db: AsyncSession):
        super().__init__(db, User)

    async def find_by_id(self, tenant_id: str) -> TenantEntity | None:
        """Load the tenant aggregate"""
        user = await self.get_by_id(tenant_id)
        if user is None:
            return None
        return self._to_entity(user)

    async def save(self, tenant: TenantEntity) -> TenantEntity:
        """
        Persist the tenancy state of a tenant loaded at tenant.version.

        Raises:
            ConcurrentUpdateException: If another writer saved the tenant first
            ConflictException: If the unit is already held by another tenant
        """
        if isinstance(tenant.tenancy, Assigned):
            values = {
                "unit_id": tenant.tenancy.unit_id,
                "contract_start": tenant.tenancy.contract_start,
                "contract_end": tenant.tenancy.contract_end,
            }
        else:
            values = {"unit_id": None, "contract_start": None, "contract_end": None}

        if tenant.updated_at is not None:
            values["updated_at"] = tenant.updated_at

        try:
            updated = await self._compare_and_swap(tenant.id, tenant.version, values)
        except IntegrityError as e:
            logger.warning("Tenancy write for tenant %s rejected by constraint: %s", tenant.id, e.orig)
            raise ConflictException(
                "Unit is already assigned to another tenant",
                {"tenant_id": tenant.id, "unit_id": tenant.unit_id},
            ) from e

        if not updated:
            raise ConcurrentUpdateException("Tenant", tenant.id)

        tenant.version += 1
        return tenant

    async def get_tenancy_record(self, tenant_id: str) -> TenancyRecord | None:
        """Persisted tenancy columns as stored (read model)"""
        user = await self.get_by_id(tenant_id)
        if user is None:
            return None
        return self._to_record(user)

    async def list_assigned(self) -> list[TenancyRecord]:
        """Every active tenant currently holding a unit"""
        result = await self.db.execute(
            select(User)
            .where(User.unit_id.is_not(None), User.is_active.is_(True))
            .order_by(User.contract_end)
        )
        return [self._to_record(user) for user in result.scalars().all()]

    @staticmethod
    def _to_tenancy(user: User) -> Tenancy:
        if user.unit_id and user.contract_start and user.contract_end:
            return Assigned(
                unit_id=user.unit_id,
                contract_start=as_utc(user.contract_start),
                contract_end=as_utc(user.contract_end),
            )
        if user.unit_id or user.contract_start or user.contract_end:
            logger.error("Tenant %s has incomplete tenancy columns", user.id)
        return UNASSIGNED

    def _to_entity(self, user: User) -> TenantEntity:
        return TenantEntity(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            phone=user.phone,
            role=UserRole(user.role),
            is_active=user.is_active,
            tenancy=self._to_tenancy(user),
            version=user.version,
            created_at=_aware(user.created_at),
            updated_at=_aware(user.updated_at),
        )

    @staticmethod
    def _to_record(user: User) -> TenancyRecord:
        return TenancyRecord(
            tenant_id=user.id,
            full_name=user.full_name,
            email=user.email,
            phone=user.phone,
            role=UserRole(user.role),
            is_active=user.is_active,
            unit_id=user.unit_id,
            contract_start=_aware(user.contract_start),
            contract_end=_aware(user.contract_end),
        )
