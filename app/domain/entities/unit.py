"""
Unit (department) domain entity.

Only the occupancy part of a unit matters to tenancy assignment; display
data such as address, features and inventory is read-only here.
"""

from dataclasses import dataclass

from app.domain.enums import UnitStatus
from app.domain.exceptions import UnitUnavailableError


@dataclass
class UnitEntity:
    """Domain entity for a rentable unit's occupancy"""

    id: str
    code: str
    name: str
    status: UnitStatus
    current_tenant_id: str | None = None
    is_active: bool = True
    version: int = 1

    def is_available(self) -> bool:
        """Business rule: only active, available units can be let"""
        return self.is_active and self.status == UnitStatus.AVAILABLE

    def occupy(self, tenant_id: str) -> None:
        """
        Mark the unit as occupied by a tenant.

        Raises:
            UnitUnavailableError: If the unit is inactive, occupied or under maintenance
        """
        if not self.is_available():
            status = self.status.value if self.is_active else "inactive"
            raise UnitUnavailableError(self.id, status)
        self.status = UnitStatus.OCCUPIED
        self.current_tenant_id = tenant_id

    def release(self, tenant_id: str) -> bool:
        """
        Free the unit if it is held by the given tenant.

        A unit under maintenance keeps that status.

        Returns:
            True if the occupancy changed, False if the unit was not held by tenant_id
        """
        if self.current_tenant_id != tenant_id:
            return False
        self.current_tenant_id = None
        if self.status == UnitStatus.OCCUPIED:
            self.status = UnitStatus.AVAILABLE
        return True
