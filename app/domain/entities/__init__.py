"""Domain entities."""

from app.domain.entities.tenant import TenantEntity
from app.domain.entities.unit import UnitEntity

__all__ = [
    "TenantEntity",
    "UnitEntity",
]
