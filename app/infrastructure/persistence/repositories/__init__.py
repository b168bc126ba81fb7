""" Repository module for the persistence layer. """

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.tenant_repo import TenantRepository
from app.infrastructure.persistence.repositories.unit_repo import UnitRepository

__all__ = [
    "BaseRepository",
    "TenantRepository",
    "UnitRepository",
]
