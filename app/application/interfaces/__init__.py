"""
Application layer interfaces (ports).

These protocols define the contracts between the application layer
and the infrastructure layer, following the Dependency Inversion Principle.
"""

from app.application.interfaces.repositories import ITenantRepository, IUnitRepository

__all__ = [
    "ITenantRepository",
    "IUnitRepository",
]
