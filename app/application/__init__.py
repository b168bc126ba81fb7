"""
Application layer - Application Business Rules.

This layer contains application-specific business rules, including:
- Interfaces (ports) for infrastructure dependencies
- Use cases that orchestrate domain logic
- Input validation run before any use case touches storage
"""

from app.application.interfaces import ITenantRepository, IUnitRepository
from app.application.use_cases import (
    AssignTenancyUseCase,
    GetTenantUnitUseCase,
    ListContractAlertsUseCase,
    UnassignTenancyUseCase,
)

__all__ = [
    # Interfaces
    "ITenantRepository",
    "IUnitRepository",
    # Use Cases
    "AssignTenancyUseCase",
    "UnassignTenancyUseCase",
    "GetTenantUnitUseCase",
    "ListContractAlertsUseCase",
]
