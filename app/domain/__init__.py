"""
Domain layer - Enterprise Business Rules.

This is the innermost layer containing business entities, value objects,
and domain exceptions. It has no dependencies on other layers.
"""

from app.domain.entities import TenantEntity, UnitEntity
from app.domain.enums import ContractAlertSeverity, ContractAlertType, UnitStatus, UserRole
from app.domain.exceptions import (
    AlreadyAssignedError,
    AssignmentError,
    AuthenticationException,
    AuthorizationException,
    ConcurrentUpdateException,
    ConflictException,
    InvalidRangeError,
    MinimumDurationError,
    NotAssignedError,
    PastStartDateError,
    RentalException,
    ResourceNotFoundException,
    RoleError,
    UnitUnavailableError,
    ValidationException,
)
from app.domain.value_objects import (
    UNASSIGNED,
    Assigned,
    ContractWindow,
    Tenancy,
    Unassigned,
    compute_contract_window,
)

__all__ = [
    # Entities
    "TenantEntity",
    "UnitEntity",
    # Value Objects
    "ContractWindow",
    "compute_contract_window",
    "Tenancy",
    "Assigned",
    "Unassigned",
    "UNASSIGNED",
    # Enums
    "UserRole",
    "UnitStatus",
    "ContractAlertType",
    "ContractAlertSeverity",
    # Exceptions
    "RentalException",
    "ValidationException",
    "AuthenticationException",
    "AuthorizationException",
    "ResourceNotFoundException",
    "ConflictException",
    "ConcurrentUpdateException",
    "AssignmentError",
    "RoleError",
    "AlreadyAssignedError",
    "InvalidRangeError",
    "PastStartDateError",
    "MinimumDurationError",
    "NotAssignedError",
    "UnitUnavailableError",
]
