"""
Domain exceptions for the rental tenancy service.

This module defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns.
"""

from typing import Any


class RentalException(Exception):
    """
    Base exception for all application errors.

    All custom exceptions should inherit from this class to allow
    for consistent error handling and logging.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error code for API responses
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(RentalException):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(RentalException):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(RentalException):
    """Raised when the caller lacks the required role."""

    def __init__(self, resource: str, action: str):
        message = f"Permission denied: {action} on {resource}"
        super().__init__(message, "AUTHORIZATION_ERROR", {"resource": resource, "action": action})


class ResourceNotFoundException(RentalException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str, message: str | None = None):
        super().__init__(
            message or f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ConflictException(RentalException):
    """Raised when a well-formed request violates a business rule given current state."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, "CONFLICT", details)


class ConcurrentUpdateException(ConflictException):
    """Raised when a record changed between load and write (optimistic lock failure)."""

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} {resource_id} was modified concurrently, reload and retry",
            {"resource_type": resource_type, "resource_id": resource_id},
        )
        self.error_code = "CONCURRENT_UPDATE"


# Tenancy assignment errors raised by the aggregates themselves
class AssignmentError(RentalException):
    """Base class for rejected tenancy state transitions."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, "ASSIGNMENT_ERROR", details)


class RoleError(AssignmentError):
    """Only users with the tenant role may hold a unit."""

    def __init__(self, role: str):
        super().__init__(f"Only tenants can be assigned a unit (role: {role})", {"role": role})


class AlreadyAssignedError(AssignmentError):
    """Tenant already holds a unit; it must be unassigned first."""

    def __init__(self, unit_id: str):
        super().__init__(
            f"Tenant is already assigned to unit {unit_id}; unassign it first",
            {"unit_id": unit_id},
        )


class InvalidRangeError(AssignmentError):
    def __init__(self) -> None:
        super().__init__("Contract end date must be after the start date")


class PastStartDateError(AssignmentError):
    def __init__(self) -> None:
        super().__init__("Contract start date cannot be in the past")


class MinimumDurationError(AssignmentError):
    def __init__(self, minimum_days: int):
        super().__init__(
            f"Contract must last at least {minimum_days} days",
            {"minimum_days": minimum_days},
        )


class NotAssignedError(AssignmentError):
    def __init__(self) -> None:
        super().__init__("Tenant has no unit assigned")


class UnitUnavailableError(AssignmentError):
    """Unit cannot be occupied in its current state."""

    def __init__(self, unit_id: str, status: str):
        super().__init__(
            f"Unit {unit_id} is not available (status: {status})",
            {"unit_id": unit_id, "status": status},
        )
