"""Domain enumerations for the rental tenancy service."""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user account"""

    TENANT = "tenant"
    ADMIN = "admin"

    @classmethod
    def values(cls) -> list[str]:
        """Get all valid values"""
        return [role.value for role in cls]


class UnitStatus(str, Enum):
    """Occupancy status of a rentable unit (department)"""

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"

    @classmethod
    def values(cls) -> list[str]:
        """Get all valid values"""
        return [status.value for status in cls]


class ContractAlertType(str, Enum):
    CONTRACT_EXPIRED = "contract_expired"
    CONTRACT_EXPIRING = "contract_expiring"
    RENEWAL_REMINDER = "renewal_reminder"


class ContractAlertSeverity(str, Enum):
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"
