"""Classification of contract health into renewal / expiry alerts."""

from app.domain.enums import ContractAlertSeverity, ContractAlertType
from app.domain.value_objects.contract_window import EXPIRING_SOON_DAYS, ContractWindow

CRITICAL_THRESHOLD_DAYS = 7
DEFAULT_REMINDER_HORIZON_DAYS = 90


def classify_contract_window(
    window: ContractWindow, horizon_days: int = DEFAULT_REMINDER_HORIZON_DAYS
) -> tuple[ContractAlertType, ContractAlertSeverity] | None:
    """
    Map a contract window to an alert type and severity.

    Returns None when the contract ends beyond the reminder horizon.
    """
    days = window.days_until_expiry

    if window.is_expired:
        return ContractAlertType.CONTRACT_EXPIRED, ContractAlertSeverity.CRITICAL
    if days <= CRITICAL_THRESHOLD_DAYS:
        return ContractAlertType.CONTRACT_EXPIRING, ContractAlertSeverity.CRITICAL
    if days <= EXPIRING_SOON_DAYS:
        return ContractAlertType.CONTRACT_EXPIRING, ContractAlertSeverity.HIGH
    if days <= horizon_days:
        return ContractAlertType.RENEWAL_REMINDER, ContractAlertSeverity.MEDIUM
    return None


def describe_contract_alert(alert_type: ContractAlertType, days_until_expiry: int) -> str:
    """Human-readable alert message"""
    if alert_type == ContractAlertType.CONTRACT_EXPIRED:
        return f"Contract expired {abs(days_until_expiry)} day(s) ago"
    if alert_type == ContractAlertType.CONTRACT_EXPIRING:
        unit = "day" if days_until_expiry == 1 else "days"
        return f"Contract expires in {days_until_expiry} {unit}"
    return f"Contract expires in {days_until_expiry} days, plan the renewal"
