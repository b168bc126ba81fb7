"""Tests for tenant assignment rules"""

from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time

from app.domain.entities import TenantEntity
from app.domain.enums import UserRole
from app.domain.exceptions import (
    AlreadyAssignedError,
    AssignmentError,
    InvalidRangeError,
    MinimumDurationError,
    NotAssignedError,
    PastStartDateError,
    RoleError,
)
from app.domain.value_objects.tenancy import UNASSIGNED, Assigned

NOW = datetime(2025, 3, 10, 15, 30, tzinfo=UTC)


def _tenant(**overrides) -> TenantEntity:
    fields = {
        "id": "tenant-1",
        "email": "tenant@example.com",
        "full_name": "Test Tenant",
        "role": UserRole.TENANT,
    }
    fields.update(overrides)
    return TenantEntity(**fields)


def test_assign_sets_tenancy():
    tenant = _tenant()
    start = NOW + timedelta(days=1)
    end = start + timedelta(days=365)

    tenant.assign("unit-1", start, end, now=NOW)

    assert tenant.tenancy == Assigned(unit_id="unit-1", contract_start=start, contract_end=end)
    assert tenant.is_assigned
    assert tenant.unit_id == "unit-1"
    assert tenant.updated_at == NOW


def test_assign_then_unassign_restores_original_state():
    tenant = _tenant()
    original = _tenant()

    tenant.assign("unit-1", NOW, NOW + timedelta(days=60), now=NOW)
    previous = tenant.unassign(now=NOW)

    assert previous.unit_id == "unit-1"
    assert tenant.tenancy is UNASSIGNED
    assert tenant == original


def test_start_earlier_today_is_allowed():
    """Only the calendar date of the start is compared with today"""
    tenant = _tenant()
    start = NOW.replace(hour=0, minute=0)

    tenant.assign("unit-1", start, start + timedelta(days=30), now=NOW)

    assert tenant.is_assigned


def test_exactly_minimum_duration_is_allowed():
    tenant = _tenant()

    tenant.assign("unit-1", NOW, NOW + timedelta(days=30), now=NOW)

    assert tenant.is_assigned


def test_non_tenant_role_rejected():
    admin = _tenant(role=UserRole.ADMIN)

    with pytest.raises(RoleError):
        admin.assign("unit-1", NOW, NOW + timedelta(days=60), now=NOW)

    assert admin.tenancy is UNASSIGNED


def test_already_assigned_rejected():
    tenant = _tenant()
    tenant.assign("unit-1", NOW, NOW + timedelta(days=60), now=NOW)

    with pytest.raises(AlreadyAssignedError) as exc_info:
        tenant.assign("unit-2", NOW, NOW + timedelta(days=60), now=NOW)

    assert exc_info.value.details == {"unit_id": "unit-1"}
    assert tenant.unit_id == "unit-1"


@pytest.mark.parametrize("end_offset", [timedelta(0), timedelta(days=-1)])
def test_end_not_after_start_rejected(end_offset):
    tenant = _tenant()

    with pytest.raises(InvalidRangeError):
        tenant.assign("unit-1", NOW, NOW + end_offset, now=NOW)


def test_start_in_the_past_rejected():
    tenant = _tenant()
    start = NOW - timedelta(days=1)

    with pytest.raises(PastStartDateError):
        tenant.assign("unit-1", start, start + timedelta(days=90), now=NOW)


def test_contract_shorter_than_minimum_rejected():
    tenant = _tenant()

    with pytest.raises(MinimumDurationError) as exc_info:
        tenant.assign("unit-1", NOW, NOW + timedelta(days=29, hours=23), now=NOW)

    assert exc_info.value.details == {"minimum_days": 30}


def test_first_violated_rule_wins():
    """A non-tenant with invalid dates fails on the role check"""
    admin = _tenant(role=UserRole.ADMIN)

    with pytest.raises(RoleError):
        admin.assign("unit-1", NOW, NOW - timedelta(days=5), now=NOW)

    # Range is checked before the start date
    tenant = _tenant()
    with pytest.raises(InvalidRangeError):
        tenant.assign("unit-1", NOW - timedelta(days=10), NOW - timedelta(days=20), now=NOW)


def test_all_assignment_errors_share_a_base_class():
    tenant = _tenant()

    with pytest.raises(AssignmentError) as exc_info:
        tenant.unassign(now=NOW)

    assert isinstance(exc_info.value, NotAssignedError)
    assert exc_info.value.error_code == "ASSIGNMENT_ERROR"


def test_contract_status_for_assigned_tenant():
    tenant = _tenant()
    tenant.assign("unit-1", NOW, NOW + timedelta(days=40), now=NOW)

    status = tenant.contract_status(NOW + timedelta(days=28))

    assert status is not None
    assert status.is_active is True
    assert status.days_until_expiry == 12
    assert status.is_expiring_soon is True
    assert tenant.has_active_contract(NOW + timedelta(days=41)) is False


def test_contract_status_for_unassigned_tenant_is_none():
    assert _tenant().contract_status(NOW) is None
    assert _tenant().has_active_contract(NOW) is False


@freeze_time("2025-03-10 15:30:00")
def test_assign_defaults_to_current_time():
    tenant = _tenant()

    with pytest.raises(PastStartDateError):
        tenant.assign(
            "unit-1",
            datetime(2025, 3, 9, tzinfo=UTC),
            datetime(2025, 6, 9, tzinfo=UTC),
        )

    tenant.assign("unit-1", datetime(2025, 3, 10, tzinfo=UTC), datetime(2025, 6, 10, tzinfo=UTC))
    assert tenant.updated_at == NOW
