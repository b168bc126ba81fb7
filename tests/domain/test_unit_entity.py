"""Tests for unit occupancy rules"""

import pytest

from app.domain.entities import UnitEntity
from app.domain.enums import UnitStatus
from app.domain.exceptions import UnitUnavailableError


def _unit(**overrides) -> UnitEntity:
    fields = {"id": "unit-1", "code": "A-1", "name": "Apartment 1", "status": UnitStatus.AVAILABLE}
    fields.update(overrides)
    return UnitEntity(**fields)


def test_occupy_available_unit():
    unit = _unit()

    unit.occupy("tenant-1")

    assert unit.status == UnitStatus.OCCUPIED
    assert unit.current_tenant_id == "tenant-1"


@pytest.mark.parametrize("status", [UnitStatus.OCCUPIED, UnitStatus.MAINTENANCE])
def test_occupy_unavailable_unit_rejected(status):
    unit = _unit(status=status)

    with pytest.raises(UnitUnavailableError) as exc_info:
        unit.occupy("tenant-1")

    assert exc_info.value.details == {"unit_id": "unit-1", "status": status.value}


def test_occupy_inactive_unit_rejected():
    unit = _unit(is_active=False)

    with pytest.raises(UnitUnavailableError) as exc_info:
        unit.occupy("tenant-1")

    assert exc_info.value.details["status"] == "inactive"
    assert unit.status == UnitStatus.AVAILABLE


def test_release_by_holder_frees_unit():
    unit = _unit(status=UnitStatus.OCCUPIED, current_tenant_id="tenant-1")

    assert unit.release("tenant-1") is True
    assert unit.status == UnitStatus.AVAILABLE
    assert unit.current_tenant_id is None


def test_release_keeps_maintenance_status():
    unit = _unit(status=UnitStatus.MAINTENANCE, current_tenant_id="tenant-1")

    assert unit.release("tenant-1") is True
    assert unit.status == UnitStatus.MAINTENANCE


def test_release_by_other_tenant_is_ignored():
    unit = _unit(status=UnitStatus.OCCUPIED, current_tenant_id="tenant-1")

    assert unit.release("tenant-2") is False
    assert unit.status == UnitStatus.OCCUPIED
    assert unit.current_tenant_id == "tenant-1"
