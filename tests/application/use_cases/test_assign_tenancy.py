"""Unit tests for AssignTenancyUseCase"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.tenancy import AssignTenancyCommand
from app.application.use_cases.tenancy import AssignTenancyUseCase
from app.domain.entities import TenantEntity, UnitEntity
from app.domain.enums import UnitStatus, UserRole
from app.domain.exceptions import (
    ConcurrentUpdateException,
    ConflictException,
    ResourceNotFoundException,
    ValidationException,
)
from app.domain.value_objects.tenancy import UNASSIGNED, Assigned

NOW = datetime(2025, 3, 10, 9, 0, tzinfo=UTC)
START = NOW + timedelta(days=1)
END = START + timedelta(days=365)


@pytest.fixture
def tenant():
    return TenantEntity(
        id="tenant-1", email="tenant@example.com", full_name="Test Tenant", role=UserRole.TENANT
    )


@pytest.fixture
def unit():
    return UnitEntity(id="unit-1", code="A-1", name="Apartment 1", status=UnitStatus.AVAILABLE)


@pytest.fixture
def mock_tenant_repo(tenant):
    repo = AsyncMock()
    repo.find_by_id = AsyncMock(return_value=tenant)
    repo.save = AsyncMock(side_effect=lambda t: t)
    return repo


@pytest.fixture
def mock_unit_repo(unit):
    repo = AsyncMock()
    repo.find_by_id = AsyncMock(return_value=unit)
    repo.save = AsyncMock(side_effect=lambda u: u)
    return repo


@pytest.fixture
def use_case(mock_tenant_repo, mock_unit_repo):
    return AssignTenancyUseCase(mock_tenant_repo, mock_unit_repo)


def _command(**overrides) -> AssignTenancyCommand:
    fields = {"tenant_id": "tenant-1", "unit_id": "unit-1", "contract_start": START, "contract_end": END}
    fields.update(overrides)
    return AssignTenancyCommand(**fields)


@pytest.mark.asyncio
async def test_assign_success(use_case, mock_tenant_repo, mock_unit_repo, unit):
    result = await use_case.execute(_command(), now=NOW)

    assert result.tenancy == Assigned(unit_id="unit-1", contract_start=START, contract_end=END)
    assert unit.status == UnitStatus.OCCUPIED
    assert unit.current_tenant_id == "tenant-1"
    mock_tenant_repo.save.assert_awaited_once()
    mock_unit_repo.save.assert_awaited_once_with(unit)


@pytest.mark.asyncio
async def test_validation_runs_before_any_lookup(use_case, mock_tenant_repo):
    with pytest.raises(ValidationException):
        await use_case.execute(_command(contract_end=START - timedelta(days=1)), now=NOW)

    mock_tenant_repo.find_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_two_week_contract_rejected(use_case, mock_tenant_repo, mock_unit_repo):
    """2025-01-01 to 2025-01-15 is shorter than the 30 day minimum"""
    command = _command(
        contract_start=datetime(2025, 1, 1, tzinfo=UTC),
        contract_end=datetime(2025, 1, 15, tzinfo=UTC),
    )

    with pytest.raises(ValidationException) as exc_info:
        await use_case.execute(command, now=datetime(2025, 1, 1, tzinfo=UTC))

    assert exc_info.value.details == {"field": "contract_end"}
    mock_tenant_repo.save.assert_not_called()
    mock_unit_repo.save.assert_not_called()


@pytest.mark.asyncio
async def test_missing_unit_id_rejected(use_case):
    with pytest.raises(ValidationException) as exc_info:
        await use_case.execute(_command(unit_id="  "), now=NOW)

    assert exc_info.value.details == {"field": "unit_id"}


@pytest.mark.asyncio
async def test_unknown_tenant(use_case, mock_tenant_repo, mock_unit_repo):
    mock_tenant_repo.find_by_id.return_value = None

    with pytest.raises(ResourceNotFoundException) as exc_info:
        await use_case.execute(_command(), now=NOW)

    assert exc_info.value.details["resource_type"] == "Tenant"
    mock_unit_repo.find_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_inactive_tenant_rejected(use_case, tenant, mock_tenant_repo):
    tenant.is_active = False

    with pytest.raises(ConflictException) as exc_info:
        await use_case.execute(_command(), now=NOW)

    assert exc_info.value.message == "Cannot assign a unit to an inactive tenant"
    mock_tenant_repo.save.assert_not_called()


@pytest.mark.asyncio
async def test_admin_cannot_be_assigned(use_case, tenant):
    tenant.role = UserRole.ADMIN

    with pytest.raises(ConflictException) as exc_info:
        await use_case.execute(_command(), now=NOW)

    assert exc_info.value.message == "Only users with role 'tenant' can be assigned a unit"


@pytest.mark.asyncio
async def test_already_assigned_tenant_rejected(use_case, tenant, mock_unit_repo):
    tenant.tenancy = Assigned(unit_id="unit-9", contract_start=START, contract_end=END)

    with pytest.raises(ConflictException) as exc_info:
        await use_case.execute(_command(), now=NOW)

    assert "unit-9" in exc_info.value.message
    assert "Unassign the current unit first" in exc_info.value.message
    mock_unit_repo.find_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_unit(use_case, mock_unit_repo, tenant):
    mock_unit_repo.find_by_id.return_value = None

    with pytest.raises(ResourceNotFoundException) as exc_info:
        await use_case.execute(_command(), now=NOW)

    assert exc_info.value.details["resource_type"] == "Unit"
    assert tenant.tenancy is UNASSIGNED


@pytest.mark.asyncio
async def test_occupied_unit_rejected(use_case, unit, mock_tenant_repo):
    unit.status = UnitStatus.OCCUPIED
    unit.current_tenant_id = "tenant-2"

    with pytest.raises(ConflictException) as exc_info:
        await use_case.execute(_command(), now=NOW)

    assert exc_info.value.details == {"unit_id": "unit-1", "status": "occupied"}
    mock_tenant_repo.save.assert_not_called()


@pytest.mark.asyncio
async def test_concurrent_write_propagates(use_case, mock_tenant_repo, mock_unit_repo):
    mock_tenant_repo.save.side_effect = ConcurrentUpdateException("Tenant", "tenant-1")

    with pytest.raises(ConcurrentUpdateException):
        await use_case.execute(_command(), now=NOW)

    mock_unit_repo.save.assert_not_called()
