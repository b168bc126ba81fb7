"""Shared test fixtures for pytest"""
import os

# Settings are read once at import time; configure them before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-pytest-only")
os.environ["REDIS_ENABLED"] = "false"

from datetime import timedelta  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.domain.enums import UnitStatus, UserRole  # noqa: E402
from app.domain.value_objects.contract_window import utc_now  # noqa: E402
from app.infrastructure.persistence import models  # noqa: E402,F401  registers tables
from app.infrastructure.persistence.database import (  # noqa: E402
    Base,
    discard_after_commit,
    get_db,
    get_db_transactional,
    run_after_commit,
)
from app.infrastructure.persistence.models import Unit, User  # noqa: E402
from app.infrastructure.security.jwt import create_access_token  # noqa: E402
from app.main import app  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """In-memory database shared by every session of one test"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def test_db(test_engine):
    """Create test database session"""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
async def client(test_db):
    """HTTP client for API testing"""

    async def override_get_db():
        yield test_db

    async def override_get_db_transactional():
        try:
            yield test_db
            await test_db.commit()
        except Exception:
            discard_after_commit(test_db)
            await test_db.rollback()
            raise
        await run_after_commit(test_db)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_db_transactional] = override_get_db_transactional

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def test_unit(test_db):
    """Create an available unit"""
    unit = Unit(
        id="unit-101",
        code="A-101",
        name="Apartment 101",
        description="Two bedroom apartment",
        status=UnitStatus.AVAILABLE.value,
        monthly_price=850.0,
        address={"street": "Main St 1", "city": "Kampala"},
        features={"bedrooms": 2, "bathrooms": 1},
        inventory=[{"item": "fridge", "quantity": 1}],
        images=["https://example.com/a-101.jpg"],
    )
    test_db.add(unit)
    await test_db.commit()
    await test_db.refresh(unit)
    return unit


@pytest.fixture
async def second_unit(test_db):
    unit = Unit(id="unit-102", code="A-102", name="Apartment 102")
    test_db.add(unit)
    await test_db.commit()
    await test_db.refresh(unit)
    return unit


@pytest.fixture
async def test_tenant(test_db):
    """Create an unassigned tenant"""
    user = User(
        id="tenant-1",
        email="tenant@example.com",
        full_name="Test Tenant",
        phone="+256700000001",
        role=UserRole.TENANT.value,
        is_active=True,
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def other_tenant(test_db):
    user = User(
        id="tenant-2",
        email="other@example.com",
        full_name="Other Tenant",
        role=UserRole.TENANT.value,
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def test_admin(test_db):
    user = User(
        id="admin-1",
        email="admin@example.com",
        full_name="Test Admin",
        role=UserRole.ADMIN.value,
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def assigned_tenant(test_db, test_tenant, test_unit):
    """Tenant holding test_unit with a contract that ends in 20 days"""
    now = utc_now()
    test_tenant.unit_id = test_unit.id
    test_tenant.contract_start = now - timedelta(days=100)
    test_tenant.contract_end = now + timedelta(days=20)
    test_unit.status = UnitStatus.OCCUPIED.value
    test_unit.current_tenant_id = test_tenant.id
    await test_db.commit()
    await test_db.refresh(test_tenant)
    await test_db.refresh(test_unit)
    return test_tenant


def _headers(user_id: str, role: UserRole) -> dict[str, str]:
    token = create_access_token(user_id, role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(test_admin):
    """Generate auth headers with an admin JWT token"""
    return _headers(test_admin.id, UserRole.ADMIN)


@pytest.fixture
def tenant_headers(test_tenant):
    """Generate auth headers with a tenant JWT token"""
    return _headers(test_tenant.id, UserRole.TENANT)


@pytest.fixture
def other_tenant_headers(other_tenant):
    return _headers(other_tenant.id, UserRole.TENANT)
