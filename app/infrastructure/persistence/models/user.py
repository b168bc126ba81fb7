from datetime import datetime

from sqlalchemy import (Boolean, CheckConstraint, DateTime, ForeignKey, String,
                        UniqueConstraint)
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import UserRole
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AggregateModel


class User(AggregateModel, Base):
    """
    User account (admin or tenant) with its embedded tenancy assignment.

    Inherits from AggregateModel:
        - id: CUID primary key
        - created_at / updated_at: Timestamps
        - version: Optimistic concurrency token

    The three assignment columns are either all NULL (unassigned) or all set
    with contract_end > contract_start, and only tenants may hold a unit.
    unit_id is unique: a unit is held by at most one tenant.
    """

    __tablename__ = "app_user"

    email: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    full_name: Mapped[str] = mapped_column(String, nullable=False)
    phone: Mapped[str | None] = mapped_column(String)
    role: Mapped[str] = mapped_column(
        String, nullable=False, default=UserRole.TENANT.value, index=True
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    # Tenancy assignment
    unit_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("unit.id", ondelete="RESTRICT"), nullable=True
    )
    contract_start: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    contract_end: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    __table_args__ = (
        UniqueConstraint("unit_id", name="uq_app_user_unit"),
        CheckConstraint(f"role IN {tuple(UserRole.values())}", name="app_user_role_check"),
        CheckConstraint(
            "(unit_id IS NULL AND contract_start IS NULL AND contract_end IS NULL) OR "
            "(unit_id IS NOT NULL AND contract_start IS NOT NULL AND contract_end IS NOT NULL "
            "AND contract_end > contract_start)",
            name="app_user_tenancy_complete_check",
        ),
        CheckConstraint(
            f"unit_id IS NULL OR role = '{UserRole.TENANT.value}'",
            name="app_user_tenancy_role_check",
        ),
    )
