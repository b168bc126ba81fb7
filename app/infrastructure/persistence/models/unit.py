from typing import Any

from sqlalchemy import JSON, Boolean, CheckConstraint, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import UnitStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AggregateModel


class Unit(AggregateModel, Base):
    """
    Rentable unit (department).

    Inherits from AggregateModel:
        - id: CUID primary key
        - created_at / updated_at: Timestamps
        - version: Optimistic concurrency token

    current_tenant_id mirrors app_user.unit_id and is written in the same
    transaction as the tenant assignment.
    """

    __tablename__ = "unit"

    code: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(
        String, nullable=False, default=UnitStatus.AVAILABLE.value, index=True
    )
    monthly_price: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False))

    # Display data, read-only for tenancy
    address: Mapped[dict[str, Any] | None] = mapped_column(JSON)
    features: Mapped[dict[str, Any] | None] = mapped_column(JSON)
    inventory: Mapped[list[dict[str, Any]] | None] = mapped_column(JSON)
    images: Mapped[list[str] | None] = mapped_column(JSON)

    current_tenant_id: Mapped[str | None] = mapped_column(String, index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint(f"status IN {tuple(UnitStatus.values())}", name="unit_status_check"),
    )
