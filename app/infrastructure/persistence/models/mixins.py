"""
SQLAlchemy mixins for common model patterns.

These mixins provide reusable column definitions to follow DRY principles
and ensure consistency across all models.
"""
from datetime import datetime

from cuid2 import cuid_wrapper
from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

# Collision-resistant primary keys
generate_id = cuid_wrapper()


class CuidMixin:
    """
    Mixin for models using CUID as primary key.

    Provides:
        - id: String primary key with automatic CUID generation
    """

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_id)


class TimestampMixin:
    """
    Mixin for timestamp tracking.

    Provides:
        - created_at: Timestamp set on creation (server-side default)
        - updated_at: Timestamp updated on modification (server-side default + onupdate)

    Note: Uses timezone-aware DateTime for consistency
    """

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class VersionedMixin:
    """
    Optimistic locking with version tracking.

    Provides:
        - version: Integer counter incremented on each write

    Writes go through BaseRepository._compare_and_swap(), which only updates
    the row when the version still matches the one that was loaded:

        UPDATE ... WHERE id = :id AND version = :loaded_version
        SET ..., version = :loaded_version + 1

    Zero affected rows means another writer got there first.
    """

    @declared_attr
    def version(cls) -> Mapped[int]:
        return mapped_column(Integer, default=1, nullable=False)


class AggregateModel(CuidMixin, TimestampMixin, VersionedMixin):
    """
    Complete mixin for aggregate roots.

    Combines:
        - CuidMixin: CUID primary key
        - TimestampMixin: Created/updated timestamps
        - VersionedMixin: Optimistic concurrency token
    """

    __abstract__ = True
