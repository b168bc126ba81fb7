from abc import ABC
from typing import Any, Generic, TypeVar

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(ABC, Generic[ModelType]):
    """
    Base repository implementing common persistence operations (LSP).

    Aggregate writes go through _compare_and_swap() so a stale writer is
    detected instead of silently overwriting a newer version.
    Subclasses may override the _on_after_write hook (e.g. cache invalidation).
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]):
        self.db = db
        self.model = model

    async def get_by_id(self, id: str) -> ModelType | None:
        """Get a single record by ID, refreshing any stale identity-map copy"""
        # Cast to Any for SQLAlchemy dynamic attribute access (id comes from CuidMixin)
        model: Any = self.model
        result = await self.db.execute(
            select(self.model)
            .where(model.id == id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def create(self, obj: ModelType) -> ModelType:
        """Create a new record"""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def _compare_and_swap(
        self, id: str, expected_version: int, values: dict[str, Any]
    ) -> bool:
        """
        Update a row only if its version still equals expected_version.

        Returns:
            True if the row was updated (version is now expected_version + 1),
            False if the row is missing or was changed by another writer.
        """
        model: Any = self.model
        result = await self.db.execute(
            update(self.model)
            .where(model.id == id, model.version == expected_version)
            .values(**values, version=expected_version + 1)
            .execution_options(synchronize_session=False)
        )
        updated = result.rowcount == 1
        if updated:
            await self._on_after_write(id)
        return updated

    # Hooks - override in subclasses
    async def _on_after_write(self, id: str) -> None:
        """Hook called after a successful write. Override to invalidate caches."""
        pass
