from app.infrastructure.persistence.models.mixins import (AggregateModel,
                                                          CuidMixin,
                                                          TimestampMixin,
                                                          VersionedMixin)
from app.infrastructure.persistence.models.unit import Unit
from app.infrastructure.persistence.models.user import User

__all__ = [
    # Models
    "User",
    "Unit",
    # Mixins
    "CuidMixin",
    "TimestampMixin",
    "VersionedMixin",
    "AggregateModel",
]
