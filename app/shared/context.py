"""
Request context management using contextvars.

Provides async-safe storage for request-scoped data such as the
correlation id, readable from any code (including log records) without
passing the request around.
"""

from contextvars import ContextVar

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="-")


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation id for the current request."""
    _correlation_id.set(correlation_id)


def get_correlation_id() -> str:
    """Get the correlation id for the current request ("-" outside a request)."""
    return _correlation_id.get()
