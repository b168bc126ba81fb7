"""Security infrastructure - JWT handling."""

from app.infrastructure.security.jwt import AccessClaims, create_access_token, verify_token

__all__ = [
    "AccessClaims",
    "create_access_token",
    "verify_token",
]
