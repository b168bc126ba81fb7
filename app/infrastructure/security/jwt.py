"""
Bearer token handling.

Tokens carry the user id (`sub`) and the user's role. Issuing tokens to end
users happens elsewhere; create_access_token exists for service-to-service
calls and tests.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt

from app.domain.enums import UserRole
from app.domain.exceptions import AuthenticationException
from app.domain.value_objects.contract_window import utc_now
from app.infrastructure.config.settings import get_settings


@dataclass(frozen=True)
class AccessClaims:
    """Identity of the caller as proven by a verified token"""

    user_id: str
    role: UserRole
    expires_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def create_access_token(
    user_id: str, role: UserRole, expires_delta: timedelta | None = None
) -> str:
    settings = get_settings()
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims = {"sub": user_id, "role": role.value, "exp": utc_now() + lifetime}
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def verify_token(token: str) -> AccessClaims:
    """
    Decode a token and extract the caller's claims.

    Raises:
        AuthenticationException: If the signature is invalid, the token has
            expired, or a required claim is missing or unknown
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError as e:
        raise AuthenticationException("Token has expired") from e
    except JWTError as e:
        raise AuthenticationException(f"Invalid token: {e}") from e

    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise AuthenticationException("Token has no subject")

    try:
        role = UserRole(payload.get("role"))
    except ValueError as e:
        raise AuthenticationException(f"Unknown role claim: {payload.get('role')!r}") from e

    expires = payload.get("exp")
    if not isinstance(expires, int | float):
        raise AuthenticationException("Token has no expiry")

    return AccessClaims(
        user_id=user_id,
        role=role,
        expires_at=datetime.fromtimestamp(expires, tz=UTC),
    )
