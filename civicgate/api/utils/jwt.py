from datetime import UTC, datetime
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig
from civicgate.domain.entities import ActorType


def create_session_token(session_id: UUID, actor_type: ActorType, expires_at: datetime) -> str:
    """
    Sign the session cookie value.

    Args:
        session_id: Server-side session UUID
        actor_type: Account-type marker written at login
        expires_at: Naive UTC expiry of the session

    Returns:
        JWT token string (HS256)
    """
    payload = {
        "sid": str(session_id),
        "typ": actor_type.value,
        "exp": expires_at.replace(tzinfo=UTC),
        "iat": datetime.now(UTC),
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None
