"""
JWT token helpers.

Issues and verifies HS256 access tokens whose subject is the
user id.
"""

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError


class JWTConfig(BaseModel):
    """JWT signing configuration."""

    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 15


class TokenData(BaseModel):
    """Decoded token claims."""

    sub: str
    type: str
    exp: datetime


def _create_token(subject: str, token_type: str, expires_delta: timedelta, config: JWTConfig) -> str:
    payload = {
        "sub": subject,
        "type": token_type,
        "exp": datetime.now(UTC) + expires_delta,
    }
    return jwt.encode(payload, config.secret_key, algorithm=config.algorithm)


def create_access_token(subject: str, config: JWTConfig) -> str:
    """
    Create a short-lived access token.

    Args:
        subject: User identifier.
        config: JWT configuration.

    Returns:
        Encoded token.
    """
    return _create_token(
        subject, "access", timedelta(minutes=config.access_token_expire_minutes), config
    )


def verify_token(token: str, config: JWTConfig) -> TokenData | None:
    """
    Verify a token signature and expiry.

    Args:
        token: Encoded token.
        config: JWT configuration.

    Returns:
        Decoded claims, or None if the token is invalid or expired.
    """
    try:
        payload = jwt.decode(token, config.secret_key, algorithms=[config.algorithm])
        return TokenData.model_validate(payload)
    except (JWTError, ValidationError):
        return None
