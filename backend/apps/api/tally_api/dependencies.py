"""
FastAPI dependencies.

Provides dependency injection for database sessions, authentication, and services.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from tally_core.auth import JWTConfig, verify_token
from tally_core.schemas import UserResponse
from tally_core.services import FeedService, UnreadStatsService
from tally_database.models import User
from tally_database.session import get_session

from .config import settings

# Security scheme for JWT bearer tokens
security = HTTPBearer(auto_error=False)


def get_jwt_config() -> JWTConfig:
    """
    Get JWT configuration.

    Returns:
        JWT configuration instance.
    """
    return JWTConfig(
        secret_key=settings.secret_key,
        algorithm=settings.jwt_algorithm,
        access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
    )


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    session: Annotated[AsyncSession, Depends(get_session)],
    jwt_config: Annotated[JWTConfig, Depends(get_jwt_config)],
) -> UserResponse:
    """
    Get current authenticated user from JWT token.

    Args:
        credentials: HTTP bearer credentials.
        session: Database session.
        jwt_config: JWT configuration.

    Returns:
        Current user information.

    Raises:
        HTTPException: If token is missing or invalid, or user not found.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    token_data = verify_token(credentials.credentials, jwt_config)
    if not token_data or token_data.type != "access" or not token_data.sub.isdigit():
        raise _unauthorized("Invalid authentication credentials")

    user = await session.get(User, int(token_data.sub))
    if user is None or not user.is_active:
        raise _unauthorized("User not found")

    return UserResponse.model_validate(user)


# Service dependencies
def get_feed_service(session: Annotated[AsyncSession, Depends(get_session)]) -> FeedService:
    """Get feed service instance."""
    return FeedService(session)


def get_unread_stats_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> UnreadStatsService:
    """Get unread statistics service instance."""
    return UnreadStatsService.from_session(session)
