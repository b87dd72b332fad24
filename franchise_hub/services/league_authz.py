"""Authorization helpers for user-scoped and league-management endpoints."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_hub.config import settings
from franchise_hub.schemas.leagues import League
from franchise_hub.services.league_service import get_league_by_id, user_has_league_access
from franchise_hub.utils.api_response import ApiError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def decode_user_id(token: str) -> UUID:
    """Return the user UUID carried in an identity-provider access token.

    Raises:
        ApiError(401) for an expired, forged or malformed token.
    """
    if not settings.auth_jwt_secret:
        logger.error("AUTH_JWT_SECRET is not configured; rejecting bearer token")
        raise ApiError.unauthorized()
    try:
        claims = jwt.decode(
            token,
            settings.auth_jwt_secret,
            algorithms=[settings.auth_jwt_algorithm],
            audience=settings.auth_jwt_audience,
        )
        return UUID(str(claims["sub"]))
    except (JWTError, KeyError, ValueError):
        raise ApiError.unauthorized("Invalid or expired token") from None


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UUID:
    """Resolve the signed-in user from the ``Authorization`` header (or raise 401)."""
    if credentials is None or not credentials.credentials:
        raise ApiError.unauthorized()
    return decode_user_id(credentials.credentials)


async def require_league_access(
    db: AsyncSession, *, user_id: UUID, league_id: UUID
) -> League:
    """Load a league the user owns or belongs to (raises 404/403)."""
    league = await get_league_by_id(db, league_id)
    if league is None:
        raise ApiError.not_found("League not found")
    if not await user_has_league_access(db, league, user_id):
        raise ApiError.forbidden()
    return league


async def require_league_owner(
    db: AsyncSession, *, user_id: UUID, league_id: UUID
) -> League:
    league = await get_league_by_id(db, league_id)
    if league is None:
        raise ApiError.not_found("League not found")
    if league.owner_id != user_id:
        raise ApiError.forbidden("Only the league owner can change this league")
    return league
