"""User-scoped import endpoints: ``/api/{user_id}/{platform}/{league_id}/...``.

These require a bearer token whose subject is ``user_id`` and who owns or
belongs to the league. The router is mounted after every ``/api/leagues``
router since its first segment is a path parameter.
"""

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_hub.models.fields import Platform
from franchise_hub.schemas.leagues import League
from franchise_hub.services import import_service
from franchise_hub.services.league_authz import get_current_user_id, require_league_access
from franchise_hub.utils.api_response import ApiError, success_response
from franchise_hub.utils.db_async import get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/{user_id}/{platform}/{league_id}", tags=["imports"])


async def _authorized_league(
    db: AsyncSession, *, current_user_id: UUID, user_id: UUID, league_id: UUID
) -> League:
    if current_user_id != user_id:
        raise ApiError.forbidden("You do not have permission to access this league")
    return await require_league_access(db, user_id=user_id, league_id=league_id)


@router.post("/leagueroster")
async def import_league_roster(
    user_id: UUID,
    platform: Platform,
    league_id: UUID,
    payload: Any = Body(...),
    current_user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    league = await _authorized_league(
        db, current_user_id=current_user_id, user_id=user_id, league_id=league_id
    )
    logger.info(f"Roster for {league.league_identifier} from {platform.value}")
    result = await import_service.import_roster(db, league, payload, allow_bare=False)
    return success_response(result)


@router.post("/leagueteams")
async def import_league_teams(
    user_id: UUID,
    platform: Platform,
    league_id: UUID,
    payload: Any = Body(...),
    current_user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    league = await _authorized_league(
        db, current_user_id=current_user_id, user_id=user_id, league_id=league_id
    )
    logger.info(f"Teams for {league.league_identifier} from {platform.value}")
    result = await import_service.import_teams(db, league, payload, allow_bare=False)
    return success_response(result)
