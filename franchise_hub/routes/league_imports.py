"""Companion-app import endpoints addressed by league slug.

The app is pointed at ``/api/leagues/{slug}/import`` and appends its own
resource paths. Every route here is POST-only except the base URL check; other verbs
get a 405 with an ``Allow`` header from the router.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_hub.models.fields import Platform, StatCategory
from franchise_hub.schemas.leagues import League
from franchise_hub.services import import_service
from franchise_hub.services.league_service import get_league_by_slug
from franchise_hub.utils.api_response import ApiError, success_response
from franchise_hub.utils.db_async import get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/leagues/{slug}/import", tags=["imports"])

WEEK_CATEGORIES = (
    "defense",
    "passing",
    "punting",
    "receiving",
    "rushing",
    "kicking",
    "teamstats",
    "schedules",
)


async def _league_for_slug(db: AsyncSession, slug: str) -> League:
    league = await get_league_by_slug(db, slug)
    if league is None:
        logger.warning(f"Import for unknown league slug {slug!r}")
        raise ApiError.not_found(f"League not found with slug: {slug}")
    return league


def _stat_category(segment: str) -> StatCategory:
    try:
        return StatCategory.from_route(segment)
    except ValueError:
        raise ApiError.not_found(f"Unknown stat category: {segment}") from None


@router.api_route("", methods=["GET", "POST"])
async def import_handshake(
    slug: str, request: Request, db: AsyncSession = Depends(get_session)
) -> JSONResponse:
    """The companion app pings the base URL before sending any data."""
    league = await _league_for_slug(db, slug)
    message = "League found" if request.method == "GET" else "Ready to receive league data"
    return success_response(
        {
            "message": message,
            "league": {
                "id": league.id,
                "name": league.name,
                "league_identifier": league.league_identifier,
            },
        }
    )


@router.post("/leagueteams")
async def import_league_teams(
    slug: str,
    payload: Any = Body(...),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    league = await _league_for_slug(db, slug)
    result = await import_service.import_teams(db, league, payload)
    return success_response(result)


@router.post("/standings")
async def import_standings(
    slug: str,
    payload: Any = Body(...),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    """Standings for the week and season named by the first record."""
    league = await _league_for_slug(db, slug)
    result = await import_service.import_standings(
        db, league, payload, allow_bare=False, require_window=True
    )
    return success_response(result)


@router.post("/stats/{category}")
async def import_stats(
    slug: str,
    category: str,
    payload: Any = Body(...),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    stat_category = _stat_category(category)
    league = await _league_for_slug(db, slug)
    result = await import_service.import_weekly_stats(
        db, league, stat_category, payload, allow_bare=False
    )
    return success_response(result)


@router.post("/{platform}/{madden_league_id}/leagueteams")
async def import_platform_league_teams(
    slug: str,
    platform: Platform,
    madden_league_id: str,
    payload: Any = Body(...),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    league = await _league_for_slug(db, slug)
    logger.info(f"Teams for {slug} from {platform.value}/{madden_league_id}")
    result = await import_service.import_teams(db, league, payload)
    return success_response(result)


@router.post("/{platform}/{madden_league_id}/standings")
async def import_platform_standings(
    slug: str,
    platform: Platform,
    madden_league_id: str,
    payload: Any = Body(...),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    league = await _league_for_slug(db, slug)
    logger.info(f"Standings for {slug} from {platform.value}/{madden_league_id}")
    result = await import_service.import_standings(db, league, payload)
    return success_response(result)


@router.post("/{platform}/{madden_league_id}/week/{season_type}/{week_number}/{category}")
async def import_week(
    slug: str,
    platform: Platform,
    madden_league_id: str,
    season_type: str,
    week_number: str,
    category: str,
    payload: Any = Body(...),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    """Weekly stats or schedules; the URL's week and season win over the body's."""
    if category not in WEEK_CATEGORIES:
        raise ApiError.not_found(f"Unknown weekly import: {category}")
    window = import_service.import_window(season_type, week_number)
    league = await _league_for_slug(db, slug)
    logger.info(
        f"{category} for {slug} from {platform.value}/{madden_league_id} "
        f"({season_type} week {window.week_index})"
    )

    if category == "schedules":
        result = await import_service.import_schedules(
            db, league, payload, window=window, season_type=season_type
        )
    else:
        result = await import_service.import_weekly_stats(
            db,
            league,
            StatCategory.from_route(category),
            payload,
            window=window,
            season_type=season_type,
        )
    return success_response(result)
