"""League management and read-only league data endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_hub.models.fields import StatCategory
from franchise_hub.models.leagues import LeagueCreate, LeagueDetail, LeagueRead, LeagueUpdate
from franchise_hub.models.teams import TeamRead
from franchise_hub.schemas.leagues import League
from franchise_hub.services import (
    league_service,
    roster_service,
    schedule_service,
    standings_service,
    team_service,
    weekly_stats_service,
)
from franchise_hub.services.league_authz import get_current_user_id, require_league_owner
from franchise_hub.utils.api_response import ApiError, success_response
from franchise_hub.utils.db_async import get_session

router = APIRouter(prefix="/api/leagues", tags=["leagues"])


async def _league_or_404(db: AsyncSession, slug: str) -> League:
    league = await league_service.get_league_by_slug(db, slug)
    if league is None:
        raise ApiError.not_found(f"League not found with slug: {slug}")
    return league


@router.get("")
async def list_my_leagues(
    current_user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    leagues = await league_service.list_leagues_for_user(db, current_user_id)
    return success_response([LeagueRead.model_validate(league) for league in leagues])


@router.post("")
async def create_league(
    data: LeagueCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    try:
        league = await league_service.create_league(db, owner_id=current_user_id, data=data)
    except ValueError:
        raise ApiError.conflict(
            f"League identifier {data.league_identifier!r} is already taken"
        ) from None
    return success_response(LeagueRead.model_validate(league), status_code=201)


@router.patch("/{league_id}")
async def update_league(
    league_id: UUID,
    data: LeagueUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    league = await require_league_owner(db, user_id=current_user_id, league_id=league_id)
    try:
        league = await league_service.update_league(db, league, data)
    except ValueError:
        raise ApiError.conflict(
            f"League identifier {data.league_identifier!r} is already taken"
        ) from None
    return success_response(LeagueRead.model_validate(league))


@router.delete("/{league_id}")
async def delete_league(
    league_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    league = await require_league_owner(db, user_id=current_user_id, league_id=league_id)
    await league_service.delete_league(db, league.id)
    return success_response({"id": league.id, "deleted": True})


@router.get("/{slug}")
async def get_league(slug: str, db: AsyncSession = Depends(get_session)) -> JSONResponse:
    """League details, the import URL to paste into the app, and summary counts."""
    league = await _league_or_404(db, slug)
    summary = await league_service.get_league_summary(db, league.id)
    detail = LeagueDetail(
        **LeagueRead.model_validate(league).model_dump(),
        summary=summary,
    )
    return success_response(detail)


@router.get("/{slug}/teams")
async def get_league_teams(slug: str, db: AsyncSession = Depends(get_session)) -> JSONResponse:
    league = await _league_or_404(db, slug)
    teams = await team_service.list_teams(db, league.id)
    return success_response([TeamRead.model_validate(team) for team in teams])


@router.get("/{slug}/players")
async def get_league_players(
    slug: str,
    team_id: Optional[UUID] = Query(default=None),
    position: Optional[str] = Query(default=None, max_length=8),
    free_agents: bool = Query(default=False),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    league = await _league_or_404(db, slug)
    players = await roster_service.list_players(
        db, league.id, team_id=team_id, position=position, free_agents=free_agents
    )
    return success_response(players)


@router.get("/{slug}/players/{roster_id}")
async def get_league_player(
    slug: str, roster_id: str, db: AsyncSession = Depends(get_session)
) -> JSONResponse:
    league = await _league_or_404(db, slug)
    profile = await roster_service.get_player_profile(db, league.id, roster_id)
    if profile is None:
        raise ApiError.not_found(f"Player not found: {roster_id}")
    return success_response(profile)


@router.get("/{slug}/standings")
async def get_league_standings(
    slug: str,
    week: Optional[int] = Query(default=None, ge=0),
    season: Optional[int] = Query(default=None, ge=0),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    """Standings snapshot for a week; the latest stored one when unspecified."""
    league = await _league_or_404(db, slug)
    standings = await standings_service.list_standings(db, league.id, week=week, season=season)
    return success_response(standings)


@router.get("/{slug}/schedules")
async def get_league_schedules(
    slug: str,
    week: Optional[int] = Query(default=None, ge=0),
    season: Optional[int] = Query(default=None, ge=0),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    league = await _league_or_404(db, slug)
    games = await schedule_service.list_schedules(db, league.id, week=week, season=season)
    return success_response(games)


@router.get("/{slug}/stats/{category}")
async def get_league_stats(
    slug: str,
    category: str,
    week: Optional[int] = Query(default=None, ge=0),
    season: Optional[int] = Query(default=None, ge=0),
    team_id: Optional[str] = Query(default=None),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    try:
        stat_category = StatCategory.from_route(category)
    except ValueError:
        raise ApiError.not_found(f"Unknown stat category: {category}") from None
    league = await _league_or_404(db, slug)
    rows = await weekly_stats_service.list_weekly_stats(
        db, stat_category, league.id, week=week, season=season, team_id=team_id
    )
    return success_response(rows)
