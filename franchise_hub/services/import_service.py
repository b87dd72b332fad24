"""Import orchestration for companion-app exports.

Each import follows the same pipeline: validate the body, transform the
records for the resolved league, persist them, then stamp the league's
``last_import_at``. League resolution and authentication happen in the
routes; everything from validation onwards lives here so that slug, platform
and user-scoped endpoints share one code path per record kind.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Optional, TypeVar
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_hub.models.fields import StatCategory, season_index_for
from franchise_hub.models.imports import ImportResult, PartitionImportResult
from franchise_hub.models.roster import ROSTER_LIST_KEY, MaddenPlayer
from franchise_hub.models.schedules import SCHEDULES_LIST_KEY, MaddenSchedule
from franchise_hub.models.standings import STANDINGS_LIST_KEY, MaddenStanding
from franchise_hub.models.teams import TEAMS_LIST_KEY, MaddenTeam
from franchise_hub.models.weekly_stats import STAT_RECORD_MODELS
from franchise_hub.schemas.leagues import League
from franchise_hub.services import (
    league_service,
    roster_service,
    schedule_service,
    standings_service,
    team_service,
    weekly_stats_service,
)
from franchise_hub.services.transformers.common import ImportWindow
from franchise_hub.services.transformers.roster import transform_roster
from franchise_hub.services.transformers.schedules import transform_schedules
from franchise_hub.services.transformers.standings import transform_standings
from franchise_hub.services.transformers.teams import transform_teams
from franchise_hub.services.transformers.weekly_stats import transform_weekly_stats
from franchise_hub.utils.api_response import ApiError
from franchise_hub.utils.payloads import parse_records

logger = logging.getLogger(__name__)

T = TypeVar("T")

STAT_LABELS: dict[StatCategory, str] = {
    StatCategory.defense: "Defensive stats",
    StatCategory.receiving: "Receiving stats",
    StatCategory.rushing: "Rushing stats",
    StatCategory.passing: "Passing stats",
    StatCategory.kicking: "Kicking stats",
    StatCategory.punting: "Punting stats",
    StatCategory.team: "Team stats",
}


def parse_week_number(raw: str) -> int:
    """Week numbers arrive as a path segment; anything non-numeric is a 400."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ApiError.bad_request("Invalid week number") from None


def import_window(season_type: str, week_number: str) -> ImportWindow:
    return ImportWindow(
        week_index=parse_week_number(week_number),
        season_index=season_index_for(season_type),
    )


async def _persist(kind: str, operation: Awaitable[T]) -> T:
    """Await a persistence call, turning database failures into a generic 500."""
    try:
        return await operation
    except SQLAlchemyError:
        logger.exception(f"Persisting {kind} failed")
        raise ApiError.internal(f"Failed to import {kind}") from None


def _require_window(records: list[Any], kind: str) -> tuple[int, int]:
    """Week and season of the first record, for routes that carry none in the URL."""
    if not records:
        raise ApiError.bad_request(f"No {kind} data provided")
    first = records[0]
    if first.week_index is None or first.season_index is None:
        raise ApiError.bad_request(f"Missing week or season information in {kind} data")
    return first.week_index, first.season_index


async def _finish(db: AsyncSession, league_id: UUID) -> None:
    await _persist("league timestamp", league_service.touch_last_import(db, league_id))


async def import_teams(
    db: AsyncSession, league: League, payload: Any, *, allow_bare: bool = True
) -> ImportResult:
    # A fallback rollback expires the league instance, so read its columns up front
    league_id, slug = league.id, league.league_identifier
    records = parse_records(payload, TEAMS_LIST_KEY, MaddenTeam, allow_bare=allow_bare)
    rows = transform_teams(records, league_id)
    stored = await _persist("teams", team_service.upsert_teams(db, rows))
    await _finish(db, league_id)
    logger.info(f"League {slug}: imported {len(stored)} teams")
    return ImportResult(message="Teams imported successfully", count=len(stored))


async def import_roster(
    db: AsyncSession, league: League, payload: Any, *, allow_bare: bool = True
) -> ImportResult:
    league_id, slug = league.id, league.league_identifier
    records = parse_records(payload, ROSTER_LIST_KEY, MaddenPlayer, allow_bare=allow_bare)
    team_id_map = await team_service.get_team_id_map(db, league_id)
    rows = transform_roster(records, league_id, team_id_map)
    count = await _persist("roster", roster_service.persist_roster(db, league_id, rows))
    await _finish(db, league_id)
    logger.info(
        f"League {slug}: imported {count} players "
        f"({len(team_id_map)} teams known)"
    )
    return ImportResult(message="Roster data processed successfully", count=count)


async def import_standings(
    db: AsyncSession,
    league: League,
    payload: Any,
    *,
    allow_bare: bool = True,
    require_window: bool = False,
) -> PartitionImportResult:
    """Replace standings for every (week, season) found in the body.

    With ``require_window`` the first record must carry the week and season;
    an empty list is then rejected instead of importing nothing.
    """
    league_id, slug = league.id, league.league_identifier
    records = parse_records(payload, STANDINGS_LIST_KEY, MaddenStanding, allow_bare=allow_bare)
    week: Optional[int] = None
    season: Optional[int] = None
    if require_window:
        week, season = _require_window(records, "standings")
    elif records:
        week, season = records[0].week_index, records[0].season_index

    rows = transform_standings(records, league_id)
    stored = await _persist("standings", standings_service.replace_standings(db, rows))
    await _finish(db, league_id)
    logger.info(
        f"League {slug}: imported {len(stored)} standings "
        f"(week {week}, season {season})"
    )
    return PartitionImportResult(
        message="Standings imported successfully",
        count=len(stored),
        week=week,
        season=season,
    )


async def import_weekly_stats(
    db: AsyncSession,
    league: League,
    category: StatCategory,
    payload: Any,
    *,
    window: Optional[ImportWindow] = None,
    season_type: Optional[str] = None,
    allow_bare: bool = True,
) -> PartitionImportResult:
    """Import one stat category.

    Without a ``window`` the week and season come from the first record, so
    an empty list is a 400. With one, the URL's week and season overwrite
    whatever the records carry.
    """
    league_id, slug = league.id, league.league_identifier
    label = STAT_LABELS[category]
    records = parse_records(
        payload, category.list_key, STAT_RECORD_MODELS[category], allow_bare=allow_bare
    )
    if window is None:
        week, season = _require_window(records, label.lower())
    else:
        week, season = window.week_index, window.season_index

    rows = transform_weekly_stats(category, records, league_id, window)
    stored = await _persist(
        label.lower(), weekly_stats_service.replace_weekly_stats(db, category, rows)
    )
    await _finish(db, league_id)
    logger.info(
        f"League {slug}: imported {len(stored)} {category.value} "
        f"stat rows (week {week}, season {season})"
    )
    return PartitionImportResult(
        message=f"{label} imported successfully",
        count=len(stored),
        week=week,
        season=season,
        season_type=season_type,
    )


async def import_schedules(
    db: AsyncSession,
    league: League,
    payload: Any,
    *,
    window: ImportWindow,
    season_type: Optional[str] = None,
) -> PartitionImportResult:
    league_id, slug = league.id, league.league_identifier
    records = parse_records(payload, SCHEDULES_LIST_KEY, MaddenSchedule)
    rows = transform_schedules(records, league_id, window)
    stored = await _persist("schedules", schedule_service.replace_schedules(db, rows))
    await _finish(db, league_id)
    logger.info(
        f"League {slug}: imported {len(stored)} games "
        f"(week {window.week_index}, season {window.season_index})"
    )
    return PartitionImportResult(
        message="Schedules imported successfully",
        count=len(stored),
        week=window.week_index,
        season=window.season_index,
        season_type=season_type,
    )
