"""Standings persistence: one snapshot per team per (week, season)."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_hub.schemas.standings import Standing
from franchise_hub.utils.upsert import Row, replace_partition

STANDING_KEY = ("league_id", "team_id", "week_index", "season_index")
WEEK_PARTITION = ("league_id", "week_index", "season_index")


async def replace_standings(db: AsyncSession, rows: Sequence[Row]) -> list[Row]:
    return await replace_partition(
        db, Standing, rows, key_columns=STANDING_KEY, partition_columns=WEEK_PARTITION
    )


async def latest_standings_window(
    db: AsyncSession, league_id: UUID
) -> Optional[tuple[int, int]]:
    """(week, season) of the most recent standings snapshot, if any."""
    async with db.begin():
        result = await db.execute(
            select(Standing.week_index, Standing.season_index)
            .where(
                Standing.league_id == league_id,  # type: ignore[arg-type]
                Standing.week_index.is_not(None),  # type: ignore[union-attr]
                Standing.season_index.is_not(None),  # type: ignore[union-attr]
            )
            .order_by(Standing.season_index.desc(), Standing.week_index.desc())  # type: ignore[union-attr]
            .limit(1)
        )
        latest = result.first()
    if latest is None:
        return None
    return latest[0], latest[1]


async def list_standings(
    db: AsyncSession,
    league_id: UUID,
    *,
    week: Optional[int] = None,
    season: Optional[int] = None,
) -> list[Standing]:
    """Standings for one snapshot; defaults to the latest one stored."""
    if week is None or season is None:
        latest = await latest_standings_window(db, league_id)
        if latest is None:
            return []
        week = latest[0] if week is None else week
        season = latest[1] if season is None else season

    async with db.begin():
        result = await db.execute(
            select(Standing)
            .where(
                Standing.league_id == league_id,  # type: ignore[arg-type]
                Standing.week_index == week,  # type: ignore[arg-type]
                Standing.season_index == season,  # type: ignore[arg-type]
            )
            .order_by(Standing.rank, Standing.team_name)
        )
        return list(result.scalars().all())
