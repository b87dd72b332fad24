"""Weekly stat persistence for every stat category."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_hub.models.fields import StatCategory
from franchise_hub.schemas.weekly_stats import STAT_TABLES, WeeklyStatBase
from franchise_hub.utils.upsert import Row, replace_partition

STAT_KEY = ("league_id", "stat_id", "week_index", "season_index")
WEEK_PARTITION = ("league_id", "week_index", "season_index")


async def replace_weekly_stats(
    db: AsyncSession, category: StatCategory, rows: Sequence[Row]
) -> list[Row]:
    """Replace the (league, week, season) partitions present in ``rows``."""
    return await replace_partition(
        db,
        STAT_TABLES[category],
        rows,
        key_columns=STAT_KEY,
        partition_columns=WEEK_PARTITION,
    )


async def list_weekly_stats(
    db: AsyncSession,
    category: StatCategory,
    league_id: UUID,
    *,
    week: Optional[int] = None,
    season: Optional[int] = None,
    team_id: Optional[str] = None,
) -> list[WeeklyStatBase]:
    model = STAT_TABLES[category]
    stmt = select(model).where(model.league_id == league_id)  # type: ignore[arg-type]
    if week is not None:
        stmt = stmt.where(model.week_index == week)  # type: ignore[arg-type]
    if season is not None:
        stmt = stmt.where(model.season_index == season)  # type: ignore[arg-type]
    if team_id is not None:
        stmt = stmt.where(model.team_id == team_id)  # type: ignore[arg-type]
    stmt = stmt.order_by(model.season_index, model.week_index, model.stat_id)
    async with db.begin():
        result = await db.execute(stmt)
        return list(result.scalars().all())
