"""Schedule persistence and lookups."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_hub.schemas.schedules import Schedule
from franchise_hub.utils.upsert import Row, replace_partition

SCHEDULE_KEY = ("league_id", "schedule_id")
WEEK_PARTITION = ("league_id", "week_index", "season_index")


async def replace_schedules(db: AsyncSession, rows: Sequence[Row]) -> list[Row]:
    return await replace_partition(
        db, Schedule, rows, key_columns=SCHEDULE_KEY, partition_columns=WEEK_PARTITION
    )


async def list_schedules(
    db: AsyncSession,
    league_id: UUID,
    *,
    week: Optional[int] = None,
    season: Optional[int] = None,
) -> list[Schedule]:
    stmt = select(Schedule).where(Schedule.league_id == league_id)  # type: ignore[arg-type]
    if week is not None:
        stmt = stmt.where(Schedule.week_index == week)  # type: ignore[arg-type]
    if season is not None:
        stmt = stmt.where(Schedule.season_index == season)  # type: ignore[arg-type]
    stmt = stmt.order_by(Schedule.season_index, Schedule.week_index, Schedule.schedule_id)
    async with db.begin():
        result = await db.execute(stmt)
        return list(result.scalars().all())
