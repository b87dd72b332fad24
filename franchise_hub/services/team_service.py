"""Team persistence and Madden team-id resolution."""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_hub.schemas.teams import Team
from franchise_hub.utils.upsert import Row, upsert_rows

logger = logging.getLogger(__name__)

TEAM_KEY = ("league_id", "team_id")


async def get_team_id_map(db: AsyncSession, league_id: UUID) -> dict[str, UUID]:
    """Map Madden team id (string) to internal team UUID for one league."""
    async with db.begin():
        result = await db.execute(
            select(Team.team_id, Team.id).where(Team.league_id == league_id)  # type: ignore[arg-type]
        )
        return {team_id: id_ for team_id, id_ in result.all()}


async def upsert_teams(db: AsyncSession, rows: Sequence[Row]) -> list[Row]:
    """Insert or update teams on (league, Madden team id)."""
    return await upsert_rows(db, Team, rows, key_columns=TEAM_KEY)


async def list_teams(db: AsyncSession, league_id: UUID) -> list[Team]:
    async with db.begin():
        result = await db.execute(
            select(Team)
            .where(Team.league_id == league_id)  # type: ignore[arg-type]
            .order_by(Team.div_name, Team.display_name, Team.team_id)
        )
        return list(result.scalars().all())
