"""League lookup, access checks and settings management."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_hub.config import settings
from franchise_hub.models.fields import GameStatus, LeagueRole
from franchise_hub.models.leagues import LeagueCreate, LeagueSummary, LeagueUpdate
from franchise_hub.schemas.base import utcnow
from franchise_hub.schemas.leagues import League, LeagueMembership
from franchise_hub.schemas.players import Player
from franchise_hub.schemas.schedules import Schedule
from franchise_hub.schemas.standings import Standing
from franchise_hub.schemas.teams import Team
from franchise_hub.schemas.users import User

logger = logging.getLogger(__name__)


def build_import_url(league_identifier: str) -> str:
    """URL commissioners paste into the companion app's export screen."""
    base = settings.public_app_url.rstrip("/")
    return f"{base}/api/leagues/{league_identifier}/import"


async def get_league_by_slug(db: AsyncSession, slug: str) -> Optional[League]:
    async with db.begin():
        result = await db.execute(
            select(League).where(League.league_identifier == slug)  # type: ignore[arg-type]
        )
        return result.scalar_one_or_none()


async def get_league_by_id(db: AsyncSession, league_id: UUID) -> Optional[League]:
    async with db.begin():
        return await db.get(League, league_id)


async def touch_last_import(db: AsyncSession, league_id: UUID) -> datetime:
    """Stamp the league's last successful import."""
    now = utcnow()
    async with db.begin():
        await db.execute(
            update(League)
            .where(League.id == league_id)  # type: ignore[arg-type]
            .values(last_import_at=now, updated_at=now)
        )
    return now


async def user_has_league_access(db: AsyncSession, league: League, user_id: UUID) -> bool:
    """Owners and members may import into a league."""
    if league.owner_id == user_id:
        return True
    async with db.begin():
        result = await db.execute(
            select(LeagueMembership.id).where(
                LeagueMembership.league_id == league.id,  # type: ignore[arg-type]
                LeagueMembership.user_id == user_id,  # type: ignore[arg-type]
            )
        )
        return result.first() is not None


async def is_identifier_available(
    db: AsyncSession, league_identifier: str, *, exclude_league_id: Optional[UUID] = None
) -> bool:
    stmt = select(League.id).where(
        func.lower(League.league_identifier) == league_identifier.lower()
    )
    if exclude_league_id is not None:
        stmt = stmt.where(League.id != exclude_league_id)  # type: ignore[arg-type]
    async with db.begin():
        result = await db.execute(stmt)
        return result.first() is None


async def create_league(db: AsyncSession, *, owner_id: UUID, data: LeagueCreate) -> League:
    """Create a league owned by ``owner_id``.

    Raises:
        ValueError("league_identifier_taken") when the slug is in use.
    """
    if not await is_identifier_available(db, data.league_identifier):
        raise ValueError("league_identifier_taken")

    league = League(
        name=data.name,
        league_identifier=data.league_identifier,
        platform=data.platform.value,
        madden_league_id=data.madden_league_id,
        discord_server_id=data.discord_server_id,
        owner_id=owner_id,
        import_url=build_import_url(data.league_identifier),
    )
    async with db.begin():
        # Profile rows are normally synced on sign-in; make sure the FK target exists
        if await db.get(User, owner_id) is None:
            db.add(User(id=owner_id))
            await db.flush()
        db.add(league)
        await db.flush()
        db.add(
            LeagueMembership(
                league_id=league.id, user_id=owner_id, role=LeagueRole.owner.value
            )
        )
    logger.info(f"Created league {league.league_identifier} ({league.id})")
    return league


async def update_league(db: AsyncSession, league: League, data: LeagueUpdate) -> League:
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        return league

    identifier = changes.get("league_identifier")
    if identifier and identifier != league.league_identifier:
        if not await is_identifier_available(db, identifier, exclude_league_id=league.id):
            raise ValueError("league_identifier_taken")
        changes["import_url"] = build_import_url(identifier)
    if "platform" in changes:
        changes["platform"] = data.platform.value  # type: ignore[union-attr]

    async with db.begin():
        merged = await db.merge(league)
        for name, value in changes.items():
            setattr(merged, name, value)
        merged.updated_at = utcnow()
    return merged


async def delete_league(db: AsyncSession, league_id: UUID) -> None:
    """Delete a league; dependent rows go with it via ON DELETE CASCADE."""
    async with db.begin():
        await db.execute(delete(League).where(League.id == league_id))  # type: ignore[arg-type]
    logger.info(f"Deleted league {league_id}")


async def list_leagues_for_user(db: AsyncSession, user_id: UUID) -> list[League]:
    member_of = select(LeagueMembership.league_id).where(
        LeagueMembership.user_id == user_id  # type: ignore[arg-type]
    )
    async with db.begin():
        result = await db.execute(
            select(League)
            .where((League.owner_id == user_id) | League.id.in_(member_of))  # type: ignore[attr-defined]
            .order_by(League.name)
        )
        return list(result.scalars().all())


async def get_league_summary(db: AsyncSession, league_id: UUID) -> LeagueSummary:
    """Counts behind the dashboard's summary cards."""

    def _count(model, *criteria):
        return (
            select(func.count())
            .select_from(model)
            .where(model.league_id == league_id, *criteria)
        )

    async with db.begin():
        teams = (await db.execute(_count(Team))).scalar_one()
        players = (await db.execute(_count(Player))).scalar_one()
        free_agents = (
            await db.execute(_count(Player, Player.team_id.is_(None)))  # type: ignore[union-attr]
        ).scalar_one()
        games = (await db.execute(_count(Schedule))).scalar_one()
        games_played = (
            await db.execute(_count(Schedule, Schedule.status == GameStatus.FINAL.value))
        ).scalar_one()
        latest = (
            await db.execute(
                select(Standing.season_index, Standing.week_index)
                .where(
                    Standing.league_id == league_id,  # type: ignore[arg-type]
                    Standing.season_index.is_not(None),  # type: ignore[union-attr]
                    Standing.week_index.is_not(None),  # type: ignore[union-attr]
                )
                .order_by(Standing.season_index.desc(), Standing.week_index.desc())  # type: ignore[union-attr]
                .limit(1)
            )
        ).first()

    return LeagueSummary(
        teams=teams,
        players=players,
        free_agents=free_agents,
        games=games,
        games_played=games_played,
        latest_season=latest[0] if latest else None,
        latest_week=latest[1] if latest else None,
    )
