"""Roster persistence: players plus their traits, ratings and abilities."""

from __future__ import annotations

import logging
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_hub.schemas.player_abilities import PlayerAbility
from franchise_hub.schemas.player_ratings import PlayerRating
from franchise_hub.schemas.player_traits import PlayerTrait
from franchise_hub.schemas.players import Player
from franchise_hub.services.transformers.roster import RosterRows
from franchise_hub.utils.upsert import (
    is_missing_constraint_error,
    prepare_rows,
    table_for,
    upsert_statement,
)

logger = logging.getLogger(__name__)

PLAYER_KEY = ("league_id", "roster_id")
_CHILD_MODELS = (PlayerTrait, PlayerRating, PlayerAbility)


def dedupe_roster(rows: RosterRows) -> RosterRows:
    """Keep the last entry per roster id, along with that entry's child rows."""
    latest: dict[str, UUID] = {}
    for player in rows.players:
        latest[player["roster_id"]] = player["id"]
    keep = set(latest.values())
    if len(keep) == len(rows.players):
        return rows
    return RosterRows(
        players=[row for row in rows.players if row["id"] in keep],
        traits=[row for row in rows.traits if row["player_id"] in keep],
        ratings=[row for row in rows.ratings if row["player_id"] in keep],
        abilities=[row for row in rows.abilities if row["player_id"] in keep],
    )


def _reuse_player_ids(rows: RosterRows, existing: dict[str, UUID]) -> None:
    """Point the batch at the UUIDs already stored for known roster ids."""
    remap: dict[UUID, UUID] = {}
    for player in rows.players:
        stored = existing.get(player["roster_id"])
        if stored is not None and stored != player["id"]:
            remap[player["id"]] = stored
            player["id"] = stored
    if not remap:
        return
    for child_rows in (rows.traits, rows.ratings, rows.abilities):
        for row in child_rows:
            row["player_id"] = remap.get(row["player_id"], row["player_id"])


async def _insert_children(db: AsyncSession, rows: RosterRows) -> None:
    for model, child_rows in (
        (PlayerTrait, rows.traits),
        (PlayerRating, rows.ratings),
        (PlayerAbility, rows.abilities),
    ):
        if child_rows:
            table = table_for(model)
            await db.execute(insert(table), prepare_rows(table, child_rows))


async def persist_roster(db: AsyncSession, league_id: UUID, rows: RosterRows) -> int:
    """Write a roster batch and return the number of players stored.

    Players are upserted on (league, roster id) and keep their UUID across
    imports. Traits, ratings and abilities of every player in the batch are
    replaced in full; players outside the batch are untouched.
    """
    if not rows.players:
        return 0

    rows = dedupe_roster(rows)
    player_table = table_for(Player)
    roster_ids = [row["roster_id"] for row in rows.players]

    try:
        async with db.begin():
            result = await db.execute(
                select(Player.roster_id, Player.id).where(
                    Player.league_id == league_id,  # type: ignore[arg-type]
                    Player.roster_id.in_(roster_ids),  # type: ignore[attr-defined]
                )
            )
            _reuse_player_ids(rows, dict(result.all()))
            players = prepare_rows(player_table, rows.players)
            await db.execute(upsert_statement(db, player_table, PLAYER_KEY), players)

            for model in _CHILD_MODELS:
                await db.execute(
                    delete(model).where(model.player_id.in_(rows.player_ids))  # type: ignore[attr-defined]
                )
            await _insert_children(db, rows)
    except DBAPIError as exc:
        if not is_missing_constraint_error(exc):
            raise
        logger.warning(
            "No unique constraint on players(league_id, roster_id); "
            "falling back to delete-then-insert"
        )
        async with db.begin():
            batch_players = select(Player.id).where(
                Player.league_id == league_id,  # type: ignore[arg-type]
                Player.roster_id.in_(roster_ids),  # type: ignore[attr-defined]
            )
            for model in _CHILD_MODELS:
                await db.execute(
                    delete(model).where(model.player_id.in_(batch_players))  # type: ignore[attr-defined]
                )
            await db.execute(
                delete(Player).where(
                    Player.league_id == league_id,  # type: ignore[arg-type]
                    Player.roster_id.in_(roster_ids),  # type: ignore[attr-defined]
                )
            )
            await db.execute(insert(player_table), prepare_rows(player_table, rows.players))
            await _insert_children(db, rows)

    logger.info(
        f"Stored {len(rows.players)} players, {len(rows.traits)} trait sets, "
        f"{len(rows.ratings)} rating sets, {len(rows.abilities)} abilities"
    )
    return len(rows.players)


async def list_players(
    db: AsyncSession,
    league_id: UUID,
    *,
    team_id: Optional[UUID] = None,
    position: Optional[str] = None,
    free_agents: bool = False,
) -> list[Player]:
    stmt = select(Player).where(Player.league_id == league_id)  # type: ignore[arg-type]
    if team_id is not None:
        stmt = stmt.where(Player.team_id == team_id)  # type: ignore[arg-type]
    if free_agents:
        stmt = stmt.where(Player.team_id.is_(None))  # type: ignore[union-attr]
    if position:
        stmt = stmt.where(Player.position == position.upper())  # type: ignore[arg-type]
    stmt = stmt.order_by(Player.player_best_ovr.desc(), Player.last_name)  # type: ignore[union-attr]
    async with db.begin():
        result = await db.execute(stmt)
        return list(result.scalars().all())


async def get_player_profile(
    db: AsyncSession, league_id: UUID, roster_id: str
) -> Optional[dict[str, Any]]:
    """Player row with traits, ratings and abilities, or None if unknown."""
    async with db.begin():
        result = await db.execute(
            select(Player).where(
                Player.league_id == league_id,  # type: ignore[arg-type]
                Player.roster_id == roster_id,  # type: ignore[arg-type]
            )
        )
        player = result.scalar_one_or_none()
        if player is None:
            return None
        traits = (
            await db.execute(select(PlayerTrait).where(PlayerTrait.player_id == player.id))  # type: ignore[arg-type]
        ).scalar_one_or_none()
        ratings = (
            await db.execute(select(PlayerRating).where(PlayerRating.player_id == player.id))  # type: ignore[arg-type]
        ).scalar_one_or_none()
        abilities = (
            await db.execute(
                select(PlayerAbility).where(PlayerAbility.player_id == player.id)  # type: ignore[arg-type]
            )
        ).scalars().all()

    return {
        "player": player,
        "traits": traits,
        "ratings": ratings,
        "abilities": list(abilities),
    }
