"""Roster transformer.

Each ``rosterInfoList`` entry fans out into one player row, one trait row, one
rating row and zero or more ability rows, all sharing a freshly generated
player UUID. The player's team is linked through the league's team-id map;
players whose Madden team is unknown (free agents, teams not imported yet)
get ``team_id = None``.
"""

from dataclasses import dataclass, field
from typing import Mapping, Sequence
from uuid import UUID, uuid4

from franchise_hub.models.roster import MaddenPlayer
from franchise_hub.schemas.player_abilities import PlayerAbility
from franchise_hub.schemas.player_ratings import PlayerRating
from franchise_hub.schemas.player_traits import PlayerTrait
from franchise_hub.schemas.players import Player
from franchise_hub.services.transformers.common import (
    Row,
    copy_columns,
    data_columns,
    external_id,
    resolve_team_id,
)

PLAYER_COLUMNS = data_columns(Player, exclude={"team_id", "roster_id", "full_name"})
TRAIT_COLUMNS = data_columns(PlayerTrait, exclude={"player_id"})
RATING_COLUMNS = data_columns(PlayerRating, exclude={"player_id"})
ABILITY_COLUMNS = data_columns(PlayerAbility, exclude={"player_id"})


@dataclass
class RosterRows:
    players: list[Row] = field(default_factory=list)
    traits: list[Row] = field(default_factory=list)
    ratings: list[Row] = field(default_factory=list)
    abilities: list[Row] = field(default_factory=list)

    @property
    def player_ids(self) -> list[UUID]:
        return [row["id"] for row in self.players]


def full_name(first_name: str | None, last_name: str | None) -> str | None:
    name = f"{first_name or ''} {last_name or ''}".strip()
    return name or None


def transform_player(
    record: MaddenPlayer,
    player_id: UUID,
    league_id: UUID,
    team_id_map: Mapping[str, UUID],
) -> Row:
    row = copy_columns(record, PLAYER_COLUMNS)
    row.update(
        id=player_id,
        league_id=league_id,
        team_id=resolve_team_id(team_id_map, record.team_id),
        roster_id=external_id(record.roster_id),
        full_name=full_name(record.first_name, record.last_name),
    )
    return row


def transform_traits(record: MaddenPlayer, player_id: UUID, league_id: UUID) -> Row:
    row = copy_columns(record, TRAIT_COLUMNS)
    row.update(id=uuid4(), player_id=player_id, league_id=league_id)
    return row


def transform_ratings(record: MaddenPlayer, player_id: UUID, league_id: UUID) -> Row:
    row = copy_columns(record, RATING_COLUMNS)
    row.update(id=uuid4(), player_id=player_id, league_id=league_id)
    return row


def transform_abilities(record: MaddenPlayer, player_id: UUID, league_id: UUID) -> list[Row]:
    rows = []
    for ability in record.signature_slot_list or []:
        if ability is None:
            continue
        row = copy_columns(ability, ABILITY_COLUMNS)
        row.update(id=uuid4(), player_id=player_id, league_id=league_id)
        rows.append(row)
    return rows


def transform_roster(
    records: Sequence[MaddenPlayer],
    league_id: UUID,
    team_id_map: Mapping[str, UUID],
) -> RosterRows:
    rows = RosterRows()
    for record in records:
        player_id = uuid4()
        rows.players.append(transform_player(record, player_id, league_id, team_id_map))
        rows.traits.append(transform_traits(record, player_id, league_id))
        rows.ratings.append(transform_ratings(record, player_id, league_id))
        rows.abilities.extend(transform_abilities(record, player_id, league_id))
    return rows
