"""Standings transformer: ``teamStandingInfoList`` records to ``standings`` rows.

Standings keep the raw Madden team id (as a string) rather than the internal
team UUID so they can be imported before the teams themselves.
"""

from typing import Sequence
from uuid import UUID

from franchise_hub.models.standings import MaddenStanding
from franchise_hub.schemas.standings import Standing
from franchise_hub.services.transformers.common import (
    Row,
    copy_columns,
    data_columns,
    external_id,
)

STANDING_COLUMNS = data_columns(Standing)


def transform_standing(record: MaddenStanding, league_id: UUID) -> Row:
    row = copy_columns(record, STANDING_COLUMNS)
    row["league_id"] = league_id
    row["team_id"] = external_id(record.team_id)
    return row


def transform_standings(records: Sequence[MaddenStanding], league_id: UUID) -> list[Row]:
    return [transform_standing(record, league_id) for record in records]
