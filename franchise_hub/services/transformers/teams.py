"""Team transformer: ``leagueTeamInfoList`` records to ``teams`` rows."""

from typing import Sequence
from uuid import UUID

from franchise_hub.models.teams import MaddenTeam
from franchise_hub.schemas.teams import Team
from franchise_hub.services.transformers.common import (
    Row,
    copy_columns,
    data_columns,
    external_id,
)

TEAM_COLUMNS = data_columns(Team)


def transform_team(record: MaddenTeam, league_id: UUID) -> Row:
    row = copy_columns(record, TEAM_COLUMNS)
    row["league_id"] = league_id
    row["team_id"] = external_id(record.team_id)
    return row


def transform_teams(records: Sequence[MaddenTeam], league_id: UUID) -> list[Row]:
    return [transform_team(record, league_id) for record in records]
