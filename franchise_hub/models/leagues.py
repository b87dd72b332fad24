"""Request/response models for league management and summaries."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from franchise_hub.models.fields import Platform

LEAGUE_IDENTIFIER_PATTERN = r"^[a-zA-Z0-9_-]+$"


class LeagueCreate(BaseModel):
    name: str = Field(min_length=3, max_length=100)
    league_identifier: str = Field(
        min_length=2, max_length=10, pattern=LEAGUE_IDENTIFIER_PATTERN
    )
    platform: Platform
    madden_league_id: Optional[str] = Field(default=None, max_length=64)
    discord_server_id: Optional[str] = Field(default=None, max_length=64)


class LeagueUpdate(BaseModel):
    """Settings edit; omitted fields are left as they are."""

    name: Optional[str] = Field(default=None, min_length=3, max_length=100)
    league_identifier: Optional[str] = Field(
        default=None, min_length=2, max_length=10, pattern=LEAGUE_IDENTIFIER_PATTERN
    )
    platform: Optional[Platform] = None
    madden_league_id: Optional[str] = Field(default=None, max_length=64)
    discord_server_id: Optional[str] = Field(default=None, max_length=64)


class LeagueSummary(BaseModel):
    """Row counts shown on the league dashboard."""

    teams: int = 0
    players: int = 0
    free_agents: int = 0
    games: int = 0
    games_played: int = 0
    latest_week: Optional[int] = None
    latest_season: Optional[int] = None


class LeagueRead(BaseModel):
    id: UUID
    name: str
    league_identifier: str
    platform: str
    madden_league_id: Optional[str] = None
    discord_server_id: Optional[str] = None
    owner_id: Optional[UUID] = None
    import_url: Optional[str] = None
    last_import_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class LeagueDetail(LeagueRead):
    summary: LeagueSummary
