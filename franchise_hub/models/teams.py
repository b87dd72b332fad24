"""Wire and response models for teams."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from franchise_hub.models.companion import MaddenRecord

TEAMS_LIST_KEY = "leagueTeamInfoList"


class MaddenTeam(MaddenRecord):
    team_id: int = Field(gt=0)
    city_name: Optional[str] = None
    nick_name: Optional[str] = None
    display_name: Optional[str] = None
    abbr_name: Optional[str] = None
    div_name: Optional[str] = None
    user_name: Optional[str] = None
    logo_id: Optional[int] = None
    primary_color: Optional[int] = None
    secondary_color: Optional[int] = None
    ovr_rating: Optional[int] = None
    off_scheme: Optional[int] = None
    def_scheme: Optional[int] = None
    injury_count: Optional[int] = None


class TeamRead(BaseModel):
    id: UUID
    team_id: str
    city_name: Optional[str] = None
    nick_name: Optional[str] = None
    display_name: Optional[str] = None
    abbr_name: Optional[str] = None
    div_name: Optional[str] = None
    user_name: Optional[str] = None
    logo_id: Optional[int] = None
    primary_color: Optional[int] = None
    secondary_color: Optional[int] = None
    ovr_rating: Optional[int] = None
    off_scheme: Optional[int] = None
    def_scheme: Optional[int] = None
    injury_count: Optional[int] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
