"""Madden team table (one row per team per league)."""

from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from franchise_hub.schemas.base import LeagueScopedMixin


class Team(LeagueScopedMixin, table=True):  # type: ignore[call-arg]
    """A franchise team, keyed by (league, Madden team id)."""

    __tablename__ = "teams"
    __table_args__ = (
        UniqueConstraint("league_id", "team_id", name="uq_teams_league_team"),
    )

    # External Madden team id, stored as a string
    team_id: str = Field(index=True)
    city_name: Optional[str] = None
    nick_name: Optional[str] = None
    abbr_name: Optional[str] = None
    display_name: Optional[str] = None
    div_name: Optional[str] = None
    user_name: Optional[str] = None
    logo_id: Optional[int] = None
    primary_color: Optional[int] = None
    secondary_color: Optional[int] = None
    ovr_rating: Optional[int] = None
    off_scheme: Optional[int] = None
    def_scheme: Optional[int] = None
    injury_count: Optional[int] = None
