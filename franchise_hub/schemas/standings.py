"""Weekly standings snapshot table."""

from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from franchise_hub.schemas.base import LeagueScopedMixin, WeekScopedMixin


class Standing(LeagueScopedMixin, WeekScopedMixin, table=True):  # type: ignore[call-arg]
    """At most one row per team per (week, season) in a league.

    ``team_id`` holds the raw Madden team id string, not the internal UUID.
    """

    __tablename__ = "standings"
    __table_args__ = (
        UniqueConstraint(
            "league_id",
            "team_id",
            "week_index",
            "season_index",
            name="uq_standings_league_team_week_season",
        ),
    )

    team_id: str = Field(index=True)
    team_name: Optional[str] = None
    calendar_year: Optional[int] = None
    team_ovr: Optional[int] = None

    # Ranking
    rank: Optional[int] = None
    prev_rank: Optional[int] = None
    seed: Optional[int] = None
    playoff_status: Optional[int] = None

    # Record
    total_wins: Optional[int] = None
    total_losses: Optional[int] = None
    total_ties: Optional[int] = None
    win_pct: Optional[float] = None
    home_wins: Optional[int] = None
    home_losses: Optional[int] = None
    home_ties: Optional[int] = None
    away_wins: Optional[int] = None
    away_losses: Optional[int] = None
    away_ties: Optional[int] = None
    div_wins: Optional[int] = None
    div_losses: Optional[int] = None
    div_ties: Optional[int] = None
    conf_wins: Optional[int] = None
    conf_losses: Optional[int] = None
    conf_ties: Optional[int] = None
    win_loss_streak: Optional[int] = None

    # Points and yardage
    pts_for: Optional[int] = None
    pts_against: Optional[int] = None
    net_pts: Optional[int] = None
    pts_for_rank: Optional[int] = None
    pts_against_rank: Optional[int] = None
    off_total_yds: Optional[int] = None
    off_total_yds_rank: Optional[int] = None
    def_total_yds: Optional[int] = None
    def_total_yds_rank: Optional[int] = None
    off_pass_yds: Optional[int] = None
    off_pass_yds_rank: Optional[int] = None
    def_pass_yds: Optional[int] = None
    def_pass_yds_rank: Optional[int] = None
    off_rush_yds: Optional[int] = None
    off_rush_yds_rank: Optional[int] = None
    def_rush_yds: Optional[int] = None
    def_rush_yds_rank: Optional[int] = None
    to_diff: Optional[int] = None

    # Alignment
    div_name: Optional[str] = None
    division_id: Optional[str] = None
    conference_id: Optional[str] = None
    conference_name: Optional[str] = None

    # Salary cap
    cap_available: Optional[int] = None
    cap_spent: Optional[int] = None
    cap_room: Optional[int] = None
