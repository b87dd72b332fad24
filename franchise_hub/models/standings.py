"""Wire model for weekly standings exports."""

from typing import Optional

from pydantic import Field

from franchise_hub.models.companion import MaddenRecord

STANDINGS_LIST_KEY = "teamStandingInfoList"


class MaddenStanding(MaddenRecord):
    team_id: int = Field(gt=0)
    team_name: Optional[str] = None
    team_ovr: Optional[int] = None

    week_index: Optional[int] = None
    season_index: Optional[int] = None
    stage_index: Optional[int] = None
    calendar_year: Optional[int] = None

    rank: Optional[int] = None
    prev_rank: Optional[int] = None
    seed: Optional[int] = None
    playoff_status: Optional[int] = None

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
    to_diff: Optional[int] = Field(default=None, alias="tODiff")

    div_name: Optional[str] = Field(default=None, alias="divisionName")
    division_id: Optional[str] = None
    conference_id: Optional[str] = None
    conference_name: Optional[str] = None

    cap_available: Optional[int] = None
    cap_spent: Optional[int] = None
    cap_room: Optional[int] = None
