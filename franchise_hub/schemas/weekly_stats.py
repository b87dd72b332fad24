"""Weekly statistics tables, one per Madden stat category.

Every table is partitioned by (league, week, season) and keyed by
(league, stat id, week, season). Team and player references are the raw
Madden ids as strings.
"""

from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from franchise_hub.models.fields import StatCategory
from franchise_hub.schemas.base import LeagueScopedMixin, WeekScopedMixin


def _stat_key(table: str) -> tuple[UniqueConstraint]:
    return (
        UniqueConstraint(
            "league_id",
            "stat_id",
            "week_index",
            "season_index",
            name=f"uq_{table}_league_stat_week_season",
        ),
    )


class WeeklyStatBase(LeagueScopedMixin, WeekScopedMixin):
    stat_id: Optional[str] = Field(default=None, index=True)
    schedule_id: Optional[str] = None
    team_id: Optional[str] = Field(default=None, index=True)


class PlayerWeeklyStatBase(WeeklyStatBase):
    # Madden roster id of the player the line belongs to
    player_id: Optional[str] = Field(default=None, index=True)


class DefensiveStat(PlayerWeeklyStatBase, table=True):  # type: ignore[call-arg]
    __tablename__ = "defensive_stats"
    __table_args__ = _stat_key("defensive_stats")

    def_total_tackles: Optional[int] = None
    def_sacks: Optional[float] = None
    def_ints: Optional[int] = None
    def_forced_fum: Optional[int] = None
    def_fum_rec: Optional[int] = None
    def_deflections: Optional[int] = None
    def_tds: Optional[int] = None
    def_safeties: Optional[int] = None
    def_int_return_yds: Optional[int] = None
    def_catch_allowed: Optional[int] = None
    def_pts: Optional[float] = None


class ReceivingStat(PlayerWeeklyStatBase, table=True):  # type: ignore[call-arg]
    __tablename__ = "receiving_stats"
    __table_args__ = _stat_key("receiving_stats")

    rec_catches: Optional[int] = None
    rec_yards: Optional[int] = None
    rec_tds: Optional[int] = None
    rec_yards_after_catch: Optional[int] = None
    rec_drops: Optional[int] = None
    rec_longest: Optional[int] = None
    rec_yards_per_catch: Optional[float] = None
    rec_catch_pct: Optional[float] = None
    rec_yac_per_catch: Optional[float] = None
    rec_yards_per_game: Optional[float] = None
    rec_to_pct: Optional[float] = None
    rec_pts: Optional[float] = None


class RushingStat(PlayerWeeklyStatBase, table=True):  # type: ignore[call-arg]
    __tablename__ = "rushing_stats"
    __table_args__ = _stat_key("rushing_stats")

    rush_att: Optional[int] = None
    rush_yards: Optional[int] = None
    rush_tds: Optional[int] = None
    rush_yards_per_att: Optional[float] = None
    rush_broken_tackles: Optional[int] = None
    rush_longest: Optional[int] = None
    rush_20_plus_yds: Optional[int] = None
    rush_yards_after_contact: Optional[int] = None
    rush_fum: Optional[int] = None
    rush_yards_per_game: Optional[float] = None
    rush_to_pct: Optional[float] = None
    rush_pts: Optional[float] = None


class PassingStat(PlayerWeeklyStatBase, table=True):  # type: ignore[call-arg]
    __tablename__ = "passing_stats"
    __table_args__ = _stat_key("passing_stats")

    pass_att: Optional[int] = None
    pass_comp: Optional[int] = None
    pass_yards: Optional[int] = None
    pass_tds: Optional[int] = None
    pass_ints: Optional[int] = None
    pass_sacks: Optional[int] = None
    pass_longest: Optional[int] = None
    passer_rating: Optional[float] = None
    pass_comp_pct: Optional[float] = None
    pass_yards_per_att: Optional[float] = None
    pass_yards_per_game: Optional[float] = None
    pass_pts: Optional[float] = None


class KickingStat(PlayerWeeklyStatBase, table=True):  # type: ignore[call-arg]
    __tablename__ = "kicking_stats"
    __table_args__ = _stat_key("kicking_stats")

    fg_att: Optional[int] = None
    fg_made: Optional[int] = None
    fg_longest: Optional[int] = None
    fg_50_plus_att: Optional[int] = None
    fg_50_plus_made: Optional[int] = None
    xp_att: Optional[int] = None
    xp_made: Optional[int] = None
    kickoff_att: Optional[int] = None
    kickoff_tbs: Optional[int] = None
    fg_comp_pct: Optional[float] = None
    xp_comp_pct: Optional[float] = None
    kick_pts: Optional[float] = None


class PuntingStat(PlayerWeeklyStatBase, table=True):  # type: ignore[call-arg]
    __tablename__ = "punting_stats"
    __table_args__ = _stat_key("punting_stats")

    punt_att: Optional[int] = None
    punt_yards: Optional[int] = None
    punt_longest: Optional[int] = None
    punts_in_20: Optional[int] = None
    punt_tbs: Optional[int] = None
    punts_blocked: Optional[int] = None
    punt_net_yards: Optional[int] = None
    punt_net_yards_per_att: Optional[float] = None
    punt_yards_per_att: Optional[float] = None


class TeamStat(WeeklyStatBase, table=True):  # type: ignore[call-arg]
    __tablename__ = "team_stats"
    __table_args__ = _stat_key("team_stats")

    total_wins: Optional[int] = None
    total_losses: Optional[int] = None
    total_ties: Optional[int] = None
    seed: Optional[int] = None

    off_total_yards: Optional[int] = None
    off_pass_yards: Optional[int] = None
    off_rush_yards: Optional[int] = None
    off_pass_tds: Optional[int] = None
    off_rush_tds: Optional[int] = None
    off_pts_per_game: Optional[float] = None
    off_1st_downs: Optional[int] = None
    off_3rd_down_att: Optional[int] = None
    off_3rd_down_conv: Optional[int] = None
    off_3rd_down_conv_pct: Optional[float] = None
    off_4th_down_att: Optional[int] = None
    off_4th_down_conv: Optional[int] = None
    off_4th_down_conv_pct: Optional[float] = None
    off_red_zones: Optional[int] = None
    off_red_zone_tds: Optional[int] = None
    off_red_zone_fgs: Optional[int] = None
    off_red_zone_pct: Optional[float] = None

    def_total_yards: Optional[int] = None
    def_pass_yards: Optional[int] = None
    def_rush_yards: Optional[int] = None
    def_pts_per_game: Optional[float] = None
    def_red_zones: Optional[int] = None
    def_red_zone_tds: Optional[int] = None
    def_red_zone_fgs: Optional[int] = None
    def_red_zone_pct: Optional[float] = None

    penalties: Optional[int] = None
    penalty_yards: Optional[int] = None
    to_giveaways: Optional[int] = None
    to_takeaways: Optional[int] = None
    to_diff: Optional[int] = None


STAT_TABLES: dict[StatCategory, type[WeeklyStatBase]] = {
    StatCategory.defense: DefensiveStat,
    StatCategory.receiving: ReceivingStat,
    StatCategory.rushing: RushingStat,
    StatCategory.passing: PassingStat,
    StatCategory.kicking: KickingStat,
    StatCategory.punting: PuntingStat,
    StatCategory.team: TeamStat,
}
