"""Wire models for the seven weekly stat exports."""

from typing import Optional

from pydantic import Field

from franchise_hub.models.companion import MaddenRecord
from franchise_hub.models.fields import StatCategory


class MaddenStat(MaddenRecord):
    stat_id: Optional[str] = None
    schedule_id: Optional[str] = None
    week_index: Optional[int] = None
    season_index: Optional[int] = None
    stage_index: Optional[int] = None
    team_id: Optional[str] = None


class MaddenPlayerStat(MaddenStat):
    player_id: Optional[str] = None


class MaddenDefensiveStat(MaddenPlayerStat):
    def_total_tackles: Optional[int] = None
    def_sacks: Optional[float] = None
    def_ints: Optional[int] = None
    def_forced_fum: Optional[int] = None
    def_fum_rec: Optional[int] = None
    def_deflections: Optional[int] = None
    def_tds: Optional[int] = Field(default=None, alias="defTDs")
    def_safeties: Optional[int] = None
    def_int_return_yds: Optional[int] = None
    def_catch_allowed: Optional[int] = None
    def_pts: Optional[float] = None


class MaddenReceivingStat(MaddenPlayerStat):
    rec_catches: Optional[int] = None
    rec_yards: Optional[int] = None
    rec_tds: Optional[int] = Field(default=None, alias="recTDs")
    rec_yards_after_catch: Optional[int] = None
    rec_drops: Optional[int] = None
    rec_longest: Optional[int] = None
    rec_yards_per_catch: Optional[float] = None
    rec_catch_pct: Optional[float] = None
    rec_yac_per_catch: Optional[float] = Field(default=None, alias="recYACPerCatch")
    rec_yards_per_game: Optional[float] = None
    rec_to_pct: Optional[float] = Field(default=None, alias="recTOPct")
    rec_pts: Optional[float] = None


class MaddenRushingStat(MaddenPlayerStat):
    rush_att: Optional[int] = None
    rush_yards: Optional[int] = None
    rush_tds: Optional[int] = Field(default=None, alias="rushTDs")
    rush_yards_per_att: Optional[float] = None
    rush_broken_tackles: Optional[int] = None
    rush_longest: Optional[int] = None
    rush_20_plus_yds: Optional[int] = Field(default=None, alias="rush20PlusYds")
    rush_yards_after_contact: Optional[int] = None
    rush_fum: Optional[int] = None
    rush_yards_per_game: Optional[float] = None
    rush_to_pct: Optional[float] = Field(default=None, alias="rushTOPct")
    rush_pts: Optional[float] = None


class MaddenPassingStat(MaddenPlayerStat):
    pass_att: Optional[int] = None
    pass_comp: Optional[int] = None
    pass_yards: Optional[int] = None
    pass_tds: Optional[int] = Field(default=None, alias="passTDs")
    pass_ints: Optional[int] = None
    pass_sacks: Optional[int] = None
    pass_longest: Optional[int] = None
    passer_rating: Optional[float] = None
    pass_comp_pct: Optional[float] = None
    pass_yards_per_att: Optional[float] = None
    pass_yards_per_game: Optional[float] = None
    pass_pts: Optional[float] = None


class MaddenKickingStat(MaddenPlayerStat):
    fg_att: Optional[int] = None
    fg_made: Optional[int] = None
    fg_longest: Optional[int] = None
    fg_50_plus_att: Optional[int] = Field(default=None, alias="fg50PlusAtt")
    fg_50_plus_made: Optional[int] = Field(default=None, alias="fg50PlusMade")
    xp_att: Optional[int] = None
    xp_made: Optional[int] = None
    kickoff_att: Optional[int] = None
    kickoff_tbs: Optional[int] = Field(default=None, alias="kickoffTBs")
    fg_comp_pct: Optional[float] = None
    xp_comp_pct: Optional[float] = None
    kick_pts: Optional[float] = None


class MaddenPuntingStat(MaddenPlayerStat):
    punt_att: Optional[int] = None
    punt_yards: Optional[int] = None
    punt_longest: Optional[int] = None
    punts_in_20: Optional[int] = Field(default=None, alias="puntsIn20")
    punt_tbs: Optional[int] = Field(default=None, alias="puntTBs")
    punts_blocked: Optional[int] = None
    punt_net_yards: Optional[int] = None
    punt_net_yards_per_att: Optional[float] = None
    punt_yards_per_att: Optional[float] = None


class MaddenTeamStat(MaddenStat):
    total_wins: Optional[int] = None
    total_losses: Optional[int] = None
    total_ties: Optional[int] = None
    seed: Optional[int] = None

    off_total_yards: Optional[int] = None
    off_pass_yards: Optional[int] = None
    off_rush_yards: Optional[int] = None
    off_pass_tds: Optional[int] = Field(default=None, alias="offPassTDs")
    off_rush_tds: Optional[int] = Field(default=None, alias="offRushTDs")
    off_pts_per_game: Optional[float] = None
    off_1st_downs: Optional[int] = Field(default=None, alias="off1stDowns")
    off_3rd_down_att: Optional[int] = Field(default=None, alias="off3rdDownAtt")
    off_3rd_down_conv: Optional[int] = Field(default=None, alias="off3rdDownConv")
    off_3rd_down_conv_pct: Optional[float] = Field(default=None, alias="off3rdDownConvPct")
    off_4th_down_att: Optional[int] = Field(default=None, alias="off4thDownAtt")
    off_4th_down_conv: Optional[int] = Field(default=None, alias="off4thDownConv")
    off_4th_down_conv_pct: Optional[float] = Field(default=None, alias="off4thDownConvPct")
    off_red_zones: Optional[int] = None
    off_red_zone_tds: Optional[int] = Field(default=None, alias="offRedZoneTDs")
    off_red_zone_fgs: Optional[int] = Field(default=None, alias="offRedZoneFGs")
    off_red_zone_pct: Optional[float] = None

    def_total_yards: Optional[int] = None
    def_pass_yards: Optional[int] = None
    def_rush_yards: Optional[int] = None
    def_pts_per_game: Optional[float] = None
    def_red_zones: Optional[int] = None
    def_red_zone_tds: Optional[int] = Field(default=None, alias="defRedZoneTDs")
    def_red_zone_fgs: Optional[int] = Field(default=None, alias="defRedZoneFGs")
    def_red_zone_pct: Optional[float] = None

    penalties: Optional[int] = None
    penalty_yards: Optional[int] = None
    to_giveaways: Optional[int] = None
    to_takeaways: Optional[int] = None
    to_diff: Optional[int] = None


STAT_RECORD_MODELS: dict[StatCategory, type[MaddenStat]] = {
    StatCategory.defense: MaddenDefensiveStat,
    StatCategory.receiving: MaddenReceivingStat,
    StatCategory.rushing: MaddenRushingStat,
    StatCategory.passing: MaddenPassingStat,
    StatCategory.kicking: MaddenKickingStat,
    StatCategory.punting: MaddenPuntingStat,
    StatCategory.team: MaddenTeamStat,
}
