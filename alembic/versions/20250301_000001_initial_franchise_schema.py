"""Initial franchise schema.

Creates leagues, users, teams, roster tables, standings, schedules and the
seven weekly stat tables, including the natural-key unique constraints the
import upserts target.

Revision ID: 20250301_000001
Revises:
Create Date: 2025-03-01 00:00:01
"""

from alembic import op  # type: ignore[attr-defined]
import sqlalchemy as sa

revision = "20250301_000001"
down_revision = None
branch_labels = None
depends_on = None

STAT_TABLES = (
    "defensive_stats",
    "receiving_stats",
    "rushing_stats",
    "passing_stats",
    "kicking_stats",
    "punting_stats",
    "team_stats",
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def _league_scoped() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        sa.Column(
            "league_id",
            sa.Uuid(),
            sa.ForeignKey("leagues.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(),
    ]


def _week_scoped() -> list[sa.Column]:
    return [
        sa.Column("week_index", sa.Integer()),
        sa.Column("season_index", sa.Integer()),
        sa.Column("stage_index", sa.Integer()),
    ]


def _player_child(unique: bool) -> list[sa.Column]:
    return [
        sa.Column(
            "player_id",
            sa.Uuid(),
            sa.ForeignKey("players.id", ondelete="CASCADE"),
            nullable=False,
            unique=unique,
        ),
    ]


def _stat_base(player_scoped: bool) -> list[sa.Column]:
    columns = [
        *_league_scoped(),
        *_week_scoped(),
        sa.Column("stat_id", sa.String()),
        sa.Column("schedule_id", sa.String()),
        sa.Column("team_id", sa.String()),
    ]
    if player_scoped:
        columns.append(sa.Column("player_id", sa.String()))
    return columns


def _index(table: str, *columns: str) -> None:
    for column in columns:
        op.create_index(f"ix_{table}_{column}", table, [column], unique=False)


def _create_stat_table(name: str, *columns: sa.Column, player_scoped: bool = True) -> None:
    op.create_table(
        name,
        *_stat_base(player_scoped),
        *columns,
        sa.UniqueConstraint(
            "league_id",
            "stat_id",
            "week_index",
            "season_index",
            name=f"uq_{name}_league_stat_week_season",
        ),
    )
    indexed = ["league_id", "week_index", "season_index", "stat_id", "team_id"]
    if player_scoped:
        indexed.append("player_id")
    _index(name, *indexed)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        *_timestamps(),
        sa.Column("email", sa.String()),
        sa.Column("username", sa.String()),
        sa.Column("discord_id", sa.String()),
        sa.Column("avatar_url", sa.String()),
    )
    _index("users", "email", "discord_id")

    op.create_table(
        "user_preferences",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        *_timestamps(),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("email_notifications", sa.Boolean(), nullable=False),
        sa.Column("discord_notifications", sa.Boolean(), nullable=False),
        sa.Column("theme", sa.String(length=16), nullable=False),
    )
    op.create_index(
        "ix_user_preferences_user_id", "user_preferences", ["user_id"], unique=True
    )

    op.create_table(
        "leagues",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        *_timestamps(),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("league_identifier", sa.String(length=10), nullable=False),
        sa.Column("platform", sa.String(length=8), nullable=False),
        sa.Column("madden_league_id", sa.String()),
        sa.Column("discord_server_id", sa.String()),
        sa.Column("import_url", sa.String()),
        sa.Column(
            "owner_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="SET NULL")
        ),
        sa.Column("last_import_at", sa.DateTime()),
    )
    op.create_index(
        "ix_leagues_league_identifier", "leagues", ["league_identifier"], unique=True
    )
    _index("leagues", "madden_league_id", "owner_id")

    op.create_table(
        "teams",
        *_league_scoped(),
        sa.Column("team_id", sa.String(), nullable=False),
        sa.Column("city_name", sa.String()),
        sa.Column("nick_name", sa.String()),
        sa.Column("abbr_name", sa.String()),
        sa.Column("display_name", sa.String()),
        sa.Column("div_name", sa.String()),
        sa.Column("user_name", sa.String()),
        sa.Column("logo_id", sa.Integer()),
        sa.Column("primary_color", sa.Integer()),
        sa.Column("secondary_color", sa.Integer()),
        sa.Column("ovr_rating", sa.Integer()),
        sa.Column("off_scheme", sa.Integer()),
        sa.Column("def_scheme", sa.Integer()),
        sa.Column("injury_count", sa.Integer()),
        sa.UniqueConstraint("league_id", "team_id", name="uq_teams_league_team"),
    )
    _index("teams", "league_id", "team_id")

    op.create_table(
        "league_memberships",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        *_timestamps(),
        sa.Column(
            "league_id",
            sa.Uuid(),
            sa.ForeignKey("leagues.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("role", sa.String(length=16), nullable=False),
        sa.Column("team_id", sa.Uuid(), sa.ForeignKey("teams.id", ondelete="SET NULL")),
        sa.UniqueConstraint("league_id", "user_id", name="uq_league_memberships_user"),
    )
    _index("league_memberships", "league_id", "user_id")

    op.create_table(
        "players",
        *_league_scoped(),
        sa.Column("team_id", sa.Uuid(), sa.ForeignKey("teams.id", ondelete="SET NULL")),
        sa.Column("roster_id", sa.String(), nullable=False),
        sa.Column("full_name", sa.String()),
        sa.Column("position", sa.String()),
        sa.Column("first_name", sa.String()),
        sa.Column("last_name", sa.String()),
        sa.Column("jersey_num", sa.Integer()),
        sa.Column("height", sa.Integer()),
        sa.Column("weight", sa.Integer()),
        sa.Column("age", sa.Integer()),
        sa.Column("rookie_year", sa.Integer()),
        sa.Column("years_pro", sa.Integer()),
        sa.Column("college", sa.String()),
        sa.Column("home_town", sa.String()),
        sa.Column("home_state", sa.Integer()),
        sa.Column("birth_day", sa.Integer()),
        sa.Column("birth_month", sa.Integer()),
        sa.Column("birth_year", sa.Integer()),
        sa.Column("draft_round", sa.Integer()),
        sa.Column("draft_pick", sa.Integer()),
        sa.Column("player_best_ovr", sa.Integer()),
        sa.Column("player_scheme_ovr", sa.Integer()),
        sa.Column("team_scheme_ovr", sa.Integer()),
        sa.Column("dev_trait", sa.Integer()),
        sa.Column("scheme", sa.Integer()),
        sa.Column("legacy_score", sa.Integer()),
        sa.Column("experience_points", sa.Integer()),
        sa.Column("skill_points", sa.Integer()),
        sa.Column("contract_salary", sa.Integer()),
        sa.Column("contract_bonus", sa.Integer()),
        sa.Column("contract_years_left", sa.Integer()),
        sa.Column("contract_length", sa.Integer()),
        sa.Column("cap_hit", sa.Integer()),
        sa.Column("cap_release_penalty", sa.Integer()),
        sa.Column("cap_release_net_savings", sa.Integer()),
        sa.Column("desired_salary", sa.Integer()),
        sa.Column("desired_bonus", sa.Integer()),
        sa.Column("desired_length", sa.Integer()),
        sa.Column("re_sign_status", sa.Integer()),
        sa.Column("is_free_agent", sa.Boolean()),
        sa.Column("is_on_practice_squad", sa.Boolean()),
        sa.Column("is_on_ir", sa.Boolean()),
        sa.Column("is_active", sa.Boolean()),
        sa.Column("injury_type", sa.Integer()),
        sa.Column("injury_length", sa.Integer()),
        sa.Column("portrait_id", sa.Integer()),
        sa.Column("presentation_id", sa.Integer()),
        sa.Column("physical_grade", sa.Integer()),
        sa.Column("intangible_grade", sa.Integer()),
        sa.Column("production_grade", sa.Integer()),
        sa.Column("durability_grade", sa.Integer()),
        sa.Column("size_grade", sa.Integer()),
        sa.UniqueConstraint("league_id", "roster_id", name="uq_players_league_roster"),
    )
    _index("players", "league_id", "team_id", "roster_id", "full_name", "position")

    op.create_table(
        "player_traits",
        *_league_scoped(),
        *_player_child(unique=True),
        sa.Column("tight_spiral_trait", sa.Integer()),
        sa.Column("sense_pressure_trait", sa.Integer()),
        sa.Column("throw_away_trait", sa.Integer()),
        sa.Column("high_motor_trait", sa.Integer()),
        sa.Column("qb_style_trait", sa.Integer()),
        sa.Column("strip_ball_trait", sa.Integer()),
        sa.Column("play_ball_trait", sa.Integer()),
        sa.Column("big_hit_trait", sa.Integer()),
        sa.Column("dl_bull_rush_trait", sa.Integer()),
        sa.Column("dl_swim_trait", sa.Integer()),
        sa.Column("dl_spin_trait", sa.Integer()),
        sa.Column("lb_style_trait", sa.Integer()),
        sa.Column("drops_open_pass_trait", sa.Integer()),
        sa.Column("fight_for_yards_trait", sa.Integer()),
        sa.Column("hpc_trait", sa.Integer()),
        sa.Column("pos_catch_trait", sa.Integer()),
        sa.Column("rac_catch_trait", sa.Integer()),
        sa.Column("feet_in_bounds_trait", sa.Integer()),
        sa.Column("cover_ball_trait", sa.Integer()),
        sa.Column("clutch_trait", sa.Integer()),
        sa.Column("penalty_trait", sa.Integer()),
        sa.Column("predict_trait", sa.Integer()),
        sa.Column("decision_maker_trait", sa.Integer()),
        sa.Column("run_style", sa.Integer()),
    )
    _index("player_traits", "league_id")

    op.create_table(
        "player_ratings",
        *_league_scoped(),
        *_player_child(unique=True),
        sa.Column("speed_rating", sa.Integer()),
        sa.Column("strength_rating", sa.Integer()),
        sa.Column("agility_rating", sa.Integer()),
        sa.Column("acceleration_rating", sa.Integer()),
        sa.Column("awareness_rating", sa.Integer()),
        sa.Column("jump_rating", sa.Integer()),
        sa.Column("change_of_direction_rating", sa.Integer()),
        sa.Column("injury_rating", sa.Integer()),
        sa.Column("stamina_rating", sa.Integer()),
        sa.Column("toughness_rating", sa.Integer()),
        sa.Column("catch_rating", sa.Integer()),
        sa.Column("carry_rating", sa.Integer()),
        sa.Column("spec_catch_rating", sa.Integer()),
        sa.Column("cit_rating", sa.Integer()),
        sa.Column("release_rating", sa.Integer()),
        sa.Column("route_run_short_rating", sa.Integer()),
        sa.Column("route_run_med_rating", sa.Integer()),
        sa.Column("route_run_deep_rating", sa.Integer()),
        sa.Column("bcv_rating", sa.Integer()),
        sa.Column("break_tackle_rating", sa.Integer()),
        sa.Column("truck_rating", sa.Integer()),
        sa.Column("stiff_arm_rating", sa.Integer()),
        sa.Column("spin_move_rating", sa.Integer()),
        sa.Column("juke_move_rating", sa.Integer()),
        sa.Column("throw_power_rating", sa.Integer()),
        sa.Column("throw_acc_rating", sa.Integer()),
        sa.Column("throw_acc_short_rating", sa.Integer()),
        sa.Column("throw_acc_mid_rating", sa.Integer()),
        sa.Column("throw_acc_deep_rating", sa.Integer()),
        sa.Column("throw_on_run_rating", sa.Integer()),
        sa.Column("throw_under_pressure_rating", sa.Integer()),
        sa.Column("play_action_rating", sa.Integer()),
        sa.Column("break_sack_rating", sa.Integer()),
        sa.Column("lead_block_rating", sa.Integer()),
        sa.Column("impact_block_rating", sa.Integer()),
        sa.Column("run_block_rating", sa.Integer()),
        sa.Column("run_block_power_rating", sa.Integer()),
        sa.Column("run_block_finesse_rating", sa.Integer()),
        sa.Column("pass_block_rating", sa.Integer()),
        sa.Column("pass_block_power_rating", sa.Integer()),
        sa.Column("pass_block_finesse_rating", sa.Integer()),
        sa.Column("tackle_rating", sa.Integer()),
        sa.Column("hit_power_rating", sa.Integer()),
        sa.Column("pursuit_rating", sa.Integer()),
        sa.Column("play_rec_rating", sa.Integer()),
        sa.Column("zone_cover_rating", sa.Integer()),
        sa.Column("man_cover_rating", sa.Integer()),
        sa.Column("press_rating", sa.Integer()),
        sa.Column("block_shed_rating", sa.Integer()),
        sa.Column("power_moves_rating", sa.Integer()),
        sa.Column("finesse_moves_rating", sa.Integer()),
        sa.Column("kick_power_rating", sa.Integer()),
        sa.Column("kick_acc_rating", sa.Integer()),
        sa.Column("kick_ret_rating", sa.Integer()),
    )
    _index("player_ratings", "league_id")

    op.create_table(
        "player_abilities",
        *_league_scoped(),
        *_player_child(unique=False),
        sa.Column("signature_title", sa.String()),
        sa.Column("signature_description", sa.String()),
        sa.Column("signature_logo_id", sa.Integer()),
        sa.Column("signature_activation_description", sa.String()),
        sa.Column("signature_deactivation_description", sa.String()),
        sa.Column("ability_rank", sa.String()),
        sa.Column("is_passive", sa.Boolean()),
        sa.Column("is_unlocked", sa.Boolean()),
        sa.Column("market_ability_alias", sa.String()),
    )
    _index("player_abilities", "league_id", "player_id")

    op.create_table(
        "standings",
        *_league_scoped(),
        *_week_scoped(),
        sa.Column("team_id", sa.String(), nullable=False),
        sa.Column("team_name", sa.String()),
        sa.Column("calendar_year", sa.Integer()),
        sa.Column("team_ovr", sa.Integer()),
        sa.Column("rank", sa.Integer()),
        sa.Column("prev_rank", sa.Integer()),
        sa.Column("seed", sa.Integer()),
        sa.Column("playoff_status", sa.Integer()),
        sa.Column("total_wins", sa.Integer()),
        sa.Column("total_losses", sa.Integer()),
        sa.Column("total_ties", sa.Integer()),
        sa.Column("win_pct", sa.Float()),
        sa.Column("home_wins", sa.Integer()),
        sa.Column("home_losses", sa.Integer()),
        sa.Column("home_ties", sa.Integer()),
        sa.Column("away_wins", sa.Integer()),
        sa.Column("away_losses", sa.Integer()),
        sa.Column("away_ties", sa.Integer()),
        sa.Column("div_wins", sa.Integer()),
        sa.Column("div_losses", sa.Integer()),
        sa.Column("div_ties", sa.Integer()),
        sa.Column("conf_wins", sa.Integer()),
        sa.Column("conf_losses", sa.Integer()),
        sa.Column("conf_ties", sa.Integer()),
        sa.Column("win_loss_streak", sa.Integer()),
        sa.Column("pts_for", sa.Integer()),
        sa.Column("pts_against", sa.Integer()),
        sa.Column("net_pts", sa.Integer()),
        sa.Column("pts_for_rank", sa.Integer()),
        sa.Column("pts_against_rank", sa.Integer()),
        sa.Column("off_total_yds", sa.Integer()),
        sa.Column("off_total_yds_rank", sa.Integer()),
        sa.Column("def_total_yds", sa.Integer()),
        sa.Column("def_total_yds_rank", sa.Integer()),
        sa.Column("off_pass_yds", sa.Integer()),
        sa.Column("off_pass_yds_rank", sa.Integer()),
        sa.Column("def_pass_yds", sa.Integer()),
        sa.Column("def_pass_yds_rank", sa.Integer()),
        sa.Column("off_rush_yds", sa.Integer()),
        sa.Column("off_rush_yds_rank", sa.Integer()),
        sa.Column("def_rush_yds", sa.Integer()),
        sa.Column("def_rush_yds_rank", sa.Integer()),
        sa.Column("to_diff", sa.Integer()),
        sa.Column("div_name", sa.String()),
        sa.Column("division_id", sa.String()),
        sa.Column("conference_id", sa.String()),
        sa.Column("conference_name", sa.String()),
        sa.Column("cap_available", sa.Integer()),
        sa.Column("cap_spent", sa.Integer()),
        sa.Column("cap_room", sa.Integer()),
        sa.UniqueConstraint(
            "league_id",
            "team_id",
            "week_index",
            "season_index",
            name="uq_standings_league_team_week_season",
        ),
    )
    _index("standings", "league_id", "team_id", "week_index", "season_index")

    op.create_table(
        "schedules",
        *_league_scoped(),
        *_week_scoped(),
        sa.Column("schedule_id", sa.String()),
        sa.Column("home_team_id", sa.String()),
        sa.Column("away_team_id", sa.String()),
        sa.Column("home_score", sa.Integer()),
        sa.Column("away_score", sa.Integer()),
        sa.Column("status", sa.Integer()),
        sa.Column("is_game_of_the_week", sa.Boolean()),
        sa.UniqueConstraint("league_id", "schedule_id", name="uq_schedules_league_schedule"),
    )
    _index("schedules", "league_id", "schedule_id", "week_index", "season_index")

    _create_stat_table(
        "defensive_stats",
        sa.Column("def_total_tackles", sa.Integer()),
        sa.Column("def_sacks", sa.Float()),
        sa.Column("def_ints", sa.Integer()),
        sa.Column("def_forced_fum", sa.Integer()),
        sa.Column("def_fum_rec", sa.Integer()),
        sa.Column("def_deflections", sa.Integer()),
        sa.Column("def_tds", sa.Integer()),
        sa.Column("def_safeties", sa.Integer()),
        sa.Column("def_int_return_yds", sa.Integer()),
        sa.Column("def_catch_allowed", sa.Integer()),
        sa.Column("def_pts", sa.Float()),
    )
    _create_stat_table(
        "receiving_stats",
        sa.Column("rec_catches", sa.Integer()),
        sa.Column("rec_yards", sa.Integer()),
        sa.Column("rec_tds", sa.Integer()),
        sa.Column("rec_yards_after_catch", sa.Integer()),
        sa.Column("rec_drops", sa.Integer()),
        sa.Column("rec_longest", sa.Integer()),
        sa.Column("rec_yards_per_catch", sa.Float()),
        sa.Column("rec_catch_pct", sa.Float()),
        sa.Column("rec_yac_per_catch", sa.Float()),
        sa.Column("rec_yards_per_game", sa.Float()),
        sa.Column("rec_to_pct", sa.Float()),
        sa.Column("rec_pts", sa.Float()),
    )
    _create_stat_table(
        "rushing_stats",
        sa.Column("rush_att", sa.Integer()),
        sa.Column("rush_yards", sa.Integer()),
        sa.Column("rush_tds", sa.Integer()),
        sa.Column("rush_yards_per_att", sa.Float()),
        sa.Column("rush_broken_tackles", sa.Integer()),
        sa.Column("rush_longest", sa.Integer()),
        sa.Column("rush_20_plus_yds", sa.Integer()),
        sa.Column("rush_yards_after_contact", sa.Integer()),
        sa.Column("rush_fum", sa.Integer()),
        sa.Column("rush_yards_per_game", sa.Float()),
        sa.Column("rush_to_pct", sa.Float()),
        sa.Column("rush_pts", sa.Float()),
    )
    _create_stat_table(
        "passing_stats",
        sa.Column("pass_att", sa.Integer()),
        sa.Column("pass_comp", sa.Integer()),
        sa.Column("pass_yards", sa.Integer()),
        sa.Column("pass_tds", sa.Integer()),
        sa.Column("pass_ints", sa.Integer()),
        sa.Column("pass_sacks", sa.Integer()),
        sa.Column("pass_longest", sa.Integer()),
        sa.Column("passer_rating", sa.Float()),
        sa.Column("pass_comp_pct", sa.Float()),
        sa.Column("pass_yards_per_att", sa.Float()),
        sa.Column("pass_yards_per_game", sa.Float()),
        sa.Column("pass_pts", sa.Float()),
    )
    _create_stat_table(
        "kicking_stats",
        sa.Column("fg_att", sa.Integer()),
        sa.Column("fg_made", sa.Integer()),
        sa.Column("fg_longest", sa.Integer()),
        sa.Column("fg_50_plus_att", sa.Integer()),
        sa.Column("fg_50_plus_made", sa.Integer()),
        sa.Column("xp_att", sa.Integer()),
        sa.Column("xp_made", sa.Integer()),
        sa.Column("kickoff_att", sa.Integer()),
        sa.Column("kickoff_tbs", sa.Integer()),
        sa.Column("fg_comp_pct", sa.Float()),
        sa.Column("xp_comp_pct", sa.Float()),
        sa.Column("kick_pts", sa.Float()),
    )
    _create_stat_table(
        "punting_stats",
        sa.Column("punt_att", sa.Integer()),
        sa.Column("punt_yards", sa.Integer()),
        sa.Column("punt_longest", sa.Integer()),
        sa.Column("punts_in_20", sa.Integer()),
        sa.Column("punt_tbs", sa.Integer()),
        sa.Column("punts_blocked", sa.Integer()),
        sa.Column("punt_net_yards", sa.Integer()),
        sa.Column("punt_net_yards_per_att", sa.Float()),
        sa.Column("punt_yards_per_att", sa.Float()),
    )
    _create_stat_table(
        "team_stats",
        sa.Column("total_wins", sa.Integer()),
        sa.Column("total_losses", sa.Integer()),
        sa.Column("total_ties", sa.Integer()),
        sa.Column("seed", sa.Integer()),
        sa.Column("off_total_yards", sa.Integer()),
        sa.Column("off_pass_yards", sa.Integer()),
        sa.Column("off_rush_yards", sa.Integer()),
        sa.Column("off_pass_tds", sa.Integer()),
        sa.Column("off_rush_tds", sa.Integer()),
        sa.Column("off_pts_per_game", sa.Float()),
        sa.Column("off_1st_downs", sa.Integer()),
        sa.Column("off_3rd_down_att", sa.Integer()),
        sa.Column("off_3rd_down_conv", sa.Integer()),
        sa.Column("off_3rd_down_conv_pct", sa.Float()),
        sa.Column("off_4th_down_att", sa.Integer()),
        sa.Column("off_4th_down_conv", sa.Integer()),
        sa.Column("off_4th_down_conv_pct", sa.Float()),
        sa.Column("off_red_zones", sa.Integer()),
        sa.Column("off_red_zone_tds", sa.Integer()),
        sa.Column("off_red_zone_fgs", sa.Integer()),
        sa.Column("off_red_zone_pct", sa.Float()),
        sa.Column("def_total_yards", sa.Integer()),
        sa.Column("def_pass_yards", sa.Integer()),
        sa.Column("def_rush_yards", sa.Integer()),
        sa.Column("def_pts_per_game", sa.Float()),
        sa.Column("def_red_zones", sa.Integer()),
        sa.Column("def_red_zone_tds", sa.Integer()),
        sa.Column("def_red_zone_fgs", sa.Integer()),
        sa.Column("def_red_zone_pct", sa.Float()),
        sa.Column("penalties", sa.Integer()),
        sa.Column("penalty_yards", sa.Integer()),
        sa.Column("to_giveaways", sa.Integer()),
        sa.Column("to_takeaways", sa.Integer()),
        sa.Column("to_diff", sa.Integer()),
        player_scoped=False,
    )


def downgrade() -> None:
    for name in STAT_TABLES:
        op.drop_table(name)
    for name in (
        "schedules",
        "standings",
        "player_abilities",
        "player_ratings",
        "player_traits",
        "players",
        "league_memberships",
        "teams",
        "leagues",
        "user_preferences",
        "users",
    ):
        op.drop_table(name)
