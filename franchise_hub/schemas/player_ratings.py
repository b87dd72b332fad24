"""Player rating table (one row per player, every column a 0-99 rating)."""

import uuid
from typing import Optional

from sqlmodel import Field

from franchise_hub.schemas.base import LeagueScopedMixin


class PlayerRating(LeagueScopedMixin, table=True):  # type: ignore[call-arg]
    __tablename__ = "player_ratings"

    player_id: uuid.UUID = Field(
        foreign_key="players.id", ondelete="CASCADE", unique=True, index=True
    )

    # Athleticism
    speed_rating: Optional[int] = None
    strength_rating: Optional[int] = None
    agility_rating: Optional[int] = None
    acceleration_rating: Optional[int] = None
    awareness_rating: Optional[int] = None
    jump_rating: Optional[int] = None
    change_of_direction_rating: Optional[int] = None
    injury_rating: Optional[int] = None
    stamina_rating: Optional[int] = None
    toughness_rating: Optional[int] = None

    # Ball skills
    catch_rating: Optional[int] = None
    carry_rating: Optional[int] = None
    spec_catch_rating: Optional[int] = None
    cit_rating: Optional[int] = None
    release_rating: Optional[int] = None
    route_run_short_rating: Optional[int] = None
    route_run_med_rating: Optional[int] = None
    route_run_deep_rating: Optional[int] = None
    bcv_rating: Optional[int] = None
    break_tackle_rating: Optional[int] = None
    truck_rating: Optional[int] = None
    stiff_arm_rating: Optional[int] = None
    spin_move_rating: Optional[int] = None
    juke_move_rating: Optional[int] = None

    # Passing
    throw_power_rating: Optional[int] = None
    throw_acc_rating: Optional[int] = None
    throw_acc_short_rating: Optional[int] = None
    throw_acc_mid_rating: Optional[int] = None
    throw_acc_deep_rating: Optional[int] = None
    throw_on_run_rating: Optional[int] = None
    throw_under_pressure_rating: Optional[int] = None
    play_action_rating: Optional[int] = None
    break_sack_rating: Optional[int] = None

    # Blocking
    lead_block_rating: Optional[int] = None
    impact_block_rating: Optional[int] = None
    run_block_rating: Optional[int] = None
    run_block_power_rating: Optional[int] = None
    run_block_finesse_rating: Optional[int] = None
    pass_block_rating: Optional[int] = None
    pass_block_power_rating: Optional[int] = None
    pass_block_finesse_rating: Optional[int] = None

    # Defense
    tackle_rating: Optional[int] = None
    hit_power_rating: Optional[int] = None
    pursuit_rating: Optional[int] = None
    play_rec_rating: Optional[int] = None
    zone_cover_rating: Optional[int] = None
    man_cover_rating: Optional[int] = None
    press_rating: Optional[int] = None
    block_shed_rating: Optional[int] = None
    power_moves_rating: Optional[int] = None
    finesse_moves_rating: Optional[int] = None

    # Special teams
    kick_power_rating: Optional[int] = None
    kick_acc_rating: Optional[int] = None
    kick_ret_rating: Optional[int] = None
