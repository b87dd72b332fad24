"""Player trait table (one row per player)."""

import uuid
from typing import Optional

from sqlmodel import Field

from franchise_hub.schemas.base import LeagueScopedMixin


class PlayerTrait(LeagueScopedMixin, table=True):  # type: ignore[call-arg]
    __tablename__ = "player_traits"

    player_id: uuid.UUID = Field(
        foreign_key="players.id", ondelete="CASCADE", unique=True, index=True
    )

    # Quarterback
    tight_spiral_trait: Optional[int] = None
    sense_pressure_trait: Optional[int] = None
    throw_away_trait: Optional[int] = None
    high_motor_trait: Optional[int] = None
    qb_style_trait: Optional[int] = None

    # Defense
    strip_ball_trait: Optional[int] = None
    play_ball_trait: Optional[int] = None
    big_hit_trait: Optional[int] = None
    dl_bull_rush_trait: Optional[int] = None
    dl_swim_trait: Optional[int] = None
    dl_spin_trait: Optional[int] = None
    lb_style_trait: Optional[int] = None

    # Ball carriers and receivers
    drops_open_pass_trait: Optional[int] = None
    fight_for_yards_trait: Optional[int] = None
    hpc_trait: Optional[int] = None
    pos_catch_trait: Optional[int] = None
    rac_catch_trait: Optional[int] = None
    feet_in_bounds_trait: Optional[int] = None
    cover_ball_trait: Optional[int] = None

    # General
    clutch_trait: Optional[int] = None
    penalty_trait: Optional[int] = None
    predict_trait: Optional[int] = None
    decision_maker_trait: Optional[int] = None
    run_style: Optional[int] = None
