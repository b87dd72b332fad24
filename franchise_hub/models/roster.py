"""Wire model for roster exports (player bio, traits, ratings and abilities)."""

from typing import Optional

from pydantic import Field

from franchise_hub.models.companion import MaddenRecord
from franchise_hub.models.fields import TRAIT_VALUE

ROSTER_LIST_KEY = "rosterInfoList"


class MaddenSignatureAbility(MaddenRecord):
    signature_title: Optional[str] = None
    signature_description: Optional[str] = None
    signature_logo_id: Optional[int] = None
    signature_activation_description: Optional[str] = None
    signature_deactivation_description: Optional[str] = None
    ability_rank: Optional[str] = None
    is_passive: Optional[bool] = None
    is_unlocked: Optional[bool] = None
    market_ability_alias: Optional[str] = None


class MaddenPlayer(MaddenRecord):
    """One entry of ``rosterInfoList``.

    The companion app sends a single flat object per player; the roster
    transformer splits it across the player, trait, rating and ability tables.
    ``team_id`` of 0 (or a team we have not imported) means no team link.
    """

    roster_id: int = Field(gt=0)
    team_id: Optional[int] = Field(default=None, ge=0)

    # Identity
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    position: Optional[str] = None
    jersey_num: Optional[int] = None

    # Physical
    height: Optional[int] = None
    weight: Optional[int] = None
    age: Optional[int] = None

    # Career
    rookie_year: Optional[int] = None
    years_pro: Optional[int] = None
    college: Optional[str] = None
    home_town: Optional[str] = None
    home_state: Optional[int] = None
    birth_day: Optional[int] = None
    birth_month: Optional[int] = None
    birth_year: Optional[int] = None
    draft_round: Optional[int] = None
    draft_pick: Optional[int] = None

    # Overalls and development
    player_best_ovr: Optional[int] = None
    player_scheme_ovr: Optional[int] = None
    team_scheme_ovr: Optional[int] = None
    dev_trait: Optional[int] = None
    scheme: Optional[int] = None
    legacy_score: Optional[int] = None
    experience_points: Optional[int] = None
    skill_points: Optional[int] = None

    # Contract
    contract_salary: Optional[int] = None
    contract_bonus: Optional[int] = None
    contract_years_left: Optional[int] = None
    contract_length: Optional[int] = None
    cap_hit: Optional[int] = None
    cap_release_penalty: Optional[int] = None
    cap_release_net_savings: Optional[int] = None
    desired_salary: Optional[int] = None
    desired_bonus: Optional[int] = None
    desired_length: Optional[int] = None
    re_sign_status: Optional[int] = None

    # Status
    is_free_agent: Optional[bool] = None
    is_on_practice_squad: Optional[bool] = None
    is_on_ir: Optional[bool] = Field(default=None, alias="isOnIR")
    is_active: Optional[bool] = None
    injury_type: Optional[int] = None
    injury_length: Optional[int] = None

    # Presentation
    portrait_id: Optional[int] = None
    presentation_id: Optional[int] = None

    # Grades
    physical_grade: Optional[int] = None
    intangible_grade: Optional[int] = None
    production_grade: Optional[int] = None
    durability_grade: Optional[int] = None
    size_grade: Optional[int] = None

    # Traits
    tight_spiral_trait: TRAIT_VALUE = None
    sense_pressure_trait: TRAIT_VALUE = None
    throw_away_trait: TRAIT_VALUE = None
    high_motor_trait: TRAIT_VALUE = None
    qb_style_trait: TRAIT_VALUE = Field(default=None, alias="qBStyleTrait")
    strip_ball_trait: TRAIT_VALUE = None
    play_ball_trait: TRAIT_VALUE = None
    big_hit_trait: TRAIT_VALUE = None
    dl_bull_rush_trait: TRAIT_VALUE = Field(default=None, alias="dLBullRushTrait")
    dl_swim_trait: TRAIT_VALUE = Field(default=None, alias="dLSwimTrait")
    dl_spin_trait: TRAIT_VALUE = Field(default=None, alias="dLSpinTrait")
    lb_style_trait: TRAIT_VALUE = Field(default=None, alias="lBStyleTrait")
    drops_open_pass_trait: TRAIT_VALUE = Field(default=None, alias="dropOpenPassTrait")
    fight_for_yards_trait: TRAIT_VALUE = None
    hpc_trait: TRAIT_VALUE = Field(default=None, alias="hPCatchTrait")
    pos_catch_trait: TRAIT_VALUE = None
    rac_catch_trait: TRAIT_VALUE = Field(default=None, alias="yACCatchTrait")
    feet_in_bounds_trait: TRAIT_VALUE = None
    cover_ball_trait: TRAIT_VALUE = None
    clutch_trait: TRAIT_VALUE = None
    penalty_trait: TRAIT_VALUE = None
    predict_trait: TRAIT_VALUE = None
    decision_maker_trait: TRAIT_VALUE = None
    run_style: TRAIT_VALUE = None

    # Ratings
    speed_rating: Optional[int] = None
    strength_rating: Optional[int] = None
    agility_rating: Optional[int] = None
    acceleration_rating: Optional[int] = Field(default=None, alias="accelRating")
    awareness_rating: Optional[int] = Field(default=None, alias="awareRating")
    jump_rating: Optional[int] = None
    change_of_direction_rating: Optional[int] = None
    injury_rating: Optional[int] = None
    stamina_rating: Optional[int] = None
    toughness_rating: Optional[int] = Field(default=None, alias="toughRating")
    catch_rating: Optional[int] = None
    carry_rating: Optional[int] = None
    spec_catch_rating: Optional[int] = None
    cit_rating: Optional[int] = Field(default=None, alias="cITRating")
    release_rating: Optional[int] = None
    route_run_short_rating: Optional[int] = None
    route_run_med_rating: Optional[int] = None
    route_run_deep_rating: Optional[int] = None
    bcv_rating: Optional[int] = Field(default=None, alias="bCVRating")
    break_tackle_rating: Optional[int] = None
    truck_rating: Optional[int] = None
    stiff_arm_rating: Optional[int] = None
    spin_move_rating: Optional[int] = None
    juke_move_rating: Optional[int] = None
    throw_power_rating: Optional[int] = None
    throw_acc_rating: Optional[int] = None
    throw_acc_short_rating: Optional[int] = None
    throw_acc_mid_rating: Optional[int] = None
    throw_acc_deep_rating: Optional[int] = None
    throw_on_run_rating: Optional[int] = None
    throw_under_pressure_rating: Optional[int] = None
    play_action_rating: Optional[int] = None
    break_sack_rating: Optional[int] = None
    lead_block_rating: Optional[int] = None
    impact_block_rating: Optional[int] = None
    run_block_rating: Optional[int] = None
    run_block_power_rating: Optional[int] = None
    run_block_finesse_rating: Optional[int] = None
    pass_block_rating: Optional[int] = None
    pass_block_power_rating: Optional[int] = None
    pass_block_finesse_rating: Optional[int] = None
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
    kick_power_rating: Optional[int] = None
    kick_acc_rating: Optional[int] = None
    kick_ret_rating: Optional[int] = None

    # Abilities
    signature_slot_list: Optional[list[Optional[MaddenSignatureAbility]]] = None
