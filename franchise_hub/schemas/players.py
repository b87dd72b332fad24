"""Roster player table."""

import uuid
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from franchise_hub.schemas.base import LeagueScopedMixin


class Player(LeagueScopedMixin, table=True):  # type: ignore[call-arg]
    """One roster entry, keyed by (league, Madden roster id).

    ``team_id`` is the internal team UUID; it stays null for free agents and
    for players whose team has not been imported yet.
    """

    __tablename__ = "players"
    __table_args__ = (
        UniqueConstraint("league_id", "roster_id", name="uq_players_league_roster"),
    )

    team_id: Optional[uuid.UUID] = Field(
        default=None, foreign_key="teams.id", ondelete="SET NULL", index=True
    )
    roster_id: str = Field(index=True)

    # Identity
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = Field(default=None, index=True)
    position: Optional[str] = Field(default=None, index=True)
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
    is_on_ir: Optional[bool] = None
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
