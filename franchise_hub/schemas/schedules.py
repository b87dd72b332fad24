"""Schedule (matchup) table."""

from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from franchise_hub.schemas.base import LeagueScopedMixin, WeekScopedMixin


class Schedule(LeagueScopedMixin, WeekScopedMixin, table=True):  # type: ignore[call-arg]
    """A single game between two teams, keyed by (league, Madden schedule id)."""

    __tablename__ = "schedules"
    __table_args__ = (
        UniqueConstraint("league_id", "schedule_id", name="uq_schedules_league_schedule"),
    )

    schedule_id: Optional[str] = Field(default=None, index=True)
    home_team_id: Optional[str] = None
    away_team_id: Optional[str] = None
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    # Madden game state code, stored as received (see GameStatus)
    status: Optional[int] = None
    is_game_of_the_week: Optional[bool] = None
