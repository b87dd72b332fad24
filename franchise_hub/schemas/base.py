"""Base Classes to Use as MixIns Elsewhere in App"""

import uuid
from datetime import UTC, datetime
from typing import Optional

from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    """Naive UTC timestamp; columns are TIMESTAMP WITHOUT TIME ZONE."""
    return datetime.now(UTC).replace(tzinfo=None)


class TimestampMixin(SQLModel):
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class LeagueScopedMixin(TimestampMixin):
    """Surrogate UUID key plus the owning league (the tenant boundary)."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    league_id: uuid.UUID = Field(
        foreign_key="leagues.id", ondelete="CASCADE", index=True
    )


class WeekScopedMixin(SQLModel):
    """Partition columns shared by week-scoped tables."""

    week_index: Optional[int] = Field(default=None, index=True)
    season_index: Optional[int] = Field(default=None, index=True)
    stage_index: Optional[int] = Field(default=None)
