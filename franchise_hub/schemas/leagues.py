"""League and membership tables."""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from franchise_hub.schemas.base import TimestampMixin


class League(TimestampMixin, table=True):  # type: ignore[call-arg]
    """A Madden franchise league; every imported row hangs off one of these."""

    __tablename__ = "leagues"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str
    # Slug used in companion-app import URLs
    league_identifier: str = Field(unique=True, index=True, max_length=10)
    platform: str = Field(max_length=8)  # ps5 | xbsx
    madden_league_id: Optional[str] = Field(default=None, index=True)
    discord_server_id: Optional[str] = Field(default=None)
    import_url: Optional[str] = Field(default=None)
    owner_id: Optional[uuid.UUID] = Field(
        default=None, foreign_key="users.id", ondelete="SET NULL", index=True
    )
    last_import_at: Optional[datetime] = Field(default=None)


class LeagueMembership(TimestampMixin, table=True):  # type: ignore[call-arg]
    """A user's seat in a league (commissioner or member)."""

    __tablename__ = "league_memberships"
    __table_args__ = (
        UniqueConstraint("league_id", "user_id", name="uq_league_memberships_user"),
    )

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    league_id: uuid.UUID = Field(foreign_key="leagues.id", ondelete="CASCADE", index=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    role: str = Field(default="member", max_length=16)
    # Internal team UUID the member controls, if any
    team_id: Optional[uuid.UUID] = Field(default=None, foreign_key="teams.id", ondelete="SET NULL")
