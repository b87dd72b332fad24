"""User profile tables mirrored from the identity provider."""

import uuid
from typing import Optional

from sqlmodel import Field

from franchise_hub.schemas.base import TimestampMixin


class User(TimestampMixin, table=True):  # type: ignore[call-arg]
    """Profile row keyed by the identity provider's subject UUID."""

    __tablename__ = "users"

    id: uuid.UUID = Field(primary_key=True)
    email: Optional[str] = Field(default=None, index=True)
    username: Optional[str] = Field(default=None)
    discord_id: Optional[str] = Field(default=None, index=True)
    avatar_url: Optional[str] = Field(default=None)


class UserPreference(TimestampMixin, table=True):  # type: ignore[call-arg]
    __tablename__ = "user_preferences"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(
        foreign_key="users.id", ondelete="CASCADE", unique=True, index=True
    )
    email_notifications: bool = Field(default=True)
    discord_notifications: bool = Field(default=True)
    theme: str = Field(default="system", max_length=16)
