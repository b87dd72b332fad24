"""Request/response models for the signed-in user's profile and preferences."""

from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class Theme(str, Enum):
    light = "light"
    dark = "dark"
    system = "system"


class UserSync(BaseModel):
    """Profile fields copied from the identity provider after sign-in."""

    email: Optional[str] = Field(default=None, max_length=255)
    username: Optional[str] = Field(default=None, max_length=64)
    discord_id: Optional[str] = Field(default=None, max_length=64)
    avatar_url: Optional[str] = Field(default=None, max_length=512)


class UserRead(BaseModel):
    id: UUID
    email: Optional[str] = None
    username: Optional[str] = None
    discord_id: Optional[str] = None
    avatar_url: Optional[str] = None

    model_config = {"from_attributes": True}


class UserSyncResult(BaseModel):
    user: UserRead
    is_new_user: bool


class PreferencesRead(BaseModel):
    email_notifications: bool = True
    discord_notifications: bool = True
    theme: Theme = Theme.system

    model_config = {"from_attributes": True}


class PreferencesUpdate(BaseModel):
    """Partial edit; omitted fields keep their stored value."""

    email_notifications: Optional[bool] = None
    discord_notifications: Optional[bool] = None
    theme: Optional[Theme] = None
