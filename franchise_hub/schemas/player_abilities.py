"""Signature ability table (zero or more rows per player)."""

import uuid
from typing import Optional

from sqlmodel import Field

from franchise_hub.schemas.base import LeagueScopedMixin


class PlayerAbility(LeagueScopedMixin, table=True):  # type: ignore[call-arg]
    __tablename__ = "player_abilities"

    player_id: uuid.UUID = Field(foreign_key="players.id", ondelete="CASCADE", index=True)
    signature_title: Optional[str] = None
    signature_description: Optional[str] = None
    signature_logo_id: Optional[int] = None
    signature_activation_description: Optional[str] = None
    signature_deactivation_description: Optional[str] = None
    ability_rank: Optional[str] = None
    is_passive: Optional[bool] = None
    is_unlocked: Optional[bool] = None
    market_ability_alias: Optional[str] = None
