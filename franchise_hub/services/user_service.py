"""Profile sync and notification/theme preferences for signed-in users."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_hub.models.users import (
    PreferencesRead,
    PreferencesUpdate,
    UserRead,
    UserSync,
    UserSyncResult,
)
from franchise_hub.schemas.base import utcnow
from franchise_hub.schemas.users import User, UserPreference

logger = logging.getLogger(__name__)


async def _preference_row(db: AsyncSession, user_id: UUID) -> Optional[UserPreference]:
    result = await db.execute(
        select(UserPreference).where(UserPreference.user_id == user_id)  # type: ignore[arg-type]
    )
    return result.scalar_one_or_none()


async def sync_user(db: AsyncSession, user_id: UUID, data: UserSync) -> UserSyncResult:
    """Create or refresh the profile row for ``user_id``.

    First-time users also get a preferences row holding the defaults.
    Fields missing from ``data`` leave the stored values untouched.
    """
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    async with db.begin():
        user = await db.get(User, user_id)
        is_new_user = user is None
        if user is None:
            user = User(id=user_id, **changes)
            db.add(user)
        else:
            for name, value in changes.items():
                setattr(user, name, value)
            user.updated_at = utcnow()
        await db.flush()
        if await _preference_row(db, user_id) is None:
            db.add(UserPreference(user_id=user_id))
    if is_new_user:
        logger.info(f"Created profile for user {user_id}")
    return UserSyncResult(user=UserRead.model_validate(user), is_new_user=is_new_user)


async def get_preferences(db: AsyncSession, user_id: UUID) -> PreferencesRead:
    """Stored preferences, or the defaults when none were saved yet."""
    async with db.begin():
        row = await _preference_row(db, user_id)
    if row is None:
        return PreferencesRead()
    return PreferencesRead.model_validate(row)


async def update_preferences(
    db: AsyncSession, user_id: UUID, data: PreferencesUpdate
) -> PreferencesRead:
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    if "theme" in changes:
        changes["theme"] = data.theme.value  # type: ignore[union-attr]

    async with db.begin():
        # The preferences FK needs a profile row even if sync was never called
        if await db.get(User, user_id) is None:
            db.add(User(id=user_id))
            await db.flush()
        row = await _preference_row(db, user_id)
        if row is None:
            row = UserPreference(user_id=user_id, **changes)
            db.add(row)
        else:
            for name, value in changes.items():
                setattr(row, name, value)
            row.updated_at = utcnow()
        await db.flush()
    return PreferencesRead.model_validate(row)
