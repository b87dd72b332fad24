"""Endpoints for the signed-in user's own profile and preferences."""

from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_hub.models.users import PreferencesUpdate, UserSync
from franchise_hub.services import user_service
from franchise_hub.services.league_authz import get_current_user_id
from franchise_hub.utils.api_response import success_response
from franchise_hub.utils.db_async import get_session

router = APIRouter(prefix="/api/me", tags=["users"])


@router.post("/sync")
async def sync_user(
    data: UserSync,
    current_user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    """Mirror the identity provider's profile; called by the client after sign-in."""
    result = await user_service.sync_user(db, current_user_id, data)
    return success_response(result)


@router.get("/preferences")
async def get_preferences(
    current_user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    return success_response(await user_service.get_preferences(db, current_user_id))


@router.patch("/preferences")
async def update_preferences(
    data: PreferencesUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> JSONResponse:
    preferences = await user_service.update_preferences(db, current_user_id, data)
    return success_response(preferences)
