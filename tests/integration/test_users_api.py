"""Profile sync and preferences for the signed-in user."""

import uuid

import pytest

from franchise_hub.schemas.users import User, UserPreference


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path",
    [("post", "/api/me/sync"), ("get", "/api/me/preferences"), ("patch", "/api/me/preferences")],
)
async def test_user_endpoints_require_token(app_client, method, path):
    kwargs = {} if method == "get" else {"json": {}}
    response = await getattr(app_client, method)(path, **kwargs)

    assert response.status_code == 401
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_sync_creates_profile_then_updates_it(app_client, make_token, fetch_rows):
    user_id = uuid.uuid4()
    headers = _auth(make_token(user_id))

    first = await app_client.post(
        "/api/me/sync",
        json={"email": "coach@example.com", "username": "coach"},
        headers=headers,
    )
    second = await app_client.post(
        "/api/me/sync", json={"discord_id": "12345"}, headers=headers
    )

    assert first.status_code == 200
    assert first.json()["data"]["is_new_user"] is True
    assert first.json()["data"]["user"]["id"] == str(user_id)
    assert second.json()["data"]["is_new_user"] is False

    [user] = await fetch_rows(User, id=user_id)
    assert (user.email, user.username, user.discord_id) == ("coach@example.com", "coach", "12345")
    assert len(await fetch_rows(UserPreference, user_id=user_id)) == 1


@pytest.mark.asyncio
async def test_preferences_default_until_saved(app_client, make_token, fetch_rows):
    user_id = uuid.uuid4()
    headers = _auth(make_token(user_id))

    response = await app_client.get("/api/me/preferences", headers=headers)

    assert response.status_code == 200
    assert response.json()["data"] == {
        "email_notifications": True,
        "discord_notifications": True,
        "theme": "system",
    }
    assert await fetch_rows(UserPreference, user_id=user_id) == []


@pytest.mark.asyncio
async def test_patch_preferences_persists_only_given_fields(app_client, make_token, fetch_rows):
    user_id = uuid.uuid4()
    headers = _auth(make_token(user_id))
    await app_client.post("/api/me/sync", json={}, headers=headers)

    updated = await app_client.patch(
        "/api/me/preferences", json={"theme": "dark"}, headers=headers
    )
    again = await app_client.patch(
        "/api/me/preferences", json={"email_notifications": False}, headers=headers
    )
    read_back = await app_client.get("/api/me/preferences", headers=headers)

    assert updated.status_code == 200
    assert updated.json()["data"]["theme"] == "dark"
    assert again.json()["data"] == {
        "email_notifications": False,
        "discord_notifications": True,
        "theme": "dark",
    }
    assert read_back.json()["data"] == again.json()["data"]
    [row] = await fetch_rows(UserPreference, user_id=user_id)
    assert (row.theme, row.email_notifications) == ("dark", False)


@pytest.mark.asyncio
async def test_patch_preferences_without_prior_sync_creates_profile(
    app_client, make_token, fetch_rows
):
    user_id = uuid.uuid4()

    response = await app_client.patch(
        "/api/me/preferences",
        json={"discord_notifications": False},
        headers=_auth(make_token(user_id)),
    )

    assert response.status_code == 200
    assert response.json()["data"]["discord_notifications"] is False
    assert len(await fetch_rows(User, id=user_id)) == 1


@pytest.mark.asyncio
async def test_patch_preferences_rejects_unknown_theme(app_client, make_token):
    response = await app_client.patch(
        "/api/me/preferences",
        json={"theme": "neon"},
        headers=_auth(make_token(uuid.uuid4())),
    )

    assert response.status_code == 400
    assert response.json()["success"] is False
