"""Base URL handshake, team import and request-level error envelopes."""

import pytest

from franchise_hub.schemas.leagues import League
from franchise_hub.schemas.teams import Team
from tests.payloads import team_record

BASE = "/api/leagues/test2/import"


@pytest.mark.asyncio
async def test_base_url_get_and_post_identify_the_league(app_client, league):
    got = await app_client.get(BASE)
    posted = await app_client.post(BASE, json={})

    assert got.status_code == 200
    assert got.json()["data"]["message"] == "League found"
    assert got.json()["data"]["league"]["league_identifier"] == "test2"
    assert posted.status_code == 200
    assert posted.json()["data"]["message"] == "Ready to receive league data"


@pytest.mark.asyncio
async def test_base_url_unknown_slug_is_404(app_client, league):
    response = await app_client.get("/api/leagues/nope/import")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "NOT_FOUND"
    assert body["error"]["message"] == "League not found with slug: nope"


@pytest.mark.asyncio
async def test_team_import_upserts_on_repeat(app_client, league, fetch_rows):
    first = await app_client.post(
        f"{BASE}/leagueteams",
        json={"leagueTeamInfoList": [team_record(1), team_record(2)]},
    )
    assert first.status_code == 200
    assert first.json()["data"] == {"message": "Teams imported successfully", "count": 2}

    before = {team.team_id: team.id for team in await fetch_rows(Team, league_id=league.id)}

    second = await app_client.post(
        f"{BASE}/leagueteams",
        json={
            "leagueTeamInfoList": [
                team_record(1, nickName="Renamed", ovrRating=91),
                team_record(2),
            ]
        },
    )
    assert second.status_code == 200

    teams = {team.team_id: team for team in await fetch_rows(Team, league_id=league.id)}
    assert set(teams) == {"1", "2"}
    assert teams["1"].nick_name == "Renamed"
    assert teams["1"].ovr_rating == 91
    assert {key: team.id for key, team in teams.items()} == before

    [stored_league] = await fetch_rows(League, id=league.id)
    assert stored_league.last_import_at is not None


@pytest.mark.asyncio
async def test_team_import_accepts_bare_array_on_slug_route(app_client, league, fetch_rows):
    response = await app_client.post(f"{BASE}/leagueteams", json=[team_record(3)])

    assert response.status_code == 200
    assert response.json()["data"]["count"] == 1
    assert len(await fetch_rows(Team, league_id=league.id)) == 1


@pytest.mark.asyncio
async def test_platform_team_route_matches_slug_route(app_client, league, fetch_rows):
    response = await app_client.post(
        f"{BASE}/xbsx/6247678/leagueteams",
        json={"leagueTeamInfoList": [team_record(4), team_record(5)]},
    )

    assert response.status_code == 200
    assert response.json()["data"]["count"] == 2
    assert len(await fetch_rows(Team, league_id=league.id)) == 2


@pytest.mark.asyncio
async def test_missing_list_key_is_invalid_payload(app_client, league):
    response = await app_client.post(f"{BASE}/leagueteams", json={"teams": []})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "INVALID_PAYLOAD"
    assert "leagueTeamInfoList" in error["message"]


@pytest.mark.asyncio
async def test_bad_record_rejects_whole_batch(app_client, league, fetch_rows):
    response = await app_client.post(
        f"{BASE}/leagueteams",
        json={"leagueTeamInfoList": [team_record(1), {"cityName": "No Id"}]},
    )

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(key.startswith("1.") for key in error["details"])
    assert await fetch_rows(Team, league_id=league.id) == []


@pytest.mark.asyncio
async def test_invalid_json_body(app_client, league):
    response = await app_client.post(
        f"{BASE}/leagueteams",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_JSON"


@pytest.mark.asyncio
async def test_get_on_import_route_is_405_with_allow(app_client, league):
    response = await app_client.get(f"{BASE}/leagueteams")

    assert response.status_code == 405
    assert "POST" in response.headers["allow"]
    assert response.json()["error"]["code"] == "METHOD_NOT_ALLOWED"


@pytest.mark.asyncio
async def test_unknown_path_is_enveloped_404(app_client):
    response = await app_client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_health(app_client):
    response = await app_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
