"""User-scoped roster and team imports, including the auth chain."""

import uuid

import pytest

from franchise_hub.schemas.player_abilities import PlayerAbility
from franchise_hub.schemas.player_ratings import PlayerRating
from franchise_hub.schemas.player_traits import PlayerTrait
from franchise_hub.schemas.players import Player
from franchise_hub.schemas.teams import Team
from tests.payloads import player_record, team_record


def _url(user_id, league_id, resource: str) -> str:
    return f"/api/{user_id}/xbsx/{league_id}/{resource}"


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_roster_fans_out_and_links_teams(
    app_client, league, owner_id, make_token, fetch_rows
):
    headers = _auth(make_token(owner_id))
    teams = await app_client.post(
        _url(owner_id, league.id, "leagueteams"),
        json={"leagueTeamInfoList": [team_record(7)]},
        headers=headers,
    )
    assert teams.status_code == 200

    response = await app_client.post(
        _url(owner_id, league.id, "leagueroster"),
        json={"rosterInfoList": [player_record(101, 7), player_record(102, 0)]},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json()["data"] == {
        "message": "Roster data processed successfully",
        "count": 2,
    }

    [team] = await fetch_rows(Team, league_id=league.id)
    players = {p.roster_id: p for p in await fetch_rows(Player, league_id=league.id)}
    assert players["101"].team_id == team.id
    assert players["102"].team_id is None
    assert players["101"].full_name == "Jalen Player101"
    assert players["101"].is_on_ir is False

    traits = await fetch_rows(PlayerTrait, player_id=players["101"].id)
    ratings = await fetch_rows(PlayerRating, player_id=players["101"].id)
    abilities = await fetch_rows(PlayerAbility, league_id=league.id)
    assert traits[0].clutch_trait == 1
    assert traits[0].qb_style_trait == 2
    assert ratings[0].speed_rating == 88
    assert len(abilities) == 2
    assert {a.signature_title for a in abilities} == {"Pocket Deadeye"}


@pytest.mark.asyncio
async def test_roster_reimport_keeps_player_ids_and_replaces_children(
    app_client, league, owner_id, make_token, fetch_rows
):
    headers = _auth(make_token(owner_id))
    url = _url(owner_id, league.id, "leagueroster")
    await app_client.post(url, json={"rosterInfoList": [player_record(101, 0)]}, headers=headers)
    [before] = await fetch_rows(Player, league_id=league.id)

    response = await app_client.post(
        url,
        json={
            "rosterInfoList": [
                player_record(101, 0, speedRating=91, signatureSlotList=[]),
            ]
        },
        headers=headers,
    )

    assert response.status_code == 200
    [after] = await fetch_rows(Player, league_id=league.id)
    assert after.id == before.id
    [rating] = await fetch_rows(PlayerRating, player_id=after.id)
    assert rating.speed_rating == 91
    assert len(await fetch_rows(PlayerTrait, player_id=after.id)) == 1
    assert await fetch_rows(PlayerAbility, player_id=after.id) == []


@pytest.mark.asyncio
async def test_roster_route_requires_wrapped_body(app_client, league, owner_id, make_token):
    response = await app_client.post(
        _url(owner_id, league.id, "leagueroster"),
        json=[player_record(101, 0)],
        headers=_auth(make_token(owner_id)),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PAYLOAD"


@pytest.mark.asyncio
async def test_missing_token_is_401(app_client, league, owner_id):
    response = await app_client.post(
        _url(owner_id, league.id, "leagueroster"), json={"rosterInfoList": []}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_forged_token_is_401(app_client, league, owner_id, make_token):
    response = await app_client.post(
        _url(owner_id, league.id, "leagueroster"),
        json={"rosterInfoList": []},
        headers=_auth(make_token(owner_id, secret="someone-else")),
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_token_for_another_user_is_403(app_client, league, owner_id, make_token):
    response = await app_client.post(
        _url(owner_id, league.id, "leagueroster"),
        json={"rosterInfoList": []},
        headers=_auth(make_token(uuid.uuid4())),
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_non_member_is_403(app_client, league, make_token):
    stranger = uuid.uuid4()
    response = await app_client.post(
        _url(stranger, league.id, "leagueteams"),
        json={"leagueTeamInfoList": []},
        headers=_auth(make_token(stranger)),
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_unknown_league_is_404(app_client, league, owner_id, make_token):
    response = await app_client.post(
        _url(owner_id, uuid.uuid4(), "leagueteams"),
        json={"leagueTeamInfoList": []},
        headers=_auth(make_token(owner_id)),
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_malformed_league_uuid_is_validation_error(app_client, owner_id, make_token):
    response = await app_client.post(
        _url(owner_id, "not-a-uuid", "leagueteams"),
        json={"leagueTeamInfoList": []},
        headers=_auth(make_token(owner_id)),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
