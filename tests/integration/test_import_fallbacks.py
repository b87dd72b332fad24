"""Imports still succeed when the database lacks the expected unique key.

Each test points a natural-key constant at columns no unique constraint
covers, so ON CONFLICT is rejected and the delete/insert path runs.
"""

import logging

import pytest

from franchise_hub.schemas.leagues import League
from franchise_hub.schemas.player_abilities import PlayerAbility
from franchise_hub.schemas.player_traits import PlayerTrait
from franchise_hub.schemas.players import Player
from franchise_hub.schemas.teams import Team
from franchise_hub.schemas.weekly_stats import TeamStat
from franchise_hub.services import roster_service, team_service, weekly_stats_service
from tests.payloads import player_record, team_record, team_stat_record

BASE = "/api/leagues/test2/import"


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_team_stats_without_unique_key(app_client, league, fetch_rows, monkeypatch, caplog):
    monkeypatch.setattr(weekly_stats_service, "STAT_KEY", ("league_id", "stat_id"))
    caplog.set_level(logging.WARNING, logger="franchise_hub.utils.upsert")
    url = f"{BASE}/xbsx/6247678/week/reg/3/teamstats"

    first = await app_client.post(
        url, json={"teamStatInfoList": [team_stat_record("ts-1", 3, 1)]}
    )
    second = await app_client.post(
        url, json={"teamStatInfoList": [team_stat_record("ts-1", 3, 1, totalWins=6)]}
    )

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json()["data"]["count"] == 1
    assert (second.json()["data"]["week"], second.json()["data"]["season"]) == (3, 1)
    assert "falling back to delete-then-insert" in caplog.text

    [row] = await fetch_rows(TeamStat, league_id=league.id)
    assert row.total_wins == 6
    [stored_league] = await fetch_rows(League, id=league.id)
    assert stored_league.last_import_at is not None


@pytest.mark.asyncio
async def test_teams_without_unique_key(app_client, league, fetch_rows, monkeypatch):
    monkeypatch.setattr(team_service, "TEAM_KEY", ("team_id",))
    url = f"{BASE}/leagueteams"

    await app_client.post(url, json={"leagueTeamInfoList": [team_record(1), team_record(2)]})
    before = {team.team_id: team.id for team in await fetch_rows(Team, league_id=league.id)}
    response = await app_client.post(
        url,
        json={"leagueTeamInfoList": [team_record(1, nickName="Renamed"), team_record(2)]},
    )

    assert response.status_code == 200
    assert response.json()["data"]["count"] == 2
    teams = {team.team_id: team for team in await fetch_rows(Team, league_id=league.id)}
    assert {key: team.id for key, team in teams.items()} == before
    assert teams["1"].nick_name == "Renamed"


@pytest.mark.asyncio
async def test_roster_without_unique_key(
    app_client, league, owner_id, make_token, fetch_rows, monkeypatch
):
    monkeypatch.setattr(roster_service, "PLAYER_KEY", ("roster_id",))
    url = f"/api/{owner_id}/xbsx/{league.id}/leagueroster"
    headers = _auth(make_token(owner_id))
    body = {"rosterInfoList": [player_record(101, 0), player_record(102, 0)]}

    first = await app_client.post(url, json=body, headers=headers)
    second = await app_client.post(url, json=body, headers=headers)

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json()["data"]["count"] == 2
    players = await fetch_rows(Player, league_id=league.id)
    assert sorted(player.roster_id for player in players) == ["101", "102"]
    assert len(await fetch_rows(PlayerTrait, league_id=league.id)) == 2
    assert len(await fetch_rows(PlayerAbility, league_id=league.id)) == 2


@pytest.mark.asyncio
async def test_empty_roster_leaves_players_alone(
    app_client, league, owner_id, make_token, fetch_rows
):
    url = f"/api/{owner_id}/xbsx/{league.id}/leagueroster"
    headers = _auth(make_token(owner_id))
    await app_client.post(url, json={"rosterInfoList": [player_record(101, 0)]}, headers=headers)
    [before] = await fetch_rows(Player, league_id=league.id)

    response = await app_client.post(url, json={"rosterInfoList": []}, headers=headers)

    assert response.status_code == 200
    assert response.json()["data"]["count"] == 0
    [after] = await fetch_rows(Player, league_id=league.id)
    assert after.id == before.id
    assert len(await fetch_rows(PlayerTrait, player_id=after.id)) == 1
    assert len(await fetch_rows(PlayerAbility, player_id=after.id)) == 1
