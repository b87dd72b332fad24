"""Week-scoped imports: stats, schedules and standings replace one partition."""

import pytest

from franchise_hub.schemas.schedules import Schedule
from franchise_hub.schemas.standings import Standing
from franchise_hub.schemas.weekly_stats import PassingStat, TeamStat
from tests.payloads import (
    passing_stat_record,
    schedule_record,
    standing_record,
    team_stat_record,
)

BASE = "/api/leagues/test2/import"
WEEK = f"{BASE}/xbsx/6247678/week"


@pytest.mark.asyncio
async def test_team_stats_week_route_uses_url_window(app_client, league, fetch_rows):
    # Body says week 9, season 0; the URL wins
    payload = {"teamStatInfoList": [team_stat_record("ts-1", week=9, season=0)]}

    response = await app_client.post(f"{WEEK}/reg/3/teamstats", json=payload)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["message"] == "Team stats imported successfully"
    assert data["count"] == 1
    assert data["week"] == 3
    assert data["season"] == 1
    assert data["season_type"] == "reg"

    [row] = await fetch_rows(TeamStat, league_id=league.id)
    assert (row.week_index, row.season_index) == (3, 1)
    assert row.team_id == "7"
    assert row.total_wins == 5
    assert row.off_total_yards == 0
    assert row.off_red_zone_pct == pytest.approx(66.7)


@pytest.mark.asyncio
async def test_reimporting_same_week_replaces_rows(app_client, league, fetch_rows):
    url = f"{WEEK}/reg/3/teamstats"
    await app_client.post(url, json={"teamStatInfoList": [team_stat_record("ts-1", 3, 1)]})
    response = await app_client.post(
        url, json={"teamStatInfoList": [team_stat_record("ts-1", 3, 1, totalWins=6)]}
    )

    assert response.status_code == 200
    [row] = await fetch_rows(TeamStat, league_id=league.id)
    assert row.total_wins == 6


@pytest.mark.asyncio
async def test_other_weeks_survive_a_partition_replace(app_client, league, fetch_rows):
    await app_client.post(
        f"{WEEK}/reg/1/passing",
        json={"passingStatInfoList": [passing_stat_record("p-1", 1, 1)]},
    )
    await app_client.post(
        f"{WEEK}/reg/2/passing",
        json={"passingStatInfoList": [passing_stat_record("p-2", 2, 1)]},
    )
    # Week 2 re-export no longer carries p-2
    await app_client.post(
        f"{WEEK}/reg/2/passing",
        json={"passingStatInfoList": [passing_stat_record("p-3", 2, 1)]},
    )

    rows = await fetch_rows(PassingStat, league_id=league.id)
    by_week = {(row.week_index, row.stat_id) for row in rows}
    assert by_week == {(1, "p-1"), (2, "p-3")}
    week_one = next(row for row in rows if row.week_index == 1)
    assert week_one.pass_yards == 254
    assert week_one.passer_rating == pytest.approx(104.3)


@pytest.mark.asyncio
async def test_empty_week_import_keeps_existing_rows(app_client, league, fetch_rows):
    url = f"{WEEK}/reg/4/passing"
    await app_client.post(url, json={"passingStatInfoList": [passing_stat_record("p-1", 4, 1)]})

    response = await app_client.post(url, json={"passingStatInfoList": []})

    assert response.status_code == 200
    assert response.json()["data"]["count"] == 0
    assert len(await fetch_rows(PassingStat, league_id=league.id)) == 1


@pytest.mark.asyncio
async def test_invalid_week_number(app_client, league):
    response = await app_client.post(
        f"{WEEK}/reg/three/passing", json={"passingStatInfoList": []}
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Invalid week number"


@pytest.mark.asyncio
async def test_unknown_week_category_is_404(app_client, league):
    response = await app_client.post(f"{WEEK}/reg/3/fishing", json={})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_postseason_schedules(app_client, league, fetch_rows):
    payload = {
        "gameScheduleInfoList": [
            schedule_record("g-1", 0, 0),
            schedule_record("g-2", 0, 0, status=1, homeScore=0, awayScore=0),
        ]
    }

    response = await app_client.post(f"{WEEK}/post/19/schedules", json=payload)

    assert response.status_code == 200
    data = response.json()["data"]
    assert (data["count"], data["week"], data["season"]) == (2, 19, 2)
    games = await fetch_rows(Schedule, league_id=league.id)
    assert {(game.schedule_id, game.week_index, game.season_index) for game in games} == {
        ("g-1", 19, 2),
        ("g-2", 19, 2),
    }


@pytest.mark.asyncio
async def test_slug_stats_take_window_from_first_record(app_client, league, fetch_rows):
    response = await app_client.post(
        f"{BASE}/stats/passing",
        json={"passingStatInfoList": [passing_stat_record("p-1", 5, 1)]},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert (data["week"], data["season"]) == (5, 1)
    assert len(await fetch_rows(PassingStat, league_id=league.id, week_index=5)) == 1


@pytest.mark.asyncio
async def test_slug_stats_reject_empty_list(app_client, league):
    response = await app_client.post(
        f"{BASE}/stats/passing", json={"passingStatInfoList": []}
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "No passing stats data provided"


@pytest.mark.asyncio
async def test_slug_stats_reject_bare_array(app_client, league):
    response = await app_client.post(
        f"{BASE}/stats/passing", json=[passing_stat_record("p-1", 5, 1)]
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PAYLOAD"


@pytest.mark.asyncio
async def test_slug_standings_need_window(app_client, league):
    empty = await app_client.post(f"{BASE}/standings", json={"teamStandingInfoList": []})
    no_week = await app_client.post(
        f"{BASE}/standings",
        json={"teamStandingInfoList": [standing_record(1, None, None)]},
    )

    assert empty.status_code == 400
    assert empty.json()["error"]["message"] == "No standings data provided"
    assert no_week.status_code == 400
    assert no_week.json()["error"]["message"] == (
        "Missing week or season information in standings data"
    )


@pytest.mark.asyncio
async def test_platform_standings_replace_their_week(app_client, league, fetch_rows):
    url = f"{BASE}/xbsx/6247678/standings"
    await app_client.post(url, json=[standing_record(1, 2, 1), standing_record(2, 2, 1)])
    await app_client.post(url, json=[standing_record(1, 3, 1)])
    response = await app_client.post(
        url, json={"teamStandingInfoList": [standing_record(1, 3, 1, totalWins=4)]}
    )

    assert response.status_code == 200
    assert (response.json()["data"]["week"], response.json()["data"]["season"]) == (3, 1)
    rows = await fetch_rows(Standing, league_id=league.id)
    assert len([row for row in rows if row.week_index == 2]) == 2
    [latest] = [row for row in rows if row.week_index == 3]
    assert latest.total_wins == 4
    assert latest.to_diff == 4
