"""Companion-app style payload builders shared by the test modules."""

from __future__ import annotations

from typing import Any


def team_record(team_id: int, **overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "teamId": team_id,
        "cityName": f"City {team_id}",
        "nickName": f"Team {team_id}",
        "displayName": f"City {team_id} Team {team_id}",
        "abbrName": f"T{team_id}",
        "divName": "NFC East",
        "userName": "",
        "logoId": team_id,
        "primaryColor": 1234,
        "secondaryColor": 5678,
        "ovrRating": 80,
        "offScheme": 1,
        "defScheme": 2,
        "injuryCount": 0,
    }
    record.update(overrides)
    return record


def player_record(roster_id: int, team_id: int, **overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "rosterId": roster_id,
        "teamId": team_id,
        "firstName": "Jalen",
        "lastName": f"Player{roster_id}",
        "position": "QB",
        "jerseyNum": 1,
        "age": 24,
        "playerBestOvr": 85,
        "isOnIR": False,
        "speedRating": 88,
        "throwPowerRating": 94,
        "accelRating": 90,
        "clutchTrait": True,
        "qBStyleTrait": 2,
        "signatureSlotList": [
            {
                "signatureTitle": "Pocket Deadeye",
                "signatureDescription": "Improved accuracy from the pocket",
                "isPassive": False,
                "isUnlocked": True,
            },
            None,
        ],
    }
    record.update(overrides)
    return record


def standing_record(team_id: int, week: int, season: int, **overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "teamId": team_id,
        "teamName": f"Team {team_id}",
        "weekIndex": week,
        "seasonIndex": season,
        "stageIndex": 1,
        "rank": team_id,
        "totalWins": 3,
        "totalLosses": 1,
        "totalTies": 0,
        "winPct": 0.75,
        "ptsFor": 98,
        "ptsAgainst": 70,
        "tODiff": 4,
    }
    record.update(overrides)
    return record


def schedule_record(schedule_id: str, week: int, season: int, **overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "scheduleId": schedule_id,
        "weekIndex": week,
        "seasonIndex": season,
        "stageIndex": 1,
        "homeTeamId": 1,
        "awayTeamId": 2,
        "homeScore": 24,
        "awayScore": 17,
        "status": 3,
        "isGameOfTheWeek": False,
    }
    record.update(overrides)
    return record


def team_stat_record(stat_id: str, week: int, season: int, **overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "statId": stat_id,
        "scheduleId": "sched-1",
        "weekIndex": week,
        "seasonIndex": season,
        "stageIndex": 1,
        "teamId": "7",
        "totalWins": 5,
        "offTotalYards": 0,
        "off1stDowns": 21,
        "offRedZonePct": 66.7,
    }
    record.update(overrides)
    return record


def passing_stat_record(stat_id: str, week: int, season: int, **overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "statId": stat_id,
        "scheduleId": "sched-1",
        "weekIndex": week,
        "seasonIndex": season,
        "teamId": 7,
        "rosterId": 101,
        "playerId": 101,
        "passAtt": 30,
        "passComp": 21,
        "passYards": 254,
        "passTDs": 2,
        "passerRating": 104.3,
    }
    record.update(overrides)
    return record
