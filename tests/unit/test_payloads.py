"""Unit tests for payload shape detection and record validation."""

import pytest

from franchise_hub.models.roster import ROSTER_LIST_KEY, MaddenPlayer
from franchise_hub.models.teams import TEAMS_LIST_KEY, MaddenTeam
from franchise_hub.models.weekly_stats import MaddenTeamStat
from franchise_hub.utils.api_response import ApiError, ErrorCode
from franchise_hub.utils.payloads import (
    PayloadShape,
    classify_payload,
    extract_records,
    parse_records,
    validate_records,
)
from tests.payloads import player_record, team_record, team_stat_record


class TestClassifyPayload:
    def test_wrapped_object(self):
        assert classify_payload({TEAMS_LIST_KEY: []}, TEAMS_LIST_KEY) is PayloadShape.WRAPPED

    def test_bare_array(self):
        assert classify_payload([team_record(1)], TEAMS_LIST_KEY) is PayloadShape.BARE

    def test_wrong_key_is_unrecognized(self):
        assert classify_payload({"rosterInfoList": []}, TEAMS_LIST_KEY) is None

    def test_non_list_value_is_unrecognized(self):
        assert classify_payload({TEAMS_LIST_KEY: {"teamId": 1}}, TEAMS_LIST_KEY) is None

    def test_scalar_is_unrecognized(self):
        assert classify_payload("teams", TEAMS_LIST_KEY) is None


class TestExtractRecords:
    def test_unwraps_named_list(self):
        records = [team_record(1)]
        assert extract_records({TEAMS_LIST_KEY: records}, TEAMS_LIST_KEY) == records

    def test_accepts_bare_array_by_default(self):
        records = [team_record(1)]
        assert extract_records(records, TEAMS_LIST_KEY) == records

    def test_rejects_bare_array_when_wrapped_required(self):
        with pytest.raises(ApiError) as exc_info:
            extract_records([team_record(1)], ROSTER_LIST_KEY, allow_bare=False)
        assert exc_info.value.status_code == 400
        assert exc_info.value.code is ErrorCode.INVALID_PAYLOAD

    def test_error_names_expected_key(self):
        with pytest.raises(ApiError) as exc_info:
            extract_records({"foo": []}, TEAMS_LIST_KEY)
        assert TEAMS_LIST_KEY in exc_info.value.message


class TestValidateRecords:
    def test_missing_team_id_reports_dotted_path(self):
        bad = team_record(1)
        del bad["teamId"]

        with pytest.raises(ApiError) as exc_info:
            validate_records(MaddenTeam, [team_record(2), bad])

        error = exc_info.value
        assert error.status_code == 400
        assert error.code is ErrorCode.VALIDATION_ERROR
        assert "1.teamId" in error.details

    def test_zero_roster_id_rejected(self):
        with pytest.raises(ApiError) as exc_info:
            validate_records(MaddenPlayer, [player_record(0, 1)])
        assert "0.rosterId" in exc_info.value.details

    def test_numeric_strings_are_coerced(self):
        (team,) = validate_records(MaddenTeam, [team_record("7", ovrRating="81")])
        assert team.team_id == 7
        assert team.ovr_rating == 81

    def test_numbers_become_strings_for_id_fields(self):
        (stat,) = validate_records(MaddenTeamStat, [team_stat_record("s1", 3, 1, teamId=7)])
        assert stat.team_id == "7"

    def test_unknown_keys_are_ignored(self):
        (team,) = validate_records(MaddenTeam, [team_record(3, somethingNew="x")])
        assert team.team_id == 3

    def test_missing_optional_fields_are_none(self):
        (team,) = validate_records(MaddenTeam, [{"teamId": 4}])
        assert team.display_name is None
        assert team.ovr_rating is None

    def test_free_agent_team_id_zero_is_valid(self):
        (player,) = validate_records(MaddenPlayer, [player_record(10, 0)])
        assert player.team_id == 0

    def test_wrong_type_rejected(self):
        with pytest.raises(ApiError):
            validate_records(MaddenTeam, [team_record(1, ovrRating="very good")])


def test_parse_records_empty_list_is_valid():
    assert parse_records({TEAMS_LIST_KEY: []}, TEAMS_LIST_KEY, MaddenTeam) == []
