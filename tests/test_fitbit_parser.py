import json
from datetime import datetime, timedelta, timezone

import pytest

from fitpulse.core.exceptions import ResponseParseError
from fitpulse.core.parsers.fitbit import (
    parse_heart_rate_series,
    parse_latest_rate,
    parse_token_response,
)


def _payload(dataset: object) -> bytes:
    return json.dumps(
        {
            "activities-heart": [],
            "activities-heart-intraday": {
                "dataset": dataset,
                "datasetInterval": 1,
                "datasetType": "minute",
            },
        }
    ).encode("utf-8")


class TestParseLatestRate:
    def test_returns_value_of_last_entry(self) -> None:
        body = _payload(
            [
                {"time": "12:00:00", "value": 61},
                {"time": "12:01:00", "value": 64},
                {"time": "12:02:00", "value": 72},
            ]
        )

        assert parse_latest_rate(body) == 72

    def test_empty_dataset_is_none(self) -> None:
        assert parse_latest_rate(_payload([])) is None

    def test_missing_dataset_is_none(self) -> None:
        body = json.dumps({"activities-heart-intraday": {}}).encode("utf-8")

        assert parse_latest_rate(body) is None

    def test_entry_without_time_is_accepted(self) -> None:
        series = parse_heart_rate_series(_payload([{"value": 58}]))

        assert series.dataset[0].time is None
        assert series.latest_value() == 58

    def test_missing_intraday_object_is_parse_error(self) -> None:
        body = json.dumps({"activities-heart": []}).encode("utf-8")

        with pytest.raises(ResponseParseError):
            parse_latest_rate(body)

    @pytest.mark.parametrize("value", ["72", -1, 72.5, True, None])
    def test_invalid_value_is_parse_error(self, value: object) -> None:
        with pytest.raises(ResponseParseError):
            parse_latest_rate(_payload([{"time": "12:00:00", "value": value}]))

    def test_dataset_not_a_list_is_parse_error(self) -> None:
        with pytest.raises(ResponseParseError):
            parse_latest_rate(_payload({"value": 60}))

    def test_invalid_json_is_parse_error(self) -> None:
        with pytest.raises(ResponseParseError) as excinfo:
            parse_latest_rate(b"<html>Bad gateway</html>")

        assert excinfo.value.status == 0

    def test_non_object_payload_is_parse_error(self) -> None:
        with pytest.raises(ResponseParseError):
            parse_latest_rate(b"[1, 2, 3]")


class TestParseTokenResponse:
    def test_builds_token_update(self) -> None:
        obtained_at = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
        body = json.dumps(
            {
                "access_token": "new-access",
                "expires_in": 28800,
                "refresh_token": "new-refresh",
                "token_type": "Bearer",
                "user_id": "ABC123",
            }
        ).encode("utf-8")

        update = parse_token_response(body, obtained_at)

        assert update.access_token == "new-access"
        assert update.expires_in == timedelta(hours=8)
        assert update.refresh_token == "new-refresh"
        assert update.expires_at == obtained_at + timedelta(hours=8)

    def test_refresh_token_is_optional(self) -> None:
        obtained_at = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
        body = json.dumps({"access_token": "a", "expires_in": 3600}).encode("utf-8")

        update = parse_token_response(body, obtained_at)

        assert update.refresh_token is None

    @pytest.mark.parametrize(
        "payload",
        [
            {"expires_in": 3600},
            {"access_token": "a"},
            {"access_token": "a", "expires_in": "3600"},
            {"access_token": "a", "expires_in": 3600, "refresh_token": 5},
        ],
    )
    def test_schema_mismatch_is_parse_error(self, payload: dict) -> None:
        obtained_at = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

        with pytest.raises(ResponseParseError):
            parse_token_response(json.dumps(payload).encode("utf-8"), obtained_at)
