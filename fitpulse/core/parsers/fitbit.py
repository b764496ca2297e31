import json
from datetime import datetime, timedelta
from typing import Any, Optional

from fitpulse.core.exceptions import ResponseParseError
from fitpulse.core.schema.fetch import TokenUpdate
from fitpulse.core.schema.heart_rate import HeartRateSample, HeartRateSeries

INTRADAY_KEY = "activities-heart-intraday"
_MAX_SAMPLE_VALUE = 2**32 - 1


def parse_heart_rate_series(body: bytes) -> HeartRateSeries:
    """Decode an intraday heart-rate payload.

    A missing ``dataset`` list is an empty series. A missing intraday object or
    a sample without an unsigned integer ``value`` is a schema mismatch.
    """
    payload = _load_json(body)
    if not isinstance(payload, dict):
        raise ResponseParseError("Heart rate payload is not an object")

    intraday = payload.get(INTRADAY_KEY)
    if not isinstance(intraday, dict):
        raise ResponseParseError(f"Heart rate payload is missing {INTRADAY_KEY!r}")

    dataset = intraday.get("dataset")
    if dataset is None:
        return HeartRateSeries(dataset=())
    if not isinstance(dataset, list):
        raise ResponseParseError("Heart rate dataset is not a list")

    return HeartRateSeries(dataset=tuple(_to_sample(entry) for entry in dataset))


def parse_latest_rate(body: bytes) -> Optional[int]:
    return parse_heart_rate_series(body).latest_value()


def parse_token_response(body: bytes, obtained_at: datetime) -> TokenUpdate:
    payload = _load_json(body)
    if not isinstance(payload, dict):
        raise ResponseParseError("Token payload is not an object")

    access_token = payload.get("access_token")
    if not isinstance(access_token, str):
        raise ResponseParseError("Token payload is missing 'access_token'")

    expires_in = payload.get("expires_in")
    if not _is_unsigned_int(expires_in):
        raise ResponseParseError("Token payload is missing 'expires_in'")

    refresh_token = payload.get("refresh_token")
    if refresh_token is not None and not isinstance(refresh_token, str):
        raise ResponseParseError("Token payload has an invalid 'refresh_token'")

    return TokenUpdate(
        access_token=access_token,
        expires_in=timedelta(seconds=expires_in),
        obtained_at=obtained_at,
        refresh_token=refresh_token,
    )


def _to_sample(entry: Any) -> HeartRateSample:
    if not isinstance(entry, dict):
        raise ResponseParseError("Heart rate sample is not an object")
    value = entry.get("value")
    if not _is_unsigned_int(value) or value > _MAX_SAMPLE_VALUE:
        raise ResponseParseError(f"Heart rate sample has an invalid value: {value!r}")
    time = entry.get("time")
    return HeartRateSample(time=time if isinstance(time, str) else None, value=value)


def _is_unsigned_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _load_json(body: bytes) -> Any:
    try:
        return json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as error:
        raise ResponseParseError(f"Invalid JSON: {error}") from error
