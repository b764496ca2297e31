from fitpulse.core.parsers.fitbit import (
    parse_heart_rate_series,
    parse_latest_rate,
    parse_token_response,
)

__all__ = [
    "parse_heart_rate_series",
    "parse_latest_rate",
    "parse_token_response",
]
