from datetime import datetime, timedelta
from email.utils import parsedate_to_datetime
from typing import Mapping, Optional

from fitpulse.core.endpoints import FITBIT_TOKEN_URL
from fitpulse.core.exceptions import (
    ResponseParseError,
    SourceAuthenticationError,
    SourceHttpError,
    SourceRateLimitError,
    TokenRefreshError,
)
from fitpulse.core.parsers.fitbit import parse_latest_rate, parse_token_response
from fitpulse.core.ports.clock import Clock
from fitpulse.core.ports.heart_rate_source import HeartRateSource
from fitpulse.core.schema.fetch import TokenUpdate
from fitpulse.infra.fitbit.client import FitbitClient, HttpResponse


class FitbitHeartRateSource(HeartRateSource):
    def __init__(self, client: FitbitClient, clock: Clock) -> None:
        self._client = client
        self._clock = clock

    def fetch_latest_rate(self, url: str, access_token: str) -> Optional[int]:
        response = self._client.get(
            url,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/json",
            },
        )
        if response.status >= 400:
            self._translate_status("Fitbit heart rate request failed", response)
        return parse_latest_rate(response.body)

    def refresh_access_token(
        self,
        refresh_token: str,
        client_id: str,
        client_secret: str,
    ) -> TokenUpdate:
        response = self._client.post(
            FITBIT_TOKEN_URL,
            auth=(client_id, client_secret),
            data={
                "grant_type": "refresh_token",
                "refresh_token": refresh_token,
            },
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        if response.status >= 400:
            if response.status == 429:
                raise SourceRateLimitError(
                    "Fitbit refresh rate limited",
                    self._retry_after(response.headers),
                )
            raise TokenRefreshError(
                f"Fitbit refresh failed ({response.status})",
                status=response.status,
            )
        try:
            return parse_token_response(response.body, self._clock.now())
        except ResponseParseError as error:
            raise TokenRefreshError(f"Fitbit refresh response invalid: {error.message}") from error

    def _translate_status(self, message: str, response: HttpResponse) -> None:
        if response.status == 401:
            raise SourceAuthenticationError(message)
        if response.status == 429:
            raise SourceRateLimitError(message, self._retry_after(response.headers))
        raise SourceHttpError(message, status=response.status)

    def _retry_after(self, headers: Mapping[str, str]) -> datetime | None:
        value = _header(headers, "Retry-After")
        if value is None:
            return None
        try:
            return self._clock.now() + timedelta(seconds=float(value))
        except OverflowError:
            return None
        except ValueError:
            pass
        try:
            return parsedate_to_datetime(value)
        except (TypeError, ValueError, OverflowError):
            return None


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None
