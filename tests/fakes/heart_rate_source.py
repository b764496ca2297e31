from typing import Iterable, Optional, Union

from fitpulse.core.ports.heart_rate_source import HeartRateSource
from fitpulse.core.schema.fetch import TokenUpdate

RateOutcome = Union[Optional[int], Exception]
RefreshOutcome = Union[TokenUpdate, Exception]


class FakeHeartRateSource(HeartRateSource):
    """Replays scripted outcomes in order; the last one repeats."""

    def __init__(
        self,
        rates: Iterable[RateOutcome] = (),
        refreshes: Iterable[RefreshOutcome] = (),
    ) -> None:
        self._rates = list(rates)
        self._refreshes = list(refreshes)
        self.fetch_calls: list[tuple[str, str]] = []
        self.refresh_calls: list[tuple[str, str, str]] = []

    def fetch_latest_rate(self, url: str, access_token: str) -> Optional[int]:
        self.fetch_calls.append((url, access_token))
        return self._next(self._rates, "rate")

    def refresh_access_token(
        self,
        refresh_token: str,
        client_id: str,
        client_secret: str,
    ) -> TokenUpdate:
        self.refresh_calls.append((refresh_token, client_id, client_secret))
        return self._next(self._refreshes, "refresh")

    @staticmethod
    def _next(outcomes: list, kind: str):  # noqa: ANN205
        if not outcomes:
            raise AssertionError(f"No scripted {kind} outcome")
        outcome = outcomes.pop(0) if len(outcomes) > 1 else outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome
