from datetime import datetime
from typing import Optional

from fitpulse.config.settings import FitbitSettings
from fitpulse.core.schema.fetch import FetchRequest, TokenUpdate
from fitpulse.core.schema.token import TokenCache


class TokenManager:
    """Owns the token cache for one tracked device.

    Configuration only ever seeds empty cache slots. Live entries change only
    through ``apply``, which the scheduler calls after draining a completed
    fetch.
    """

    def __init__(self, cache: TokenCache | None = None) -> None:
        self._cache = cache or TokenCache()

    @property
    def cache(self) -> TokenCache:
        return self._cache

    @property
    def access_token(self) -> Optional[str]:
        return self._cache.access_token

    @property
    def access_token_expires_at(self) -> Optional[datetime]:
        return self._cache.access_token_expires_at

    @property
    def refresh_token(self) -> Optional[str]:
        return self._cache.refresh_token

    def seed(self, config: FitbitSettings) -> None:
        if self._cache.access_token is None:
            self._cache.access_token = non_blank(config.access_token)
        if self._cache.refresh_token is None:
            self._cache.refresh_token = non_blank(config.refresh_token)

    def build_request(self, config: FitbitSettings, url: str) -> FetchRequest:
        self.seed(config)
        return FetchRequest(
            url=url,
            access_token=self._cache.access_token,
            access_token_expires_at=self._cache.access_token_expires_at,
            refresh_token=self._cache.refresh_token,
            client_id=non_blank(config.client_id),
            client_secret=non_blank(config.client_secret),
        )

    def apply(self, update: TokenUpdate) -> None:
        self._cache.access_token = update.access_token
        self._cache.access_token_expires_at = update.expires_at
        if update.refresh_token is not None:
            self._cache.refresh_token = update.refresh_token


def non_blank(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value
