from typing import Optional, Protocol, runtime_checkable

from fitpulse.core.schema.fetch import TokenUpdate


@runtime_checkable
class HeartRateSource(Protocol):
    def fetch_latest_rate(self, url: str, access_token: str) -> Optional[int]:
        ...

    def refresh_access_token(
        self,
        refresh_token: str,
        client_id: str,
        client_secret: str,
    ) -> TokenUpdate:
        ...
