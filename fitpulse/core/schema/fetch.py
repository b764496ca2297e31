from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Union


@dataclass(frozen=True, slots=True)
class TokenUpdate:
    access_token: str
    expires_in: timedelta
    obtained_at: datetime
    refresh_token: Optional[str] = None

    @property
    def expires_at(self) -> datetime:
        return self.obtained_at + self.expires_in


@dataclass(frozen=True, slots=True)
class FetchRequest:
    """Snapshot of everything a worker needs for one request cycle.

    Built on the calling thread so the worker never reads scheduler state.
    """

    url: str
    access_token: Optional[str]
    access_token_expires_at: Optional[datetime]
    refresh_token: Optional[str]
    client_id: Optional[str]
    client_secret: Optional[str]

    @property
    def can_refresh(self) -> bool:
        return (
            self.refresh_token is not None
            and self.client_id is not None
            and self.client_secret is not None
        )

    def is_expired(self, now: datetime) -> bool:
        if self.access_token_expires_at is None:
            return False
        return now >= self.access_token_expires_at


@dataclass(frozen=True, slots=True)
class FetchSuccess:
    rate: Optional[int]
    token_update: Optional[TokenUpdate] = None


@dataclass(frozen=True, slots=True)
class FetchFailure:
    """A failed cycle.

    ``token_update`` is set when a refresh succeeded before the request
    failed, so a rotated refresh token is not lost.
    """

    message: str
    status: int
    token_update: Optional[TokenUpdate] = None
    retry_after: Optional[datetime] = None


FetchResult = Union[FetchSuccess, FetchFailure]
