from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from fitpulse.core.polling.backoff import BackoffSchedule
from fitpulse.core.polling.tokens import TokenManager
from fitpulse.core.ports.dispatcher import Receiver
from fitpulse.core.schema.fetch import FetchResult


@dataclass(slots=True)
class PollState:
    backoff: BackoffSchedule
    tokens: TokenManager = field(default_factory=TokenManager)
    last_rate: Optional[int] = None
    last_watch_visible: bool = False
    pending: Optional[Receiver[FetchResult]] = None

    @property
    def next_poll_at(self) -> datetime:
        return self.backoff.next_poll_at

    @property
    def next_interval_index(self) -> int:
        return self.backoff.next_interval_index

    @property
    def access_token(self) -> Optional[str]:
        return self.tokens.access_token

    @property
    def access_token_expires_at(self) -> Optional[datetime]:
        return self.tokens.access_token_expires_at

    @property
    def refresh_token(self) -> Optional[str]:
        return self.tokens.refresh_token
