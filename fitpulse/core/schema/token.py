from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class TokenCache:
    access_token: Optional[str] = None
    access_token_expires_at: Optional[datetime] = None
    refresh_token: Optional[str] = None

    def is_empty(self) -> bool:
        return self.access_token is None and self.refresh_token is None
