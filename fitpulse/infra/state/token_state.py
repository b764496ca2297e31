import json
from datetime import datetime

from fitpulse.core.exceptions import StateStoreError
from fitpulse.core.ports.state_store import StateStore
from fitpulse.core.ports.token_state import TokenState
from fitpulse.core.schema.token import TokenCache


class TokenStateStore(TokenState):
    _KEY_PREFIX = "fitbit.tokens"

    def __init__(self, state_store: StateStore, persist_tokens: bool) -> None:
        self._state_store = state_store
        self._persist_tokens = persist_tokens

    def _allow_state_op(self) -> bool:
        return self._persist_tokens

    def load(self, device_id: str) -> TokenCache | None:
        if not self._allow_state_op():
            return None

        key = self._key(device_id)
        stored = self._state_store.read(key)
        if not stored:
            return None
        try:
            return _decode(stored)
        except (ValueError, TypeError, AttributeError) as error:
            raise StateStoreError(f"Stored tokens under {key} are unreadable: {error}") from error

    def store(self, device_id: str, cache: TokenCache) -> None:
        if not self._allow_state_op():
            return
        expires_at = cache.access_token_expires_at
        self._state_store.write(
            self._key(device_id),
            json.dumps(
                {
                    "access_token": cache.access_token,
                    "access_token_expires_at": (
                        expires_at.isoformat() if expires_at else None
                    ),
                    "refresh_token": cache.refresh_token,
                }
            ),
        )

    def _key(self, device_id: str) -> str:
        return f"{self._KEY_PREFIX}.{device_id}"


def _decode(stored: str) -> TokenCache:
    parsed = json.loads(stored)
    if not isinstance(parsed, dict):
        raise ValueError("expected a JSON object")
    access_token = parsed.get("access_token")
    refresh_token = parsed.get("refresh_token")
    for name, value in (("access_token", access_token), ("refresh_token", refresh_token)):
        if value is not None and not isinstance(value, str):
            raise ValueError(f"{name} must be a string")
    expires_at = parsed.get("access_token_expires_at")
    return TokenCache(
        access_token=access_token,
        access_token_expires_at=(
            datetime.fromisoformat(expires_at) if expires_at else None
        ),
        refresh_token=refresh_token,
    )
