from typing import Protocol, runtime_checkable

from fitpulse.core.schema.token import TokenCache


@runtime_checkable
class TokenState(Protocol):
    """Per-device token persistence.

    Implementations raise ``StateStoreError`` when the backing store cannot be
    read or written, or holds a value that cannot be decoded.
    """

    def load(self, device_id: str) -> TokenCache | None: ...

    def store(self, device_id: str, cache: TokenCache) -> None: ...
