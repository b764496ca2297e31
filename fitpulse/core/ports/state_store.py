from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class StateStore(Protocol):
    """String key/value storage shared by the state adapters.

    Backend failures surface as ``StateStoreError``.
    """

    def read(self, key: str) -> Optional[str]: ...

    def write(self, key: str, value: str) -> None: ...
