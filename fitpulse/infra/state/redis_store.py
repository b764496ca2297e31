from typing import Optional

from redis import Redis
from redis.exceptions import RedisError

from fitpulse.core.exceptions import StateStoreError
from fitpulse.core.ports.state_store import StateStore


class RedisStateStore(StateStore):
    def __init__(self, redis_client: Redis, namespace: str = "fitpulse:state") -> None:
        self._redis = redis_client
        self._namespace = namespace

    @classmethod
    def from_url(cls, url: str) -> "RedisStateStore":
        return cls(Redis.from_url(url))

    def read(self, key: str) -> Optional[str]:
        try:
            value = self._redis.get(self._key(key))
        except RedisError as error:
            raise StateStoreError(f"Redis read failed for {key}: {error}") from error
        if value is not None:
            return value.decode("utf-8")
        return None

    def write(self, key: str, value: str) -> None:
        try:
            self._redis.set(self._key(key), value)
        except RedisError as error:
            raise StateStoreError(f"Redis write failed for {key}: {error}") from error

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}"
