from fitpulse.infra.state.file_store import FileStateStore
from fitpulse.infra.state.redis_store import RedisStateStore
from fitpulse.infra.state.token_state import TokenStateStore

__all__ = ["FileStateStore", "RedisStateStore", "TokenStateStore"]
