import os
import re
from pathlib import Path
from typing import Optional

from fitpulse.core.exceptions import StateStoreError
from fitpulse.core.ports.state_store import StateStore

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9._-]")
_FILE_MODE = 0o600


class FileStateStore(StateStore):
    """Stores one value per key under ``base_dir``.

    Values may hold OAuth tokens, so files are created owner-only and replaced
    atomically.
    """

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)

    def read(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as error:
            raise StateStoreError(f"Failed to read state file {path}: {error}") from error

    def write(self, key: str, value: str) -> None:
        path = self._path_for(key)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(temp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _FILE_MODE)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
                handle.flush()
                os.fsync(handle.fileno())
            temp_path.replace(path)
        except OSError as error:
            raise StateStoreError(f"Failed to write state file {path}: {error}") from error

    def _path_for(self, key: str) -> Path:
        safe_key = _UNSAFE_KEY_CHARS.sub("_", key)
        return self._base_dir / f"{safe_key}.json"
