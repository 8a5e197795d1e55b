from __future__ import annotations

import threading
from typing import Optional

from ..core.exceptions import StorageError


class InMemoryStorage:
    """Dict-backed storage; `fail_writes` simulates a full quota."""

    def __init__(self, initial: Optional[dict[str, str]] = None, *, fail_writes: bool = False):
        self._data: dict[str, str] = dict(initial or {})
        self.fail_writes = fail_writes
        self.writes = 0
        self.lock = threading.RLock()

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageError("storage quota exceeded")
        self._data[key] = value
        self.writes += 1

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
