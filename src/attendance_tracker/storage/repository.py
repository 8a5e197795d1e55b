from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorage(Protocol):
    """Storage interface for roster snapshots.

    Note (DIP): the controller depends on this interface, not on a concrete
    backend. Implementations raise StorageError when the backend fails.
    Backends shared between threads also expose a reentrant `lock`.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError
