from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .core.constants import DEFAULT_SESSION_MAX_BYTES, STORAGE_KEY
from .core.exceptions import ValidationError
from .roster.service import RosterController
from .storage import InMemoryStorage, JsonFileStorage, KeyValueStorage, SessionStorage

STORAGE_BACKENDS = ("session", "file", "memory")


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage
    storage_key: str
    storage_backend: str

    def roster_controller(self) -> RosterController:
        """Fresh controller per request; state lives in the storage backend."""

        return RosterController(self.storage, key=self.storage_key)


def build_storage(backend: str, *, path: Optional[str] = None, session_max_bytes: Optional[int] = None) -> KeyValueStorage:
    backend = (backend or "session").lower()
    if backend == "session":
        return SessionStorage(max_bytes=session_max_bytes or DEFAULT_SESSION_MAX_BYTES)
    if backend == "file":
        if not path:
            raise ValidationError("STORAGE_PATH is required for the file storage backend")
        return JsonFileStorage(path)
    if backend == "memory":
        return InMemoryStorage()
    raise ValidationError(f"Unknown storage backend {backend!r}, expected one of {', '.join(STORAGE_BACKENDS)}")


def build_container(*, settings: Mapping[str, Any]) -> Container:
    backend = str(settings.get("STORAGE_BACKEND") or "session").lower()
    storage = build_storage(
        backend,
        path=settings.get("STORAGE_PATH"),
        session_max_bytes=settings.get("SESSION_MAX_BYTES"),
    )
    return Container(
        storage=storage,
        storage_key=str(settings.get("STORAGE_KEY") or STORAGE_KEY),
        storage_backend=backend,
    )
