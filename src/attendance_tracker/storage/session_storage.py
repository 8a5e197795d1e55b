from __future__ import annotations

import logging
import threading
import uuid
from typing import Optional

from flask import session

from ..core.constants import DEFAULT_SESSION_MAX_BYTES, SESSION_ID_KEY
from .memory_storage import InMemoryStorage

logger = logging.getLogger(__name__)


class SessionStorage:
    """Storage backed by the signed Flask session cookie.

    The snapshot lives with the browser, so it survives reloads and is private
    to each visitor. Must be used inside a request context.

    Snapshots larger than `max_bytes` do not fit in the cookie. They are kept in
    a server-side overflow store keyed by a random session id, and only that id
    goes into the cookie. The overflow lives in process memory, so a restart
    falls back to whatever the cookie last held.
    """

    def __init__(self, *, max_bytes: int = DEFAULT_SESSION_MAX_BYTES, overflow: Optional[InMemoryStorage] = None):
        self._max_bytes = int(max_bytes)
        self._overflow = overflow if overflow is not None else InMemoryStorage()
        self.lock = threading.RLock()

    def _overflow_key(self, key: str, *, create: bool = False) -> Optional[str]:
        sid = session.get(SESSION_ID_KEY)
        if not isinstance(sid, str):
            if not create:
                return None
            sid = uuid.uuid4().hex
            session[SESSION_ID_KEY] = sid
        return f"{sid}:{key}"

    def get(self, key: str) -> Optional[str]:
        overflow_key = self._overflow_key(key)
        if overflow_key is not None:
            value = self._overflow.get(overflow_key)
            if value is not None:
                return value

        value = session.get(key)
        if value is None or isinstance(value, str):
            return value
        return None

    def set(self, key: str, value: str) -> None:
        size = len(value.encode("utf-8"))
        if size <= self._max_bytes:
            session[key] = value
            overflow_key = self._overflow_key(key)
            if overflow_key is not None:
                self._overflow.delete(overflow_key)
            return

        logger.warning("Snapshot of %d bytes exceeds the %d byte session quota, keeping it server-side", size, self._max_bytes)
        self._overflow.set(self._overflow_key(key, create=True), value)
