from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import ContextManager, Optional

from ..common.validators import clean_name
from ..core.constants import STORAGE_KEY
from ..core.enums import ActionType
from ..core.exceptions import StorageError
from ..storage.repository import KeyValueStorage
from . import codec, store
from .model import Action, Roster, RosterCounts

logger = logging.getLogger(__name__)


class RosterController:
    """Use case: track attendance for one roster.

    Owns the current roster and the pending "new student name" buffer. Every
    state change goes through the store and is mirrored to storage; storage
    failures never escape.

    Storages shared between threads expose a `lock`; it is held around each
    read, reduce and write so concurrent controllers apply changes in sequence.
    """

    def __init__(self, storage: KeyValueStorage, *, key: str = STORAGE_KEY):
        self._storage = storage
        self._key = key
        self._roster: Roster = ()
        self._loaded = False
        # last snapshot read from or written to storage
        self._synced: Optional[str] = None
        self.pending_name = ""

    @property
    def roster(self) -> Roster:
        return self._roster

    @property
    def counts(self) -> RosterCounts:
        return RosterCounts.of(self._roster)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def _locked(self) -> ContextManager:
        lock = getattr(self._storage, "lock", None)
        return lock if lock is not None else nullcontext()

    def _read(self) -> Optional[str]:
        try:
            return self._storage.get(self._key)
        except StorageError as e:
            logger.warning("Could not read stored roster: %s", e)
            return None

    def load(self) -> Roster:
        """Restore the stored snapshot once, falling back to the seed roster."""

        with self._locked():
            if self._loaded:
                return self._roster

            raw = self._read()
            roster, result = codec.restore_or_seed(raw)
            if not result.ok and raw:
                logger.warning("Stored roster is malformed, using seed: %s", result.error)
            elif not result.ok:
                logger.info("No stored roster, starting from seed")

            self._roster = roster
            self._synced = raw
            self._loaded = True
            self._persist()
            return self._roster

    def set_pending_name(self, text: Optional[str]) -> None:
        self.pending_name = text or ""

    def dispatch(self, action: Action) -> Roster:
        with self._locked():
            if not self._loaded:
                self.load()
            self._sync()
            self._roster = store.reduce(self._roster, action)
            self._persist()
            return self._roster

    def submit_add(self, name: Optional[str] = None) -> bool:
        """Add a student from `name` or the pending buffer.

        Returns False, leaving the roster untouched, when the trimmed name is empty.
        """

        trimmed = clean_name(self.pending_name if name is None else name)
        if trimmed is None:
            return False
        self.dispatch(Action(ActionType.ADD_STUDENT, {"name": trimmed}))
        self.pending_name = ""
        return True

    def mark_present(self, student_id: int) -> Roster:
        return self.dispatch(Action(ActionType.MARK_PRESENT, {"id": student_id}))

    def mark_absent(self, student_id: int) -> Roster:
        return self.dispatch(Action(ActionType.MARK_ABSENT, {"id": student_id}))

    def remove(self, student_id: int) -> Roster:
        return self.dispatch(Action(ActionType.REMOVE_STUDENT, {"id": student_id}))

    def reset(self) -> Roster:
        return self.dispatch(Action(ActionType.RESET))

    def _sync(self) -> None:
        # Another writer stored a newer snapshot; build on it. An unchanged
        # snapshot (including one a failed write left behind) keeps ours.
        raw = self._read()
        if raw is None or raw == self._synced:
            return
        result = codec.loads(raw)
        if result.roster is not None:
            self._roster = result.roster
            self._synced = raw

    def _persist(self) -> None:
        raw = codec.dumps(self._roster)
        try:
            self._storage.set(self._key, raw)
        except StorageError as e:
            logger.warning("Could not persist roster, keeping it in memory only: %s", e)
            return
        self._synced = raw
