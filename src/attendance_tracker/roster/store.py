"""Roster store: pure transitions over an immutable roster.

Every operation returns a new tuple when something changed and the very same
tuple when nothing did. Nothing here raises for domain reasons.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from ..core.constants import SEED_STUDENT_NAMES
from ..core.enums import ActionType, AttendanceStatus
from .model import Action, Roster, Student

logger = logging.getLogger(__name__)


def seed_roster() -> Roster:
    return tuple(Student(id=i, name=name) for i, name in enumerate(SEED_STUDENT_NAMES, start=1))


def next_id(roster: Roster) -> int:
    if not roster:
        return 1
    return max(s.id for s in roster) + 1


def _set_status(roster: Roster, student_id: int, status: AttendanceStatus) -> Roster:
    if not any(s.id == student_id for s in roster):
        return roster
    return tuple(s.with_status(status) if s.id == student_id else s for s in roster)


def mark_present(roster: Roster, student_id: int) -> Roster:
    return _set_status(roster, student_id, AttendanceStatus.PRESENT)


def mark_absent(roster: Roster, student_id: int) -> Roster:
    return _set_status(roster, student_id, AttendanceStatus.ABSENT)


def reset(roster: Roster) -> Roster:
    if all(s.status == AttendanceStatus.NOT_MARKED for s in roster):
        return roster
    return tuple(s.with_status(AttendanceStatus.NOT_MARKED) for s in roster)


def add_student(roster: Roster, name: str) -> Roster:
    """Append a Not Marked student with id = max(ids) + 1.

    The caller is responsible for passing a trimmed, non-empty name.
    """

    return roster + (Student(id=next_id(roster), name=name),)


def remove_student(roster: Roster, student_id: int) -> Roster:
    if not any(s.id == student_id for s in roster):
        return roster
    return tuple(s for s in roster if s.id != student_id)


def _payload_id(payload: Mapping[str, Any]) -> Optional[int]:
    value = payload.get("id")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _payload_name(payload: Mapping[str, Any]) -> Optional[str]:
    value = payload.get("name")
    if not isinstance(value, str):
        return None
    return value


def _by_id(op: Callable[[Roster, int], Roster]) -> Callable[[Roster, Mapping[str, Any]], Roster]:
    def handler(roster: Roster, payload: Mapping[str, Any]) -> Roster:
        student_id = _payload_id(payload)
        if student_id is None:
            return roster
        return op(roster, student_id)

    return handler


def _add(roster: Roster, payload: Mapping[str, Any]) -> Roster:
    name = _payload_name(payload)
    if name is None:
        return roster
    return add_student(roster, name)


_TRANSITIONS: Dict[ActionType, Callable[[Roster, Mapping[str, Any]], Roster]] = {
    ActionType.MARK_PRESENT: _by_id(mark_present),
    ActionType.MARK_ABSENT: _by_id(mark_absent),
    ActionType.RESET: lambda roster, _payload: reset(roster),
    ActionType.ADD_STUDENT: _add,
    ActionType.REMOVE_STUDENT: _by_id(remove_student),
}


def reduce(roster: Roster, action: Action) -> Roster:
    """Compute the next roster for `action`; unknown actions are identity."""

    transition = _TRANSITIONS.get(action.type)
    if transition is None:
        logger.debug("Ignoring unknown action %r", action.type)
        return roster
    return transition(roster, action.payload)
