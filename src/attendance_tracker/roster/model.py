from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Tuple, Union

from ..core.enums import ActionType, AttendanceStatus


@dataclass(frozen=True)
class Student:
    """Domain entity: one row of the roster.

    Note: plain value object; the store produces new instances instead of mutating.
    """

    id: int
    name: str
    status: AttendanceStatus = AttendanceStatus.NOT_MARKED

    def with_status(self, status: AttendanceStatus) -> "Student":
        if self.status == status:
            return self
        return replace(self, status=status)


Roster = Tuple[Student, ...]


@dataclass(frozen=True)
class Action:
    """A transition request fed to the reducer.

    `type` stays a raw string when it does not name a known ActionType so that
    unknown actions can flow through as no-ops.
    """

    type: Union[ActionType, str]
    payload: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Action":
        raw_type = data.get("type")
        try:
            action_type: Union[ActionType, str] = ActionType(raw_type)
        except ValueError:
            action_type = str(raw_type)
        payload = data.get("payload") or {}
        if not isinstance(payload, Mapping):
            payload = {}
        return cls(type=action_type, payload=dict(payload))


@dataclass(frozen=True)
class RosterCounts:
    """Read-model recomputed on every render."""

    present: int
    absent: int
    total: int

    @classmethod
    def of(cls, roster: Roster) -> "RosterCounts":
        return cls(
            present=sum(1 for s in roster if s.status == AttendanceStatus.PRESENT),
            absent=sum(1 for s in roster if s.status == AttendanceStatus.ABSENT),
            total=len(roster),
        )

    def to_dict(self) -> dict:
        return {"present": self.present, "absent": self.absent, "total": self.total}
