"""Snapshot format for persisted rosters.

The stored value is a JSON array of ``{"id": int, "name": str, "status": str}``
objects with no version field. Restoring never raises: failures come back as a
``RestoreResult`` carrying the reason.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ..core.enums import AttendanceStatus
from .model import Roster, Student
from .store import seed_roster


@dataclass(frozen=True)
class RestoreResult:
    roster: Optional[Roster] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.roster is not None


def to_records(roster: Roster) -> list[dict]:
    return [{"id": s.id, "name": s.name, "status": s.status.value} for s in roster]


def dumps(roster: Roster) -> str:
    return json.dumps(to_records(roster), ensure_ascii=False)


def _parse_student(item: Any, index: int) -> Tuple[Optional[Student], Optional[str]]:
    if not isinstance(item, dict):
        return None, f"item {index} is not an object"

    student_id = item.get("id")
    if isinstance(student_id, bool) or not isinstance(student_id, int):
        return None, f"item {index} has an invalid id"

    name = item.get("name")
    if not isinstance(name, str) or not name.strip():
        return None, f"item {index} has an invalid name"

    try:
        status = AttendanceStatus(item.get("status"))
    except ValueError:
        return None, f"item {index} has an unknown status"

    return Student(id=student_id, name=name, status=status), None


def loads(raw: Optional[str]) -> RestoreResult:
    if not raw:
        return RestoreResult(error="no snapshot stored")

    try:
        data = json.loads(raw)
    except ValueError as e:
        return RestoreResult(error=f"snapshot is not valid JSON ({e})")

    if not isinstance(data, list):
        return RestoreResult(error="snapshot is not a list")

    students: list[Student] = []
    seen: set[int] = set()
    for index, item in enumerate(data):
        student, error = _parse_student(item, index)
        if student is None:
            return RestoreResult(error=error)
        if student.id in seen:
            return RestoreResult(error=f"duplicate id {student.id}")
        seen.add(student.id)
        students.append(student)

    return RestoreResult(roster=tuple(students))


def restore_or_seed(raw: Optional[str]) -> Tuple[Roster, RestoreResult]:
    """Restore `raw`, substituting the seed roster when it cannot be used."""

    result = loads(raw)
    if result.roster is not None:
        return result.roster, result
    return seed_roster(), result
