from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance mark of a student; values are the strings stored in snapshots."""

    NOT_MARKED = "Not Marked"
    PRESENT = "Present"
    ABSENT = "Absent"


class ActionType(str, Enum):
    """Transitions understood by the roster reducer."""

    MARK_PRESENT = "MARK_PRESENT"
    MARK_ABSENT = "MARK_ABSENT"
    RESET = "RESET"
    ADD_STUDENT = "ADD_STUDENT"
    REMOVE_STUDENT = "REMOVE_STUDENT"
