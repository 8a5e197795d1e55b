from __future__ import annotations

import csv
import io

from ..core.enums import AttendanceStatus
from .model import Roster

CSV_FIELDS = ["position", "id", "name", "status"]


def _css_class(status: AttendanceStatus) -> str:
    return {
        AttendanceStatus.PRESENT: "bg-success",
        AttendanceStatus.ABSENT: "bg-danger",
        AttendanceStatus.NOT_MARKED: "bg-warning text-dark",
    }.get(status, "bg-secondary")


def to_rows(roster: Roster) -> list[dict]:
    return [
        {
            "position": position,
            "id": s.id,
            "name": s.name,
            "status": s.status.value,
            "css_class": _css_class(s.status),
        }
        for position, s in enumerate(roster, start=1)
    ]


def format_table(roster: Roster) -> str:
    """Tab separated `id, name, status` lines, one per student."""

    return "\n".join(f"{s.id}\t{s.name}\t{s.status.value}" for s in roster)


def write_csv(roster: Roster) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=CSV_FIELDS, extrasaction="ignore")
    writer.writeheader()
    for row in to_rows(roster):
        writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")
