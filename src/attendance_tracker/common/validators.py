from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def clean_name(value: Optional[str]) -> Optional[str]:
    """Trimmed student name, or None when nothing is left after trimming."""

    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None
