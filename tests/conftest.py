from __future__ import annotations

import pytest

from attendance_tracker import create_app
from attendance_tracker.core.enums import AttendanceStatus
from attendance_tracker.roster.model import Student
from attendance_tracker.roster.store import seed_roster
from attendance_tracker.storage import InMemoryStorage


@pytest.fixture
def seed():
    return seed_roster()


@pytest.fixture
def marked_roster():
    return (
        Student(id=1, name="Alice", status=AttendanceStatus.PRESENT),
        Student(id=3, name="Charlie", status=AttendanceStatus.ABSENT),
        Student(id=7, name="Grace"),
    )


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app({"STORAGE_BACKEND": "session"})


@pytest.fixture
def client(app):
    return app.test_client()
