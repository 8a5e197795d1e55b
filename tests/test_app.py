from __future__ import annotations

import pytest

from attendance_tracker import create_app
from attendance_tracker.config import get_settings_module
from attendance_tracker.container import build_container, build_storage
from attendance_tracker.core.exceptions import ValidationError
from attendance_tracker.storage import InMemoryStorage, JsonFileStorage, SessionStorage


def _students(client):
    return client.get("/api/students").get_json()["students"]


def test_index_renders_seed_roster(client):
    resp = client.get("/")
    body = resp.get_data(as_text=True)

    assert resp.status_code == 200
    for name in ("Alice", "Bob", "Charlie", "David"):
        assert name in body
    assert "Present: <strong>0</strong>" in body
    assert "1\tAlice\tNot Marked" in body


def test_form_routes_drive_the_roster(client):
    assert client.post("/students/2/present").status_code == 302
    client.post("/students/4/absent")
    client.post("/students", data={"name": "  Eve "})
    client.post("/students/3/remove")

    students = _students(client)
    assert [(s["id"], s["name"], s["status"]) for s in students] == [
        (1, "Alice", "Not Marked"),
        (2, "Bob", "Present"),
        (4, "David", "Absent"),
        (5, "Eve", "Not Marked"),
    ]

    counts = client.get("/api/students").get_json()["counts"]
    assert counts == {"present": 1, "absent": 1, "total": 4}

    client.post("/reset")
    assert {s["status"] for s in _students(client)} == {"Not Marked"}


def test_blank_name_form_submit_is_ignored(client):
    client.post("/students", data={"name": "   "})
    assert len(_students(client)) == 4


def test_state_is_private_to_each_session(app):
    first = app.test_client()
    second = app.test_client()

    first.post("/students/1/remove")

    assert len(_students(first)) == 3
    assert len(_students(second)) == 4


def test_api_actions(client):
    resp = client.post("/api/actions", json={"type": "MARK_ABSENT", "payload": {"id": 1}})
    assert resp.status_code == 200
    assert resp.get_json()["students"][0]["status"] == "Absent"

    resp = client.post("/api/actions", json={"type": "ADD_STUDENT", "payload": {"name": "Eve"}})
    assert resp.get_json()["students"][-1] == {
        "position": 5,
        "id": 5,
        "name": "Eve",
        "status": "Not Marked",
        "css_class": "bg-warning text-dark",
    }


def test_api_unknown_action_is_a_noop(client):
    before = _students(client)
    resp = client.post("/api/actions", json={"type": "DELETE_EVERYONE"})

    assert resp.status_code == 200
    assert resp.get_json()["students"] == before


@pytest.mark.parametrize("payload", [{"name": "  "}, {}, {"name": 5}])
def test_api_rejects_blank_names(client, payload):
    resp = client.post("/api/actions", json={"type": "ADD_STUDENT", "payload": payload})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert len(_students(client)) == 4


def test_api_requires_json_object(client):
    resp = client.post("/api/actions", data="nope", content_type="text/plain")
    assert resp.status_code == 400


def test_exports(client):
    client.post("/students/1/present")

    txt = client.get("/attendance.txt")
    assert txt.mimetype == "text/plain"
    assert txt.get_data(as_text=True).splitlines()[0] == "1\tAlice\tPresent"

    csv_resp = client.get("/attendance.csv")
    assert csv_resp.mimetype == "text/csv"
    assert "attachment" in csv_resp.headers["Content-Disposition"]
    assert "Alice" in csv_resp.get_data().decode("utf-8-sig")


def test_file_backend_shares_state_across_clients(monkeypatch, tmp_path):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"STORAGE_BACKEND": "file", "STORAGE_PATH": str(tmp_path / "state.json")})

    app.test_client().post("/students/1/present")

    assert _students(app.test_client())[0]["status"] == "Present"
    assert (tmp_path / "state.json").exists()


def test_oversized_session_snapshot_survives_later_requests(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    client = create_app({"STORAGE_BACKEND": "session", "SESSION_MAX_BYTES": 10}).test_client()

    resp = client.post("/api/actions", json={"type": "MARK_PRESENT", "payload": {"id": 1}})
    assert resp.status_code == 200
    assert resp.get_json()["students"][0]["status"] == "Present"

    assert _students(client)[0]["status"] == "Present"


def test_oversized_session_form_add_shows_after_redirect(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    client = create_app({"STORAGE_BACKEND": "session", "SESSION_MAX_BYTES": 10}).test_client()

    client.post("/students", data={"name": "Eve"})
    body = client.get("/").get_data(as_text=True)

    assert "5\tEve\tNot Marked" in body


def test_roster_keeps_growing_past_the_cookie_quota(client):
    for i in range(60):
        client.post("/students", data={"name": f"Student number {i:02d} with a long name"})

    students = _students(client)
    assert len(students) == 64
    assert students[-1]["id"] == 64
    assert students[-1]["name"] == "Student number 59 with a long name"


def test_blank_name_is_handed_back_to_the_form(client):
    resp = client.post("/students", data={"name": "   "})

    assert resp.status_code == 302
    assert "name=" in resp.headers["Location"]
    body = client.get(resp.headers["Location"]).get_data(as_text=True)
    assert 'value="   "' in body
    assert len(_students(client)) == 4


def test_accepted_name_clears_the_form(client):
    resp = client.post("/students", data={"name": "Eve"})
    assert "name=" not in resp.headers["Location"]



@pytest.mark.parametrize(
    "env, module",
    [
        ("production", "attendance_tracker.config.production"),
        ("prod", "attendance_tracker.config.production"),
        ("TEST", "attendance_tracker.config.testing"),
        ("whatever", "attendance_tracker.config.development"),
    ],
)
def test_settings_module_selection(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module


def test_build_storage_backends(tmp_path):
    assert isinstance(build_storage("memory"), InMemoryStorage)
    assert isinstance(build_storage("SESSION"), SessionStorage)
    assert isinstance(build_storage("file", path=str(tmp_path / "s.json")), JsonFileStorage)

    with pytest.raises(ValidationError):
        build_storage("file")
    with pytest.raises(ValidationError):
        build_storage("redis")


def test_build_container_defaults_key():
    container = build_container(settings={"STORAGE_BACKEND": "memory"})
    assert container.storage_key == "attendance_state"
    assert container.storage_backend == "memory"
