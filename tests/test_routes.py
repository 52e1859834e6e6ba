from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.sunday_attendance.sunday_attendance.container import wire
from src.sunday_attendance.sunday_attendance.core.enums import Role
from src.sunday_attendance.sunday_attendance.main import create_app
from src.sunday_attendance.sunday_attendance.students.model import Student
from src.sunday_attendance.sunday_attendance.users.model import User

ROSTER = [
    Student("s1", "SS-0001", "Abel", "Tesfaye", "5", "5A"),
    Student("s2", "SS-0002", "Hanna", "Girma", "6", "6B"),
]


@dataclass
class InMemoryUsers:
    users_by_username: dict

    def get_by_username(self, username: str) -> Optional[User]:
        return self.users_by_username.get(username)


@dataclass
class InMemoryStudents:
    students: list

    def list_all(self):
        return list(self.students)


def make_client(monkeypatch, clock):
    monkeypatch.setenv("APP_ENV", "testing")
    teacher = User(
        user_id=7,
        full_name="Demo Teacher",
        username="teacher",
        password_hash=generate_password_hash("teacher123"),
        role=Role.TEACHER,
    )
    container = wire(
        users_repo=InMemoryUsers({"teacher": teacher}),
        students_repo=InMemoryStudents(ROSTER),
        clock=clock,
    )
    app = create_app(container)
    return app.test_client()


def sign_in(client):
    return client.post("/signin", data={"username": "teacher", "password": "teacher123"})


@pytest.fixture
def sunday_client(monkeypatch, sunday_clock):
    client = make_client(monkeypatch, sunday_clock)
    sign_in(client)
    return client


@pytest.fixture
def monday_client(monkeypatch, monday_clock):
    client = make_client(monkeypatch, monday_clock)
    sign_in(client)
    return client


def test_anonymous_is_redirected_to_signin(monkeypatch, sunday_clock):
    client = make_client(monkeypatch, sunday_clock)

    resp = client.get("/attendance")

    assert resp.status_code == 302
    assert "/signin" in resp.headers["Location"]
    assert client.get("/api/students").status_code == 401


def test_wrong_password_stays_on_signin(monkeypatch, sunday_clock):
    client = make_client(monkeypatch, sunday_clock)

    resp = client.post("/signin", data={"username": "teacher", "password": "nope"})

    assert resp.status_code == 401
    assert b"Wrong username or password" in resp.data


def test_signin_then_attendance_page(sunday_client):
    resp = sunday_client.get("/attendance")

    assert resp.status_code == 200
    assert b"Sene 29, 2017" in resp.data
    assert b"Abel" in resp.data and b"Hanna" in resp.data


def test_page_filters_by_query(sunday_client):
    resp = sunday_client.get("/attendance?q=hanna")

    assert b"Hanna" in resp.data
    assert b"Abel" not in resp.data


def test_students_api_returns_roster(sunday_client):
    resp = sunday_client.get("/api/students")

    assert resp.status_code == 200
    assert [s["_id"] for s in resp.get_json()] == ["s1", "s2"]


def test_api_toggle_reports_status(sunday_client):
    resp = sunday_client.post("/api/attendance/s1/present")
    assert resp.get_json() == {"success": True, "student_id": "s1", "status": "Present"}

    resp = sunday_client.post("/api/attendance/s1/permission")
    assert resp.get_json()["status"] == "Permission"

    assert sunday_client.post("/api/attendance/s1/late").status_code == 404
    assert sunday_client.post("/api/attendance/ghost/present").status_code == 400


def test_submit_downloads_workbook_and_resets(sunday_client):
    sunday_client.post("/attendance/s1/present")

    resp = sunday_client.post("/attendance/submit")

    assert resp.status_code == 200
    assert resp.mimetype == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    assert "Attendance_Sene_29_2017.xlsx" in resp.headers["Content-Disposition"]
    assert resp.data[:2] == b"PK"

    resp = sunday_client.post("/attendance/submit", follow_redirects=True)
    assert b"Please mark at least one student as Present or with Permission" in resp.data


def test_non_sunday_toggle_flashes_error(monday_client):
    resp = monday_client.post("/attendance/s1/present", follow_redirects=True)
    assert b"Attendance can only be marked on Sundays" in resp.data

    resp = monday_client.post("/api/attendance/s1/permission")
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Permission can only be marked on Sundays"

    resp = monday_client.post("/attendance/submit", follow_redirects=True)
    assert b"Attendance can only be submitted on Sundays" in resp.data


def test_signout_clears_session(sunday_client):
    sunday_client.post("/attendance/s1/present")

    resp = sunday_client.get("/signout")

    assert resp.status_code == 302
    assert sunday_client.get("/attendance").status_code == 302
