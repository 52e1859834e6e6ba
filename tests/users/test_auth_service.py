from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.sunday_attendance.sunday_attendance.core.enums import Role
from src.sunday_attendance.sunday_attendance.core.exceptions import AuthenticationError
from src.sunday_attendance.sunday_attendance.users.model import User
from src.sunday_attendance.sunday_attendance.users.service import AuthService


@dataclass
class InMemoryUsers:
    users_by_username: dict

    def get_by_username(self, username: str) -> Optional[User]:
        return self.users_by_username.get(username)


def _user(**overrides) -> User:
    fields = dict(
        user_id=1,
        full_name="Demo Teacher",
        username="teacher",
        password_hash=generate_password_hash("right"),
        role=Role.TEACHER,
        is_active=True,
    )
    fields.update(overrides)
    return User(**fields)


def test_authenticate_returns_session_user():
    auth = AuthService(InMemoryUsers({"teacher": _user()}))

    s_user = auth.authenticate("  teacher ", "right")

    assert s_user.user_id == 1
    assert s_user.role == Role.TEACHER


@pytest.mark.parametrize(
    "username,password,user",
    [
        ("teacher", "wrong", _user()),
        ("ghost", "right", _user()),
        ("", "right", _user()),
        ("teacher", "right", _user(is_active=False)),
        ("teacher", "right", _user(password_hash="CHANGE_ME")),
    ],
)
def test_authenticate_rejects(username, password, user):
    auth = AuthService(InMemoryUsers({"teacher": user}))

    with pytest.raises(AuthenticationError):
        auth.authenticate(username, password)
