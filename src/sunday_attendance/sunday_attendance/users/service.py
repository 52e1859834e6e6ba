from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .repository import UserRepository


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after sign-in."""

    user_id: int
    full_name: str
    role: Role


class AuthService:
    """Use case: authenticate user (sign-in)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        try:
            username = require_non_empty(username, "Username")
        except ValidationError as e:
            raise AuthenticationError("Wrong username or password") from e

        user = self._users.get_by_username(username)
        if not user or not user.is_active:
            raise AuthenticationError("Wrong username or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # placeholder hashes such as 'CHANGE_ME'
            ok = False

        if not ok:
            raise AuthenticationError("Wrong username or password")

        return SessionUser(user_id=user.user_id, full_name=user.full_name, role=user.role)
