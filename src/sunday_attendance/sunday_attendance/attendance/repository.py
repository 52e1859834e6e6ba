from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import SessionState


class SessionStore(Protocol):
    """Holds one attendance session per browser session key."""

    def get(self, key: str) -> Optional[SessionState]:
        raise NotImplementedError

    def put(self, key: str, state: SessionState) -> None:
        raise NotImplementedError

    def discard(self, key: str) -> None:
        raise NotImplementedError

    def discard_stale(self, today: date) -> int:
        """Drop every session not started on ``today``; returns how many were dropped."""
        raise NotImplementedError


class InMemorySessionStore(SessionStore):
    """Process-local store; sessions are lost on restart."""

    def __init__(self):
        self._states: dict[str, SessionState] = {}

    def get(self, key: str) -> Optional[SessionState]:
        return self._states.get(key)

    def put(self, key: str, state: SessionState) -> None:
        self._states[key] = state

    def discard(self, key: str) -> None:
        self._states.pop(key, None)

    def discard_stale(self, today: date) -> int:
        stale = [k for k, s in self._states.items() if s.session_date != today]
        for k in stale:
            del self._states[k]
        return len(stale)

    def __len__(self) -> int:
        return len(self._states)
