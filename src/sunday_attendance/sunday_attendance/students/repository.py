from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Roster source.

    Implementations may raise on transport/database errors; RosterService
    turns any failure into an empty roster.
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError
