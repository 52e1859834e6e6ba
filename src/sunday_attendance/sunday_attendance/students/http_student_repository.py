from __future__ import annotations

from typing import Optional, Sequence

import httpx

from ..core.constants import DEFAULT_ROSTER_TIMEOUT
from ..core.exceptions import ValidationError
from .model import Student
from .repository import StudentRepository


class HttpStudentRepository(StudentRepository):
    """Fetch the roster from a remote ``/api/students`` style endpoint."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = DEFAULT_ROSTER_TIMEOUT,
        headers: Optional[dict] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._url = url
        self._timeout = httpx.Timeout(timeout)
        self._headers = headers or {}
        self._transport = transport

    def list_all(self) -> Sequence[Student]:
        with httpx.Client(timeout=self._timeout, headers=self._headers, transport=self._transport) as client:
            response = client.get(self._url)
            response.raise_for_status()
            data = response.json()

        if not isinstance(data, list):
            raise ValidationError(f"Roster endpoint returned {type(data).__name__}, expected a list")
        return [Student.from_payload(item) for item in data if isinstance(item, dict)]
