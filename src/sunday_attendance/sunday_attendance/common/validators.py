from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def clean_text(value) -> str:
    """Roster fields may arrive as None or numbers; normalise to a stripped string."""
    if value is None:
        return ""
    return str(value).strip()
