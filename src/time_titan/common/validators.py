from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import MissingIdentifierError, ValidationError


def require_identifier(value: Optional[str], field_name: str = "empCode") -> str:
    if value is None or not str(value).strip():
        raise MissingIdentifierError(f"{field_name} is required")
    return str(value).strip()


def clamp_limit(value: Any, *, default: int, maximum: int, field_name: str = "limit") -> int:
    """Parse an optional positive count and cap it at ``maximum``."""
    if value is None or str(value).strip() == "":
        return default
    try:
        n = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be an integer")
    if n <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return min(n, maximum)
