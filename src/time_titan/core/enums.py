from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class Direction(str, Enum):
    """Hướng quẹt thẻ (vào/ra), chuẩn hoá về chữ thường."""

    IN = "in"
    OUT = "out"

    @classmethod
    def parse(cls, value: Any) -> Optional["Direction"]:
        """Normalize a raw IN_OUT column value; unknown values give None."""
        if value is None:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class PunctualityStatus(str, Enum):
    """Trạng thái đúng giờ của lần vào đầu tiên trong ngày."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"
    ABSENT = "ABSENT"


class BadgeType(str, Enum):
    TIME_MASTER = "timeMaster"
    EARLY_BIRD = "earlyBird"
    NIGHT_OWL = "nightOwl"
