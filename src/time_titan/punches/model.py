from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import Direction


@dataclass(frozen=True)
class PunchEvent:
    """Thực thể miền (domain): một lần quẹt thẻ.

    ``action`` keeps the lower-cased raw IN_OUT value so raw listings can show
    rows whose direction is not a valid In/Out.
    """

    employee_code: str
    card_number: str
    timestamp: datetime
    action: str

    @property
    def direction(self) -> Optional[Direction]:
        return Direction.parse(self.action)


@dataclass(frozen=True)
class CardPunch:
    """A punch found by a global (all employees) query, keyed by card number."""

    card_number: str
    timestamp: datetime


@dataclass(frozen=True)
class ActivityRow:
    """Read-model for the live activity feed (punch joined to the directory)."""

    action: str
    name: Optional[str]
    card_number: str
    timestamp: datetime


@dataclass(frozen=True)
class DayBounds:
    """First In / last Out of one calendar day, as aggregated by the store."""

    day: date
    first_in: Optional[datetime]
    last_out: Optional[datetime]
