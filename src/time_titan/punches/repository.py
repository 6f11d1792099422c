from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import ActivityRow, CardPunch, DayBounds, PunchEvent


class PunchRepository(Protocol):
    """Read-only view of the raw punch log.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def first_in_for_day(self, employee_code: str, day: date) -> Optional[datetime]:
        raise NotImplementedError

    def earliest_in_for_day(self, day: date) -> Optional[CardPunch]:
        raise NotImplementedError

    def latest_out_for_day(self, day: date) -> Optional[CardPunch]:
        raise NotImplementedError

    def recent_activity(self, limit: int) -> Sequence[ActivityRow]:
        raise NotImplementedError

    def in_dates(self, employee_code: str, up_to: date) -> Sequence[date]:
        raise NotImplementedError

    def punches_for_day(self, employee_code: str, day: date) -> Sequence[PunchEvent]:
        raise NotImplementedError

    def last_punches(self, employee_code: str, limit: int) -> Sequence[PunchEvent]:
        raise NotImplementedError

    def day_bounds_between(self, employee_code: str, *, start: date, end: date) -> Sequence[DayBounds]:
        raise NotImplementedError
