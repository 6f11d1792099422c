from __future__ import annotations

from datetime import datetime

from ..common.datetime_utils import now_local, yesterday_of
from ..core.constants import RECENT_ACTIVITY_LIMIT
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..metrics.activity import ActivityItem, Highlight, highlight, recent_activity
from ..punches.repository import PunchRepository


class HighlightService:
    """Board-wide cards: who came first today, who left last yesterday, live feed."""

    def __init__(self, punches: PunchRepository, employees: EmployeeRepository):
        self._punches = punches
        self._employees = employees

    def earliest_check_in(self, *, now: datetime | None = None) -> Highlight:
        today = (now or now_local()).date()
        punch = self._punches.earliest_in_for_day(today)
        if not punch:
            raise NotFoundError("No check-in found today")
        return highlight(punch, self._employees.get_by_card(punch.card_number))

    def latest_check_out(self, *, now: datetime | None = None) -> Highlight:
        yesterday = yesterday_of((now or now_local()).date())
        punch = self._punches.latest_out_for_day(yesterday)
        if not punch:
            raise NotFoundError("No check-out found yesterday")
        return highlight(punch, self._employees.get_by_card(punch.card_number))

    def recent_activity(self) -> list[ActivityItem]:
        rows = self._punches.recent_activity(RECENT_ACTIVITY_LIMIT)
        return recent_activity(rows, limit=RECENT_ACTIVITY_LIMIT)
