from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_identifier
from ..core.constants import BADGE_WINDOW_DAYS, SHIFT_MINUTES
from ..core.exceptions import ValidationError
from ..metrics.badges import Badge, earn_badges
from ..metrics.breaks import minutes_out
from ..metrics.day_state import DayState, day_state_from_bounds, derive_day_state
from ..metrics.factory import PunctualityStrategyFactory
from ..metrics.progress import WorkProgress, work_progress
from ..metrics.streak import Streak, consistency_streak
from .model import PunchEvent
from .repository import PunchRepository

logger = logging.getLogger(__name__)


class PunchService:
    """Per-employee dashboard cards: progress, streak, breaks, day summaries."""

    def __init__(
        self,
        punches: PunchRepository,
        *,
        strategy_factory: PunctualityStrategyFactory | None = None,
        shift_minutes: int = SHIFT_MINUTES,
    ):
        self._punches = punches
        self._factory = strategy_factory or PunctualityStrategyFactory()
        self._shift_minutes = int(shift_minutes)

    def work_progress(self, employee_code: Optional[str], *, now: datetime | None = None) -> WorkProgress:
        code = require_identifier(employee_code)
        now = now or now_local()
        first_in = self._punches.first_in_for_day(code, now.date())
        return work_progress(first_in, now=now, shift_minutes=self._shift_minutes)

    def consistency_streak(self, employee_code: Optional[str], *, now: datetime | None = None) -> Streak:
        code = require_identifier(employee_code)
        today = (now or now_local()).date()
        return consistency_streak(self._punches.in_dates(code, today), today=today)

    def recent_punches(self, employee_code: Optional[str], *, limit: int) -> list[PunchEvent]:
        code = require_identifier(employee_code)
        return list(self._punches.last_punches(code, limit))

    def minutes_out(self, employee_code: Optional[str], *, now: datetime | None = None) -> int:
        code = require_identifier(employee_code)
        today = (now or now_local()).date()
        return minutes_out(self._punches.punches_for_day(code, today))

    def day_summary(
        self,
        employee_code: Optional[str],
        *,
        day: date | None = None,
        now: datetime | None = None,
    ) -> DayState:
        code = require_identifier(employee_code)
        now = now or now_local()
        day = day or now.date()
        if day > now.date():
            raise ValidationError("date cannot be in the future")

        return derive_day_state(
            self._punches.punches_for_day(code, day),
            day=day,
            now=now,
            factory=self._factory,
            shift_minutes=self._shift_minutes,
        )

    def history(self, employee_code: Optional[str], *, days: int, now: datetime | None = None) -> list[DayState]:
        """Day summaries for the last ``days`` days that have punches, newest first."""
        code = require_identifier(employee_code)
        now = now or now_local()
        end = now.date()
        start = end - timedelta(days=days - 1)
        bounds = self._punches.day_bounds_between(code, start=start, end=end)
        ordered = sorted(bounds, key=lambda b: b.day, reverse=True)
        return [
            day_state_from_bounds(b, now=now, factory=self._factory, shift_minutes=self._shift_minutes)
            for b in ordered
        ]

    def badges(self, employee_code: Optional[str], *, now: datetime | None = None) -> list[Badge]:
        code = require_identifier(employee_code)
        today = (now or now_local()).date()
        start = today - timedelta(days=BADGE_WINDOW_DAYS - 1)
        history = self._punches.day_bounds_between(code, start=start, end=today)
        streak = consistency_streak(self._punches.in_dates(code, today), today=today)
        badges = earn_badges(history, streak, today=today, factory=self._factory)
        logger.debug("Badges for %s: %s", code, [b.type.value for b in badges])
        return badges
