from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable

from ..common.datetime_utils import as_date


@dataclass(frozen=True)
class Streak:
    count: int
    is_active: bool


def consistency_streak(in_dates: Iterable[date | datetime], *, today: date) -> Streak:
    """Run of consecutive days with a punch-in, counted back from today.

    The walk compares the i-th most recent date with ``today - i days``, so a
    streak whose latest day is yesterday already counts as 0.
    """

    days = sorted({as_date(d) for d in in_dates if as_date(d) <= today}, reverse=True)
    if not days:
        return Streak(count=0, is_active=False)

    count = 0
    for i, day in enumerate(days):
        if day != today - timedelta(days=i):
            break
        count += 1

    return Streak(count=count, is_active=days[0] == today)
