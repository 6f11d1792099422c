from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import SHIFT_MINUTES
from ..core.exceptions import NotFoundError


@dataclass(frozen=True)
class WorkProgress:
    in_time: datetime
    hours_worked: float
    minutes_left: float


def work_progress(first_in: Optional[datetime], *, now: datetime, shift_minutes: int = SHIFT_MINUTES) -> WorkProgress:
    """Progress through today's shift measured from the first punch-in.

    ``first_in`` is None both when nobody punched in and when the stored
    value could not be parsed; either way there is nothing to measure.
    """

    if first_in is None:
        raise NotFoundError("No punch-in record found")

    hours_worked = (now - first_in).total_seconds() / 3600
    minutes_left = max(float(shift_minutes) - hours_worked * 60, 0.0)
    return WorkProgress(in_time=first_in, hours_worked=hours_worked, minutes_left=minutes_left)
