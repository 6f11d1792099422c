from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional

from ..core.constants import SHIFT_MINUTES
from ..core.enums import Direction
from ..punches.model import DayBounds, PunchEvent
from .factory import PunctualityStrategyFactory


@dataclass(frozen=True)
class DayState:
    day: date
    first_in: Optional[datetime]
    last_out: Optional[datetime]
    hours_worked: float
    minutes_left: float
    on_time: bool
    punctuality_score: int


def first_in_last_out(punches: Iterable[PunchEvent]) -> tuple[Optional[datetime], Optional[datetime]]:
    first_in: Optional[datetime] = None
    last_out: Optional[datetime] = None
    for p in punches:
        direction = p.direction
        if direction == Direction.IN and (first_in is None or p.timestamp < first_in):
            first_in = p.timestamp
        elif direction == Direction.OUT and (last_out is None or p.timestamp > last_out):
            last_out = p.timestamp
    return first_in, last_out


def build_day_state(
    *,
    day: date,
    first_in: Optional[datetime],
    last_out: Optional[datetime],
    now: datetime,
    factory: PunctualityStrategyFactory,
    shift_minutes: int = SHIFT_MINUTES,
) -> DayState:
    hours = 0.0
    if first_in is not None:
        if day == now.date():
            hours = (now - first_in).total_seconds() / 3600
        elif last_out is not None and last_out >= first_in:
            hours = (last_out - first_in).total_seconds() / 3600

    decision = factory.decide(first_in)
    return DayState(
        day=day,
        first_in=first_in,
        last_out=last_out,
        hours_worked=hours,
        minutes_left=max(float(shift_minutes) - hours * 60, 0.0),
        on_time=decision.on_time,
        punctuality_score=decision.score,
    )


def derive_day_state(
    punches: Iterable[PunchEvent],
    *,
    day: date,
    now: datetime,
    factory: PunctualityStrategyFactory,
    shift_minutes: int = SHIFT_MINUTES,
) -> DayState:
    first_in, last_out = first_in_last_out(p for p in punches if p.timestamp.date() == day)
    return build_day_state(
        day=day, first_in=first_in, last_out=last_out, now=now, factory=factory, shift_minutes=shift_minutes
    )


def day_state_from_bounds(
    bounds: DayBounds,
    *,
    now: datetime,
    factory: PunctualityStrategyFactory,
    shift_minutes: int = SHIFT_MINUTES,
) -> DayState:
    return build_day_state(
        day=bounds.day,
        first_in=bounds.first_in,
        last_out=bounds.last_out,
        now=now,
        factory=factory,
        shift_minutes=shift_minutes,
    )
