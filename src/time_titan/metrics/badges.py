from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from ..common.numbers import round_half_up
from ..core.constants import (
    EARLY_BIRD_MIN_STREAK,
    NIGHT_OWL_CHECKOUT,
    NIGHT_OWL_MIN_DAYS,
    TIME_MASTER_MIN_RATE,
)
from ..core.enums import BadgeType
from ..punches.model import DayBounds
from .factory import PunctualityStrategyFactory
from .streak import Streak


@dataclass(frozen=True)
class Badge:
    type: BadgeType
    name: str
    description: str
    icon: str
    earned_on: date


_CATALOG = {
    BadgeType.TIME_MASTER: ("Time Master", "Consistently on time for an entire month", "\U0001F3C6"),
    BadgeType.EARLY_BIRD: ("Early Bird", "Shows up day after day without a break", "\U0001F426"),
    BadgeType.NIGHT_OWL: ("Night Owl", "Stays late and checks out last consistently", "\U0001F989"),
}


def _badge(kind: BadgeType, today: date) -> Badge:
    name, description, icon = _CATALOG[kind]
    return Badge(type=kind, name=name, description=description, icon=icon, earned_on=today)


def on_time_rate(history: Sequence[DayBounds], factory: PunctualityStrategyFactory) -> int:
    """Percentage of days with a punch-in whose first punch-in was on time."""
    attended = [b for b in history if b.first_in is not None]
    if not attended:
        return 0
    on_time = sum(1 for b in attended if factory.decide(b.first_in).on_time)
    return round_half_up(on_time * 100 / len(attended))


def late_checkout_days(history: Sequence[DayBounds]) -> int:
    return sum(1 for b in history if b.last_out is not None and b.last_out.time() >= NIGHT_OWL_CHECKOUT)


def earn_badges(
    history: Sequence[DayBounds],
    streak: Streak,
    *,
    today: date,
    factory: PunctualityStrategyFactory,
) -> list[Badge]:
    badges: list[Badge] = []
    if on_time_rate(history, factory) >= TIME_MASTER_MIN_RATE:
        badges.append(_badge(BadgeType.TIME_MASTER, today))
    if streak.count >= EARLY_BIRD_MIN_STREAK:
        badges.append(_badge(BadgeType.EARLY_BIRD, today))
    if late_checkout_days(history) >= NIGHT_OWL_MIN_DAYS:
        badges.append(_badge(BadgeType.NIGHT_OWL, today))
    return badges
