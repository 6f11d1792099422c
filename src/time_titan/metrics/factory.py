from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time
from typing import Optional

from ..core.constants import ON_TIME_CUTOFF
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import PunctualityDecision, PunctualityStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.on_time_strategy import OnTimeStrategy


@dataclass
class PunctualityStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on the cutoff rule.

    The cutoff is inclusive: a punch at exactly 09:15:00 is on time.
    """

    cutoff_time: time = field(default=ON_TIME_CUTOFF)

    def cutoff_for(self, first_in: datetime) -> datetime:
        return datetime.combine(first_in.date(), self.cutoff_time)

    def for_first_in(self, first_in: Optional[datetime]) -> PunctualityStrategy:
        if first_in is None:
            return AbsentStrategy()
        if first_in <= self.cutoff_for(first_in):
            return OnTimeStrategy()
        return LateStrategy()

    def decide(self, first_in: Optional[datetime]) -> PunctualityDecision:
        cutoff = self.cutoff_for(first_in) if first_in is not None else None
        return self.for_first_in(first_in).decide(first_in=first_in, cutoff=cutoff)
