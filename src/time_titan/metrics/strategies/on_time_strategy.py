from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.constants import ON_TIME_SCORE
from ...core.enums import PunctualityStatus
from .base import PunctualityDecision, PunctualityStrategy


class OnTimeStrategy(PunctualityStrategy):
    """First punch-in at or before the cutoff."""

    def decide(self, *, first_in: Optional[datetime], cutoff: Optional[datetime]) -> PunctualityDecision:
        return PunctualityDecision(status=PunctualityStatus.ON_TIME, score=ON_TIME_SCORE)
