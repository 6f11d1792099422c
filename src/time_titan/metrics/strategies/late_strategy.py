from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.constants import LATE_SCORE
from ...core.enums import PunctualityStatus
from .base import PunctualityDecision, PunctualityStrategy


class LateStrategy(PunctualityStrategy):
    """Late first punch-in."""

    def decide(self, *, first_in: Optional[datetime], cutoff: Optional[datetime]) -> PunctualityDecision:
        return PunctualityDecision(status=PunctualityStatus.LATE, score=LATE_SCORE)
