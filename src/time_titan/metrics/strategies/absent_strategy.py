from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.constants import ABSENT_SCORE
from ...core.enums import PunctualityStatus
from .base import PunctualityDecision, PunctualityStrategy


class AbsentStrategy(PunctualityStrategy):
    """No punch-in that day."""

    def decide(self, *, first_in: Optional[datetime], cutoff: Optional[datetime]) -> PunctualityDecision:
        return PunctualityDecision(status=PunctualityStatus.ABSENT, score=ABSENT_SCORE)
