from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.enums import PunctualityStatus


@dataclass(frozen=True)
class PunctualityDecision:
    status: PunctualityStatus
    score: int

    @property
    def on_time(self) -> bool:
        return self.status == PunctualityStatus.ON_TIME


class PunctualityStrategy(ABC):
    """Strategy Pattern: encapsulate how a day's first punch-in is scored."""

    @abstractmethod
    def decide(self, *, first_in: Optional[datetime], cutoff: Optional[datetime]) -> PunctualityDecision:
        raise NotImplementedError
