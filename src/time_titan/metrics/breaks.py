from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..common.numbers import round_half_up
from ..core.enums import Direction
from ..punches.model import PunchEvent


def minutes_out(punches: Iterable[PunchEvent]) -> int:
    """Total minutes spent out between an Out and the next In.

    Only the latest unmatched Out pairs with an In. A trailing Out with no In
    after it is not counted.
    """

    total = 0.0
    pending_out: Optional[datetime] = None

    for p in sorted(punches, key=lambda x: x.timestamp):
        direction = p.direction
        if direction == Direction.OUT:
            pending_out = p.timestamp
        elif direction == Direction.IN and pending_out is not None:
            total += (p.timestamp - pending_out).total_seconds() / 60
            pending_out = None

    return round_half_up(total)
