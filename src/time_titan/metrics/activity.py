from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from ..core.constants import RECENT_ACTIVITY_LIMIT, UNRESOLVED_NAME
from ..employees.model import EmployeeIdentity
from ..punches.model import ActivityRow, CardPunch


@dataclass(frozen=True)
class ActivityItem:
    action: str
    name: str
    time: datetime


@dataclass(frozen=True)
class Highlight:
    """Earliest check-in / latest check-out of the board."""

    name: str
    card_number: str
    time: datetime


def recent_activity(rows: Iterable[ActivityRow], *, limit: int = RECENT_ACTIVITY_LIMIT) -> list[ActivityItem]:
    ordered = sorted(rows, key=lambda r: r.card_number)
    ordered.sort(key=lambda r: r.timestamp, reverse=True)
    return [
        ActivityItem(action=r.action, name=r.name or UNRESOLVED_NAME, time=r.timestamp)
        for r in ordered[:limit]
    ]


def highlight(punch: CardPunch, identity: Optional[EmployeeIdentity]) -> Highlight:
    name = identity.display_name if identity else f"#{punch.card_number}"
    return Highlight(name=name, card_number=punch.card_number, time=punch.timestamp)
