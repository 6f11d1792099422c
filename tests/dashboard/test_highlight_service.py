from __future__ import annotations

from datetime import datetime

import pytest

from time_titan.core.exceptions import NotFoundError
from time_titan.dashboard.service import HighlightService


def test_earliest_check_in_today(punches, directory, fixed_now):
    directory.add("30874", "Lan Pham", card="7781")
    punches.add("30874", datetime(2026, 2, 4, 8, 10), "In", card="7781")
    punches.add("1415", datetime(2026, 2, 4, 8, 10), "In", card="9000")
    punches.add("1416", datetime(2026, 2, 3, 6, 0), "In", card="9001")

    h = HighlightService(punches, directory).earliest_check_in(now=fixed_now)

    assert (h.name, h.card_number, h.time) == ("Lan Pham", "7781", datetime(2026, 2, 4, 8, 10))


def test_latest_check_out_is_yesterday_and_unknown_card_falls_back(punches, directory, fixed_now):
    punches.add("1415", datetime(2026, 2, 3, 19, 45), "Out", card="9000")
    punches.add("1416", datetime(2026, 2, 3, 18, 0), "Out", card="9001")
    punches.add("1416", datetime(2026, 2, 4, 9, 0), "Out", card="9001")

    h = HighlightService(punches, directory).latest_check_out(now=fixed_now)

    assert h.name == "#9000"
    assert h.time == datetime(2026, 2, 3, 19, 45)


def test_missing_highlights_are_not_found(punches, directory, fixed_now):
    svc = HighlightService(punches, directory)

    with pytest.raises(NotFoundError, match="No check-in found today"):
        svc.earliest_check_in(now=fixed_now)
    with pytest.raises(NotFoundError, match="No check-out found yesterday"):
        svc.latest_check_out(now=fixed_now)


def test_recent_activity_feed(punches, directory):
    directory.add("30874", "Lan Pham", card="7781")
    punches.add("30874", datetime(2026, 2, 4, 8, 0), "In", card="7781")
    punches.add("30874", datetime(2026, 2, 4, 12, 0), "Out", card="7781")
    punches.add("9", datetime(2026, 2, 4, 12, 5), "In", card="0009")
    punches.add("30874", datetime(2026, 2, 4, 12, 30), "In", card="7781")

    items = HighlightService(punches, directory).recent_activity()

    assert [(i.action, i.name) for i in items] == [("in", "Lan Pham"), ("in", "-"), ("out", "Lan Pham")]


def test_shared_card_resolves_to_lowest_employee_id(punches, directory):
    directory.add("30875", "Minh Tran", card="7781")
    directory.add("30874", "Lan Pham", card="7781")
    punches.add("30874", datetime(2026, 2, 4, 8, 0), "In", card="7781")
    punches.add("1415", datetime(2026, 2, 4, 8, 5), "In", card="9000")
    punches.add("30874", datetime(2026, 2, 4, 12, 0), "Out", card="7781")
    punches.add("30874", datetime(2026, 2, 4, 12, 30), "In", card="7781")

    svc = HighlightService(punches, directory)
    items = svc.recent_activity()

    assert [i.time for i in items] == [
        datetime(2026, 2, 4, 12, 30),
        datetime(2026, 2, 4, 12, 0),
        datetime(2026, 2, 4, 8, 5),
    ]
    assert items[0].name == "Lan Pham"
    assert svc.earliest_check_in(now=datetime(2026, 2, 4, 13, 0)).name == "Lan Pham"
