"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

SHIFT_MINUTES = 9 * 60
ON_TIME_CUTOFF = time(9, 15, 0)

ON_TIME_SCORE = 100
LATE_SCORE = 60
ABSENT_SCORE = 0

DEFAULT_PUNCH_LIMIT = 50
MAX_PUNCH_LIMIT = 200
RECENT_ACTIVITY_LIMIT = 3

DEFAULT_HISTORY_DAYS = 30
MAX_HISTORY_DAYS = 90

LEADERBOARD_SIZE = 5
UNRESOLVED_NAME = "-"

BADGE_WINDOW_DAYS = 30
TIME_MASTER_MIN_RATE = 95
EARLY_BIRD_MIN_STREAK = 5
NIGHT_OWL_MIN_DAYS = 10
NIGHT_OWL_CHECKOUT = time(18, 0)
