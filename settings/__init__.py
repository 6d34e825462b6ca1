"""Application settings."""

import os
from pathlib import Path


def _flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).strip().lower() in ("1", "true", "yes", "on")


# Logging
LOG_DIR = Path(os.getenv("MERIT_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("MERIT_LOG_LEVEL", "INFO")
LOG_TO_FILE = _flag("MERIT_LOG_TO_FILE", False)

# Randomness (unset = OS entropy)
RANDOM_SEED = int(os.environ["MERIT_RANDOM_SEED"]) if os.getenv("MERIT_RANDOM_SEED") else None

# Voting
DISCARD_ONE_RANDOM_BALLOT = _flag("MERIT_DISCARD_ONE_RANDOM_BALLOT", True)
ENABLE_EXECUTIVE_BONUS = _flag("MERIT_ENABLE_EXECUTIVE_BONUS", True)
EXECUTIVE_TITLE = os.getenv("MERIT_EXECUTIVE_TITLE", "CIO")
BALLOT_SLOTS = 3
TOP_RANKS = 3
BONUS_MIN_DAYS = 1
BONUS_MAX_DAYS = 3

# Scheduling
SCHEDULE_HORIZON_DAYS = int(os.getenv("MERIT_SCHEDULE_HORIZON_DAYS", "21"))

# Innovation points (per voter, drawn once per session)
INNOVATION_POINTS_MAX = 3
EXTRA_DAY_POINTS = 4
