"""Schedule validator - no Mondays, no consecutive days."""

from collections.abc import Iterable

from loguru import logger

from app.models.scheduling import ScheduleVerdict
from helpers.dates import has_consecutive, is_monday, parse_iso

EMPTY_SELECTION = "select at least one date"
MONDAY_NOT_ALLOWED = "Mondays are not allowed"
CONSECUTIVE_NOT_ALLOWED = "consecutive days are not allowed"


class ScheduleValidator:
    """Checks a set of ISO dates. First failing rule wins."""

    def validate(self, dates: Iterable[str]) -> ScheduleVerdict:
        """Raises ValueError for a malformed date string."""
        parsed = {parse_iso(value) for value in dates}

        if not parsed:
            verdict = ScheduleVerdict.rejected(EMPTY_SELECTION)
        elif any(is_monday(day) for day in parsed):
            verdict = ScheduleVerdict.rejected(MONDAY_NOT_ALLOWED)
        elif has_consecutive(parsed):
            verdict = ScheduleVerdict.rejected(CONSECUTIVE_NOT_ALLOWED)
        else:
            verdict = ScheduleVerdict.accepted()

        logger.debug("Validated {} dates: {}", len(parsed), verdict.reason or "ok")
        return verdict
