"""Scheduling services."""

from app.services.scheduling.status import ScheduleStatusFormatter
from app.services.scheduling.validator import ScheduleValidator

__all__ = [
    "ScheduleValidator",
    "ScheduleStatusFormatter",
]
