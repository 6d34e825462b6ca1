"""Scheduling domain models."""

from app.models.scheduling.entities import ScheduleStatus, ScheduleVerdict

__all__ = [
    "ScheduleVerdict",
    "ScheduleStatus",
]
