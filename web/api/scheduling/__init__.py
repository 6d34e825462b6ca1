"""Scheduling API."""

from web.api.scheduling.views import (
    get_schedule_candidates,
    get_schedule_options,
    get_schedule_status,
    toggle_schedule_date,
    validate_schedule,
)

__all__ = [
    "get_schedule_candidates",
    "get_schedule_options",
    "toggle_schedule_date",
    "validate_schedule",
    "get_schedule_status",
]
