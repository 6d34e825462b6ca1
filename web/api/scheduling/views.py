"""Scheduling API views - thin layer over services."""

from collections.abc import Iterable
from datetime import date

from app.container import container
from helpers.dates import toggle_date, upcoming_dates
from settings import SCHEDULE_HORIZON_DAYS
from web.api.errors import NotFoundError, validate_iso_dates
from web.api.voting.schemas import ResultItem, ResultsResponse

from .schemas import ScheduleOptionsResponse, ScheduleStatusResponse, ScheduleValidationResponse


def get_schedule_options(today: date | None = None, horizon: int = SCHEDULE_HORIZON_DAYS) -> ScheduleOptionsResponse:
    """Get the next `horizon` days, today excluded."""
    return ScheduleOptionsResponse(dates=upcoming_dates(today or date.today(), horizon))


def get_schedule_candidates(results: ResultsResponse) -> list[ResultItem]:
    """Rows with days to schedule, in rank order. Bonus-only rows count; unknown ids do not."""
    return [r for r in results.items if r.days > 0 and r.candidate_id in container.roster]


def toggle_schedule_date(selection: Iterable[str], value: str) -> list[str]:
    """Add or remove a date, returning the new selection sorted."""
    validate_iso_dates([value])
    return sorted(toggle_date(selection, value))


def validate_schedule(candidate_id: str, dates: Iterable[str]) -> ScheduleValidationResponse:
    """Validate a winner's dates: no Mondays, no consecutive days."""
    if candidate_id not in container.roster:
        raise NotFoundError(f"Candidate not found: {candidate_id}")
    values = sorted(set(validate_iso_dates(dates)))

    verdict = container.schedule_validator.validate(values)

    return ScheduleValidationResponse(
        candidate_id=candidate_id,
        dates=values,
        ok=verdict.ok,
        reason=verdict.reason,
    )


def get_schedule_status(selected_count: int, target_count: int, last_error: str | None = None) -> ScheduleStatusResponse:
    """Get the status line for a winner's selection."""
    status = container.schedule_status.status(selected_count, target_count, last_error)
    return ScheduleStatusResponse(message=status.message, is_error=status.is_error)
