"""Scheduling API response schemas."""

from pydantic import BaseModel


class ScheduleOptionsResponse(BaseModel):
    """Selectable dates."""

    dates: list[str]


class ScheduleValidationResponse(BaseModel):
    """Validation verdict for a winner's dates."""

    candidate_id: str
    dates: list[str]
    ok: bool
    reason: str | None


class ScheduleStatusResponse(BaseModel):
    """Status line."""

    message: str
    is_error: bool
