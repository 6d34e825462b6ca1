"""Scheduling domain entities - validation verdicts and status lines."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass(frozen=True)
class ScheduleVerdict(BaseEntity):
    """Accepted (ok=True) or rejected with a reason."""

    ok: bool
    reason: str | None = None

    @classmethod
    def accepted(cls) -> "ScheduleVerdict":
        return cls(ok=True)

    @classmethod
    def rejected(cls, reason: str) -> "ScheduleVerdict":
        return cls(ok=False, reason=reason)


@dataclass(frozen=True)
class ScheduleStatus(BaseEntity):
    message: str
    is_error: bool
