"""Schedule status line shown next to a winner's date picker."""

from app.models.scheduling import ScheduleStatus

READY = "ready to schedule"
PENDING = "select the required number of dates"


class ScheduleStatusFormatter:
    def status(self, selected_count: int, target_count: int, last_validation_error: str | None) -> ScheduleStatus:
        if last_validation_error:
            return ScheduleStatus(message=last_validation_error, is_error=True)
        if selected_count == target_count:
            return ScheduleStatus(message=READY, is_error=False)
        return ScheduleStatus(message=PENDING, is_error=False)
