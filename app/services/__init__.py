"""Services package - service class exports."""

from app.services.dashboard.service import DashboardService
from app.services.nominations import NominationService
from app.services.scheduling import ScheduleStatusFormatter, ScheduleValidator
from app.services.voting import ResultEngine, build_ballots

__all__ = [
    "DashboardService",
    "NominationService",
    "ResultEngine",
    "ScheduleStatusFormatter",
    "ScheduleValidator",
    "build_ballots",
]
