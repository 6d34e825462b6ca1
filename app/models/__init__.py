"""Models package - entities for all domains."""

from app.models.common import BaseEntity
from app.models.core import Person, Project, Role, Team
from app.models.scheduling import ScheduleStatus, ScheduleVerdict
from app.models.voting import (
    Ballot,
    ComputedResults,
    Nomination,
    ResultOptions,
    ResultRow,
)

__all__ = [
    # Common
    "BaseEntity",
    # Core
    "Person",
    "Project",
    "Role",
    "Team",
    # Voting
    "Nomination",
    "Ballot",
    "ResultOptions",
    "ResultRow",
    "ComputedResults",
    # Scheduling
    "ScheduleVerdict",
    "ScheduleStatus",
]
