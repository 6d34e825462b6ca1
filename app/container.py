"""Dependency Injection container - initialized at app startup."""

from app.repositories.core import ProjectRepository, RosterRepository
from app.repositories.voting import NominationRepository
from app.services.dashboard.service import DashboardService
from app.services.nominations import NominationService
from app.services.scheduling import ScheduleStatusFormatter, ScheduleValidator
from app.services.voting import ResultEngine
from helpers.random_picker import RandomPicker, default_picker
from settings import EXECUTIVE_TITLE, RANDOM_SEED


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, picker: RandomPicker | None = None) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self.roster = RosterRepository()
        self.projects = ProjectRepository()
        self._nomination_repo = NominationRepository()

        # Services (with injected repos)
        self.picker = picker or default_picker(RANDOM_SEED)
        self.result_engine = ResultEngine(picker=self.picker, executive_title=EXECUTIVE_TITLE)

        self.nominations = NominationService(
            roster_repo=self.roster,
            nomination_repo=self._nomination_repo,
        )

        self.schedule_validator = ScheduleValidator()
        self.schedule_status = ScheduleStatusFormatter()

        self.dashboard = DashboardService(roster_repo=self.roster, picker=self.picker)

        self._initialized = True

    def reset(self) -> None:
        """Drop all instances so the next init() rebuilds them."""
        self._initialized = False


# Global container instance
container = Container()
