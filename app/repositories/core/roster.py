"""Roster repository - people and projects."""

from collections.abc import Iterable

from app.models.core import Person, Project, Role
from app.repositories.base import BaseRepository
from app.repositories.core.seed import SEED_PEOPLE, SEED_PROJECTS


class RosterRepository(BaseRepository[Person]):
    """Roster members in seed order."""

    def __init__(self, people: Iterable[Person] = SEED_PEOPLE):
        super().__init__(people)

    def by_role(self, *roles: Role) -> list[Person]:
        return self.filter(lambda p: p.role in roles)

    def voters(self) -> list[Person]:
        """Members allowed to cast a ballot (managers and the executive)."""
        return self.filter(lambda p: p.role.can_vote)

    def nominees(self) -> list[Person]:
        """Members who may be nominated."""
        return self.by_role(Role.MEMBER)


class ProjectRepository(BaseRepository[Project]):
    """Project catalog."""

    def __init__(self, projects: Iterable[Project] = SEED_PROJECTS):
        super().__init__(projects)
