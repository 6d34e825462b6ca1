"""Person (roster member) model."""

from dataclasses import dataclass
from enum import Enum

from app.models.common import BaseEntity


class Role(str, Enum):
    MEMBER = "Member"
    MANAGER = "Manager"
    EXECUTIVE = "Executive"
    ADMIN = "SysAdmin"
    ASSISTANT = "Assistant"

    @property
    def can_vote(self) -> bool:
        return self in (Role.MANAGER, Role.EXECUTIVE)


class Team(str, Enum):
    DEVELOPMENT = "Development"
    OPERATIONS = "Operations"
    ANALYTICS = "Analytics"
    PO = "PO"
    GTI = "GTI"


@dataclass(frozen=True)
class Person(BaseEntity):
    """A roster member."""

    id: str
    name: str
    role: Role
    title: str
    team: Team

    @property
    def initials(self) -> str:
        """First letters of the first two name parts."""
        return "".join(part[0] for part in self.name.split()[:2])
