"""Core domain models - people and projects."""

from app.models.core.person import Person, Role, Team
from app.models.core.project import Project

__all__ = [
    "Person",
    "Role",
    "Team",
    "Project",
]
