"""Core repositories - roster and projects."""

from app.repositories.core.roster import ProjectRepository, RosterRepository

__all__ = [
    "RosterRepository",
    "ProjectRepository",
]
