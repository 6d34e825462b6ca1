"""Repositories package - in-memory data access layer."""

from app.repositories.base import BaseRepository
from app.repositories.core import ProjectRepository, RosterRepository
from app.repositories.voting import NominationRepository

__all__ = [
    # Base
    "BaseRepository",
    # Core
    "RosterRepository",
    "ProjectRepository",
    # Voting
    "NominationRepository",
]
