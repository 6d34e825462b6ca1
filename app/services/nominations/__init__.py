"""Nomination services."""

from app.services.nominations.service import NominationService

__all__ = [
    "NominationService",
]
