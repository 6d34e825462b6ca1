"""Voting repositories."""

from app.repositories.voting.nominations import NominationRepository

__all__ = [
    "NominationRepository",
]
