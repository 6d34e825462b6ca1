"""Voting services."""

from app.services.voting.ballots import build_ballots
from app.services.voting.results import ResultEngine

__all__ = [
    "ResultEngine",
    "build_ballots",
]
