"""Voting domain models - nominations, ballots and results."""

from app.models.voting.entities import (
    Ballot,
    ComputedResults,
    Nomination,
    ResultOptions,
    ResultRow,
)

__all__ = [
    "Nomination",
    "Ballot",
    "ResultOptions",
    "ResultRow",
    "ComputedResults",
]
