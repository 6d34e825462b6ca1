"""Voting API."""

from web.api.voting.views import get_results, get_voters

__all__ = [
    "get_voters",
    "get_results",
]
