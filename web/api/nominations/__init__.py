"""Nominations API."""

from web.api.nominations.views import add_nomination, get_candidate_pool, get_nominations

__all__ = [
    "get_nominations",
    "add_nomination",
    "get_candidate_pool",
]
