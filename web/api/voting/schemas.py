"""Voting API response schemas."""

from pydantic import BaseModel

from web.api.dashboard.schemas import PersonItem


class VotersResponse(BaseModel):
    """Members allowed to vote."""

    items: list[PersonItem]
    slots: int


class ResultItem(BaseModel):
    """Ranked candidate."""

    rank: int
    candidate_id: str
    name: str
    votes: int
    days: int


class ResultsResponse(BaseModel):
    """Results response. Randomized whenever either option is on."""

    items: list[ResultItem]
    discarded_voter_id: str | None
    discarded_voter_name: str | None
    discard_one_random_ballot: bool
    enable_executive_bonus: bool
    total_votes: int
