"""Ballot snapshots from the caller's mutable board."""

from collections.abc import Iterable, Mapping, Sequence

from app.models.core import Person
from app.models.voting import Ballot
from settings import BALLOT_SLOTS


def build_ballots(voters: Iterable[Person], picks_by_voter: Mapping[str, Sequence[str | None]]) -> tuple[Ballot, ...]:
    """One immutable ballot per voter, empty slots dropped, at most BALLOT_SLOTS picks."""
    ballots = []
    for voter in voters:
        picks = tuple(p for p in picks_by_voter.get(voter.id, ()) if p)[:BALLOT_SLOTS]
        ballots.append(Ballot(voter_id=voter.id, picks=picks))
    return tuple(ballots)
