"""Pure result formulas - no I/O, easily testable."""

from collections.abc import Iterable, Sequence

from app.models.core import Person, Role
from app.models.voting import Ballot


def find_executive(roster: Iterable[Person], fallback_title: str | None = None) -> Person | None:
    """First Executive by role; title match only if no role match exists."""
    people = list(roster)
    for person in people:
        if person.role is Role.EXECUTIVE:
            return person
    if fallback_title:
        for person in people:
            if person.title == fallback_title:
                return person
    return None


def tally(ballots: Iterable[Ballot]) -> dict[str, int]:
    """Votes per candidate, one per pick occurrence, in first-seen order."""
    counts: dict[str, int] = {}
    for ballot in ballots:
        for candidate_id in ballot.picks:
            counts[candidate_id] = counts.get(candidate_id, 0) + 1
    return counts


def rank(counts: dict[str, int]) -> list[tuple[str, int]]:
    """Sort by votes descending. Stable, so ties keep first-seen order."""
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)


def distinct_voters(ballots: Iterable[Ballot], candidate_id: str) -> set[str]:
    """Voter ids whose ballot names the candidate at least once."""
    return {b.voter_id for b in ballots if candidate_id in b.picks}


def base_days(voter_count: int, executive_voted: bool) -> int:
    """Home-office days earned by a top-ranked candidate.

    0-1 voters: 0, 2 voters: 1, 3+ voters: 2, or 3 when the Executive is among them.
    """
    if voter_count >= 3:
        return 3 if executive_voted else 2
    if voter_count == 2:
        return 1
    return 0


def total_picks(ballots: Sequence[Ballot]) -> int:
    return sum(len(b.picks) for b in ballots)
