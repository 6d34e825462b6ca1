"""Voting domain entities - nominations, ballots and computed results."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity


@dataclass(frozen=True)
class Nomination(BaseEntity):
    """A candidate nominated for their work on a project."""

    id: str
    candidate_id: str
    project_id: str
    reason: str
    nominated_by: str


@dataclass(frozen=True)
class Ballot(BaseEntity):
    """Snapshot of one voter's ranked picks."""

    voter_id: str
    picks: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResultOptions(BaseEntity):
    discard_one_random_ballot: bool = False
    enable_executive_bonus: bool = False


@dataclass(frozen=True)
class ResultRow(BaseEntity):
    """Tally and awarded home-office days for a candidate."""

    candidate_id: str
    votes: int
    days: int = 0


@dataclass(frozen=True)
class ComputedResults(BaseEntity):
    """Ranked rows plus the voter whose ballot was discarded, if any."""

    rows: tuple[ResultRow, ...] = field(default_factory=tuple)
    discarded_voter_id: str | None = None
