"""Voting API views - thin layer over services."""

from collections.abc import Mapping, Sequence

from app.container import container
from app.models.voting import ResultOptions
from app.services.voting import build_ballots
from settings import BALLOT_SLOTS
from web.api.dashboard.views import person_item
from web.api.errors import UNKNOWN_USER
from web.api.nominations.schemas import NominationItem

from .schemas import ResultItem, ResultsResponse, VotersResponse


def _name(person_id: str) -> str:
    person = container.roster.get(person_id)
    return person.name if person else UNKNOWN_USER


def get_voters() -> VotersResponse:
    """Get members allowed to cast a ballot."""
    items = [person_item(p) for p in container.roster.voters()]
    return VotersResponse(items=items, slots=BALLOT_SLOTS)


def get_results(
    nominations: Sequence[NominationItem],
    picks_by_voter: Mapping[str, Sequence[str | None]],
    discard_one_random_ballot: bool,
    enable_executive_bonus: bool,
) -> ResultsResponse:
    """Tally the current board. Each call may discard a different ballot and draw new bonuses."""
    ballots = build_ballots(container.roster.voters(), picks_by_voter)
    options = ResultOptions(discard_one_random_ballot, enable_executive_bonus)

    data = container.result_engine.compute(
        [n.to_entity() for n in nominations],
        ballots,
        container.roster.all(),
        options,
    )

    items = [
        ResultItem(
            rank=i,
            candidate_id=r.candidate_id,
            name=_name(r.candidate_id),
            votes=r.votes,
            days=r.days,
        )
        for i, r in enumerate(data.rows, start=1)
    ]

    discarded = data.discarded_voter_id
    return ResultsResponse(
        items=items,
        discarded_voter_id=discarded,
        discarded_voter_name=_name(discarded) if discarded else None,
        discard_one_random_ballot=discard_one_random_ballot,
        enable_executive_bonus=enable_executive_bonus,
        total_votes=sum(r.votes for r in data.rows),
    )
