"""Result engine - ranks nominees and awards home-office days.

Results are randomized whenever ``discard_one_random_ballot`` or
``enable_executive_bonus`` is set: two calls with identical inputs may differ.
With both options off the picker is never consulted and output is deterministic.
"""

from collections.abc import Iterable, Sequence

from loguru import logger

from app.models.core import Person
from app.models.voting import Ballot, ComputedResults, Nomination, ResultOptions, ResultRow
from helpers import formulas
from helpers.random_picker import RandomPicker
from settings import BONUS_MAX_DAYS, BONUS_MIN_DAYS, EXECUTIVE_TITLE, TOP_RANKS


class ResultEngine:
    """Stateless tally over ballot snapshots with an injected random source."""

    def __init__(self, picker: RandomPicker, executive_title: str | None = EXECUTIVE_TITLE):
        self._picker = picker
        self._executive_title = executive_title
        logger.debug("ResultEngine initialized")

    def compute(
        self,
        nominations: Sequence[Nomination],
        ballots: Sequence[Ballot],
        roster: Iterable[Person],
        options: ResultOptions,
    ) -> ComputedResults:
        """Rank candidates and award days.

        Nominations are accepted for parity with the caller's state but do not
        affect the tally: only picks count.
        """
        executive = formulas.find_executive(roster, self._executive_title)
        executive_id = executive.id if executive else None

        used = list(ballots)
        discarded_voter_id = None
        if options.discard_one_random_ballot and used:
            idx = self._picker.pick(0, len(used) - 1)
            discarded_voter_id = used.pop(idx).voter_id
            logger.info("Discarded ballot of {}", discarded_voter_id)

        ranked = formulas.rank(formulas.tally(used))

        days: dict[str, int] = {}
        for candidate_id, _ in ranked[:TOP_RANKS]:
            voters = formulas.distinct_voters(used, candidate_id)
            days[candidate_id] = formulas.base_days(len(voters), executive_id in voters)

        if options.enable_executive_bonus and executive_id:
            executive_ballot = next((b for b in used if b.voter_id == executive_id), None)
            if executive_ballot:
                for candidate_id in dict.fromkeys(executive_ballot.picks):
                    bonus = self._picker.pick(BONUS_MIN_DAYS, BONUS_MAX_DAYS)
                    days[candidate_id] = days.get(candidate_id, 0) + bonus
                    logger.debug("Executive bonus: {} +{}", candidate_id, bonus)

        rows = tuple(ResultRow(c, votes, days.get(c, 0)) for c, votes in ranked)
        logger.info(
            "Computed results: {} ballots, {} picks, {} candidates, {} nominations",
            len(used),
            formulas.total_picks(used),
            len(rows),
            len(nominations),
        )
        return ComputedResults(rows=rows, discarded_voter_id=discarded_voter_id)
