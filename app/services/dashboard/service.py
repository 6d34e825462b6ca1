"""Dashboard service."""

from collections.abc import Sequence

from loguru import logger

from app.models.voting import Ballot, Nomination, ResultOptions
from app.repositories.core.roster import RosterRepository
from helpers.random_picker import RandomPicker
from settings import EXTRA_DAY_POINTS, INNOVATION_POINTS_MAX


class DashboardService:
    """Weekly summary figures and the innovation-points board."""

    def __init__(self, roster_repo: RosterRepository, picker: RandomPicker):
        self._roster = roster_repo
        self._picker = picker

    def get_overview(
        self,
        nominations: Sequence[Nomination],
        ballots: Sequence[Ballot],
        options: ResultOptions,
    ) -> dict:
        """Voters, nominees and ballots cast for the current week."""
        candidates = {n.candidate_id for n in nominations}

        return {
            "voters_count": len(self._roster.voters()),
            "candidates_count": sum(1 for c in candidates if c in self._roster),
            "ballots_cast": sum(1 for b in ballots if b.picks),
            "ballots_total": len(ballots),
            "discard_one_random_ballot": options.discard_one_random_ballot,
            "enable_executive_bonus": options.enable_executive_bonus,
        }

    def draw_innovation_points(self) -> dict[str, int]:
        """One draw of 0..INNOVATION_POINTS_MAX per voter, in roster order.

        Callers keep the result for the whole session; every call draws again.
        """
        points = {p.id: self._picker.pick(0, INNOVATION_POINTS_MAX) for p in self._roster.voters()}
        logger.debug("Innovation points: {}", points)
        return points

    @staticmethod
    def earns_extra_day(points: int) -> bool:
        return points >= EXTRA_DAY_POINTS
