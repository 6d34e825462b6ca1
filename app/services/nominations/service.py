"""Nomination service."""

import uuid
from collections.abc import Iterable

from loguru import logger

from app.models.core import Person
from app.models.voting import Nomination
from app.repositories.core import RosterRepository
from app.repositories.voting import NominationRepository


class NominationService:
    """Builds nominations and the candidate pool. Never stores anything."""

    def __init__(
        self,
        roster_repo: RosterRepository,
        nomination_repo: NominationRepository,
    ):
        self._roster = roster_repo
        self._nominations = nomination_repo
        logger.debug("NominationService initialized")

    def seed(self) -> list[Nomination]:
        """Opening nominations for a new session."""
        return self._nominations.all()

    def create(self, candidate_id: str, project_id: str, reason: str, nominated_by: str) -> Nomination:
        """New nomination with a generated id. Inputs are assumed validated."""
        nomination = Nomination(
            id=uuid.uuid4().hex,
            candidate_id=candidate_id,
            project_id=project_id,
            reason=reason.strip(),
            nominated_by=nominated_by,
        )
        logger.info("Nomination {} -> {} ({})", nominated_by, candidate_id, project_id)
        return nomination

    def candidate_pool(self, nominations: Iterable[Nomination]) -> list[Person]:
        """Roster members named by any nomination, in roster order."""
        ids = {n.candidate_id for n in nominations}
        return self._roster.filter(lambda p: p.id in ids)

    def first_for(self, nominations: Iterable[Nomination], candidate_id: str) -> Nomination | None:
        return next((n for n in nominations if n.candidate_id == candidate_id), None)
