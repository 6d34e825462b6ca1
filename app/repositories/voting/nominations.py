"""Nomination repository - the opening nominations of the week."""

from collections.abc import Iterable

from app.models.voting import Nomination
from app.repositories.base import BaseRepository
from app.repositories.core.seed import SEED_NOMINATIONS


class NominationRepository(BaseRepository[Nomination]):
    """Seed nominations. New ones live in the caller's session state."""

    def __init__(self, nominations: Iterable[Nomination] = SEED_NOMINATIONS):
        super().__init__(nominations)
