"""Nomination API schemas."""

from pydantic import BaseModel

from app.models.voting import Nomination


class NominationItem(BaseModel):
    """A nomination as held by the front end."""

    id: str
    candidate_id: str
    project_id: str
    reason: str
    nominated_by: str

    @classmethod
    def from_entity(cls, n: Nomination) -> "NominationItem":
        return cls(
            id=n.id,
            candidate_id=n.candidate_id,
            project_id=n.project_id,
            reason=n.reason,
            nominated_by=n.nominated_by,
        )

    def to_entity(self) -> Nomination:
        return Nomination(
            id=self.id,
            candidate_id=self.candidate_id,
            project_id=self.project_id,
            reason=self.reason,
            nominated_by=self.nominated_by,
        )


class NominationsResponse(BaseModel):
    """Nominations response."""

    items: list[NominationItem]


class CandidateItem(BaseModel):
    """Nominated candidate card."""

    id: str
    name: str
    initials: str
    title: str
    team: str
    project_name: str | None
    reason: str | None


class CandidatePoolResponse(BaseModel):
    """Candidate pool response."""

    items: list[CandidateItem]
