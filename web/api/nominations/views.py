"""Nomination API views - thin layer over services."""

from collections.abc import Sequence

from app.container import container
from web.api.errors import NotFoundError, ValidationError, validate_required

from .schemas import CandidateItem, CandidatePoolResponse, NominationItem, NominationsResponse


def get_nominations() -> NominationsResponse:
    """Get the opening nominations of the week."""
    items = [NominationItem.from_entity(n) for n in container.nominations.seed()]
    return NominationsResponse(items=items)


def add_nomination(candidate_id: str, project_id: str, reason: str, nominated_by: str) -> NominationItem:
    """Validate and build a new nomination. The caller keeps it."""
    validate_required(
        candidate_id=candidate_id,
        project_id=project_id,
        reason=reason,
        nominated_by=nominated_by,
    )

    candidate = container.roster.get(candidate_id)
    if candidate is None:
        raise NotFoundError(f"Candidate not found: {candidate_id}")
    if candidate not in container.roster.nominees():
        raise ValidationError(f"{candidate.name} cannot be nominated ({candidate.role.value})")

    nominator = container.roster.get(nominated_by)
    if nominator is None:
        raise NotFoundError(f"Nominator not found: {nominated_by}")
    if not nominator.role.can_vote:
        raise ValidationError(f"{nominator.name} cannot nominate ({nominator.role.value})")

    if project_id not in container.projects:
        raise NotFoundError(f"Project not found: {project_id}")

    nomination = container.nominations.create(candidate_id, project_id, reason, nominated_by)
    return NominationItem.from_entity(nomination)


def get_candidate_pool(nominations: Sequence[NominationItem]) -> CandidatePoolResponse:
    """Get nominated candidates with their first nomination's project and reason."""
    entities = [n.to_entity() for n in nominations]

    items = []
    for person in container.nominations.candidate_pool(entities):
        nomination = container.nominations.first_for(entities, person.id)
        project = container.projects.get(nomination.project_id) if nomination else None
        items.append(
            CandidateItem(
                id=person.id,
                name=person.name,
                initials=person.initials,
                title=person.title,
                team=person.team.value,
                project_name=project.name if project else None,
                reason=nomination.reason if nomination else None,
            )
        )

    return CandidatePoolResponse(items=items)
