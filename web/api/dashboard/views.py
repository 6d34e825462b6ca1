"""Dashboard API views - thin layer over services."""

from collections.abc import Mapping, Sequence

from app.container import container
from app.models.core import Person
from app.models.voting import ResultOptions
from app.services.voting import build_ballots
from web.api.nominations.schemas import NominationItem

from .schemas import (
    InnovationPointsResponse,
    OverviewResponse,
    PersonItem,
    PointsItem,
    ProjectItem,
    ProjectsResponse,
    RosterResponse,
)


def person_item(p: Person) -> PersonItem:
    return PersonItem(
        id=p.id,
        name=p.name,
        initials=p.initials,
        role=p.role.value,
        title=p.title,
        team=p.team.value,
    )


def get_roster() -> RosterResponse:
    """Get all roster members."""
    return RosterResponse(items=[person_item(p) for p in container.roster.all()])


def get_projects() -> ProjectsResponse:
    """Get the project catalog."""
    items = [ProjectItem(id=p.id, name=p.name, description=p.description) for p in container.projects.all()]
    return ProjectsResponse(items=items)


def get_overview(
    nominations: Sequence[NominationItem],
    picks_by_voter: Mapping[str, Sequence[str | None]],
    discard_one_random_ballot: bool,
    enable_executive_bonus: bool,
) -> OverviewResponse:
    """Get weekly overview."""
    ballots = build_ballots(container.roster.voters(), picks_by_voter)
    options = ResultOptions(discard_one_random_ballot, enable_executive_bonus)
    data = container.dashboard.get_overview([n.to_entity() for n in nominations], ballots, options)

    return OverviewResponse(
        voters_count=data["voters_count"],
        candidates_count=data["candidates_count"],
        ballots_cast=data["ballots_cast"],
        ballots_total=data["ballots_total"],
        discard_one_random_ballot=data["discard_one_random_ballot"],
        enable_executive_bonus=data["enable_executive_bonus"],
    )


def get_innovation_points() -> InnovationPointsResponse:
    """Draw the innovation-points board. Call once per session and keep the response."""
    points = container.dashboard.draw_innovation_points()
    items = [
        PointsItem(
            person=person_item(p),
            points=points[p.id],
            extra_day=container.dashboard.earns_extra_day(points[p.id]),
        )
        for p in container.roster.voters()
    ]
    return InnovationPointsResponse(items=items)
