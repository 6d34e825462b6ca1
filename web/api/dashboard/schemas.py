"""Dashboard API response schemas."""

from pydantic import BaseModel


class PersonItem(BaseModel):
    """Roster member."""

    id: str
    name: str
    initials: str
    role: str
    title: str
    team: str


class RosterResponse(BaseModel):
    """Roster response."""

    items: list[PersonItem]


class ProjectItem(BaseModel):
    """Project info."""

    id: str
    name: str
    description: str


class ProjectsResponse(BaseModel):
    """Project catalog response."""

    items: list[ProjectItem]


class OverviewResponse(BaseModel):
    """Weekly overview response."""

    voters_count: int
    candidates_count: int
    ballots_cast: int
    ballots_total: int
    discard_one_random_ballot: bool
    enable_executive_bonus: bool


class PointsItem(BaseModel):
    """Innovation points of one voter."""

    person: PersonItem
    points: int
    extra_day: bool


class InnovationPointsResponse(BaseModel):
    """Innovation-points board."""

    items: list[PointsItem]
