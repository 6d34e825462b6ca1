"""Dashboard API."""

from web.api.dashboard.views import get_innovation_points, get_overview, get_projects, get_roster

__all__ = [
    "get_overview",
    "get_innovation_points",
    "get_roster",
    "get_projects",
]
