"""Project model."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass(frozen=True)
class Project(BaseEntity):
    id: str
    name: str
    description: str = ""
