"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple | list):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value


@dataclass(frozen=True)
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary with enums as their values."""
        return _plain(asdict(self))
