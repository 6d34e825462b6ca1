"""API errors and validation helpers."""

from collections.abc import Iterable

from helpers.dates import parse_iso


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


# Shown in place of a name when an id no longer resolves
UNKNOWN_USER = "Unknown user"


def validate_required(**fields: str | None) -> None:
    """Every field present and not blank."""
    if any(not (v or "").strip() for v in fields.values()):
        raise ValidationError("all fields are required")


def validate_iso_dates(dates: Iterable[str]) -> list[str]:
    """Dates as a list, each a valid YYYY-MM-DD string."""
    values = list(dates)
    for value in values:
        try:
            parse_iso(value)
        except (TypeError, ValueError, AttributeError):
            raise ValidationError(f"Invalid date: {value!r}. Expected YYYY-MM-DD") from None
    return values
