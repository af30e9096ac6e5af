# errors.py
from typing import Optional


class CineLightError(Exception):
    """Base class for every error the lookup client raises."""


class ValidationError(CineLightError):
    """User input was rejected before any request was made."""


class NotFoundError(CineLightError):
    """OMDb answered, but reported no results or no record."""

    def __init__(self, message: Optional[str] = None, default: str = "No results found.") -> None:
        self.message = message or default
        super().__init__(self.message)


class TransportError(CineLightError):
    """The request failed, timed out, or the response could not be understood."""
