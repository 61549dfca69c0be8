from __future__ import annotations


class GeneratorError(Exception):
    """Base class for team generator failures."""


class FetchFailure(GeneratorError):
    """Network error, timeout, non-success status or undecodable payload."""


class NotFound(FetchFailure):
    """The data source has no record for the requested identifier."""


class EmptyRosterError(GeneratorError):
    """Export was requested before any team was generated."""

    def __init__(self, message: str = "Generate a team first") -> None:
        super().__init__(message)
