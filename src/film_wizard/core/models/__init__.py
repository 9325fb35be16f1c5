"""Core data models."""

from .filters import FilterSelection
from .genre import Genre
from .movie import Credits, MovieDetails, Person
from .outcome import OutcomeStatus, RequestOutcome, SessionState

__all__ = [
    "Genre",
    "FilterSelection",
    "MovieDetails",
    "Person",
    "Credits",
    "OutcomeStatus",
    "RequestOutcome",
    "SessionState",
]
