"""Custom exceptions for the application."""

from typing import Optional


class FilmWizardError(Exception):
    """Base exception for all application errors."""

    pass


class ConfigurationError(FilmWizardError):
    """Configuration-related errors."""

    pass


class TMDbServiceError(FilmWizardError):
    """TMDb transport errors.

    ``status`` holds the HTTP status code when the server answered with a
    non-OK response, and is None for connection-level failures.
    """

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class SuggestionError(FilmWizardError):
    """Base class for failures that end a suggestion attempt."""

    default_message = "Unknown error occurred."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class NetworkError(SuggestionError):
    """Discovery request did not return an OK response."""

    default_message = "Failed to fetch data from TMDb."


class NoResultsError(SuggestionError):
    """Discovery returned no movies for the current filters."""

    default_message = "No movie found with selected filters."


class InvalidDataError(SuggestionError):
    """The chosen candidate has no TMDb identifier."""

    default_message = "Invalid movie data."
