"""Core service implementations."""

from .movie_suggester import MovieSuggester
from .suggestion_session import SuggestionSession
from .tmdb_service import TMDbService

__all__ = [
    "TMDbService",
    "MovieSuggester",
    "SuggestionSession",
]
