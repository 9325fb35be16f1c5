"""Core interfaces for dependency injection."""

from .movie_suggester import IMovieSuggester
from .tmdb_service import ITMDbService

__all__ = [
    "ITMDbService",
    "IMovieSuggester",
]
