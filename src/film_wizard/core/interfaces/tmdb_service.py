"""TMDb service interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping

from ..models import Credits, Genre, MovieDetails


class ITMDbService(ABC):
    """Interface for TMDb services."""

    @abstractmethod
    async def get_genres(self) -> List[Genre]:
        """Get the full movie genre catalog.

        Returns:
            All TMDb movie genres.

        Raises:
            TMDbServiceError: If request fails.
        """
        pass

    @abstractmethod
    async def discover_movies(self, params: Mapping[str, str]) -> List[Dict[str, Any]]:
        """Run a discovery query.

        Args:
            params: Discovery query parameters, without credentials.

        Returns:
            Raw movie summaries of the requested page.

        Raises:
            TMDbServiceError: If request fails.
        """
        pass

    @abstractmethod
    async def get_movie_details(self, tmdb_id: int) -> MovieDetails:
        """Get detailed movie information by TMDb ID.

        Raises:
            TMDbServiceError: If request fails.
        """
        pass

    @abstractmethod
    async def get_movie_credits(self, tmdb_id: int) -> Credits:
        """Get cast and crew of a movie by TMDb ID.

        Raises:
            TMDbServiceError: If request fails.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release network resources."""
        pass
