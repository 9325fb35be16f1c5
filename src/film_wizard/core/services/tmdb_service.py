"""TMDb service implementation."""

import asyncio
from typing import Any, Dict, List, Mapping, Optional

import aiohttp

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import TMDbServiceError
from ..interfaces import ITMDbService
from ..models import Credits, Genre, MovieDetails


class TMDbService(ITMDbService, LoggerMixin):
    """TMDb service implementation."""

    def __init__(self, config: Config) -> None:
        """Initialize TMDb service.

        Args:
            config: Application configuration.
        """
        self._config = config
        self._tmdb_config = config.tmdb
        self._session: Optional[aiohttp.ClientSession] = None

    async def get_genres(self) -> List[Genre]:
        """Get the full movie genre catalog.

        Returns:
            All TMDb movie genres.

        Raises:
            TMDbServiceError: If request fails.
        """
        data = await self._get_json("/genre/movie/list")
        genres = data.get("genres") or []
        return [
            Genre(id=g["id"], name=g["name"])
            for g in genres
            if isinstance(g, dict) and "id" in g and "name" in g
        ]

    async def discover_movies(self, params: Mapping[str, str]) -> List[Dict[str, Any]]:
        """Run a discovery query.

        Args:
            params: Discovery query parameters, without credentials.

        Returns:
            Raw movie summaries; empty if the payload has no result list.

        Raises:
            TMDbServiceError: If request fails.
        """
        data = await self._get_json("/discover/movie", params)
        results = data.get("results", [])
        if not isinstance(results, list):
            return []
        self.logger.debug(f"Discovery returned {len(results)} results for {dict(params)}")
        return results

    async def get_movie_details(self, tmdb_id: int) -> MovieDetails:
        """Get detailed movie information by TMDb ID.

        Args:
            tmdb_id: TMDb movie ID.

        Returns:
            Movie details.

        Raises:
            TMDbServiceError: If request fails or the payload is unusable.
        """
        data = await self._get_json(f"/movie/{tmdb_id}")
        try:
            return MovieDetails.from_payload(data)
        except ValueError as e:
            raise TMDbServiceError(f"Malformed details for TMDb ID {tmdb_id}: {e}") from e

    async def get_movie_credits(self, tmdb_id: int) -> Credits:
        """Get cast and crew of a movie by TMDb ID.

        Args:
            tmdb_id: TMDb movie ID.

        Returns:
            Movie credits.

        Raises:
            TMDbServiceError: If request fails or the payload is unusable.
        """
        data = await self._get_json(f"/movie/{tmdb_id}/credits")
        try:
            return Credits.from_payload(data)
        except ValueError as e:
            raise TMDbServiceError(f"Malformed credits for TMDb ID {tmdb_id}: {e}") from e

    async def _get_json(
        self, path: str, params: Optional[Mapping[str, str]] = None
    ) -> Dict[str, Any]:
        """Issue a GET request against the TMDb API.

        Args:
            path: API path starting with ``/``.
            params: Extra query parameters.

        Returns:
            Decoded JSON object.

        Raises:
            TMDbServiceError: On non-OK responses, transport errors and
                payloads that are not JSON objects.
        """
        url = f"{self._tmdb_config.base_url}{path}"
        query = {"api_key": self._tmdb_config.api_key, "language": self._tmdb_config.language}
        if params:
            query.update(params)

        self.logger.debug(f"GET {path}")
        try:
            async with self._get_session().get(url, params=query) as response:
                if not response.ok:
                    raise TMDbServiceError(
                        f"TMDb request {path} failed with status {response.status}",
                        status=response.status,
                    )
                data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise TMDbServiceError(f"TMDb request {path} failed: {e}") from e

        if not isinstance(data, dict):
            raise TMDbServiceError(f"TMDb request {path} returned an unexpected payload")
        return data

    def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session.

        Returns:
            HTTP session.
        """
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._tmdb_config.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "TMDbService":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
