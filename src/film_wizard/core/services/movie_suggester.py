"""Movie suggester service implementation."""

import random
from typing import Any, Dict, List, Optional, Tuple

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import (
    InvalidDataError,
    NetworkError,
    NoResultsError,
    SuggestionError,
    TMDbServiceError,
)
from ..interfaces import IMovieSuggester, ITMDbService
from ..models import Credits, FilterSelection, MovieDetails, RequestOutcome
from .query_builder import build_discover_params, with_page

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred."


class MovieSuggester(IMovieSuggester, LoggerMixin):
    """Movie suggester service implementation.

    One suggestion runs these steps in order, each waiting for the previous:
        params = build_discover_params(filters) + random page
        results = discover(params)          -> NetworkError / NoResultsError
        candidate = random.choice(results)  -> InvalidDataError
        details = movie(candidate.id)       or candidate on failure
        credits = credits(candidate.id)     or empty on failure

    The first raised SuggestionError ends the attempt as a failure outcome.
    There is no retry and no reentrancy guard.
    """

    def __init__(
        self,
        config: Config,
        tmdb_service: ITMDbService,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize movie suggester.

        Args:
            config: Application configuration.
            tmdb_service: TMDb service.
            rng: Random source for page and candidate choice.
        """
        self._config = config
        self._suggestion_config = config.suggestion
        self._tmdb_service = tmdb_service
        self._rng = rng or random.Random()

    async def suggest_movie(self, filters: FilterSelection) -> RequestOutcome:
        """Suggest one random movie matching the filters.

        Args:
            filters: Discovery filters.

        Returns:
            Success outcome (possibly degraded) or failure outcome.
        """
        try:
            results = await self._discover(filters)
            candidate_id, candidate = self._pick_candidate(results)
            details, details_ok = await self._fetch_details(candidate_id, candidate)
            credits, credits_ok = await self._fetch_credits(candidate_id)
        except SuggestionError as e:
            self.logger.info(f"Suggestion failed: {e}")
            return RequestOutcome.failure(str(e))
        except Exception as e:
            self.logger.exception("Unexpected error while suggesting a movie")
            return RequestOutcome.failure(str(e) or UNKNOWN_ERROR_MESSAGE)

        self.logger.info(f"Suggested movie {candidate_id}: {details.title}")
        return RequestOutcome.success(
            details, credits, degraded=not (details_ok and credits_ok)
        )

    def choose_page(self) -> int:
        """Pick a uniformly random discovery page."""
        return self._rng.randint(1, self._suggestion_config.max_random_page)

    async def _discover(self, filters: FilterSelection) -> List[Any]:
        """Run the discovery query for a random page.

        Raises:
            NetworkError: If the request fails.
            NoResultsError: If the page holds no movies.
        """
        params = build_discover_params(filters, self._suggestion_config.include_adult)
        params = with_page(params, self.choose_page())

        try:
            results = await self._tmdb_service.discover_movies(params)
        except TMDbServiceError as e:
            self.logger.error(f"Discovery request failed: {e}")
            raise NetworkError() from e

        if not results:
            raise NoResultsError()
        return results

    def _pick_candidate(self, results: List[Any]) -> Tuple[int, Dict[str, Any]]:
        """Choose one discovery result at random.

        Raises:
            InvalidDataError: If the chosen result has no usable ID.
        """
        candidate = self._rng.choice(results)
        if not isinstance(candidate, dict) or not candidate.get("id"):
            raise InvalidDataError()
        try:
            return int(candidate["id"]), candidate
        except (TypeError, ValueError) as e:
            raise InvalidDataError() from e

    async def _fetch_details(
        self, tmdb_id: int, candidate: Dict[str, Any]
    ) -> Tuple[MovieDetails, bool]:
        """Fetch full details, falling back to the candidate summary.

        Returns:
            Details and whether they came from the details endpoint.

        Summary fields of an unexpected type read as None; only the id
        is required, and it has already been checked.
        """
        try:
            return await self._tmdb_service.get_movie_details(tmdb_id), True
        except TMDbServiceError as e:
            self.logger.warning(f"Using discovery summary for movie {tmdb_id}: {e}")

        return MovieDetails.from_payload({**candidate, "id": tmdb_id}), False

    async def _fetch_credits(self, tmdb_id: int) -> Tuple[Credits, bool]:
        """Fetch credits, falling back to empty cast and crew.

        Returns:
            Credits and whether they came from the credits endpoint.
        """
        try:
            return await self._tmdb_service.get_movie_credits(tmdb_id), True
        except TMDbServiceError as e:
            self.logger.warning(f"No credits for movie {tmdb_id}: {e}")
            return Credits.empty(), False
