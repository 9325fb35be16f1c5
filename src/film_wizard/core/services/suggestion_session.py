"""Suggestion session: filter state, result state and lifecycle guard."""

from typing import Any, List, Optional, Tuple

from ...infrastructure.logging import LoggerMixin
from ...utils import TMDbServiceError
from ..interfaces import IMovieSuggester, ITMDbService
from ..models import Credits, FilterSelection, Genre, RequestOutcome, SessionState


class SuggestionSession(LoggerMixin):
    """State holder for one interactive suggestion session.

    The session is open from construction until ``close()``. Every state
    write goes through ``_commit``; once closed, writes are dropped silently,
    so requests that resolve after teardown leave the state untouched.

    Concurrent ``suggest_movie`` calls are not prevented. Each of them
    commits its own result when it finishes, and the last one wins.
    """

    def __init__(self, tmdb_service: ITMDbService, suggester: IMovieSuggester) -> None:
        """Initialize suggestion session.

        Args:
            tmdb_service: TMDb service used for the genre catalog.
            suggester: Movie suggester running the request chain.
        """
        self._tmdb_service = tmdb_service
        self._suggester = suggester
        self._genres: Tuple[Genre, ...] = ()
        self._genres_loaded = False
        self._filters = FilterSelection()
        self._state = SessionState()
        self._closed = False

    @property
    def closed(self) -> bool:
        """Check if the session has been torn down."""
        return self._closed

    @property
    def genres(self) -> List[Genre]:
        """Genre catalog; empty until loaded."""
        return list(self._genres)

    @property
    def filters(self) -> FilterSelection:
        """Current filter selection."""
        return self._filters

    @property
    def state(self) -> SessionState:
        """Current movie, credits, error and loading state."""
        return self._state

    @property
    def outcome(self) -> RequestOutcome:
        """Current state as a tagged outcome."""
        return self._state.outcome

    async def load_genres(self) -> List[Genre]:
        """Fetch the genre catalog once.

        Failures are logged and leave the catalog empty.

        Returns:
            The genre catalog.
        """
        if self._genres_loaded:
            return self.genres

        try:
            genres = await self._tmdb_service.get_genres()
        except TMDbServiceError as e:
            self.logger.warning(f"Could not load genres: {e}")
            return self.genres

        if self._commit(genres=tuple(genres), genres_loaded=True):
            self.logger.debug(f"Loaded {len(genres)} genres")
        return self.genres

    async def suggest_movie(self) -> RequestOutcome:
        """Suggest a movie for the current filters and store the result.

        Returns:
            The outcome of this request, whether or not it was committed.
        """
        self._commit(state=SessionState(loading=True))

        outcome = await self._suggester.suggest_movie(self._filters)

        if outcome.is_success:
            new_state = SessionState(movie=outcome.movie, credits=outcome.credits)
        else:
            new_state = SessionState(error=outcome.error)
        self._commit(state=new_state)
        return outcome

    def toggle_genre(self, genre_id: int) -> FilterSelection:
        """Select the genre if absent, deselect it if present."""
        self._commit(filters=self._filters.toggle_genre(genre_id))
        return self._filters

    def update_filters(self, **fields: Any) -> FilterSelection:
        """Replace the named filter fields, keeping the others.

        Raises:
            ValueError: If a field is unknown or a value is invalid.
        """
        self._commit(filters=self._filters.update(**fields))
        return self._filters

    def set_year_start(self, year: Optional[Any]) -> FilterSelection:
        return self.update_filters(year_start=year)

    def set_year_end(self, year: Optional[Any]) -> FilterSelection:
        return self.update_filters(year_end=year)

    def set_min_rating(self, rating: Optional[Any]) -> FilterSelection:
        return self.update_filters(min_rating=rating)

    def set_max_runtime(self, minutes: Optional[Any]) -> FilterSelection:
        return self.update_filters(max_runtime_minutes=minutes)

    def reset(self) -> None:
        """Clear all filters together with the movie, credits and error."""
        self._commit(
            filters=FilterSelection(),
            state=self._state.model_copy(
                update={"movie": None, "credits": Credits.empty(), "error": None}
            ),
        )

    def close(self) -> None:
        """Tear the session down. Calling it again has no effect."""
        if not self._closed:
            self._closed = True
            self.logger.debug("Suggestion session closed")

    def _commit(self, **fields: Any) -> bool:
        """Apply state writes unless the session is closed.

        Returns:
            True if the writes were applied.
        """
        if self._closed:
            self.logger.debug(f"Dropped write to closed session: {sorted(fields)}")
            return False
        for name, value in fields.items():
            setattr(self, f"_{name}", value)
        return True

    async def __aenter__(self) -> "SuggestionSession":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        self.close()
