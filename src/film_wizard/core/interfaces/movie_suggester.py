"""Movie suggester interface."""

from abc import ABC, abstractmethod

from ..models import FilterSelection, RequestOutcome


class IMovieSuggester(ABC):
    """Interface for random movie suggestion."""

    @abstractmethod
    async def suggest_movie(self, filters: FilterSelection) -> RequestOutcome:
        """Suggest one random movie matching the filters.

        Args:
            filters: Discovery filters.

        Returns:
            A success or failure outcome. Failures are reported in the
            outcome, never raised.
        """
        pass
