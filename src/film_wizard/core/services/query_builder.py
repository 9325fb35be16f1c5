"""Discovery query construction."""

from typing import Dict, Mapping

from ..models import FilterSelection

GENRES_PARAM = "with_genres"
RELEASE_FROM_PARAM = "primary_release_date.gte"
RELEASE_TO_PARAM = "primary_release_date.lte"
MIN_RATING_PARAM = "vote_average.gte"
MAX_RUNTIME_PARAM = "with_runtime.lte"
PAGE_PARAM = "page"


def _format_number(value: float) -> str:
    return f"{value:g}"


def build_discover_params(
    filters: FilterSelection, include_adult: bool = False
) -> Dict[str, str]:
    """Build discovery query parameters from filters.

    A filter clause is added only when its filter is set. Credentials and
    language are added by the TMDb service.

    Args:
        filters: Current filter selection.
        include_adult: Include adult titles.

    Returns:
        Ordered query parameters.
    """
    params = {
        "sort_by": "popularity.desc",
        "include_adult": "true" if include_adult else "false",
        "include_video": "false",
    }

    if filters.genre_ids:
        params[GENRES_PARAM] = ",".join(str(genre_id) for genre_id in filters.genre_ids)
    if filters.year_start is not None:
        params[RELEASE_FROM_PARAM] = f"{filters.year_start}-01-01"
    if filters.year_end is not None:
        params[RELEASE_TO_PARAM] = f"{filters.year_end}-12-31"
    if filters.min_rating is not None:
        params[MIN_RATING_PARAM] = _format_number(filters.min_rating)
    if filters.max_runtime_minutes is not None:
        params[MAX_RUNTIME_PARAM] = str(filters.max_runtime_minutes)

    return params


def with_page(params: Mapping[str, str], page: int) -> Dict[str, str]:
    """Return a copy of the parameters requesting the given page."""
    if page < 1:
        raise ValueError(f"Page numbers start at 1, got {page}")
    return {**params, PAGE_PARAM: str(page)}
