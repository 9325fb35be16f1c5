"""Test the movie suggestion request chain."""

import random
from unittest.mock import AsyncMock

import pytest

from film_wizard.core.models import FilterSelection, OutcomeStatus
from film_wizard.core.services import MovieSuggester
from film_wizard.utils import TMDbServiceError

EXAMPLE_FILTERS = FilterSelection(
    genre_ids=[28], year_start=2010, year_end=2015, min_rating=7, max_runtime_minutes=120
)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_example_filters_end_to_end(suggester, fake_tmdb):
    """Test the example case: one discovery result with working lookups."""
    outcome = await suggester.suggest_movie(EXAMPLE_FILTERS)

    assert outcome.status == OutcomeStatus.SUCCESS
    assert outcome.movie.id == 42
    assert outcome.movie.title == "The Answer"
    assert outcome.credits.director.name == "Jane Director"
    assert outcome.error is None
    assert outcome.degraded is False
    assert fake_tmdb.calls == ["discover", "details", "credits"]

    params = fake_tmdb.discover_params[0]
    assert params["with_genres"] == "28"
    assert params["primary_release_date.gte"] == "2010-01-01"
    assert params["primary_release_date.lte"] == "2015-12-31"
    assert params["vote_average.gte"] == "7"
    assert params["with_runtime.lte"] == "120"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_page_is_random_within_range(suggester, fake_tmdb):
    """Test that every request asks for a page between 1 and 10."""
    for _ in range(30):
        await suggester.suggest_movie(FilterSelection())

    pages = {int(params["page"]) for params in fake_tmdb.discover_params}
    assert pages <= set(range(1, 11))
    assert len(pages) > 1


@pytest.mark.unit
def test_choose_page_respects_configured_maximum(config, fake_tmdb):
    """Test that the page range follows configuration."""
    config.suggestion.max_random_page = 1
    suggester = MovieSuggester(config, fake_tmdb, rng=random.Random(0))

    assert {suggester.choose_page() for _ in range(10)} == {1}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_candidate_chosen_from_results(suggester, fake_tmdb):
    """Test that the suggested movie is one of the discovery results."""
    fake_tmdb.results = [{"id": i} for i in range(100, 120)]
    fake_tmdb.details_error = TMDbServiceError("not found", status=404)
    fake_tmdb.credits_error = TMDbServiceError("not found", status=404)

    chosen = set()
    for _ in range(20):
        outcome = await suggester.suggest_movie(FilterSelection())
        chosen.add(outcome.movie.id)

    assert chosen <= set(range(100, 120))
    assert len(chosen) > 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_empty_results_fail(suggester, fake_tmdb):
    """Test that an empty page ends in a no-results failure."""
    fake_tmdb.results = []

    outcome = await suggester.suggest_movie(EXAMPLE_FILTERS)

    assert outcome.status == OutcomeStatus.FAILURE
    assert outcome.error == "No movie found with selected filters."
    assert outcome.movie is None
    assert outcome.credits is None
    assert fake_tmdb.calls == ["discover"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_discovery_error_fails_without_retry(suggester, fake_tmdb):
    """Test that a failed discovery ends the attempt with a network error."""
    fake_tmdb.discover_error = TMDbServiceError("server error", status=500)

    outcome = await suggester.suggest_movie(EXAMPLE_FILTERS)

    assert outcome.is_failure
    assert outcome.error == "Failed to fetch data from TMDb."
    assert fake_tmdb.calls == ["discover"]


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize("candidate", [{"title": "No id"}, {"id": 0}, {"id": None}, None])
async def test_candidate_without_id_fails(suggester, fake_tmdb, candidate):
    """Test that a candidate without an identifier is invalid."""
    fake_tmdb.results = [candidate]

    outcome = await suggester.suggest_movie(FilterSelection())

    assert outcome.is_failure
    assert outcome.error == "Invalid movie data."
    assert fake_tmdb.calls == ["discover"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_details_failure_falls_back_to_candidate(suggester, fake_tmdb):
    """Test that a failed details lookup shows the discovery summary."""
    fake_tmdb.details_error = TMDbServiceError("not found", status=404)

    outcome = await suggester.suggest_movie(FilterSelection())

    assert outcome.is_success
    assert outcome.degraded is True
    assert outcome.movie.id == 42
    assert outcome.movie.title == "Candidate"
    assert outcome.movie.poster_path == "/c.jpg"
    assert outcome.credits.director.name == "Jane Director"
    assert fake_tmdb.calls == ["discover", "details", "credits"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_details_fallback_accepts_odd_summary_fields(suggester, fake_tmdb):
    """Test that a summary with badly typed fields still yields a suggestion."""
    fake_tmdb.results = [{"id": 42, "title": "Candidate", "vote_count": "n/a"}]
    fake_tmdb.details_error = TMDbServiceError("boom", status=500)

    outcome = await suggester.suggest_movie(FilterSelection())

    assert outcome.is_success
    assert outcome.degraded is True
    assert outcome.movie.id == 42
    assert outcome.movie.title == "Candidate"
    assert outcome.movie.vote_count is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_details_with_odd_fields_are_kept(suggester, fake_tmdb):
    """Test that full details with a badly typed field are not replaced."""
    fake_tmdb.details[42]["runtime"] = "unknown"

    outcome = await suggester.suggest_movie(FilterSelection())

    assert outcome.is_success
    assert outcome.degraded is False
    assert outcome.movie.title == "The Answer"
    assert outcome.movie.runtime is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_credits_failure_falls_back_to_empty(suggester, fake_tmdb):
    """Test that failed credits leave cast and crew empty."""
    fake_tmdb.credits_error = TMDbServiceError("boom")

    outcome = await suggester.suggest_movie(FilterSelection())

    assert outcome.is_success
    assert outcome.degraded is True
    assert outcome.movie.title == "The Answer"
    assert outcome.credits.is_empty


@pytest.mark.unit
@pytest.mark.asyncio
async def test_details_and_credits_failure(suggester, fake_tmdb):
    """Test that discovery alone is enough for a suggestion."""
    fake_tmdb.details_error = TMDbServiceError("boom", status=503)
    fake_tmdb.credits_error = TMDbServiceError("boom", status=503)

    outcome = await suggester.suggest_movie(FilterSelection())

    assert outcome.is_success
    assert outcome.movie.title == "Candidate"
    assert outcome.credits.cast == []
    assert outcome.credits.crew == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unexpected_error_becomes_failure(config, fake_tmdb):
    """Test that unexpected exceptions are reported with their message."""
    fake_tmdb.discover_movies = AsyncMock(side_effect=RuntimeError("kaboom"))
    suggester = MovieSuggester(config, fake_tmdb)

    outcome = await suggester.suggest_movie(FilterSelection())

    assert outcome.is_failure
    assert outcome.error == "kaboom"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unexpected_error_without_message(config, fake_tmdb):
    """Test the generic message for exceptions without text."""
    fake_tmdb.discover_movies = AsyncMock(side_effect=RuntimeError())
    suggester = MovieSuggester(config, fake_tmdb)

    outcome = await suggester.suggest_movie(FilterSelection())

    assert outcome.error == "Unknown error occurred."
