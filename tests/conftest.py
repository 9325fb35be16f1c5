"""Pytest configuration and fixtures."""

import asyncio
import random
from typing import Any, Dict, List, Mapping, Optional

import pytest

from film_wizard.config import ConfigManager
from film_wizard.core.interfaces import ITMDbService
from film_wizard.core.models import Credits, Genre, MovieDetails
from film_wizard.core.services import MovieSuggester, SuggestionSession
from film_wizard.infrastructure import Container
from film_wizard.utils import TMDbServiceError


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without network access")
    config.addinivalue_line("markers", "integration: tests against the real TMDb API")


class FakeTMDbService(ITMDbService):
    """In-memory TMDb service.

    Set ``*_error`` attributes to a TMDbServiceError to make a call fail, and
    ``genres_gate`` or ``discover_gate`` to an asyncio.Event to hold that call
    until it is set.
    """

    def __init__(self) -> None:
        self.genres: List[Genre] = [
            Genre(id=28, name="Action"),
            Genre(id=35, name="Comedy"),
            Genre(id=878, name="Science Fiction"),
        ]
        self.results: List[Any] = [{"id": 42, "title": "Candidate", "poster_path": "/c.jpg"}]
        self.details: Dict[int, Dict[str, Any]] = {
            42: {
                "id": 42,
                "title": "The Answer",
                "release_date": "2012-05-04",
                "overview": "A movie about everything.",
                "poster_path": "/answer.jpg",
                "vote_average": 7.8,
                "vote_count": 1200,
                "runtime": 112,
                "genres": [{"id": 28, "name": "Action"}],
            }
        }
        self.credits: Dict[int, Dict[str, Any]] = {
            42: {
                "cast": [{"name": f"Actor {i}", "character": f"Role {i}"} for i in range(1, 8)],
                "crew": [
                    {"name": "Some Writer", "job": "Screenplay"},
                    {"name": "Jane Director", "job": "Director"},
                    {"name": "Second Director", "job": "Director"},
                ],
            }
        }
        self.genres_error: Optional[TMDbServiceError] = None
        self.discover_error: Optional[TMDbServiceError] = None
        self.details_error: Optional[TMDbServiceError] = None
        self.credits_error: Optional[TMDbServiceError] = None
        self.genres_gate: Optional[asyncio.Event] = None
        self.discover_gate: Optional[asyncio.Event] = None
        self.calls: List[str] = []
        self.discover_params: List[Dict[str, str]] = []
        self.closed = False

    async def get_genres(self) -> List[Genre]:
        self.calls.append("genres")
        if self.genres_gate is not None:
            await self.genres_gate.wait()
        if self.genres_error:
            raise self.genres_error
        return list(self.genres)

    async def discover_movies(self, params: Mapping[str, str]) -> List[Dict[str, Any]]:
        self.calls.append("discover")
        self.discover_params.append(dict(params))
        if self.discover_gate is not None:
            await self.discover_gate.wait()
        if self.discover_error:
            raise self.discover_error
        return list(self.results)

    async def get_movie_details(self, tmdb_id: int) -> MovieDetails:
        self.calls.append("details")
        if self.details_error:
            raise self.details_error
        return MovieDetails.from_payload(self.details[tmdb_id])

    async def get_movie_credits(self, tmdb_id: int) -> Credits:
        self.calls.append("credits")
        if self.credits_error:
            raise self.credits_error
        return Credits.from_payload(self.credits[tmdb_id])

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary configuration file."""
    config_content = """
tmdb:
  api_key: "test-tmdb-key"

suggestion:
  max_random_page: 10
  top_cast_size: 5

logging:
  level: "INFO"
"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def config_manager(temp_config_file, tmp_path):
    """Create a configuration manager with test config."""
    return ConfigManager(temp_config_file, env_file=tmp_path / ".env")


@pytest.fixture
def config(config_manager):
    """Load test configuration."""
    return config_manager.load_config()


@pytest.fixture
def container(config_manager):
    """Create a test container."""
    return Container(config_manager)


@pytest.fixture
def fake_tmdb():
    """In-memory TMDb service."""
    return FakeTMDbService()


@pytest.fixture
def suggester(config, fake_tmdb):
    """Movie suggester with a seeded random source."""
    return MovieSuggester(config, fake_tmdb, rng=random.Random(1234))


@pytest.fixture
def session(fake_tmdb, suggester):
    """Open suggestion session."""
    return SuggestionSession(fake_tmdb, suggester)
