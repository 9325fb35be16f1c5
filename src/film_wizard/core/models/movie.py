"""Movie-related data models."""

from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from ...utils import extract_year
from .genre import Genre

DIRECTOR_JOB = "Director"
DEFAULT_TOP_CAST_SIZE = 5


def _none_if_invalid(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    """Validate a field, replacing values of an unexpected type with None."""
    try:
        return handler(value)
    except ValidationError:
        return None


class MovieDetails(BaseModel):
    """Movie data as returned by TMDb.

    Both full detail payloads and discovery summaries parse into this model.
    Unknown keys are kept so the payload passes through untouched.
    Known fields holding a value of an unexpected type read as None, so
    parsing never rejects a payload.
    """

    id: Optional[int] = Field(None, description="TMDb ID")
    title: Optional[str] = Field(None, description="Movie title")
    release_date: Optional[str] = Field(None, description="Release date (YYYY-MM-DD)")
    overview: Optional[str] = Field(None, description="Movie overview/plot")
    poster_path: Optional[str] = Field(None, description="Poster image path")
    vote_average: Optional[float] = Field(None, description="Average rating")
    vote_count: Optional[int] = Field(None, description="Number of votes")
    runtime: Optional[int] = Field(None, description="Runtime in minutes")
    genres: Optional[List[Genre]] = Field(
        None, description="Genres; only present on full detail payloads"
    )

    model_config = ConfigDict(extra="allow")

    @field_validator(
        "id",
        "title",
        "release_date",
        "overview",
        "poster_path",
        "vote_average",
        "vote_count",
        "runtime",
        "genres",
        mode="wrap",
    )
    @classmethod
    def lenient_fields(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        """Read values of an unexpected type as None."""
        return _none_if_invalid(v, handler)

    @property
    def year(self) -> Optional[str]:
        """Release year taken from the release date."""
        return extract_year(self.release_date)

    @property
    def genre_names(self) -> Optional[List[str]]:
        """Genre names, or None when the payload has no genre list."""
        if self.genres is None:
            return None
        return [genre.name for genre in self.genres]

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "MovieDetails":
        """Parse a TMDb movie payload."""
        return cls.model_validate(data)


class Person(BaseModel):
    """A cast or crew member."""

    name: Optional[str] = Field(None, description="Person name")
    job: Optional[str] = Field(None, description="Crew job title")
    character: Optional[str] = Field(None, description="Character played")

    model_config = ConfigDict(extra="allow")

    @field_validator("name", "job", "character", mode="wrap")
    @classmethod
    def lenient_fields(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        """Read values of an unexpected type as None."""
        return _none_if_invalid(v, handler)


class Credits(BaseModel):
    """Cast and crew of a movie."""

    cast: List[Person] = Field(default_factory=list, description="Cast in billing order")
    crew: List[Person] = Field(default_factory=list, description="Crew members")

    @field_validator("cast", "crew", mode="before")
    @classmethod
    def default_empty(cls, v: Any) -> Any:
        """Missing or null lists become empty; entries that are not objects are skipped."""
        if not isinstance(v, list):
            return []
        return [p for p in v if isinstance(p, (dict, Person))]

    @classmethod
    def empty(cls) -> "Credits":
        """Credits with no cast and no crew."""
        return cls()

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "Credits":
        """Parse a TMDb credits payload."""
        return cls.model_validate(
            {"cast": data.get("cast"), "crew": data.get("crew")}
        )

    @property
    def director(self) -> Optional[Person]:
        """First crew member credited as director."""
        return next((person for person in self.crew if person.job == DIRECTOR_JOB), None)

    @property
    def top_cast(self) -> List[Person]:
        """Leading cast members."""
        return self.top_cast_of(DEFAULT_TOP_CAST_SIZE)

    def top_cast_of(self, size: int) -> List[Person]:
        """First ``size`` cast members."""
        return self.cast[:size]

    @property
    def is_empty(self) -> bool:
        """Check if there is neither cast nor crew."""
        return not self.cast and not self.crew
