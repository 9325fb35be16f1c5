"""Filter selection model."""

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...utils import parse_optional_number


class FilterSelection(BaseModel):
    """User-selected discovery filters.

    Instances are immutable; every edit returns a new selection. Genre ids
    keep the order in which they were selected.
    """

    genre_ids: Tuple[int, ...] = Field(default=(), description="Selected genre IDs")
    year_start: Optional[int] = Field(None, description="Earliest release year")
    year_end: Optional[int] = Field(None, description="Latest release year")
    min_rating: Optional[float] = Field(None, description="Minimum TMDb vote average")
    max_runtime_minutes: Optional[int] = Field(None, description="Maximum runtime in minutes")

    model_config = ConfigDict(frozen=True)

    @field_validator("genre_ids", mode="before")
    @classmethod
    def dedupe_genre_ids(cls, v: Any) -> Tuple[int, ...]:
        """Drop repeated ids while keeping selection order."""
        if v is None:
            return ()
        return tuple(dict.fromkeys(int(genre_id) for genre_id in v))

    @field_validator("year_start", "year_end", "max_runtime_minutes", mode="before")
    @classmethod
    def parse_int_field(cls, v: Any) -> Optional[int]:
        """Treat blank input as unset."""
        return parse_optional_number(v, as_int=True)  # type: ignore[return-value]

    @field_validator("min_rating", mode="before")
    @classmethod
    def parse_float_field(cls, v: Any) -> Optional[float]:
        """Treat blank input as unset."""
        return parse_optional_number(v)  # type: ignore[return-value]

    @property
    def is_empty(self) -> bool:
        """Check if no filter is set."""
        return self == FilterSelection()

    def has_genre(self, genre_id: int) -> bool:
        """Check if a genre is selected."""
        return genre_id in self.genre_ids

    def toggle_genre(self, genre_id: int) -> "FilterSelection":
        """Select the genre if absent, deselect it if present."""
        if genre_id in self.genre_ids:
            genre_ids = tuple(g for g in self.genre_ids if g != genre_id)
        else:
            genre_ids = self.genre_ids + (genre_id,)
        return self.model_copy(update={"genre_ids": genre_ids})

    def update(self, **fields: Any) -> "FilterSelection":
        """Replace the given fields and keep the rest.

        Values are validated the same way as on construction.

        Raises:
            ValueError: If a field name is unknown or a value is invalid.
        """
        unknown = set(fields) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown filter fields: {sorted(unknown)}")
        return type(self).model_validate({**self.model_dump(), **fields})
