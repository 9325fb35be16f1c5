"""Genre data model."""

from pydantic import BaseModel, ConfigDict, Field


class Genre(BaseModel):
    """A TMDb movie genre."""

    id: int = Field(..., description="TMDb genre ID")
    name: str = Field(..., description="Genre display name")

    model_config = ConfigDict(frozen=True)
