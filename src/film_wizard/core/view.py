"""Rendering of session state for display."""

from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..utils import PLACEHOLDER, build_image_url, join_names
from .models import FilterSelection, Genre, SessionState
from .models.movie import DEFAULT_TOP_CAST_SIZE

NO_DESCRIPTION = "No description available."
NO_SELECTION = "No movie selected yet. Choose filters and ask for a suggestion!"
NO_POSTER = "No Poster"
LOADING_TEXT = "Loading..."
ATTRIBUTION = "This product uses the TMDb API but is not endorsed or certified by TMDb."


class MovieView(BaseModel):
    """Display-ready values derived from a session."""

    loading: bool = Field(default=False, description="Request in flight")
    error: Optional[str] = Field(None, description="Error message")
    selected_genres: List[str] = Field(default_factory=list, description="Selected genre names")
    heading: Optional[str] = Field(None, description="Title with release year")
    genres_line: Optional[str] = Field(None, description="Movie genres")
    director: Optional[str] = Field(None, description="Director name")
    cast: List[str] = Field(default_factory=list, description="Top cast names")
    overview: Optional[str] = Field(None, description="Plot overview")
    rating_line: Optional[str] = Field(None, description="TMDb rating summary")
    poster_url: Optional[str] = Field(None, description="Poster image URL")

    model_config = ConfigDict(frozen=True)

    @property
    def has_movie(self) -> bool:
        return self.heading is not None


def build_view(
    state: SessionState,
    filters: FilterSelection,
    genres: Sequence[Genre],
    image_base_url: str,
    top_cast_size: int = DEFAULT_TOP_CAST_SIZE,
) -> MovieView:
    """Derive display values from the session state.

    Args:
        state: Movie, credits, error and loading state.
        filters: Current filter selection.
        genres: Genre catalog, used to name selected genres.
        image_base_url: Base URL for poster images.
        top_cast_size: Number of cast members to list.

    Returns:
        View values; movie fields are None when no movie is selected.
    """
    names = {genre.id: genre.name for genre in genres}
    selected = [names.get(genre_id, str(genre_id)) for genre_id in filters.genre_ids]

    movie = state.movie
    if movie is None:
        return MovieView(loading=state.loading, error=state.error, selected_genres=selected)

    title = movie.title or PLACEHOLDER
    heading = f"{title} ({movie.year})" if movie.year else title
    genre_names = movie.genre_names
    director = state.credits.director
    vote_average = PLACEHOLDER if movie.vote_average is None else f"{movie.vote_average:g}"

    return MovieView(
        loading=state.loading,
        error=state.error,
        selected_genres=selected,
        heading=heading,
        genres_line=join_names(genre_names) if genre_names is not None else PLACEHOLDER,
        director=director.name if director else None,
        cast=[p.name for p in state.credits.top_cast_of(top_cast_size) if p.name],
        overview=movie.overview or NO_DESCRIPTION,
        rating_line=f"TMDb Rating: {vote_average} ({movie.vote_count or 0} votes)",
        poster_url=build_image_url(image_base_url, movie.poster_path),
    )


def render_view(view: MovieView) -> str:
    """Render view values as terminal text."""
    lines = []
    if view.selected_genres:
        lines.append(f"Selected genres: {join_names(view.selected_genres)}")
    if view.loading:
        lines.append(LOADING_TEXT)
    if view.error:
        lines.append(f"Error: {view.error}")

    if view.has_movie:
        lines.append(str(view.heading))
        lines.append(f"Genres: {view.genres_line}")
        if view.director:
            lines.append(f"Director: {view.director}")
        if view.cast:
            lines.append(f"Cast: {join_names(view.cast)}")
        lines.append("")
        lines.append(str(view.overview))
        lines.append("")
        lines.append(str(view.rating_line))
        lines.append(f"Poster: {view.poster_url or NO_POSTER}")
    elif not view.loading:
        lines.append(NO_SELECTION)

    lines.append("")
    lines.append(ATTRIBUTION)
    return "\n".join(lines)
