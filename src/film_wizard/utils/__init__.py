"""Utility functions and classes."""

from .exceptions import (
    ConfigurationError,
    FilmWizardError,
    InvalidDataError,
    NetworkError,
    NoResultsError,
    SuggestionError,
    TMDbServiceError,
)
from .text_utils import (
    PLACEHOLDER,
    build_image_url,
    extract_year,
    join_names,
    parse_optional_number,
)

__all__ = [
    "FilmWizardError",
    "ConfigurationError",
    "TMDbServiceError",
    "SuggestionError",
    "NetworkError",
    "NoResultsError",
    "InvalidDataError",
    "PLACEHOLDER",
    "build_image_url",
    "extract_year",
    "join_names",
    "parse_optional_number",
]
