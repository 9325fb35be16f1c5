"""Text processing utilities."""

from typing import Iterable, Optional, Union

PLACEHOLDER = "—"


def extract_year(release_date: Optional[str]) -> Optional[str]:
    """Extract the year part of a TMDb release date.

    Args:
        release_date: Date string in ``YYYY-MM-DD`` form, possibly empty.

    Returns:
        Four-character year string, or None if the date is missing.
    """
    if not release_date:
        return None
    return release_date[:4]


def join_names(names: Iterable[str], separator: str = ", ") -> str:
    """Join non-empty names into a display string."""
    return separator.join(name for name in names if name)


def build_image_url(base_url: str, path: Optional[str]) -> Optional[str]:
    """Build a full image URL from a TMDb image path.

    Args:
        base_url: Image base URL including the size segment.
        path: Image path as returned by TMDb (starts with ``/``).

    Returns:
        Full URL, or None when there is no path.
    """
    if not path:
        return None
    return f"{base_url.rstrip('/')}{path}"


def parse_optional_number(
    value: Union[str, int, float, None], as_int: bool = False
) -> Optional[Union[int, float]]:
    """Parse a user-entered number where blank means "not set".

    Args:
        value: Raw value, e.g. text typed into a numeric field.
        as_int: Parse as integer instead of float.

    Returns:
        Parsed number, or None for None and blank strings.

    Raises:
        ValueError: If the value is not a number.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    if as_int:
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"Expected a whole number, got {value}")
        return int(value)
    return float(value)
