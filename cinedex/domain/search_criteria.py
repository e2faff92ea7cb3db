"""Immutable search filter assembled by the search form for one search request.

A :class:`SearchCriteria` is built fresh each time the user presses *Search*,
handed to the search listener, and then discarded. Construction validates the
year range, the rating floor and the sort key so downstream code can rely on
a consistent filter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .entities import MAX_RATING, MIN_RATING, ContentType
from .errors import ValidationError
from .genres import Genre

SORT_FIELDS: Tuple[str, ...] = ("relevance", "title", "year", "rating")

# Sort labels shown by the search form -> (sort field, descending)
SORT_OPTIONS: Dict[str, Tuple[str, bool]] = {
    "Relevance": ("relevance", False),
    "Title (A-Z)": ("title", False),
    "Title (Z-A)": ("title", True),
    "Year (Newest)": ("year", True),
    "Year (Oldest)": ("year", False),
    "Rating (High to Low)": ("rating", True),
}
DEFAULT_SORT_LABEL = "Relevance"


def sort_for_label(label: str) -> Tuple[str, bool]:
    """Return ``(field, descending)`` for a sort label shown in the form."""
    try:
        return SORT_OPTIONS[label]
    except KeyError as exc:
        raise ValidationError(f"Unknown sort option: {label!r}") from exc


@dataclass(frozen=True)
class SearchCriteria:
    """Filter and ordering for a catalog search."""

    sort_field: str = "relevance"
    sort_descending: bool = False
    query: str = ""
    keywords: str = ""
    year_from: Optional[int] = None
    year_to: Optional[int] = None
    min_rating: Optional[float] = None
    genres: Tuple[Genre, ...] = field(default_factory=tuple)
    include_movies: bool = True
    include_series: bool = True

    def __post_init__(self) -> None:
        if self.sort_field not in SORT_FIELDS:
            raise ValidationError(f"Unknown sort field: {self.sort_field!r}")
        if (
            self.year_from is not None
            and self.year_to is not None
            and self.year_from > self.year_to
        ):
            raise ValidationError("'Year from' cannot be after 'Year to'.")
        if self.min_rating is not None and not MIN_RATING <= self.min_rating <= MAX_RATING:
            raise ValidationError("Rating must be between 0.0 and 10.0")
        if not (self.include_movies or self.include_series):
            raise ValidationError("Select at least one content type (Movies or Series).")
        # callers may pass a list; keep the value object hashable
        object.__setattr__(self, "genres", tuple(self.genres))

    @property
    def sort_order(self) -> str:
        return "desc" if self.sort_descending else "asc"

    @property
    def content_type(self) -> Optional[ContentType]:
        """Single content type to search, or ``None`` for movies and series."""
        if self.include_movies and self.include_series:
            return None
        return ContentType.MOVIE if self.include_movies else ContentType.SERIES

    @property
    def keyword_terms(self) -> Tuple[str, ...]:
        return tuple(term.lower() for term in self.keywords.split() if term.strip())

    def is_empty(self) -> bool:
        """True when no filter narrows the catalog."""
        return not (
            self.query.strip()
            or self.keyword_terms
            or self.year_from is not None
            or self.year_to is not None
            or self.min_rating
            or self.genres
            or self.content_type is not None
        )

    def describe(self) -> str:
        parts = []
        if self.query.strip():
            parts.append(f"title~'{self.query.strip()}'")
        if self.keyword_terms:
            parts.append("keywords=" + "+".join(self.keyword_terms))
        if self.year_from is not None or self.year_to is not None:
            lo = self.year_from if self.year_from is not None else ""
            hi = self.year_to if self.year_to is not None else ""
            parts.append(f"years={lo}..{hi}")
        if self.min_rating:
            parts.append(f"rating>={self.min_rating:.1f}")
        if self.genres:
            parts.append("genres=" + "|".join(g.display_name for g in self.genres))
        if self.content_type is not None:
            parts.append(f"type={self.content_type.value}")
        parts.append(f"sort={self.sort_field} {self.sort_order}")
        return ", ".join(parts)


__all__ = [
    "SearchCriteria",
    "SORT_FIELDS",
    "SORT_OPTIONS",
    "DEFAULT_SORT_LABEL",
    "sort_for_label",
]
