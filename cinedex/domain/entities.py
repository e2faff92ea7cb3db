"""Catalog value objects and aggregates shared across adapters, use-cases, and view models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Tuple

from .errors import ValidationError
from .genres import Genre, genre_labels

MIN_RATING = 0.0
MAX_RATING = 10.0


class ContentType(Enum):
    MOVIE = "movie"
    SERIES = "series"

    @property
    def label(self) -> str:
        return "Movie" if self is ContentType.MOVIE else "Series"


def _require_title(value: str, kind: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{kind} title must be a non-empty string.")


def clamp_rating(value: float) -> float:
    """Clamp a rating into the 0-10 scale and round it to one decimal."""
    return round(min(MAX_RATING, max(MIN_RATING, float(value))), 1)


@dataclass
class Celebrity:
    """An actor or director known to the catalog."""

    first_name: str
    last_name: str
    birth_date: Optional[date] = None
    gender: str = "U"
    nationality: str = ""
    notable_works: List[str] = field(default_factory=list)
    biography: str = ""
    role: str = "actor"
    id: int = 0

    def __post_init__(self) -> None:
        if not (self.first_name or "").strip() and not (self.last_name or "").strip():
            raise ValidationError("Celebrity needs a first or last name.")
        if self.role not in {"actor", "director"}:
            raise ValidationError(f"Unknown celebrity role: {self.role!r}")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def birth_year(self) -> Optional[int]:
        return self.birth_date.year if self.birth_date else None


@dataclass
class Content:
    """Common fields for anything that can be searched, rated or watchlisted."""

    title: str
    year: int
    genres: List[Genre] = field(default_factory=list)
    director: str = ""
    rating: float = 0.0
    cast: List[str] = field(default_factory=list)
    awards: List[str] = field(default_factory=list)
    box_office: str = ""
    id: int = 0

    def __post_init__(self) -> None:
        _require_title(self.title, type(self).__name__)
        if not MIN_RATING <= float(self.rating) <= MAX_RATING:
            raise ValidationError("Rating must be between 0.0 and 10.0")

    @property
    def content_type(self) -> ContentType:
        raise NotImplementedError

    @property
    def genre_label(self) -> str:
        return genre_labels(self.genres)

    @property
    def years_label(self) -> str:
        return str(self.year)

    def has_genre(self, genre: Genre) -> bool:
        return genre in self.genres


@dataclass
class Movie(Content):
    duration_min: int = 0

    @property
    def content_type(self) -> ContentType:
        return ContentType.MOVIE


@dataclass
class Episode:
    number: int
    title: str
    duration_min: int = 45


@dataclass
class Season:
    number: int
    year: int
    episodes: List[Episode] = field(default_factory=list)

    @property
    def episode_count(self) -> int:
        return len(self.episodes)


@dataclass
class Series(Content):
    end_year: Optional[int] = None
    seasons: List[Season] = field(default_factory=list)
    nominations: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.end_year is not None and self.end_year < self.year:
            raise ValidationError("Series end year cannot precede its start year.")

    @property
    def content_type(self) -> ContentType:
        return ContentType.SERIES

    @property
    def is_ongoing(self) -> bool:
        return self.end_year is None

    @property
    def total_seasons(self) -> int:
        return len(self.seasons)

    @property
    def total_episodes(self) -> int:
        return sum(season.episode_count for season in self.seasons)

    @property
    def years_label(self) -> str:
        if self.end_year is None:
            return f"{self.year}-"
        if self.end_year == self.year:
            return str(self.year)
        return f"{self.year}-{self.end_year}"


def content_key(content: Content) -> str:
    """Stable key such as ``movie:12`` used by ratings and the watchlist."""
    return f"{content.content_type.value}:{content.id}"


def split_content_key(key: str) -> Tuple[ContentType, int]:
    kind, _, raw_id = (key or "").partition(":")
    try:
        return ContentType(kind), int(raw_id)
    except ValueError as exc:
        raise ValidationError(f"Malformed content key: {key!r}") from exc


@dataclass(frozen=True)
class UserRating:
    """A local user's score (1-10) with an optional short review."""

    content_key: str
    score: int
    review: str = ""
    rated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        split_content_key(self.content_key)
        if not isinstance(self.score, int) or not 1 <= self.score <= 10:
            raise ValidationError("Score must be a whole number between 1 and 10.")
        if len(self.review) > 1000:
            raise ValidationError("Review must be at most 1000 characters.")


@dataclass(frozen=True)
class WatchlistEntry:
    """A title the user wants to watch, with progress and notes."""

    content_key: str
    title: str
    added_at: datetime = field(default_factory=datetime.now)
    watched: bool = False
    notes: str = ""

    def __post_init__(self) -> None:
        split_content_key(self.content_key)
        _require_title(self.title, "Watchlist entry")

    @property
    def content_type(self) -> ContentType:
        return split_content_key(self.content_key)[0]


@dataclass(frozen=True)
class RatingSummary:
    """Count, mean and score histogram of the user's ratings."""

    count: int
    mean: Optional[float]
    # counts for scores 1..10, index 0 holds score 1
    distribution: Tuple[int, ...]

    @property
    def mean_label(self) -> str:
        return "-" if self.mean is None else f"{self.mean:.1f}"

    def count_for(self, score: int) -> int:
        return self.distribution[score - 1] if 1 <= score <= len(self.distribution) else 0


@dataclass(frozen=True)
class ContentDraft:
    """Edited fields of a movie or series before they are stored.

    ``length`` is the runtime in minutes for movies and the number of
    seasons for series; ``end_year`` only applies to series.
    """

    content_type: ContentType
    title: str
    year: int
    genres: Tuple[Genre, ...]
    rating: float = 0.0
    director: str = ""
    cast: Tuple[str, ...] = ()
    length: int = 0
    end_year: Optional[int] = None


__all__ = [
    "ContentType",
    "ContentDraft",
    "RatingSummary",
    "Celebrity",
    "Content",
    "Movie",
    "Series",
    "Season",
    "Episode",
    "UserRating",
    "WatchlistEntry",
    "clamp_rating",
    "content_key",
    "split_content_key",
]
