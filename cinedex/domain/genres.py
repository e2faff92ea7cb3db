"""Genre vocabulary shared by the catalog loaders, search form and views."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Tuple


class Genre(Enum):
    """Catalog genres with their display names."""

    ACTION = "Action"
    COMEDY = "Comedy"
    DRAMA = "Drama"
    HORROR = "Horror"
    THRILLER = "Thriller"
    ROMANCE = "Romance"
    SCI_FI = "Science Fiction"
    FANTASY = "Fantasy"
    DOCUMENTARY = "Documentary"
    ANIMATION = "Animation"
    CRIME = "Crime"
    MYSTERY = "Mystery"
    ADVENTURE = "Adventure"
    BIOGRAPHY = "Biography"
    MUSICAL = "Musical"
    MUSIC = "Music"
    WESTERN = "Western"
    WAR = "War"
    FAMILY = "Family"
    SPORT = "Sport"
    HISTORY = "History"
    UNKNOWN = "Unknown"

    @property
    def display_name(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


# Labels offered by the search form, in display order.
FORM_GENRES: Tuple[str, ...] = (
    "Action",
    "Adventure",
    "Animation",
    "Comedy",
    "Crime",
    "Documentary",
    "Drama",
    "Family",
    "Fantasy",
    "History",
    "Horror",
    "Music",
    "Mystery",
    "Romance",
    "Sci-Fi",
    "Thriller",
    "War",
    "Western",
)

_ALIASES = {
    "SCIFI": Genre.SCI_FI,
    "SCI_FI": Genre.SCI_FI,
    "SCIENCE_FICTION": Genre.SCI_FI,
    "SCIFANTASY": Genre.SCI_FI,
    "SCI_FANTASY": Genre.SCI_FI,
    "BIOPIC": Genre.BIOGRAPHY,
    "SPORTS": Genre.SPORT,
    "ANIME": Genre.ANIMATION,
}


def _normalize_token(raw: str) -> str:
    text = raw.strip().upper()
    text = text.replace("&", "AND").replace("'", "")
    for sep in ("-", " ", "/"):
        text = text.replace(sep, "_")
    while "__" in text:
        text = text.replace("__", "_")
    return text.strip("_")


def parse_genre(raw: Optional[str]) -> Optional[Genre]:
    """Map free text such as ``"Sci-Fi"`` or ``"drama "`` to a :class:`Genre`.

    Returns ``None`` for empty or unrecognised text.
    """
    if raw is None:
        return None
    token = _normalize_token(raw)
    if not token or token in {"N_A", "NA", "NONE"}:
        return None
    if token in _ALIASES:
        return _ALIASES[token]
    # compound labels such as "DRAMA_ROMANCE" collapse to their lead genre
    if token.startswith("DRAMA"):
        return Genre.DRAMA
    if token.startswith("COMEDY"):
        return Genre.COMEDY
    try:
        return Genre[token]
    except KeyError:
        return None


def parse_genres(raw: Optional[str]) -> List[Genre]:
    """Parse a ``,``/``;`` separated genre list, keeping first-seen order."""
    if not raw:
        return []
    result: List[Genre] = []
    for part in raw.replace(";", ",").split(","):
        genre = parse_genre(part)
        if genre is not None and genre not in result:
            result.append(genre)
    return result


def genre_labels(genres: Iterable[Genre]) -> str:
    return ", ".join(genre.display_name for genre in genres)


__all__ = ["Genre", "FORM_GENRES", "parse_genre", "parse_genres", "genre_labels"]
