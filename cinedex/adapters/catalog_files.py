"""Reader and record parsers for the catalog text files.

Every catalog file is UTF-8 text with one comma separated record per line.
Fields may be double-quoted (``""`` escapes a quote inside a quoted field),
blank lines and lines starting with ``#`` are ignored. Parsing is tolerant:
out-of-range years and ratings fall back to safe values, and only records
that cannot be interpreted at all raise :class:`FileParsingError`.
"""

from __future__ import annotations

import csv
import logging
import os
import random
from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, List, Optional, Sequence, Tuple

from cinedex.domain.entities import (
    Celebrity,
    ContentType,
    Episode,
    Movie,
    Season,
    Series,
    clamp_rating,
)
from cinedex.domain.errors import FileParsingError
from cinedex.domain.genres import Genre, parse_genres
from cinedex.domain.ports import CatalogSourcePort

ACTORS_FILE = "actors.txt"
DIRECTORS_FILE = "directors.txt"
MOVIES_FILE = "movies.txt"
SERIES_FILE = "series.txt"
AWARDS_FILE = "awards.txt"

FIRST_FILM_YEAR = 1888
FIRST_SERIES_YEAR = 1928
MIN_EPISODES_PER_SEASON = 8
MAX_EPISODES_PER_SEASON = 16

_NA_MARKERS = {"", "-", "n/a", "na", "none"}

Record = Tuple[int, List[str]]


def default_data_dir() -> str:
    """Directory holding the catalog files bundled with the package."""
    return os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")


class CatalogFiles(CatalogSourcePort):
    """Reads catalog records from ``*.txt`` files in one directory."""

    def __init__(self, data_dir: Optional[str] = None) -> None:
        self.data_dir = data_dir or default_data_dir()
        self._log = logging.getLogger(__name__)

    def path_for(self, name: str) -> str:
        return os.path.join(self.data_dir, name)

    def exists(self, name: str) -> bool:
        return os.path.isfile(self.path_for(name))

    def read_lines(self, name: str) -> Iterator[str]:
        path = self.path_for(name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line in f:
                    yield line.rstrip("\r\n")
        except OSError as exc:
            raise FileParsingError(path, f"cannot read file ({exc.strerror or exc})") from exc
        except UnicodeDecodeError as exc:
            raise FileParsingError(path, f"not valid UTF-8 at byte {exc.start}") from exc

    def read_records(self, name: str) -> Iterator[Record]:
        """Yield ``(line_no, fields)`` for every data line of ``name``."""
        for line_no, line in enumerate(self.read_lines(name), start=1):
            if not line.strip() or line.lstrip().startswith("#"):
                continue
            yield line_no, parse_csv_line(line)


def parse_csv_line(line: str) -> List[str]:
    """Split one record into trimmed fields, honouring double-quoted fields."""
    row = next(csv.reader([line], skipinitialspace=True), [])
    return [value.strip() for value in row]


# ---------------------------------------------------------------------------
# Scalar helpers
# ---------------------------------------------------------------------------
def _this_year() -> int:
    return date.today().year


def _is_na(value: Optional[str]) -> bool:
    return value is None or value.strip().lower() in _NA_MARKERS


def _parse_int(value: str) -> Optional[int]:
    digits = "".join(ch for ch in value if ch.isdigit())
    if not digits:
        return None
    return int(digits)


def parse_rating(value: str) -> float:
    """Parse a 0-10 rating; invalid text gives 0.0 and outliers are clamped."""
    try:
        return clamp_rating(float(value.strip()))
    except (ValueError, AttributeError):
        return 0.0


def parse_year(value: str, lowest: int, highest: int, fallback: int) -> int:
    """Parse a year and fall back when it is missing or outside ``[lowest, highest]``."""
    head = (value or "").strip().split("-")[0]
    year = _parse_int(head) if head else None
    if year is None or not lowest <= year <= highest:
        return fallback
    return year


def parse_birth_date(value: str) -> Optional[date]:
    """Accept ``yyyy-MM-dd`` or a bare ``yyyy``."""
    text = (value or "").strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    if len(text) == 4 and text.isdigit():
        return date(int(text), 1, 1)
    return None


def _split_names(value: str) -> List[str]:
    return [" ".join(part.split()) for part in (value or "").split(";") if part.strip()]


def _field(fields: Sequence[str], index: int) -> str:
    return fields[index] if index < len(fields) else ""


# ---------------------------------------------------------------------------
# Record parsers
# ---------------------------------------------------------------------------
def parse_celebrity(fields: Sequence[str], role: str, *, path: str = "", line_no: int = 0) -> Celebrity:
    """``FirstName,LastName,BirthDate,Gender,Nationality[,...]``.

    Actors carry ``Biography`` and ``NotableWorks`` after the nationality,
    directors only ``NotableWorks``.
    """
    if len(fields) < 5:
        raise FileParsingError(path, f"expected at least 5 fields, got {len(fields)}", line_no)
    gender = fields[3].strip()[:1].upper() or "U"
    if role == "actor":
        biography, works = _field(fields, 5), _field(fields, 6)
    else:
        biography, works = "", _field(fields, 5)
    return Celebrity(
        first_name=fields[0],
        last_name=fields[1],
        birth_date=parse_birth_date(fields[2]),
        gender=gender,
        nationality=fields[4],
        biography=biography,
        notable_works=_split_names(works),
        role=role,
    )


def parse_movie(
    fields: Sequence[str],
    *,
    path: str = "",
    line_no: int = 0,
    current_year: Optional[int] = None,
) -> Optional[Movie]:
    """``Title,Year,Genres,Duration,Director,Rating,Actors``.

    Returns ``None`` for movies without a recognisable genre.
    """
    if len(fields) < 6:
        raise FileParsingError(path, f"expected at least 6 fields, got {len(fields)}", line_no)
    title = fields[0]
    if not title:
        raise FileParsingError(path, "missing title", line_no)
    if _is_na(fields[2]):
        return None
    genres = parse_genres(fields[2])
    if not genres:
        return None
    now = current_year or _this_year()
    directors = _split_names(fields[4])
    return Movie(
        title=title,
        year=parse_year(fields[1], FIRST_FILM_YEAR, now + 2, now),
        genres=genres,
        duration_min=_parse_int(fields[3]) or 0,
        director=directors[0] if directors else "",
        rating=parse_rating(fields[5]),
        cast=_split_names(_field(fields, 6)),
    )


def build_seasons(title: str, count: int, start_year: int, end_year: Optional[int]) -> List[Season]:
    """Placeholder seasons with 8-16 episodes each, stable for a given title."""
    rng = random.Random(f"{title}:{start_year}")
    last_year = end_year if end_year is not None else max(start_year, _this_year())
    seasons: List[Season] = []
    for number in range(1, count + 1):
        episodes = [
            Episode(number=ep, title=f"Episode {ep}")
            for ep in range(1, rng.randint(MIN_EPISODES_PER_SEASON, MAX_EPISODES_PER_SEASON) + 1)
        ]
        seasons.append(Season(number=number, year=min(start_year + number - 1, last_year), episodes=episodes))
    return seasons


def parse_series(
    fields: Sequence[str],
    *,
    path: str = "",
    line_no: int = 0,
    current_year: Optional[int] = None,
) -> Series:
    """``Title,Genres,Seasons,StartYear,EndYear,Rating,Creator,Actors``."""
    if len(fields) < 6:
        raise FileParsingError(path, f"expected at least 6 fields, got {len(fields)}", line_no)
    title = fields[0]
    if not title:
        raise FileParsingError(path, "missing title", line_no)
    now = current_year or _this_year()
    genres = parse_genres(fields[1]) or [Genre.DRAMA]
    season_count = None if fields[2].startswith("-") else _parse_int(fields[2])
    start = parse_year(fields[3], FIRST_SERIES_YEAR, now + 1, now)
    end: Optional[int] = None
    if not _is_na(fields[4]):
        parsed_end = _parse_int(fields[4])
        if parsed_end is not None and parsed_end >= start:
            end = parsed_end
    creators = _split_names(_field(fields, 6))
    return Series(
        title=title,
        year=start,
        end_year=end,
        genres=genres,
        rating=parse_rating(fields[5]),
        director=creators[0] if creators else "",
        cast=_split_names(_field(fields, 7)),
        seasons=build_seasons(title, max(1, season_count or 1), start, end),
    )


@dataclass
class AwardRecord:
    content_type: ContentType
    title: str
    year: int
    awards: List[str] = field(default_factory=list)
    box_office: str = ""
    nominations: int = 0


def parse_award(fields: Sequence[str], *, path: str = "", line_no: int = 0) -> AwardRecord:
    """``ContentType,Title,Year,Awards[,BoxOffice[,Nominations]]``."""
    if len(fields) < 4:
        raise FileParsingError(path, f"expected at least 4 fields, got {len(fields)}", line_no)
    kind = fields[0].strip().lower()
    if kind in {"movie", "film"}:
        content_type = ContentType.MOVIE
    elif kind in {"series", "tv", "show", "tv series"}:
        content_type = ContentType.SERIES
    else:
        raise FileParsingError(path, f"unknown content type {fields[0]!r}", line_no)
    year = _parse_int(fields[2].split("-")[0])
    if year is None:
        raise FileParsingError(path, f"invalid year {fields[2]!r}", line_no)
    box_office = _field(fields, 4)
    return AwardRecord(
        content_type=content_type,
        title=fields[1],
        year=year,
        awards=_split_names(fields[3]),
        box_office="" if _is_na(box_office) else box_office,
        nominations=_parse_int(_field(fields, 5)) or 0,
    )


__all__ = [
    "ACTORS_FILE",
    "DIRECTORS_FILE",
    "MOVIES_FILE",
    "SERIES_FILE",
    "AWARDS_FILE",
    "AwardRecord",
    "CatalogFiles",
    "build_seasons",
    "default_data_dir",
    "parse_award",
    "parse_birth_date",
    "parse_celebrity",
    "parse_csv_line",
    "parse_movie",
    "parse_rating",
    "parse_series",
    "parse_year",
]
