from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from cinedex.adapters.catalog_files import (
    ACTORS_FILE,
    AWARDS_FILE,
    DIRECTORS_FILE,
    MOVIES_FILE,
    SERIES_FILE,
)
from cinedex.domain.entities import Movie, Series
from cinedex.domain.genres import Genre

ACTORS = """\
# FirstName,LastName,BirthDate,Gender,Nationality,Biography,NotableWorks
Al,Pacino,1940-04-25,M,American,,Heat
Sigourney,Weaver,1949-10-08,F,American,"Actor, producer.",Alien
"""

DIRECTORS = """\
Michael,Mann,1943-02-05,M,American,Heat
Ridley,Scott,1937-11-30,M,British,Alien
"""

MOVIES = """\
# Title,Year,Genres,Duration,Director,Rating,Actors
Heat,1995,Crime;Drama,170,Michael Mann,8.3,Al Pacino;Robert De Niro
Alien,1979,Horror;Sci-Fi,117,Ridley Scott,8.5,Sigourney Weaver
Aliens,1986,Action;Sci-Fi,137,James Cameron,8.4,Sigourney Weaver
Heat,1995,Crime,170,Michael Mann,8.3
No Genre,2001,N/A,90,Somebody,5.0
broken line
"""

SERIES = """\
Dark,Sci-Fi;Mystery,3,2017,2020,8.7,Baran bo Odar,Louis Hofmann
The Office,Comedy,9,2005,2013,9.0,Greg Daniels,Steve Carell
"""

AWARDS = """\
Movie,Alien,1979,Best Visual Effects,$106.3M
Series,Dark,2017-2020,Grimme Award,,4
Movie,Missing Movie,1999,Best Picture
"""


def write_catalog(directory: Path, **overrides: Optional[str]) -> Path:
    """Write a small catalog; pass ``movies=None`` to leave a file out."""
    files = {
        ACTORS_FILE: overrides.get("actors", ACTORS),
        DIRECTORS_FILE: overrides.get("directors", DIRECTORS),
        MOVIES_FILE: overrides.get("movies", MOVIES),
        SERIES_FILE: overrides.get("series", SERIES),
        AWARDS_FILE: overrides.get("awards", AWARDS),
    }
    directory.mkdir(parents=True, exist_ok=True)
    for name, text in files.items():
        if text is not None:
            (directory / name).write_text(text, encoding="utf-8")
    return directory


def make_movie(title: str, year: int, rating: float = 7.0, item_id: int = 0, **extra) -> Movie:
    extra.setdefault("genres", [Genre.DRAMA])
    return Movie(title=title, year=year, rating=rating, id=item_id, **extra)


def make_series(title: str, year: int, rating: float = 7.0, item_id: int = 0, **extra) -> Series:
    extra.setdefault("genres", [Genre.DRAMA])
    return Series(title=title, year=year, rating=rating, id=item_id, **extra)


class MemoryStorage:
    """StoragePort double keeping everything in dictionaries."""

    def __init__(self) -> None:
        self.settings: Optional[Dict] = None
        self.watchlist: List[Dict] = []
        self.ratings: List[Dict] = []
        self.fail_with: Optional[Exception] = None

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def save_user_settings(self, payload: Dict) -> None:
        self._check()
        self.settings = dict(payload)

    def load_user_settings(self) -> Optional[Dict]:
        self._check()
        return None if self.settings is None else dict(self.settings)

    def save_watchlist(self, entries: List[Dict]) -> None:
        self._check()
        self.watchlist = [dict(e) for e in entries]

    def load_watchlist(self) -> List[Dict]:
        self._check()
        return [dict(e) for e in self.watchlist]

    def save_ratings(self, ratings: List[Dict]) -> None:
        self._check()
        self.ratings = [dict(r) for r in ratings]

    def load_ratings(self) -> List[Dict]:
        self._check()
        return [dict(r) for r in self.ratings]


class FakeScheduler:
    """UiScheduler stand-in: timers are collected and fired explicitly."""

    def __init__(self) -> None:
        self.later: List[Callable[[], None]] = []
        self.timers: Dict[str, Tuple[int, Callable[[], None]]] = {}
        self.cancelled: List[str] = []

    def run_later(self, callback: Callable[[], None]) -> str:
        self.later.append(callback)
        return f"idle#{len(self.later)}"

    def schedule(self, key: str, delay_ms: int, callback: Callable[[], None]) -> None:
        self.timers[key] = (delay_ms, callback)

    def debounce(self, key: str, delay_ms: int, callback: Callable[[], None]) -> None:
        self.schedule(key, delay_ms, callback)

    def cancel(self, key: str) -> None:
        if self.timers.pop(key, None) is not None:
            self.cancelled.append(key)

    def cancel_all(self) -> None:
        for key in list(self.timers):
            self.cancel(key)

    def is_pending(self, key: str) -> bool:
        return key in self.timers

    def fire(self, key: str) -> None:
        _, callback = self.timers.pop(key)
        callback()

    def flush_later(self) -> None:
        pending, self.later = self.later, []
        for callback in pending:
            callback()


class AlertRecorder:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []

    def __call__(self, title: str, message: str) -> None:
        self.calls.append((title, message))

    @property
    def titles(self) -> List[str]:
        return [title for title, _ in self.calls]


__all__ = [
    "AlertRecorder",
    "FakeScheduler",
    "MemoryStorage",
    "make_movie",
    "make_series",
    "write_catalog",
]
