from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..domain.entities import Content, Series, content_key
from ..domain.search_criteria import SearchCriteria

# key, title, year, type, genre, rating, director, seasons, episodes
ResultRow = Tuple[str, str, str, str, str, str, str, str, str]

RESULT_COLUMNS: Tuple[Tuple[str, str, int], ...] = (
    ("title", "Title", 260),
    ("year", "Year", 80),
    ("type", "Type", 70),
    ("genre", "Genre", 180),
    ("rating", "Rating", 60),
    ("director", "Director", 160),
    ("seasons", "Seasons", 70),
    ("episodes", "Episodes", 70),
)
NO_RESULTS_TEXT = "No results found"


def count_label(count: int) -> str:
    return f"Found {count} result{'' if count == 1 else 's'}"


def content_row(item: Content) -> ResultRow:
    seasons = episodes = ""
    if isinstance(item, Series):
        seasons = str(item.total_seasons)
        episodes = str(item.total_episodes)
    return (
        content_key(item),
        item.title,
        item.years_label,
        item.content_type.label,
        item.genre_label,
        f"{item.rating:.1f}",
        item.director,
        seasons,
        episodes,
    )


@dataclass
class ResultsVM:
    """Table state for search results and the movie/series browse tabs."""

    on_update: Optional[Callable[[Dict], None]] = None
    on_open_details: Optional[Callable[[Content], None]] = None

    results: List[Content] = field(default_factory=list)
    last_criteria: Optional[SearchCriteria] = None
    status_text: str = ""

    def set_results(self, items: Sequence[Content], criteria: Optional[SearchCriteria] = None) -> None:
        self.results = list(items)
        self.last_criteria = criteria
        self.status_text = count_label(len(self.results))
        if self.on_update:
            self.on_update(self.to_dto())

    def clear(self) -> None:
        self.set_results([])

    def rows(self) -> List[ResultRow]:
        return [content_row(item) for item in self.results]

    def to_dto(self) -> Dict:
        return {
            "rows": self.rows(),
            "count_label": self.status_text,
            "placeholder": NO_RESULTS_TEXT if not self.results else "",
        }

    def find(self, key: str) -> Optional[Content]:
        for item in self.results:
            if content_key(item) == key:
                return item
        return None

    def open_details(self, key: str) -> None:
        item = self.find(key)
        if item is not None and self.on_open_details:
            self.on_open_details(item)


__all__ = ["ResultsVM", "ResultRow", "RESULT_COLUMNS", "NO_RESULTS_TEXT", "content_row", "count_label"]
