from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..domain.entities import Content, content_key

FEATURED_TITLE = "Featured Content"
FEATURED_SUBTITLE = "Check out our latest additions"

# key, title, years, rating
TileRow = Tuple[str, str, str, str]


@dataclass
class HomeVM:
    """Landing page: catalog counts, featured lists and a rating histogram."""

    on_update: Optional[Callable[[Dict], None]] = None
    on_open_details: Optional[Callable[[Content], None]] = None

    counts: Dict[str, int] = field(default_factory=dict)
    top_rated: List[Content] = field(default_factory=list)
    recent: List[Content] = field(default_factory=list)
    histogram: List[int] = field(default_factory=list)
    ratings_label: str = ""

    def apply(
        self,
        *,
        counts: Dict[str, int],
        top_rated: Sequence[Content],
        recent: Sequence[Content],
        histogram: Sequence[int],
        ratings_label: str = "",
    ) -> None:
        self.counts = dict(counts)
        self.top_rated = list(top_rated)
        self.recent = list(recent)
        self.histogram = list(histogram)
        self.ratings_label = ratings_label
        if self.on_update:
            self.on_update(self.to_dto())

    def counts_label(self) -> str:
        c = self.counts
        return (
            f"{c.get('movies', 0)} movies · {c.get('series', 0)} series · "
            f"{c.get('actors', 0)} actors · {c.get('directors', 0)} directors"
        )

    @staticmethod
    def tiles(items: Sequence[Content]) -> List[TileRow]:
        return [(content_key(i), i.title, i.years_label, f"{i.rating:.1f}") for i in items]

    def histogram_bars(self, width: int = 30) -> List[Tuple[str, int, int]]:
        """``(label, count, bar_length)`` per rating bucket, scaled to ``width``."""
        peak = max(self.histogram) if self.histogram else 0
        bars = []
        for index, count in enumerate(self.histogram):
            length = round(width * count / peak) if peak else 0
            bars.append((f"{index}-{index + 1}", count, length))
        return bars

    def open(self, key: str) -> None:
        for item in (*self.top_rated, *self.recent):
            if content_key(item) == key:
                if self.on_open_details:
                    self.on_open_details(item)
                return

    def to_dto(self) -> Dict:
        return {
            "title": FEATURED_TITLE,
            "subtitle": FEATURED_SUBTITLE,
            "counts": self.counts_label(),
            "top_rated": self.tiles(self.top_rated),
            "recent": self.tiles(self.recent),
            "histogram": self.histogram_bars(),
            "ratings": self.ratings_label,
        }


__all__ = ["HomeVM", "FEATURED_TITLE", "FEATURED_SUBTITLE"]
