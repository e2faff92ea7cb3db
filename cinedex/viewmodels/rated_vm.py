from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from ..domain.entities import RatingSummary, UserRating, split_content_key

# key, title, type, score, rated, review
RatedRow = Tuple[str, str, str, str, str, str]

SORT_OPTIONS: Tuple[str, ...] = ("Date rated", "Score", "Title")
MISSING_TITLE = "(not in catalog)"


@dataclass
class RatedVM:
    """Every title the user has scored, newest rating first by default."""

    on_update: Optional[Callable[[Dict], None]] = None
    on_open: Optional[Callable[[str], None]] = None
    on_remove: Optional[Callable[[str], None]] = None

    ratings: List[UserRating] = field(default_factory=list)
    titles: Dict[str, str] = field(default_factory=dict)
    rating_summary: Optional[RatingSummary] = None
    sort_by: str = SORT_OPTIONS[0]

    def set_ratings(
        self,
        ratings: Mapping[str, UserRating],
        titles: Mapping[str, str],
        summary: Optional[RatingSummary] = None,
    ) -> None:
        self.ratings = list(ratings.values())
        self.titles = dict(titles)
        self.rating_summary = summary
        self._emit()

    def set_sort(self, option: str) -> None:
        if option not in SORT_OPTIONS:
            raise ValueError(f"Unknown sort option: {option}")
        self.sort_by = option
        self._emit()

    def title_for(self, key: str) -> str:
        return self.titles.get(key) or MISSING_TITLE

    def ordered(self) -> List[UserRating]:
        by_date = sorted(self.ratings, key=lambda r: r.rated_at, reverse=True)
        if self.sort_by == "Score":
            return sorted(by_date, key=lambda r: r.score, reverse=True)
        if self.sort_by == "Title":
            return sorted(by_date, key=lambda r: self.title_for(r.content_key).lower())
        return by_date

    def rows(self) -> List[RatedRow]:
        rows: List[RatedRow] = []
        for rating in self.ordered():
            content_type, _ = split_content_key(rating.content_key)
            rows.append(
                (
                    rating.content_key,
                    self.title_for(rating.content_key),
                    content_type.label,
                    f"{rating.score}/10",
                    rating.rated_at.strftime("%Y-%m-%d"),
                    rating.review,
                )
            )
        return rows

    def summary(self) -> str:
        if not self.ratings:
            return "No ratings yet"
        count = len(self.ratings)
        noun = "title" if count == 1 else "titles"
        if self.rating_summary is None or self.rating_summary.mean is None:
            return f"{count} rated {noun}"
        return f"{count} rated {noun}, average {self.rating_summary.mean_label}/10"

    def cmd_open(self, key: str) -> None:
        if self.on_open:
            self.on_open(key)

    def cmd_remove(self, key: str) -> None:
        if self.on_remove:
            self.on_remove(key)

    def _emit(self) -> None:
        if self.on_update:
            self.on_update(
                {
                    "rows": self.rows(),
                    "summary": self.summary(),
                    "sort_by": self.sort_by,
                    "sort_options": SORT_OPTIONS,
                }
            )


__all__ = ["RatedVM", "SORT_OPTIONS"]
