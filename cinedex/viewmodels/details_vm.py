from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from ..domain.entities import Content, Movie, RatingSummary, Series, UserRating, content_key
from ..domain.errors import ValidationError

SeasonRow = Tuple[str, str, str]
# score, share of the busiest score (0-1), count
ScoreRow = Tuple[int, float, int]


@dataclass
class DetailsVM:
    """Read-only presentation of one title plus the user's rating/watchlist actions."""

    content: Content
    user_rating: Optional[UserRating] = None
    in_watchlist: bool = False
    # all of the user's ratings, not just this title
    rating_summary: Optional[RatingSummary] = None

    on_rate: Optional[Callable[[str, int, str], None]] = None
    on_clear_rating: Optional[Callable[[str], None]] = None
    on_toggle_watchlist: Optional[Callable[[Content], None]] = None
    on_edit: Optional[Callable[[Content], None]] = None

    @property
    def key(self) -> str:
        return content_key(self.content)

    @property
    def window_title(self) -> str:
        return f"{self.content.title} ({self.content.years_label})"

    @property
    def watchlist_button_text(self) -> str:
        return "Remove from Watchlist" if self.in_watchlist else "Add to Watchlist"

    @property
    def user_rating_label(self) -> str:
        if self.user_rating is None:
            return "Not rated yet"
        return f"Your rating: {self.user_rating.score}/10"

    @property
    def rating_average_label(self) -> str:
        summary = self.rating_summary
        if summary is None or not summary.count:
            return "You have not rated any titles yet"
        noun = "title" if summary.count == 1 else "titles"
        return f"Your average: {summary.mean_label}/10 across {summary.count} rated {noun}"

    def facts(self) -> List[Tuple[str, str]]:
        """Label/value pairs for the header grid."""
        item = self.content
        facts = [
            ("Type", item.content_type.label),
            ("Years" if isinstance(item, Series) else "Year", item.years_label),
            ("Genres", item.genre_label or "-"),
            ("Creator" if isinstance(item, Series) else "Director", item.director or "-"),
            ("Rating", f"{item.rating:.1f} / 10"),
        ]
        if isinstance(item, Movie) and item.duration_min:
            hours, minutes = divmod(item.duration_min, 60)
            facts.append(("Runtime", f"{hours}h {minutes:02d}m" if hours else f"{minutes}m"))
        if isinstance(item, Series):
            facts.append(("Seasons", f"{item.total_seasons} ({item.total_episodes} episodes)"))
            if item.nominations:
                facts.append(("Nominations", str(item.nominations)))
        if item.box_office:
            facts.append(("Box office", item.box_office))
        return facts

    def cast_text(self) -> str:
        return ", ".join(self.content.cast) or "No cast listed"

    def awards_text(self) -> str:
        return "\n".join(self.content.awards) or "No awards recorded"

    def season_rows(self) -> List[SeasonRow]:
        if not isinstance(self.content, Series):
            return []
        return [
            (f"Season {season.number}", str(season.year), f"{season.episode_count} episodes")
            for season in self.content.seasons
        ]

    def score_rows(self) -> List[ScoreRow]:
        """One row per score from 10 down to 1 for the distribution bars."""
        summary = self.rating_summary
        counts = [summary.count_for(score) if summary else 0 for score in range(10, 0, -1)]
        peak = max(counts) or 1
        return [(score, count / peak, count) for score, count in zip(range(10, 0, -1), counts)]

    # ------------------------------------------------------------------
    def cmd_rate(self, score: int | str, review: str = "") -> None:
        try:
            value = int(score)
        except (TypeError, ValueError) as exc:
            raise ValidationError("Score must be a whole number between 1 and 10.") from exc
        if not 1 <= value <= 10:
            raise ValidationError("Score must be a whole number between 1 and 10.")
        if self.on_rate:
            self.on_rate(self.key, value, review or "")

    def cmd_clear_rating(self) -> None:
        if self.user_rating is not None and self.on_clear_rating:
            self.on_clear_rating(self.key)

    def cmd_toggle_watchlist(self) -> None:
        if self.on_toggle_watchlist:
            self.on_toggle_watchlist(self.content)

    def cmd_edit(self) -> None:
        if self.on_edit:
            self.on_edit(self.content)

    def to_dto(self) -> Dict:
        return {
            "title": self.window_title,
            "facts": self.facts(),
            "cast": self.cast_text(),
            "awards": self.awards_text(),
            "seasons": self.season_rows(),
            "user_rating": self.user_rating_label,
            "user_score": self.user_rating.score if self.user_rating else None,
            "user_review": self.user_rating.review if self.user_rating else "",
            "watchlist_button": self.watchlist_button_text,
            "rating_average": self.rating_average_label,
            "score_rows": self.score_rows(),
        }


__all__ = ["DetailsVM"]
