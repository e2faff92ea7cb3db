"""Search form state, input rules and criteria assembly (no tkinter here).

The view forwards raw widget events (text edits, focus loss, slider moves,
checkbox toggles) to :class:`SearchFormVM`. The view model validates them,
keeps the form state, and pushes a render DTO back through
``on_state_changed``. Pressing *Search* builds a fresh
:class:`~cinedex.domain.search_criteria.SearchCriteria` and hands it to
``on_search_requested``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Dict, List, Optional, Tuple

from ..domain.errors import ValidationError
from ..domain.genres import FORM_GENRES, parse_genre
from ..domain.search_criteria import (
    DEFAULT_SORT_LABEL,
    SORT_OPTIONS,
    SearchCriteria,
    sort_for_label,
)

MIN_YEAR = 1888
YEAR_PATTERN = re.compile(r"^\d{0,4}$")
GENRE_PLACEHOLDER = "Select Genres..."

WarningFn = Callable[[str, str], None]


def format_rating(value: float) -> str:
    return f"{value:.1f}"


@dataclass
class SearchFormVM:
    """Holds search form state and turns it into search requests."""

    on_criteria_changed: Optional[Callable[[SearchCriteria], None]] = None
    on_search_requested: Optional[Callable[[SearchCriteria], None]] = None
    on_state_changed: Optional[Callable[[Dict], None]] = None
    on_warning: Optional[WarningFn] = None
    on_error: Optional[WarningFn] = None
    current_year: Optional[int] = None

    title: str = ""
    keywords: str = ""
    year_from_text: str = ""
    year_to_text: str = ""
    rating: float = 0.0
    selected_genres: List[str] = field(default_factory=list)
    include_movies: bool = True
    include_series: bool = True
    sort_label: str = DEFAULT_SORT_LABEL
    dropdown_visible: bool = False

    # ------------------------------------------------------------------
    # Derived labels
    # ------------------------------------------------------------------
    @property
    def max_year(self) -> int:
        return self.current_year or date.today().year

    @property
    def rating_label(self) -> str:
        return format_rating(self.rating)

    @property
    def genre_prompt(self) -> str:
        """Text of the genre field: empty, the single genre, or a joined list."""
        return ", ".join(self.selected_genres)

    @property
    def genre_button_text(self) -> str:
        count = len(self.selected_genres)
        if count == 0:
            return GENRE_PLACEHOLDER
        if count == 1:
            return self.selected_genres[0]
        return f"{count} genres"

    @property
    def dropdown_toggle_text(self) -> str:
        return "Hide" if self.dropdown_visible else "Show"

    @staticmethod
    def sort_options() -> Tuple[str, ...]:
        return tuple(SORT_OPTIONS.keys())

    @staticmethod
    def genre_options() -> Tuple[str, ...]:
        return FORM_GENRES

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize_form(self) -> None:
        """Put every control back to its default state."""
        self.title = ""
        self.keywords = ""
        self.year_from_text = ""
        self.year_to_text = ""
        self.rating = 0.0
        self.selected_genres = []
        self.include_movies = True
        self.include_series = True
        self.sort_label = DEFAULT_SORT_LABEL
        self.dropdown_visible = False
        self._emit_state()

    def reset(self) -> None:
        self.initialize_form()
        self._notify_criteria_changed()

    # ------------------------------------------------------------------
    # Text fields
    # ------------------------------------------------------------------
    def set_title(self, text: str) -> None:
        self.title = text or ""
        self._notify_criteria_changed()

    def set_keywords(self, text: str) -> None:
        self.keywords = text or ""
        self._notify_criteria_changed()

    def set_year_from_text(self, text: str) -> bool:
        """Apply a keystroke to the *Year from* field; False means revert the edit."""
        if not self._accept_year_text(text):
            return False
        self.year_from_text = (text or "").strip()
        self._notify_criteria_changed()
        return True

    def set_year_to_text(self, text: str) -> bool:
        if not self._accept_year_text(text):
            return False
        self.year_to_text = (text or "").strip()
        self._notify_criteria_changed()
        return True

    def year_from_focus_lost(self) -> None:
        self.year_from_text = self._complete_year(self.year_from_text)
        self._enforce_year_order()
        self._emit_state()

    def year_to_focus_lost(self) -> None:
        self.year_to_text = self._complete_year(self.year_to_text)
        self._enforce_year_order()
        self._emit_state()

    # ------------------------------------------------------------------
    # Other controls
    # ------------------------------------------------------------------
    def set_rating(self, value: float | str) -> None:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return
        self.rating = round(min(10.0, max(0.0, number)), 1)
        self._emit_state()
        self._notify_criteria_changed()

    def toggle_genre(self, label: str, selected: bool) -> None:
        if label not in FORM_GENRES:
            raise ValueError(f"Unknown genre option: {label!r}")
        if selected and label not in self.selected_genres:
            self.selected_genres.append(label)
        elif not selected and label in self.selected_genres:
            self.selected_genres.remove(label)
        self._emit_state()
        self._notify_criteria_changed()

    def toggle_dropdown(self) -> None:
        self.dropdown_visible = not self.dropdown_visible
        self._emit_state()

    def set_sort(self, label: str) -> None:
        if label not in SORT_OPTIONS:
            raise ValueError(f"Unknown sort option: {label!r}")
        self.sort_label = label
        self._notify_criteria_changed()

    def set_include_movies(self, flag: bool) -> None:
        self.include_movies = bool(flag)
        self._notify_criteria_changed()

    def set_include_series(self, flag: bool) -> None:
        self.include_series = bool(flag)
        self._notify_criteria_changed()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def build_criteria(self) -> SearchCriteria:
        """Assemble an immutable criteria object from the current form state.

        Raises:
            ValidationError: if the form holds an inconsistent filter.
        """
        sort_field, descending = sort_for_label(self.sort_label)
        genres = []
        for label in self.selected_genres:
            genre = parse_genre(label)
            if genre is not None and genre not in genres:
                genres.append(genre)
        return SearchCriteria(
            sort_field=sort_field,
            sort_descending=descending,
            query=self.title.strip(),
            keywords=self.keywords.strip(),
            year_from=self._year_value(self.year_from_text),
            year_to=self._year_value(self.year_to_text),
            min_rating=self.rating if self.rating > 0 else None,
            genres=tuple(genres),
            include_movies=self.include_movies,
            include_series=self.include_series,
        )

    def search(self) -> Optional[SearchCriteria]:
        """Build criteria and hand them to the search listener.

        Validation problems are reported through ``on_error`` and no search
        is requested.
        """
        # Enter in a year field searches without a focus change
        typed = (self.year_from_text, self.year_to_text)
        self.year_from_text = self._complete_year(self.year_from_text)
        self.year_to_text = self._complete_year(self.year_to_text)
        self._enforce_year_order()
        if (self.year_from_text, self.year_to_text) != typed:
            self._emit_state()
        try:
            criteria = self.build_criteria()
        except ValidationError as exc:
            if self.on_error:
                self.on_error("Search Error", str(exc))
            return None
        if self.dropdown_visible:
            self.dropdown_visible = False
            self._emit_state()
        if self.on_criteria_changed:
            self.on_criteria_changed(criteria)
        if self.on_search_requested:
            self.on_search_requested(criteria)
        return criteria

    def view_state(self) -> Dict:
        return {
            "title": self.title,
            "keywords": self.keywords,
            "year_from": self.year_from_text,
            "year_to": self.year_to_text,
            "rating": self.rating,
            "rating_label": self.rating_label,
            "genres": list(self.selected_genres),
            "genre_prompt": self.genre_prompt,
            "genre_button_text": self.genre_button_text,
            "dropdown_visible": self.dropdown_visible,
            "dropdown_toggle_text": self.dropdown_toggle_text,
            "include_movies": self.include_movies,
            "include_series": self.include_series,
            "sort": self.sort_label,
        }

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _range_message(self) -> str:
        return f"Year must be between {MIN_YEAR} and {self.max_year}"

    def _accept_year_text(self, text: Optional[str]) -> bool:
        candidate = (text or "").strip()
        if not YEAR_PATTERN.match(candidate):
            return False
        if len(candidate) == 4 and not MIN_YEAR <= int(candidate) <= self.max_year:
            self._warn("Invalid Year", self._range_message())
            return False
        return True

    def _complete_year(self, text: str) -> str:
        """Clear a partially typed year before it is used as a filter."""
        if text and len(text) < 4:
            self._warn("Invalid Year", self._range_message())
            return ""
        return text

    def _enforce_year_order(self) -> None:
        year_from = self._year_value(self.year_from_text)
        year_to = self._year_value(self.year_to_text)
        if year_from is None or year_to is None or year_from <= year_to:
            return
        self._warn("Invalid Year Range", "'Year from' cannot be after 'Year to'. Adjusting values.")
        self.year_from_text, self.year_to_text = self.year_to_text, self.year_from_text
        self._notify_criteria_changed()

    @staticmethod
    def _year_value(text: str) -> Optional[int]:
        text = (text or "").strip()
        if len(text) != 4 or not text.isdigit():
            return None
        return int(text)

    def _warn(self, title: str, message: str) -> None:
        if self.on_warning:
            self.on_warning(title, message)

    def _emit_state(self) -> None:
        if self.on_state_changed:
            self.on_state_changed(self.view_state())

    def _notify_criteria_changed(self) -> None:
        if not self.on_criteria_changed:
            return
        try:
            criteria = self.build_criteria()
        except ValidationError:
            # half-edited forms are normal while typing; only search() reports them
            return
        self.on_criteria_changed(criteria)


__all__ = ["SearchFormVM", "MIN_YEAR", "GENRE_PLACEHOLDER", "format_rating"]
