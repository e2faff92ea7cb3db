"""Form state for adding a title or editing one already in the catalog.

Every field is kept as the raw text of its entry. :meth:`EditContentVM.to_draft`
turns the text into a :class:`ContentDraft` and reports the first field it
cannot read; catalog rules such as year ranges and duplicates are checked
when the draft is saved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..domain.entities import Content, ContentDraft, ContentType, Movie, Series, content_key
from ..domain.errors import ValidationError
from ..domain.genres import Genre

EDITABLE_GENRES: Tuple[Genre, ...] = tuple(g for g in Genre if g is not Genre.UNKNOWN)
TYPE_OPTIONS: Tuple[str, ...] = tuple(t.label for t in ContentType)


def _int_field(text: str, label: str) -> int:
    value = text.strip()
    if not value.isdigit():
        raise ValidationError(f"{label} must be a whole number.")
    return int(value)


@dataclass
class EditContentVM:
    content_type: ContentType = ContentType.MOVIE
    key: Optional[str] = None

    title_text: str = ""
    year_text: str = ""
    rating_text: str = ""
    director_text: str = ""
    cast_text: str = ""
    length_text: str = ""
    end_year_text: str = ""
    genres: List[Genre] = field(default_factory=list)

    on_save: Optional[Callable[[ContentDraft, Optional[str]], Any]] = None
    on_delete: Optional[Callable[[str], Any]] = None

    @classmethod
    def for_content(cls, content: Content, **callbacks: Any) -> "EditContentVM":
        if isinstance(content, Series):
            length = str(content.total_seasons)
            end_year = "" if content.end_year is None else str(content.end_year)
        else:
            length = str(content.duration_min) if isinstance(content, Movie) and content.duration_min else ""
            end_year = ""
        return cls(
            content_type=content.content_type,
            key=content_key(content),
            title_text=content.title,
            year_text=str(content.year),
            rating_text=f"{content.rating:.1f}",
            director_text=content.director,
            cast_text="; ".join(content.cast),
            length_text=length,
            end_year_text=end_year,
            genres=[g for g in content.genres if g is not Genre.UNKNOWN],
            **callbacks,
        )

    # ---- presentation ----
    @property
    def is_new(self) -> bool:
        return self.key is None

    @property
    def is_series(self) -> bool:
        return self.content_type is ContentType.SERIES

    @property
    def window_title(self) -> str:
        if self.is_new:
            return f"Add {self.content_type.label}"
        return f"Edit {self.title_text or self.content_type.label}"

    @property
    def length_label(self) -> str:
        return "Seasons" if self.is_series else "Runtime (min)"

    @property
    def director_label(self) -> str:
        return "Creator" if self.is_series else "Director"

    @staticmethod
    def genre_options() -> Tuple[str, ...]:
        return tuple(g.display_name for g in EDITABLE_GENRES)

    def to_dto(self) -> Dict:
        return {
            "window_title": self.window_title,
            "type": self.content_type.label,
            "type_options": TYPE_OPTIONS,
            "type_locked": not self.is_new,
            "title": self.title_text,
            "year": self.year_text,
            "rating": self.rating_text,
            "director": self.director_text,
            "director_label": self.director_label,
            "cast": self.cast_text,
            "length": self.length_text,
            "length_label": self.length_label,
            "end_year": self.end_year_text,
            "show_end_year": self.is_series,
            "genres": {g.display_name for g in self.genres},
            "can_delete": not self.is_new,
        }

    # ---- edits ----
    def set_content_type(self, label: str) -> None:
        if not self.is_new:
            raise ValidationError("A title cannot change between movie and series.")
        for content_type in ContentType:
            if content_type.label == label:
                self.content_type = content_type
                return
        raise ValidationError(f"Unknown content type: {label}")

    def set_genre(self, label: str, selected: bool) -> None:
        genre = next((g for g in EDITABLE_GENRES if g.display_name == label), None)
        if genre is None:
            raise ValidationError(f"Unknown genre: {label}")
        if selected and genre not in self.genres:
            self.genres.append(genre)
        elif not selected and genre in self.genres:
            self.genres.remove(genre)

    def update_fields(self, values: Dict[str, str]) -> None:
        """Copy entry texts (keys as in :meth:`to_dto`) into the form."""
        for name in ("title", "year", "rating", "director", "cast", "length", "end_year"):
            if name in values:
                setattr(self, f"{name}_text", values[name])

    # ---- conversion ----
    def to_draft(self) -> ContentDraft:
        """Raises ValidationError naming the first unreadable field."""
        year = _int_field(self.year_text, "Year")
        rating_raw = self.rating_text.strip()
        try:
            rating = float(rating_raw) if rating_raw else 0.0
        except ValueError as exc:
            raise ValidationError("Rating must be a number between 0 and 10.") from exc
        if not 0.0 <= rating <= 10.0:
            raise ValidationError("Rating must be a number between 0 and 10.")

        if self.is_series:
            length = _int_field(self.length_text, "Seasons")
            end_year = _int_field(self.end_year_text, "End year") if self.end_year_text.strip() else None
        else:
            length = _int_field(self.length_text, "Runtime") if self.length_text.strip() else 0
            end_year = None

        ordered = tuple(g for g in EDITABLE_GENRES if g in self.genres)
        cast = tuple(name.strip() for name in self.cast_text.split(";") if name.strip())
        return ContentDraft(
            content_type=self.content_type,
            title=self.title_text.strip(),
            year=year,
            genres=ordered,
            rating=round(rating, 1),
            director=self.director_text.strip(),
            cast=cast,
            length=length,
            end_year=end_year,
        )

    # ---- commands ----
    def cmd_save(self) -> Any:
        """Returns the save callback's result, falsy when nothing was stored."""
        draft = self.to_draft()
        if self.on_save:
            return self.on_save(draft, self.key)
        return None

    def cmd_delete(self) -> Any:
        if self.key is not None and self.on_delete:
            return self.on_delete(self.key)
        return None


__all__ = ["EDITABLE_GENRES", "EditContentVM", "TYPE_OPTIONS"]
