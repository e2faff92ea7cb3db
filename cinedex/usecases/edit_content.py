"""Add, edit and delete catalog titles in memory.

Edits are not written back to the catalog text files, so the next reload
restores the files' content. Ids stay stable across edits so ratings and
watchlist entries keep pointing at the edited title.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..adapters.catalog_files import FIRST_FILM_YEAR, FIRST_SERIES_YEAR, build_seasons
from ..domain.entities import Content, ContentDraft, ContentType, Movie, Series, content_key
from ..domain.errors import DuplicateEntryError, EntityNotFoundError, ValidationError
from ..domain.ports import CatalogEditPort
from .error_mapping import map_error

_log = logging.getLogger(__name__)

MAX_SEASONS = 99


def year_bounds(content_type: ContentType, current_year: int) -> tuple[int, int]:
    if content_type is ContentType.MOVIE:
        return FIRST_FILM_YEAR, current_year + 2
    return FIRST_SERIES_YEAR, current_year + 1


def check_draft(draft: ContentDraft, current_year: int) -> None:
    """Raise ValidationError for the first field the catalog would not accept."""
    if not draft.title.strip():
        raise ValidationError("Title is required.")
    low, high = year_bounds(draft.content_type, current_year)
    if not low <= draft.year <= high:
        raise ValidationError(f"Year must be between {low} and {high}.")
    if not draft.genres:
        raise ValidationError("Select at least one genre.")
    if draft.content_type is ContentType.MOVIE:
        if draft.length < 0:
            raise ValidationError("Runtime cannot be negative.")
        return
    if not 1 <= draft.length <= MAX_SEASONS:
        raise ValidationError(f"Seasons must be between 1 and {MAX_SEASONS}.")
    if draft.end_year is not None and not draft.year <= draft.end_year <= high:
        raise ValidationError(f"End year must be between {draft.year} and {high}.")


@dataclass
class SaveContent:
    """Store a new title, or replace an existing one keeping its id and awards."""

    catalog: CatalogEditPort
    current_year: Optional[int] = None

    def __call__(self, draft: ContentDraft, key: Optional[str] = None) -> Content:
        try:
            existing = self._existing(key)
            if existing is not None and existing.content_type is not draft.content_type:
                raise ValidationError("A title cannot change between movie and series.")
            check_draft(draft, self.current_year or date.today().year)
            self._check_duplicate(draft, existing)
            saved = self.catalog.save_content(self._build(draft, existing))
        except Exception as exc:
            raise map_error(exc, default_code="SAVE_CONTENT_FAILED") from exc
        _log.info("%s %s '%s'", "Updated" if existing else "Added", content_key(saved), saved.title)
        return saved

    def _existing(self, key: Optional[str]) -> Optional[Content]:
        if not key:
            return None
        item = self.catalog.find_content(key)
        if item is None:
            raise EntityNotFoundError("Title", key)
        return item

    def _check_duplicate(self, draft: ContentDraft, existing: Optional[Content]) -> None:
        pool = self.catalog.all_movies() if draft.content_type is ContentType.MOVIE else self.catalog.all_series()
        title = draft.title.strip().lower()
        for item in pool:
            if item is existing:
                continue
            if item.title.lower() == title and item.year == draft.year:
                raise DuplicateEntryError(f"'{item.title}' ({item.year}) is already in the catalog.")

    def _build(self, draft: ContentDraft, existing: Optional[Content]) -> Content:
        common = dict(
            title=draft.title.strip(),
            year=draft.year,
            genres=list(draft.genres),
            director=draft.director.strip(),
            rating=draft.rating,
            cast=[name.strip() for name in draft.cast if name.strip()],
            awards=list(existing.awards) if existing else [],
            box_office=existing.box_office if existing else "",
            id=existing.id if existing else 0,
        )
        if draft.content_type is ContentType.MOVIE:
            return Movie(duration_min=draft.length, **common)

        seasons = None
        if isinstance(existing, Series):
            unchanged = (existing.total_seasons, existing.year, existing.end_year) == (
                draft.length,
                draft.year,
                draft.end_year,
            )
            if unchanged:
                seasons = existing.seasons
        if seasons is None:
            seasons = build_seasons(common["title"], draft.length, draft.year, draft.end_year)
        return Series(
            end_year=draft.end_year,
            seasons=seasons,
            nominations=existing.nominations if isinstance(existing, Series) else 0,
            **common,
        )


@dataclass
class DeleteContent:
    catalog: CatalogEditPort

    def __call__(self, key: str) -> Content:
        try:
            item = self.catalog.find_content(key)
            if item is None or not self.catalog.delete_content(key):
                raise EntityNotFoundError("Title", key)
        except Exception as exc:
            raise map_error(exc, default_code="DELETE_CONTENT_FAILED") from exc
        _log.info("Deleted %s '%s'", key, item.title)
        return item


__all__ = ["DeleteContent", "SaveContent", "check_draft", "year_bounds"]
