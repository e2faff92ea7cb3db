"""Per-title actions: details dialog, user ratings, the rated list and the watchlist."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from ..domain.entities import Content, content_key
from ..domain.ports import StoragePort, UseCaseError
from ..usecases.manage_watchlist import ManageWatchlist
from ..usecases.rate_content import DeleteRating, LoadRatings, RateContent, summarize_scores
from ..viewmodels.details_vm import DetailsVM
from ..viewmodels.rated_vm import RatedVM
from ..viewmodels.watchlist_vm import WatchlistVM
from .data_manager import DataManager
from .event_bus import (
    CATALOG_CHANGED,
    CATALOG_LOADED,
    RATING_CHANGED,
    WATCHLIST_CHANGED,
    AppEventBus,
    CatalogChange,
)

AlertFn = Callable[[str, str], None]


class LibraryController:
    """Opens details dialogs and applies rating/watchlist commands."""

    def __init__(
        self,
        *,
        data_manager: DataManager,
        storage: StoragePort,
        watchlist: ManageWatchlist,
        event_bus: AppEventBus,
        watchlist_vm: WatchlistVM,
        rated_vm: RatedVM,
        open_details_dialog: Callable[[DetailsVM], Any],
        show_error: AlertFn,
        set_status: Callable[[str], None],
        open_editor: Optional[Callable[[Content], Any]] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.data_manager = data_manager
        self.storage = storage
        self.watchlist = watchlist
        self.event_bus = event_bus
        self.watchlist_vm = watchlist_vm
        self.rated_vm = rated_vm
        self._open_details_dialog = open_details_dialog
        self._show_error = show_error
        self._set_status = set_status
        self.open_editor = open_editor
        self.active_details: Optional[DetailsVM] = None

        watchlist_vm.on_toggle_watched = self.toggle_watched
        watchlist_vm.on_remove = self.remove_from_watchlist
        watchlist_vm.on_open = self.open_details_by_key
        rated_vm.on_open = self.open_details_by_key
        rated_vm.on_remove = self.clear_rating
        event_bus.subscribe(CATALOG_LOADED, lambda _report: self.refresh_ratings())
        event_bus.subscribe(CATALOG_CHANGED, self._on_catalog_changed)

    # ------------------------------------------------------------------
    # Details
    # ------------------------------------------------------------------
    def open_details(self, content: Content) -> Optional[DetailsVM]:
        key = content_key(content)
        try:
            ratings = LoadRatings(self.storage)()
            in_watchlist = self.watchlist.is_in_watchlist(key)
        except UseCaseError as err:
            self._fail("Details Error", err)
            return None
        vm = DetailsVM(
            content=content,
            user_rating=ratings.get(key),
            rating_summary=summarize_scores(r.score for r in ratings.values()),
            in_watchlist=in_watchlist,
            on_rate=self.rate,
            on_clear_rating=self.clear_rating,
            on_toggle_watchlist=self.toggle_watchlist,
            on_edit=self._on_edit,
        )
        self.active_details = vm
        self._open_details_dialog(vm)
        return vm

    def open_details_by_key(self, key: str) -> Optional[DetailsVM]:
        content = self.data_manager.find_content(key)
        if content is None:
            self._show_error("Details Error", "This title is no longer in the catalog.")
            return None
        return self.open_details(content)

    # ------------------------------------------------------------------
    # Ratings
    # ------------------------------------------------------------------
    def rate(self, key: str, score: int, review: str = "") -> bool:
        try:
            rating = RateContent(self.storage)(key, score, review)
        except UseCaseError as err:
            self._fail("Rating Error", err)
            return False
        if self.active_details is not None and self.active_details.key == key:
            self.active_details.user_rating = rating
        self.event_bus.publish(RATING_CHANGED, rating)
        self._set_status(f"Saved your rating ({score}/10)")
        self.refresh_ratings()
        return True

    def clear_rating(self, key: str) -> bool:
        try:
            removed = DeleteRating(self.storage)(key)
        except UseCaseError as err:
            self._fail("Rating Error", err)
            return False
        if self.active_details is not None and self.active_details.key == key:
            self.active_details.user_rating = None
        if removed:
            self.event_bus.publish(RATING_CHANGED, None)
            self._set_status("Rating removed")
            self.refresh_ratings()
        return removed

    def ratings_label(self) -> str:
        try:
            ratings = LoadRatings(self.storage)()
        except UseCaseError as err:
            self._log.warning("Ratings unavailable: %s", err.message)
            return ""
        summary = summarize_scores(r.score for r in ratings.values())
        if not summary.count:
            return "You have not rated any titles yet"
        return f"You rated {summary.count} titles, average {summary.mean_label}/10"

    def refresh_ratings(self) -> None:
        """Re-render the rated list and the open dialog's score distribution."""
        try:
            ratings = LoadRatings(self.storage)()
        except UseCaseError as err:
            self._fail("Rating Error", err)
            return
        titles: Dict[str, str] = {}
        for key in ratings:
            content = self.data_manager.find_content(key)
            if content is not None:
                titles[key] = content.title
        summary = summarize_scores(r.score for r in ratings.values())
        if self.active_details is not None:
            self.active_details.rating_summary = summary
        self.rated_vm.set_ratings(ratings, titles, summary)

    # ------------------------------------------------------------------
    # Watchlist
    # ------------------------------------------------------------------
    def toggle_watchlist(self, content: Content) -> bool:
        key = content_key(content)
        try:
            if self.watchlist.is_in_watchlist(key):
                self.watchlist.remove(key)
                added = False
            else:
                self.watchlist.add(content)
                added = True
        except UseCaseError as err:
            self._fail("Watchlist Error", err)
            return False
        if self.active_details is not None and self.active_details.key == key:
            self.active_details.in_watchlist = added
        self._set_status(f"{'Added' if added else 'Removed'} '{content.title}' {'to' if added else 'from'} your watchlist")
        self.refresh_watchlist()
        return added

    def toggle_watched(self, key: str) -> None:
        try:
            self.watchlist.toggle_watched(key)
        except UseCaseError as err:
            self._fail("Watchlist Error", err)
            return
        self.refresh_watchlist()

    def remove_from_watchlist(self, key: str) -> None:
        try:
            entry = self.watchlist.remove(key)
        except UseCaseError as err:
            self._fail("Watchlist Error", err)
            return
        self._set_status(f"Removed '{entry.title}' from your watchlist")
        self.refresh_watchlist()

    def refresh_watchlist(self) -> None:
        try:
            entries = self.watchlist.entries()
        except UseCaseError as err:
            self._fail("Watchlist Error", err)
            return
        self.watchlist_vm.set_entries(entries)
        self.event_bus.publish(WATCHLIST_CHANGED, entries)

    # ------------------------------------------------------------------
    # Catalog edits
    # ------------------------------------------------------------------
    def _on_edit(self, content: Content) -> None:
        if self.open_editor is not None:
            self.open_editor(content)

    def _on_catalog_changed(self, change: CatalogChange) -> None:
        """Drop or retitle the user's data for an edited title."""
        try:
            if change.deleted:
                if DeleteRating(self.storage)(change.key):
                    self.event_bus.publish(RATING_CHANGED, None)
                if self.watchlist.is_in_watchlist(change.key):
                    self.watchlist.remove(change.key)
            elif change.content.title != change.previous_title:
                self.watchlist.retitle(change.key, change.content.title)
        except UseCaseError as err:
            self._fail("Library Error", err)
        details = self.active_details
        if details is not None and details.key == change.key and change.content is not None:
            details.content = change.content
        self.refresh_watchlist()
        self.refresh_ratings()

    # ------------------------------------------------------------------
    def _fail(self, title: str, err: UseCaseError) -> None:
        self._log.error("%s [%s]: %s", title, err.code, err.message)
        self._show_error(title, err.message)


__all__ = ["LibraryController"]
