from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, Dict, List, Mapping, Optional

from ..domain.entities import Content, WatchlistEntry, content_key
from ..domain.errors import DuplicateEntryError, EntityNotFoundError
from ..domain.ports import StoragePort
from .error_mapping import map_error


def entry_to_dict(entry: WatchlistEntry) -> Dict:
    return {
        "content_key": entry.content_key,
        "title": entry.title,
        "added_at": entry.added_at.isoformat(timespec="seconds"),
        "watched": entry.watched,
        "notes": entry.notes,
    }


def entry_from_dict(payload: Mapping) -> WatchlistEntry:
    added_at = payload.get("added_at")
    return WatchlistEntry(
        content_key=str(payload["content_key"]),
        title=str(payload["title"]),
        added_at=datetime.fromisoformat(added_at) if added_at else datetime.now(),
        watched=bool(payload.get("watched", False)),
        notes=str(payload.get("notes") or ""),
    )


@dataclass
class ManageWatchlist:
    """Watchlist operations for the local user, persisted after every change."""

    storage: StoragePort
    on_changed: Optional[Callable[[List[WatchlistEntry]], None]] = None

    def __post_init__(self) -> None:
        self._log = logging.getLogger(__name__)

    def entries(self) -> List[WatchlistEntry]:
        try:
            raw = self.storage.load_watchlist()
        except Exception as exc:
            raise map_error(exc, default_code="LOAD_WATCHLIST_FAILED") from exc
        result: List[WatchlistEntry] = []
        for item in raw:
            try:
                result.append(entry_from_dict(item))
            except (KeyError, TypeError, ValueError) as exc:
                self._log.warning("Ignoring malformed watchlist entry %r: %s", item, exc)
        return result

    def is_in_watchlist(self, key: str) -> bool:
        return any(entry.content_key == key for entry in self.entries())

    def add(self, content: Content, notes: str = "") -> WatchlistEntry:
        key = content_key(content)

        def mutate(entries: List[WatchlistEntry]) -> WatchlistEntry:
            if any(entry.content_key == key for entry in entries):
                raise DuplicateEntryError(f"'{content.title}' is already in your watchlist.")
            entry = WatchlistEntry(content_key=key, title=content.title, notes=notes.strip())
            entries.append(entry)
            return entry

        return self._update(mutate, "ADD_WATCHLIST_FAILED")

    def remove(self, key: str) -> WatchlistEntry:
        def mutate(entries: List[WatchlistEntry]) -> WatchlistEntry:
            index = self._index_of(entries, key)
            return entries.pop(index)

        return self._update(mutate, "REMOVE_WATCHLIST_FAILED")

    def toggle_watched(self, key: str) -> WatchlistEntry:
        def mutate(entries: List[WatchlistEntry]) -> WatchlistEntry:
            index = self._index_of(entries, key)
            entries[index] = replace(entries[index], watched=not entries[index].watched)
            return entries[index]

        return self._update(mutate, "UPDATE_WATCHLIST_FAILED")

    def set_notes(self, key: str, notes: str) -> WatchlistEntry:
        def mutate(entries: List[WatchlistEntry]) -> WatchlistEntry:
            index = self._index_of(entries, key)
            entries[index] = replace(entries[index], notes=(notes or "").strip())
            return entries[index]

        return self._update(mutate, "UPDATE_WATCHLIST_FAILED")

    def retitle(self, key: str, title: str) -> Optional[WatchlistEntry]:
        """Follow a catalog title change; returns None when ``key`` is not listed."""
        if not self.is_in_watchlist(key):
            return None

        def mutate(entries: List[WatchlistEntry]) -> WatchlistEntry:
            index = self._index_of(entries, key)
            entries[index] = replace(entries[index], title=title)
            return entries[index]

        return self._update(mutate, "UPDATE_WATCHLIST_FAILED")

    # ------------------------------------------------------------------
    @staticmethod
    def _index_of(entries: List[WatchlistEntry], key: str) -> int:
        for index, entry in enumerate(entries):
            if entry.content_key == key:
                return index
        raise EntityNotFoundError("Watchlist entry", key)

    def _update(self, mutate: Callable[[List[WatchlistEntry]], WatchlistEntry], code: str) -> WatchlistEntry:
        entries = self.entries()
        try:
            changed = mutate(entries)
            self.storage.save_watchlist([entry_to_dict(e) for e in entries])
        except Exception as exc:
            raise map_error(exc, default_code=code) from exc
        self._log.info("Watchlist updated (%s): %d entries", changed.content_key, len(entries))
        if self.on_changed:
            self.on_changed(list(entries))
        return changed


__all__ = ["ManageWatchlist", "entry_from_dict", "entry_to_dict"]
