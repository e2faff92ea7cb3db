from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..domain.entities import WatchlistEntry

# key, title, type, added, watched, notes
WatchlistRow = Tuple[str, str, str, str, str, str]


@dataclass
class WatchlistVM:
    on_update: Optional[Callable[[Dict], None]] = None
    on_toggle_watched: Optional[Callable[[str], None]] = None
    on_remove: Optional[Callable[[str], None]] = None
    on_open: Optional[Callable[[str], None]] = None

    entries: List[WatchlistEntry] = field(default_factory=list)
    hide_watched: bool = False

    def set_entries(self, entries: Sequence[WatchlistEntry]) -> None:
        self.entries = sorted(entries, key=lambda e: e.added_at, reverse=True)
        self._emit()

    def set_hide_watched(self, flag: bool) -> None:
        self.hide_watched = bool(flag)
        self._emit()

    def rows(self) -> List[WatchlistRow]:
        return [
            (
                entry.content_key,
                entry.title,
                entry.content_type.label,
                entry.added_at.strftime("%Y-%m-%d"),
                "Yes" if entry.watched else "No",
                entry.notes,
            )
            for entry in self.entries
            if not (self.hide_watched and entry.watched)
        ]

    def summary(self) -> str:
        watched = sum(1 for e in self.entries if e.watched)
        return f"{len(self.entries)} titles, {watched} watched"

    def cmd_toggle_watched(self, key: str) -> None:
        if self.on_toggle_watched:
            self.on_toggle_watched(key)

    def cmd_remove(self, key: str) -> None:
        if self.on_remove:
            self.on_remove(key)

    def cmd_open(self, key: str) -> None:
        if self.on_open:
            self.on_open(key)

    def _emit(self) -> None:
        if self.on_update:
            self.on_update({"rows": self.rows(), "summary": self.summary()})


__all__ = ["WatchlistVM"]
