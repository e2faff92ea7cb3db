from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from ..domain.entities import Content

Listener = Callable[[Any], None]

CATALOG_LOADED = "catalog.loaded"
WATCHLIST_CHANGED = "watchlist.changed"
RATING_CHANGED = "rating.changed"
CATALOG_CHANGED = "catalog.changed"


@dataclass(frozen=True)
class CatalogChange:
    """Payload of CATALOG_CHANGED; ``content`` is None once the title is deleted."""

    key: str
    content: Optional[Content]
    previous_title: str = ""

    @property
    def deleted(self) -> bool:
        return self.content is None


class AppEventBus:
    """Synchronous publish/subscribe hub between controllers."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}
        self._log = logging.getLogger(__name__)

    def subscribe(self, event: str, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that unsubscribes it."""
        self._listeners.setdefault(event, []).append(listener)
        return lambda: self.unsubscribe(event, listener)

    def unsubscribe(self, event: str, listener: Listener) -> None:
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)

    def publish(self, event: str, payload: Any = None) -> int:
        """Deliver ``payload`` to every listener of ``event``; returns failures."""
        failures = 0
        for listener in list(self._listeners.get(event, [])):
            try:
                listener(payload)
            except Exception:
                failures += 1
                self._log.exception("Listener for %s failed", event)
        return failures

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, []))


__all__ = [
    "AppEventBus",
    "CatalogChange",
    "CATALOG_CHANGED",
    "CATALOG_LOADED",
    "WATCHLIST_CHANGED",
    "RATING_CHANGED",
]
