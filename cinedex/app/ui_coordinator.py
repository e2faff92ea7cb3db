from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from ..domain.ports import UseCaseError

ViewFactory = Callable[[Any], Any]


class UICoordinator:
    """Builds the named content views and swaps them inside one host widget.

    Views are created once by :meth:`load_and_initialize_views` and then
    shown with ``pack``/``pack_forget`` so their widget state survives
    navigation.
    """

    HOME = "home"

    def __init__(self, host: Any) -> None:
        self._log = logging.getLogger(__name__)
        self.host = host
        self._factories: Dict[str, ViewFactory] = {}
        self._views: Dict[str, Any] = {}
        self._failed: List[str] = []
        self.current_name: Optional[str] = None

    def register_view(self, name: str, factory: ViewFactory) -> None:
        self._factories[name] = factory
        self._views.pop(name, None)

    @property
    def views_loaded(self) -> bool:
        return bool(self._factories) and all(name in self._views for name in self._factories)

    @property
    def failed_views(self) -> List[str]:
        return list(self._failed)

    def load_and_initialize_views(self) -> bool:
        """Build every registered view that is not built yet.

        Returns:
            True when all views are available, False if any factory failed.
        """
        self._failed = []
        for name, factory in self._factories.items():
            if name in self._views:
                continue
            try:
                self._views[name] = factory(self.host)
            except Exception:
                self._log.exception("Failed to build view '%s'", name)
                self._failed.append(name)
        if self._failed:
            self._log.warning("Views not loaded: %s", ", ".join(self._failed))
        else:
            self._log.debug("Loaded views: %s", ", ".join(self._views))
        return not self._failed

    def get_view(self, name: str) -> Any:
        if name not in self._factories:
            raise UseCaseError("UNKNOWN_VIEW", f"Unknown view: {name}")
        view = self._views.get(name)
        if view is None:
            raise UseCaseError("VIEW_NOT_LOADED", f"View '{name}' could not be loaded.")
        return view

    @property
    def home_view(self) -> Any:
        return self.get_view(self.HOME)

    def show(self, name: str) -> Any:
        """Make ``name`` the only visible child of the content host."""
        view = self.get_view(name)
        if self.current_name == name:
            return view
        if self.current_name is not None:
            previous = self._views.get(self.current_name)
            if previous is not None:
                previous.pack_forget()
        view.pack(fill="both", expand=True)
        self.current_name = name
        return view


__all__ = ["UICoordinator"]
