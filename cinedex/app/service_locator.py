"""Process-wide registry of shared services.

Controllers ask the locator for the data manager, the search use case, the
UI coordinator and the other singletons instead of building them. Services
are constructed lazily on first access and cached until :meth:`reset`.

Call chain:
    ``cinedex.app.main.App`` configures the locator at startup and attaches
    the root window; controllers call :meth:`ServiceLocator.instance` later.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

from ..adapters.catalog_files import CatalogFiles
from ..adapters.storage_local import StorageLocal
from ..domain.ports import UseCaseError
from ..usecases.manage_watchlist import ManageWatchlist
from ..usecases.search_catalog import SearchCatalog
from .data_manager import DataManager
from .event_bus import AppEventBus
from .ui_coordinator import UICoordinator

RegistryKey = Tuple[Hashable, Optional[str]]


def default_storage_root() -> str:
    return os.environ.get("CINEDEX_STORAGE_ROOT") or os.path.join(os.path.expanduser("~"), ".cinedex")


class ServiceLocator:
    """Lazily constructed, cached application services."""

    _instance: Optional["ServiceLocator"] = None

    def __init__(self, *, data_dir: Optional[str] = None, storage_root: Optional[str] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.data_dir = data_dir or os.environ.get("CINEDEX_DATA_DIR") or None
        self.storage_root = storage_root or default_storage_root()
        self._root: Any = None
        self._registry: Dict[RegistryKey, Any] = {}
        self._factories: Dict[str, Callable[[], Any]] = {
            "data_manager": lambda: DataManager(CatalogFiles(self.data_dir)),
            "search": lambda: SearchCatalog(self.data_manager),
            "storage": lambda: StorageLocal(root_dir=self.storage_root),
            "event_bus": AppEventBus,
            "watchlist": lambda: ManageWatchlist(self.storage),
            "ui_coordinator": self._build_ui_coordinator,
        }

    # ------------------------------------------------------------------
    # Singleton access
    # ------------------------------------------------------------------
    @classmethod
    def instance(cls) -> "ServiceLocator":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def configure(cls, *, data_dir: Optional[str] = None, storage_root: Optional[str] = None) -> "ServiceLocator":
        """Replace the process-wide locator (startup and tests)."""
        cls._instance = cls(data_dir=data_dir, storage_root=storage_root)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------
    def register(self, key: Hashable, service: Any, qualifier: Optional[str] = None) -> None:
        self._registry[(key, qualifier)] = service
        self._log.debug("Registered service %r%s", key, f" [{qualifier}]" if qualifier else "")

    def get(self, key: Hashable, qualifier: Optional[str] = None) -> Any:
        """Return a registered or built-in service.

        Raises:
            UseCaseError: ``SERVICE_NOT_FOUND`` when nothing is registered
                under ``key``/``qualifier`` and no factory exists.
        """
        entry = (key, qualifier)
        if entry in self._registry:
            return self._registry[entry]
        if qualifier is None and isinstance(key, str) and key in self._factories:
            service = self._factories[key]()
            self._registry[entry] = service
            return service
        label = getattr(key, "__name__", key)
        suffix = f" [{qualifier}]" if qualifier else ""
        raise UseCaseError("SERVICE_NOT_FOUND", f"Service not found in the registry: {label}{suffix}")

    def has(self, key: Hashable, qualifier: Optional[str] = None) -> bool:
        return (key, qualifier) in self._registry

    def reset(self) -> None:
        """Drop every cached service; the next access rebuilds them."""
        self._registry.clear()

    # ------------------------------------------------------------------
    # Typed shortcuts
    # ------------------------------------------------------------------
    @property
    def data_manager(self) -> DataManager:
        return self.get("data_manager")

    @property
    def search(self) -> SearchCatalog:
        return self.get("search")

    @property
    def storage(self) -> StorageLocal:
        return self.get("storage")

    @property
    def event_bus(self) -> AppEventBus:
        return self.get("event_bus")

    @property
    def watchlist(self) -> ManageWatchlist:
        return self.get("watchlist")

    @property
    def ui_coordinator(self) -> UICoordinator:
        return self.get("ui_coordinator")

    def attach_root(self, root: Any) -> None:
        """Remember the widget that hosts swappable content views."""
        self._root = root
        self._registry.pop(("ui_coordinator", None), None)

    def _build_ui_coordinator(self) -> UICoordinator:
        if self._root is None:
            raise UseCaseError("UI_NOT_ATTACHED", "The main window must be attached before views can be loaded.")
        return UICoordinator(self._root)


__all__ = ["ServiceLocator", "default_storage_root"]
