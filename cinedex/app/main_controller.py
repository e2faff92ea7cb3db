"""Startup and navigation controller for the main window.

``initialize`` runs once: it makes sure the catalog is loaded, builds the
content views through the UI coordinator and finally shows the start view on
the next idle cycle of the event loop. Every failure at this boundary is
logged and surfaced as an alert dialog; nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..domain.ports import UseCaseError
from .event_bus import CATALOG_LOADED
from .scheduler import UiScheduler
from .service_locator import ServiceLocator
from .ui_coordinator import UICoordinator

AlertFn = Callable[[str, str], None]


class MainController:
    """Guarded initialization plus view switching for the content host."""

    def __init__(
        self,
        *,
        locator: ServiceLocator,
        scheduler: UiScheduler,
        show_error: AlertFn,
        set_status: Callable[[str], None],
        on_view_shown: Optional[Callable[[str], None]] = None,
        start_view: str = UICoordinator.HOME,
    ) -> None:
        """Store collaborators.

        Args:
            locator: Service registry providing data manager and UI coordinator.
            scheduler: UI-thread scheduler used to defer the first view switch.
            show_error: Modal alert callback ``(title, message)``.
            set_status: Status bar callback.
            on_view_shown: Optional hook after a successful view switch.
            start_view: View shown once initialization completes.
        """
        self._log = logging.getLogger(__name__)
        self.locator = locator
        self.scheduler = scheduler
        self._show_error = show_error
        self._set_status = set_status
        self._on_view_shown = on_view_shown
        self.start_view = start_view
        self.is_initialized = False
        self.is_initializing = False

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------
    def initialize(self) -> bool:
        """Initialize services and views once.

        Returns:
            True when this call completed initialization; False when it was
            skipped (already initialized or in progress) or failed.
        """
        if self.is_initialized or self.is_initializing:
            self._log.debug("initialize() skipped (initialized=%s, in progress=%s)", self.is_initialized, self.is_initializing)
            return False
        self.is_initializing = True
        try:
            self.initialize_services()
            self._ensure_views()
            self.is_initialized = True
            # first view switch waits for the event loop to finish this callback
            self.scheduler.run_later(lambda: self.show_view(self.start_view))
            return True
        except UseCaseError as err:
            self._log.error("Initialization failed [%s]: %s", err.code, err.message)
            self._show_error("Initialization Error", err.message)
        except Exception as exc:
            self._log.exception("Unexpected initialization failure")
            self._show_error("Initialization Error", f"Failed to initialize application: {exc}")
        finally:
            self.is_initializing = False
        return False

    def initialize_services(self) -> None:
        """Load catalog data if needed and make sure the UI coordinator exists.

        Raises:
            UseCaseError: ``INIT_FAILED`` wrapping the underlying cause.
        """
        try:
            data_manager = self.locator.data_manager
            if not data_manager.is_data_loaded():
                report = data_manager.load_all_data()
                self._set_status(report.summary())
                self.locator.event_bus.publish(CATALOG_LOADED, report)
            # raises UI_NOT_ATTACHED until the main window host is attached
            self.locator.ui_coordinator
        except UseCaseError as err:
            raise UseCaseError("INIT_FAILED", f"Failed to initialize services: {err.message}") from err
        except Exception as exc:
            raise UseCaseError("INIT_FAILED", f"Failed to initialize services: {exc}") from exc

    def _ensure_views(self) -> None:
        coordinator = self.locator.ui_coordinator
        if coordinator.views_loaded:
            return
        if not coordinator.load_and_initialize_views():
            # partial UI is still usable; missing views alert when opened
            self._log.warning("Some views failed to load: %s", ", ".join(coordinator.failed_views))

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def show_view(self, name: str) -> bool:
        try:
            self.locator.ui_coordinator.show(name)
        except UseCaseError as err:
            self._log.warning("Cannot show view '%s': %s", name, err.message)
            self._show_error("Navigation Error", err.message)
            return False
        self._set_status(f"{name.title()} view")
        if self._on_view_shown:
            self._on_view_shown(name)
        return True

    def reload_catalog(self) -> bool:
        """Re-read all catalog files and notify subscribers."""
        try:
            report = self.locator.data_manager.load_all_data()
        except UseCaseError as err:
            self._log.error("Catalog reload failed [%s]: %s", err.code, err.message)
            self._show_error("Reload Error", err.message)
            return False
        except Exception as exc:
            self._log.exception("Unexpected catalog reload failure")
            self._show_error("Reload Error", f"Failed to reload the catalog: {exc}")
            return False
        self._set_status(report.summary())
        self.locator.event_bus.publish(CATALOG_LOADED, report)
        return True


__all__ = ["MainController"]
