# cinedex/app/main.py
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

# ---- Views (UI-only) ----
from .views import dialogs
from .views.details_dialog import ContentDetailsDialog
from .views.edit_content_dialog import EditContentDialog
from .views.home_view import HomeView
from .views.main_window import MainWindowView
from .views.people_view import CelebritiesView
from .views.rated_view import RatedView
from .views.results_table import ResultsTable
from .views.search_view import SearchView
from .views.theme import apply_theme
from .views.watchlist_view import WatchlistView

# ---- ViewModels ----
from ..viewmodels.celebrities_vm import ROLE_FILTERS, CelebritiesVM
from ..viewmodels.details_vm import DetailsVM
from ..viewmodels.edit_content_vm import EditContentVM
from ..viewmodels.home_vm import HomeVM
from ..viewmodels.rated_vm import RatedVM
from ..viewmodels.results_vm import RESULT_COLUMNS, ResultsVM
from ..viewmodels.search_form_vm import SearchFormVM
from ..viewmodels.settings_vm import SettingsVM
from ..viewmodels.watchlist_vm import WatchlistVM

# ---- Adapters & controllers ----
from ..adapters.catalog_files import CatalogFiles
from ..adapters.storage_local import StorageLocal
from ..domain.errors import ValidationError
from ..utils import logging as logging_utils
from .browse_controller import BrowseController
from .editor_controller import EditorController
from .event_bus import CATALOG_CHANGED
from .library_controller import LibraryController
from .main_controller import MainController
from .scheduler import UiScheduler
from .search_controller import SearchController
from .service_locator import ServiceLocator, default_storage_root
from .settings_controller import SettingsController
from .ui_coordinator import UICoordinator

logging_utils.configure_root()


class App:
    """Bootstrap: wire views, view models, controllers and the service locator."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)

        # ---- Settings first: they decide the catalog folder and window size ----
        self.settings_vm = SettingsVM()
        self._storage_root = default_storage_root()
        self._storage = StorageLocal(root_dir=self._storage_root)
        settings_problem = self._load_user_settings()

        self.locator = ServiceLocator.configure(
            data_dir=self.settings_vm.data_dir or None,
            storage_root=self._storage_root,
        )
        self.locator.register("storage", self._storage)

        # ---- Main window ----
        self.win = MainWindowView(
            on_navigate=self._on_navigate,
            on_reload_catalog=self._on_reload_catalog,
            on_add_title=self._on_add_title,
            on_open_settings=self._on_open_settings,
            on_close=self._on_close,
            geometry=self.settings_vm.window_geometry,
        )
        apply_theme(self.win)
        self.scheduler = UiScheduler(self.win.after, self.win.after_cancel, self.win.after_idle)
        self.locator.attach_root(self.win.content_host)
        if settings_problem:
            self.win.show_toast(settings_problem)

        # Latest DTO per view; views may be built after their VM first emits.
        self._views: Dict[str, Any] = {}
        self._latest: Dict[str, Dict] = {}
        self._details_dialog: Optional[ContentDetailsDialog] = None
        self._edit_dialog: Optional[EditContentDialog] = None

        # ---- ViewModels ----
        self.home_vm = HomeVM(on_update=lambda dto: self._render("home", dto))
        self.movies_vm = ResultsVM(on_update=lambda dto: self._render("movies", dto))
        self.series_vm = ResultsVM(on_update=lambda dto: self._render("series", dto))
        self.results_vm = ResultsVM(on_update=lambda dto: self._render("search", dto))
        self.celebrities_vm = CelebritiesVM(on_update=lambda dto: self._render("celebrities", dto))
        self.watchlist_vm = WatchlistVM(on_update=lambda dto: self._render("watchlist", dto))
        self.rated_vm = RatedVM(on_update=lambda dto: self._render("rated", dto))
        self.form_vm = SearchFormVM(on_state_changed=self._apply_form_state)

        # ---- Controllers ----
        self.main_controller = MainController(
            locator=self.locator,
            scheduler=self.scheduler,
            show_error=self._show_error,
            set_status=self.win.set_status_message,
            on_view_shown=self._on_view_shown,
            start_view=self.settings_vm.last_view,
        )
        self.search_controller = SearchController(
            search=self.locator.search,
            form_vm=self.form_vm,
            results_vm=self.results_vm,
            scheduler=self.scheduler,
            show_error=self._show_error,
            show_warning=self._show_warning,
            set_status=self.win.set_status_message,
            live_search=self.settings_vm.live_search,
            live_delay_ms=self.settings_vm.live_search_delay_ms,
        )
        self.library = LibraryController(
            data_manager=self.locator.data_manager,
            storage=self._storage,
            watchlist=self.locator.watchlist,
            event_bus=self.locator.event_bus,
            watchlist_vm=self.watchlist_vm,
            rated_vm=self.rated_vm,
            open_details_dialog=self._open_details_dialog,
            show_error=self._show_error,
            set_status=self.win.set_status_message,
        )
        self.editor = EditorController(
            data_manager=self.locator.data_manager,
            event_bus=self.locator.event_bus,
            open_edit_dialog=self._open_edit_dialog,
            show_error=self._show_error,
            set_status=self.win.set_status_message,
            confirm=self._confirm,
            open_details=self.library.open_details,
        )
        self.library.open_editor = self.editor.open_edit
        self.browse = BrowseController(
            data_manager=self.locator.data_manager,
            event_bus=self.locator.event_bus,
            home_vm=self.home_vm,
            movies_vm=self.movies_vm,
            series_vm=self.series_vm,
            celebrities_vm=self.celebrities_vm,
            ratings_label=self.library.ratings_label,
        )
        self.settings_controller = SettingsController(
            win=self.win,
            settings_vm=self.settings_vm,
            storage=self._storage,
            apply_logging_preferences=self._apply_logging_preferences,
            on_data_dir_changed=self._on_data_dir_changed,
            on_live_search_changed=self._on_live_search_changed,
        )

        for vm in (self.home_vm, self.movies_vm, self.series_vm, self.results_vm):
            vm.on_open_details = self.library.open_details
        self.locator.event_bus.subscribe(CATALOG_CHANGED, lambda _change: self.search_controller.refresh_results())

        self._register_views(self.locator.ui_coordinator)
        self.form_vm.initialize_form()
        self.library.refresh_watchlist()
        self.library.refresh_ratings()
        self.main_controller.initialize()

    # ------------------------------------------------------------------
    # Settings & logging
    # ------------------------------------------------------------------
    def _load_user_settings(self) -> Optional[str]:
        """Apply persisted settings; returns a message when they were unusable."""
        problem: Optional[str] = None
        payload: Optional[Dict] = None
        try:
            payload = self._storage.load_user_settings()
        except (OSError, ValueError) as exc:
            problem = f"Could not load settings: {exc}"
        if payload is not None:
            try:
                self.settings_vm.apply_dict(payload)
            except ValueError as exc:
                problem = str(exc)
        if problem:
            self._log.warning(problem)
        self._apply_logging_preferences()
        return problem

    def _apply_logging_preferences(self) -> None:
        level = logging_utils.apply_gui_preferences(self.settings_vm.debug_logging)
        self._log.debug("Effective GUI log level: %s", logging_utils.level_name(level))

    def _save_user_settings(self) -> None:
        try:
            self._storage.save_user_settings(self.settings_vm.to_dict())
        except OSError as exc:
            self._log.warning("Could not save settings: %s", exc)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    def _register_views(self, coordinator: UICoordinator) -> None:
        coordinator.register_view("home", self._view_factory("home", lambda host: HomeView(
            host, on_open=self.home_vm.open,
        )))
        coordinator.register_view("movies", self._view_factory("movies", lambda host: ResultsTable(
            host, columns=RESULT_COLUMNS, on_open=self.movies_vm.open_details,
        )))
        coordinator.register_view("series", self._view_factory("series", lambda host: ResultsTable(
            host, columns=RESULT_COLUMNS, on_open=self.series_vm.open_details,
        )))
        coordinator.register_view("search", self._view_factory("search", self._build_search_view))
        coordinator.register_view("celebrities", self._view_factory("celebrities", lambda host: CelebritiesView(
            host,
            role_filters=ROLE_FILTERS,
            on_filter_changed=self.celebrities_vm.set_name_filter,
            on_role_changed=self.celebrities_vm.set_role_filter,
        )))
        coordinator.register_view("watchlist", self._view_factory("watchlist", lambda host: WatchlistView(
            host,
            on_open=self.watchlist_vm.cmd_open,
            on_toggle_watched=self.watchlist_vm.cmd_toggle_watched,
            on_remove=self.watchlist_vm.cmd_remove,
            on_hide_watched=self.watchlist_vm.set_hide_watched,
        )))
        coordinator.register_view("rated", self._view_factory("rated", lambda host: RatedView(
            host,
            on_open=self.rated_vm.cmd_open,
            on_remove=self.rated_vm.cmd_remove,
            on_sort=self.rated_vm.set_sort,
        )))

    def _view_factory(self, name: str, build: Callable[[Any], Any]) -> Callable[[Any], Any]:
        def factory(host: Any) -> Any:
            view = build(host)
            self._views[name] = view
            if name in self._latest:
                self._render(name, self._latest[name])
            return view

        return factory

    def _build_search_view(self, host: Any) -> SearchView:
        vm = self.form_vm
        view = SearchView(
            host,
            columns=RESULT_COLUMNS,
            on_open_result=self.results_vm.open_details,
            genres=vm.genre_options(),
            sort_options=vm.sort_options(),
            on_title_changed=self.search_controller.on_title_edited,
            on_keywords_changed=vm.set_keywords,
            on_year_from_edit=vm.set_year_from_text,
            on_year_to_edit=vm.set_year_to_text,
            on_year_from_focus_lost=vm.year_from_focus_lost,
            on_year_to_focus_lost=vm.year_to_focus_lost,
            on_rating_changed=vm.set_rating,
            on_genre_toggled=vm.toggle_genre,
            on_toggle_dropdown=vm.toggle_dropdown,
            on_include_movies=vm.set_include_movies,
            on_include_series=vm.set_include_series,
            on_sort_changed=vm.set_sort,
            on_search=vm.search,
            on_reset=self.search_controller.on_reset,
        )
        view.apply_form_state(vm.view_state())
        return view

    def _render(self, name: str, dto: Dict) -> None:
        self._latest[name] = dto
        view = self._views.get(name)
        if view is None:
            return
        if name == "search":
            view.render_results(dto)
        else:
            view.render(dto)

    def _apply_form_state(self, state: Dict) -> None:
        view = self._views.get("search")
        if view is not None:
            view.apply_form_state(state)

    # ------------------------------------------------------------------
    # Details dialog
    # ------------------------------------------------------------------
    def _open_details_dialog(self, vm: DetailsVM) -> None:
        if self._details_dialog is not None and self._details_dialog.winfo_exists():
            self._details_dialog.destroy()
        dialog: Optional[ContentDetailsDialog] = None

        def refresh() -> None:
            if dialog is not None and dialog.winfo_exists():
                dialog.render(vm.to_dto())

        def handle_rate(score: str, review: str) -> None:
            try:
                vm.cmd_rate(score, review)
            except ValidationError as exc:
                self._show_error("Rating Error", str(exc))
                return
            refresh()

        def handle_clear() -> None:
            vm.cmd_clear_rating()
            refresh()

        def handle_watchlist() -> None:
            vm.cmd_toggle_watchlist()
            refresh()

        def handle_edit() -> None:
            if dialog is not None and dialog.winfo_exists():
                dialog.destroy()
            handle_close()
            vm.cmd_edit()

        def handle_close() -> None:
            self.library.active_details = None
            self._details_dialog = None

        dialog = ContentDetailsDialog(
            self.win,
            on_rate=handle_rate,
            on_clear_rating=handle_clear,
            on_toggle_watchlist=handle_watchlist,
            on_edit=handle_edit,
            on_close=handle_close,
        )
        dialog.render(vm.to_dto())
        self._details_dialog = dialog

    # ------------------------------------------------------------------
    # Title editor
    # ------------------------------------------------------------------
    def _open_edit_dialog(self, vm: EditContentVM) -> None:
        if self._edit_dialog is not None and self._edit_dialog.winfo_exists():
            self._edit_dialog.destroy()
        dialog: Optional[EditContentDialog] = None

        def close() -> None:
            if dialog is not None and dialog.winfo_exists():
                dialog.destroy()
            self._edit_dialog = None
            self.editor.active = None

        def handle_type(label: str) -> None:
            vm.update_fields(dialog.values())
            vm.set_content_type(label)
            dialog.render(vm.to_dto())

        def handle_save(values: Dict[str, str]) -> None:
            vm.update_fields(values)
            try:
                saved = vm.cmd_save()
            except ValidationError as exc:
                self._show_error("Edit Error", str(exc))
                return
            if saved:
                close()

        def handle_delete() -> None:
            if vm.cmd_delete():
                close()

        dialog = EditContentDialog(
            self.win,
            genres=vm.genre_options(),
            on_type_changed=handle_type,
            on_genre_toggled=vm.set_genre,
            on_save=handle_save,
            on_delete=handle_delete,
            on_close=close,
        )
        dialog.render(vm.to_dto())
        self._edit_dialog = dialog

    # ------------------------------------------------------------------
    # Window callbacks
    # ------------------------------------------------------------------
    def _on_navigate(self, name: str) -> None:
        self.main_controller.show_view(name)

    def _on_view_shown(self, name: str) -> None:
        self.win.set_active_view(name)
        self.settings_vm.remember_view(name)

    def _on_reload_catalog(self) -> None:
        if not self.main_controller.is_initialized:
            self.main_controller.initialize()
            return
        self.main_controller.reload_catalog()

    def _on_add_title(self) -> None:
        self.editor.open_new()

    def _on_open_settings(self) -> None:
        self.settings_controller.open_dialog()

    def _on_data_dir_changed(self, data_dir: str) -> None:
        self.locator.data_dir = data_dir or None
        self.locator.data_manager.source = CatalogFiles(data_dir or None)
        self._on_reload_catalog()

    def _on_live_search_changed(self, enabled: bool, delay_ms: int) -> None:
        self.search_controller.live_search = enabled
        self.search_controller.live_delay_ms = delay_ms

    def _on_close(self) -> None:
        self.scheduler.cancel_all()
        self.settings_vm.remember_window(self.win.winfo_width(), self.win.winfo_height())
        self._save_user_settings()
        self._log.info("Cinedex closed")

    # ------------------------------------------------------------------
    # Alerts
    # ------------------------------------------------------------------
    def _show_error(self, title: str, message: str) -> None:
        dialogs.show_error(title, message, parent=self.win)

    def _confirm(self, title: str, message: str) -> bool:
        return dialogs.ask_yes_no(title, message, parent=self.win)

    def _show_warning(self, title: str, message: str) -> None:
        # year warnings come from inside Tk entry validation; show them afterwards
        self.scheduler.run_later(lambda: dialogs.show_warning(title, message, parent=self.win))


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
