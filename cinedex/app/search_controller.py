from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..domain.entities import Content
from ..domain.ports import UseCaseError
from ..domain.search_criteria import SearchCriteria
from ..usecases.search_catalog import SearchCatalog
from ..viewmodels.results_vm import ResultsVM
from ..viewmodels.search_form_vm import SearchFormVM
from .scheduler import UiScheduler

AlertFn = Callable[[str, str], None]
LIVE_SEARCH_KEY = "live-search"


class SearchController:
    """Connects the search form to the search use case and the results table.

    The form view model reports ``on_criteria_changed`` for every edit and
    ``on_search_requested`` when the user presses *Search*. Title edits also
    trigger a debounced live search when enabled in settings.
    """

    def __init__(
        self,
        *,
        search: SearchCatalog,
        form_vm: SearchFormVM,
        results_vm: ResultsVM,
        scheduler: UiScheduler,
        show_error: AlertFn,
        show_warning: AlertFn,
        set_status: Callable[[str], None],
        live_search: bool = True,
        live_delay_ms: int = 400,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.search = search
        self.form_vm = form_vm
        self.results_vm = results_vm
        self.scheduler = scheduler
        self._show_error = show_error
        self._set_status = set_status
        self.live_search = live_search
        self.live_delay_ms = live_delay_ms
        self.pending_criteria: Optional[SearchCriteria] = None
        self.last_search: Optional[SearchCriteria] = None

        form_vm.on_criteria_changed = self.on_search_criteria_changed
        form_vm.on_search_requested = self.on_search_requested
        form_vm.on_warning = show_warning
        form_vm.on_error = show_error

    # ---- form listener ----
    def on_search_criteria_changed(self, criteria: SearchCriteria) -> None:
        self.pending_criteria = criteria

    def on_search_requested(self, criteria: SearchCriteria) -> None:
        self.run_search(criteria)

    # ---- view callbacks ----
    def on_title_edited(self, text: str) -> None:
        self.form_vm.set_title(text)
        if not self.live_search:
            return
        if not text.strip():
            self.scheduler.cancel(LIVE_SEARCH_KEY)
            return
        self.scheduler.debounce(LIVE_SEARCH_KEY, self.live_delay_ms, self._run_live_search)

    def on_reset(self) -> None:
        self.scheduler.cancel(LIVE_SEARCH_KEY)
        self.form_vm.reset()
        self.results_vm.clear()
        self.last_search = None
        self._set_status("Search form reset")

    # ---- search ----
    def run_search(self, criteria: SearchCriteria) -> List[Content]:
        self.scheduler.cancel(LIVE_SEARCH_KEY)
        try:
            results = self.search(criteria)
        except UseCaseError as err:
            self._log.error("Search failed [%s]: %s", err.code, err.message)
            self._show_error("Search Error", err.message)
            return []
        self.last_search = criteria
        self.results_vm.set_results(results, criteria)
        self._set_status(self.results_vm.status_text)
        self._log.info("Search [%s] returned %d titles", criteria.describe(), len(results))
        return results

    def refresh_results(self) -> None:
        """Repeat the last search after the catalog was edited."""
        if self.last_search is not None:
            self.run_search(self.last_search)

    def _run_live_search(self) -> None:
        criteria = self.pending_criteria
        if criteria is None or criteria == self.last_search:
            return
        self.run_search(criteria)


__all__ = ["SearchController", "LIVE_SEARCH_KEY"]
