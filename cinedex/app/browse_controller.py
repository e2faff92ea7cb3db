from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..usecases.rate_content import rating_histogram
from ..viewmodels.celebrities_vm import CelebritiesVM
from ..viewmodels.home_vm import HomeVM
from ..viewmodels.results_vm import ResultsVM
from .data_manager import DataManager
from .event_bus import CATALOG_CHANGED, CATALOG_LOADED, RATING_CHANGED, AppEventBus

FEATURED_LIMIT = 8


class BrowseController:
    """Keeps the home, movies, series and celebrities tabs in sync with the catalog."""

    def __init__(
        self,
        *,
        data_manager: DataManager,
        event_bus: AppEventBus,
        home_vm: HomeVM,
        movies_vm: ResultsVM,
        series_vm: ResultsVM,
        celebrities_vm: CelebritiesVM,
        ratings_label: Optional[Callable[[], str]] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.data_manager = data_manager
        self.home_vm = home_vm
        self.movies_vm = movies_vm
        self.series_vm = series_vm
        self.celebrities_vm = celebrities_vm
        self._ratings_label = ratings_label
        event_bus.subscribe(CATALOG_LOADED, self._on_catalog_loaded)
        event_bus.subscribe(CATALOG_CHANGED, self._on_catalog_loaded)
        event_bus.subscribe(RATING_CHANGED, self._on_rating_changed)

    def refresh(self) -> None:
        dm = self.data_manager
        if not dm.is_data_loaded():
            self._log.debug("Browse refresh skipped: catalog not loaded")
            return
        self.refresh_home()
        self.movies_vm.set_results(sorted(dm.all_movies(), key=lambda m: m.title.lower()))
        self.series_vm.set_results(sorted(dm.all_series(), key=lambda s: s.title.lower()))
        self.celebrities_vm.set_people(dm.all_actors(), dm.all_directors())

    def refresh_home(self) -> None:
        dm = self.data_manager
        self.home_vm.apply(
            counts=dm.counts(),
            top_rated=dm.top_rated(FEATURED_LIMIT),
            recent=dm.recent(FEATURED_LIMIT),
            histogram=rating_histogram(c.rating for c in dm.all_content()),
            ratings_label=self._ratings_label() if self._ratings_label else "",
        )

    def _on_catalog_loaded(self, _payload: Any) -> None:
        self.refresh()

    def _on_rating_changed(self, _rating: Any) -> None:
        if self.data_manager.is_data_loaded():
            self.refresh_home()


__all__ = ["BrowseController", "FEATURED_LIMIT"]
