from __future__ import annotations

from pathlib import Path
from typing import List

from cinedex.adapters.catalog_files import CatalogFiles
from cinedex.app.data_manager import DataManager
from cinedex.app.search_controller import LIVE_SEARCH_KEY, SearchController
from cinedex.domain.ports import UseCaseError
from cinedex.usecases.search_catalog import SearchCatalog
from cinedex.tests.unit.helpers import AlertRecorder, FakeScheduler, write_catalog
from cinedex.viewmodels.results_vm import ResultsVM
from cinedex.viewmodels.search_form_vm import SearchFormVM


class FailingSearch:
    def __call__(self, criteria):
        raise UseCaseError("SEARCH_FAILED", "index unavailable")


def _controller(tmp_path: Path, *, live: bool = True, search=None):
    dm = DataManager(CatalogFiles(str(write_catalog(tmp_path))), current_year=2024)
    dm.load_all_data()
    scheduler = FakeScheduler()
    errors = AlertRecorder()
    warnings = AlertRecorder()
    status: List[str] = []
    form_vm = SearchFormVM(current_year=2024)
    results_vm = ResultsVM()
    controller = SearchController(
        search=search or SearchCatalog(dm),
        form_vm=form_vm,
        results_vm=results_vm,
        scheduler=scheduler,
        show_error=errors,
        show_warning=warnings,
        set_status=status.append,
        live_search=live,
        live_delay_ms=250,
    )
    return controller, form_vm, results_vm, scheduler, errors, warnings, status


def test_search_button_fills_results(tmp_path: Path) -> None:
    controller, form_vm, results_vm, _sched, errors, _warn, status = _controller(tmp_path)
    form_vm.set_keywords("weaver")
    form_vm.set_sort("Year (Oldest)")

    criteria = form_vm.search()

    assert [item.title for item in results_vm.results] == ["Alien", "Aliens"]
    assert controller.last_search == criteria
    assert status[-1] == "Found 2 results"
    assert errors.calls == []


def test_form_is_wired_to_controller_alerts(tmp_path: Path) -> None:
    _ctrl, form_vm, _results, _sched, errors, warnings, _status = _controller(tmp_path)
    form_vm.set_year_from_text("1500")
    form_vm.set_include_movies(False)
    form_vm.set_include_series(False)
    form_vm.search()
    assert warnings.titles == ["Invalid Year"]
    assert errors.titles == ["Search Error"]


def test_title_typing_debounces_live_search(tmp_path: Path) -> None:
    controller, _form, results_vm, scheduler, _errors, _warn, _status = _controller(tmp_path)
    controller.on_title_edited("a")
    controller.on_title_edited("alien")

    assert scheduler.timers[LIVE_SEARCH_KEY][0] == 250
    assert results_vm.results == []

    scheduler.fire(LIVE_SEARCH_KEY)
    assert [item.title for item in results_vm.results] == ["Alien", "Aliens"]


def test_clearing_title_cancels_pending_live_search(tmp_path: Path) -> None:
    controller, _form, _results, scheduler, _errors, _warn, _status = _controller(tmp_path)
    controller.on_title_edited("heat")
    controller.on_title_edited("   ")
    assert not scheduler.is_pending(LIVE_SEARCH_KEY)
    assert scheduler.cancelled == [LIVE_SEARCH_KEY]


def test_live_search_disabled(tmp_path: Path) -> None:
    controller, form_vm, _results, scheduler, _errors, _warn, _status = _controller(tmp_path, live=False)
    controller.on_title_edited("heat")
    assert scheduler.timers == {}
    assert form_vm.title == "heat"


def test_live_search_skips_repeat_of_last_search(tmp_path: Path) -> None:
    controller, form_vm, results_vm, scheduler, _errors, _warn, _status = _controller(tmp_path)
    controller.on_title_edited("heat")
    form_vm.search()
    assert not scheduler.is_pending(LIVE_SEARCH_KEY)

    shown = results_vm.results
    controller.on_title_edited("heat")
    scheduler.fire(LIVE_SEARCH_KEY)
    assert results_vm.results is shown


def test_reset_clears_form_and_results(tmp_path: Path) -> None:
    controller, form_vm, results_vm, _sched, _errors, _warn, status = _controller(tmp_path)
    form_vm.set_title("heat")
    form_vm.search()

    controller.on_reset()

    assert form_vm.title == ""
    assert results_vm.results == []
    assert controller.last_search is None
    assert status[-1] == "Search form reset"


def test_search_failure_is_alerted(tmp_path: Path) -> None:
    controller, form_vm, results_vm, _sched, errors, _warn, _status = _controller(tmp_path, search=FailingSearch())
    form_vm.search()
    assert errors.calls == [("Search Error", "index unavailable")]
    assert results_vm.results == []


def test_refresh_results_repeats_last_search(tmp_path: Path) -> None:
    controller, form_vm, results_vm, _sched, _errors, _warn, _status = _controller(tmp_path)
    controller.refresh_results()
    assert results_vm.results == []

    form_vm.set_keywords("weaver")
    form_vm.search()
    alien = next(item for item in results_vm.results if item.title == "Alien")
    controller.search.catalog.delete_content(f"movie:{alien.id}")
    controller.refresh_results()

    assert [item.title for item in results_vm.results] == ["Aliens"]
