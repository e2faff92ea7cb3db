from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from cinedex.adapters.catalog_files import CatalogFiles
from cinedex.app.browse_controller import BrowseController
from cinedex.app.data_manager import DataManager
from cinedex.app.event_bus import CATALOG_CHANGED, CATALOG_LOADED, RATING_CHANGED, AppEventBus, CatalogChange
from cinedex.domain.entities import content_key
from cinedex.tests.unit.helpers import write_catalog
from cinedex.viewmodels.celebrities_vm import CelebritiesVM
from cinedex.viewmodels.home_vm import HomeVM
from cinedex.viewmodels.results_vm import ResultsVM


def _setup(tmp_path: Path, label: str = "You rated 1 titles, average 8.0/10"):
    dm = DataManager(CatalogFiles(str(write_catalog(tmp_path))), current_year=2024)
    bus = AppEventBus()
    home: List[Dict] = []
    movies: List[Dict] = []
    series: List[Dict] = []
    people: List[Dict] = []
    BrowseController(
        data_manager=dm,
        event_bus=bus,
        home_vm=HomeVM(on_update=home.append),
        movies_vm=ResultsVM(on_update=movies.append),
        series_vm=ResultsVM(on_update=series.append),
        celebrities_vm=CelebritiesVM(on_update=people.append),
        ratings_label=lambda: label,
    )
    return dm, bus, home, movies, series, people


def test_catalog_loaded_refreshes_every_tab(tmp_path: Path) -> None:
    dm, bus, home, movies, series, people = _setup(tmp_path)
    report = dm.load_all_data()
    bus.publish(CATALOG_LOADED, report)

    assert [row[1] for row in movies[-1]["rows"]] == ["Alien", "Aliens", "Heat"]
    assert [row[1] for row in series[-1]["rows"]] == ["Dark", "The Office"]
    assert people[-1]["count_label"] == "10 of 10 people"
    dto = home[-1]
    assert dto["counts"].startswith("3 movies · 2 series")
    assert dto["top_rated"][0][1] == "The Office"
    assert dto["ratings"] == "You rated 1 titles, average 8.0/10"
    assert sum(count for _, count, _ in dto["histogram"]) == 5
    assert dto["histogram"][8][1] == 4


def test_nothing_renders_before_catalog_load(tmp_path: Path) -> None:
    _dm, bus, home, movies, _series, _people = _setup(tmp_path)
    bus.publish(RATING_CHANGED, None)
    assert home == [] and movies == []


def test_rating_change_only_refreshes_home(tmp_path: Path) -> None:
    dm, bus, home, movies, _series, _people = _setup(tmp_path)
    bus.publish(CATALOG_LOADED, dm.load_all_data())
    before = (len(home), len(movies))

    bus.publish(RATING_CHANGED, None)

    assert (len(home), len(movies)) == (before[0] + 1, before[1])


def test_catalog_edit_refreshes_tabs(tmp_path: Path) -> None:
    dm, bus, home, movies, _series, _people = _setup(tmp_path)
    bus.publish(CATALOG_LOADED, dm.load_all_data())
    heat = dm.find_movie_by_title("Heat")[0]
    dm.delete_content(content_key(heat))

    bus.publish(CATALOG_CHANGED, CatalogChange(key=content_key(heat), content=None, previous_title="Heat"))

    assert [row[1] for row in movies[-1]["rows"]] == ["Alien", "Aliens"]
    assert home[-1]["counts"].startswith("2 movies")
