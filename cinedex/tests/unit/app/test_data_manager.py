from __future__ import annotations

from pathlib import Path

import pytest

from cinedex.adapters.catalog_files import CatalogFiles
from cinedex.app.data_manager import DataManager
from cinedex.domain.errors import EntityNotFoundError
from cinedex.domain.ports import UseCaseError
from cinedex.tests.unit.helpers import make_movie, write_catalog


def _loaded(tmp_path: Path) -> DataManager:
    dm = DataManager(CatalogFiles(str(write_catalog(tmp_path))), current_year=2024)
    dm.load_all_data()
    return dm


def test_load_all_data_sets_flag_and_report(tmp_path: Path) -> None:
    dm = DataManager(CatalogFiles(str(write_catalog(tmp_path))), current_year=2024)
    assert not dm.is_data_loaded()

    report = dm.load_all_data()

    assert dm.is_data_loaded()
    assert dm.last_report is report
    assert dm.counts()["movies"] == 3


def test_reload_replaces_previous_content(tmp_path: Path) -> None:
    dm = _loaded(tmp_path)
    dm.load_all_data()
    assert len(dm.all_movies()) == 3
    assert len(dm.all_series()) == 2


def test_empty_catalog_raises(tmp_path: Path) -> None:
    dm = DataManager(CatalogFiles(str(write_catalog(tmp_path, movies=None, series=None))))
    with pytest.raises(UseCaseError) as info:
        dm.load_all_data()
    assert info.value.code == "CATALOG_EMPTY"
    assert not dm.is_data_loaded()


def test_lookups(tmp_path: Path) -> None:
    dm = _loaded(tmp_path)
    alien = dm.find_movie_by_title("alien")
    assert [m.title for m in alien] == ["Alien"]
    key = f"movie:{alien[0].id}"
    assert dm.find_content(key) is alien[0]
    assert dm.get_content(key) is alien[0]
    with pytest.raises(EntityNotFoundError):
        dm.get_content("series:999")
    assert dm.find_person("Ridley Scott").role == "director"
    assert dm.find_person("Al Pacino").role == "actor"


def test_episodes_for_series(tmp_path: Path) -> None:
    dm = _loaded(tmp_path)
    dark = dm.find_series_by_title("Dark")[0]
    episodes = dm.episodes_for_series(dark.id)
    assert len(episodes) == dark.total_episodes > 0
    with pytest.raises(EntityNotFoundError):
        dm.episodes_for_series(999)


def test_featured_lists(tmp_path: Path) -> None:
    dm = _loaded(tmp_path)
    assert [c.title for c in dm.top_rated(2)] == ["The Office", "Dark"]
    assert [c.title for c in dm.recent(2)] == ["Dark", "The Office"]


def test_save_and_delete_content(tmp_path: Path) -> None:
    dm = _loaded(tmp_path)
    saved = dm.save_content(make_movie("Ran", 1985))
    key = f"movie:{saved.id}"
    assert dm.find_content(key) is saved
    assert dm.save_content(saved) is saved

    edited = make_movie("Ran", 1985, rating=8.2, item_id=saved.id)
    assert dm.save_content(edited) is edited
    assert dm.find_content(key) is edited
    assert len(dm.find_movie_by_title("ran")) == 1

    assert dm.delete_content(key)
    assert dm.find_content(key) is None


def test_failed_reload_keeps_previous_catalog(tmp_path: Path) -> None:
    dm = _loaded(tmp_path)
    for name in ("movies.txt", "series.txt"):
        (tmp_path / name).unlink()

    with pytest.raises(UseCaseError):
        dm.load_all_data()

    assert dm.is_data_loaded()
    assert dm.counts()["movies"] == 3
