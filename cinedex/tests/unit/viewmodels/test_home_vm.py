from __future__ import annotations

from typing import Dict, List

from cinedex.domain.entities import Content
from cinedex.tests.unit.helpers import make_movie, make_series
from cinedex.viewmodels.home_vm import FEATURED_TITLE, HomeVM


def _apply(vm: HomeVM, histogram=(0, 0, 0, 0, 0, 1, 2, 4, 3, 0)) -> None:
    vm.apply(
        counts={"movies": 3, "series": 2, "actors": 5, "directors": 4},
        top_rated=[make_movie("Heat", 1995, rating=8.3, item_id=1)],
        recent=[make_series("Severance", 2022, rating=8.7, item_id=7)],
        histogram=list(histogram),
        ratings_label="You rated 2 titles, average 7.5/10",
    )


def test_apply_pushes_dto() -> None:
    updates: List[Dict] = []
    vm = HomeVM(on_update=updates.append)
    _apply(vm)

    dto = updates[-1]
    assert dto["title"] == FEATURED_TITLE
    assert dto["counts"] == "3 movies · 2 series · 5 actors · 4 directors"
    assert dto["top_rated"] == [("movie:1", "Heat", "1995", "8.3")]
    assert dto["recent"] == [("series:7", "Severance", "2022-", "8.7")]
    assert dto["ratings"].startswith("You rated 2")


def test_histogram_bars_scale_to_peak() -> None:
    vm = HomeVM()
    _apply(vm)
    bars = vm.histogram_bars(width=20)
    assert len(bars) == 10
    assert bars[7] == ("7-8", 4, 20)
    assert bars[8] == ("8-9", 3, 15)
    assert bars[0] == ("0-1", 0, 0)


def test_empty_histogram_has_zero_length_bars() -> None:
    vm = HomeVM()
    _apply(vm, histogram=(0,) * 10)
    assert all(length == 0 for _, _, length in vm.histogram_bars())


def test_open_finds_featured_items() -> None:
    opened: List[Content] = []
    vm = HomeVM(on_open_details=opened.append)
    _apply(vm)
    vm.open("series:7")
    vm.open("movie:404")
    assert [item.title for item in opened] == ["Severance"]
