from __future__ import annotations

from datetime import datetime
from typing import Dict, List

import pytest

from cinedex.domain.entities import UserRating
from cinedex.usecases.rate_content import summarize_scores
from cinedex.viewmodels.rated_vm import SORT_OPTIONS, RatedVM


def _ratings() -> Dict[str, UserRating]:
    ratings = [
        UserRating("movie:1", 7, rated_at=datetime(2024, 2, 1)),
        UserRating("series:2", 9, "best finale", rated_at=datetime(2024, 1, 10)),
        UserRating("movie:5", 4, rated_at=datetime(2024, 3, 3)),
    ]
    return {r.content_key: r for r in ratings}


def _vm(updates: List[Dict]) -> RatedVM:
    vm = RatedVM(on_update=updates.append)
    ratings = _ratings()
    vm.set_ratings(
        ratings,
        {"movie:1": "Heat", "series:2": "Dark"},
        summarize_scores(r.score for r in ratings.values()),
    )
    return vm


def test_rows_newest_first_with_missing_titles_marked() -> None:
    updates: List[Dict] = []
    _vm(updates)

    dto = updates[-1]
    assert dto["summary"] == "3 rated titles, average 6.7/10"
    assert dto["sort_by"] == "Date rated"
    assert dto["sort_options"] == SORT_OPTIONS
    assert dto["rows"] == [
        ("movie:5", "(not in catalog)", "Movie", "4/10", "2024-03-03", ""),
        ("movie:1", "Heat", "Movie", "7/10", "2024-02-01", ""),
        ("series:2", "Dark", "Series", "9/10", "2024-01-10", "best finale"),
    ]


def test_sort_by_score_and_title() -> None:
    updates: List[Dict] = []
    vm = _vm(updates)

    vm.set_sort("Score")
    assert [row[3] for row in updates[-1]["rows"]] == ["9/10", "7/10", "4/10"]

    vm.set_sort("Title")
    assert [row[1] for row in updates[-1]["rows"]] == ["(not in catalog)", "Dark", "Heat"]

    with pytest.raises(ValueError):
        vm.set_sort("Runtime")


def test_empty_and_single_summaries() -> None:
    vm = RatedVM()
    assert vm.summary() == "No ratings yet"

    vm.set_ratings({"movie:1": UserRating("movie:1", 8)}, {"movie:1": "Heat"})
    assert vm.summary() == "1 rated title"


def test_commands_forward_keys() -> None:
    opened: List[str] = []
    removed: List[str] = []
    vm = RatedVM(on_open=opened.append, on_remove=removed.append)

    vm.cmd_open("movie:1")
    vm.cmd_remove("series:2")

    assert opened == ["movie:1"]
    assert removed == ["series:2"]
