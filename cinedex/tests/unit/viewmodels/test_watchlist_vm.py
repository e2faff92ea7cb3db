from __future__ import annotations

from datetime import datetime
from typing import Dict, List

from cinedex.domain.entities import WatchlistEntry
from cinedex.viewmodels.watchlist_vm import WatchlistVM


def _entries() -> List[WatchlistEntry]:
    return [
        WatchlistEntry("movie:1", "Heat", added_at=datetime(2024, 1, 5)),
        WatchlistEntry("series:2", "Dark", added_at=datetime(2024, 3, 1), watched=True, notes="rewatch s3"),
    ]


def test_entries_newest_first() -> None:
    updates: List[Dict] = []
    vm = WatchlistVM(on_update=updates.append)
    vm.set_entries(_entries())

    dto = updates[-1]
    assert dto["summary"] == "2 titles, 1 watched"
    assert dto["rows"][0] == ("series:2", "Dark", "Series", "2024-03-01", "Yes", "rewatch s3")
    assert dto["rows"][1] == ("movie:1", "Heat", "Movie", "2024-01-05", "No", "")


def test_hide_watched_filters_rows_not_summary() -> None:
    updates: List[Dict] = []
    vm = WatchlistVM(on_update=updates.append)
    vm.set_entries(_entries())
    vm.set_hide_watched(True)

    assert [row[0] for row in updates[-1]["rows"]] == ["movie:1"]
    assert updates[-1]["summary"] == "2 titles, 1 watched"


def test_commands_forward_keys() -> None:
    calls: List[tuple] = []
    vm = WatchlistVM(
        on_toggle_watched=lambda key: calls.append(("toggle", key)),
        on_remove=lambda key: calls.append(("remove", key)),
        on_open=lambda key: calls.append(("open", key)),
    )
    vm.cmd_toggle_watched("movie:1")
    vm.cmd_remove("series:2")
    vm.cmd_open("movie:1")
    assert calls == [("toggle", "movie:1"), ("remove", "series:2"), ("open", "movie:1")]
