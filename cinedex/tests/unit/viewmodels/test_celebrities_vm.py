from __future__ import annotations

from datetime import date
from typing import Dict, List

import pytest

from cinedex.domain.entities import Celebrity
from cinedex.viewmodels.celebrities_vm import CelebritiesVM


def _people():
    actors = [
        Celebrity("Meryl", "Streep", date(1949, 6, 22), "F", "American",
                  ["The Post", "Doubt", "Julia", "Sophie's Choice"]),
        Celebrity("Song", "Kang-ho", None, "M", "South Korean", ["Parasite"]),
    ]
    directors = [
        Celebrity("Greta", "Gerwig", date(1983, 8, 4), "F", "American", ["Lady Bird"], role="director"),
    ]
    return actors, directors


def test_people_sorted_by_last_name() -> None:
    updates: List[Dict] = []
    vm = CelebritiesVM(on_update=updates.append)
    vm.set_people(*_people())

    rows = updates[-1]["rows"]
    assert [row[0] for row in rows] == ["Greta Gerwig", "Song Kang-ho", "Meryl Streep"]
    assert updates[-1]["count_label"] == "3 of 3 people"


def test_row_formatting() -> None:
    vm = CelebritiesVM()
    vm.set_people(*_people())
    streep = vm.rows()[-1]
    assert streep == ("Meryl Streep", "Actor", "1949", "Female", "American", "The Post, Doubt, Julia (+1)")
    song = vm.rows()[1]
    assert song[2] == ""


def test_name_and_role_filters_combine() -> None:
    updates: List[Dict] = []
    vm = CelebritiesVM(on_update=updates.append)
    vm.set_people(*_people())

    vm.set_name_filter("  GER ")
    assert [row[0] for row in updates[-1]["rows"]] == ["Greta Gerwig"]

    vm.set_role_filter("Actors")
    assert updates[-1]["rows"] == []
    assert updates[-1]["count_label"] == "0 of 3 people"

    vm.set_name_filter("")
    assert len(updates[-1]["rows"]) == 2
    with pytest.raises(ValueError):
        vm.set_role_filter("Writers")
