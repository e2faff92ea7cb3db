from __future__ import annotations

from typing import List

import pytest

from cinedex.domain.entities import ContentType, Season
from cinedex.domain.errors import ValidationError
from cinedex.domain.genres import Genre
from cinedex.tests.unit.helpers import make_movie, make_series
from cinedex.viewmodels.edit_content_vm import EditContentVM


def test_for_series_prefills_text_fields() -> None:
    dark = make_series(
        "Dark",
        2017,
        rating=8.7,
        item_id=3,
        end_year=2020,
        genres=[Genre.SCI_FI, Genre.MYSTERY],
        director="Baran bo Odar",
        cast=["Louis Hofmann", "Lisa Vicari"],
        seasons=[Season(number=n, year=2016 + n) for n in (1, 2, 3)],
    )
    vm = EditContentVM.for_content(dark)
    dto = vm.to_dto()

    assert vm.key == "series:3"
    assert dto["window_title"] == "Edit Dark"
    assert dto["type_locked"] is True
    assert (dto["year"], dto["end_year"], dto["length"], dto["rating"]) == ("2017", "2020", "3", "8.7")
    assert dto["cast"] == "Louis Hofmann; Lisa Vicari"
    assert dto["genres"] == {"Science Fiction", "Mystery"}
    assert (dto["length_label"], dto["director_label"], dto["show_end_year"]) == ("Seasons", "Creator", True)
    assert dto["can_delete"] is True


def test_new_form_switches_type_and_builds_draft() -> None:
    vm = EditContentVM()
    assert vm.to_dto()["window_title"] == "Add Movie"
    assert vm.to_dto()["can_delete"] is False

    vm.set_content_type("Series")
    vm.update_fields(
        {"title": " Chernobyl ", "year": "2019", "length": "1", "end_year": "2019", "cast": "Jared Harris;"}
    )
    vm.set_genre("History", True)
    vm.set_genre("Drama", True)
    vm.set_genre("History", False)
    vm.set_genre("Drama", True)
    draft = vm.to_draft()

    assert draft.content_type is ContentType.SERIES
    assert draft.title == "Chernobyl"
    assert (draft.year, draft.length, draft.end_year) == (2019, 1, 2019)
    assert draft.genres == (Genre.DRAMA,)
    assert draft.cast == ("Jared Harris",)
    assert draft.rating == 0.0


def test_type_is_locked_when_editing() -> None:
    vm = EditContentVM.for_content(make_movie("Heat", 1995, item_id=1))
    with pytest.raises(ValidationError):
        vm.set_content_type("Series")


@pytest.mark.parametrize(
    "field, text, message",
    [
        ("year", "19x5", "Year must be a whole number"),
        ("rating", "eleven", "Rating must be a number between 0 and 10"),
        ("rating", "10.5", "Rating must be a number between 0 and 10"),
        ("length", "-5", "Runtime must be a whole number"),
    ],
)
def test_unreadable_fields_raise(field: str, text: str, message: str) -> None:
    vm = EditContentVM.for_content(make_movie("Heat", 1995, item_id=1, duration_min=170))
    vm.update_fields({field: text})
    with pytest.raises(ValidationError, match=message):
        vm.to_draft()


def test_commands_call_back_with_key() -> None:
    saved: List[tuple] = []
    deleted: List[str] = []
    vm = EditContentVM.for_content(
        make_movie("Heat", 1995, item_id=1, duration_min=170),
        on_save=lambda draft, key: saved.append((draft.title, draft.length, key)) or "stored",
        on_delete=lambda key: deleted.append(key) or True,
    )

    assert vm.cmd_save() == "stored"
    assert vm.cmd_delete() is True
    assert saved == [("Heat", 170, "movie:1")]
    assert deleted == ["movie:1"]
    assert EditContentVM(on_delete=deleted.append).cmd_delete() is None
