from __future__ import annotations

import pytest

from cinedex.domain.genres import FORM_GENRES, Genre, genre_labels, parse_genre, parse_genres


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Drama", Genre.DRAMA),
        ("  comedy ", Genre.COMEDY),
        ("Sci-Fi", Genre.SCI_FI),
        ("science fiction", Genre.SCI_FI),
        ("SciFi", Genre.SCI_FI),
        ("Biopic", Genre.BIOGRAPHY),
        ("Sports", Genre.SPORT),
        ("Drama-Romance", Genre.DRAMA),
        ("Comedy Drama", Genre.COMEDY),
        ("Music", Genre.MUSIC),
        ("Musical", Genre.MUSICAL),
    ],
)
def test_parse_genre_accepts_common_spellings(raw: str, expected: Genre) -> None:
    assert parse_genre(raw) is expected


@pytest.mark.parametrize("raw", [None, "", "   ", "N/A", "Cooking"])
def test_parse_genre_returns_none_for_unknown(raw) -> None:
    assert parse_genre(raw) is None


def test_parse_genres_splits_and_deduplicates() -> None:
    assert parse_genres("Action;Sci-Fi, action;Nonsense") == [Genre.ACTION, Genre.SCI_FI]
    assert parse_genres("") == []


def test_every_form_genre_label_is_parseable() -> None:
    for label in FORM_GENRES:
        assert parse_genre(label) is not None, label


def test_genre_labels_use_display_names() -> None:
    assert genre_labels([Genre.SCI_FI, Genre.HORROR]) == "Science Fiction, Horror"
    assert str(Genre.SCI_FI) == "Science Fiction"
