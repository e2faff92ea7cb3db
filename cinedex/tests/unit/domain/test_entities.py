from __future__ import annotations

from datetime import date

import pytest

from cinedex.domain.entities import (
    Celebrity,
    ContentType,
    Episode,
    Movie,
    Season,
    Series,
    UserRating,
    WatchlistEntry,
    clamp_rating,
    content_key,
    split_content_key,
)
from cinedex.domain.errors import ValidationError
from cinedex.domain.genres import Genre


def _series(**overrides) -> Series:
    values = dict(title="Dark", year=2017, end_year=2020, genres=[Genre.SCI_FI], rating=8.7)
    values.update(overrides)
    return Series(**values)


def test_movie_requires_title_and_rating_in_range() -> None:
    with pytest.raises(ValidationError):
        Movie(title="  ", year=2000)
    with pytest.raises(ValidationError):
        Movie(title="Heat", year=1995, rating=10.5)

    movie = Movie(title="Heat", year=1995, rating=8.3, genres=[Genre.CRIME, Genre.DRAMA])
    assert movie.content_type is ContentType.MOVIE
    assert movie.genre_label == "Crime, Drama"
    assert movie.has_genre(Genre.CRIME)
    assert not movie.has_genre(Genre.COMEDY)
    assert movie.years_label == "1995"


def test_series_years_label_variants() -> None:
    assert _series().years_label == "2017-2020"
    assert _series(end_year=None).years_label == "2017-"
    assert _series(end_year=2017).years_label == "2017"
    assert _series(end_year=None).is_ongoing


def test_series_end_year_cannot_precede_start() -> None:
    with pytest.raises(ValidationError):
        _series(end_year=2010)


def test_series_counts_seasons_and_episodes() -> None:
    seasons = [
        Season(number=1, year=2017, episodes=[Episode(1, "Secrets"), Episode(2, "Lies")]),
        Season(number=2, year=2019, episodes=[Episode(1, "Beginnings")]),
    ]
    series = _series(seasons=seasons)

    assert series.total_seasons == 2
    assert series.total_episodes == 3
    assert series.content_type is ContentType.SERIES


def test_celebrity_names_and_birth_year() -> None:
    person = Celebrity(first_name="Greta", last_name="Gerwig", birth_date=date(1983, 8, 4), role="director")
    assert person.full_name == "Greta Gerwig"
    assert person.birth_year == 1983
    assert Celebrity(first_name="Zendaya", last_name="").full_name == "Zendaya"

    with pytest.raises(ValidationError):
        Celebrity(first_name="", last_name=" ")
    with pytest.raises(ValidationError):
        Celebrity(first_name="A", last_name="B", role="producer")


def test_content_key_round_trip_and_malformed_keys() -> None:
    movie = Movie(title="Heat", year=1995, id=7)
    assert content_key(movie) == "movie:7"
    assert split_content_key("series:12") == (ContentType.SERIES, 12)

    for bad in ("", "movie", "film:3", "movie:x"):
        with pytest.raises(ValidationError):
            split_content_key(bad)


def test_clamp_rating() -> None:
    assert clamp_rating(-3) == 0.0
    assert clamp_rating(12) == 10.0
    assert clamp_rating(7.46) == 7.5


def test_user_rating_validates_score_and_review() -> None:
    assert UserRating(content_key="movie:1", score=9).review == ""
    with pytest.raises(ValidationError):
        UserRating(content_key="movie:1", score=0)
    with pytest.raises(ValidationError):
        UserRating(content_key="movie:1", score=5, review="x" * 1001)
    with pytest.raises(ValidationError):
        UserRating(content_key="nope", score=5)


def test_watchlist_entry_exposes_content_type() -> None:
    entry = WatchlistEntry(content_key="series:4", title="Dark")
    assert entry.content_type is ContentType.SERIES
    assert entry.watched is False
