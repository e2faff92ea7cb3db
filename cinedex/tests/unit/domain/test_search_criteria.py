from __future__ import annotations

import pytest

from cinedex.domain.entities import ContentType
from cinedex.domain.errors import ValidationError
from cinedex.domain.genres import Genre
from cinedex.domain.search_criteria import SORT_OPTIONS, SearchCriteria, sort_for_label


def test_defaults_search_everything() -> None:
    criteria = SearchCriteria()
    assert criteria.is_empty()
    assert criteria.content_type is None
    assert criteria.sort_order == "asc"
    assert criteria.describe() == "sort=relevance asc"


def test_year_range_must_be_ordered() -> None:
    with pytest.raises(ValidationError, match="'Year from' cannot be after 'Year to'."):
        SearchCriteria(year_from=2010, year_to=2000)
    assert SearchCriteria(year_from=2000, year_to=2000).year_to == 2000


@pytest.mark.parametrize("rating", [-0.1, 10.1])
def test_rating_outside_scale_is_rejected(rating: float) -> None:
    with pytest.raises(ValidationError, match="Rating must be between 0.0 and 10.0"):
        SearchCriteria(min_rating=rating)


def test_at_least_one_content_type_is_required() -> None:
    with pytest.raises(ValidationError, match="Select at least one content type"):
        SearchCriteria(include_movies=False, include_series=False)
    assert SearchCriteria(include_movies=False).content_type is ContentType.SERIES
    assert SearchCriteria(include_series=False).content_type is ContentType.MOVIE


def test_unknown_sort_field_is_rejected() -> None:
    with pytest.raises(ValidationError):
        SearchCriteria(sort_field="popularity")


def test_sort_labels_map_to_field_and_direction() -> None:
    assert sort_for_label("Title (A-Z)") == ("title", False)
    assert sort_for_label("Rating (High to Low)") == ("rating", True)
    assert sort_for_label("Year (Newest)") == ("year", True)
    assert "Relevance" in SORT_OPTIONS
    with pytest.raises(ValidationError):
        sort_for_label("Most popular")


def test_genres_are_stored_as_tuple_and_keywords_split() -> None:
    criteria = SearchCriteria(genres=[Genre.DRAMA], keywords="  Space  Heist ", query="star")
    assert criteria.genres == (Genre.DRAMA,)
    assert criteria.keyword_terms == ("space", "heist")
    assert not criteria.is_empty()
    hash(criteria)


def test_describe_lists_active_filters() -> None:
    criteria = SearchCriteria(
        query="alien",
        year_from=1979,
        min_rating=8.0,
        genres=(Genre.HORROR,),
        include_series=False,
        sort_field="rating",
        sort_descending=True,
    )
    assert criteria.describe() == (
        "title~'alien', years=1979.., rating>=8.0, genres=Horror, type=movie, sort=rating desc"
    )
