from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import chain
from typing import Callable, Dict, List, Optional, Tuple

from ..domain.entities import Content, ContentType
from ..domain.ports import CatalogPort
from ..domain.search_criteria import SearchCriteria
from .error_mapping import map_error

_log = logging.getLogger(__name__)


def _keyword_haystack(item: Content) -> str:
    """Director, cast, genres and awards; the title has its own filter."""
    parts = chain([item.director, item.genre_label], item.cast, item.awards)
    return " ".join(p for p in parts if p).lower()


def matches(item: Content, criteria: SearchCriteria) -> bool:
    """Return True when ``item`` passes every filter in ``criteria``."""
    query = criteria.query.strip().lower()
    if query and query not in item.title.lower():
        return False
    terms = criteria.keyword_terms
    if terms:
        haystack = _keyword_haystack(item)
        if not all(term in haystack for term in terms):
            return False
    if criteria.year_from is not None and item.year < criteria.year_from:
        return False
    if criteria.year_to is not None and item.year > criteria.year_to:
        return False
    if criteria.min_rating and item.rating < criteria.min_rating:
        return False
    if criteria.genres and not any(item.has_genre(g) for g in criteria.genres):
        return False
    return True


def _relevance_rank(query: str) -> Callable[[Content], Tuple[int, str]]:
    """Exact title, then prefix, then substring; ties broken alphabetically."""
    needle = query.strip().lower()

    def rank(item: Content) -> Tuple[int, str]:
        title = item.title.lower()
        if not needle:
            return (0, "")
        if title == needle:
            return (0, title)
        if title.startswith(needle):
            return (1, title)
        return (2, title)

    return rank


def sort_results(items: List[Content], criteria: SearchCriteria) -> List[Content]:
    field_name = criteria.sort_field
    if field_name == "relevance":
        # without a query every title ranks equal and catalog order is kept
        return sorted(items, key=_relevance_rank(criteria.query))
    keys: Dict[str, Callable[[Content], object]] = {
        "title": lambda c: c.title.lower(),
        "year": lambda c: c.year,
        "rating": lambda c: c.rating,
    }
    by_title = sorted(items, key=keys["title"])
    if field_name == "title":
        return sorted(by_title, key=keys["title"], reverse=criteria.sort_descending)
    # stable: equal years/ratings stay in A-Z title order
    return sorted(by_title, key=keys[field_name], reverse=criteria.sort_descending)


@dataclass
class SearchCatalog:
    """Filter and order the loaded catalog for one search request."""

    catalog: CatalogPort

    def content_pool(self, content_type: Optional[ContentType]) -> List[Content]:
        if content_type is ContentType.MOVIE:
            return list(self.catalog.all_movies())
        if content_type is ContentType.SERIES:
            return list(self.catalog.all_series())
        pool: List[Content] = []
        seen = set()
        for item in chain(self.catalog.all_movies(), self.catalog.all_series()):
            key = (item.content_type, item.id)
            if key in seen:
                continue
            seen.add(key)
            pool.append(item)
        return pool

    def __call__(self, criteria: Optional[SearchCriteria]) -> List[Content]:
        if criteria is None:
            return []
        try:
            pool = self.content_pool(criteria.content_type)
            results = [item for item in pool if matches(item, criteria)]
            ordered = sort_results(results, criteria)
        except Exception as exc:
            raise map_error(exc, default_code="SEARCH_FAILED") from exc
        _log.debug("Search [%s] -> %d of %d titles", criteria.describe(), len(ordered), len(pool))
        return ordered


__all__ = ["SearchCatalog", "matches", "sort_results"]
