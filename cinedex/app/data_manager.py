"""Owner of the in-memory catalog used by every controller.

The data manager is created once by the service locator. ``load_all_data``
fills the repositories from the catalog text files; everything else is
read access plus in-memory edits from the title editor.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..adapters.catalog_files import CatalogFiles
from ..adapters.memory_repository import CatalogRepositories, ContentRepository
from ..domain.entities import Celebrity, Content, ContentType, Episode, Movie, Series, split_content_key
from ..domain.errors import EntityNotFoundError
from ..domain.ports import CatalogEditPort
from ..usecases.load_catalog import LoadCatalog, LoadReport


class DataManager(CatalogEditPort):
    """In-memory catalog facade (movies, series, actors, directors)."""

    def __init__(self, source: Optional[CatalogFiles] = None, *, current_year: Optional[int] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.source = source or CatalogFiles()
        self.repos = CatalogRepositories()
        self.current_year = current_year
        self.last_report: Optional[LoadReport] = None
        self._data_loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def is_data_loaded(self) -> bool:
        return self._data_loaded

    def load_all_data(self) -> LoadReport:
        """Load every catalog file into memory, replacing previous content.

        A failed load leaves the previously loaded catalog in place.

        Raises:
            UseCaseError: when no movie or series could be loaded.
        """
        self._log.info("Loading catalog from %s", self.source.data_dir)
        repos = CatalogRepositories()
        report = LoadCatalog(self.source, repos, current_year=self.current_year)()
        self.repos = repos
        self.last_report = report
        self._data_loaded = True
        return report

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def all_movies(self) -> List[Movie]:
        return self.repos.movies.all()  # type: ignore[return-value]

    def all_series(self) -> List[Series]:
        return self.repos.series.all()  # type: ignore[return-value]

    def all_actors(self) -> List[Celebrity]:
        return self.repos.actors.all()

    def all_directors(self) -> List[Celebrity]:
        return self.repos.directors.all()

    def all_content(self) -> List[Content]:
        return [*self.all_movies(), *self.all_series()]

    def counts(self) -> Dict[str, int]:
        return self.repos.counts()

    def find_content(self, key: str) -> Optional[Content]:
        content_type, item_id = split_content_key(key)
        return self._repo_for(content_type).get(item_id)

    def get_content(self, key: str) -> Content:
        item = self.find_content(key)
        if item is None:
            raise EntityNotFoundError("Title", key)
        return item

    def find_movie_by_title(self, title: str) -> List[Movie]:
        return self.repos.movies.find_by_title(title)  # type: ignore[return-value]

    def find_series_by_title(self, title: str) -> List[Series]:
        return self.repos.series.find_by_title(title)  # type: ignore[return-value]

    def find_person(self, full_name: str) -> Optional[Celebrity]:
        return self.repos.actors.find_by_full_name(full_name) or self.repos.directors.find_by_full_name(full_name)

    def episodes_for_series(self, series_id: int) -> List[Episode]:
        series = self.repos.series.get(series_id)
        if series is None:
            raise EntityNotFoundError("Series", str(series_id))
        return [episode for season in series.seasons for episode in season.episodes]  # type: ignore[attr-defined]

    def top_rated(self, limit: int = 10) -> List[Content]:
        ranked = sorted(self.all_content(), key=lambda c: c.title.lower())
        return sorted(ranked, key=lambda c: c.rating, reverse=True)[:limit]

    def recent(self, limit: int = 10) -> List[Content]:
        ranked = sorted(self.all_content(), key=lambda c: c.title.lower())
        return sorted(ranked, key=lambda c: c.year, reverse=True)[:limit]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def save_content(self, item: Content) -> Content:
        """Add a new title (id 0) or replace the stored title with the same id."""
        repo = self._repo_for(item.content_type)
        if item.id and repo.get(item.id) is not None:
            return repo.replace(item)
        return repo.add(item)

    def delete_content(self, key: str) -> bool:
        content_type, item_id = split_content_key(key)
        return self._repo_for(content_type).remove(item_id)

    def _repo_for(self, content_type: ContentType) -> ContentRepository:
        return self.repos.movies if content_type is ContentType.MOVIE else self.repos.series


__all__ = ["DataManager"]
