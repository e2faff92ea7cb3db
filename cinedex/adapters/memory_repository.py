from __future__ import annotations

from typing import Callable, Dict, Generic, List, Optional, TypeVar

from cinedex.domain.entities import Celebrity, Content
from cinedex.domain.errors import DuplicateEntryError, EntityNotFoundError

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Insertion-ordered collection that hands out sequential integer ids."""

    def __init__(self, label: str) -> None:
        self.label = label
        self._items: Dict[int, T] = {}
        self._next_id = 1

    def add(self, item: T) -> T:
        item_id = getattr(item, "id", 0) or self._next_id
        if item_id in self._items:
            raise DuplicateEntryError(f"{self.label} id {item_id} already stored")
        item.id = item_id  # type: ignore[attr-defined]
        self._items[item_id] = item
        self._next_id = max(self._next_id, item_id + 1)
        return item

    def get(self, item_id: int) -> Optional[T]:
        return self._items.get(item_id)

    def replace(self, item: T) -> T:
        """Swap the stored item that has the same id for ``item``."""
        item_id = getattr(item, "id", 0)
        if item_id not in self._items:
            raise EntityNotFoundError(self.label, str(item_id))
        self._items[item_id] = item
        return item

    def remove(self, item_id: int) -> bool:
        return self._items.pop(item_id, None) is not None

    def all(self) -> List[T]:
        return list(self._items.values())

    def count(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()
        self._next_id = 1

    def find(self, predicate: Callable[[T], bool]) -> List[T]:
        return [item for item in self._items.values() if predicate(item)]


class ContentRepository(InMemoryRepository[Content]):
    """Movies or series, with title lookups used by loaders and controllers."""

    def find_by_title(self, title: str) -> List[Content]:
        needle = (title or "").strip().lower()
        return self.find(lambda c: c.title.lower() == needle)

    def find_by_title_and_year(self, title: str, year: int) -> Optional[Content]:
        for item in self.find_by_title(title):
            if item.year == year:
                return item
        return None


class CelebrityRepository(InMemoryRepository[Celebrity]):
    """Actors or directors, unique by full name (case-insensitive)."""

    def find_by_full_name(self, full_name: str) -> Optional[Celebrity]:
        needle = " ".join((full_name or "").split()).lower()
        for person in self._items.values():
            if person.full_name.lower() == needle:
                return person
        return None

    def add(self, item: Celebrity) -> Celebrity:
        if self.find_by_full_name(item.full_name) is not None:
            raise DuplicateEntryError(f"{self.label} already stored: {item.full_name}")
        return super().add(item)


class CatalogRepositories:
    """The four collections making up a loaded catalog."""

    def __init__(self) -> None:
        self.movies = ContentRepository("Movie")
        self.series = ContentRepository("Series")
        self.actors = CelebrityRepository("Actor")
        self.directors = CelebrityRepository("Director")

    def clear(self) -> None:
        for repo in (self.movies, self.series, self.actors, self.directors):
            repo.clear()

    def counts(self) -> Dict[str, int]:
        return {
            "movies": self.movies.count(),
            "series": self.series.count(),
            "actors": self.actors.count(),
            "directors": self.directors.count(),
        }


__all__ = ["InMemoryRepository", "ContentRepository", "CelebrityRepository", "CatalogRepositories"]
