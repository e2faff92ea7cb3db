from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Protocol, TypeVar

from .entities import Celebrity, Content, Movie, Series

ContentKey = str
T = TypeVar("T")


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class RepositoryPort(Protocol[T]):
    """In-memory collection keyed by integer id."""

    def add(self, item: T) -> T: ...
    def get(self, item_id: int) -> Optional[T]: ...
    def replace(self, item: T) -> T: ...
    def remove(self, item_id: int) -> bool: ...
    def all(self) -> List[T]: ...
    def count(self) -> int: ...
    def clear(self) -> None: ...


class CatalogPort(Protocol):
    """Read access to the loaded catalog used by search and detail use cases."""

    def all_movies(self) -> List[Movie]: ...
    def all_series(self) -> List[Series]: ...
    def all_actors(self) -> List[Celebrity]: ...
    def all_directors(self) -> List[Celebrity]: ...
    def find_content(self, key: ContentKey) -> Optional[Content]: ...


class CatalogEditPort(CatalogPort, Protocol):
    """In-memory edits to the loaded catalog (lost on the next reload)."""

    def save_content(self, item: Content) -> Content: ...
    def delete_content(self, key: ContentKey) -> bool: ...


class CatalogSourcePort(Protocol):
    """Reads raw catalog records from a data source (text files)."""

    def read_lines(self, name: str) -> Iterable[str]: ...
    def exists(self, name: str) -> bool: ...


class StoragePort(Protocol):
    """Persistence for user settings, watchlist and ratings."""

    def save_user_settings(self, payload: Dict) -> None: ...
    def load_user_settings(self) -> Optional[Dict]: ...
    def save_watchlist(self, entries: List[Dict]) -> None: ...
    def load_watchlist(self) -> List[Dict]: ...
    def save_ratings(self, ratings: List[Dict]) -> None: ...
    def load_ratings(self) -> List[Dict]: ...
