"""Load the catalog text files into the in-memory repositories.

Files are processed in a fixed order (actors, directors, movies, series,
awards) so that people already exist when titles reference them and titles
exist when award lines are matched. Each file is an independent task: a
missing or unreadable file marks that task failed and the remaining tasks
still run. Per-line problems are counted, logged and skipped.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..adapters.catalog_files import (
    ACTORS_FILE,
    AWARDS_FILE,
    DIRECTORS_FILE,
    MOVIES_FILE,
    SERIES_FILE,
    CatalogFiles,
    parse_award,
    parse_celebrity,
    parse_movie,
    parse_series,
)
from ..adapters.memory_repository import CatalogRepositories, CelebrityRepository, ContentRepository
from ..domain.entities import Celebrity, Content, ContentType, Series
from ..domain.errors import CatalogError, FileParsingError
from ..domain.ports import UseCaseError


@dataclass
class TaskResult:
    """Outcome of loading one catalog file."""

    name: str
    file_name: str
    ok: bool = True
    loaded: int = 0
    skipped: int = 0
    duplicates: int = 0
    errors: int = 0
    not_found: int = 0
    elapsed_s: float = 0.0
    message: str = ""

    def describe(self) -> str:
        if not self.ok:
            return f"{self.name}: FAILED ({self.message})"
        text = f"{self.name}: {self.loaded} loaded"
        extras = [
            (self.skipped, "skipped"),
            (self.duplicates, "duplicates"),
            (self.errors, "errors"),
            (self.not_found, "not matched"),
        ]
        details = ", ".join(f"{count} {label}" for count, label in extras if count)
        if details:
            text = f"{text} ({details})"
        return f"{text} in {self.elapsed_s:.2f}s"


@dataclass
class LoadReport:
    tasks: List[TaskResult] = field(default_factory=list)
    elapsed_s: float = 0.0

    @property
    def failed_tasks(self) -> List[TaskResult]:
        return [task for task in self.tasks if not task.ok]

    @property
    def ok(self) -> bool:
        return not self.failed_tasks

    def task(self, name: str) -> Optional[TaskResult]:
        for item in self.tasks:
            if item.name == name:
                return item
        return None

    def summary(self) -> str:
        done = len(self.tasks) - len(self.failed_tasks)
        return f"{done}/{len(self.tasks)} catalog files loaded in {self.elapsed_s:.2f}s"


@dataclass
class LoadCatalog:
    source: CatalogFiles
    repos: CatalogRepositories
    current_year: Optional[int] = None

    def __post_init__(self) -> None:
        self._log = logging.getLogger(__name__)

    def __call__(self) -> LoadReport:
        """Run every load task and return the per-file report.

        Raises:
            UseCaseError: ``CATALOG_EMPTY`` when no movie or series could be loaded.
        """
        tasks: List[tuple] = [
            ("Actors", ACTORS_FILE, self._load_actors),
            ("Directors", DIRECTORS_FILE, self._load_directors),
            ("Movies", MOVIES_FILE, self._load_movies),
            ("Series", SERIES_FILE, self._load_series),
            ("Awards", AWARDS_FILE, self._load_awards),
        ]
        report = LoadReport()
        started = time.perf_counter()
        for name, file_name, loader in tasks:
            report.tasks.append(self._run_task(name, file_name, loader))
        report.elapsed_s = time.perf_counter() - started

        for task in report.tasks:
            log = self._log.info if task.ok else self._log.warning
            log(task.describe())
        counts = self.repos.counts()
        self._log.info(
            "%s (movies=%d series=%d actors=%d directors=%d)",
            report.summary(),
            counts["movies"],
            counts["series"],
            counts["actors"],
            counts["directors"],
        )

        if counts["movies"] == 0 and counts["series"] == 0:
            failed = ", ".join(task.name for task in report.failed_tasks) or "none"
            raise UseCaseError(
                "CATALOG_EMPTY",
                f"No movies or series could be loaded from {self.source.data_dir} (failed: {failed}).",
            )
        return report

    # ------------------------------------------------------------------
    def _run_task(self, name: str, file_name: str, loader: Callable[[TaskResult], None]) -> TaskResult:
        result = TaskResult(name=name, file_name=file_name)
        if not self.source.exists(file_name):
            result.ok = False
            result.message = f"{file_name} not found"
            return result
        started = time.perf_counter()
        try:
            loader(result)
        except FileParsingError as exc:
            result.ok = False
            result.message = str(exc)
        result.elapsed_s = time.perf_counter() - started
        return result

    def _skip_line(self, result: TaskResult, line_no: int, exc: Exception) -> None:
        result.errors += 1
        self._log.debug("%s line %d skipped: %s", result.file_name, line_no, exc)

    def _load_celebrities(self, result: TaskResult, repo: CelebrityRepository, role: str) -> None:
        path = self.source.path_for(result.file_name)
        for line_no, fields in self.source.read_records(result.file_name):
            try:
                person = parse_celebrity(fields, role, path=path, line_no=line_no)
            except CatalogError as exc:
                self._skip_line(result, line_no, exc)
                continue
            if repo.find_by_full_name(person.full_name) is not None:
                result.duplicates += 1
                continue
            repo.add(person)
            result.loaded += 1

    def _load_actors(self, result: TaskResult) -> None:
        self._load_celebrities(result, self.repos.actors, "actor")

    def _load_directors(self, result: TaskResult) -> None:
        self._load_celebrities(result, self.repos.directors, "director")

    def _load_movies(self, result: TaskResult) -> None:
        path = self.source.path_for(result.file_name)
        for line_no, fields in self.source.read_records(result.file_name):
            try:
                movie = parse_movie(fields, path=path, line_no=line_no, current_year=self.current_year)
            except CatalogError as exc:
                self._skip_line(result, line_no, exc)
                continue
            if movie is None:
                result.skipped += 1
                continue
            if self._store_content(self.repos.movies, movie, result):
                self._link_people(movie)

    def _load_series(self, result: TaskResult) -> None:
        path = self.source.path_for(result.file_name)
        for line_no, fields in self.source.read_records(result.file_name):
            try:
                series = parse_series(fields, path=path, line_no=line_no, current_year=self.current_year)
            except CatalogError as exc:
                self._skip_line(result, line_no, exc)
                continue
            if self._store_content(self.repos.series, series, result):
                self._link_people(series)

    def _load_awards(self, result: TaskResult) -> None:
        path = self.source.path_for(result.file_name)
        for line_no, fields in self.source.read_records(result.file_name):
            try:
                record = parse_award(fields, path=path, line_no=line_no)
            except CatalogError as exc:
                self._skip_line(result, line_no, exc)
                continue
            repo = self.repos.movies if record.content_type is ContentType.MOVIE else self.repos.series
            target = repo.find_by_title_and_year(record.title, record.year)
            if target is None:
                result.not_found += 1
                self._log.debug("No %s '%s' (%d) for award line %d", record.content_type.value, record.title, record.year, line_no)
                continue
            for award in record.awards:
                if award not in target.awards:
                    target.awards.append(award)
            if record.box_office:
                target.box_office = record.box_office
            if isinstance(target, Series) and record.nominations:
                target.nominations = record.nominations
            result.loaded += 1

    def _store_content(self, repo: ContentRepository, item: Content, result: TaskResult) -> bool:
        if repo.find_by_title_and_year(item.title, item.year) is not None:
            result.duplicates += 1
            return False
        repo.add(item)
        result.loaded += 1
        return True

    def _link_people(self, item: Content) -> None:
        """Create director/actor records that only appear in title files."""
        if item.director:
            self._ensure_person(self.repos.directors, item.director, "director", item.title)
        for name in item.cast:
            self._ensure_person(self.repos.actors, name, "actor", item.title)

    @staticmethod
    def _ensure_person(repo: CelebrityRepository, full_name: str, role: str, work: str) -> None:
        person = repo.find_by_full_name(full_name)
        if person is None:
            first, _, last = full_name.partition(" ")
            person = repo.add(Celebrity(first_name=first, last_name=last, role=role))
        if work not in person.notable_works:
            person.notable_works.append(work)


__all__ = ["LoadCatalog", "LoadReport", "TaskResult"]
