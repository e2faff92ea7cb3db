from __future__ import annotations

import json

from cinedex.domain.errors import DuplicateEntryError, EntityNotFoundError, FileParsingError, ValidationError
from cinedex.domain.ports import UseCaseError
from cinedex.usecases.error_mapping import map_error


def test_domain_errors_get_stable_codes() -> None:
    assert map_error(ValidationError("bad"), default_code="X").code == "INVALID_INPUT"
    assert map_error(EntityNotFoundError("Title", "movie:1"), default_code="X").code == "NOT_FOUND"
    assert map_error(DuplicateEntryError("twice"), default_code="X").code == "DUPLICATE"


def test_use_case_errors_pass_through() -> None:
    original = UseCaseError("CATALOG_EMPTY", "nothing loaded")
    assert map_error(original, default_code="X") is original


def test_file_and_json_errors_have_readable_messages() -> None:
    parsing = map_error(FileParsingError("movies.txt", "expected at least 6 fields", 4), default_code="X")
    assert parsing.code == "DATA_FILE_ERROR"
    assert parsing.message == "Catalog data error: movies.txt:4: expected at least 6 fields"

    try:
        json.loads("{oops")
    except json.JSONDecodeError as exc:
        corrupt = map_error(exc, default_code="X")
    assert corrupt.code == "CORRUPT_USER_DATA"


def test_os_error_mentions_file_name() -> None:
    err = map_error(FileNotFoundError(2, "No such file or directory", "ratings.json"), default_code="X")
    assert err.code == "IO_ERROR"
    assert err.message == "File access failed: No such file or directory (ratings.json)"


def test_unmapped_errors_use_defaults() -> None:
    assert map_error(RuntimeError("boom"), default_code="SEARCH_FAILED").message == "boom"
    fallback = map_error(RuntimeError(), default_code="SEARCH_FAILED", default_message="Search failed.")
    assert (fallback.code, fallback.message) == ("SEARCH_FAILED", "Search failed.")
    assert map_error(RuntimeError(), default_code="X").message == "Unexpected error."
