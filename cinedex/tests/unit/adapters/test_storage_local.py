from __future__ import annotations

import json
from pathlib import Path

import pytest

from cinedex.adapters.storage_local import StorageLocal
from cinedex.viewmodels.settings_vm import SettingsVM


def test_user_settings_round_trip(tmp_path: Path) -> None:
    storage = StorageLocal(root_dir=str(tmp_path))
    payload = {"data_dir": "/srv/catalog", "live_search": False, "live_search_delay_ms": 250, "debug_logging": True}

    storage.save_user_settings(payload)

    assert storage.load_user_settings() == payload
    assert not (tmp_path / "user_settings.json.tmp").exists()


def test_user_settings_missing_file_and_save(tmp_path: Path) -> None:
    storage = StorageLocal(root_dir=str(tmp_path / "nested"))
    assert storage.load_user_settings() is None

    vm = SettingsVM()
    storage.save_user_settings(vm.to_dict())

    settings_path = tmp_path / "nested" / "user_settings.json"
    with settings_path.open("r", encoding="utf-8") as fh:
        assert json.load(fh) == vm.to_dict()


def test_user_settings_must_be_an_object(tmp_path: Path) -> None:
    (tmp_path / "user_settings.json").write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        StorageLocal(root_dir=str(tmp_path)).load_user_settings()


def test_watchlist_and_ratings_round_trip(tmp_path: Path) -> None:
    storage = StorageLocal(root_dir=str(tmp_path))
    assert storage.load_watchlist() == []
    assert storage.load_ratings() == []

    storage.save_watchlist([{"content_key": "movie:1", "title": "Heat"}])
    storage.save_ratings([{"content_key": "movie:1", "score": 9}])

    assert storage.load_watchlist() == [{"content_key": "movie:1", "title": "Heat"}]
    assert storage.load_ratings() == [{"content_key": "movie:1", "score": 9}]
    on_disk = json.loads((tmp_path / "watchlist.json").read_text(encoding="utf-8"))
    assert list(on_disk) == ["entries"]


def test_list_files_without_expected_key_are_rejected(tmp_path: Path) -> None:
    (tmp_path / "ratings.json").write_text('{"scores": []}', encoding="utf-8")
    with pytest.raises(ValueError):
        StorageLocal(root_dir=str(tmp_path)).load_ratings()


def test_corrupt_json_propagates_decode_error(tmp_path: Path) -> None:
    (tmp_path / "watchlist.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        StorageLocal(root_dir=str(tmp_path)).load_watchlist()
