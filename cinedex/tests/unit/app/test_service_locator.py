from __future__ import annotations

from pathlib import Path

import pytest

from cinedex.app.data_manager import DataManager
from cinedex.app.service_locator import ServiceLocator, default_storage_root
from cinedex.app.ui_coordinator import UICoordinator
from cinedex.domain.ports import UseCaseError


@pytest.fixture(autouse=True)
def _reset_singleton():
    ServiceLocator.reset_instance()
    yield
    ServiceLocator.reset_instance()


def test_services_are_built_lazily_and_cached(tmp_path: Path) -> None:
    locator = ServiceLocator(data_dir=str(tmp_path), storage_root=str(tmp_path / "user"))
    dm = locator.data_manager
    assert isinstance(dm, DataManager)
    assert locator.data_manager is dm
    assert locator.search.catalog is dm
    assert locator.event_bus is locator.event_bus


def test_register_and_qualified_lookup(tmp_path: Path) -> None:
    locator = ServiceLocator(storage_root=str(tmp_path))
    locator.register("clock", "utc")
    locator.register("clock", "local", qualifier="ui")

    assert locator.get("clock") == "utc"
    assert locator.get("clock", "ui") == "local"
    assert locator.has("clock", "ui")


def test_missing_service_raises_not_found(tmp_path: Path) -> None:
    locator = ServiceLocator(storage_root=str(tmp_path))
    with pytest.raises(UseCaseError) as info:
        locator.get("nothing", qualifier="x")
    assert info.value.code == "SERVICE_NOT_FOUND"
    assert "nothing [x]" in info.value.message


def test_ui_coordinator_requires_attached_root(tmp_path: Path) -> None:
    locator = ServiceLocator(storage_root=str(tmp_path))
    with pytest.raises(UseCaseError) as info:
        locator.ui_coordinator
    assert info.value.code == "UI_NOT_ATTACHED"

    host = object()
    locator.attach_root(host)
    coordinator = locator.ui_coordinator
    assert isinstance(coordinator, UICoordinator)
    assert coordinator.host is host


def test_reset_drops_cached_services(tmp_path: Path) -> None:
    locator = ServiceLocator(storage_root=str(tmp_path))
    first = locator.data_manager
    locator.reset()
    assert locator.data_manager is not first


def test_configure_replaces_singleton(tmp_path: Path) -> None:
    configured = ServiceLocator.configure(data_dir=str(tmp_path), storage_root=str(tmp_path))
    assert ServiceLocator.instance() is configured
    assert configured.data_dir == str(tmp_path)


def test_environment_defaults(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CINEDEX_STORAGE_ROOT", str(tmp_path / "store"))
    monkeypatch.setenv("CINEDEX_DATA_DIR", str(tmp_path / "data"))
    locator = ServiceLocator()
    assert default_storage_root() == str(tmp_path / "store")
    assert locator.storage_root == str(tmp_path / "store")
    assert locator.data_dir == str(tmp_path / "data")
