from __future__ import annotations

from typing import Any, List

import pytest

from cinedex.app.ui_coordinator import UICoordinator
from cinedex.domain.ports import UseCaseError


class ViewStub:
    def __init__(self, name: str, host: Any) -> None:
        self.name = name
        self.host = host
        self.visible = False

    def pack(self, **_kwargs: Any) -> None:
        self.visible = True

    def pack_forget(self) -> None:
        self.visible = False


def _coordinator(*names: str) -> UICoordinator:
    coordinator = UICoordinator(host="host")
    for name in names:
        coordinator.register_view(name, lambda host, n=name: ViewStub(n, host))
    return coordinator


def test_views_are_built_once() -> None:
    built: List[str] = []
    coordinator = UICoordinator(host="host")
    coordinator.register_view("home", lambda host: built.append("home") or ViewStub("home", host))

    assert not coordinator.views_loaded
    assert coordinator.load_and_initialize_views()
    assert coordinator.load_and_initialize_views()
    assert built == ["home"]
    assert coordinator.home_view.host == "host"


def test_show_swaps_the_visible_child() -> None:
    coordinator = _coordinator("home", "search")
    coordinator.load_and_initialize_views()

    home = coordinator.show("home")
    search = coordinator.show("search")

    assert not home.visible
    assert search.visible
    assert coordinator.current_name == "search"
    assert coordinator.show("search") is search


def test_failing_view_is_reported_and_others_load() -> None:
    coordinator = _coordinator("home")

    def broken(_host: Any) -> Any:
        raise RuntimeError("widget error")

    coordinator.register_view("search", broken)

    assert coordinator.load_and_initialize_views() is False
    assert coordinator.failed_views == ["search"]
    assert coordinator.get_view("home").name == "home"
    with pytest.raises(UseCaseError) as info:
        coordinator.show("search")
    assert info.value.code == "VIEW_NOT_LOADED"


def test_unknown_view() -> None:
    with pytest.raises(UseCaseError) as info:
        _coordinator("home").get_view("settings")
    assert info.value.code == "UNKNOWN_VIEW"
