from __future__ import annotations

import pytest

from cinedex.viewmodels.settings_vm import SettingsConfig, SettingsVM, default_settings_payload


def test_default_payload_is_flat_and_complete() -> None:
    payload = default_settings_payload()
    assert set(payload) == {*SettingsConfig.__annotations__.keys(), "debug_logging"}
    assert payload["last_view"] == "home"
    assert payload["live_search_delay_ms"] == 400


def test_apply_dict_coerces_values() -> None:
    vm = SettingsVM()
    vm.apply_dict(
        {
            "data_dir": "  /srv/catalog  ",
            "live_search": "no",
            "live_search_delay_ms": "250",
            "window_width": 1280.0,
            "last_view": "Watchlist",
            "debug_logging": "yes",
        }
    )
    assert vm.data_dir == "/srv/catalog"
    assert vm.live_search is False
    assert vm.live_search_delay_ms == 250
    assert vm.window_geometry == "1280x700"
    assert vm.last_view == "watchlist"
    assert vm.debug_logging is True


def test_apply_dict_rejects_unknown_keys() -> None:
    vm = SettingsVM()
    with pytest.raises(ValueError, match="Unsupported settings keys: theme"):
        vm.apply_dict({"theme": "dark", "live_search": True})
    assert vm.live_search is True


@pytest.mark.parametrize(
    "payload",
    [
        ["not", "a", "mapping"],
        {"live_search_delay_ms": -5},
        {"window_width": True},
        {"window_height": "tall"},
        {"last_view": "dashboard"},
        {"data_dir": 42},
    ],
)
def test_apply_dict_rejects_bad_values(payload) -> None:
    with pytest.raises(ValueError):
        SettingsVM().apply_dict(payload)


def test_to_dict_round_trips_through_apply_dict() -> None:
    source = SettingsVM()
    source.set_data_dir("/data")
    source.remember_view("series")
    source.set_debug_logging(True)

    target = SettingsVM()
    target.apply_dict(source.to_dict())
    assert target.to_dict() == source.to_dict()


def test_remember_window_enforces_minimum_size() -> None:
    vm = SettingsVM()
    vm.remember_window(300, 2000)
    assert vm.window_geometry == "640x2000"
    assert vm.is_valid()


def test_cmd_save_emits_snapshot() -> None:
    saved = []
    vm = SettingsVM(on_save=saved.append)
    vm.live_search_delay_ms = 150
    vm.cmd_save()
    assert saved[0]["live_search_delay_ms"] == 150


def test_cmd_save_refuses_invalid_config() -> None:
    saved = []
    vm = SettingsVM(config=SettingsConfig(window_width=100), on_save=saved.append)
    assert not vm.is_valid()
    with pytest.raises(ValueError):
        vm.cmd_save()
    assert saved == []


def test_debug_logging_default_follows_environment(monkeypatch) -> None:
    monkeypatch.delenv("CINEDEX_LOG_LEVEL", raising=False)
    monkeypatch.setenv("CINEDEX_DEBUG", "1")
    assert SettingsVM().debug_logging is True
    monkeypatch.setenv("CINEDEX_DEBUG", "0")
    monkeypatch.delenv("CINEDEX_DEBUG_LOGGING", raising=False)
    assert SettingsVM().debug_logging is False


def test_rated_list_is_a_valid_start_view() -> None:
    vm = SettingsVM()
    vm.remember_view("rated")
    assert vm.is_valid()
    assert vm.to_dict()["last_view"] == "rated"
