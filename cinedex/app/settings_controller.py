"""Opens the preferences dialog and commits what the user saves.

A save is checked (data directory must hold catalog files), written through
the storage port, and then fanned out: log level, live-search timing and a
catalog reload when the directory moved.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Optional
from tkinter import filedialog

from cinedex.adapters.catalog_files import MOVIES_FILE, SERIES_FILE
from cinedex.domain.ports import StoragePort
from cinedex.viewmodels.settings_vm import SettingsVM
from cinedex.app.views.settings_dialog import SettingsDialog


class SettingsController:
    """Preferences dialog workflow."""

    def __init__(
        self,
        *,
        win,
        settings_vm: SettingsVM,
        storage: StoragePort,
        apply_logging_preferences: Callable[[], None],
        on_data_dir_changed: Callable[[str], None],
        on_live_search_changed: Callable[[bool, int], None],
        dialog_factory: Optional[Callable[..., Any]] = None,
    ) -> None:
        """
        Args:
            win: Main window; parents the dialog and shows toasts.
            settings_vm: Current preferences.
            storage: Where ``user_settings.json`` is written.
            apply_logging_preferences: Callback applying the debug log setting.
            on_data_dir_changed: Callback reloading the catalog from a new directory.
            on_live_search_changed: Callback receiving ``(enabled, delay_ms)``.
            dialog_factory: Builds the dialog; defaults to ``SettingsDialog``.
        """
        self._log = logging.getLogger(__name__)
        self.win = win
        self.settings_vm = settings_vm
        self.storage = storage
        self._apply_logging_preferences = apply_logging_preferences
        self._on_data_dir_changed = on_data_dir_changed
        self._on_live_search_changed = on_live_search_changed
        self._dialog_factory = dialog_factory
        self.dialog: Any = None

    def open_dialog(self) -> None:
        """Show the dialog prefilled from the current preferences."""
        factory = self._dialog_factory or SettingsDialog

        def handle_browse() -> None:
            chosen = filedialog.askdirectory(
                parent=self.dialog, title="Select catalog data directory", mustexist=True
            )
            if chosen and self.dialog is not None:
                self.dialog.set_data_dir(chosen)

        self.dialog = factory(
            self.win,
            on_browse_data_dir=handle_browse,
            on_save=self._on_settings_saved,
            on_close=self._on_dialog_closed,
        )
        self.dialog.set_data_dir(self.settings_vm.data_dir)
        self.dialog.set_live_search(self.settings_vm.live_search, self.settings_vm.live_search_delay_ms)
        self.dialog.set_debug_logging(self.settings_vm.debug_logging)
        self.dialog.set_save_enabled(self.settings_vm.is_valid())

    def _on_dialog_closed(self) -> None:
        self.dialog = None

    def _on_settings_saved(self, cfg: dict) -> bool:
        """Returns True when the payload was applied and written; False keeps the dialog open."""
        payload = dict(cfg or {})
        raw_dir = str(payload.get("data_dir") or "").strip()
        if raw_dir:
            target_dir = os.path.abspath(os.path.expanduser(raw_dir))
            if not os.path.isdir(target_dir):
                self.win.show_toast(f"Data directory does not exist: {raw_dir}")
                return False
            if not any(os.path.isfile(os.path.join(target_dir, name)) for name in (MOVIES_FILE, SERIES_FILE)):
                self.win.show_toast(f"No {MOVIES_FILE} or {SERIES_FILE} in {raw_dir}")
                return False
            payload["data_dir"] = os.path.normpath(target_dir)

        previous_dir = self.settings_vm.data_dir
        previous_live = (self.settings_vm.live_search, self.settings_vm.live_search_delay_ms)
        try:
            self.settings_vm.apply_dict(payload)
            self.storage.save_user_settings(self.settings_vm.to_dict())
            self._apply_logging_preferences()
        except Exception as exc:
            self._log.warning("Could not save settings: %s", exc)
            self.win.show_toast(f"Could not save settings: {exc}")
            return False

        live = (self.settings_vm.live_search, self.settings_vm.live_search_delay_ms)
        if live != previous_live:
            self._on_live_search_changed(*live)
        if self.settings_vm.data_dir != previous_dir:
            self._log.info("Catalog directory changed to %s", self.settings_vm.data_dir or "<bundled>")
            self._on_data_dir_changed(self.settings_vm.data_dir)
        self.win.show_toast("Settings saved.")
        return True


__all__ = ["SettingsController"]
