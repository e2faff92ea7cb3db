from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from .view_utils import center_over, safe_call


class SettingsDialog(tk.Toplevel):
    """Modal preferences editor; emits a flat dict on Save."""

    OnVoid = Optional[Callable[[], None]]
    OnSave = Optional[Callable[[dict], object]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        on_browse_data_dir: OnVoid = None,
        on_save: OnSave = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__(parent)
        self.title("Settings")
        self.transient(parent)
        self.resizable(False, False)

        self._on_browse_data_dir = on_browse_data_dir
        self._on_save = on_save
        self._on_close = on_close
        self.protocol("WM_DELETE_WINDOW", self._on_close_clicked)

        self.data_dir_var = tk.StringVar(value="")
        self.live_search_var = tk.BooleanVar(value=True)
        self.live_delay_var = tk.StringVar(value="400")
        self.debug_logging_var = tk.BooleanVar(value=False)

        self._build_ui()

        self.update_idletasks()
        self.geometry(center_over(parent, 560, 260))
        self.grab_set()
        self.focus_set()

    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        pad = dict(padx=8, pady=6)
        self.columnconfigure(0, weight=1)

        catalog = ttk.Labelframe(self, text="Catalog")
        catalog.grid(row=0, column=0, sticky="ew", **pad)
        catalog.columnconfigure(1, weight=1)
        ttk.Label(catalog, text="Data directory").grid(row=0, column=0, sticky="w")
        ttk.Entry(catalog, textvariable=self.data_dir_var).grid(row=0, column=1, sticky="ew", padx=(6, 6))
        ttk.Button(catalog, text="Browse...", command=lambda: safe_call(self._on_browse_data_dir)).grid(
            row=0, column=2
        )
        ttk.Label(catalog, text="Leave empty to use the bundled sample catalog", style="Subtle.TLabel").grid(
            row=1, column=0, columnspan=3, sticky="w", pady=(4, 0)
        )

        search = ttk.Labelframe(self, text="Search")
        search.grid(row=1, column=0, sticky="ew", **pad)
        ttk.Checkbutton(search, text="Search while typing a title", variable=self.live_search_var).grid(
            row=0, column=0, sticky="w"
        )
        ttk.Label(search, text="Delay (ms)").grid(row=0, column=1, sticky="e", padx=(16, 6))
        ttk.Entry(search, textvariable=self.live_delay_var, width=6).grid(row=0, column=2, sticky="w")

        flags = ttk.Frame(self)
        flags.grid(row=2, column=0, sticky="ew", **pad)
        ttk.Checkbutton(flags, text="Enable debug logging", variable=self.debug_logging_var).pack(side="left")

        footer = ttk.Frame(self)
        footer.grid(row=3, column=0, sticky="ew", **pad)
        self._btn_save = ttk.Button(footer, text="Save", style="Accent.TButton", command=self._emit_save)
        self._btn_save.pack(side="right", padx=(6, 0))
        ttk.Button(footer, text="Close", command=self._on_close_clicked).pack(side="right")

    # ------------------------------------------------------------------
    def _emit_save(self) -> None:
        settings = {
            "data_dir": self.data_dir_var.get().strip(),
            "live_search": bool(self.live_search_var.get()),
            "live_search_delay_ms": self._parse_int(self.live_delay_var.get(), 400),
            "debug_logging": bool(self.debug_logging_var.get()),
        }
        safe_call(self._on_save, settings)

    def _on_close_clicked(self) -> None:
        safe_call(self._on_close)
        if self.winfo_exists():
            self.grab_release()
            self.destroy()

    # ---- prefill ----
    def set_data_dir(self, path: str) -> None:
        self.data_dir_var.set(path)

    def set_live_search(self, enabled: bool, delay_ms: int) -> None:
        self.live_search_var.set(bool(enabled))
        self.live_delay_var.set(str(delay_ms))

    def set_debug_logging(self, enabled: bool) -> None:
        self.debug_logging_var.set(bool(enabled))

    def set_save_enabled(self, enabled: bool) -> None:
        self._btn_save.configure(state=tk.NORMAL if enabled else tk.DISABLED)

    @staticmethod
    def _parse_int(text: str, default: int) -> int:
        text = (text or "").strip()
        return int(text) if text.isdigit() else default


__all__ = ["SettingsDialog"]
