from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional

from .results_table import ResultsTable
from .view_utils import safe_call

WATCHLIST_COLUMNS = (
    ("title", "Title", 260),
    ("type", "Type", 70),
    ("added", "Added", 100),
    ("watched", "Watched", 70),
    ("notes", "Notes", 260),
)

OnKey = Optional[Callable[[str], None]]


class WatchlistView(ttk.Frame):
    def __init__(
        self,
        parent: tk.Widget,
        *,
        on_open: OnKey = None,
        on_toggle_watched: OnKey = None,
        on_remove: OnKey = None,
        on_hide_watched: Optional[Callable[[bool], None]] = None,
    ) -> None:
        super().__init__(parent)
        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)
        self._on_toggle_watched = on_toggle_watched
        self._on_remove = on_remove

        bar = ttk.Frame(self)
        bar.grid(row=0, column=0, sticky="ew", pady=(0, 8))
        self.summary_var = tk.StringVar(value="")
        ttk.Label(bar, textvariable=self.summary_var, style="Subtle.TLabel").pack(side="left")
        self.hide_var = tk.BooleanVar(value=False)
        ttk.Checkbutton(
            bar,
            text="Hide watched",
            variable=self.hide_var,
            command=lambda: safe_call(on_hide_watched, bool(self.hide_var.get())),
        ).pack(side="left", padx=(16, 0))
        ttk.Button(bar, text="Remove", command=lambda: self._with_selection(self._on_remove)).pack(side="right")
        ttk.Button(bar, text="Toggle Watched", command=lambda: self._with_selection(self._on_toggle_watched)).pack(
            side="right", padx=(0, 6)
        )

        self.table = ResultsTable(self, columns=WATCHLIST_COLUMNS, on_open=on_open, show_count=False)
        self.table.grid(row=1, column=0, sticky="nsew")

    def render(self, dto: Dict) -> None:
        self.summary_var.set(dto["summary"])
        placeholder = "" if dto["rows"] else "Your watchlist is empty"
        self.table.render({"rows": dto["rows"], "placeholder": placeholder})

    def _with_selection(self, fn: OnKey) -> None:
        key = self.table.selected_key()
        if key:
            safe_call(fn, key)


__all__ = ["WatchlistView"]
