from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional

from .results_table import ResultsTable
from .view_utils import safe_call

RATED_COLUMNS = (
    ("title", "Title", 260),
    ("type", "Type", 70),
    ("score", "Score", 70),
    ("rated", "Rated", 100),
    ("review", "Review", 280),
)

OnKey = Optional[Callable[[str], None]]


class RatedView(ttk.Frame):
    def __init__(
        self,
        parent: tk.Widget,
        *,
        on_open: OnKey = None,
        on_remove: OnKey = None,
        on_sort: Optional[Callable[[str], None]] = None,
    ) -> None:
        super().__init__(parent)
        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)
        self._on_remove = on_remove

        bar = ttk.Frame(self)
        bar.grid(row=0, column=0, sticky="ew", pady=(0, 8))
        self.summary_var = tk.StringVar(value="")
        ttk.Label(bar, textvariable=self.summary_var, style="Subtle.TLabel").pack(side="left")
        ttk.Label(bar, text="Sort by").pack(side="left", padx=(16, 4))
        self.sort_var = tk.StringVar(value="")
        self.sort_box = ttk.Combobox(bar, textvariable=self.sort_var, state="readonly", width=12)
        self.sort_box.pack(side="left")
        self.sort_box.bind("<<ComboboxSelected>>", lambda _e: safe_call(on_sort, self.sort_var.get()))
        ttk.Button(bar, text="Remove Rating", command=self._remove_selected).pack(side="right")

        self.table = ResultsTable(self, columns=RATED_COLUMNS, on_open=on_open, show_count=False)
        self.table.grid(row=1, column=0, sticky="nsew")

    def render(self, dto: Dict) -> None:
        self.summary_var.set(dto["summary"])
        self.sort_box.configure(values=list(dto["sort_options"]))
        self.sort_var.set(dto["sort_by"])
        placeholder = "" if dto["rows"] else "Rate a title from its details to see it here"
        self.table.render({"rows": dto["rows"], "placeholder": placeholder})

    def _remove_selected(self) -> None:
        key = self.table.selected_key()
        if key:
            safe_call(self._on_remove, key)


__all__ = ["RatedView"]
