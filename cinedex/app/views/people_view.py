from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional, Sequence

from .results_table import ResultsTable
from .view_utils import safe_call

PEOPLE_COLUMNS = (
    ("name", "Name", 200),
    ("role", "Role", 80),
    ("born", "Born", 60),
    ("gender", "Gender", 70),
    ("nationality", "Nationality", 110),
    ("works", "Known for", 300),
)


class CelebritiesView(ttk.Frame):
    """Actors and directors table with a name filter and role selector."""

    def __init__(
        self,
        parent: tk.Widget,
        *,
        role_filters: Sequence[str],
        on_filter_changed: Optional[Callable[[str], None]] = None,
        on_role_changed: Optional[Callable[[str], None]] = None,
    ) -> None:
        super().__init__(parent)
        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)
        self._on_filter_changed = on_filter_changed
        self._on_role_changed = on_role_changed

        bar = ttk.Frame(self)
        bar.grid(row=0, column=0, sticky="ew", pady=(0, 8))
        ttk.Label(bar, text="Name").pack(side="left")
        self.filter_var = tk.StringVar(value="")
        ttk.Entry(bar, textvariable=self.filter_var, width=30).pack(side="left", padx=6)
        self.filter_var.trace_add("write", lambda *_: safe_call(self._on_filter_changed, self.filter_var.get()))
        self.role_var = tk.StringVar(value=role_filters[0] if role_filters else "")
        for label in role_filters:
            ttk.Radiobutton(
                bar,
                text=label,
                value=label,
                variable=self.role_var,
                command=lambda: safe_call(self._on_role_changed, self.role_var.get()),
            ).pack(side="left", padx=(8, 0))

        self.table = ResultsTable(self, columns=PEOPLE_COLUMNS)
        self.table.grid(row=1, column=0, sticky="nsew")

    def render(self, dto: Dict) -> None:
        rows = [(str(index), *row) for index, row in enumerate(dto["rows"])]
        self.table.render({"rows": rows, "count_label": dto["count_label"]})


__all__ = ["CelebritiesView", "PEOPLE_COLUMNS"]
