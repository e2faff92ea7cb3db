from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Any, Callable, Dict, Optional, Sequence

from .results_table import Column, ResultsTable
from .search_form_view import SearchFormView


class SearchView(ttk.Frame):
    """Search tab: the form on top, the results table below."""

    def __init__(
        self,
        parent: tk.Widget,
        *,
        columns: Sequence[Column],
        on_open_result: Optional[Callable[[str], None]] = None,
        **form_callbacks: Any,
    ) -> None:
        super().__init__(parent)
        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        box = ttk.Labelframe(self, text="Find movies and series")
        box.grid(row=0, column=0, sticky="ew", pady=(0, 8))
        box.columnconfigure(0, weight=1)
        self.form = SearchFormView(box, **form_callbacks)
        self.form.grid(row=0, column=0, sticky="ew")

        self.results = ResultsTable(self, columns=columns, on_open=on_open_result)
        self.results.grid(row=1, column=0, sticky="nsew")

    def apply_form_state(self, state: Dict) -> None:
        self.form.apply_state(state)

    def render_results(self, dto: Dict) -> None:
        self.results.render(dto)


__all__ = ["SearchView"]
