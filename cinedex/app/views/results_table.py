from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional, Sequence, Tuple

from .view_utils import safe_call

Column = Tuple[str, str, int]


class ResultsTable(ttk.Frame):
    """Treeview of titles with a count label and an empty-state placeholder.

    Rows are tuples whose first element is the content key (used as the
    Treeview item id); the remaining elements map onto ``columns``.
    """

    def __init__(
        self,
        parent: tk.Widget,
        *,
        columns: Sequence[Column],
        on_open: Optional[Callable[[str], None]] = None,
        show_count: bool = True,
    ) -> None:
        super().__init__(parent)
        self._on_open = on_open
        self._columns = tuple(columns)

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self.count_var = tk.StringVar(value="")
        if show_count:
            ttk.Label(self, textvariable=self.count_var, style="Subtle.TLabel").grid(
                row=0, column=0, sticky="w", pady=(0, 4)
            )

        body = ttk.Frame(self, style="Card.TFrame")
        body.grid(row=1, column=0, sticky="nsew")
        body.rowconfigure(0, weight=1)
        body.columnconfigure(0, weight=1)

        ids = [col_id for col_id, _, _ in self._columns]
        self.tree = ttk.Treeview(body, columns=ids, show="headings", selectmode="browse")
        for col_id, heading, width in self._columns:
            self.tree.heading(col_id, text=heading)
            anchor = "w" if col_id in {"title", "genre", "director", "name", "notes", "works"} else "center"
            self.tree.column(col_id, width=width, anchor=anchor, stretch=col_id in {"title", "name"})
        vbar = ttk.Scrollbar(body, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=vbar.set)
        self.tree.grid(row=0, column=0, sticky="nsew")
        vbar.grid(row=0, column=1, sticky="ns")

        self._placeholder = ttk.Label(body, text="", style="Placeholder.TLabel")

        self.tree.bind("<Double-1>", self._handle_open)
        self.tree.bind("<Return>", self._handle_open)

    def render(self, dto: Dict) -> None:
        """Replace all rows.

        Args:
            dto: ``{"rows": [...], "count_label": str, "placeholder": str}``.
        """
        self.tree.delete(*self.tree.get_children())
        for row in dto.get("rows", []):
            self.tree.insert("", "end", iid=row[0], values=row[1:])
        self.count_var.set(dto.get("count_label", ""))
        placeholder = dto.get("placeholder", "")
        if placeholder:
            self._placeholder.configure(text=placeholder)
            self._placeholder.place(relx=0.5, rely=0.4, anchor="center")
        else:
            self._placeholder.place_forget()

    def selected_key(self) -> Optional[str]:
        selection = self.tree.selection()
        return selection[0] if selection else None

    def _handle_open(self, _event: tk.Event) -> None:
        key = self.selected_key()
        if key:
            safe_call(self._on_open, key)


__all__ = ["ResultsTable"]
