from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional, Sequence

from .view_utils import center_over, safe_call

# entry name, label; the length and director labels follow the content type
_ENTRIES = (
    ("title", "Title"),
    ("year", "Year"),
    ("end_year", "End year"),
    ("length", ""),
    ("rating", "Rating (0-10)"),
    ("director", ""),
    ("cast", "Cast (; separated)"),
)


class EditContentDialog(tk.Toplevel):
    """Add/edit form for one movie or series (UI-only)."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        genres: Sequence[str],
        on_type_changed: Optional[Callable[[str], None]] = None,
        on_genre_toggled: Optional[Callable[[str, bool], None]] = None,
        on_save: Optional[Callable[[Dict[str, str]], None]] = None,
        on_delete: OnVoid = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__(parent)
        self.transient(parent)
        self.resizable(False, False)
        self._on_type_changed = on_type_changed
        self._on_genre_toggled = on_genre_toggled
        self._on_save = on_save
        self._on_delete = on_delete
        self._on_close = on_close
        self.protocol("WM_DELETE_WINDOW", self._close)
        self.bind("<Escape>", lambda e: self._close())

        self.type_var = tk.StringVar(value="")
        self.vars: Dict[str, tk.StringVar] = {name: tk.StringVar(value="") for name, _ in _ENTRIES}
        self.genre_vars: Dict[str, tk.BooleanVar] = {label: tk.BooleanVar(value=False) for label in genres}
        self._labels: Dict[str, ttk.Label] = {}
        self._rows: Dict[str, tuple] = {}

        self._build(genres)
        self.update_idletasks()
        self.geometry(center_over(parent, 560, 520))

    def _build(self, genres: Sequence[str]) -> None:
        pad = dict(padx=10, pady=4)
        form = ttk.Frame(self)
        form.grid(row=0, column=0, sticky="nsew", **pad)
        form.columnconfigure(1, weight=1)

        ttk.Label(form, text="Type").grid(row=0, column=0, sticky="w", pady=2)
        self.type_box = ttk.Combobox(form, textvariable=self.type_var, state="readonly", width=12)
        self.type_box.grid(row=0, column=1, sticky="w", pady=2)
        self.type_box.bind("<<ComboboxSelected>>", lambda _e: safe_call(self._on_type_changed, self.type_var.get()))

        for row, (name, text) in enumerate(_ENTRIES, start=1):
            label = ttk.Label(form, text=text)
            label.grid(row=row, column=0, sticky="w", pady=2)
            entry = ttk.Entry(form, textvariable=self.vars[name], width=40)
            entry.grid(row=row, column=1, sticky="ew", pady=2)
            self._labels[name] = label
            self._rows[name] = (label, entry)

        box = ttk.Labelframe(self, text="Genres")
        box.grid(row=1, column=0, sticky="ew", **pad)
        for index, label in enumerate(genres):
            ttk.Checkbutton(
                box,
                text=label,
                variable=self.genre_vars[label],
                command=lambda g=label: safe_call(self._on_genre_toggled, g, bool(self.genre_vars[g].get())),
            ).grid(row=index // 4, column=index % 4, sticky="w", padx=4, pady=1)

        ttk.Label(
            self, text="Changes stay in memory until the catalog is reloaded.", style="Subtle.TLabel"
        ).grid(row=2, column=0, sticky="w", **pad)

        footer = ttk.Frame(self)
        footer.grid(row=3, column=0, sticky="ew", **pad)
        ttk.Button(footer, text="Cancel", command=self._close).pack(side="right")
        ttk.Button(footer, text="Save", style="Accent.TButton", command=self._save).pack(side="right", padx=(0, 6))
        self.delete_button = ttk.Button(footer, text="Delete", command=lambda: safe_call(self._on_delete))
        self.delete_button.pack(side="left")

    def render(self, dto: Dict) -> None:
        self.title(dto["window_title"])
        self.type_box.configure(
            values=list(dto["type_options"]), state="disabled" if dto["type_locked"] else "readonly"
        )
        self.type_var.set(dto["type"])
        for name, var in self.vars.items():
            var.set(dto[name])
        self._labels["length"].configure(text=dto["length_label"])
        self._labels["director"].configure(text=dto["director_label"])
        for widget in self._rows["end_year"]:
            if dto["show_end_year"]:
                widget.grid()
            else:
                widget.grid_remove()
        for label, var in self.genre_vars.items():
            var.set(label in dto["genres"])
        self.delete_button.state(["!disabled"] if dto["can_delete"] else ["disabled"])

    def values(self) -> Dict[str, str]:
        return {name: var.get() for name, var in self.vars.items()}

    def _save(self) -> None:
        safe_call(self._on_save, self.values())

    def _close(self) -> None:
        safe_call(self._on_close)
        if self.winfo_exists():
            self.destroy()


__all__ = ["EditContentDialog"]
