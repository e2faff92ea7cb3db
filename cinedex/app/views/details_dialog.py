from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional

from .view_utils import center_over, safe_call


class ContentDetailsDialog(tk.Toplevel):
    """Details window for one movie or series (UI-only)."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        on_rate: Optional[Callable[[str, str], None]] = None,
        on_clear_rating: OnVoid = None,
        on_toggle_watchlist: OnVoid = None,
        on_edit: OnVoid = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__(parent)
        self.transient(parent)
        self.minsize(520, 420)
        self._on_rate = on_rate
        self._on_clear_rating = on_clear_rating
        self._on_toggle_watchlist = on_toggle_watchlist
        self._on_edit = on_edit
        self._on_close = on_close
        self.protocol("WM_DELETE_WINDOW", self._close)
        self.bind("<Escape>", lambda e: self._close())

        self.heading_var = tk.StringVar(value="")
        self.user_rating_var = tk.StringVar(value="")
        self.score_var = tk.StringVar(value="")
        self.review_var = tk.StringVar(value="")
        self.watchlist_var = tk.StringVar(value="")
        self.average_var = tk.StringVar(value="")

        self._build()
        self.update_idletasks()
        self.geometry(center_over(parent, 620, 560))

    def _build(self) -> None:
        pad = dict(padx=10, pady=4)
        self.columnconfigure(0, weight=1)
        self.rowconfigure(3, weight=1)

        ttk.Label(self, textvariable=self.heading_var, style="Title.TLabel").grid(row=0, column=0, sticky="w", **pad)
        self._facts = ttk.Frame(self)
        self._facts.grid(row=1, column=0, sticky="ew", **pad)

        people = ttk.Labelframe(self, text="Cast")
        people.grid(row=2, column=0, sticky="ew", **pad)
        self._cast = ttk.Label(people, text="", wraplength=560, justify="left")
        self._cast.pack(anchor="w", padx=6, pady=4)

        notebook = ttk.Notebook(self)
        notebook.grid(row=3, column=0, sticky="nsew", **pad)
        awards_tab = ttk.Frame(notebook)
        self._awards = ttk.Label(awards_tab, text="", justify="left", wraplength=560)
        self._awards.pack(anchor="nw", padx=6, pady=6)
        notebook.add(awards_tab, text="Awards")
        seasons_tab = ttk.Frame(notebook)
        self._seasons = ttk.Treeview(seasons_tab, columns=("season", "year", "episodes"), show="headings", height=6)
        for col, heading in (("season", "Season"), ("year", "Year"), ("episodes", "Episodes")):
            self._seasons.heading(col, text=heading)
            self._seasons.column(col, width=120, anchor="center")
        self._seasons.pack(fill="both", expand=True)
        notebook.add(seasons_tab, text="Seasons")
        scores_tab = ttk.Frame(notebook)
        ttk.Label(scores_tab, textvariable=self.average_var).pack(anchor="w", padx=6, pady=(6, 4))
        self._score_bars = ttk.Frame(scores_tab)
        self._score_bars.pack(fill="x", padx=6)
        self._score_bars.columnconfigure(1, weight=1)
        notebook.add(scores_tab, text="Your Scores")
        self._seasons_tab = seasons_tab
        self._notebook = notebook

        rate = ttk.Labelframe(self, text="Your rating")
        rate.grid(row=4, column=0, sticky="ew", **pad)
        rate.columnconfigure(3, weight=1)
        ttk.Label(rate, textvariable=self.user_rating_var).grid(row=0, column=0, columnspan=5, sticky="w", padx=6)
        ttk.Label(rate, text="Score").grid(row=1, column=0, sticky="w", padx=6, pady=4)
        ttk.Spinbox(rate, from_=1, to=10, textvariable=self.score_var, width=4).grid(row=1, column=1, sticky="w")
        ttk.Label(rate, text="Review").grid(row=1, column=2, sticky="w", padx=(12, 6))
        ttk.Entry(rate, textvariable=self.review_var).grid(row=1, column=3, sticky="ew")
        ttk.Button(
            rate, text="Save", command=lambda: safe_call(self._on_rate, self.score_var.get(), self.review_var.get())
        ).grid(row=1, column=4, padx=6)
        ttk.Button(rate, text="Clear", command=lambda: safe_call(self._on_clear_rating)).grid(row=1, column=5, padx=(0, 6))

        footer = ttk.Frame(self)
        footer.grid(row=5, column=0, sticky="ew", **pad)
        ttk.Button(footer, text="Close", command=self._close).pack(side="right")
        ttk.Button(
            footer, textvariable=self.watchlist_var, command=lambda: safe_call(self._on_toggle_watchlist)
        ).pack(side="right", padx=(0, 6))
        ttk.Button(footer, text="Edit...", command=lambda: safe_call(self._on_edit)).pack(side="left")

    def render(self, dto: Dict) -> None:
        self.title(dto["title"])
        self.heading_var.set(dto["title"])
        for child in self._facts.winfo_children():
            child.destroy()
        for row, (label, value) in enumerate(dto["facts"]):
            ttk.Label(self._facts, text=f"{label}:", style="Subtle.TLabel").grid(row=row, column=0, sticky="w")
            ttk.Label(self._facts, text=value).grid(row=row, column=1, sticky="w", padx=(8, 0))
        self._cast.configure(text=dto["cast"])
        self._awards.configure(text=dto["awards"])
        self._seasons.delete(*self._seasons.get_children())
        for season in dto["seasons"]:
            self._seasons.insert("", "end", values=season)
        self._notebook.tab(self._seasons_tab, state="normal" if dto["seasons"] else "hidden")
        self.user_rating_var.set(dto["user_rating"])
        self.score_var.set(str(dto["user_score"] or ""))
        self.review_var.set(dto["user_review"])
        self.watchlist_var.set(dto["watchlist_button"])
        self.average_var.set(dto["rating_average"])
        self._render_score_bars(dto["score_rows"], dto["user_score"])

    def _render_score_bars(self, rows, own_score) -> None:
        for child in self._score_bars.winfo_children():
            child.destroy()
        for row, (score, share, count) in enumerate(rows):
            style = "Heading.TLabel" if score == own_score else "TLabel"
            ttk.Label(self._score_bars, text=str(score), style=style, width=3).grid(row=row, column=0, sticky="w")
            bar = ttk.Progressbar(self._score_bars, orient="horizontal", mode="determinate", maximum=1.0)
            bar.grid(row=row, column=1, sticky="ew", padx=6, pady=1)
            bar["value"] = share
            count_label = ttk.Label(self._score_bars, text=str(count), style="Subtle.TLabel", width=4)
            count_label.grid(row=row, column=2, sticky="e")

    def _close(self) -> None:
        safe_call(self._on_close)
        if self.winfo_exists():
            self.destroy()


__all__ = ["ContentDetailsDialog"]
