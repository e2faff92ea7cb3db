from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure

from .results_table import ResultsTable
from .theme import ACCENT, MUTED, TEXT

_TILE_COLUMNS = (("title", "Title", 240), ("years", "Years", 90), ("rating", "Rating", 60))


class HomeView(ttk.Frame):
    """Landing page with featured lists and the catalog rating histogram."""

    def __init__(self, parent: tk.Widget, *, on_open: Optional[Callable[[str], None]] = None) -> None:
        super().__init__(parent)
        self.columnconfigure(0, weight=1)
        self.columnconfigure(1, weight=1)
        self.rowconfigure(2, weight=1)

        self.title_var = tk.StringVar(value="")
        self.subtitle_var = tk.StringVar(value="")
        self.counts_var = tk.StringVar(value="")
        self.ratings_var = tk.StringVar(value="")

        header = ttk.Frame(self)
        header.grid(row=0, column=0, columnspan=2, sticky="ew", pady=(0, 8))
        ttk.Label(header, textvariable=self.title_var, style="Heading.TLabel").pack(anchor="w")
        ttk.Label(header, textvariable=self.subtitle_var, style="Subtle.TLabel").pack(anchor="w")
        ttk.Label(header, textvariable=self.counts_var).pack(anchor="w", pady=(6, 0))
        ttk.Label(header, textvariable=self.ratings_var, style="Subtle.TLabel").pack(anchor="w")

        ttk.Label(self, text="Top rated", style="Heading.TLabel").grid(row=1, column=0, sticky="w")
        ttk.Label(self, text="Most recent", style="Heading.TLabel").grid(row=1, column=1, sticky="w", padx=(12, 0))
        self.top_rated = ResultsTable(self, columns=_TILE_COLUMNS, on_open=on_open, show_count=False)
        self.top_rated.grid(row=2, column=0, sticky="nsew", pady=(4, 0))
        self.recent = ResultsTable(self, columns=_TILE_COLUMNS, on_open=on_open, show_count=False)
        self.recent.grid(row=2, column=1, sticky="nsew", padx=(12, 0), pady=(4, 0))

        chart_box = ttk.Labelframe(self, text="Catalog ratings")
        chart_box.grid(row=3, column=0, columnspan=2, sticky="ew", pady=(10, 0))
        self.figure = Figure(figsize=(6, 1.8), dpi=100)
        self.axes = self.figure.add_subplot(111)
        self.chart = FigureCanvasTkAgg(self.figure, master=chart_box)
        self.chart.get_tk_widget().pack(fill="x", padx=6, pady=6)
        self._bars: list = []

    def render(self, dto: Dict) -> None:
        self.title_var.set(dto["title"])
        self.subtitle_var.set(dto["subtitle"])
        self.counts_var.set(dto["counts"])
        self.ratings_var.set(dto.get("ratings", ""))
        self.top_rated.render({"rows": dto["top_rated"]})
        self.recent.render({"rows": dto["recent"]})
        self._bars = list(dto["histogram"])
        self._draw_histogram()

    def _draw_histogram(self) -> None:
        ax = self.axes
        ax.clear()
        if self._bars:
            labels = [label for label, _, _ in self._bars]
            counts = [count for _, count, _ in self._bars]
            bars = ax.bar(range(len(counts)), counts, color=ACCENT, width=0.8)
            ax.bar_label(bars, labels=[str(c) if c else "" for c in counts], fontsize=7, color=TEXT)
            ax.set_xticks(range(len(labels)))
            ax.set_xticklabels(labels, fontsize=7, color=MUTED)
        ax.set_yticks([])
        for side in ("top", "right", "left"):
            ax.spines[side].set_visible(False)
        self.figure.tight_layout()
        self.chart.draw_idle()


__all__ = ["HomeView"]
