from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional, Sequence

from .view_utils import safe_call

OnText = Optional[Callable[[str], None]]
OnVoid = Optional[Callable[[], None]]
OnBool = Optional[Callable[[bool], None]]


class SearchFormView(ttk.Frame):
    """Search form widgets (UI-only).

    Raw widget events are forwarded to callbacks; the form never decides
    what is valid. ``apply_state`` re-renders from the view model DTO.
    """

    def __init__(
        self,
        parent: tk.Widget,
        *,
        genres: Sequence[str],
        sort_options: Sequence[str],
        on_title_changed: OnText = None,
        on_keywords_changed: OnText = None,
        on_year_from_edit: Optional[Callable[[str], bool]] = None,
        on_year_to_edit: Optional[Callable[[str], bool]] = None,
        on_year_from_focus_lost: OnVoid = None,
        on_year_to_focus_lost: OnVoid = None,
        on_rating_changed: Optional[Callable[[float], None]] = None,
        on_genre_toggled: Optional[Callable[[str, bool], None]] = None,
        on_toggle_dropdown: OnVoid = None,
        on_include_movies: OnBool = None,
        on_include_series: OnBool = None,
        on_sort_changed: OnText = None,
        on_search: OnVoid = None,
        on_reset: OnVoid = None,
    ) -> None:
        super().__init__(parent)
        self._on_title_changed = on_title_changed
        self._on_keywords_changed = on_keywords_changed
        self._on_year_from_edit = on_year_from_edit
        self._on_year_to_edit = on_year_to_edit
        self._on_year_from_focus_lost = on_year_from_focus_lost
        self._on_year_to_focus_lost = on_year_to_focus_lost
        self._on_rating_changed = on_rating_changed
        self._on_genre_toggled = on_genre_toggled
        self._on_toggle_dropdown = on_toggle_dropdown
        self._on_include_movies = on_include_movies
        self._on_include_series = on_include_series
        self._on_sort_changed = on_sort_changed
        self._on_search = on_search
        self._on_reset = on_reset
        self._syncing = False

        self.title_var = tk.StringVar(value="")
        self.keywords_var = tk.StringVar(value="")
        self.year_from_var = tk.StringVar(value="")
        self.year_to_var = tk.StringVar(value="")
        self.rating_var = tk.DoubleVar(value=0.0)
        self.rating_label_var = tk.StringVar(value="0.0")
        self.genre_prompt_var = tk.StringVar(value="")
        self.genre_button_var = tk.StringVar(value="")
        self.dropdown_toggle_var = tk.StringVar(value="Show")
        self.movies_var = tk.BooleanVar(value=True)
        self.series_var = tk.BooleanVar(value=True)
        self.sort_var = tk.StringVar(value=sort_options[0] if sort_options else "")
        self.genre_vars: Dict[str, tk.BooleanVar] = {g: tk.BooleanVar(value=False) for g in genres}

        self._build(genres, sort_options)

    # ------------------------------------------------------------------
    def _build(self, genres: Sequence[str], sort_options: Sequence[str]) -> None:
        pad = dict(padx=6, pady=4)
        self.columnconfigure(1, weight=1)
        self.columnconfigure(3, weight=1)

        ttk.Label(self, text="Title").grid(row=0, column=0, sticky="w", **pad)
        title_entry = ttk.Entry(self, textvariable=self.title_var)
        title_entry.grid(row=0, column=1, sticky="ew", **pad)
        self.title_var.trace_add("write", lambda *_: self._emit_text(self._on_title_changed, self.title_var))
        title_entry.bind("<Return>", lambda e: safe_call(self._on_search))

        ttk.Label(self, text="Keywords").grid(row=0, column=2, sticky="w", **pad)
        keywords_entry = ttk.Entry(self, textvariable=self.keywords_var)
        keywords_entry.grid(row=0, column=3, sticky="ew", **pad)
        self.keywords_var.trace_add(
            "write", lambda *_: self._emit_text(self._on_keywords_changed, self.keywords_var)
        )
        keywords_entry.bind("<Return>", lambda e: safe_call(self._on_search))

        years = ttk.Frame(self)
        years.grid(row=1, column=1, sticky="w", **pad)
        ttk.Label(self, text="Years").grid(row=1, column=0, sticky="w", **pad)
        self._year_from = self._year_entry(years, self.year_from_var, self._validate_year_from)
        self._year_from.pack(side="left")
        ttk.Label(years, text=" to ").pack(side="left")
        self._year_to = self._year_entry(years, self.year_to_var, self._validate_year_to)
        self._year_to.pack(side="left")
        self._year_from.bind("<FocusOut>", lambda e: safe_call(self._on_year_from_focus_lost))
        self._year_to.bind("<FocusOut>", lambda e: safe_call(self._on_year_to_focus_lost))

        ttk.Label(self, text="Min rating").grid(row=1, column=2, sticky="w", **pad)
        rating_row = ttk.Frame(self)
        rating_row.grid(row=1, column=3, sticky="ew", **pad)
        rating_row.columnconfigure(0, weight=1)
        ttk.Scale(
            rating_row,
            from_=0.0,
            to=10.0,
            variable=self.rating_var,
            command=self._handle_rating,
        ).grid(row=0, column=0, sticky="ew")
        ttk.Label(rating_row, textvariable=self.rating_label_var, width=5).grid(row=0, column=1, padx=(6, 0))

        ttk.Label(self, text="Genres").grid(row=2, column=0, sticky="w", **pad)
        genre_row = ttk.Frame(self)
        genre_row.grid(row=2, column=1, columnspan=3, sticky="ew", **pad)
        genre_row.columnconfigure(0, weight=1)
        ttk.Entry(genre_row, textvariable=self.genre_prompt_var, state="readonly").grid(
            row=0, column=0, sticky="ew"
        )
        ttk.Button(
            genre_row,
            textvariable=self.genre_button_var,
            command=lambda: safe_call(self._on_toggle_dropdown),
        ).grid(row=0, column=1, padx=(6, 0))
        ttk.Button(
            genre_row,
            textvariable=self.dropdown_toggle_var,
            width=6,
            command=lambda: safe_call(self._on_toggle_dropdown),
        ).grid(row=0, column=2, padx=(6, 0))

        self._dropdown = ttk.Frame(self, style="Card.TFrame", padding=6)
        per_row = 6
        for index, genre in enumerate(genres):
            ttk.Checkbutton(
                self._dropdown,
                text=genre,
                variable=self.genre_vars[genre],
                command=lambda g=genre: self._handle_genre(g),
            ).grid(row=index // per_row, column=index % per_row, sticky="w", padx=4, pady=2)

        footer = ttk.Frame(self)
        footer.grid(row=4, column=0, columnspan=4, sticky="ew", **pad)
        ttk.Checkbutton(
            footer,
            text="Movies",
            variable=self.movies_var,
            command=lambda: self._emit_bool(self._on_include_movies, self.movies_var),
        ).pack(side="left")
        ttk.Checkbutton(
            footer,
            text="Series",
            variable=self.series_var,
            command=lambda: self._emit_bool(self._on_include_series, self.series_var),
        ).pack(side="left", padx=(12, 0))
        ttk.Label(footer, text="Sort by").pack(side="left", padx=(24, 6))
        sort_box = ttk.Combobox(
            footer, textvariable=self.sort_var, values=list(sort_options), state="readonly", width=22
        )
        sort_box.pack(side="left")
        sort_box.bind("<<ComboboxSelected>>", lambda e: safe_call(self._on_sort_changed, self.sort_var.get()))
        ttk.Button(footer, text="Reset", command=lambda: safe_call(self._on_reset)).pack(side="right")
        ttk.Button(footer, text="Search", style="Accent.TButton", command=lambda: safe_call(self._on_search)).pack(
            side="right", padx=(0, 6)
        )

    def _year_entry(self, parent: tk.Widget, var: tk.StringVar, validator: Callable[[str], bool]) -> ttk.Entry:
        vcmd = (self.register(validator), "%P")
        return ttk.Entry(parent, textvariable=var, width=6, validate="key", validatecommand=vcmd)

    # ------------------------------------------------------------------
    # Event forwarding
    # ------------------------------------------------------------------
    def _validate_year_from(self, proposed: str) -> bool:
        if self._syncing or self._on_year_from_edit is None:
            return True
        return bool(self._on_year_from_edit(proposed))

    def _validate_year_to(self, proposed: str) -> bool:
        if self._syncing or self._on_year_to_edit is None:
            return True
        return bool(self._on_year_to_edit(proposed))

    def _handle_rating(self, raw: str) -> None:
        if not self._syncing:
            safe_call(self._on_rating_changed, float(raw))

    def _handle_genre(self, genre: str) -> None:
        safe_call(self._on_genre_toggled, genre, bool(self.genre_vars[genre].get()))

    def _emit_text(self, fn: OnText, var: tk.StringVar) -> None:
        if not self._syncing:
            safe_call(fn, var.get())

    def _emit_bool(self, fn: OnBool, var: tk.BooleanVar) -> None:
        if not self._syncing:
            safe_call(fn, bool(var.get()))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def apply_state(self, state: Dict) -> None:
        """Render the view model DTO without re-emitting change events."""
        self._syncing = True
        try:
            if self.title_var.get() != state["title"]:
                self.title_var.set(state["title"])
            if self.keywords_var.get() != state["keywords"]:
                self.keywords_var.set(state["keywords"])
            self.year_from_var.set(state["year_from"])
            self.year_to_var.set(state["year_to"])
            self.rating_var.set(state["rating"])
            self.rating_label_var.set(state["rating_label"])
            self.genre_prompt_var.set(state["genre_prompt"])
            self.genre_button_var.set(state["genre_button_text"])
            self.dropdown_toggle_var.set(state["dropdown_toggle_text"])
            selected = set(state["genres"])
            for genre, var in self.genre_vars.items():
                var.set(genre in selected)
            self.movies_var.set(state["include_movies"])
            self.series_var.set(state["include_series"])
            self.sort_var.set(state["sort"])
            if state["dropdown_visible"]:
                self._dropdown.grid(row=3, column=1, columnspan=3, sticky="ew", padx=6, pady=(0, 4))
            else:
                self._dropdown.grid_remove()
        finally:
            self._syncing = False


__all__ = ["SearchFormView"]
