"""
MainWindowView
--------------
Tkinter main window for Cinedex. This file contains **only View code**: no
catalog access and no filtering logic. It exposes callback hooks that the
app layer connects to controllers.

Layout:
  * Sidebar with navigation buttons (Home, Movies, Series, Search,
    Celebrities, Watchlist, Rated)
  * Toolbar with Add Title / Reload Catalog / Settings
  * Content host whose single visible child is swapped by the UI coordinator
  * Status bar at the bottom
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional

NAV_ITEMS = (
    ("home", "Home"),
    ("movies", "Movies"),
    ("series", "Series"),
    ("search", "Search"),
    ("celebrities", "Celebrities"),
    ("watchlist", "Watchlist"),
    ("rated", "Rated"),
)


class MainWindowView(tk.Tk):
    """Top-level application window (UI-only)."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        *,
        on_navigate: Optional[Callable[[str], None]] = None,
        on_add_title: OnVoid = None,
        on_reload_catalog: OnVoid = None,
        on_open_settings: OnVoid = None,
        on_close: OnVoid = None,
        geometry: str = "1000x700",
    ) -> None:
        super().__init__()

        self.title("Cinedex")
        self.geometry(geometry)
        self.minsize(860, 560)

        self._on_navigate = on_navigate
        self._on_add_title = on_add_title
        self._on_reload_catalog = on_reload_catalog
        self._on_open_settings = on_open_settings
        self._on_close = on_close
        self._nav_buttons: Dict[str, ttk.Button] = {}

        self.rowconfigure(1, weight=1)
        self.columnconfigure(1, weight=1)

        self._build_sidebar(self)
        self._build_toolbar(self)
        self._build_content_host(self)
        self._build_statusbar(self)

        self.protocol("WM_DELETE_WINDOW", self._handle_close)
        self.bind("<Control-f>", lambda e: self._navigate("search"))
        self.bind("<F5>", lambda e: self._on_reload_catalog and self._on_reload_catalog())

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _build_sidebar(self, parent: tk.Widget) -> None:
        sidebar = ttk.Frame(parent, style="Sidebar.TFrame", width=180)
        sidebar.grid(row=0, column=0, rowspan=3, sticky="ns")
        sidebar.grid_propagate(False)

        ttk.Label(sidebar, text="CINEDEX", style="Brand.TLabel").pack(fill="x", padx=16, pady=(18, 22))
        for name, label in NAV_ITEMS:
            btn = ttk.Button(
                sidebar,
                text=label,
                style="Sidebar.TButton",
                command=lambda n=name: self._navigate(n),
            )
            btn.pack(fill="x")
            self._nav_buttons[name] = btn

    def _build_toolbar(self, parent: tk.Widget) -> None:
        toolbar = ttk.Frame(parent)
        toolbar.grid(row=0, column=1, sticky="ew", padx=12, pady=(10, 4))
        toolbar.columnconfigure(0, weight=1)

        self.heading_var = tk.StringVar(value="")
        ttk.Label(toolbar, textvariable=self.heading_var, style="Title.TLabel").grid(row=0, column=0, sticky="w")
        ttk.Button(toolbar, text="Add Title", command=self._on_add_title).grid(row=0, column=1, padx=(6, 0))
        ttk.Button(toolbar, text="Reload Catalog", command=self._on_reload_catalog).grid(
            row=0, column=2, padx=(6, 0)
        )
        ttk.Button(toolbar, text="Settings", command=self._on_open_settings).grid(row=0, column=3, padx=(6, 0))

    def _build_content_host(self, parent: tk.Widget) -> None:
        self.content_host = ttk.Frame(parent)
        self.content_host.grid(row=1, column=1, sticky="nsew", padx=12, pady=4)
        self._placeholder = ttk.Label(self.content_host, text="Loading catalog...", style="Subtle.TLabel")
        self._placeholder.pack(expand=True)

    def _build_statusbar(self, parent: tk.Widget) -> None:
        status = ttk.Frame(parent)
        status.grid(row=2, column=1, sticky="ew", padx=12, pady=(4, 8))
        status.columnconfigure(0, weight=1)
        self.status_message_var = tk.StringVar(value="Ready.")
        ttk.Label(status, textvariable=self.status_message_var, style="Subtle.TLabel").grid(
            row=0, column=0, sticky="w"
        )

    # ------------------------------------------------------------------
    # Public API (called by controllers)
    # ------------------------------------------------------------------
    def set_status_message(self, text: str) -> None:
        """Update the short status message shown in the status bar."""
        self.status_message_var.set(text)

    def show_toast(self, message: str, level: str = "info") -> None:
        """Lightweight user feedback in the statusbar."""
        self.status_message_var.set(message)

    def set_active_view(self, name: str) -> None:
        """Highlight the navigation entry for ``name`` and update the heading."""
        if self._placeholder is not None:
            self._placeholder.destroy()
            self._placeholder = None
        for key, btn in self._nav_buttons.items():
            btn.state(["pressed"] if key == name else ["!pressed"])
        label = dict(NAV_ITEMS).get(name, name.title())
        self.heading_var.set(label)

    # ------------------------------------------------------------------
    def _navigate(self, name: str) -> None:
        if self._on_navigate:
            self._on_navigate(name)

    def _handle_close(self) -> None:
        if self._on_close:
            self._on_close()
        self.destroy()


__all__ = ["MainWindowView", "NAV_ITEMS"]
