"""Shared visual theme for Cinedex views.

The module centralizes ttk style tokens so views only pick style names
(``Sidebar.TButton``, ``Title.TLabel``...) and never carry colors themselves.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

BG = "#f4f1ea"
CARD_BG = "#ffffff"
SIDEBAR_BG = "#1f1d1a"
SIDEBAR_FG = "#f5c518"
BORDER = "#ddd6c8"
TEXT = "#22201c"
MUTED = "#6b655b"
ACCENT = "#f5c518"


def apply_theme(root: tk.Misc) -> None:
    """Apply the application ttk theme.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=BG)

    style.configure(".", background=BG, foreground=TEXT)
    style.configure("TFrame", background=BG)
    style.configure("Card.TFrame", background=CARD_BG, relief="flat", borderwidth=1)
    style.configure("Sidebar.TFrame", background=SIDEBAR_BG)
    style.configure("TLabelframe", background=BG, bordercolor=BORDER, relief="solid", borderwidth=1)
    style.configure("TLabelframe.Label", foreground=TEXT, background=BG, font=("TkDefaultFont", 10, "bold"))
    style.configure("TLabel", background=BG, foreground=TEXT)
    style.configure("Subtle.TLabel", background=BG, foreground=MUTED)
    style.configure("Placeholder.TLabel", background=CARD_BG, foreground=MUTED, font=("TkDefaultFont", 11, "italic"))
    style.configure("Title.TLabel", background=BG, foreground=TEXT, font=("TkDefaultFont", 16, "bold"))
    style.configure("Heading.TLabel", background=BG, foreground=TEXT, font=("TkDefaultFont", 11, "bold"))
    style.configure("Brand.TLabel", background=SIDEBAR_BG, foreground=SIDEBAR_FG, font=("TkDefaultFont", 15, "bold"))

    style.configure("TButton", padding=(10, 5), background=CARD_BG, bordercolor=BORDER, relief="flat")
    style.map("TButton", background=[("active", "#f1ead8")])
    style.configure("Accent.TButton", background=ACCENT, foreground=TEXT, bordercolor=ACCENT)
    style.map("Accent.TButton", background=[("active", "#ddb012")])
    style.configure(
        "Sidebar.TButton",
        padding=(14, 8),
        background=SIDEBAR_BG,
        foreground="#e8e4da",
        bordercolor=SIDEBAR_BG,
        anchor="w",
    )
    style.map(
        "Sidebar.TButton",
        background=[("pressed", "#3a3731"), ("active", "#2d2a25")],
        foreground=[("active", SIDEBAR_FG)],
    )

    style.configure("Treeview", rowheight=26, fieldbackground=CARD_BG, background=CARD_BG, foreground=TEXT)
    style.configure("Treeview.Heading", background="#ece5d3", foreground=TEXT, relief="flat")
    style.map("Treeview", background=[("selected", "#fbe7a1")], foreground=[("selected", TEXT)])

    style.configure("TEntry", fieldbackground=CARD_BG, bordercolor=BORDER)
    style.configure("TCombobox", fieldbackground=CARD_BG, bordercolor=BORDER)
    style.configure("Horizontal.TScale", background=BG)
