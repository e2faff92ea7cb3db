"""Modal alert helpers (the only place views talk to ``tkinter.messagebox``)."""

from __future__ import annotations

import logging
from tkinter import messagebox
from typing import Any, Optional

_log = logging.getLogger(__name__)


def show_error(title: str, message: str, parent: Optional[Any] = None) -> None:
    _log.debug("Error dialog: %s: %s", title, message)
    messagebox.showerror(title, message, parent=parent)


def show_warning(title: str, message: str, parent: Optional[Any] = None) -> None:
    _log.debug("Warning dialog: %s: %s", title, message)
    messagebox.showwarning(title, message, parent=parent)


def ask_yes_no(title: str, message: str, parent: Optional[Any] = None) -> bool:
    return bool(messagebox.askyesno(title, message, parent=parent))


__all__ = ["ask_yes_no", "show_error", "show_warning"]
