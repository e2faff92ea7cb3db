from __future__ import annotations

import logging
from typing import Any, Callable, Optional

_log = logging.getLogger(__name__)


def safe_call(
    fn: Optional[Callable[..., Any]],
    *args: Any,
    on_error: Optional[Callable[[Exception], None]] = None,
) -> None:
    if fn is None:
        return
    try:
        fn(*args)
    except Exception as exc:
        if on_error:
            on_error(exc)
        else:
            _log.exception("View callback failed: %s", exc)


def center_over(parent: Any, width: int, height: int) -> str:
    """Geometry string placing a ``width`` x ``height`` window over ``parent``."""
    try:
        x = parent.winfo_rootx() + (parent.winfo_width() - width) // 2
        y = parent.winfo_rooty() + (parent.winfo_height() - height) // 2
    except Exception:
        return f"{width}x{height}"
    return f"{width}x{height}+{max(0, x)}+{max(0, y)}"


__all__ = ["safe_call", "center_over"]
