"""User preferences for the catalog window.

Settings travel as a flat JSON object (``user_settings.json``). Loading goes
through :meth:`SettingsVM.apply_dict`, which coerces each known key and
rejects keys it does not know, so a hand-edited file fails loudly instead of
being half applied.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Callable, Dict, Mapping, Optional

from ..utils.logging import env_forces_debug

VIEW_NAMES: tuple[str, ...] = ("home", "movies", "series", "search", "celebrities", "watchlist", "rated")
MIN_WINDOW_WIDTH = 640
MIN_WINDOW_HEIGHT = 480
_TRUE_WORDS = {"1", "true", "yes", "on"}


@dataclass
class SettingsConfig:
    data_dir: str = ""
    live_search: bool = True
    live_search_delay_ms: int = 400
    window_width: int = 1000
    window_height: int = 700
    last_view: str = "home"


def _as_flag(raw: Any) -> bool:
    if isinstance(raw, str):
        return raw.strip().lower() in _TRUE_WORDS
    return bool(raw)


def _as_count(key: str, raw: Any) -> int:
    """Non-negative integer; bools and fractional strings are rejected."""
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ValueError(f"{key} must be an integer.")
    try:
        number = int(raw.strip()) if isinstance(raw, str) else int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer.") from exc
    if number < 0:
        raise ValueError(f"{key} must be non-negative.")
    return number


def _as_directory(_key: str, raw: Any) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise ValueError("data_dir must be a string path.")
    return raw.strip()


def _as_view(_key: str, raw: Any) -> str:
    name = str(raw or "").strip().lower()
    if name not in VIEW_NAMES:
        raise ValueError(f"last_view must be one of: {', '.join(VIEW_NAMES)}")
    return name


_COERCERS: Dict[str, Callable[[str, Any], Any]] = {
    "data_dir": _as_directory,
    "live_search": lambda _key, raw: _as_flag(raw),
    "live_search_delay_ms": _as_count,
    "window_width": _as_count,
    "window_height": _as_count,
    "last_view": _as_view,
}
_EXTRA_KEYS = frozenset({"debug_logging"})


class SettingsVM:
    """Editable preferences; persistence is the caller's job."""

    def __init__(
        self,
        *,
        config: Optional[SettingsConfig] = None,
        on_save: Optional[Callable[[dict], None]] = None,
    ) -> None:
        self.config = config or SettingsConfig()
        self.on_save = on_save
        # environment overrides win until the user saves a preference
        self.debug_logging: bool = env_forces_debug()

    # ---- read access ----
    @property
    def data_dir(self) -> str:
        return self.config.data_dir

    @data_dir.setter
    def data_dir(self, value: str) -> None:
        self._update(data_dir=value)

    @property
    def live_search(self) -> bool:
        return self.config.live_search

    @live_search.setter
    def live_search(self, value: bool) -> None:
        self._update(live_search=value)

    @property
    def live_search_delay_ms(self) -> int:
        return self.config.live_search_delay_ms

    @live_search_delay_ms.setter
    def live_search_delay_ms(self, value: int) -> None:
        self._update(live_search_delay_ms=value)

    @property
    def window_geometry(self) -> str:
        return f"{self.config.window_width}x{self.config.window_height}"

    @property
    def last_view(self) -> str:
        return self.config.last_view

    # ---- commands ----
    def is_valid(self) -> bool:
        cfg = self.config
        return (
            cfg.window_width >= MIN_WINDOW_WIDTH
            and cfg.window_height >= MIN_WINDOW_HEIGHT
            and cfg.last_view in VIEW_NAMES
        )

    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Merge a flat settings mapping into the current config.

        Raises:
            ValueError: for a non-mapping payload, unknown keys or a value
                that cannot be coerced. Nothing is applied in that case.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")
        unknown = sorted(str(key) for key in payload if key not in _COERCERS and key not in _EXTRA_KEYS)
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(unknown)}")

        changes = {key: payload[key] for key in _COERCERS if key in payload}
        self._update(**changes)
        if "debug_logging" in payload:
            self.debug_logging = _as_flag(payload["debug_logging"])

    def to_dict(self) -> dict:
        snapshot = asdict(self.config)
        snapshot["debug_logging"] = bool(self.debug_logging)
        return snapshot

    def set_data_dir(self, path: str) -> None:
        self.data_dir = path

    def set_debug_logging(self, enabled: bool) -> None:
        self.debug_logging = _as_flag(enabled)

    def remember_window(self, width: int, height: int) -> None:
        self.config = replace(
            self.config,
            window_width=max(MIN_WINDOW_WIDTH, _as_count("window_width", width)),
            window_height=max(MIN_WINDOW_HEIGHT, _as_count("window_height", height)),
        )

    def remember_view(self, name: str) -> None:
        self._update(last_view=name)

    def cmd_save(self) -> None:
        if not self.is_valid():
            raise ValueError(
                f"Window must be at least {MIN_WINDOW_WIDTH}x{MIN_WINDOW_HEIGHT} with a known start view."
            )
        if self.on_save:
            self.on_save(self.to_dict())

    def _update(self, **raw: Any) -> None:
        coerced = {key: _COERCERS[key](key, value) for key, value in raw.items()}
        if coerced:
            self.config = replace(self.config, **coerced)


def default_settings_payload() -> dict:
    return SettingsVM().to_dict()


__all__ = ["SettingsConfig", "SettingsVM", "VIEW_NAMES", "default_settings_payload"]
