from __future__ import annotations
import json, os
from typing import Any, Dict, List, Optional
from cinedex.domain.ports import StoragePort


class StorageLocal(StoragePort):
    """Local filesystem storage for user settings, watchlist and ratings (JSON)."""

    SETTINGS_FILE = "user_settings.json"
    WATCHLIST_FILE = "watchlist.json"
    RATINGS_FILE = "ratings.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    # ---- User settings ----
    def save_user_settings(self, payload: Dict) -> None:
        self._dump(self.SETTINGS_FILE, payload)

    def load_user_settings(self) -> Optional[Dict]:
        data = self._load(self.SETTINGS_FILE)
        if data is None:
            return None
        if not isinstance(data, dict):
            raise ValueError(f"{self.SETTINGS_FILE} must contain a JSON object")
        return data

    # ---- Watchlist ----
    def save_watchlist(self, entries: List[Dict]) -> None:
        self._dump(self.WATCHLIST_FILE, {"entries": list(entries)})

    def load_watchlist(self) -> List[Dict]:
        return self._load_list(self.WATCHLIST_FILE, "entries")

    # ---- Ratings ----
    def save_ratings(self, ratings: List[Dict]) -> None:
        self._dump(self.RATINGS_FILE, {"ratings": list(ratings)})

    def load_ratings(self) -> List[Dict]:
        return self._load_list(self.RATINGS_FILE, "ratings")

    # ---- helpers ----
    def _path(self, name: str) -> str:
        return os.path.join(self.root, name)

    def _dump(self, name: str, payload: Any) -> None:
        os.makedirs(self.root, exist_ok=True)
        path = self._path(name)
        # readers only ever see a complete file
        tmp_path = f"{path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, path)

    def _load(self, name: str) -> Any:
        path = self._path(name)
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _load_list(self, name: str, key: str) -> List[Dict]:
        data = self._load(name)
        if data is None:
            return []
        items = data.get(key) if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise ValueError(f"{name} must contain a '{key}' list")
        return [item for item in items if isinstance(item, dict)]
