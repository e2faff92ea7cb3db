"""User ratings: create, update, delete and summarize 1-10 scores.

Ratings are keyed by content key (``movie:3``) and persisted through the
storage port as a JSON list. Summaries use numpy so the details dialog and
home view can show means and score distributions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Mapping

import numpy as np

from ..domain.entities import RatingSummary, UserRating
from ..domain.ports import StoragePort
from .error_mapping import map_error

_log = logging.getLogger(__name__)


def rating_to_dict(rating: UserRating) -> Dict:
    return {
        "content_key": rating.content_key,
        "score": rating.score,
        "review": rating.review,
        "rated_at": rating.rated_at.isoformat(timespec="seconds"),
    }


def rating_from_dict(payload: Mapping) -> UserRating:
    rated_at = payload.get("rated_at")
    return UserRating(
        content_key=str(payload["content_key"]),
        score=int(payload["score"]),
        review=str(payload.get("review") or ""),
        rated_at=datetime.fromisoformat(rated_at) if rated_at else datetime.now(),
    )


def summarize_scores(scores: Iterable[int]) -> RatingSummary:
    values = np.asarray(list(scores), dtype=int)
    if values.size == 0:
        return RatingSummary(count=0, mean=None, distribution=(0,) * 10)
    counts = np.bincount(np.clip(values, 1, 10), minlength=11)[1:]
    return RatingSummary(
        count=int(values.size),
        mean=round(float(values.mean()), 1),
        distribution=tuple(int(c) for c in counts),
    )


def rating_histogram(ratings: Iterable[float], bins: int = 10) -> List[int]:
    """Bucket 0-10 catalog ratings into ``bins`` equal-width bins."""
    values = np.asarray(list(ratings), dtype=float)
    counts, _ = np.histogram(values, bins=bins, range=(0.0, 10.0))
    return [int(c) for c in counts]


@dataclass
class LoadRatings:
    storage: StoragePort

    def __call__(self) -> Dict[str, UserRating]:
        try:
            raw = self.storage.load_ratings()
        except Exception as exc:
            raise map_error(exc, default_code="LOAD_RATINGS_FAILED") from exc
        ratings: Dict[str, UserRating] = {}
        for item in raw:
            try:
                rating = rating_from_dict(item)
            except (KeyError, TypeError, ValueError) as exc:
                _log.warning("Ignoring malformed rating entry %r: %s", item, exc)
                continue
            ratings[rating.content_key] = rating
        return ratings


@dataclass
class RateContent:
    """Create or replace the user's rating for one title."""

    storage: StoragePort

    def __call__(self, content_key: str, score: int, review: str = "") -> UserRating:
        try:
            rating = UserRating(content_key=content_key, score=score, review=(review or "").strip())
            ratings = LoadRatings(self.storage)()
            ratings[content_key] = rating
            self.storage.save_ratings([rating_to_dict(r) for r in ratings.values()])
        except Exception as exc:
            raise map_error(exc, default_code="RATE_FAILED") from exc
        _log.info("Rated %s: %d/10", content_key, score)
        return rating


@dataclass
class DeleteRating:
    storage: StoragePort

    def __call__(self, content_key: str) -> bool:
        try:
            ratings = LoadRatings(self.storage)()
            removed = ratings.pop(content_key, None) is not None
            if removed:
                self.storage.save_ratings([rating_to_dict(r) for r in ratings.values()])
        except Exception as exc:
            raise map_error(exc, default_code="DELETE_RATING_FAILED") from exc
        return removed


__all__ = [
    "DeleteRating",
    "LoadRatings",
    "RateContent",
    "RatingSummary",
    "rating_from_dict",
    "rating_histogram",
    "rating_to_dict",
    "summarize_scores",
]
