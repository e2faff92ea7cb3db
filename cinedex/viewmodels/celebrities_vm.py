from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..domain.entities import Celebrity

ROLE_FILTERS: Tuple[str, ...] = ("All", "Actors", "Directors")
_GENDER_LABELS = {"M": "Male", "F": "Female"}

# name, role, born, gender, nationality, known for
CelebrityRow = Tuple[str, str, str, str, str, str]


@dataclass
class CelebritiesVM:
    """Name-filtered people table for the celebrities tab."""

    on_update: Optional[Callable[[Dict], None]] = None

    people: List[Celebrity] = field(default_factory=list)
    name_filter: str = ""
    role_filter: str = "All"

    def set_people(self, actors: Sequence[Celebrity], directors: Sequence[Celebrity]) -> None:
        self.people = sorted(
            [*actors, *directors],
            key=lambda p: (p.last_name.lower(), p.first_name.lower(), p.role),
        )
        self._emit()

    def set_name_filter(self, text: str) -> None:
        self.name_filter = (text or "").strip()
        self._emit()

    def set_role_filter(self, label: str) -> None:
        if label not in ROLE_FILTERS:
            raise ValueError(f"Unknown role filter: {label!r}")
        self.role_filter = label
        self._emit()

    def visible(self) -> List[Celebrity]:
        needle = self.name_filter.lower()
        role = {"Actors": "actor", "Directors": "director"}.get(self.role_filter)
        return [
            person
            for person in self.people
            if (role is None or person.role == role) and needle in person.full_name.lower()
        ]

    def rows(self) -> List[CelebrityRow]:
        rows: List[CelebrityRow] = []
        for person in self.visible():
            works = ", ".join(person.notable_works[:3])
            if len(person.notable_works) > 3:
                works += f" (+{len(person.notable_works) - 3})"
            rows.append(
                (
                    person.full_name,
                    person.role.title(),
                    str(person.birth_year or ""),
                    _GENDER_LABELS.get(person.gender, "-"),
                    person.nationality,
                    works,
                )
            )
        return rows

    def _emit(self) -> None:
        if self.on_update:
            visible = self.rows()
            self.on_update({"rows": visible, "count_label": f"{len(visible)} of {len(self.people)} people"})


__all__ = ["CelebritiesVM", "ROLE_FILTERS"]
