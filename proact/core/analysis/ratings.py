# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Ratings matrix: sparse alternative x objective table of -2..+2 ratings.

A missing cell reads as 0 (same as baseline). Callers may leave cells unset
during incremental entry; analysis then stays conservative instead of failing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from proact.core.analysis.config import MISSING_RATING, RATING_MAX, RATING_MIN


class RatingOutOfRangeError(ValueError):
    """Raised when a rating outside [-2, +2] is constructed."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"rating must be an integer in [{RATING_MIN}, {RATING_MAX}], got {value!r}"
        )


class Rating(IntEnum):
    """Relative judgement of one alternative on one objective."""

    MUCH_WORSE = -2
    WORSE = -1
    SAME = 0
    BETTER = 1
    MUCH_BETTER = 2

    @classmethod
    def from_value(cls, value: Any) -> "Rating":
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise RatingOutOfRangeError(value)
        try:
            as_int = int(value)
        except (TypeError, ValueError):
            raise RatingOutOfRangeError(value) from None
        if as_int != value and not isinstance(value, str):
            raise RatingOutOfRangeError(value)
        if not RATING_MIN <= as_int <= RATING_MAX:
            raise RatingOutOfRangeError(value)
        return cls(as_int)

    @property
    def label(self) -> str:
        return _RATING_LABELS[self]

    def is_positive(self) -> bool:
        return self.value > 0

    def is_negative(self) -> bool:
        return self.value < 0

    def is_neutral(self) -> bool:
        return self.value == 0

    def __str__(self) -> str:
        return f"+{self.value}" if self.value > 0 else str(self.value)


_RATING_LABELS = {
    Rating.MUCH_WORSE: "Much Worse",
    Rating.WORSE: "Worse",
    Rating.SAME: "Same",
    Rating.BETTER: "Better",
    Rating.MUCH_BETTER: "Much Better",
}


@dataclass(frozen=True)
class RatingCell:
    alternative_id: str
    objective_id: str
    rating: Rating
    rationale: Optional[str] = None


@dataclass(frozen=True)
class RatingsMatrix:
    """Declared alternatives/objectives plus the populated cells.

    Declaration order is the stable output order for every analysis.
    """

    alternative_ids: Tuple[str, ...] = ()
    objective_ids: Tuple[str, ...] = ()
    cells: Mapping[Tuple[str, str], RatingCell] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the containers so a built matrix cannot be mutated in place
        object.__setattr__(self, "alternative_ids", tuple(self.alternative_ids))
        object.__setattr__(self, "objective_ids", tuple(self.objective_ids))
        object.__setattr__(self, "cells", MappingProxyType(dict(self.cells)))

    @classmethod
    def empty(cls) -> "RatingsMatrix":
        return cls()

    @classmethod
    def builder(cls) -> "RatingsMatrixBuilder":
        return RatingsMatrixBuilder()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RatingsMatrix":
        """Build from an extraction payload.

        Expected shape::

            {
              "alternatives": ["A", "B"],
              "objectives": ["Cost", "Quality"],
              "cells": [
                {"alternative": "A", "objective": "Cost", "rating": 2, "rationale": "..."},
              ],
            }

        ``cells`` may also be a nested mapping ``{alt: {obj: rating}}``.
        Out-of-range ratings raise RatingOutOfRangeError.
        """
        builder = cls.builder()
        builder.alternatives(data.get("alternatives") or [])
        builder.objectives(data.get("objectives") or [])
        raw_cells = data.get("cells") or []
        if isinstance(raw_cells, dict):
            for alt_id, row in raw_cells.items():
                for obj_id, rating in (row or {}).items():
                    builder.cell(alt_id, obj_id, rating)
        else:
            for c in raw_cells:
                builder.cell(
                    c["alternative"],
                    c["objective"],
                    c["rating"],
                    rationale=c.get("rationale"),
                )
        return builder.build()

    def get_cell(self, alternative_id: str, objective_id: str) -> Optional[RatingCell]:
        return self.cells.get((alternative_id, objective_id))

    def rating(self, alternative_id: str, objective_id: str) -> int:
        cell = self.cells.get((alternative_id, objective_id))
        return int(cell.rating) if cell is not None else MISSING_RATING

    def row(self, alternative_id: str) -> List[int]:
        """Ratings for one alternative across declared objectives."""
        return [self.rating(alternative_id, o) for o in self.objective_ids]

    def is_empty(self) -> bool:
        return not self.alternative_ids

    @property
    def alternative_count(self) -> int:
        return len(self.alternative_ids)

    @property
    def objective_count(self) -> int:
        return len(self.objective_ids)


class RatingsMatrixBuilder:
    def __init__(self) -> None:
        self._alternative_ids: List[str] = []
        self._objective_ids: List[str] = []
        self._cells: Dict[Tuple[str, str], RatingCell] = {}

    def alternatives(self, ids: Iterable[str]) -> "RatingsMatrixBuilder":
        self._alternative_ids = _dedupe(ids)
        return self

    def objectives(self, ids: Iterable[str]) -> "RatingsMatrixBuilder":
        self._objective_ids = _dedupe(ids)
        return self

    def cell(
        self,
        alternative_id: str,
        objective_id: str,
        rating: Any,
        rationale: Optional[str] = None,
    ) -> "RatingsMatrixBuilder":
        alt_id = str(alternative_id)
        obj_id = str(objective_id)
        self._cells[(alt_id, obj_id)] = RatingCell(alt_id, obj_id, Rating.from_value(rating), rationale)
        return self

    def build(self) -> RatingsMatrix:
        return RatingsMatrix(
            alternative_ids=tuple(self._alternative_ids),
            objective_ids=tuple(self._objective_ids),
            cells=dict(self._cells),
        )


def _dedupe(ids: Iterable[str]) -> List[str]:
    """Keep first occurrence; identifiers are unique within a matrix."""
    seen = set()
    out = []
    for i in ids:
        s = str(i)
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out
