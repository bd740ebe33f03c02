# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Decision quality scoring — weakest-link overall score and improvement triage.

Overall quality is the minimum element score, not an average: a decision is
only as good as its worst dimension.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from proact.core.analysis.config import (
    DQ_ACCEPTABLE_THRESHOLD,
    DQ_ELEMENT_NAMES,
    DQ_SCORE_MAX,
    DQ_SCORE_MIN,
    PRIORITY_CRITICAL_MAX,
    PRIORITY_HIGH_MAX,
    PRIORITY_MEDIUM_MAX,
)


class Priority(str, Enum):
    """Improvement priority for a DQ score."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @property
    def label(self) -> str:
        return self.value.capitalize()


def clamp_score(score: Any) -> int:
    """Coerce to an int in [0, 100]."""
    return max(DQ_SCORE_MIN, min(DQ_SCORE_MAX, int(score)))


@dataclass(frozen=True)
class DQElement:
    """One scored decision quality dimension. Score is clamped into [0, 100]."""

    name: str
    score: int
    rationale: Optional[str] = None
    improvement_path: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "score", clamp_score(self.score))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DQElement":
        return cls(
            name=str(data["name"]),
            score=data.get("score", 0),
            rationale=data.get("rationale"),
            improvement_path=data.get("improvement_path") or data.get("improvement"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "score": self.score,
            "rationale": self.rationale,
            "improvement_path": self.improvement_path,
            "priority": compute_priority(self.score).value,
        }


def compute_overall(elements: Sequence[DQElement]) -> int:
    """Minimum element score. Empty input -> 0."""
    if not elements:
        return 0
    return min(e.score for e in elements)


def has_all_elements(elements: Sequence[DQElement]) -> bool:
    return not missing_elements(elements)


def missing_elements(elements: Sequence[DQElement]) -> List[str]:
    """Standard element names not present, in standard order."""
    present = {e.name for e in elements}
    return [name for name in DQ_ELEMENT_NAMES if name not in present]


def is_acceptable(elements: Sequence[DQElement]) -> bool:
    """Non-empty and every element at or above the acceptable threshold."""
    return bool(elements) and all(e.score >= DQ_ACCEPTABLE_THRESHOLD for e in elements)


def compute_priority(score: int) -> Priority:
    if score <= PRIORITY_CRITICAL_MAX:
        return Priority.CRITICAL
    if score <= PRIORITY_HIGH_MAX:
        return Priority.HIGH
    if score <= PRIORITY_MEDIUM_MAX:
        return Priority.MEDIUM
    return Priority.LOW


def find_weakest(elements: Sequence[DQElement]) -> Optional[DQElement]:
    """Lowest-scoring element (first one on ties), or None."""
    if not elements:
        return None
    return min(elements, key=lambda e: e.score)


def sorted_by_priority(elements: Sequence[DQElement]) -> List[DQElement]:
    """Elements by ascending score; stable for equal scores."""
    return sorted(elements, key=lambda e: e.score)
