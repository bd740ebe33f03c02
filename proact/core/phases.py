# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Canonical PrOACT phases and their fixed ordering.

The order tuple below is the single source of truth for phase ordering.
Order index is derived from position, never stored on the phase itself.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple


class Phase(str, Enum):
    """Decision method phases - single source of truth."""

    ISSUE_RAISING = "issue_raising"
    PROBLEM_FRAME = "problem_frame"
    OBJECTIVES = "objectives"
    ALTERNATIVES = "alternatives"
    CONSEQUENCES = "consequences"
    TRADEOFFS = "tradeoffs"
    RECOMMENDATION = "recommendation"
    DECISION_QUALITY = "decision_quality"
    NOTES_NEXT_STEPS = "notes_next_steps"

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]

    @property
    def abbreviation(self) -> str:
        return ABBREVIATIONS[self]

    @property
    def order_index(self) -> int:
        return ALL_PHASES.index(self)

    def next_phase(self) -> Optional["Phase"]:
        idx = self.order_index
        if idx + 1 < len(ALL_PHASES):
            return ALL_PHASES[idx + 1]
        return None

    def previous_phase(self) -> Optional["Phase"]:
        idx = self.order_index
        if idx == 0:
            return None
        return ALL_PHASES[idx - 1]

    def is_before(self, other: "Phase") -> bool:
        return self.order_index < other.order_index

    def is_after(self, other: "Phase") -> bool:
        return self.order_index > other.order_index

    @classmethod
    def parse(cls, value: str) -> "Phase":
        """Resolve a phase from its value, member name or display name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        for phase in cls:
            if key in (phase.value, phase.name.lower(), phase.display_name.lower()):
                return phase
        raise ValueError(f"Unknown phase: {value!r}")

    def __str__(self) -> str:
        return self.display_name


# Full ordering, including the non-analytical closing phase
ALL_PHASES: Tuple[Phase, ...] = (
    Phase.ISSUE_RAISING,
    Phase.PROBLEM_FRAME,
    Phase.OBJECTIVES,
    Phase.ALTERNATIVES,
    Phase.CONSEQUENCES,
    Phase.TRADEOFFS,
    Phase.RECOMMENDATION,
    Phase.DECISION_QUALITY,
    Phase.NOTES_NEXT_STEPS,
)

# Working order used by the sequencer (closing phase excluded)
WORKING_PHASES: Tuple[Phase, ...] = ALL_PHASES[:-1]

DISPLAY_NAMES: Dict[Phase, str] = {
    Phase.ISSUE_RAISING: "Issue Raising",
    Phase.PROBLEM_FRAME: "Problem Frame",
    Phase.OBJECTIVES: "Objectives",
    Phase.ALTERNATIVES: "Alternatives",
    Phase.CONSEQUENCES: "Consequences",
    Phase.TRADEOFFS: "Tradeoffs",
    Phase.RECOMMENDATION: "Recommendation",
    Phase.DECISION_QUALITY: "Decision Quality",
    Phase.NOTES_NEXT_STEPS: "Notes & Next Steps",
}

ABBREVIATIONS: Dict[Phase, str] = {
    Phase.ISSUE_RAISING: "IR",
    Phase.PROBLEM_FRAME: "PF",
    Phase.OBJECTIVES: "OBJ",
    Phase.ALTERNATIVES: "ALT",
    Phase.CONSEQUENCES: "CON",
    Phase.TRADEOFFS: "TRD",
    Phase.RECOMMENDATION: "REC",
    Phase.DECISION_QUALITY: "DQ",
    Phase.NOTES_NEXT_STEPS: "NNS",
}


def is_working_phase(phase: Phase) -> bool:
    return phase in WORKING_PHASES


__all__ = [
    "Phase",
    "ALL_PHASES",
    "WORKING_PHASES",
    "DISPLAY_NAMES",
    "ABBREVIATIONS",
    "is_working_phase",
]
