# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Tradeoff tensions between the non-dominated alternatives."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from proact.core.analysis.pugh import DominatedAlternative, find_dominated
from proact.core.analysis.ratings import RatingsMatrix


@dataclass(frozen=True)
class Tension:
    """What an alternative gains and gives up relative to the other viable ones."""

    alternative: str
    gains: List[str] = field(default_factory=list)
    losses: List[str] = field(default_factory=list)

    def is_clear_winner(self) -> bool:
        return bool(self.gains) and not self.losses

    def has_tradeoffs(self) -> bool:
        return bool(self.gains) and bool(self.losses)

    def intensity(self) -> int:
        return len(self.gains) + len(self.losses)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "alternative": self.alternative,
            "gains": list(self.gains),
            "losses": list(self.losses),
            "is_clear_winner": self.is_clear_winner(),
            "has_tradeoffs": self.has_tradeoffs(),
        }


@dataclass(frozen=True)
class TradeoffSummary:
    total_alternatives: int
    has_clear_winner: bool
    most_balanced: Optional[str]
    most_polarizing: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_alternatives": self.total_alternatives,
            "has_clear_winner": self.has_clear_winner,
            "most_balanced": self.most_balanced,
            "most_polarizing": self.most_polarizing,
        }


def analyze_tensions(
    matrix: RatingsMatrix,
    dominated: Optional[Sequence[DominatedAlternative]] = None,
) -> List[Tension]:
    """One Tension per non-dominated alternative, in declared order.

    Gains/losses are objectives (declared order) where the alternative beats,
    or is beaten by, at least one other viable alternative.
    """
    if dominated is None:
        dominated = find_dominated(matrix)
    dominated_ids = {d.alternative for d in dominated}
    viable = [alt for alt in matrix.alternative_ids if alt not in dominated_ids]

    if not viable:
        return []
    if len(viable) == 1:
        return [Tension(alternative=viable[0])]

    tensions: List[Tension] = []
    for alt in viable:
        gains: List[str] = []
        losses: List[str] = []
        for obj in matrix.objective_ids:
            mine = matrix.rating(alt, obj)
            others = [matrix.rating(o, obj) for o in viable if o != alt]
            if any(mine > r for r in others):
                gains.append(obj)
            if any(mine < r for r in others):
                losses.append(obj)
        tensions.append(Tension(alternative=alt, gains=gains, losses=losses))
    return tensions


def summarize_tradeoffs(tensions: Sequence[Tension]) -> TradeoffSummary:
    if not tensions:
        return TradeoffSummary(
            total_alternatives=0,
            has_clear_winner=False,
            most_balanced=None,
            most_polarizing=None,
        )

    # most balanced: first on ties; most polarizing: last on ties
    most_balanced = min(tensions, key=lambda t: abs(len(t.gains) - len(t.losses)))
    most_polarizing = max(reversed(tensions), key=lambda t: t.intensity())

    return TradeoffSummary(
        total_alternatives=len(tensions),
        has_clear_winner=any(t.is_clear_winner() for t in tensions),
        most_balanced=most_balanced.alternative,
        most_polarizing=most_polarizing.alternative,
    )


def find_clear_winners(tensions: Sequence[Tension]) -> List[Tension]:
    return [t for t in tensions if t.is_clear_winner()]
