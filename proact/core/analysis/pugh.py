# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Pugh matrix analysis: scores, dominance, irrelevant objectives, unique best.

Pure functions over a RatingsMatrix. Deterministic; missing cells read as 0.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from proact.core.analysis.ratings import RatingsMatrix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DominatedAlternative:
    alternative: str
    dominated_by: str
    explanation: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class IrrelevantObjective:
    objective: str
    uniform_rating: int
    reason: str = "All alternatives have the same rating"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def compute_scores(matrix: RatingsMatrix) -> Dict[str, int]:
    """Sum of ratings per alternative across declared objectives, in declared order."""
    return {alt: sum(matrix.row(alt)) for alt in matrix.alternative_ids}


def dominates(matrix: RatingsMatrix, a: str, b: str) -> bool:
    """True if ``a`` is >= ``b`` on every objective and > on at least one."""
    strictly_better = False
    for obj in matrix.objective_ids:
        a_rating = matrix.rating(a, obj)
        b_rating = matrix.rating(b, obj)
        if a_rating < b_rating:
            return False
        if a_rating > b_rating:
            strictly_better = True
    return strictly_better


def _explain_dominance(matrix: RatingsMatrix, a: str, b: str) -> str:
    better_on = [
        obj for obj in matrix.objective_ids
        if matrix.rating(a, obj) > matrix.rating(b, obj)
    ]
    return (
        f"{a} is at least as good on all objectives and strictly better on: "
        f"{', '.join(better_on)}"
    )


def find_dominated(matrix: RatingsMatrix) -> List[DominatedAlternative]:
    """Alternatives strictly dominated by another, each reported once.

    The first dominator in declared order is the one recorded.
    """
    if matrix.alternative_count < 2:
        return []

    dominated: List[DominatedAlternative] = []
    for candidate in matrix.alternative_ids:
        for dominator in matrix.alternative_ids:
            if dominator == candidate:
                continue
            if dominates(matrix, dominator, candidate):
                dominated.append(DominatedAlternative(
                    alternative=candidate,
                    dominated_by=dominator,
                    explanation=_explain_dominance(matrix, dominator, candidate),
                ))
                break

    logger.debug("find_dominated: %d of %d alternatives dominated", len(dominated), matrix.alternative_count)
    return dominated


def find_irrelevant_objectives(matrix: RatingsMatrix) -> List[IrrelevantObjective]:
    """Objectives on which every declared alternative has the same rating."""
    if matrix.alternative_count < 2:
        return []

    irrelevant: List[IrrelevantObjective] = []
    for obj in matrix.objective_ids:
        ratings = [matrix.rating(alt, obj) for alt in matrix.alternative_ids]
        if all(r == ratings[0] for r in ratings):
            irrelevant.append(IrrelevantObjective(objective=obj, uniform_rating=ratings[0]))
    return irrelevant


def find_best(matrix: RatingsMatrix) -> Optional[str]:
    """Alternative with the strictly highest score; None on a tie or empty matrix."""
    scores = compute_scores(matrix)
    if not scores:
        return None

    top = max(scores.values())
    leaders = [alt for alt, score in scores.items() if score == top]
    if len(leaders) == 1:
        return leaders[0]

    logger.debug("find_best: %d alternatives tied at %d, no unique best", len(leaders), top)
    return None
