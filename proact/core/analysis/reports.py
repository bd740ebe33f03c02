# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Plain-dict analysis payloads for the document and dashboard layers (computed, not stored)."""

from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

from proact.core.analysis.decision_quality import (
    DQElement,
    compute_overall,
    compute_priority,
    find_weakest,
    has_all_elements,
    is_acceptable,
    missing_elements,
    sorted_by_priority,
)
from proact.core.analysis.pugh import (
    compute_scores,
    find_best,
    find_dominated,
    find_irrelevant_objectives,
)
from proact.core.analysis.ratings import RatingsMatrix
from proact.core.analysis.tradeoffs import analyze_tensions, summarize_tradeoffs

logger = logging.getLogger(__name__)


def build_consequences_report(matrix: RatingsMatrix) -> Dict[str, Any]:
    """
    Consequences/Tradeoffs payload: scores, dominance, irrelevant objectives,
    unique best, and tensions among the non-dominated alternatives.
    """
    dominated = find_dominated(matrix)
    tensions = analyze_tensions(matrix, dominated)

    report = {
        "alternatives": list(matrix.alternative_ids),
        "objectives": list(matrix.objective_ids),
        "scores": compute_scores(matrix),
        "best_alternative": find_best(matrix),
        "dominated": [d.to_dict() for d in dominated],
        "irrelevant_objectives": [o.to_dict() for o in find_irrelevant_objectives(matrix)],
        "tensions": [t.to_dict() for t in tensions],
        "tradeoff_summary": summarize_tradeoffs(tensions).to_dict(),
    }
    logger.debug(
        "consequences report: %d alternatives, %d dominated, best=%s",
        matrix.alternative_count, len(dominated), report["best_alternative"],
    )
    return report


def build_dq_report(elements: Sequence[DQElement]) -> Dict[str, Any]:
    """Decision Quality payload: overall weakest-link score and improvement triage."""
    overall = compute_overall(elements)
    weakest = find_weakest(elements)
    return {
        "overall_score": overall,
        "overall_priority": compute_priority(overall).value,
        "is_acceptable": is_acceptable(elements),
        "has_all_elements": has_all_elements(elements),
        "missing_elements": missing_elements(elements),
        "weakest_element": weakest.name if weakest is not None else None,
        "elements": [e.to_dict() for e in sorted_by_priority(elements)],
    }
