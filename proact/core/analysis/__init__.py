# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Ratings matrix (Pugh) analysis and decision quality scoring. Pure functions."""

from proact.core.analysis.config import (
    DQ_ACCEPTABLE_THRESHOLD,
    DQ_ELEMENT_NAMES,
    RATING_MAX,
    RATING_MIN,
)
from proact.core.analysis.ratings import (
    Rating,
    RatingCell,
    RatingOutOfRangeError,
    RatingsMatrix,
    RatingsMatrixBuilder,
)
from proact.core.analysis.pugh import (
    DominatedAlternative,
    IrrelevantObjective,
    compute_scores,
    dominates,
    find_best,
    find_dominated,
    find_irrelevant_objectives,
)
from proact.core.analysis.tradeoffs import (
    Tension,
    TradeoffSummary,
    analyze_tensions,
    find_clear_winners,
    summarize_tradeoffs,
)
from proact.core.analysis.decision_quality import (
    DQElement,
    Priority,
    compute_overall,
    compute_priority,
    find_weakest,
    has_all_elements,
    is_acceptable,
    missing_elements,
    sorted_by_priority,
)
from proact.core.analysis.reports import build_consequences_report, build_dq_report

__all__ = [
    "DQ_ACCEPTABLE_THRESHOLD",
    "DQ_ELEMENT_NAMES",
    "RATING_MAX",
    "RATING_MIN",
    "Rating",
    "RatingCell",
    "RatingOutOfRangeError",
    "RatingsMatrix",
    "RatingsMatrixBuilder",
    "DominatedAlternative",
    "IrrelevantObjective",
    "compute_scores",
    "dominates",
    "find_best",
    "find_dominated",
    "find_irrelevant_objectives",
    "Tension",
    "TradeoffSummary",
    "analyze_tensions",
    "find_clear_winners",
    "summarize_tradeoffs",
    "DQElement",
    "Priority",
    "compute_overall",
    "compute_priority",
    "find_weakest",
    "has_all_elements",
    "is_acceptable",
    "missing_elements",
    "sorted_by_priority",
    "build_consequences_report",
    "build_dq_report",
]
