# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Analysis constants. Fixed by the decision method; not user configuration."""

from __future__ import annotations

# Pugh ratings: relative judgement of one alternative on one objective
RATING_MIN = -2
RATING_MAX = 2
MISSING_RATING = 0  # unset cells are neutral

# Decision quality
DQ_SCORE_MIN = 0
DQ_SCORE_MAX = 100
DQ_ACCEPTABLE_THRESHOLD = 80  # every element must reach this

# The seven standard Decision Quality elements, in display order
DQ_ELEMENT_NAMES = (
    "Helpful Problem Frame",
    "Clear Objectives",
    "Creative Alternatives",
    "Reliable Consequence Information",
    "Logically Correct Reasoning",
    "Clear Tradeoffs",
    "Commitment to Follow Through",
)

# Improvement priority bands (upper bound inclusive)
PRIORITY_CRITICAL_MAX = 30  # 0..30
PRIORITY_HIGH_MAX = 50      # 31..50
PRIORITY_MEDIUM_MAX = 70    # 51..70
# LOW: 71..100
