# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Core engine: phase sequencing, ratings analysis, decision quality scoring."""
