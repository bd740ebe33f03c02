# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""PrOACT decision analysis engine."""

__version__ = "0.1.0"
