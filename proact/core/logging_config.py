# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Logging setup for entry points. Library modules only call logging.getLogger(__name__)."""

from __future__ import annotations

import logging
from typing import Optional

from proact.core.settings import ProactConfig, load_config


def configure_logging(config: Optional[ProactConfig] = None, *, verbose: bool = False) -> None:
    """Configure the root logger from settings. ``verbose`` or debug mode forces DEBUG."""
    cfg = config or load_config()
    level = logging.DEBUG if (verbose or cfg.debug) else getattr(logging, cfg.logging.level, logging.INFO)
    logging.basicConfig(
        level=level,
        format=cfg.logging.format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger().setLevel(level)
