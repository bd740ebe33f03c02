# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Centralized configuration loader.

Loads config.yaml from the repository root and provides typed access to settings.
Falls back to sensible defaults if config.yaml is missing or incomplete.
Environment variables (including those from a .env file) override config.yaml values.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

_CONFIG_CACHE: Optional["ProactConfig"] = None

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _repo_root() -> Path:
    """Return the repository root."""
    # proact/core/settings.py -> repo root
    return Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class LoggingConfig:
    """Log level and format used by entry points."""
    level: str
    format: str


@dataclass(frozen=True)
class ProactConfig:
    """Root configuration object."""
    logging: LoggingConfig
    debug: bool


def _config_path() -> Path:
    override = os.getenv("PROACT_CONFIG")
    if override:
        return Path(override)
    return _repo_root() / "config.yaml"


def _load_yaml_config() -> dict:
    """Load config.yaml. Returns empty dict if not found or unreadable."""
    config_path = _config_path()
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"[CONFIG] Could not read {config_path}: {e}; using defaults")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"[CONFIG] {config_path} is not a mapping; using defaults")
        return {}
    return data


def _parse_bool(value: str) -> Optional[bool]:
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    return None


def load_config(*, reload: bool = False) -> ProactConfig:
    """Load and return the configuration.

    Priority order (highest to lowest):
    1. Environment variables (PROACT_LOG_LEVEL, PROACT_LOG_FORMAT, PROACT_DEBUG)
    2. config.yaml values (path overridable with PROACT_CONFIG)
    3. Built-in defaults

    Parameters
    ----------
    reload : bool
        If True, force reload from disk. Otherwise use cached config.

    Returns
    -------
    ProactConfig
        The loaded configuration.
    """
    global _CONFIG_CACHE

    if _CONFIG_CACHE is not None and not reload:
        return _CONFIG_CACHE

    raw = _load_yaml_config()

    logging_raw = raw.get("logging", {}) or {}
    level = os.getenv("PROACT_LOG_LEVEL", str(logging_raw.get("level", "INFO"))).strip().upper()
    if level not in _LOG_LEVELS:
        level = "INFO"
    log_format = os.getenv("PROACT_LOG_FORMAT", logging_raw.get("format", DEFAULT_LOG_FORMAT))

    app_raw = raw.get("app", {}) or {}
    debug_env = _parse_bool(os.getenv("PROACT_DEBUG", ""))
    debug = debug_env if debug_env is not None else bool(app_raw.get("debug", False))

    _CONFIG_CACHE = ProactConfig(
        logging=LoggingConfig(level=level, format=log_format),
        debug=debug,
    )
    return _CONFIG_CACHE


def get_config() -> ProactConfig:
    """Return cached configuration (loads on first call)."""
    return load_config()


__all__ = ["LoggingConfig", "ProactConfig", "load_config", "get_config"]
