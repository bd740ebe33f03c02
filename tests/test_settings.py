# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Configuration loader tests: defaults, config.yaml, environment overrides."""

from __future__ import annotations

import logging

import pytest

from proact.core.logging_config import configure_logging
from proact.core.settings import DEFAULT_LOG_FORMAT, load_config


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Point the loader at a temp path and clear env overrides."""
    monkeypatch.setenv("PROACT_CONFIG", str(tmp_path / "config.yaml"))
    for var in ("PROACT_LOG_LEVEL", "PROACT_LOG_FORMAT", "PROACT_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    yield tmp_path
    load_config(reload=True)


def test_defaults_when_file_missing() -> None:
    cfg = load_config(reload=True)
    assert cfg.logging.level == "INFO"
    assert cfg.logging.format == DEFAULT_LOG_FORMAT
    assert cfg.debug is False


def test_yaml_values(_isolated_config) -> None:
    (_isolated_config / "config.yaml").write_text(
        "logging:\n  level: warning\napp:\n  debug: true\n",
        encoding="utf-8",
    )
    cfg = load_config(reload=True)
    assert cfg.logging.level == "WARNING"
    assert cfg.debug is True


def test_env_overrides_yaml(_isolated_config, monkeypatch) -> None:
    (_isolated_config / "config.yaml").write_text(
        "logging:\n  level: WARNING\napp:\n  debug: true\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("PROACT_LOG_LEVEL", "debug")
    monkeypatch.setenv("PROACT_DEBUG", "no")
    cfg = load_config(reload=True)
    assert cfg.logging.level == "DEBUG"
    assert cfg.debug is False


def test_invalid_level_falls_back_to_info(monkeypatch) -> None:
    monkeypatch.setenv("PROACT_LOG_LEVEL", "chatty")
    assert load_config(reload=True).logging.level == "INFO"


def test_malformed_yaml_uses_defaults(_isolated_config) -> None:
    (_isolated_config / "config.yaml").write_text("logging: [unclosed\n", encoding="utf-8")
    cfg = load_config(reload=True)
    assert cfg.logging.level == "INFO"


def test_config_is_cached() -> None:
    first = load_config(reload=True)
    assert load_config() is first


def test_configure_logging_sets_root_level(monkeypatch) -> None:
    monkeypatch.setenv("PROACT_LOG_LEVEL", "WARNING")
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging(load_config(reload=True))
        assert root.level == logging.WARNING
        configure_logging(load_config(reload=True), verbose=True)
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)
