# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""CLI tests: file payloads in, JSON reports out."""

from __future__ import annotations

import json

import pytest

from proact.cli import main


@pytest.fixture(autouse=True)
def _no_config_file(tmp_path, monkeypatch):
    monkeypatch.setenv("PROACT_CONFIG", str(tmp_path / "missing.yaml"))


def test_consequences_command(tmp_path, capsys) -> None:
    path = tmp_path / "matrix.yaml"
    path.write_text(
        "alternatives: [A, B]\n"
        "objectives: [O1, O2]\n"
        "cells:\n"
        "  A: {O1: 2, O2: 1}\n"
        "  B: {O1: 0, O2: 0}\n",
        encoding="utf-8",
    )
    assert main(["consequences", str(path)]) == 0

    report = json.loads(capsys.readouterr().out)
    assert report["scores"] == {"A": 3, "B": 0}
    assert report["best_alternative"] == "A"
    assert report["dominated"][0]["alternative"] == "B"


def test_dq_command_accepts_json(tmp_path, capsys) -> None:
    path = tmp_path / "dq.json"
    path.write_text(json.dumps({"elements": [
        {"name": "Clear Objectives", "score": 60},
        {"name": "Clear Tradeoffs", "score": 90},
    ]}), encoding="utf-8")
    assert main(["dq", str(path)]) == 0

    report = json.loads(capsys.readouterr().out)
    assert report["overall_score"] == 60
    assert report["overall_priority"] == "MEDIUM"
    assert report["weakest_element"] == "Clear Objectives"


def test_out_of_range_rating_returns_error(tmp_path, capsys) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(
        "alternatives: [A]\nobjectives: [O1]\ncells:\n  A: {O1: 7}\n",
        encoding="utf-8",
    )
    assert main(["consequences", str(path)]) == 1
    assert "rating must be" in capsys.readouterr().err


def test_wrong_payload_shape(tmp_path, capsys) -> None:
    path = tmp_path / "dq.yaml"
    path.write_text("just a string\n", encoding="utf-8")
    assert main(["dq", str(path)]) == 1
    assert "list of elements" in capsys.readouterr().err


def test_missing_file_returns_error(tmp_path) -> None:
    assert main(["dq", str(tmp_path / "nope.yaml")]) == 1
