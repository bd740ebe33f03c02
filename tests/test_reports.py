# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Report payload tests: plain dicts consumed by document and dashboard layers."""

from __future__ import annotations

import json

from proact.core.analysis import (
    DQ_ELEMENT_NAMES,
    DQElement,
    RatingsMatrix,
    build_consequences_report,
    build_dq_report,
)


def test_consequences_report_contents() -> None:
    matrix = (
        RatingsMatrix.builder()
        .alternatives(["A", "B", "C"])
        .objectives(["Cost", "Quality", "Color"])
        .cell("A", "Cost", 2).cell("A", "Quality", -1)
        .cell("B", "Cost", -1).cell("B", "Quality", 2)
        .cell("C", "Cost", -1).cell("C", "Quality", -1)
        .build()
    )
    report = build_consequences_report(matrix)

    assert report["alternatives"] == ["A", "B", "C"]
    assert report["scores"] == {"A": 1, "B": 1, "C": -2}
    assert report["best_alternative"] is None
    assert report["dominated"] == [{
        "alternative": "C",
        "dominated_by": "A",
        "explanation": "A is at least as good on all objectives and strictly better on: Cost",
    }]
    assert [o["objective"] for o in report["irrelevant_objectives"]] == ["Color"]
    assert [t["alternative"] for t in report["tensions"]] == ["A", "B"]
    assert report["tradeoff_summary"]["total_alternatives"] == 2
    # plain data only
    json.dumps(report)


def test_consequences_report_empty_matrix() -> None:
    report = build_consequences_report(RatingsMatrix.empty())
    assert report["scores"] == {}
    assert report["dominated"] == []
    assert report["best_alternative"] is None
    assert report["tensions"] == []


def test_dq_report() -> None:
    elements = [
        DQElement("Helpful Problem Frame", 85, rationale="well scoped"),
        DQElement("Clear Objectives", 25, improvement_path="separate means from ends"),
        DQElement("Creative Alternatives", 60),
    ]
    report = build_dq_report(elements)

    assert report["overall_score"] == 25
    assert report["overall_priority"] == "CRITICAL"
    assert report["is_acceptable"] is False
    assert report["has_all_elements"] is False
    assert report["missing_elements"] == list(DQ_ELEMENT_NAMES[3:])
    assert report["weakest_element"] == "Clear Objectives"
    assert [e["name"] for e in report["elements"]] == [
        "Clear Objectives",
        "Creative Alternatives",
        "Helpful Problem Frame",
    ]
    assert report["elements"][0]["priority"] == "CRITICAL"
    assert report["elements"][0]["improvement_path"] == "separate means from ends"
    json.dumps(report)


def test_dq_report_empty() -> None:
    report = build_dq_report([])
    assert report["overall_score"] == 0
    assert report["weakest_element"] is None
    assert report["elements"] == []
    assert report["is_acceptable"] is False
