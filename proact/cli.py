#!/usr/bin/env python3
# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""
PrOACT analysis CLI.

Usage:
    python -m proact.cli consequences matrix.yaml
    python -m proact.cli dq elements.yaml
    python -m proact.cli --help

Input files are YAML (JSON is accepted too). Reports are printed as JSON.

Environment variables:
    PROACT_LOG_LEVEL    - Log level (default: INFO)
    PROACT_DEBUG        - Force DEBUG logging (true/1/yes)
    PROACT_CONFIG       - Path to config.yaml (default: repo root)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import yaml

from proact.core.analysis import (
    DQElement,
    RatingsMatrix,
    build_consequences_report,
    build_dq_report,
)
from proact.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _load_payload(path: str) -> Any:
    with open(Path(path), "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def run_consequences(args: argparse.Namespace) -> int:
    payload = _load_payload(args.file)
    if not isinstance(payload, dict):
        print("Error: matrix file must contain a mapping", file=sys.stderr)
        return 1
    matrix = RatingsMatrix.from_dict(payload)
    logger.info(
        f"Analyzing {matrix.alternative_count} alternatives x {matrix.objective_count} objectives"
    )
    print(json.dumps(build_consequences_report(matrix), indent=2))
    return 0


def run_dq(args: argparse.Namespace) -> int:
    payload = _load_payload(args.file)
    if isinstance(payload, dict):
        payload = payload.get("elements")
    if not isinstance(payload, list):
        print("Error: DQ file must contain a list of elements", file=sys.stderr)
        return 1
    elements = [DQElement.from_dict(item) for item in payload]
    logger.info(f"Scoring {len(elements)} decision quality elements")
    print(json.dumps(build_dq_report(elements), indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="proact",
        description="PrOACT decision analysis CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    cons = sub.add_parser("consequences", help="Pugh analysis of a ratings matrix")
    cons.add_argument("file", help="YAML/JSON matrix payload")
    cons.set_defaults(func=run_consequences)

    dq = sub.add_parser("dq", help="Decision quality report for scored elements")
    dq.add_argument("file", help="YAML/JSON list of DQ elements")
    dq.set_defaults(func=run_dq)

    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        logger.exception("Analysis failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
