# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Unit tests for canonical phase ordering."""

import pytest

from proact.core.phases import ALL_PHASES, WORKING_PHASES, Phase, is_working_phase


class TestOrdering:
    """Fixed total order of phases."""

    def test_all_phases_in_order(self):
        """Nine phases, closing phase last."""
        assert len(ALL_PHASES) == 9
        assert ALL_PHASES[0] == Phase.ISSUE_RAISING
        assert ALL_PHASES[4] == Phase.CONSEQUENCES
        assert ALL_PHASES[7] == Phase.DECISION_QUALITY
        assert ALL_PHASES[8] == Phase.NOTES_NEXT_STEPS

    def test_working_phases_exclude_closing_phase(self):
        """Sequencer works over the first eight phases only."""
        assert len(WORKING_PHASES) == 8
        assert Phase.NOTES_NEXT_STEPS not in WORKING_PHASES
        assert not is_working_phase(Phase.NOTES_NEXT_STEPS)
        assert is_working_phase(Phase.TRADEOFFS)

    def test_order_index_matches_position(self):
        """order_index is derived from position."""
        for idx, phase in enumerate(ALL_PHASES):
            assert phase.order_index == idx

    def test_next_and_previous(self):
        """First has no predecessor, last has no successor."""
        assert Phase.ISSUE_RAISING.previous_phase() is None
        assert Phase.ISSUE_RAISING.next_phase() == Phase.PROBLEM_FRAME
        assert Phase.DECISION_QUALITY.next_phase() == Phase.NOTES_NEXT_STEPS
        assert Phase.NOTES_NEXT_STEPS.next_phase() is None
        assert Phase.OBJECTIVES.previous_phase() == Phase.PROBLEM_FRAME

    def test_is_before_and_after(self):
        assert Phase.OBJECTIVES.is_before(Phase.ALTERNATIVES)
        assert Phase.ALTERNATIVES.is_after(Phase.OBJECTIVES)
        assert not Phase.OBJECTIVES.is_before(Phase.OBJECTIVES)


class TestNames:
    """Display names, abbreviations, parsing."""

    def test_display_names(self):
        assert Phase.ISSUE_RAISING.display_name == "Issue Raising"
        assert Phase.NOTES_NEXT_STEPS.display_name == "Notes & Next Steps"
        assert str(Phase.DECISION_QUALITY) == "Decision Quality"

    def test_abbreviations(self):
        assert Phase.CONSEQUENCES.abbreviation == "CON"
        assert Phase.DECISION_QUALITY.abbreviation == "DQ"

    def test_parse_accepts_value_name_and_display_name(self):
        """parse is case-insensitive across the three spellings."""
        assert Phase.parse("problem_frame") == Phase.PROBLEM_FRAME
        assert Phase.parse("PROBLEM_FRAME") == Phase.PROBLEM_FRAME
        assert Phase.parse("Problem Frame") == Phase.PROBLEM_FRAME
        assert Phase.parse(Phase.TRADEOFFS) == Phase.TRADEOFFS

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError):
            Phase.parse("brainstorming")
