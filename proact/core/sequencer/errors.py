# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Sequencer errors. All are local validation failures, never retryable."""

from __future__ import annotations

from typing import Iterable, Optional

from proact.core.phases import Phase


class SequencerError(Exception):
    """Base class for phase sequencer failures."""


class InvalidTransitionError(SequencerError):
    """Raised when a phase transition is not permitted by ordering/completion rules."""

    def __init__(
        self,
        from_phase: Phase,
        to_phase: Phase,
        reachable: Optional[Iterable[Phase]] = None,
    ) -> None:
        self.from_phase = from_phase
        self.to_phase = to_phase
        self.reachable = list(reachable or [])

        allowed_str = ", ".join(p.display_name for p in self.reachable) if self.reachable else "none"
        super().__init__(
            f"Invalid transition from {from_phase.display_name} to {to_phase.display_name}. "
            f"Reachable phases: {allowed_str}"
        )


class InvalidStateError(SequencerError):
    """Raised on a phase mismatch when recording a completion, or on malformed state."""

    def __init__(
        self,
        message: str,
        expected: Optional[Phase] = None,
        actual: Optional[Phase] = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid state: {message}")


class CycleCompletedError(SequencerError):
    """Raised when advancement is requested past the last phase."""

    def __init__(self, phase: Phase) -> None:
        self.phase = phase
        super().__init__(f"Cycle already completed: {phase.display_name} is the last phase")
