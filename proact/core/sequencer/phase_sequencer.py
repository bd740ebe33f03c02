# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Phase sequencer for enforcing the PrOACT phase order within one decision cycle.

Backward navigation is always allowed. Forward navigation requires every
earlier working phase to be completed. Recording a completion never advances
the current phase; advancing is a separate ``transition_to`` call.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from proact.core.phases import Phase, WORKING_PHASES, is_working_phase
from proact.core.sequencer.errors import (
    CycleCompletedError,
    InvalidStateError,
    InvalidTransitionError,
)
from proact.core.sequencer.models import IntentKind, PhaseContext, PhaseSummary, UserIntent

logger = logging.getLogger(__name__)


class PhaseSequencer:
    """Holds the current phase and completed-phase summaries for a single cycle.

    Callers must serialise mutating calls per cycle.
    """

    def __init__(
        self,
        cycle_id: Optional[str] = None,
        current_phase: Phase = Phase.ISSUE_RAISING,
        completed: Optional[Dict[Phase, PhaseSummary]] = None,
    ) -> None:
        if not is_working_phase(current_phase):
            raise InvalidStateError(
                f"{current_phase.display_name} is not a working phase",
                actual=current_phase,
            )
        completed = dict(completed or {})
        _validate_completed(completed)
        self._cycle_id = cycle_id or str(uuid.uuid4())
        self._current_phase = current_phase
        self._completed: Dict[Phase, PhaseSummary] = completed

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def cycle_id(self) -> str:
        return self._cycle_id

    @property
    def current_phase(self) -> Phase:
        return self._current_phase

    @property
    def completed_phases(self) -> List[Phase]:
        """Completed phases in canonical order."""
        return [p for p in WORKING_PHASES if p in self._completed]

    @property
    def completed_summaries(self) -> Dict[Phase, PhaseSummary]:
        return dict(self._completed)

    def is_phase_completed(self, phase: Phase) -> bool:
        return phase in self._completed

    def next_phase(self) -> Optional[Phase]:
        idx = WORKING_PHASES.index(self._current_phase)
        if idx + 1 < len(WORKING_PHASES):
            return WORKING_PHASES[idx + 1]
        return None

    def reachable_phases(self) -> List[Phase]:
        """Working phases that ``transition_to`` would currently accept."""
        return [p for p in WORKING_PHASES if self.can_transition_to(p)]

    def progress(self) -> Dict[str, Any]:
        completed = len(self.completed_phases)
        total = len(WORKING_PHASES)
        return {
            "completed": completed,
            "total": total,
            "percent": round(100 * completed / total, 1),
        }

    # ------------------------------------------------------------------
    # Routing and transitions
    # ------------------------------------------------------------------

    def route(self, intent: UserIntent) -> Phase:
        """Resolve the phase that should be acted on next. Never mutates state.

        Parameters
        ----------
        intent:
            Caller intent. BRANCH resolves to the current phase; forking the
            new cycle context is the caller's job.

        Returns
        -------
        Phase
            The phase to act on.

        Raises
        ------
        InvalidTransitionError
            NAVIGATE to a phase that cannot be reached yet.
        CycleCompletedError
            COMPLETE while on the last working phase.
        """
        if intent.kind in (IntentKind.CONTINUE, IntentKind.BRANCH, IntentKind.SUMMARIZE):
            return self._current_phase

        if intent.kind == IntentKind.NAVIGATE:
            target = intent.target
            if not self.can_transition_to(target):
                raise self._reject_transition(target)
            return target

        # COMPLETE
        successor = self.next_phase()
        if successor is None:
            logger.info(f"Cycle {self._cycle_id} completed at {self._current_phase.display_name}")
            raise CycleCompletedError(self._current_phase)
        return successor

    def can_transition_to(self, target: Phase) -> bool:
        """True if ``target`` may become the current phase.

        Backward and same-phase moves are always allowed. Forward moves need
        every working phase before ``target`` to be completed.
        """
        if not is_working_phase(target):
            return False

        current_idx = WORKING_PHASES.index(self._current_phase)
        target_idx = WORKING_PHASES.index(target)

        if target_idx <= current_idx:
            return True

        return all(p in self._completed for p in WORKING_PHASES[:target_idx])

    def transition_to(self, phase: Phase) -> None:
        """Move to ``phase``. Atomic: state is unchanged when this raises.

        Raises
        ------
        InvalidTransitionError
            If ``can_transition_to(phase)`` is false.
        """
        if not self.can_transition_to(phase):
            raise self._reject_transition(phase)

        previous = self._current_phase
        self._current_phase = phase
        logger.info(
            f"Cycle {self._cycle_id} transitioned: "
            f"{previous.display_name} -> {phase.display_name}"
        )

    def record_completion(self, summary: PhaseSummary) -> None:
        """Store ``summary`` for the current phase, overwriting any earlier one.

        Does not advance the current phase.

        Raises
        ------
        InvalidStateError
            If ``summary.phase`` is not the current phase.
        """
        if summary.phase != self._current_phase:
            message = (
                f"Cannot complete {summary.phase.display_name} "
                f"while on {self._current_phase.display_name}"
            )
            logger.error(message, extra={
                "cycle_id": self._cycle_id,
                "current_phase": self._current_phase.value,
                "summary_phase": summary.phase.value,
            })
            raise InvalidStateError(message, expected=self._current_phase, actual=summary.phase)

        overwritten = summary.phase in self._completed
        self._completed[summary.phase] = summary
        logger.info(
            f"Cycle {self._cycle_id} recorded completion of {summary.phase.display_name}"
            + (" (replaced earlier summary)" if overwritten else "")
        )

    def context_for(self, phase: Phase) -> PhaseContext:
        """Summaries of every other completed phase, in canonical order."""
        prior = [
            self._completed[p]
            for p in WORKING_PHASES
            if p != phase and p in self._completed
        ]
        return PhaseContext(phase=phase, prior_summaries=prior)

    def _reject_transition(self, target: Phase) -> InvalidTransitionError:
        error = InvalidTransitionError(self._current_phase, target, self.reachable_phases())
        logger.error(
            f"Invalid transition for cycle {self._cycle_id}: "
            f"{self._current_phase.display_name} -> {target.display_name}",
            extra={
                "cycle_id": self._cycle_id,
                "from_phase": self._current_phase.value,
                "to_phase": target.value,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )
        return error

    # ------------------------------------------------------------------
    # Persistence hand-off (plain dicts only)
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cycle_id": self._cycle_id,
            "current_phase": self._current_phase.value,
            "completed": {
                p.value: self._completed[p].to_dict() for p in self.completed_phases
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PhaseSequencer":
        """Restore a sequencer from ``to_dict`` output.

        Raises
        ------
        InvalidStateError
            If the current phase is not a working phase, a stored summary is
            malformed, keyed under a non-working phase, or does not belong to
            the phase it is keyed under.
        """
        try:
            current = Phase.parse(data.get("current_phase") or Phase.ISSUE_RAISING.value)
        except ValueError as e:
            raise InvalidStateError(str(e)) from e

        completed: Dict[Phase, PhaseSummary] = {}
        for key, raw in (data.get("completed") or {}).items():
            try:
                phase = Phase.parse(key)
                summary = PhaseSummary.from_dict(raw)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise InvalidStateError(f"Malformed summary for {key!r}: {e}") from e
            completed[phase] = summary

        return cls(cycle_id=data.get("cycle_id"), current_phase=current, completed=completed)


def _validate_completed(completed: Dict[Phase, PhaseSummary]) -> None:
    """Every key is a working phase and the phase of its own summary."""
    for phase, summary in completed.items():
        if not is_working_phase(phase):
            raise InvalidStateError(
                f"{phase.display_name} is not a working phase and cannot be completed",
                actual=phase,
            )
        if summary.phase != phase:
            raise InvalidStateError(
                f"Summary for {summary.phase.display_name} stored under {phase.display_name}",
                expected=phase,
                actual=summary.phase,
            )


__all__ = ["PhaseSequencer"]
