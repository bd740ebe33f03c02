# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Phase sequencer: ordered movement between PrOACT phases within one cycle."""

from proact.core.sequencer.errors import (
    CycleCompletedError,
    InvalidStateError,
    InvalidTransitionError,
    SequencerError,
)
from proact.core.sequencer.models import (
    IntentKind,
    PhaseContext,
    PhaseSummary,
    UserIntent,
)
from proact.core.sequencer.phase_sequencer import PhaseSequencer

__all__ = [
    "IntentKind",
    "UserIntent",
    "PhaseSummary",
    "PhaseContext",
    "PhaseSequencer",
    "SequencerError",
    "InvalidTransitionError",
    "InvalidStateError",
    "CycleCompletedError",
]
