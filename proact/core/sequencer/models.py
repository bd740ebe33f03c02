# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Sequencer models — caller intents, phase summaries, phase context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from proact.core.phases import Phase


class IntentKind(str, Enum):
    """What the caller wants the sequencer to do next."""

    CONTINUE = "CONTINUE"
    NAVIGATE = "NAVIGATE"
    BRANCH = "BRANCH"
    SUMMARIZE = "SUMMARIZE"
    COMPLETE = "COMPLETE"


@dataclass(frozen=True)
class UserIntent:
    """A routing request. ``target`` is only set for NAVIGATE."""

    kind: IntentKind
    target: Optional[Phase] = None

    def __post_init__(self) -> None:
        if self.kind == IntentKind.NAVIGATE and self.target is None:
            raise ValueError("NAVIGATE intent requires a target phase")

    @classmethod
    def continue_(cls) -> "UserIntent":
        return cls(IntentKind.CONTINUE)

    @classmethod
    def navigate_to(cls, target: Phase) -> "UserIntent":
        return cls(IntentKind.NAVIGATE, target)

    @classmethod
    def branch(cls) -> "UserIntent":
        return cls(IntentKind.BRANCH)

    @classmethod
    def summarize(cls) -> "UserIntent":
        return cls(IntentKind.SUMMARIZE)

    @classmethod
    def complete(cls) -> "UserIntent":
        return cls(IntentKind.COMPLETE)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PhaseSummary:
    """Summary produced once a phase is completed."""

    phase: Phase
    summary: str
    key_outputs: List[str] = field(default_factory=list)
    conflicts: List[str] = field(default_factory=list)
    completed_at: datetime = field(default_factory=_utc_now)

    def is_empty(self) -> bool:
        return not self.summary and not self.key_outputs

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phase": self.phase.value,
            "summary": self.summary,
            "key_outputs": list(self.key_outputs),
            "conflicts": list(self.conflicts),
            "completed_at": self.completed_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PhaseSummary":
        completed_raw = data.get("completed_at")
        if isinstance(completed_raw, datetime):
            completed_at = completed_raw
        elif completed_raw:
            text = str(completed_raw).strip()
            # fromisoformat only accepts a trailing "Z" from 3.11 on
            if text.endswith(("Z", "z")):
                text = text[:-1] + "+00:00"
            completed_at = datetime.fromisoformat(text)
        else:
            completed_at = _utc_now()
        if completed_at.tzinfo is None:
            completed_at = completed_at.replace(tzinfo=timezone.utc)
        return cls(
            phase=Phase.parse(data["phase"]),
            summary=data.get("summary") or "",
            key_outputs=list(data.get("key_outputs") or []),
            conflicts=list(data.get("conflicts") or []),
            completed_at=completed_at,
        )


@dataclass
class PhaseContext:
    """Prior work handed to whatever is producing content for ``phase``."""

    phase: Phase
    prior_summaries: List[PhaseSummary] = field(default_factory=list)

    def summaries_for(self, phase: Phase) -> List[PhaseSummary]:
        return [s for s in self.prior_summaries if s.phase == phase]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phase": self.phase.value,
            "prior_summaries": [s.to_dict() for s in self.prior_summaries],
        }
