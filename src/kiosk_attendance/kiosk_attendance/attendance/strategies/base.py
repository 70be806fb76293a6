from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import EventKind
from ..model import AttendanceEvent


@dataclass(frozen=True)
class GuardDecision:
    kind: EventKind
    personal_items: Optional[str] = None


class SubmissionStrategy(ABC):
    """Strategy Pattern: encapsulate whether one event kind may follow the last event."""

    kind: EventKind

    @abstractmethod
    def decide(self, *, last_event: Optional[AttendanceEvent], personal_items: Optional[str]) -> GuardDecision:
        """Return the decision to append, or raise GuardRejection."""

        raise NotImplementedError
