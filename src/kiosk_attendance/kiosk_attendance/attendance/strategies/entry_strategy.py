from __future__ import annotations

from typing import Optional

from ...core.enums import EventKind, RejectionReason
from ...core.exceptions import GuardRejection
from ..model import AttendanceEvent
from .base import GuardDecision, SubmissionStrategy

DUPLICATE_ENTRY_MESSAGE = "El empleado ya tiene una entrada registrada sin salida"


class EntryStrategy(SubmissionStrategy):
    """ENTRY is allowed on an empty history or right after an EXIT."""

    kind = EventKind.ENTRY

    def decide(self, *, last_event: Optional[AttendanceEvent], personal_items: Optional[str]) -> GuardDecision:
        if last_event is not None and last_event.kind == EventKind.ENTRY:
            raise GuardRejection(RejectionReason.DUPLICATE_ENTRY, DUPLICATE_ENTRY_MESSAGE)
        return GuardDecision(kind=self.kind, personal_items=personal_items)
