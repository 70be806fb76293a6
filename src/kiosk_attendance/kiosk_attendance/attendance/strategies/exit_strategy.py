from __future__ import annotations

from typing import Optional

from ...core.enums import EventKind, RejectionReason
from ...core.exceptions import GuardRejection
from ..model import AttendanceEvent
from .base import GuardDecision, SubmissionStrategy

EXIT_WITHOUT_ENTRY_MESSAGE = "No hay una entrada activa para registrar la salida"


class ExitStrategy(SubmissionStrategy):
    """EXIT closes an open ENTRY.

    The EXIT keeps the items declared on that ENTRY so the log shows what was
    actually carried in; the form value only counts when the ENTRY declared nothing.
    """

    kind = EventKind.EXIT

    def decide(self, *, last_event: Optional[AttendanceEvent], personal_items: Optional[str]) -> GuardDecision:
        if last_event is None or last_event.kind != EventKind.ENTRY:
            raise GuardRejection(RejectionReason.EXIT_WITHOUT_ENTRY, EXIT_WITHOUT_ENTRY_MESSAGE)
        return GuardDecision(kind=self.kind, personal_items=last_event.personal_items or personal_items)
