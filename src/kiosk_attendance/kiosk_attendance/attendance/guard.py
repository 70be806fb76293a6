from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, Optional, Set

from ..core.enums import EventKind
from .model import AttendanceEvent
from .strategies.base import GuardDecision, SubmissionStrategy
from .strategies.entry_strategy import EntryStrategy
from .strategies.exit_strategy import ExitStrategy


@dataclass
class SubmissionGuard:
    """Factory Pattern: pick the strategy for the requested kind and let it decide.

    Note: the caller reads the last event and appends afterwards; nothing here makes
    that read-then-write atomic across kiosks.
    """

    strategies: Dict[EventKind, SubmissionStrategy] = field(
        default_factory=lambda: {EventKind.ENTRY: EntryStrategy(), EventKind.EXIT: ExitStrategy()}
    )

    def for_kind(self, kind: EventKind) -> SubmissionStrategy:
        return self.strategies[kind]

    def check(
        self,
        kind: EventKind,
        last_event: Optional[AttendanceEvent],
        *,
        personal_items: Optional[str] = None,
    ) -> GuardDecision:
        return self.for_kind(kind).decide(last_event=last_event, personal_items=personal_items)


class SubmissionLatch:
    """One in-flight submission per session; concurrent ones are refused, not queued."""

    def __init__(self):
        self._lock = threading.Lock()
        self._in_flight: Set[str] = set()

    def acquire(self, session_key: str) -> bool:
        with self._lock:
            if session_key in self._in_flight:
                return False
            self._in_flight.add(session_key)
            return True

    def release(self, session_key: str) -> None:
        with self._lock:
            self._in_flight.discard(session_key)

    def is_busy(self, session_key: str) -> bool:
        with self._lock:
            return session_key in self._in_flight
