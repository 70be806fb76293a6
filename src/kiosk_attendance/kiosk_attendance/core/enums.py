from __future__ import annotations

from enum import Enum


class EventKind(str, Enum):
    """Attendance event kind, stored with the kiosk's Spanish labels."""

    ENTRY = "ENTRADA"
    EXIT = "SALIDA"


class PresenceState(str, Enum):
    """Derived in/out state of an employee."""

    INSIDE = "DENTRO"
    OUTSIDE = "FUERA"


class RejectionReason(str, Enum):
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"
    EXIT_WITHOUT_ENTRY = "EXIT_WITHOUT_ENTRY"
