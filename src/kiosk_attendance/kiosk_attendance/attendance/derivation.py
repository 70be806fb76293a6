"""Derive every employee's current in/out status from a raw event log."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Union

from ..core.enums import EventKind, PresenceState
from .model import AttendanceEvent, EmployeeStatus, MonitorRecord, Snapshot

LogEntry = Union[AttendanceEvent, MonitorRecord]


def _snapshot(entry: Optional[LogEntry]) -> Optional[Snapshot]:
    if entry is None:
        return None
    return Snapshot(date=entry.event_date, time=entry.event_time)


def _latest_of_kind(entries: List[LogEntry], kind: EventKind) -> Optional[LogEntry]:
    return next((e for e in entries if e.kind == kind), None)


def derive_statuses(events: Iterable[LogEntry]) -> List[EmployeeStatus]:
    """One EmployeeStatus per employee with at least one event.

    Pure function of its input. Output follows the order in which employees first
    appear in `events`; equal timestamps keep their input order.
    """

    groups: Dict[int, List[LogEntry]] = {}
    for e in events:
        groups.setdefault(e.employee_id, []).append(e)

    statuses: List[EmployeeStatus] = []
    for employee_id, entries in groups.items():
        # sorted() is stable, so ties stay in insertion order.
        ordered = sorted(entries, key=lambda e: e.timestamp, reverse=True)
        latest = ordered[0]

        statuses.append(
            EmployeeStatus(
                employee_id=employee_id,
                badge_code=latest.badge_code,
                name=latest.name,
                area=latest.area,
                state=PresenceState.INSIDE if latest.kind == EventKind.ENTRY else PresenceState.OUTSIDE,
                last_entry=_snapshot(_latest_of_kind(ordered, EventKind.ENTRY)),
                last_exit=_snapshot(_latest_of_kind(ordered, EventKind.EXIT)),
                personal_items=latest.personal_items,
            )
        )
    return statuses
