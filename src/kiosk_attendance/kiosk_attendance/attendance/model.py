from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from ..core.enums import EventKind, PresenceState


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one ENTRY/EXIT in a store's event log.

    badge_code, name and area are a snapshot of the employee at event time.
    """

    event_id: str
    store_id: str
    employee_id: int
    badge_code: str
    name: str
    area: str
    kind: EventKind
    event_date: str
    event_time: str
    timestamp: datetime
    personal_items: Optional[str] = None
    tasks: Tuple[str, ...] = field(default_factory=tuple)
    exported: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.event_id,
            "employee_id": self.employee_id,
            "badge_code": self.badge_code,
            "name": self.name,
            "area": self.area,
            "kind": self.kind.value,
            "date": self.event_date,
            "time": self.event_time,
            "timestamp": self.timestamp.isoformat(),
            "personal_items": self.personal_items,
            "tasks": list(self.tasks),
        }


@dataclass(frozen=True)
class MonitorRecord:
    """Read-model for the admin live monitor (projection of AttendanceEvent).

    Lives outside the export lifecycle; only the daily cleanup removes it.
    """

    record_id: str
    store_id: str
    employee_id: int
    badge_code: str
    name: str
    area: str
    kind: EventKind
    event_date: str
    event_time: str
    timestamp: datetime
    personal_items: Optional[str] = None
    tasks: Tuple[str, ...] = field(default_factory=tuple)
    store_name: Optional[str] = None

    @classmethod
    def from_event(cls, event: AttendanceEvent, *, store_name: Optional[str] = None) -> "MonitorRecord":
        return cls(
            record_id=event.event_id,
            store_id=event.store_id,
            employee_id=event.employee_id,
            badge_code=event.badge_code,
            name=event.name,
            area=event.area,
            kind=event.kind,
            event_date=event.event_date,
            event_time=event.event_time,
            timestamp=event.timestamp,
            personal_items=event.personal_items,
            tasks=event.tasks,
            store_name=store_name,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "employee_id": self.employee_id,
            "badge_code": self.badge_code,
            "name": self.name,
            "area": self.area,
            "kind": self.kind.value,
            "date": self.event_date,
            "time": self.event_time,
            "timestamp": self.timestamp.isoformat(),
            "personal_items": self.personal_items,
            "tasks": list(self.tasks),
            "store_name": self.store_name,
        }


@dataclass(frozen=True)
class Snapshot:
    date: str
    time: str


@dataclass(frozen=True)
class EmployeeStatus:
    """Derived (never persisted) in/out status of one employee."""

    employee_id: int
    badge_code: str
    name: str
    area: str
    state: PresenceState
    last_entry: Optional[Snapshot] = None
    last_exit: Optional[Snapshot] = None
    personal_items: Optional[str] = None

    def to_dict(self) -> dict:
        def _snap(s: Optional[Snapshot]) -> Optional[dict]:
            return {"date": s.date, "time": s.time} if s else None

        return {
            "employee_id": self.employee_id,
            "badge_code": self.badge_code,
            "name": self.name,
            "area": self.area,
            "state": self.state.value,
            "last_entry": _snap(self.last_entry),
            "last_exit": _snap(self.last_exit),
            "personal_items": self.personal_items,
        }
