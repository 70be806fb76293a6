from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import List, Optional, Sequence, Union

from ..common.datetime_utils import kiosk_date, kiosk_time, now_local
from ..common.validators import optional_upper
from ..core.constants import MAX_TASKS_PER_EVENT, TASK_CATEGORIES
from ..core.enums import EventKind
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..sync.feed import EVENTS_TABLE, MONITOR_TABLE, ChangeFeed
from .derivation import derive_statuses
from .guard import SubmissionGuard, SubmissionLatch
from .model import AttendanceEvent, EmployeeStatus, MonitorRecord
from .repository import EventLogRepository, MonitorRepository

logger = logging.getLogger(__name__)


def parse_kind(value: Union[str, EventKind, None]) -> EventKind:
    if isinstance(value, EventKind):
        return value
    if value is not None and not isinstance(value, str):
        raise ValidationError("Tipo de registro no válido")
    raw = (value or "").strip().upper()
    aliases = {"ENTRY": EventKind.ENTRY, "EXIT": EventKind.EXIT}
    if raw in aliases:
        return aliases[raw]
    try:
        return EventKind(raw)
    except ValueError:
        raise ValidationError("Tipo de registro no válido")


def normalize_tasks(tasks: Optional[Sequence[str]]) -> tuple[str, ...]:
    if tasks is not None and not isinstance(tasks, (list, tuple)):
        raise ValidationError("Las tareas deben enviarse como una lista")
    if any(not isinstance(t, str) for t in tasks or ()):
        raise ValidationError("Tarea no válida")
    cleaned = tuple(t.strip().upper() for t in (tasks or ()) if t and t.strip())
    unknown = [t for t in cleaned if t not in TASK_CATEGORIES]
    if unknown:
        raise ValidationError(f"Tarea no válida: {', '.join(unknown)}")
    if len(cleaned) > MAX_TASKS_PER_EVENT:
        raise ValidationError("Seleccione una sola tarea a realizar")
    return cleaned


class AttendanceService:
    """Use case: kiosk ENTRY/EXIT submissions and the live in/out view of a store."""

    def __init__(
        self,
        events: EventLogRepository,
        monitor: MonitorRepository,
        employees: EmployeeRepository,
        feed: ChangeFeed,
        *,
        guard: Optional[SubmissionGuard] = None,
        latch: Optional[SubmissionLatch] = None,
    ):
        self._events = events
        self._monitor = monitor
        self._employees = employees
        self._feed = feed
        self._guard = guard or SubmissionGuard()
        self._latch = latch or SubmissionLatch()

    def submit(
        self,
        *,
        store_id: str,
        badge_code: str,
        kind: Union[str, EventKind],
        session_key: str,
        personal_items: Optional[str] = None,
        tasks: Optional[Sequence[str]] = None,
        store_name: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Optional[AttendanceEvent]:
        """Validate and append one event.

        Returns None without touching anything when the same session already has a
        submission in flight. Raises ValidationError/NotFoundError on bad input and
        GuardRejection when the kind would repeat the employee's last event.
        """

        if not self._latch.acquire(session_key):
            logger.info("Submission dropped: session %s already has one in flight", session_key)
            return None
        try:
            return self._submit(
                store_id=store_id,
                badge_code=badge_code,
                kind=parse_kind(kind),
                personal_items=optional_upper(personal_items, "Objetos personales"),
                tasks=normalize_tasks(tasks),
                store_name=store_name,
                now=now or now_local(),
            )
        finally:
            self._latch.release(session_key)

    def _submit(
        self,
        *,
        store_id: str,
        badge_code: str,
        kind: EventKind,
        personal_items: Optional[str],
        tasks: tuple[str, ...],
        store_name: Optional[str],
        now: datetime,
    ) -> AttendanceEvent:
        if not badge_code or not badge_code.strip():
            raise ValidationError("Primero busque un empleado por cédula")

        employee = self._employees.get_by_badge(store_id, badge_code.strip())
        if not employee:
            raise NotFoundError("No se encontró un empleado con esa cédula")

        last_event = self._events.latest_for_employee(store_id, employee.employee_id)
        decision = self._guard.check(kind, last_event, personal_items=personal_items)

        now = now.replace(microsecond=0)
        event = AttendanceEvent(
            event_id=str(uuid.uuid4()),
            store_id=store_id,
            employee_id=employee.employee_id,
            badge_code=employee.badge_code,
            name=employee.name,
            area=employee.area,
            kind=decision.kind,
            event_date=kiosk_date(now),
            event_time=kiosk_time(now),
            timestamp=now,
            personal_items=decision.personal_items,
            tasks=tasks,
        )
        self._events.append(event)
        logger.info("%s registered for employee %s in store %s", event.kind.value, employee.badge_code, store_id)
        self._feed.publish(store_id, EVENTS_TABLE)

        self._write_projection(event, store_name=store_name)
        return event

    def _write_projection(self, event: AttendanceEvent, *, store_name: Optional[str]) -> None:
        # Independent failure domain: the primary append already succeeded.
        try:
            self._monitor.append(MonitorRecord.from_event(event, store_name=store_name))
        except Exception:
            logger.exception("Monitor projection write failed for event %s", event.event_id)
            return
        self._feed.publish(event.store_id, MONITOR_TABLE)

    def list_live(self, store_id: str) -> Sequence[AttendanceEvent]:
        return self._events.list_live(store_id)

    def current_statuses(self, store_id: str) -> List[EmployeeStatus]:
        """Recomputed from the live log on every call, nothing cached."""
        return derive_statuses(self._events.list_live(store_id))


class MonitorService:
    """Admin live monitor over the projection table (window: since the last sweep)."""

    def __init__(self, monitor: MonitorRepository):
        self._monitor = monitor

    def records(self, store_id: str) -> List[MonitorRecord]:
        seen: set[str] = set()
        unique: List[MonitorRecord] = []
        for r in self._monitor.list_for_store(store_id):
            if r.record_id in seen:
                continue
            seen.add(r.record_id)
            unique.append(r)
        return unique

    def statuses(self, store_id: str) -> List[EmployeeStatus]:
        return derive_statuses(self.records(store_id))
