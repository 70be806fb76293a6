from __future__ import annotations

from typing import Optional, Sequence, Tuple

from ..core.enums import EventKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import AttendanceEvent, MonitorRecord
from .repository import EventLogRepository, MonitorRepository

_EVENT_COLUMNS = (
    "event_id, store_id, employee_id, badge_code, name, area, kind, "
    "event_date, event_time, event_ts, personal_items, tasks, exported"
)
_MONITOR_COLUMNS = (
    "record_id, store_id, store_name, employee_id, badge_code, name, area, kind, "
    "event_date, event_time, event_ts, personal_items, tasks"
)


def _join_tasks(tasks: Tuple[str, ...]) -> Optional[str]:
    return ",".join(tasks) if tasks else None


def _split_tasks(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return ()
    return tuple(t for t in value.split(",") if t)


def _row_to_event(r: dict) -> AttendanceEvent:
    return AttendanceEvent(
        event_id=str(r["event_id"]),
        store_id=str(r["store_id"]),
        employee_id=int(r["employee_id"]),
        badge_code=r["badge_code"],
        name=r["name"],
        area=r["area"],
        kind=EventKind(r["kind"]),
        event_date=r["event_date"],
        event_time=r["event_time"],
        timestamp=r["event_ts"],
        personal_items=r.get("personal_items"),
        tasks=_split_tasks(r.get("tasks")),
        exported=bool(r.get("exported", False)),
    )


def _row_to_record(r: dict) -> MonitorRecord:
    return MonitorRecord(
        record_id=str(r["record_id"]),
        store_id=str(r["store_id"]),
        employee_id=int(r["employee_id"]),
        badge_code=r["badge_code"],
        name=r["name"],
        area=r["area"],
        kind=EventKind(r["kind"]),
        event_date=r["event_date"],
        event_time=r["event_time"],
        timestamp=r["event_ts"],
        personal_items=r.get("personal_items"),
        tasks=_split_tasks(r.get("tasks")),
        store_name=r.get("store_name"),
    )


class MySQLEventLogRepository(EventLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(self, event: AttendanceEvent) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO attendance_events({_EVENT_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    event.event_id,
                    event.store_id,
                    event.employee_id,
                    event.badge_code,
                    event.name,
                    event.area,
                    event.kind.value,
                    event.event_date,
                    event.event_time,
                    event.timestamp,
                    event.personal_items,
                    _join_tasks(event.tasks),
                    int(event.exported),
                ),
            )

    def latest_for_employee(self, store_id: str, employee_id: int) -> Optional[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_EVENT_COLUMNS}
                FROM attendance_events
                WHERE store_id=%s AND employee_id=%s AND exported=0
                ORDER BY event_ts DESC, seq DESC
                LIMIT 1
                """,
                (store_id, int(employee_id)),
            )
            r = fetchone(cur)
            return _row_to_event(r) if r else None

    def list_live(self, store_id: str) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_EVENT_COLUMNS}
                FROM attendance_events
                WHERE store_id=%s AND exported=0
                ORDER BY event_ts DESC, seq DESC
                """,
                (store_id,),
            )
            return [_row_to_event(r) for r in fetchall(cur)]

    def mark_exported(self, store_id: str, event_ids: Sequence[str]) -> int:
        if not event_ids:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE attendance_events SET exported=1 WHERE store_id=%s AND event_id IN ({in_clause(event_ids)})",
                (store_id, *event_ids),
            )
            return cur.rowcount

    def delete_by_ids(self, store_id: str, event_ids: Sequence[str]) -> int:
        if not event_ids:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"DELETE FROM attendance_events WHERE store_id=%s AND event_id IN ({in_clause(event_ids)})",
                (store_id, *event_ids),
            )
            return cur.rowcount

    def purge_exported(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_events WHERE exported=1")
            return cur.rowcount


class MySQLMonitorRepository(MonitorRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(self, record: MonitorRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO monitor_records({_MONITOR_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.record_id,
                    record.store_id,
                    record.store_name,
                    record.employee_id,
                    record.badge_code,
                    record.name,
                    record.area,
                    record.kind.value,
                    record.event_date,
                    record.event_time,
                    record.timestamp,
                    record.personal_items,
                    _join_tasks(record.tasks),
                ),
            )

    def list_for_store(self, store_id: str) -> Sequence[MonitorRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_MONITOR_COLUMNS}
                FROM monitor_records
                WHERE store_id=%s
                ORDER BY event_ts DESC, seq DESC
                """,
                (store_id,),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def clear_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM monitor_records")
            return cur.rowcount
