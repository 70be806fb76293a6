from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest

from kiosk_attendance.attendance.model import AttendanceEvent, MonitorRecord
from kiosk_attendance.container import assemble_container
from kiosk_attendance.employees.model import Employee
from kiosk_attendance.main import create_app
from kiosk_attendance.stores.model import Store
from kiosk_attendance.sync.feed import ChangeFeed


class InMemoryStores:
    def __init__(self):
        self.by_id: dict[str, Store] = {}

    def get_by_login(self, login: str) -> Optional[Store]:
        return next((s for s in self.by_id.values() if s.login == login), None)

    def create_store(self, *, store_id: str, name: str, login: str, password_hash: str) -> str:
        self.by_id[store_id] = Store(store_id=store_id, name=name, login=login, password_hash=password_hash)
        return store_id


class InMemoryEmployees:
    def __init__(self):
        self.rows: dict[int, Employee] = {}
        self._id = 0

    def get_by_id(self, store_id: str, employee_id: int) -> Optional[Employee]:
        e = self.rows.get(employee_id)
        return e if e and e.store_id == store_id else None

    def get_by_badge(self, store_id: str, badge_code: str) -> Optional[Employee]:
        return next((e for e in self.rows.values() if e.store_id == store_id and e.badge_code == badge_code), None)

    def list_for_store(self, store_id: str):
        return sorted((e for e in self.rows.values() if e.store_id == store_id), key=lambda e: e.name)

    def create_employee(self, *, store_id: str, badge_code: str, name: str, area: str, is_global: bool) -> int:
        self._id += 1
        self.rows[self._id] = Employee(
            employee_id=self._id,
            store_id=store_id,
            badge_code=badge_code,
            name=name,
            area=area,
            is_global=is_global,
        )
        return self._id

    def delete_by_id(self, store_id: str, employee_id: int) -> bool:
        if self.get_by_id(store_id, employee_id):
            del self.rows[employee_id]
            return True
        return False


class InMemoryEvents:
    def __init__(self):
        self.rows: list[AttendanceEvent] = []

    def _newest_first(self, events):
        indexed = list(enumerate(events))
        indexed.sort(key=lambda p: (p[1].timestamp, p[0]), reverse=True)
        return [e for _, e in indexed]

    def append(self, event: AttendanceEvent) -> None:
        self.rows.append(event)

    def latest_for_employee(self, store_id: str, employee_id: int) -> Optional[AttendanceEvent]:
        live = [e for e in self.list_live(store_id) if e.employee_id == employee_id]
        return live[0] if live else None

    def list_live(self, store_id: str):
        return self._newest_first([e for e in self.rows if e.store_id == store_id and not e.exported])

    def mark_exported(self, store_id: str, event_ids) -> int:
        ids = set(event_ids)
        count = 0
        for i, e in enumerate(self.rows):
            if e.store_id == store_id and e.event_id in ids:
                self.rows[i] = replace(e, exported=True)
                count += 1
        return count

    def delete_by_ids(self, store_id: str, event_ids) -> int:
        ids = set(event_ids)
        before = len(self.rows)
        self.rows = [e for e in self.rows if not (e.store_id == store_id and e.event_id in ids)]
        return before - len(self.rows)

    def purge_exported(self) -> int:
        before = len(self.rows)
        self.rows = [e for e in self.rows if not e.exported]
        return before - len(self.rows)


class InMemoryMonitor:
    def __init__(self):
        self.rows: list[MonitorRecord] = []

    def append(self, record: MonitorRecord) -> None:
        self.rows.append(record)

    def list_for_store(self, store_id: str):
        return sorted((r for r in self.rows if r.store_id == store_id), key=lambda r: r.timestamp, reverse=True)

    def clear_all(self) -> int:
        count = len(self.rows)
        self.rows = []
        return count


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 2, 8, 30, 0)


@pytest.fixture
def stores_repo():
    return InMemoryStores()


@pytest.fixture
def employees_repo():
    return InMemoryEmployees()


@pytest.fixture
def events_repo():
    return InMemoryEvents()


@pytest.fixture
def monitor_repo():
    return InMemoryMonitor()


@pytest.fixture
def feed():
    return ChangeFeed()


@pytest.fixture
def container(stores_repo, employees_repo, events_repo, monitor_repo, feed):
    return assemble_container(
        stores_repo=stores_repo,
        employees_repo=employees_repo,
        events_repo=events_repo,
        monitor_repo=monitor_repo,
        change_feed=feed,
    )


@pytest.fixture
def app(container):
    return create_app(container=container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store_client(client):
    """Client with a freshly registered store session."""
    resp = client.post("/api/register", json={"store_name": "Bodega Norte", "password": "1234"})
    assert resp.status_code == 201
    return client


def make_event(
    *,
    employee_id: int,
    kind,
    ts: datetime,
    name: str = "ANA",
    store_id: str = "store-1",
    personal_items: Optional[str] = None,
    tasks: tuple = (),
    event_id: Optional[str] = None,
) -> AttendanceEvent:
    return AttendanceEvent(
        event_id=event_id or f"{employee_id}-{kind.value}-{ts.isoformat()}",
        store_id=store_id,
        employee_id=employee_id,
        badge_code=f"CC{employee_id:04d}",
        name=name,
        area="BODEGA",
        kind=kind,
        event_date=ts.strftime("%d/%m/%Y"),
        event_time=ts.strftime("%H:%M:%S"),
        timestamp=ts,
        personal_items=personal_items,
        tasks=tasks,
    )


@pytest.fixture
def event_factory():
    return make_event
