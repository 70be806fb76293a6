from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceEvent, MonitorRecord


class EventLogRepository(Protocol):
    """Append-only attendance log of a store.

    "Live" means not yet exported.
    """

    def append(self, event: AttendanceEvent) -> None:
        raise NotImplementedError

    def latest_for_employee(self, store_id: str, employee_id: int) -> Optional[AttendanceEvent]:
        raise NotImplementedError

    def list_live(self, store_id: str) -> Sequence[AttendanceEvent]:
        """Live events, newest first."""

        raise NotImplementedError

    def mark_exported(self, store_id: str, event_ids: Sequence[str]) -> int:
        raise NotImplementedError

    def delete_by_ids(self, store_id: str, event_ids: Sequence[str]) -> int:
        raise NotImplementedError

    def purge_exported(self) -> int:
        """Delete exported events of every store (cleanup sweep)."""

        raise NotImplementedError


class MonitorRepository(Protocol):
    def append(self, record: MonitorRecord) -> None:
        raise NotImplementedError

    def list_for_store(self, store_id: str) -> Sequence[MonitorRecord]:
        """Projection rows, newest first."""

        raise NotImplementedError

    def clear_all(self) -> int:
        raise NotImplementedError
