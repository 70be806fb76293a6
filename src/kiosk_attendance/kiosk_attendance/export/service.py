from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.repository import EventLogRepository
from ..common.datetime_utils import now_local
from ..sync.feed import EVENTS_TABLE, ChangeFeed
from .formatter import build_export_rows, export_filename, render_workbook

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    content: bytes
    row_count: int


class ExportService:
    """Use case: export a store's live events to a workbook, then drop them from the log."""

    def __init__(self, events: EventLogRepository, feed: ChangeFeed):
        self._events = events
        self._feed = feed

    def export(self, store_id: str, *, today: Optional[date] = None) -> Optional[ExportArtifact]:
        """Return None when there is nothing to export; no file is produced then."""
        events = list(self._events.list_live(store_id))
        if not events:
            return None

        rows = build_export_rows(events)
        content = render_workbook(rows)
        artifact = ExportArtifact(
            filename=export_filename(today or now_local().date()),
            content=content,
            row_count=len(rows),
        )

        event_ids = [e.event_id for e in events]
        self._events.mark_exported(store_id, event_ids)
        try:
            deleted = self._events.delete_by_ids(store_id, event_ids)
        except Exception:
            # Rows stay flagged exported; the daily cleanup purges them.
            logger.exception("Deleting %d exported events failed for store %s", len(event_ids), store_id)
        else:
            logger.info("Exported and removed %d events for store %s", deleted, store_id)

        self._feed.publish(store_id, EVENTS_TABLE)
        return artifact
