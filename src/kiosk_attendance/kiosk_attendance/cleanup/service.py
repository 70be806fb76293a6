from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..attendance.repository import EventLogRepository, MonitorRepository
from ..common.datetime_utils import now_local
from ..sync.feed import EVENTS_TABLE, MONITOR_TABLE, ChangeFeed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CleanupReport:
    monitor_cleared: int
    exported_purged: int
    finished_at: datetime

    def to_dict(self) -> dict:
        return {
            "monitor_cleared": self.monitor_cleared,
            "exported_purged": self.exported_purged,
            "timestamp": self.finished_at.isoformat(),
        }


class CleanupService:
    """Daily sweep: empty the monitor projection, purge exported primary events.

    Runs independently of client exports, for every store at once.
    """

    def __init__(self, events: EventLogRepository, monitor: MonitorRepository, feed: ChangeFeed):
        self._events = events
        self._monitor = monitor
        self._feed = feed

    def run(self, *, now: Optional[datetime] = None) -> CleanupReport:
        logger.info("Starting cleanup of monitor records...")
        cleared = self._monitor.clear_all()
        logger.info("Deleted %d monitor records", cleared)

        purged = 0
        try:
            purged = self._events.purge_exported()
        except Exception:
            logger.exception("Deleting exported attendance events failed")

        self._feed.publish_all(MONITOR_TABLE)
        self._feed.publish_all(EVENTS_TABLE)

        report = CleanupReport(monitor_cleared=cleared, exported_purged=purged, finished_at=now or now_local())
        logger.info("Cleanup completed at %s", report.finished_at.isoformat())
        return report
