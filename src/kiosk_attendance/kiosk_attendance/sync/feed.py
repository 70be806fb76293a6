"""In-process change notifications, scoped by store.

Consumers subscribe for the lifetime of a view (an open monitor stream, say) and
unsubscribe when it goes away; publishers call `publish` after every write.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

Listener = Callable[[str, str], None]

EVENTS_TABLE = "attendance_events"
MONITOR_TABLE = "monitor_records"


@dataclass(frozen=True)
class Subscription:
    feed: "ChangeFeed"
    store_id: str
    listener: Listener

    def unsubscribe(self) -> None:
        self.feed.unsubscribe(self)


class ChangeFeed:
    def __init__(self):
        self._lock = threading.Lock()
        self._listeners: Dict[str, List[Listener]] = {}

    def subscribe(self, store_id: str, listener: Listener) -> Subscription:
        with self._lock:
            self._listeners.setdefault(store_id, []).append(listener)
        return Subscription(feed=self, store_id=store_id, listener=listener)

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            listeners = self._listeners.get(subscription.store_id, [])
            if subscription.listener in listeners:
                listeners.remove(subscription.listener)
            if not listeners:
                self._listeners.pop(subscription.store_id, None)

    def subscriber_count(self, store_id: str) -> int:
        with self._lock:
            return len(self._listeners.get(store_id, []))

    def publish(self, store_id: str, table: str) -> None:
        with self._lock:
            listeners = list(self._listeners.get(store_id, []))

        for listener in listeners:
            try:
                listener(store_id, table)
            except Exception:
                logger.exception("Change listener failed for store %s (%s)", store_id, table)

    def publish_all(self, table: str) -> None:
        """Notify every subscribed store (cleanup sweeps touch all of them)."""
        with self._lock:
            store_ids = list(self._listeners)
        for store_id in store_ids:
            self.publish(store_id, table)
