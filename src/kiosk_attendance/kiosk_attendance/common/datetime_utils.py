from __future__ import annotations

from datetime import datetime


def now_local() -> datetime:
    """Current local time truncated to seconds.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now().replace(microsecond=0)


def kiosk_date(value: datetime) -> str:
    """Calendar date as shown on the kiosk (dd/mm/YYYY)."""
    return value.strftime("%d/%m/%Y")


def kiosk_time(value: datetime) -> str:
    return value.strftime("%H:%M:%S")
