from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Store:
    """Tenant boundary: every employee and event belongs to exactly one store."""

    store_id: str
    name: str
    login: str
    password_hash: str
    created_at: Optional[datetime] = None
