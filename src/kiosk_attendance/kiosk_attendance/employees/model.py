from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee registered at a store.

    Note: Created by registration and deleted explicitly, never updated.
    """

    employee_id: int
    store_id: str
    badge_code: str
    name: str
    area: str
    is_global: bool = False
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "badge_code": self.badge_code,
            "name": self.name,
            "area": self.area,
            "is_global": self.is_global,
        }
