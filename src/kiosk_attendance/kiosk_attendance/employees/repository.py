from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Employee repository interface.

    Note: every method is scoped by store; services never see other stores' rows.
    """

    def get_by_id(self, store_id: str, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_badge(self, store_id: str, badge_code: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_for_store(self, store_id: str) -> Sequence[Employee]:
        raise NotImplementedError

    def create_employee(self, *, store_id: str, badge_code: str, name: str, area: str, is_global: bool) -> int:
        raise NotImplementedError

    def delete_by_id(self, store_id: str, employee_id: int) -> bool:
        raise NotImplementedError
