from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, store_id, badge_code, name, area, is_global, created_at"


def _row_to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=int(row["employee_id"]),
        store_id=str(row["store_id"]),
        badge_code=row["badge_code"],
        name=row["name"],
        area=row["area"],
        is_global=bool(row.get("is_global", False)),
        created_at=row.get("created_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, store_id: str, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE store_id=%s AND employee_id=%s",
                (store_id, int(employee_id)),
            )
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def get_by_badge(self, store_id: str, badge_code: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE store_id=%s AND badge_code=%s",
                (store_id, badge_code),
            )
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def list_for_store(self, store_id: str) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE store_id=%s ORDER BY name ASC",
                (store_id,),
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def create_employee(self, *, store_id: str, badge_code: str, name: str, area: str, is_global: bool) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(store_id, badge_code, name, area, is_global)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (store_id, badge_code, name, area, int(is_global)),
            )
            return int(cur.lastrowid)

    def delete_by_id(self, store_id: str, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM employees WHERE store_id=%s AND employee_id=%s",
                (store_id, int(employee_id)),
            )
            return cur.rowcount > 0
