from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Store
from .repository import StoreRepository


def _row_to_store(row: dict) -> Store:
    return Store(
        store_id=str(row["store_id"]),
        name=row["name"],
        login=row["login"],
        password_hash=row["password_hash"],
        created_at=row.get("created_at"),
    )


class MySQLStoreRepository(StoreRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_login(self, login: str) -> Optional[Store]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT store_id, name, login, password_hash, created_at FROM stores WHERE login=%s",
                (login,),
            )
            row = fetchone(cur)
            return _row_to_store(row) if row else None

    def create_store(self, *, store_id: str, name: str, login: str, password_hash: str) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO stores(store_id, name, login, password_hash)
                VALUES(%s,%s,%s,%s)
                """,
                (store_id, name, login, password_hash),
            )
            return store_id
