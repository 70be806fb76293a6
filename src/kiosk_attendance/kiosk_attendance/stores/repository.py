from __future__ import annotations

from typing import Optional, Protocol

from .model import Store


class StoreRepository(Protocol):
    def get_by_login(self, login: str) -> Optional[Store]:
        raise NotImplementedError

    def create_store(self, *, store_id: str, name: str, login: str, password_hash: str) -> str:
        raise NotImplementedError
