from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.constants import AREAS, GLOBAL_AREAS, MIN_BADGE_LOOKUP_LENGTH
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..database.mysql_base import is_duplicate_key
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

DUPLICATE_BADGE = "Ya existe un empleado con esta cédula en la tienda"


class EmployeeService:
    """Use case: manage the employees of a store."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def register(self, *, store_id: str, badge_code: str, name: str, area: str) -> Employee:
        if not badge_code or not badge_code.strip() or not name or not name.strip() or not area:
            raise ValidationError("Complete todos los campos")

        badge_code = badge_code.strip()
        name = name.strip().upper()
        area = area.strip().upper()
        if area not in AREAS:
            raise ValidationError("Área no válida")

        if self._employees.get_by_badge(store_id, badge_code):
            raise ConflictError(DUPLICATE_BADGE)

        is_global = area in GLOBAL_AREAS
        try:
            employee_id = self._employees.create_employee(
                store_id=store_id,
                badge_code=badge_code,
                name=name,
                area=area,
                is_global=is_global,
            )
        except Exception as e:
            if is_duplicate_key(e):
                raise ConflictError(DUPLICATE_BADGE) from e
            raise

        logger.info("Employee %s registered in store %s", badge_code, store_id)
        return Employee(
            employee_id=employee_id,
            store_id=store_id,
            badge_code=badge_code,
            name=name,
            area=area,
            is_global=is_global,
        )

    def delete(self, *, store_id: str, employee_id: int) -> None:
        if not self._employees.get_by_id(store_id, employee_id):
            raise NotFoundError("Empleado no encontrado")
        if not self._employees.delete_by_id(store_id, employee_id):
            raise NotFoundError("No se pudo eliminar el empleado")

    def find_by_badge(self, store_id: str, badge_code: Optional[str]) -> Optional[Employee]:
        """Kiosk type-ahead lookup; too-short input never matches."""
        badge_code = (badge_code or "").strip()
        if len(badge_code) < MIN_BADGE_LOOKUP_LENGTH:
            return None
        return self._employees.get_by_badge(store_id, badge_code)

    def list(self, store_id: str) -> Sequence[Employee]:
        return self._employees.list_for_store(store_id)
