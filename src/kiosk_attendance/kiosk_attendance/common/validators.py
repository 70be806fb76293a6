from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} es obligatorio")
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} debe tener al menos {min_len} caracteres")
    return value


def optional_upper(value: Optional[str], field_name: str = "El valor") -> Optional[str]:
    """Blank -> None, otherwise stripped and upper-cased."""
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} no es válido")
    if value is None or not value.strip():
        return None
    return value.strip().upper()
