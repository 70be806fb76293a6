from __future__ import annotations

import logging
import re
import uuid
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import LOGIN_DOMAIN, MIN_PASSWORD_LENGTH, PADDED_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError, ConflictError, ValidationError
from ..database.mysql_base import is_duplicate_key
from .repository import StoreRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Credenciales inválidas. Verifique el nombre de tienda y contraseña."
ALREADY_REGISTERED = "Esta tienda ya está registrada. Intente iniciar sesión."


@dataclass(frozen=True)
class SessionStore:
    """What we store into Flask session after login."""

    store_id: str
    name: str


def derive_login(store_name: str) -> str:
    """Login handle for a store name, e.g. "Bodega Norte" -> "bodega_norte@bodega.local"."""
    handle = re.sub(r"\s+", "_", store_name.strip().lower())
    return f"{handle}@{LOGIN_DOMAIN}"


def pad_password(password: str) -> str:
    """Upper-case and stretch short passwords to the backend minimum length.

    Kiosk passwords may be as short as 4 characters; the credential store needs 6,
    so short ones are repeated and cut ("abcd" -> "ABCDAB").
    """

    upper = password.upper()
    if len(upper) >= PADDED_PASSWORD_LENGTH:
        return upper
    return (upper + upper)[:PADDED_PASSWORD_LENGTH]


class StoreAuthService:
    """Use case: register a store and authenticate it (login)."""

    def __init__(self, stores: StoreRepository):
        self._stores = stores

    def _validate(self, name: str, password: str) -> str:
        if not name or not name.strip() or not password or not password.strip():
            raise ValidationError("Por favor ingrese todos los campos")
        name = require_non_empty(name, "Nombre de tienda")
        require_min_length(password, "La contraseña", MIN_PASSWORD_LENGTH)
        return name

    def register(self, name: str, password: str) -> SessionStore:
        name = self._validate(name, password)
        login = derive_login(name)

        if self._stores.get_by_login(login):
            raise ConflictError(ALREADY_REGISTERED)

        store_id = str(uuid.uuid4())
        try:
            self._stores.create_store(
                store_id=store_id,
                name=name.upper(),
                login=login,
                password_hash=generate_password_hash(pad_password(password)),
            )
        except Exception as e:
            if is_duplicate_key(e):
                raise ConflictError("Ya existe una tienda con este nombre.") from e
            raise

        logger.info("Store registered: %s (%s)", name.upper(), store_id)
        return SessionStore(store_id=store_id, name=name.upper())

    def authenticate(self, name: str, password: str) -> SessionStore:
        name = self._validate(name, password)
        store = self._stores.get_by_login(derive_login(name))
        if not store:
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(store.password_hash, pad_password(password))
        except Exception:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError(INVALID_CREDENTIALS)

        return SessionStore(store_id=store.store_id, name=store.name)
