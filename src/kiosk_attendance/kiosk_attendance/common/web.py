"""Shared helpers for the Flask controllers."""

from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, session

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    GuardRejection,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Error del sistema, intente nuevamente"

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (GuardRejection, 409),
)


def ok(message: str = "", status: int = 200, **payload):
    return jsonify({"success": True, "message": message, **payload}), status


def fail(message: str, status: int, **payload):
    return jsonify({"success": False, "message": message, **payload}), status


def domain_error(e: DomainError):
    """Map a business rule violation to its JSON answer."""
    status = next((code for cls, code in _STATUS_BY_ERROR if isinstance(e, cls)), 400)
    extra = {"reason": e.reason.value} if isinstance(e, GuardRejection) else {}
    return fail(str(e), status, **extra)


def unexpected_error(action: str):
    logger.exception("Unexpected error while %s", action)
    return fail(GENERIC_FAILURE, 500)


def store_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "store_id" not in session:
            return fail("Inicie sesión para continuar", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    """UI gate for the live monitor, not a security boundary."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "store_id" not in session:
            return fail("Inicie sesión para continuar", 401)
        if not session.get("admin"):
            return fail("Acceso de administrador requerido", 403)
        return view(*args, **kwargs)

    return wrapper
