from __future__ import annotations

import hmac
import uuid

from flask import Flask, request, session

from ..common.web import domain_error, fail, ok, store_required, unexpected_error
from ..container import Container
from ..core.exceptions import DomainError
from .service import SessionStore


def register(app: Flask, container: Container) -> None:
    def _start_session(s_store: SessionStore) -> None:
        session.clear()
        session["store_id"] = s_store.store_id
        session["store_name"] = s_store.name
        # Key of the per-session submission latch.
        session["kiosk_session"] = uuid.uuid4().hex

    def _credentials() -> tuple[str, str]:
        data = request.get_json(silent=True) or request.form
        return str(data.get("store_name", "")), str(data.get("password", ""))

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        name, password = _credentials()
        try:
            s_store = container.store_auth_service.authenticate(name, password)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return unexpected_error("logging in")

        _start_session(s_store)
        return ok(f"Acceso concedido a {s_store.name}", store={"id": s_store.store_id, "name": s_store.name})

    @app.route("/api/register", methods=["POST"], endpoint="register_store")
    def register_store():
        name, password = _credentials()
        try:
            s_store = container.store_auth_service.register(name, password)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return unexpected_error("registering a store")

        _start_session(s_store)
        return ok(
            f"{s_store.name} ha sido creada exitosamente",
            201,
            store={"id": s_store.store_id, "name": s_store.name},
        )

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok("Sesión cerrada")

    @app.route("/api/admin/unlock", methods=["POST"], endpoint="admin_unlock")
    @store_required
    def admin_unlock():
        data = request.get_json(silent=True) or request.form
        secret = str(data.get("secret", ""))
        expected = str(app.config.get("ADMIN_SECRET", ""))
        if not expected or not hmac.compare_digest(secret.encode(), expected.encode()):
            return fail("Clave de administrador incorrecta", 403)
        session["admin"] = True
        return ok("Monitor habilitado")

    @app.route("/api/admin/lock", methods=["POST"], endpoint="admin_lock")
    @store_required
    def admin_lock():
        session.pop("admin", None)
        return ok("Monitor bloqueado")
