from __future__ import annotations

import hmac
import logging

from flask import Flask, request

from ..common.web import fail, ok
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/cleanup", methods=["POST"], endpoint="daily_cleanup")
    def daily_cleanup():
        """Scheduler hook for the daily sweep, guarded by a shared token header."""

        expected = str(app.config.get("CLEANUP_TOKEN") or "")
        token = request.headers.get("X-Cleanup-Token", "")
        if not expected or not hmac.compare_digest(token.encode(), expected.encode()):
            return fail("Token de limpieza inválido", 403)

        try:
            report = container.cleanup_service.run()
        except Exception as e:
            logger.exception("Cleanup error")
            return fail("Cleanup failed", 500, error=str(e))
        return ok("Daily cleanup completed", **report.to_dict())
