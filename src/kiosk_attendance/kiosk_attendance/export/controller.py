from __future__ import annotations

import io

from flask import Flask, send_file, session

from ..common.web import fail, store_required, unexpected_error
from ..container import Container
from .formatter import XLSX_MIMETYPE


def register(app: Flask, container: Container) -> None:
    @app.route("/api/export", methods=["POST"], endpoint="export_excel")
    @store_required
    def export_excel():
        try:
            artifact = container.export_service.export(session["store_id"])
        except Exception:
            return unexpected_error("exporting attendance")

        if artifact is None:
            return fail("No hay registros para exportar", 404)

        response = send_file(
            io.BytesIO(artifact.content),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=artifact.filename,
        )
        response.headers["X-Export-Rows"] = str(artifact.row_count)
        return response
