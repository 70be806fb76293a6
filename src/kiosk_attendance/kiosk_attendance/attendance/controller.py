from __future__ import annotations

import json
import queue

from flask import Flask, Response, request, session

from ..common.web import admin_required, domain_error, fail, ok, store_required, unexpected_error
from ..container import Container
from ..core.constants import PERSONAL_ITEM_OPTIONS, TASK_CATEGORIES
from ..core.exceptions import DomainError


def _sse(event: str, payload: dict) -> str:
    return f"event: {event}\ndata: {json.dumps(payload, ensure_ascii=False)}\n\n"


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/options", methods=["GET"], endpoint="attendance_options")
    @store_required
    def attendance_options():
        return ok(personal_items=PERSONAL_ITEM_OPTIONS, tasks=TASK_CATEGORIES)

    @app.route("/api/attendance", methods=["POST"], endpoint="submit_attendance")
    @store_required
    def submit_attendance():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return fail("Solicitud no válida", 400)
        tasks = data.get("tasks") or []
        if isinstance(tasks, str):
            tasks = [tasks]

        try:
            event = container.attendance_service.submit(
                store_id=session["store_id"],
                store_name=session.get("store_name"),
                session_key=session["kiosk_session"],
                badge_code=str(data.get("badge_code", "")),
                kind=data.get("kind"),
                personal_items=data.get("personal_items"),
                tasks=tasks,
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return unexpected_error("registering attendance")

        if event is None:
            return fail("Ya hay un registro en proceso", 409, busy=True)
        return ok(f"{event.kind.value} registrada: {event.name} - {event.event_time}", 201, event=event.to_dict())

    @app.route("/api/attendance/events", methods=["GET"], endpoint="live_events")
    @store_required
    def live_events():
        try:
            events = container.attendance_service.list_live(session["store_id"])
        except Exception:
            return unexpected_error("listing attendance events")
        return ok(events=[e.to_dict() for e in events])

    @app.route("/api/attendance/status", methods=["GET"], endpoint="attendance_status")
    @store_required
    def attendance_status():
        try:
            statuses = container.attendance_service.current_statuses(session["store_id"])
        except Exception:
            return unexpected_error("deriving attendance status")
        return ok(statuses=[s.to_dict() for s in statuses])

    @app.route("/api/monitor", methods=["GET"], endpoint="monitor")
    @admin_required
    def monitor():
        store_id = session["store_id"]
        try:
            records = container.monitor_service.records(store_id)
            statuses = container.monitor_service.statuses(store_id)
        except Exception:
            return unexpected_error("loading the live monitor")
        return ok(statuses=[s.to_dict() for s in statuses], records=[r.to_dict() for r in records])

    @app.route("/api/monitor/stream", methods=["GET"], endpoint="monitor_stream")
    @admin_required
    def monitor_stream():
        """Server-Sent Events: a fresh status list after every change of this store's log."""

        store_id = session["store_id"]
        keepalive = float(app.config.get("SSE_KEEPALIVE_SECONDS", 15))

        def snapshot() -> dict:
            return {"statuses": [s.to_dict() for s in container.monitor_service.statuses(store_id)]}

        def generate():
            changes: "queue.Queue[str]" = queue.Queue()
            subscription = container.change_feed.subscribe(store_id, lambda _store, table: changes.put(table))
            try:
                yield _sse("statuses", snapshot())
                while True:
                    try:
                        changes.get(timeout=keepalive)
                    except queue.Empty:
                        yield ": keep-alive\n\n"
                        continue
                    yield _sse("statuses", snapshot())
            finally:
                subscription.unsubscribe()

        return Response(generate(), mimetype="text/event-stream", headers={"Cache-Control": "no-cache"})
