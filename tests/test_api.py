from __future__ import annotations

import io
import json

from openpyxl import load_workbook


def _add_employee(client, badge="1020304050", name="Ana Perez", area="BODEGA"):
    return client.post("/api/employees", json={"badge_code": badge, "name": name, "area": area})


def _unlock(client):
    return client.post("/api/admin/unlock", json={"secret": "test-admin"})


def test_requires_store_session(client):
    resp = client.get("/api/employees")

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_login_with_bad_credentials(client):
    client.post("/api/register", json={"store_name": "Bodega Norte", "password": "1234"})
    client.post("/api/logout")

    resp = client.post("/api/login", json={"store_name": "Bodega Norte", "password": "9999"})

    assert resp.status_code == 401
    assert "Credenciales inválidas" in resp.get_json()["message"]


def test_login_after_register(client):
    client.post("/api/register", json={"store_name": "Bodega Norte", "password": "1234"})
    client.post("/api/logout")

    resp = client.post("/api/login", json={"store_name": "bodega norte", "password": "1234"})

    assert resp.status_code == 200
    assert resp.get_json()["store"]["name"] == "BODEGA NORTE"


def test_register_validation_message(client):
    resp = client.post("/api/register", json={"store_name": "Bodega", "password": "12"})

    assert resp.status_code == 400
    assert "al menos 4" in resp.get_json()["message"]


def test_duplicate_employee_gets_friendly_conflict(store_client):
    assert _add_employee(store_client).status_code == 201

    resp = _add_employee(store_client, name="Otra")

    assert resp.status_code == 409
    assert resp.get_json()["message"] == "Ya existe un empleado con esta cédula en la tienda"


def test_lookup_employee(store_client):
    _add_employee(store_client)

    assert store_client.get("/api/employees/lookup?badge=10").status_code == 404
    resp = store_client.get("/api/employees/lookup?badge=1020304050")
    assert resp.get_json()["employee"]["name"] == "ANA PEREZ"


def test_entry_exit_flow(store_client):
    _add_employee(store_client)

    resp = store_client.post(
        "/api/attendance", json={"badge_code": "1020304050", "kind": "ENTRADA", "personal_items": "CELULAR"}
    )
    assert resp.status_code == 201

    dup = store_client.post("/api/attendance", json={"badge_code": "1020304050", "kind": "ENTRADA"})
    assert dup.status_code == 409
    assert dup.get_json()["reason"] == "DUPLICATE_ENTRY"

    status = store_client.get("/api/attendance/status").get_json()["statuses"]
    assert [s["state"] for s in status] == ["DENTRO"]

    out = store_client.post("/api/attendance", json={"badge_code": "1020304050", "kind": "SALIDA"})
    assert out.status_code == 201
    assert out.get_json()["event"]["personal_items"] == "CELULAR"

    events = store_client.get("/api/attendance/events").get_json()["events"]
    assert [e["kind"] for e in events] == ["SALIDA", "ENTRADA"]


def test_exit_without_entry_reason(store_client):
    _add_employee(store_client)

    resp = store_client.post("/api/attendance", json={"badge_code": "1020304050", "kind": "SALIDA"})

    assert resp.status_code == 409
    assert resp.get_json()["reason"] == "EXIT_WITHOUT_ENTRY"


def test_wrongly_typed_fields_get_validation_message(store_client):
    _add_employee(store_client)
    bad_payloads = [
        {"badge_code": "1020304050", "kind": 1},
        {"badge_code": "1020304050", "kind": "ENTRADA", "personal_items": ["CELULAR"]},
        {"badge_code": "1020304050", "kind": "ENTRADA", "tasks": 5},
    ]

    for payload in bad_payloads:
        resp = store_client.post("/api/attendance", json=payload)
        assert resp.status_code == 400, payload
        assert resp.get_json()["success"] is False

    assert store_client.post("/api/attendance", json=["ENTRADA"]).status_code == 400
    assert store_client.get("/api/attendance/events").get_json()["events"] == []


def test_busy_session_is_refused(store_client, container):
    _add_employee(store_client)
    with store_client.session_transaction() as sess:
        kiosk_session = sess["kiosk_session"]
    container.attendance_service._latch.acquire(kiosk_session)

    resp = store_client.post("/api/attendance", json={"badge_code": "1020304050", "kind": "ENTRADA"})

    assert resp.status_code == 409
    assert resp.get_json()["busy"] is True
    assert store_client.get("/api/attendance/events").get_json()["events"] == []


def test_backend_failure_is_generic_500(store_client, events_repo):
    _add_employee(store_client)

    def boom(event):
        raise RuntimeError("db down")

    events_repo.append = boom

    resp = store_client.post("/api/attendance", json={"badge_code": "1020304050", "kind": "ENTRADA"})

    assert resp.status_code == 500
    assert resp.get_json()["success"] is False
    # The kiosk stays usable afterwards.
    assert store_client.get("/api/attendance/status").status_code == 200


def test_export_downloads_then_reports_nothing(store_client):
    _add_employee(store_client)
    store_client.post("/api/attendance", json={"badge_code": "1020304050", "kind": "ENTRADA"})

    resp = store_client.post("/api/export")

    assert resp.status_code == 200
    assert "registros_" in resp.headers["Content-Disposition"]
    assert resp.headers["X-Export-Rows"] == "1"
    wb = load_workbook(io.BytesIO(resp.data))
    assert wb.sheetnames == ["Registros"]
    assert store_client.get("/api/attendance/events").get_json()["events"] == []

    again = store_client.post("/api/export")
    assert again.status_code == 404
    assert again.get_json()["message"] == "No hay registros para exportar"


def test_monitor_requires_admin_gate(store_client):
    assert store_client.get("/api/monitor").status_code == 403
    assert store_client.post("/api/admin/unlock", json={"secret": "nope"}).status_code == 403
    assert _unlock(store_client).status_code == 200
    assert store_client.get("/api/monitor").status_code == 200


def test_monitor_keeps_history_after_export(store_client):
    _add_employee(store_client)
    store_client.post("/api/attendance", json={"badge_code": "1020304050", "kind": "ENTRADA"})
    store_client.post("/api/export")
    _unlock(store_client)

    body = store_client.get("/api/monitor").get_json()

    assert [s["state"] for s in body["statuses"]] == ["DENTRO"]
    assert body["records"][0]["store_name"] == "BODEGA NORTE"


def test_monitor_stream_pushes_on_change(store_client, container):
    _add_employee(store_client)
    _unlock(store_client)
    with store_client.session_transaction() as sess:
        store_id = sess["store_id"]

    resp = store_client.get("/api/monitor/stream")
    assert resp.mimetype == "text/event-stream"
    chunks = iter(resp.response)

    first = next(chunks)
    assert json.loads(first.decode().split("data: ", 1)[1])["statuses"] == []
    assert container.change_feed.subscriber_count(store_id) == 1

    store_client.post("/api/attendance", json={"badge_code": "1020304050", "kind": "ENTRADA"})
    update = next(chunks).decode()
    while update.startswith(":"):
        update = next(chunks).decode()
    assert json.loads(update.split("data: ", 1)[1])["statuses"][0]["state"] == "DENTRO"

    resp.close()
    assert container.change_feed.subscriber_count(store_id) == 0


def test_cleanup_endpoint_requires_token(client, monitor_repo):
    assert client.post("/api/cleanup").status_code == 403

    resp = client.post("/api/cleanup", headers={"X-Cleanup-Token": "test-cleanup"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["message"] == "Daily cleanup completed"
    assert "timestamp" in body
