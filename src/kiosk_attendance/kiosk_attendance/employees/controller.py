from __future__ import annotations

from flask import Flask, request, session

from ..common.web import domain_error, fail, ok, store_required, unexpected_error
from ..container import Container
from ..core.constants import AREAS
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @store_required
    def list_employees():
        try:
            employees = container.employee_service.list(session["store_id"])
        except Exception:
            return unexpected_error("listing employees")
        return ok(employees=[e.to_dict() for e in employees], areas=list(AREAS))

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @store_required
    def add_employee():
        data = request.get_json(silent=True) or request.form
        try:
            employee = container.employee_service.register(
                store_id=session["store_id"],
                badge_code=str(data.get("badge_code", "")),
                name=str(data.get("name", "")),
                area=str(data.get("area", "")),
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return unexpected_error("registering an employee")
        return ok(f"{employee.name} ha sido agregado", 201, employee=employee.to_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @store_required
    def delete_employee(employee_id: int):
        try:
            container.employee_service.delete(store_id=session["store_id"], employee_id=employee_id)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return unexpected_error("deleting an employee")
        return ok("Empleado eliminado")

    @app.route("/api/employees/lookup", methods=["GET"], endpoint="lookup_employee")
    @store_required
    def lookup_employee():
        try:
            employee = container.employee_service.find_by_badge(session["store_id"], request.args.get("badge"))
        except Exception:
            return unexpected_error("looking up an employee")
        if not employee:
            return fail("Empleado no encontrado", 404)
        return ok(employee=employee.to_dict())
