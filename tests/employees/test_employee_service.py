import pytest
from mysql.connector import errorcode
from mysql.connector import errors as mysql_errors

from kiosk_attendance.core.exceptions import ConflictError, NotFoundError, ValidationError
from kiosk_attendance.employees.service import EmployeeService

STORE = "store-1"


def test_register_uppercases_and_flags_global_areas(employees_repo):
    svc = EmployeeService(employees_repo)

    local = svc.register(store_id=STORE, badge_code=" 123 ", name="ana perez", area="BODEGA")
    shared = svc.register(store_id=STORE, badge_code="456", name="beto", area="sistemas")

    assert local.name == "ANA PEREZ"
    assert local.badge_code == "123"
    assert local.is_global is False
    assert shared.is_global is True


def test_duplicate_badge_in_same_store_is_conflict(employees_repo):
    svc = EmployeeService(employees_repo)
    svc.register(store_id=STORE, badge_code="123", name="Ana", area="BODEGA")

    with pytest.raises(ConflictError):
        svc.register(store_id=STORE, badge_code="123", name="Otra", area="BODEGA")

    # Same badge in another store is fine.
    svc.register(store_id="store-2", badge_code="123", name="Otra", area="BODEGA")


def test_unique_violation_from_database_is_translated(employees_repo):
    def dup(**kwargs):
        raise mysql_errors.IntegrityError(msg="Duplicate entry", errno=errorcode.ER_DUP_ENTRY)

    employees_repo.create_employee = dup

    with pytest.raises(ConflictError) as exc:
        EmployeeService(employees_repo).register(store_id=STORE, badge_code="123", name="Ana", area="BODEGA")

    assert "cédula" in str(exc.value)


@pytest.mark.parametrize("badge, name, area", [("", "Ana", "BODEGA"), ("1", " ", "BODEGA"), ("1", "Ana", "")])
def test_missing_fields(employees_repo, badge, name, area):
    with pytest.raises(ValidationError):
        EmployeeService(employees_repo).register(store_id=STORE, badge_code=badge, name=name, area=area)


def test_find_by_badge_needs_three_characters(employees_repo):
    svc = EmployeeService(employees_repo)
    svc.register(store_id=STORE, badge_code="12", name="Ana", area="BODEGA")
    svc.register(store_id=STORE, badge_code="123", name="Beto", area="BODEGA")

    assert svc.find_by_badge(STORE, "12") is None
    assert svc.find_by_badge(STORE, "123").name == "BETO"


def test_delete_and_list(employees_repo):
    svc = EmployeeService(employees_repo)
    zoe = svc.register(store_id=STORE, badge_code="900", name="Zoe", area="BODEGA")
    svc.register(store_id=STORE, badge_code="901", name="Ana", area="BODEGA")

    assert [e.name for e in svc.list(STORE)] == ["ANA", "ZOE"]

    svc.delete(store_id=STORE, employee_id=zoe.employee_id)
    assert [e.name for e in svc.list(STORE)] == ["ANA"]

    with pytest.raises(NotFoundError):
        svc.delete(store_id=STORE, employee_id=zoe.employee_id)
