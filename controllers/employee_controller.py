import logging

from controllers.schema import mutation, query
from models.employee import Employee
from utils.errors import FieldError, NotFoundError, ValidationError
from utils.media import resolve_photo
from utils.responses import shape_response
from utils.validation import (
    EMPLOYEE_CREATE_RULES,
    EMPLOYEE_UPDATE_RULES,
    validate,
    validate_partial,
)

logger = logging.getLogger(__name__)


def employee_not_found():
    return NotFoundError(
        [FieldError("eid", "No employee with this id")],
        message="Employee not found",
    )


# -------------------------------------------------------------
# VIEW EMPLOYEES
# -------------------------------------------------------------
@shape_response("employees", "Fetch employees failed")
def list_employees(store):
    return "Employees fetched", Employee.all(store)


@shape_response("employee", "Fetch employee failed")
def get_employee(store, eid):
    employee = Employee.find_by_id(store, eid)
    if employee is None:
        raise employee_not_found()
    return "Employee fetched", employee


@shape_response("employees", "Search employees failed")
def search_employees(store, designation=None, department=None):
    designation = (designation or "").strip()
    department = (department or "").strip()

    if not designation and not department:
        raise ValidationError([
            FieldError("designation/department", "Provide designation or department")
        ])

    return "Employees fetched", Employee.search(store, designation, department)


# -------------------------------------------------------------
# ADD EMPLOYEE
# -------------------------------------------------------------
@shape_response("employee", "Create employee failed")
def add_employee(store, uploader, data):
    validate(data, EMPLOYEE_CREATE_RULES)

    photo_url = resolve_photo(data.get("employee_photo"), uploader)
    employee = Employee.from_input(data, employee_photo=photo_url).save(store)

    logger.info("Employee %s created", employee["_id"])
    return "Employee created", employee


# -------------------------------------------------------------
# UPDATE EMPLOYEE
# -------------------------------------------------------------
@shape_response("employee", "Update employee failed")
def update_employee(store, uploader, eid, data):
    validate_partial(data, EMPLOYEE_UPDATE_RULES)

    changes = dict(data)
    if data.get("employee_photo"):
        changes["employee_photo"] = resolve_photo(data["employee_photo"], uploader)

    employee = Employee.update(store, eid, changes)
    if employee is None:
        raise employee_not_found()

    logger.info("Employee %s updated", eid)
    return "Employee updated", employee


# -------------------------------------------------------------
# DELETE EMPLOYEE
# -------------------------------------------------------------
@shape_response(None, "Delete employee failed")
def delete_employee(store, eid):
    if Employee.delete(store, eid) is None:
        raise employee_not_found()

    logger.info("Employee %s deleted", eid)
    return "Employee deleted", None


@query.field("getAllEmployees")
def resolve_get_all_employees(_, info):
    return list_employees(info.context["store"])


@query.field("searchEmployeeByEid")
def resolve_search_employee_by_eid(_, info, eid):
    return get_employee(info.context["store"], eid)


@query.field("searchEmployeeByDesignationOrDepartment")
def resolve_search_by_designation_or_department(_, info, designation=None, department=None):
    return search_employees(info.context["store"], designation, department)


@mutation.field("addNewEmployee")
def resolve_add_new_employee(_, info, input):
    return add_employee(info.context["store"], info.context["uploader"], input)


@mutation.field("updateEmployeeByEid")
def resolve_update_employee_by_eid(_, info, eid, input):
    return update_employee(info.context["store"], info.context["uploader"], eid, input)


@mutation.field("deleteEmployeeByEid")
def resolve_delete_employee_by_eid(_, info, eid):
    return delete_employee(info.context["store"], eid)
