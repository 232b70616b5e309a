from utils.errors import ConflictError, FieldError, NotFoundError, UpstreamError, ValidationError
from utils.responses import failure, shape_response, success


def test_success_envelope_with_payload():
    assert success("Employee fetched", "employee", {"_id": "1"}) == {
        "success": True,
        "message": "Employee fetched",
        "employee": {"_id": "1"},
        "errors": [],
    }


def test_success_envelope_without_payload():
    assert success("Employee deleted") == {"success": True, "message": "Employee deleted", "errors": []}


def test_failure_envelope_for_lists_keeps_an_empty_list():
    envelope = failure("Validation failed", [FieldError("designation", "bad")], "employees")
    assert envelope["employees"] == []
    assert envelope["errors"] == [{"field": "designation", "message": "bad"}]


def test_failure_envelope_for_single_entity_is_null():
    assert failure("Employee not found", [], "employee")["employee"] is None


def test_conflict_error_names_the_field():
    err = ConflictError("email")
    assert err.message == "Duplicate value"
    assert err.errors == [FieldError("email", "email already exists")]


def test_decorator_shapes_every_outcome():
    @shape_response("employee", "Create employee failed")
    def operation(outcome):
        if outcome == "invalid":
            raise ValidationError([FieldError("salary", "salary must be >= 1000")])
        if outcome == "missing":
            raise NotFoundError([FieldError("eid", "No employee with this id")], message="Employee not found")
        if outcome == "upstream":
            raise UpstreamError("cloud is down", field="employee_photo")
        if outcome == "boom":
            raise RuntimeError("unexpected")
        return "Employee created", {"_id": "1"}

    assert operation("ok")["employee"] == {"_id": "1"}
    assert operation("invalid")["message"] == "Validation failed"
    assert operation("missing")["message"] == "Employee not found"

    upstream = operation("upstream")
    assert upstream["message"] == "Create employee failed"
    assert upstream["errors"] == [{"field": "employee_photo", "message": "cloud is down"}]

    boom = operation("boom")
    assert boom["success"] is False
    assert boom["message"] == "Create employee failed"
    assert boom["errors"] == [{"field": "server", "message": "unexpected"}]
