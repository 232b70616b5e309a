"""
utils/validation.py
-----------------
Declarative validation tables.

Each table maps a field name to an ordered list of (predicate, message)
pairs. Every pair is evaluated against the raw input and every failure
is collected, so a missing email reports both "is required" and
"must be valid".
"""

from email_validator import EmailNotValidError, validate_email

from utils.datetime_utils import parse_date
from utils.errors import FieldError, ValidationError

GENDERS = ("Male", "Female", "Other")
MIN_SALARY = 1000
MIN_PASSWORD_LENGTH = 6


# -------------------------------------------------------------
# PREDICATES
# -------------------------------------------------------------
def _as_text(value):
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def not_empty(value):
    return _as_text(value).strip() != ""


def is_email(value):
    try:
        validate_email(_as_text(value), check_deliverability=False, test_environment=True)
    except EmailNotValidError:
        return False
    return True


def min_length(length):
    def predicate(value):
        return len(_as_text(value)) >= length
    return predicate


def is_float(minimum=None):
    def predicate(value):
        if isinstance(value, bool) or value is None:
            return False
        try:
            number = float(value)
        except (TypeError, ValueError):
            return False
        return minimum is None or number >= minimum
    return predicate


def is_in(options):
    def predicate(value):
        return _as_text(value) in options
    return predicate


def is_date(value):
    try:
        parse_date(value)
    except (TypeError, ValueError):
        return False
    return True


# -------------------------------------------------------------
# RULE TABLES
# -------------------------------------------------------------
SIGNUP_RULES = {
    "username": [(not_empty, "username is required")],
    "email": [
        (not_empty, "email is required"),
        (is_email, "email must be valid"),
    ],
    "password": [
        (not_empty, "password is required"),
        (min_length(MIN_PASSWORD_LENGTH), f"password must be at least {MIN_PASSWORD_LENGTH} characters"),
    ],
}

LOGIN_RULES = {
    "usernameOrEmail": [(not_empty, "usernameOrEmail is required")],
    "password": [(not_empty, "password is required")],
}

EMPLOYEE_CREATE_RULES = {
    "first_name": [(not_empty, "first_name is required")],
    "last_name": [(not_empty, "last_name is required")],
    "email": [
        (not_empty, "email is required"),
        (is_email, "email must be valid"),
    ],
    "gender": [
        (not_empty, "gender is required"),
        (is_in(GENDERS), "gender must be Male/Female/Other"),
    ],
    "designation": [(not_empty, "designation is required")],
    "salary": [
        (not_empty, "salary is required"),
        (is_float(minimum=MIN_SALARY), f"salary must be >= {MIN_SALARY}"),
    ],
    "date_of_joining": [
        (not_empty, "date_of_joining is required"),
        (is_date, "date_of_joining must be a valid date"),
    ],
    "department": [(not_empty, "department is required")],
}

# Updates only check gender and salary, and only when they are not null.
EMPLOYEE_UPDATE_RULES = {
    "gender": [(is_in(GENDERS), "gender must be Male/Female/Other")],
    "salary": [(is_float(minimum=MIN_SALARY), f"salary must be >= {MIN_SALARY}")],
}


# -------------------------------------------------------------
# EVALUATION
# -------------------------------------------------------------
def check(data, rules):
    """Return every FieldError produced by running `rules` over `data`."""
    data = data or {}
    errors = []
    for field, field_rules in rules.items():
        value = data.get(field)
        for predicate, message in field_rules:
            if not predicate(value):
                errors.append(FieldError(field, message))
    return errors


def check_partial(data, rules):
    """Like check(), but only for fields actually supplied in `data`."""
    supplied = {
        k: v for k, v in (data or {}).items()
        if k in rules and v is not None
    }
    return check(supplied, {k: rules[k] for k in supplied})


def validate(data, rules):
    errors = check(data, rules)
    if errors:
        raise ValidationError(errors)


def validate_partial(data, rules):
    errors = check_partial(data, rules)
    if errors:
        raise ValidationError(errors)
