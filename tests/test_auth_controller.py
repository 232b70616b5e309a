from pymongo.errors import ServerSelectionTimeoutError

from controllers.auth_controller import login_user, signup_user
from models.users import User
from utils.db import MongoStore


def test_signup_returns_user_without_password(store, signup_input):
    result = signup_user(store, signup_input)

    assert result["success"] is True
    assert result["message"] == "Signup successful"
    assert result["user"]["username"] == "jdoe"
    assert result["user"]["email"] == "jdoe@company.com"
    assert "password" not in result["user"]


def test_signup_stores_a_hash_not_the_password(store, signup_input):
    signup_user(store, signup_input)
    stored = store.find_one("users", {"username": "jdoe"})
    assert stored["password"] != "secret123"
    assert User.check_password(stored, "secret123")


def test_signup_missing_fields_fails_validation(store):
    result = signup_user(store, {"username": "", "password": "secret123"})

    assert result["success"] is False
    assert result["message"] == "Validation failed"
    assert result["user"] is None
    assert {e["field"] for e in result["errors"]} == {"username", "email"}
    assert store.find("users") == []


def test_signup_whitespace_username_is_missing(store, signup_input):
    result = signup_user(store, dict(signup_input, username="   "))

    assert result["success"] is False
    assert result["message"] == "Validation failed"
    assert result["errors"] == [{"field": "username", "message": "username is required"}]
    assert store.find("users") == []


def test_signup_duplicate_username(store, signup_input):
    signup_user(store, signup_input)
    result = signup_user(store, dict(signup_input, email="other@company.com"))

    assert result["success"] is False
    assert result["message"] == "Duplicate value"
    assert result["errors"] == [{"field": "username", "message": "username already exists"}]


def test_signup_duplicate_email_ignores_case(store, signup_input):
    signup_user(store, signup_input)
    result = signup_user(store, dict(signup_input, username="other", email="jdoe@COMPANY.com"))

    assert result["message"] == "Duplicate value"
    assert result["errors"][0]["field"] == "email"


def test_signup_store_failure_is_reported_as_server_error(signup_input):
    class UnreachableStore(MongoStore):
        def collection(self, name):
            raise ServerSelectionTimeoutError("connection refused")

    result = signup_user(UnreachableStore(db=None), signup_input)

    assert result["success"] is False
    assert result["message"] == "Signup failed"
    assert result["errors"] == [{"field": "server", "message": "connection refused"}]


def test_login_by_username(store, signup_input):
    signup_user(store, signup_input)
    result = login_user(store, "jdoe", "secret123")

    assert result["success"] is True
    assert result["message"] == "Login successful"
    assert result["user"]["username"] == "jdoe"
    assert "password" not in result["user"]


def test_login_by_email_is_case_insensitive_and_trimmed(store, signup_input):
    signup_user(store, signup_input)
    assert login_user(store, "  JDOE@company.COM ", "secret123")["success"] is True


def test_login_unknown_user(store):
    result = login_user(store, "ghost", "secret123")

    assert result["success"] is False
    assert result["message"] == "User not found"
    assert result["errors"] == [{"field": "usernameOrEmail", "message": "Invalid username/email"}]


def test_login_wrong_password(store, signup_input):
    signup_user(store, signup_input)
    result = login_user(store, "jdoe", "wrong-password")

    assert result["success"] is False
    assert result["message"] == "Invalid password"
    assert result["errors"] == [{"field": "password", "message": "Invalid password"}]


def test_login_requires_both_fields(store):
    result = login_user(store, "", "")
    assert result["message"] == "Validation failed"
    assert len(result["errors"]) == 2


def test_set_password_rehashes(store, signup_input):
    user = signup_user(store, signup_input)["user"]

    updated = User.set_password(store, user["_id"], "brand-new-secret")

    assert "password" not in updated
    assert login_user(store, "jdoe", "secret123")["success"] is False
    assert login_user(store, "jdoe", "brand-new-secret")["success"] is True
